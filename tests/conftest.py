# tests/conftest.py
import sys
from pathlib import Path

# 项目根目录：tests/ 的上一级
ROOT = Path(__file__).resolve().parents[1]
PACKAGES_DIR = ROOT / "packages"

# 未安装时也能直接 import deck_core
sys.path.insert(0, str(PACKAGES_DIR))
