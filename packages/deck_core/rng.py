import random
from dataclasses import dataclass

from .config import get_settings


@dataclass(frozen=True)
class RNG:
    """Seedable factory for the generator ``shuffle`` draws from."""

    seed: int | None = None

    def create(self) -> random.Random:
        # seed=None 时由系统熵初始化
        return random.Random(self.seed)

    @classmethod
    def from_env(cls) -> "RNG":
        return cls(seed=get_settings().seed)
