from collections import Counter

from deck_core.cards import DECK_SIZE, SUITS, VALUES, contains, create_deck, format_card


def test_create_deck_has_every_combination_once():
    deck = create_deck()
    assert len(deck) == DECK_SIZE == 20
    counts = Counter(deck)
    for suit in SUITS:
        for value in VALUES:
            assert counts[f"{value} of {suit}"] == 1


def test_create_deck_is_suit_major():
    deck = create_deck()
    assert deck[:5] == [
        "Ace of Spades",
        "Two of Spades",
        "Three of Spades",
        "Four of Spades",
        "Five of Spades",
    ]
    assert deck[5] == "Ace of Clubs"
    assert deck[10] == "Ace of Hearts"
    assert deck[-1] == "Five of Diamonds"


def test_create_deck_returns_fresh_list():
    d1 = create_deck()
    d1.pop()
    assert len(create_deck()) == 20
    assert create_deck() == create_deck()


def test_format_card():
    assert format_card("Three", "Clubs") == "Three of Clubs"


def test_contains():
    deck = create_deck()
    assert contains(deck, "Four of Hearts")
    assert not contains(deck, "Six of Clubs")
    # 精确匹配，不做大小写归一
    assert not contains(deck, "four of hearts")
    assert not contains([], "Ace of Spades")
