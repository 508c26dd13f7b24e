from __future__ import annotations

import pytest

from memory_match import cards


def test_preset_sets_are_nested() -> None:
    assert [card.id for card in cards.EASY_CARD_SET] == [1, 2, 3, 4]
    assert cards.MEDIUM_CARD_SET[:4] == cards.EASY_CARD_SET
    assert cards.HARD_CARD_SET[:8] == cards.MEDIUM_CARD_SET
    assert len(cards.HARD_CARD_SET) == 12


def test_image_paths_follow_card_ids() -> None:
    assert cards.HARD_CARD_SET[9].image_path == "card_images/10.png"


@pytest.mark.parametrize(
    ("difficulty", "expected"),
    [
        ("easy", 4),
        (cards.Difficulty.MEDIUM, 8),
        ("hard", 12),
    ],
)
def test_card_set_for_difficulty(difficulty: str, expected: int) -> None:
    assert len(cards.card_set_for(difficulty)) == expected


def test_card_set_for_unknown_difficulty() -> None:
    with pytest.raises(ValueError, match="unknown difficulty"):
        cards.card_set_for("impossible")


def test_validate_card_set_accepts_presets() -> None:
    for card_set in cards.CARD_SETS.values():
        cards.validate_card_set(card_set)


def test_validate_card_set_rejects_duplicates() -> None:
    card_set = cards.build_card_set([1, 2, 2])

    with pytest.raises(ValueError, match="duplicate"):
        cards.validate_card_set(card_set)
