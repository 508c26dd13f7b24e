"""Card definitions and the preset card sets for memory-match."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final, Iterable, Mapping, Sequence

IMAGE_ROOT: Final[str] = "card_images"


class Difficulty(str, Enum):
    """Named board sizes shipped with the game."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


@dataclass(frozen=True, slots=True)
class Card:
    """Logical card face. Both copies of a pair share the same ``id``."""

    id: int
    image_path: str

    def label(self) -> str:
        """Return a short label suitable for terminal representations."""

        return f"{self.id:>2}"


def image_path_for(card_id: int) -> str:
    """Return the asset reference used for ``card_id``."""

    return f"{IMAGE_ROOT}/{card_id}.png"


def build_card_set(card_ids: Iterable[int]) -> tuple[Card, ...]:
    """Create a card set with one card per identifier."""

    return tuple(Card(id=card_id, image_path=image_path_for(card_id)) for card_id in card_ids)


EASY_CARD_SET: Final[tuple[Card, ...]] = build_card_set(range(1, 5))
MEDIUM_CARD_SET: Final[tuple[Card, ...]] = EASY_CARD_SET + build_card_set(range(5, 9))
HARD_CARD_SET: Final[tuple[Card, ...]] = MEDIUM_CARD_SET + build_card_set(range(9, 13))

CARD_SETS: Final[Mapping[Difficulty, tuple[Card, ...]]] = {
    Difficulty.EASY: EASY_CARD_SET,
    Difficulty.MEDIUM: MEDIUM_CARD_SET,
    Difficulty.HARD: HARD_CARD_SET,
}


def card_set_for(difficulty: Difficulty | str) -> tuple[Card, ...]:
    """Return the preset card set registered for ``difficulty``."""

    try:
        return CARD_SETS[Difficulty(difficulty)]
    except ValueError:
        raise ValueError(f"unknown difficulty '{difficulty}'") from None


def validate_card_set(card_set: Sequence[Card]) -> None:
    """Raise ``ValueError`` unless ``card_set`` can be dealt onto a board."""

    if not card_set:
        raise ValueError("card set must contain at least one card")
    seen: set[int] = set()
    for card in card_set:
        if card.id <= 0:
            raise ValueError(f"card id must be positive, got {card.id}")
        if card.id in seen:
            raise ValueError(f"duplicate card id {card.id} in card set")
        seen.add(card.id)
