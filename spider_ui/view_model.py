from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CardView:
    id: int
    suit: str
    rank: str
    color: str
    face_up: bool
    selected: bool


@dataclass(frozen=True)
class StackView:
    cards: tuple[CardView, ...]


@dataclass(frozen=True)
class GameViewModel:
    difficulty: int
    stock_count: int
    deals_left: int
    foundations: int
    moves: int
    score: int
    game_ended: bool
    stacks: tuple[StackView, ...]


@dataclass(frozen=True)
class EventHighlight:
    """Columns to outline after an event, and an optional line for the status bar."""
    stacks: tuple[int, ...]
    text: Optional[str] = None
