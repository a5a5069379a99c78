from .board import Board
from .dictionary import Dictionary, WordList
from .move_validator import MoveValidationResult, MoveValidator
from .scoring import ScoreCalculator, get_highest_scoring_option
from .tiles import TileBag, create_tile_bag
from .types import (
    BlockerTile,
    Direction,
    PlacedTile,
    PremiumField,
    ScoreBreakdown,
    Square,
    Tile,
    WordCategory,
    WordScore,
    WordValidationResult,
)
from .word_validator import WordValidator

__all__ = [
    "BlockerTile",
    "Board",
    "Dictionary",
    "Direction",
    "MoveValidationResult",
    "MoveValidator",
    "PlacedTile",
    "PremiumField",
    "ScoreBreakdown",
    "ScoreCalculator",
    "Square",
    "Tile",
    "TileBag",
    "WordCategory",
    "WordList",
    "WordScore",
    "WordValidationResult",
    "WordValidator",
    "create_tile_bag",
    "get_highest_scoring_option",
]
