
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum, auto


class Direction(Enum):
    """Smer kladenia slova na doske."""
    HORIZONTAL = auto()
    VERTICAL = auto()

    @property
    def delta(self) -> tuple[int, int]:
        """Krok (dr, dc) pozdlz osi smeru."""
        return (0, 1) if self is Direction.HORIZONTAL else (1, 0)

    @property
    def perpendicular(self) -> Direction:
        return Direction.VERTICAL if self is Direction.HORIZONTAL else Direction.HORIZONTAL


class PremiumField(Enum):
    """Premiove polia na doske 17x17."""
    DOUBLE_LETTER = auto()     # zlte, 2x hodnota pismena
    TRIPLE_LETTER = auto()     # zelene, 3x hodnota pismena
    QUADRUPLE_LETTER = auto()  # cervene, 4x hodnota pismena
    WORD_MULTIPLIER = auto()   # modre s "X", 2x cele slovo
    CENTER = auto()            # startove pole, bez nasobku


class WordCategory(str, Enum):
    """Slovny druh zo slovnika."""
    NOUN = "NOUN"
    VERB = "VERB"
    ADJECTIVE = "ADJECTIVE"
    PRONOUN = "PRONOUN"
    NUMBER = "NUMBER"


@dataclass(frozen=True)
class Tile:
    """Jedna kocka z tasky.

    Hodnota nejokerovej kocky je dana pismenom; joker ma vzdy 0 bodov,
    aj ked mu hrac pri polozeni zvoli pismeno (`joker_letter`).
    """
    id: str
    letter: str          # 'A'..'Ž', 'DŽ'/'LJ'/'NJ'; prazdne pre jokera
    value: int
    is_joker: bool = False
    joker_letter: str | None = None

    @property
    def text(self) -> str:
        """Pismeno, ktore kocka reprezentuje v slove."""
        if self.is_joker:
            return self.joker_letter or ""
        return self.letter

    def with_joker_letter(self, letter: str | None) -> Tile:
        """Vrati kopiu jokera so zvolenym pismenom (None = zrus volbu)."""
        if not self.is_joker:
            raise ValueError(f"Kocka {self.id} nie je joker")
        return replace(self, joker_letter=letter.upper() if letter else None)


@dataclass(frozen=True)
class BlockerTile:
    """Cierna blokovacia kocka; nepatri do ziadneho slova."""
    id: str


Occupant = Tile | BlockerTile


@dataclass
class Square:
    """Pole na doske."""
    row: int
    col: int
    tile: Occupant | None = None
    premium_field: PremiumField | None = None
    is_used: bool = False  # premia sa uplatni len pri prvom zakryti

    @property
    def letter_tile(self) -> Tile | None:
        """Kocka s pismenom (blokator a prazdne pole vracaju None)."""
        return self.tile if isinstance(self.tile, Tile) else None

    @property
    def has_blocker(self) -> bool:
        return isinstance(self.tile, BlockerTile)

    def snapshot(self) -> Square:
        """Nezavisla kopia pola (na hodnotenie bez zdielania stavu dosky)."""
        return replace(self)


@dataclass(frozen=True)
class PlacedTile:
    """Kocka polozena v tomto tahu na suradnicu (row, col)."""
    tile: Tile
    row: int
    col: int

    @property
    def position(self) -> tuple[int, int]:
        return (self.row, self.col)


@dataclass(frozen=True)
class WordValidationResult:
    """Vysledok overenia jedneho slova."""
    is_valid: bool
    word: str
    category: WordCategory | None = None
    reason: str | None = None


@dataclass(frozen=True)
class WordScore:
    """Detailne skore jedneho slova."""
    word: str
    base_score: int
    letter_bonus: int
    word_multiplier: int
    final_score: int
    length: int = 0


@dataclass(frozen=True)
class ScoreBreakdown:
    """Skore celeho tahu vratane bonusov."""
    total_score: int
    word_scores: tuple[WordScore, ...] = field(default_factory=tuple)
    all_tiles_bonus: int = 0
    long_word_bonus: int = 0
