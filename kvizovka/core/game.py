from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Sequence

from ..config import strict_dictionary
from ..logging_setup import TRACE_ID_VAR
from .board import Board
from .dictionary import Dictionary
from .distribution import TILES_PER_PLAYER
from .move_validator import MoveValidationResult, MoveValidator
from .rack import assign_joker_letter, consume_rack, missing_from_rack, refill_rack
from .rules import CHALLENGE_PENALTY_MS, DEFAULT_TIME_LIMIT_MS
from .scoring import ScoreCalculator
from .tiles import TileBag, create_tile_bag
from .types import PlacedTile, ScoreBreakdown, Tile
from .word_validator import WordValidator

log = logging.getLogger("kvizovka.game")


class GameStatus(Enum):
    IN_PROGRESS = auto()
    COMPLETED = auto()


class MoveType(Enum):
    PLACE_TILES = auto()
    SKIP = auto()
    EXCHANGE = auto()


class GameEndReason(Enum):
    """Dôvod ukončenia partie."""

    BAG_EMPTY_AND_PLAYER_OUT = auto()
    ALL_PLAYERS_SKIPPED_TWICE = auto()
    ENDED_BY_PLAYER = auto()


@dataclass
class PlayerState:
    """Stav hráča počas partie (bez UI a bez hodín)."""

    id: str
    name: str
    tiles: list[Tile] = field(default_factory=list)
    score: int = 0
    rounds_played: int = 0
    time_remaining_ms: float = DEFAULT_TIME_LIMIT_MS
    time_penalties: int = 0
    skip_streak: int = 0


@dataclass(frozen=True)
class MoveRecord:
    player_id: str
    move_number: int
    type: MoveType
    placed_tiles: tuple[PlacedTile, ...] = ()
    formed_words: tuple[str, ...] = ()
    score: int = 0


@dataclass(frozen=True)
class TurnResult:
    """Výsledok pokusu o ťah: validácia a pri úspechu aj rozpis skóre."""

    validation: MoveValidationResult
    breakdown: ScoreBreakdown | None = None

    @property
    def accepted(self) -> bool:
        return self.validation.is_valid and self.breakdown is not None


@dataclass(frozen=True)
class LastPlayedWords:
    words: tuple[str, ...]
    player_index: int
    move_index: int


@dataclass(frozen=True)
class ChallengeResult:
    success: bool
    word: str
    reason: str


class Game:
    """Tenká koordinačná vrstva nad jadrom pravidiel.

    Poradie krokov ťahu je pevné: validácia -> položenie kociek ->
    blokátory -> skóre -> označenie prémií ako použitých -> doplnenie stojana.
    """

    def __init__(
        self,
        *,
        board: Board,
        bag: TileBag,
        players: Sequence[PlayerState],
        word_validator: WordValidator,
        strict: bool | None = None,
        starting_index: int = 0,
    ) -> None:
        if not players:
            raise ValueError("Game vyžaduje aspoň jedného hráča")
        self.board = board
        self.bag = bag
        self.players: list[PlayerState] = list(players)
        self.word_validator = word_validator
        self.strict = strict_dictionary() if strict is None else strict
        self.calculator = ScoreCalculator()
        self.current_index = starting_index % len(self.players)
        self.status = GameStatus.IN_PROGRESS
        self.end_reason: GameEndReason | None = None
        self.winner: str | None = None
        self.move_history: list[MoveRecord] = []
        self.last_validation: MoveValidationResult | None = None
        self.last_played: LastPlayedWords | None = None

    @classmethod
    def start(
        cls,
        player_names: Sequence[str],
        dictionary: Dictionary,
        *,
        seed: int | None = None,
        strict: bool | None = None,
    ) -> Game:
        """Nová partia: prázdna doska, premiešaná taška, 10 kociek pre každého."""
        bag = create_tile_bag(seed=seed)
        players = [
            PlayerState(id=f"player{idx + 1}", name=name, tiles=bag.draw(TILES_PER_PLAYER))
            for idx, name in enumerate(player_names)
        ]
        log.info("game_started players=%s bag_remaining=%s", list(player_names), bag.remaining())
        return cls(
            board=Board(),
            bag=bag,
            players=players,
            word_validator=WordValidator(dictionary),
            strict=strict,
        )

    @property
    def ended(self) -> bool:
        return self.status is GameStatus.COMPLETED

    def current_player(self) -> PlayerState:
        return self.players[self.current_index]

    def _advance_turn(self) -> None:
        self.current_index = (self.current_index + 1) % len(self.players)

    def _ensure_running(self) -> None:
        if self.ended:
            raise RuntimeError("Partia je už ukončená")

    def make_move(self, placed_tiles: Sequence[PlacedTile]) -> TurnResult:
        """Odohrá ťah aktuálneho hráča; neplatný ťah vráti bez zmeny stavu."""
        self._ensure_running()
        player = self.current_player()
        placed = list(placed_tiles)

        missing = missing_from_rack(player.tiles, (p.tile for p in placed))
        if missing:
            raise ValueError(f"Hráč {player.name} nemá na stojane kocky {missing}")
        ids = [p.tile.id for p in placed]
        if len(set(ids)) != len(ids):
            raise ValueError(f"Hráč {player.name} kladie tú istú kocku viackrát")
        for p in placed:
            if p.tile.is_joker and not p.tile.joker_letter:
                raise ValueError(f"Joker na ({p.row},{p.col}) nemá zvolené písmeno")

        token = TRACE_ID_VAR.set(f"move-{len(self.move_history) + 1}")
        try:
            validator = MoveValidator(self.board, self.word_validator, check_dictionary=self.strict)
            validation = validator.validate_move(placed)
            self.last_validation = validation
            if not validation.is_valid:
                log.info("move_rejected player=%s code=%s", player.id, validation.reason_code)
                return TurnResult(validation)

            if validation.direction is None:
                raise RuntimeError("Platný ťah bez smeru")
            for p in placed:
                self.board.set_tile(p.row, p.col, p.tile)
            self.board.place_blockers(placed, validation.direction)

            breakdown = self.calculator.calculate_move_score(validation.words_formed, placed, len(placed))
            # prémie až po skóre, inak by tento ťah prišiel o násobky
            self.board.mark_squares_as_used(placed)

            player.score += breakdown.total_score
            player.rounds_played += 1
            player.skip_streak = 0
            player.tiles = consume_rack(player.tiles, placed)
            refill_rack(player.tiles, self.bag)

            words = tuple(validation.word_texts)
            self.move_history.append(
                MoveRecord(
                    player_id=player.id,
                    move_number=len(self.move_history) + 1,
                    type=MoveType.PLACE_TILES,
                    placed_tiles=tuple(placed),
                    formed_words=words,
                    score=breakdown.total_score,
                )
            )
            self.last_played = LastPlayedWords(words, self.current_index, len(self.move_history) - 1)
            log.info(
                "move_played player=%s words=%s score=%s bag_remaining=%s",
                player.id,
                list(words),
                breakdown.total_score,
                self.bag.remaining(),
            )

            if self.bag.is_empty() and not player.tiles:
                self.end_game(GameEndReason.BAG_EMPTY_AND_PLAYER_OUT)
            else:
                self._advance_turn()
            return TurnResult(validation, breakdown)
        finally:
            TRACE_ID_VAR.reset(token)

    def _record_passive(self, move_type: MoveType) -> None:
        player = self.current_player()
        self.move_history.append(
            MoveRecord(player_id=player.id, move_number=len(self.move_history) + 1, type=move_type)
        )
        player.rounds_played += 1
        self._advance_turn()

    def skip_turn(self) -> None:
        self._ensure_running()
        player = self.current_player()
        player.skip_streak += 1
        self._record_passive(MoveType.SKIP)
        if all(p.skip_streak >= 2 for p in self.players):
            self.end_game(GameEndReason.ALL_PLAYERS_SKIPPED_TWICE)

    def exchange_tiles(self, tiles: Sequence[Tile]) -> bool:
        """Vymení kocky: vráti ich do tašky, premieša a potiahne rovnaký počet.

        Pri prázdnej taške sa výmena odmietne (False).
        """
        self._ensure_running()
        if self.bag.is_empty():
            log.info("exchange_rejected reason=bag_empty")
            return False
        player = self.current_player()
        missing = missing_from_rack(player.tiles, tiles)
        if missing:
            raise ValueError(f"Hráč {player.name} nemá na stojane kocky {missing}")

        ids = {tile.id for tile in tiles}
        returned = [t.with_joker_letter(None) if t.is_joker else t for t in player.tiles if t.id in ids]
        player.tiles = [t for t in player.tiles if t.id not in ids]
        self.bag.return_tiles(returned)
        self.bag.shuffle()
        player.tiles.extend(self.bag.draw(len(returned)))
        player.skip_streak = 0
        log.info("tiles_exchanged player=%s count=%s", player.id, len(returned))
        self._record_passive(MoveType.EXCHANGE)
        return True

    def set_joker_letter(self, tile_id: str, letter: str | None) -> Tile:
        """Zvolí písmeno jokera na stojane aktuálneho hráča a vráti upravenú kocku."""
        player = self.current_player()
        player.tiles = assign_joker_letter(player.tiles, tile_id, letter)
        return next(t for t in player.tiles if t.id == tile_id)

    def challenge_last_word(self) -> ChallengeResult | None:
        """Aktuálny hráč napadne slová posledného ťahu.

        Ak je niektoré slovo neplatné, napadnutie uspeje. Inak napádajúci
        stráca CHALLENGE_PENALTY_MS zo svojho času.
        """
        last = self.last_played
        if last is None or self.ended:
            return None
        self.last_played = None

        for word in last.words:
            result = self.word_validator.validate_word(word)
            if not result.is_valid:
                log.info("challenge_succeeded word=%s", result.word)
                return ChallengeResult(True, result.word, result.reason or "Word is invalid")

        challenger = self.current_player()
        challenger.time_remaining_ms = max(0, challenger.time_remaining_ms - CHALLENGE_PENALTY_MS)
        challenger.time_penalties += 1
        word = last.words[0] if last.words else ""
        log.info("challenge_failed word=%s challenger=%s", word, challenger.id)
        return ChallengeResult(False, word, "Word is valid")

    def end_game(self, reason: GameEndReason = GameEndReason.ENDED_BY_PLAYER) -> dict[str, int]:
        """Odpočíta zvyšné kocky, určí víťaza (None pri remíze) a vráti konečné skóre."""
        if self.ended:
            return self.scores()
        for player in self.players:
            player.score = self.calculator.calculate_final_score(player.score, player.tiles)
        best = max(p.score for p in self.players)
        leaders = [p for p in self.players if p.score == best]
        self.winner = leaders[0].id if len(leaders) == 1 else None
        self.status = GameStatus.COMPLETED
        self.end_reason = reason
        log.info("game_ended reason=%s scores=%s winner=%s", reason.name, self.scores(), self.winner)
        return self.scores()

    def scores(self) -> dict[str, int]:
        return {player.id: player.score for player in self.players}
