"""Serializácia stavu partie do JSON-kompatibilného slovníka (schema v1).

Pozn.: Jadro formát nepredpisuje; tento modul slúži orchestrácii na
uloženie/obnovu a UI na vykreslenie. Pri obnove sa taška nikdy nemieša.
"""

from __future__ import annotations

from typing import Any, Literal, TypedDict

from .board import Board
from .dictionary import Dictionary
from .game import Game, GameEndReason, GameStatus, PlayerState
from .layout import is_valid_position
from .tiles import TileBag
from .types import BlockerTile, Tile
from .word_validator import WordValidator

SCHEMA_VERSION = "1"


class TileDict(TypedDict):
    id: str
    letter: str
    value: int
    is_joker: bool
    joker_letter: str | None


class _Pos(TypedDict):
    """Pomocná štruktúra pre pozície polí (row, col)."""
    row: int
    col: int


class BoardEntry(TypedDict, total=False):
    row: int
    col: int
    kind: Literal["tile", "blocker"]
    id: str
    tile: TileDict


class PlayerDict(TypedDict):
    id: str
    name: str
    tiles: list[TileDict]
    score: int
    rounds_played: int
    time_remaining_ms: float
    time_penalties: int
    skip_streak: int


class SaveGameState(TypedDict, total=False):
    """JSON-serializovateľný stav celej partie (schema v1).

    - board: obsadené polia (kocky aj blokátory)
    - premium_used: polia, ktorých prémia je už spotrebovaná
    - bag: zvyšné kocky v presnom poradí
    - players, current_index, status, end_reason, winner
    """

    schema_version: str
    board: list[BoardEntry]
    premium_used: list[_Pos]
    bag: list[TileDict]
    players: list[PlayerDict]
    current_index: int
    status: str
    end_reason: str
    winner: str


def _require(cond: bool, message: str) -> None:
    if not cond:
        raise ValueError(message)


def tile_to_dict(tile: Tile) -> TileDict:
    return TileDict(
        id=tile.id,
        letter=tile.letter,
        value=tile.value,
        is_joker=tile.is_joker,
        joker_letter=tile.joker_letter,
    )


def tile_from_dict(data: dict[str, Any]) -> Tile:
    _require(isinstance(data, dict), "tile must be an object")
    tile_id, letter, value = data.get("id"), data.get("letter", ""), data.get("value", 0)
    _require(isinstance(tile_id, str) and bool(tile_id), "tile id missing")
    _require(isinstance(letter, str), f"tile {tile_id}: letter must be a string")
    _require(isinstance(value, int) and not isinstance(value, bool), f"tile {tile_id}: bad value")
    is_joker = bool(data.get("is_joker", False))
    joker_letter = data.get("joker_letter")
    _require(joker_letter is None or isinstance(joker_letter, str), f"tile {tile_id}: bad joker_letter")
    return Tile(
        id=tile_id,
        letter=letter,
        value=0 if is_joker else value,
        is_joker=is_joker,
        joker_letter=joker_letter or None,
    )


def build_save_state_dict(game: Game) -> SaveGameState:
    """Vytvorí JSON-serializovateľný stav partie (schema v1)."""
    board_entries: list[BoardEntry] = []
    premium_used: list[_Pos] = []
    for row in game.board.cells:
        for cell in row:
            if cell.is_used:
                premium_used.append({"row": cell.row, "col": cell.col})
            if isinstance(cell.tile, BlockerTile):
                board_entries.append(
                    BoardEntry(row=cell.row, col=cell.col, kind="blocker", id=cell.tile.id)
                )
            elif isinstance(cell.tile, Tile):
                board_entries.append(
                    BoardEntry(row=cell.row, col=cell.col, kind="tile", tile=tile_to_dict(cell.tile))
                )

    players = [
        PlayerDict(
            id=p.id,
            name=p.name,
            tiles=[tile_to_dict(t) for t in p.tiles],
            score=p.score,
            rounds_played=p.rounds_played,
            time_remaining_ms=p.time_remaining_ms,
            time_penalties=p.time_penalties,
            skip_streak=p.skip_streak,
        )
        for p in game.players
    ]

    return SaveGameState(
        schema_version=SCHEMA_VERSION,
        board=board_entries,
        premium_used=premium_used,
        bag=[tile_to_dict(t) for t in game.bag.peek_tiles()],
        players=players,
        current_index=game.current_index,
        status=game.status.name,
        end_reason=game.end_reason.name if game.end_reason else "",
        winner=game.winner or "",
    )


def _parse_pos(raw: Any) -> _Pos:
    _require(isinstance(raw, dict), "position must be an object")
    r, c = raw.get("row"), raw.get("col")
    _require(isinstance(r, int) and isinstance(c, int), "position needs integer row/col")
    _require(is_valid_position(r, c), f"position ({r},{c}) is off the board")
    return {"row": r, "col": c}


def parse_save_state_dict(data: dict[str, Any]) -> SaveGameState:
    """Overí a normalizuje vstupný slovník; pri neplatnom formáte `ValueError`."""
    _require(isinstance(data, dict), "state must be an object")
    _require(data.get("schema_version") == SCHEMA_VERSION, "Nepodporovaná schema_version")

    board: list[BoardEntry] = []
    for raw in data.get("board", []):
        pos = _parse_pos(raw)
        kind = raw.get("kind")
        if kind == "blocker":
            blocker_id = raw.get("id") or f"blocker-{pos['row']}-{pos['col']}"
            board.append(BoardEntry(row=pos["row"], col=pos["col"], kind="blocker", id=str(blocker_id)))
        elif kind == "tile":
            tile = tile_to_dict(tile_from_dict(raw.get("tile")))
            board.append(BoardEntry(row=pos["row"], col=pos["col"], kind="tile", tile=tile))
        else:
            raise ValueError(f"unknown board entry kind: {kind!r}")

    premium_used = [_parse_pos(raw) for raw in data.get("premium_used", [])]
    bag = [tile_to_dict(tile_from_dict(raw)) for raw in data.get("bag", [])]

    players: list[PlayerDict] = []
    for raw in data.get("players", []):
        _require(isinstance(raw, dict), "player must be an object")
        _require(isinstance(raw.get("id"), str), "player id missing")
        score = raw.get("score", 0)
        _require(isinstance(score, int), "player score must be an integer")
        players.append(
            PlayerDict(
                id=raw["id"],
                name=str(raw.get("name", raw["id"])),
                tiles=[tile_to_dict(tile_from_dict(t)) for t in raw.get("tiles", [])],
                score=score,
                rounds_played=int(raw.get("rounds_played", 0)),
                time_remaining_ms=float(raw.get("time_remaining_ms", 0)),
                time_penalties=int(raw.get("time_penalties", 0)),
                skip_streak=int(raw.get("skip_streak", 0)),
            )
        )
    _require(bool(players), "state has no players")

    current_index = data.get("current_index", 0)
    _require(isinstance(current_index, int) and 0 <= current_index < len(players), "bad current_index")
    status = data.get("status", GameStatus.IN_PROGRESS.name)
    _require(status in GameStatus.__members__, f"unknown status {status!r}")
    end_reason = data.get("end_reason", "") or ""
    _require(not end_reason or end_reason in GameEndReason.__members__, f"unknown end_reason {end_reason!r}")

    return SaveGameState(
        schema_version=SCHEMA_VERSION,
        board=board,
        premium_used=premium_used,
        bag=bag,
        players=players,
        current_index=current_index,
        status=status,
        end_reason=end_reason,
        winner=str(data.get("winner", "") or ""),
    )


def restore_board_from_save(state: SaveGameState) -> Board:
    """Z `SaveGameState` v1 vybuduje `Board` s kockami, blokátormi a príznakmi prémií."""
    board = Board()
    for entry in state.get("board", []):
        if entry["kind"] == "blocker":
            board.set_tile(entry["row"], entry["col"], BlockerTile(id=entry["id"]))
        else:
            board.set_tile(entry["row"], entry["col"], tile_from_dict(dict(entry["tile"])))
    for pos in state.get("premium_used", []):
        square = board.get_square(pos["row"], pos["col"])
        if square is not None:
            square.is_used = True
    return board


def restore_bag_from_save(state: SaveGameState, seed: int | None = None) -> TileBag:
    """Zloží `TileBag` so zachovaným poradím kociek."""
    return TileBag(seed=seed, tiles=[tile_from_dict(dict(t)) for t in state.get("bag", [])])


def restore_game_from_save(
    state: SaveGameState,
    dictionary: Dictionary,
    *,
    strict: bool | None = None,
) -> Game:
    players = [
        PlayerState(
            id=p["id"],
            name=p["name"],
            tiles=[tile_from_dict(dict(t)) for t in p["tiles"]],
            score=p["score"],
            rounds_played=p["rounds_played"],
            time_remaining_ms=p["time_remaining_ms"],
            time_penalties=p["time_penalties"],
            skip_streak=p["skip_streak"],
        )
        for p in state["players"]
    ]
    game = Game(
        board=restore_board_from_save(state),
        bag=restore_bag_from_save(state),
        players=players,
        word_validator=WordValidator(dictionary),
        strict=strict,
        starting_index=state.get("current_index", 0),
    )
    game.status = GameStatus[state.get("status", GameStatus.IN_PROGRESS.name)]
    if state.get("end_reason"):
        game.end_reason = GameEndReason[state["end_reason"]]
    game.winner = state.get("winner") or None
    return game
