"""Vstupný bod: `python -m kvizovka`.

Podpríkazy:
- `bag`     vypíše distribúciu kociek,
- `layout`  vypíše rozloženie prémií,
- `check`   overí a ohodnotí ťah (JSON) na prázdnej doske.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from .config import bag_seed, dictionary_path
from .core.board import Board
from .core.dictionary import WordList
from .core.layout import BOARD_SIZE, premium_fields
from .core.move_validator import MoveValidator
from .core.scoring import ScoreCalculator
from .core.tiles import create_tile_bag
from .core.types import PremiumField
from .core.word_validator import WordValidator
from .logging_setup import configure_logging
from .schema import parse_move_payload

log = logging.getLogger("kvizovka.cli")

_LAYOUT_MARKS = {
    PremiumField.DOUBLE_LETTER: "[yellow]2L[/]",
    PremiumField.TRIPLE_LETTER: "[green]3L[/]",
    PremiumField.QUADRUPLE_LETTER: "[red]4L[/]",
    PremiumField.WORD_MULTIPLIER: "[blue] X[/]",
    PremiumField.CENTER: "[bold] *[/]",
}


def _cmd_bag(console: Console, args: argparse.Namespace) -> int:
    bag = create_tile_bag(seed=args.seed)
    table = Table(title=f"Taška ({bag.remaining()} kociek)")
    table.add_column("Písmeno")
    table.add_column("Počet", justify="right")
    table.add_column("Body", justify="right")
    points = {t.letter: t.value for t in bag.peek_tiles() if not t.is_joker}
    for letter, count in sorted(bag.get_distribution().items()):
        table.add_row(letter, str(count), str(points.get(letter, 0)))
    console.print(table)
    return 0


def _cmd_layout(console: Console, _args: argparse.Namespace) -> int:
    fields = premium_fields()
    for r in range(BOARD_SIZE):
        cells = [_LAYOUT_MARKS.get(fields.get((r, c)), " .") for c in range(BOARD_SIZE)]
        console.print(" ".join(cells))
    return 0


def _cmd_check(console: Console, args: argparse.Namespace) -> int:
    words_path = args.words or dictionary_path()
    if not words_path:
        console.print("[red]Chýba slovník (--words alebo KVIZOVKA_DICTIONARY)[/]")
        return 2
    try:
        dictionary = WordList.from_path(words_path)
        payload = json.loads(Path(args.move).read_text(encoding="utf-8"))
        move = parse_move_payload(payload)
    except (OSError, json.JSONDecodeError, ValidationError) as exc:
        console.print(f"[red]Neplatný vstup:[/] {exc}")
        return 2

    board = Board()
    placed = move.to_placed_tiles()
    result = MoveValidator(board, WordValidator(dictionary)).validate_move(placed)
    if not result.is_valid:
        console.print(f"[red]Ťah zamietnutý[/] ({result.reason_code}): {result.reason}")
        return 1

    breakdown = ScoreCalculator().calculate_move_score(result.words_formed, placed, len(placed))
    table = Table(title="Skóre ťahu")
    table.add_column("Slovo")
    table.add_column("Základ", justify="right")
    table.add_column("Násobok", justify="right")
    table.add_column("Body", justify="right")
    for ws in breakdown.word_scores:
        table.add_row(ws.word, str(ws.base_score), f"×{ws.word_multiplier}", str(ws.final_score))
    console.print(table)
    if breakdown.all_tiles_bonus:
        console.print(f"Bonus za všetky kocky: +{breakdown.all_tiles_bonus}")
    if breakdown.long_word_bonus:
        console.print(f"Bonus za dlhé slovo: +{breakdown.long_word_bonus}")
    console.print(f"[bold]Spolu: {breakdown.total_score}[/]")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="kvizovka", description="Kvízovka – pravidlá a skórovanie")
    sub = parser.add_subparsers(dest="command", required=True)

    p_bag = sub.add_parser("bag", help="vypíše distribúciu kociek")
    p_bag.add_argument("--seed", type=int, default=None)
    p_bag.set_defaults(func=_cmd_bag)

    p_layout = sub.add_parser("layout", help="vypíše rozloženie prémií")
    p_layout.set_defaults(func=_cmd_layout)

    p_check = sub.add_parser("check", help="overí a ohodnotí ťah na prázdnej doske")
    p_check.add_argument("--words", help="slovník (.txt alebo .json)")
    p_check.add_argument("--move", required=True, help="ťah ako JSON súbor")
    p_check.set_defaults(func=_cmd_check)
    return parser


def main(argv: list[str] | None = None) -> int:
    configure_logging()
    args = build_parser().parse_args(argv)
    if getattr(args, "seed", None) is None and args.command == "bag":
        args.seed = bag_seed()
    log.debug("cli_command name=%s", args.command)
    return int(args.func(Console(), args))


if __name__ == "__main__":
    sys.exit(main())
