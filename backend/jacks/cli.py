import argparse
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from jacks.data.presets import DEFAULT_SETTINGS
from jacks.engine.strategy import TABLE_HEADERS, TABLE_TITLES, resolve, table_rows, upcard_value
from jacks.errors import StrategyLookupError
from jacks.logging_config import setup_logging
from jacks.models import CalculatorSettings, HandCategory, RuleSet, SurrenderRule
from jacks.services.repository import StrategyRepository

SURRENDER_CHOICES = {
    "none": SurrenderRule.not_allowed,
    "any": SurrenderRule.any_upcard,
    "2-10": SurrenderRule.dealer_2_through_10,
}


def _on_off(value: str) -> bool:
    lowered = value.lower()
    if lowered in {"y", "yes", "true", "on", "1"}:
        return True
    if lowered in {"n", "no", "false", "off", "0"}:
        return False
    raise argparse.ArgumentTypeError(f"expected yes or no, got {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="jacks", description="Blackjack basic strategy calculator")
    parser.add_argument("--strategies-dir", type=Path, default=None, help="directory of JSON strategy files")
    parser.add_argument("--fallback-key", default=None, help="strategy used when no exact match exists")
    parser.add_argument("--max-decks", type=int, default=None, help="largest deck count offered by the calculator")
    parser.add_argument("--log-level", default="WARNING")
    parser.add_argument("--log-file", type=Path, default=None)
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("tui", help="interactive terminal calculator (default)")

    sub.add_parser("list", help="list the loaded strategies")

    lookup = sub.add_parser("lookup", help="print the recommended play for one hand")
    lookup.add_argument("category", choices=[c.value for c in HandCategory])
    lookup.add_argument("total", type=int, help="hand total, or the value of one pair card (11 for aces)")
    lookup.add_argument("upcard", help="dealer upcard: 2-10, J, Q, K or A")
    lookup.add_argument("--decks", type=int, default=DEFAULT_SETTINGS.default_rules.decks)
    lookup.add_argument("--s17", type=_on_off, default=DEFAULT_SETTINGS.default_rules.dealer_stands_on_soft_17)
    lookup.add_argument("--das", type=_on_off, default=DEFAULT_SETTINGS.default_rules.double_after_split)
    lookup.add_argument("--peek", type=_on_off, default=DEFAULT_SETTINGS.default_rules.dealer_peek)
    lookup.add_argument("--surrender", choices=list(SURRENDER_CHOICES), default="none")

    chart = sub.add_parser("chart", help="print the three tables of one strategy")
    chart.add_argument("key")

    serve = sub.add_parser("serve", help="serve the lookup HTTP API")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    return parser


def settings_from_args(args: argparse.Namespace) -> CalculatorSettings:
    overrides = {}
    if args.strategies_dir is not None:
        overrides["strategies_dir"] = args.strategies_dir
    if args.fallback_key is not None:
        overrides["fallback_key"] = args.fallback_key
    if args.max_decks is not None:
        overrides["max_decks"] = args.max_decks
    return CalculatorSettings(**{**DEFAULT_SETTINGS.model_dump(), **overrides})


def cmd_list(settings: CalculatorSettings) -> int:
    repository = StrategyRepository.build(settings.strategies_dir)
    for key, document in repository.items():
        marker = "*" if key == settings.fallback_key else " "
        print(f"{marker} {key:<28} {document.rules.key():<36} {document.name}")
    for key, error in repository.failures.items():
        print(f"! {key:<28} {error}")
    return 0


def cmd_lookup(settings: CalculatorSettings, args: argparse.Namespace) -> int:
    repository = StrategyRepository.build(settings.strategies_dir)
    rules = RuleSet(
        decks=args.decks,
        dealer_stands_on_soft_17=args.s17,
        double_after_split=args.das,
        dealer_peek=args.peek,
        surrender_allowed=SURRENDER_CHOICES[args.surrender],
    )
    found = repository.match(rules, settings.fallback_key)
    if found is None:
        print(f"No strategy for {rules.key()}", file=sys.stderr)
        return 1
    try:
        action = resolve(found.document, HandCategory(args.category), args.total, upcard_value(args.upcard))
    except StrategyLookupError as exc:
        print(str(exc), file=sys.stderr)
        return 2
    note = "" if found.exact else " (no exact match, using fallback)"
    print(f"{action.code}: {found.document.describe(action)}  [{found.key}{note}]")
    return 0


def cmd_chart(settings: CalculatorSettings, key: str) -> int:
    repository = StrategyRepository.build(settings.strategies_dir)
    document = repository.get(key)
    if document is None:
        print(f"Unknown strategy {key!r}", file=sys.stderr)
        return 1
    print(f"{document.name}: {document.description}")
    for category in HandCategory:
        print()
        print(TABLE_TITLES[category])
        for row in [TABLE_HEADERS] + table_rows(document, category):
            print(" ".join(cell.rjust(3) for cell in row))
    return 0


def cmd_serve(settings: CalculatorSettings, host: str, port: int) -> int:
    import uvicorn

    from jacks.main import create_app

    uvicorn.run(create_app(settings), host=host, port=port)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    command = args.command or "tui"

    # The curses screen owns the terminal, so the UI only logs to a file.
    try:
        setup_logging(args.log_level, args.log_file, console=command != "tui")
    except ValueError as exc:
        parser.error(str(exc))

    try:
        settings = settings_from_args(args)
    except ValidationError as exc:
        parser.error(str(exc))

    if command == "list":
        return cmd_list(settings)
    if command == "lookup":
        return cmd_lookup(settings, args)
    if command == "chart":
        return cmd_chart(settings, args.key)
    if command == "serve":
        return cmd_serve(settings, args.host, args.port)

    from jacks.tui.app import run_tui

    run_tui(settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
