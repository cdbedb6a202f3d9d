"""Command-line entry point for inspecting decks and checking moves."""

import argparse
import logging
import sys
from pathlib import Path

import yaml

from spider_rules.config import Config, load_config
from spider_rules.game.deck import DeckBuilder, deck_summary
from spider_rules.game.validator import MoveValidator, ValidationResult
from spider_rules.logging.formatters import format_cards, parse_card, parse_cards
from spider_rules.models.card import Rank
from spider_rules.models.variant import GameVariant, InvalidVariant
from spider_rules.utils.logger import setup_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ILLEGAL = 1
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="spider-rules",
        description="Spider Solitaire deck builder and move checker",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    deck_parser = subparsers.add_parser("deck", help="Print the unshuffled deck")
    deck_parser.add_argument(
        "-m",
        "--mode",
        help="Game variant: one-suit, two-suit or four-suit (overrides config)",
    )
    deck_parser.add_argument(
        "--summary",
        action="store_true",
        help="Print copies per card instead of the full deck",
    )

    lift_parser = subparsers.add_parser("lift", help="Check if a run can be dragged")
    lift_parser.add_argument(
        "cards",
        type=parse_cards,
        help="Comma-separated card codes, top card first (e.g. C7,C6,C5*)",
    )

    drop_parser = subparsers.add_parser("drop", help="Check if a run can be dropped")
    drop_parser.add_argument(
        "cards",
        type=parse_cards,
        help="Comma-separated card codes of the moving run, top card first",
    )
    drop_parser.add_argument(
        "--onto",
        type=parse_card,
        help="Top card of the destination pile (omit for an empty pile)",
    )

    return parser


def print_deck(config: Config, mode: str | None, summary: bool) -> int:
    """Build and print a deck."""
    variant = GameVariant.parse(mode) if mode else config.game.variant
    builder = DeckBuilder(
        asset_dir=config.assets.card_dir,
        extension=config.assets.extension,
    )
    deck = builder.build(variant)

    print(f"Variant: {variant.value} ({len(deck)} cards)")
    if summary:
        for code, count in deck_summary(deck).items():
            print(f"  {code}: {count}")
        return EXIT_OK

    run_length = len(Rank)
    for start in range(0, len(deck), run_length):
        print(format_cards(deck[start : start + run_length]))
    return EXIT_OK


def report(result: ValidationResult) -> int:
    """Print a validation result and map it to an exit code."""
    if result.is_valid:
        print("legal")
        return EXIT_OK
    print(f"illegal: {result.error_message}")
    return EXIT_ILLEGAL


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success or a legal move)
    """
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except (yaml.YAMLError, ValueError) as e:
        print(f"Invalid config: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    if args.verbose:
        config.logging.level = "DEBUG"

    try:
        setup_logging(config.logging.level)
    except ValueError as e:
        print(f"Invalid config: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    validator = MoveValidator()
    try:
        if args.command == "deck":
            return print_deck(config, args.mode, args.summary)
        if args.command == "lift":
            return report(validator.check_lift(args.cards))
        return report(validator.check_drop(args.cards, args.onto))
    except InvalidVariant as e:
        logger.error(f"Configuration error: {e}")
        return EXIT_CONFIG_ERROR


if __name__ == "__main__":
    sys.exit(main())
