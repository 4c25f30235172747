from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from typing import Sequence

from app import ConfigFacade
from domain import ConfigStore
from domain.utils import split_assignment
from infra.config import KeyValueFileError, KeyValueFileSource
from infra.runtime import StructuredLogger


@dataclass(frozen=True)
class CliSettings:
    """Options shared by every command."""

    seed_file: str | None = None
    assignments: tuple[tuple[str, str], ...] = field(default_factory=tuple)
    show_secrets: bool = False


def _parse_assignment(raw: str) -> tuple[str, str]:
    parsed = split_assignment(raw)
    if parsed is None:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got '{raw}'")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="config-store")
    parser.add_argument(
        "--file",
        dest="seed_file",
        help="Seed the store from a key=value file; malformed lines and duplicate keys are fatal",
    )
    parser.add_argument(
        "--set",
        dest="assignments",
        action="append",
        type=_parse_assignment,
        default=[],
        metavar="KEY=VALUE",
        help="Set a value after seeding; may be repeated",
    )
    parser.add_argument(
        "--show-secrets",
        action="store_true",
        help="Print secret-looking values unmasked",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="Print every entry as key=value")

    get_p = sub.add_parser("get", help="Print one value")
    get_p.add_argument("key")

    has_p = sub.add_parser("has", help="Exit 0 when the key is present, 1 otherwise")
    has_p.add_argument("key")
    return parser


def settings_from_args(args: argparse.Namespace) -> CliSettings:
    return CliSettings(
        seed_file=args.seed_file,
        assignments=tuple(args.assignments),
        show_secrets=args.show_secrets,
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = settings_from_args(args)
    logger = StructuredLogger()

    initial: dict[str, str] = {}
    if settings.seed_file is not None:
        source = KeyValueFileSource(settings.seed_file)
        errors = source.validate()
        if errors:
            print("Seed file validation failed:")
            for err in errors:
                print(f"  - {err}")
            return 1
        try:
            initial = source.load()
        except (KeyValueFileError, OSError) as exc:
            logger.error("seed file could not be loaded", path=settings.seed_file, error=str(exc))
            print(f"Cannot load {settings.seed_file}: {exc}")
            return 1
        logger.info("seed file loaded", path=settings.seed_file, entries=len(initial))

    facade = ConfigFacade(config_repo=ConfigStore(initial), logger=logger)
    for key, value in settings.assignments:
        facade.update_value(key, value)

    if args.command == "list":
        for entry in facade.list_entries(reveal_secrets=settings.show_secrets):
            print(f"{entry.key}={entry.value}")
        return 0

    if args.command == "get":
        value = facade.get_value(args.key)
        if value is None:
            print(f"{args.key} is not set")
            return 1
        print(value)
        return 0

    if args.command == "has":
        return 0 if facade.has_value(args.key) else 1

    raise SystemExit(f"Unsupported command: {args.command}")


if __name__ == "__main__":
    raise SystemExit(main())
