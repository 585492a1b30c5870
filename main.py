"""Main CLI entry-point."""
from __future__ import annotations

import argparse
import asyncio
import sys

from core.logging.config import bootstrap_logging, shutdown_logging
from config import settings


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="lol-match-stats",
        description="Show a summoner's recent League of Legends matches.",
    )
    parser.add_argument("name", nargs="*", help="summoner name (prompted for when omitted)")
    parser.add_argument("--region", help="platform, e.g. euw1 or euw (default: PLATFORM setting)")
    parser.add_argument("--verbose", action="store_true", help="log to the console as well")
    return parser.parse_args(argv)


def main(argv: list[str]) -> int:
    args = _parse_args(argv)
    bootstrap_logging(
        level=settings.LOG_LEVEL,
        console=args.verbose or None,
        log_dir=settings.LOG_DIR,
    )
    # Lazy imports here, after logging is configured
    from application.use_cases import LookupSummonerUseCase
    from domain.enums import Region
    from presentation.cli import LookupCommand

    try:
        region = Region.from_string(args.region or settings.PLATFORM)
        command = LookupCommand(LookupSummonerUseCase(region=region))
        name = " ".join(args.name) if args.name else None
        return asyncio.run(command.run(name))
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        return 130
    finally:
        shutdown_logging()


def run() -> None:
    raise SystemExit(main(sys.argv[1:]))


if __name__ == "__main__":
    run()
