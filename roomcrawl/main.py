import argparse
import logging
import sys

from rich.logging import RichHandler

from roomcrawl.game import Game


def configure_logging(level: str = "WARNING") -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Play Room Crawl!")
    parser.add_argument("--settings", help="Path to game settings YAML file (e.g., settings.yaml)")
    parser.add_argument("--seed", type=int, help="Seed for room selection")
    parser.add_argument("--no-events", action="store_true", help="Disable the random event generator")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"], type=str.upper, help="Logging verbosity")
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    return Game(game_settings_path=args.settings, seed=args.seed, random_events=not args.no_events).start()


if __name__ == "__main__":
    sys.exit(main())
