"""Entry point for Pathfinder."""

import logging
import os
import sys

from textual.logging import TextualHandler

from .app import run_app
from .config import Config


def setup_logging(config: Config) -> None:
    """Send log records to the Textual console, and to a file if configured."""
    handlers: list[logging.Handler] = [TextualHandler()]
    if config.logging.file is not None:
        config.logging.file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(config.logging.file, encoding="utf-8"))
    logging.basicConfig(
        level=config.logging.level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        handlers=handlers,
    )


def main() -> int:
    """Main entry point for Pathfinder."""
    try:
        # Load configuration
        config = Config.load()
        setup_logging(config)

        # Browse from the current working directory
        run_app(config, os.getcwd())

        return 0
    except KeyboardInterrupt:
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
