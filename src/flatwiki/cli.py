"""Command-line entry point: serve the wiki with uvicorn."""

import argparse
import logging
from pathlib import Path

import uvicorn

from flatwiki import __version__
from flatwiki.config import Settings
from flatwiki.logging_config import setup_logging
from flatwiki.main import create_app

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flatwiki", description="Personal wiki over flat text files."
    )
    parser.add_argument("--host", help="address to listen on")
    parser.add_argument("--port", type=int, help="port to listen on")
    parser.add_argument("--pages-dir", type=Path, help="directory holding the pages")
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    """Environment settings overridden by whatever was given on the command line."""
    overrides = {
        "host": args.host,
        "port": args.port,
        "pages_dir": args.pages_dir,
        "debug": True if args.debug else None,
    }
    return Settings(**{k: v for k, v in overrides.items() if v is not None})


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    settings = settings_from_args(args)
    setup_logging(settings.log_level, debug=settings.debug)

    app = create_app(settings)
    logger.info("Server started on: http://%s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
