"""
Command-line entry point.

Usage:
    mushaf serve [--corpus PATH] [--host HOST] [--port PORT]
    mushaf check [--corpus PATH]
"""

import argparse
import logging
import sys

from mushaf.config import configure, get_settings
from mushaf.data import load_corpus
from mushaf.exceptions import CorpusLoadError
from mushaf.logging_utils import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mushaf", description="Quran corpus query service")
    parser.add_argument("--corpus", help="Path of the corpus JSON document")
    parser.add_argument("--log-level", help="Root log level")
    parser.add_argument("--log-format", choices=["json", "text"], help="Log record format")

    commands = parser.add_subparsers(dest="command", required=True)

    serve = commands.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", help="Interface to bind")
    serve.add_argument("--port", type=int, help="Port to listen on")

    commands.add_parser("check", help="Load and validate the corpus, then print its size")
    return parser


def _apply_overrides(args: argparse.Namespace):
    overrides = {
        "corpus_path": args.corpus,
        "log_level": args.log_level,
        "log_format": args.log_format,
        "host": getattr(args, "host", None),
        "port": getattr(args, "port", None),
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}
    if overrides:
        return configure(**overrides)
    return get_settings()


def check(settings) -> int:
    try:
        store = load_corpus(settings.corpus_path)
    except CorpusLoadError as e:
        print(f"Corpus invalid: {e.message}", file=sys.stderr)
        return 1

    juz = {located.ayah.juz for located in store}
    pages = {located.ayah.page for located in store}
    print(f"Surahs: {len(store)}")
    print(f"Ayahs:  {store.verse_count}")
    print(f"Juz:    {len(juz)}")
    print(f"Pages:  {len(pages)}")
    return 0


def serve(settings) -> int:
    import uvicorn

    from mushaf.api import create_app

    try:
        store = load_corpus(settings.corpus_path)
    except CorpusLoadError as e:
        logger.critical("Cannot start: %s", e.message, extra={"error_code": e.code})
        return 1

    uvicorn.run(create_app(store, settings), host=settings.host, port=settings.port, log_config=None)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = _apply_overrides(args)
    setup_logging(settings.log_level, settings.log_format)

    if args.command == "check":
        return check(settings)
    return serve(settings)


if __name__ == "__main__":
    sys.exit(main())
