"""Command line interface for the phonetic encoders."""

import argparse
import sys
from typing import List, Optional

import structlog

from .config import get_settings
from .core.engine import PhoneticEngine
from .core.exceptions import UnknownAlgorithmError
from .log_config import configure_logging

logger = structlog.get_logger(__name__)


def _format_result(result) -> str:
    if result.primary is None:
        return f"{result.algorithm:<20} (no encoding)"
    line = f"{result.algorithm:<20} {result.primary}"
    if result.alternates:
        line += f"  alternates: {', '.join(result.alternates)}"
    return line


def cmd_encode(engine: PhoneticEngine, args: argparse.Namespace) -> int:
    """Print the encodings of each text."""
    algorithms = None if args.all else [args.algorithm]

    for text in args.texts:
        response = engine.encode(text, algorithms)
        print(text)
        for result in response.results:
            print(f"  {_format_result(result)}")

    return 0


def cmd_compare(engine: PhoneticEngine, args: argparse.Namespace) -> int:
    """Print the difference score of two texts."""
    response = engine.difference(args.first, args.second, args.algorithm)
    print(
        f"{response.first} ({response.first_encoding or '-'}) vs "
        f"{response.second} ({response.second_encoding or '-'}): {response.difference}"
    )
    return 0


def cmd_algorithms(engine: PhoneticEngine, args: argparse.Namespace) -> int:
    """Print the registered algorithms."""
    for info in engine.list_algorithms():
        print(f"{info.name:<20} {info.description}")
    return 0


def cmd_serve(engine: PhoneticEngine, args: argparse.Namespace) -> int:
    """Run the HTTP API."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "phonetic_encoders.main:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        workers=settings.workers,
        log_level=settings.log_level.lower()
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()

    parser = argparse.ArgumentParser(
        prog="phonetic-encoders",
        description="Encode names and words with phonetic algorithms"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    encode_parser = subparsers.add_parser("encode", help="Encode one or more texts")
    encode_parser.add_argument("texts", nargs="+", help="Texts to encode")
    group = encode_parser.add_mutually_exclusive_group()
    group.add_argument(
        "-a", "--algorithm",
        default=settings.default_algorithm,
        help=f"Algorithm to use (default: {settings.default_algorithm})"
    )
    group.add_argument("--all", action="store_true", help="Use every algorithm")
    encode_parser.set_defaults(func=cmd_encode)

    compare_parser = subparsers.add_parser("compare", help="Compare two texts")
    compare_parser.add_argument("first", help="First text")
    compare_parser.add_argument("second", help="Second text")
    compare_parser.add_argument(
        "-a", "--algorithm",
        default=settings.default_algorithm,
        help=f"Algorithm to use (default: {settings.default_algorithm})"
    )
    compare_parser.set_defaults(func=cmd_compare)

    algorithms_parser = subparsers.add_parser("algorithms", help="List available algorithms")
    algorithms_parser.set_defaults(func=cmd_algorithms)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", help="Bind address")
    serve_parser.add_argument("--port", type=int, help="Bind port")
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging()
    engine = PhoneticEngine()

    try:
        return args.func(engine, args)
    except UnknownAlgorithmError as e:
        logger.debug("CLI command failed", command=args.command, error=str(e))
        print(f"Error: unknown algorithm {e.input!r}. Run 'phonetic-encoders algorithms'.", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
