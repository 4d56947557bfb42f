#!/usr/bin/env python3
"""
Graphics Extractor CLI

Reads log files (or stdin) and prints the embedded graphics objects as JSON.

Usage:
    graphics-extractor app.log                    # objects as a JSON list
    graphics-extractor app.log --report           # objects + spans + stats
    some_command 2>&1 | graphics-extractor        # read from stdin
    graphics-extractor --serve --port 8010        # run the HTTP API
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from .config import ExtractorConfig
from .exceptions import LogSourceError, format_error_chain
from .logging_config import setup_logging, get_logger
from .service import GraphicsExtractionService

logger = get_logger(__name__)


def run_server(config: ExtractorConfig, host: str, port: int) -> None:
    import uvicorn

    from .app import create_app

    uvicorn.run(create_app(config), host=host, port=port)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graphics-extractor",
        description="Extract graphics objects embedded in debug log text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s app.log
  %(prog)s app.log other.log --report -o graphics.json
  cat app.log | %(prog)s
        """
    )
    parser.add_argument(
        "log_paths",
        nargs="*",
        type=Path,
        help="Log files to scan (default: read stdin)"
    )
    parser.add_argument(
        "--report",
        action="store_true",
        help="Print span positions and statistics along with the objects"
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        help="Write the JSON output to this file instead of stdout"
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="Also store each result under the configured data directory"
    )
    parser.add_argument("--serve", action="store_true", help="Run the FastAPI server")
    parser.add_argument("--host", default="127.0.0.1", help="Server host")
    parser.add_argument("--port", type=int, default=8010, help="Server port")
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every skipped span"
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Only log errors"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    log_level = logging.DEBUG if args.verbose else (logging.ERROR if args.quiet else logging.INFO)
    setup_logging(level=log_level)

    config = ExtractorConfig.from_env()

    if args.serve:
        run_server(config, args.host, args.port)
        return 0

    service = GraphicsExtractionService(config)
    results = []
    try:
        if not args.log_paths:
            result = service.extract_text(sys.stdin.read(), source="<stdin>")
            if args.save:
                stored_path = service.save(result)
                logger.info(f"Saved {result.stats.objects_found} objects to {stored_path}")
            results.append(result)
        for log_path in args.log_paths:
            if args.save:
                result, stored_path = service.extract_and_save(str(log_path))
                logger.info(f"Saved {result.stats.objects_found} objects to {stored_path}")
            else:
                result = service.extract_file(str(log_path))
            results.append(result)
    except LogSourceError as e:
        logger.error(format_error_chain(e))
        return 1

    for result in results:
        stats = result.stats
        logger.info(
            f"{result.source}: {stats.objects_found} graphics objects "
            f"({stats.spans_found} spans, {stats.spans_failed} malformed)"
        )

    if args.report:
        reports = [result.to_dict() for result in results]
        payload = reports[0] if len(reports) == 1 else reports
    else:
        payload = [obj for result in results for obj in result.objects]

    output = json.dumps(payload, ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(output + "\n", encoding="utf-8")
        logger.info(f"Wrote {args.output}")
    else:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
