"""
Command line entry point: scrape the Last.fm API docs and write the progress report
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import httpx

from lastfm_progress.config import settings
from lastfm_progress.exceptions import ProgressReportError
from lastfm_progress.services.implemented import (
    collect_implemented_from_package,
    load_implemented_file,
)
from lastfm_progress.services.reporter import generate_report, write_report
from lastfm_progress.services.scraper import fetch_api_methods


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lastfm-progress",
        description="Compare the Last.fm API documentation to the methods an SDK implements and write a Markdown progress report.",
    )
    parser.add_argument("--url", default=settings.API_INTRO_PAGE, help="API documentation page to scrape")
    parser.add_argument("--output", "-o", default=settings.OUTPUT_PATH, help="Markdown file to write")
    parser.add_argument("--timeout", type=float, default=settings.HTTP_TIMEOUT, help="HTTP timeout in seconds")

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--implemented", type=Path, help="Text file with one implemented method name per line")
    source.add_argument("--package", help="Python package whose command classes declare the implemented methods")
    parser.add_argument(
        "--attribute",
        default="method_name",
        help="Class attribute holding the API method name (with --package)",
    )

    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def configure_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] [ProgressReport] %(message)s",
    )


def load_implemented(args: argparse.Namespace) -> List[str]:
    if args.implemented is not None:
        return load_implemented_file(args.implemented)
    return collect_implemented_from_package(args.package, args.attribute)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        implemented = load_implemented(args)
        catalog = fetch_api_methods(args.url, timeout=args.timeout)
        report = generate_report(catalog, implemented)
        write_report(args.output, report.markdown)
    except ProgressReportError as e:
        print(f"✗ {e}")
        return 1
    except httpx.HTTPError as e:
        print(f"✗ HTTP error fetching {args.url}: {e}")
        return 1
    except OSError as e:
        print(f"✗ {e}")
        return 1

    print(f"✓ {report.percentage:.1f}% of the API implemented, saved to: {Path(args.output).absolute()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
