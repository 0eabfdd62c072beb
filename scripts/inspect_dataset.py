import argparse
import logging
from pathlib import Path

from app.services.errors import DatasetError
from app.services.loader import DEFAULT_MAX_LINE_BYTES, load_catalog
from app.services.search import CatalogSearcher


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1: {value}")
    return number


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Load a gzip JSON-lines dataset and report what was ingested")
    parser.add_argument("path", type=Path, help="Path to the gzip dataset")
    parser.add_argument("--max-line-bytes", type=positive_int, default=DEFAULT_MAX_LINE_BYTES, help="Longest accepted line")
    parser.add_argument("--query", help="Run one search and print the matching record ids")
    parser.add_argument("--verbose", action="store_true", help="Log every skipped line")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        result = load_catalog(args.path, max_line_bytes=args.max_line_bytes)
    except DatasetError as exc:
        print(f"error: {exc}")
        return 1

    print(f"lines={result.lines_read} records={len(result.records)} skipped={result.lines_skipped}")
    if args.query is not None:
        hits = CatalogSearcher(result.records).search(args.query)
        print(f"query={args.query!r} matches={len(hits)}")
        for record in hits:
            print(f"  {record.id}\t{record.title}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
