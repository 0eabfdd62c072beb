from __future__ import annotations

import gzip
import json
import logging
import zlib
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from pydantic import ValidationError

from app.config import DEFAULT_MAX_LINE_BYTES
from app.schemas import Record
from app.services.errors import DatasetFormatError, DatasetIOError

logger = logging.getLogger(__name__)

GZIP_MAGIC = b"\x1f\x8b"


@dataclass(frozen=True)
class LoadResult:
    records: tuple[Record, ...]
    lines_read: int
    lines_skipped: int


def iter_lines(handle: BinaryIO, *, max_line_bytes: int) -> Iterator[bytes | None]:
    """Yield raw lines from ``handle``, or ``None`` for a line longer than ``max_line_bytes``.

    An over-long line is consumed up to its delimiter so the next line starts clean.
    """
    while True:
        line = handle.readline(max_line_bytes + 1)
        if not line:
            return
        if len(line) > max_line_bytes and not line.endswith(b"\n"):
            while line and not line.endswith(b"\n"):
                line = handle.readline(max_line_bytes + 1)
            yield None
            continue
        yield line


def _reject_constant(token: str) -> float:
    raise ValueError(f"Invalid JSON constant: {token}")


def parse_record(line: bytes) -> Record | None:
    try:
        return Record.model_validate(json.loads(line, parse_constant=_reject_constant))
    except (ValueError, ValidationError, RecursionError):
        return None


def load_catalog(source_path: Path | str, *, max_line_bytes: int = DEFAULT_MAX_LINE_BYTES) -> LoadResult:
    path = Path(source_path)
    if max_line_bytes < 1:
        raise ValueError("max_line_bytes must be >= 1")
    try:
        raw = path.open("rb")
    except OSError as exc:
        raise DatasetIOError(path, "Unable to open dataset") from exc

    records: list[Record] = []
    lines_read = 0
    lines_skipped = 0
    with raw:
        try:
            if raw.read(len(GZIP_MAGIC)) != GZIP_MAGIC:
                raise DatasetFormatError(path, "Dataset is not a gzip stream")
            raw.seek(0)
            with gzip.GzipFile(fileobj=raw, mode="rb") as handle:
                for line in iter_lines(handle, max_line_bytes=max_line_bytes):
                    lines_read += 1
                    record = parse_record(line) if line is not None else None
                    if record is None:
                        lines_skipped += 1
                        logger.debug("Skipped unparsable line %d in %s", lines_read, path)
                        continue
                    records.append(record)
        except (gzip.BadGzipFile, EOFError, zlib.error) as exc:
            raise DatasetFormatError(path, "Invalid gzip stream") from exc
        except OSError as exc:
            raise DatasetIOError(path, "Unable to read dataset") from exc

    logger.info("Loaded %d records from %s (%d lines skipped)", len(records), path, lines_skipped)
    return LoadResult(records=tuple(records), lines_read=lines_read, lines_skipped=lines_skipped)
