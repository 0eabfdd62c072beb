import gzip
from pathlib import Path

AUTOCOMPLETE_BODY = b'["blue car", "red bus"]\n'

SAMPLE_LINES = [
    '{"id":1,"title":"Blue Car","content":"fast"}',
    "not-json",
    '{"id":2,"title":"Red Bus","content":"Blue interior"}',
]


def write_dataset(path: Path, lines: list[str], *, trailing_newline: bool = True) -> Path:
    body = "\n".join(lines) + ("\n" if trailing_newline else "")
    return write_raw_dataset(path, body.encode("utf-8"))


def write_raw_dataset(path: Path, payload: bytes) -> Path:
    with gzip.open(path, "wb") as handle:
        handle.write(payload)
    return path
