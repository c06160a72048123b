from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .buffer import Buffer
from .encoding import recognize_encoding
from .errors import SourceError
from .ranges import Range


def _inspect(buf: Buffer, encoding: str | None, offsets: list[int], lines: list[int]) -> dict:
    positions = []
    for offset in offsets:
        span = Range(buf, offset, offset).to_span()
        positions.append({"offset": offset, "line": span.start.line, "column": span.start.column, "at": span.format()})
    return {
        "file": buf.name,
        "encoding": encoding,
        "last_line": buf.last_line,
        "positions": positions,
        "lines": {str(n): buf.source_line(n) for n in lines},
    }


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="srcbuffer", description="Locate offsets and lines in a source file")
    ap.add_argument("file", help="Source file to load")
    ap.add_argument("--first-line", type=int, default=1, help="Number of the first line (default: 1)")
    ap.add_argument(
        "--encoding",
        default="utf-8",
        help="Encoding assumed when the file has no magic comment (default: utf-8)",
    )
    ap.add_argument("-o", "--offset", type=int, action="append", default=[], help="Offset to resolve (repeatable)")
    ap.add_argument("-l", "--line", type=int, action="append", default=[], help="Line to print (repeatable)")
    ap.add_argument("--json", action="store_true", help="Print the result as JSON")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log debug messages to stderr")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    path = Path(args.file)
    try:
        raw = path.read_bytes()
        encoding = recognize_encoding(raw)
        buf = Buffer(str(path), args.first_line, encoding=args.encoding, source=raw)
        res = _inspect(buf, encoding, args.offset, args.line)
    except (OSError, SourceError) as e:
        print(f"srcbuffer: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(res, indent=2, sort_keys=True))
    else:
        print(f"{res['file']}: encoding {res['encoding'] or 'undeclared'}, last line {res['last_line']}")
        for p in res["positions"]:
            print(f"{p['offset']}: {p['at']}")
        for n, text in res["lines"].items():
            print(f"{n}| {text}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
