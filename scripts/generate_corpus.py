from __future__ import annotations

import argparse
from pathlib import Path

from srcbuffer.testing import generate_documents


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="generate_corpus")
    ap.add_argument("--seed", type=int, default=1)
    ap.add_argument("--count", type=int, default=1000)
    ap.add_argument("--out", default="tests/fixtures/generated_corpus")
    args = ap.parse_args(argv)

    out_dir = Path(args.out).resolve() / f"seed_{args.seed}_count_{args.count}"
    out_dir.mkdir(parents=True, exist_ok=True)

    for rel, raw, _ in generate_documents(seed=args.seed, count=args.count):
        (out_dir / rel).write_bytes(raw)

    print(str(out_dir))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
