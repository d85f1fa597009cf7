#!/usr/bin/env python
"""Benchmark utf8_strlen against ``len(data.decode())``.

Timings use ``time.perf_counter()`` only.  Each corpus is built in memory, so
no test data is needed.
"""

from __future__ import annotations

import argparse
import json
import statistics
import sys
import time
from collections.abc import Callable

from utf8index import utf8_strlen

_CORPORA: dict[str, str] = {
    "ascii": "The quick brown fox jumps over the lazy dog. ",
    "latin": "Größe, Gebäude, überraschte, naïve café. ",
    "cjk": "これはテストです。这是中文测试文本。",
    "emoji": "Hello 🌍🌎🌏 ",
}


def _format_bytes(n: int) -> str:
    """Format byte count as human-readable string."""
    if n >= 1 << 20:
        return f"{n / (1 << 20):.1f} MiB"
    if n >= 1 << 10:
        return f"{n / (1 << 10):.1f} KiB"
    return f"{n} B"


def _build(text: str, size: int) -> bytes:
    unit = text.encode()
    return (unit * (size // len(unit) + 1))[:size].decode(errors="ignore").encode()


def _time(func: Callable[[bytes], int], data: bytes, repeat: int) -> list[float]:
    times = []
    for _ in range(repeat):
        t0 = time.perf_counter()
        func(data)
        times.append(time.perf_counter() - t0)
    return times


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Benchmark utf8_strlen on synthetic corpora.",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=1 << 20,
        help="Corpus size in bytes (default: 1 MiB)",
    )
    parser.add_argument(
        "--repeat",
        type=int,
        default=5,
        help="Timed runs per corpus (default: 5)",
    )
    parser.add_argument(
        "--json-only",
        action="store_true",
        default=False,
        help="Print only JSON output",
    )
    args = parser.parse_args()

    if args.size < 1 or args.repeat < 1:
        print("ERROR: --size and --repeat must be positive", file=sys.stderr)
        sys.exit(1)

    for name, text in _CORPORA.items():
        data = _build(text, args.size)
        expected = len(data.decode())
        counted = utf8_strlen(data)
        if counted != expected:
            print(
                f"ERROR: {name}: utf8_strlen={counted}, decode={expected}",
                file=sys.stderr,
            )
            sys.exit(1)

        ours = statistics.median(_time(utf8_strlen, data, args.repeat))
        baseline = statistics.median(
            _time(lambda d: len(d.decode()), data, args.repeat)
        )
        if args.json_only:
            print(
                json.dumps(
                    {
                        "corpus": name,
                        "bytes": len(data),
                        "chars": counted,
                        "utf8_strlen": ours,
                        "decode": baseline,
                    }
                )
            )
        else:
            print(f"{name:<6} {_format_bytes(len(data)):>10}  {counted:>9} chars")
            print(f"  utf8_strlen: {ours * 1000:9.2f}ms")
            print(f"  decode:      {baseline * 1000:9.2f}ms")


if __name__ == "__main__":
    main()
