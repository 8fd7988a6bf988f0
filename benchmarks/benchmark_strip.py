"""Benchmark strip() across document shapes and option sets.

Run with:
    python benchmarks/benchmark_strip.py
    python benchmarks/benchmark_strip.py --iterations 50
"""

import argparse
import json
import statistics
import time

from strip_json_comments import strip

OPTION_SETS: dict[str, dict[str, bool]] = {
    "default": {},
    "no-whitespace": {"whitespace": False},
    "trailing-commas": {"trailingCommas": True},
}


def _entry(i: int) -> str:
    return (
        f"  // entry {i}\n"
        f'  "key_{i}": {{\n'
        f'    "name": "item {i}", /* inline note */\n'
        f'    "url": "https://example.com/{i}/*not-a-comment*/",\n'
        f'    "values": [{i}, {i + 1}, {i + 2},],\n'
        "  },\n"
    )


def make_document(entries: int) -> str:
    return "{\n" + "".join(_entry(i) for i in range(entries)) + '  "end": true\n}'


def make_comment_heavy(entries: int) -> str:
    block = "/*\n * " + "lorem ipsum " * 8 + "\n */\n"
    return "[\n" + "".join(f"{block}  {i}, // trailing note\n" for i in range(entries)) + "]"


def make_plain(entries: int) -> str:
    """Valid JSON with no comments at all (exercises the fast path)."""
    return json.dumps({f"key_{i}": list(range(5)) for i in range(entries)}, indent=2)


def fixtures() -> dict[str, str]:
    return {
        "small": make_document(5),
        "medium": make_document(200),
        "large": make_document(5_000),
        "complex": make_comment_heavy(2_000),
        "plain": make_plain(2_000),
        "stress": make_document(40_000),
    }


def benchmark(source: str, options: dict[str, bool], iterations: int) -> list[float]:
    """Return per-call times in milliseconds."""
    strip(source, options)  # warmup
    timings: list[float] = []
    for _ in range(iterations):
        start = time.perf_counter()
        strip(source, options)
        timings.append((time.perf_counter() - start) * 1000)
    return timings


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--iterations", type=int, default=20)
    args = parser.parse_args()

    docs = fixtures()
    print("Fixture sizes:")
    for name, source in docs.items():
        print(f"  {name:<8} {len(source) / 1024:>10.2f} KB")
    print()

    print(f"{'fixture':<10}{'options':<18}{'median ms':>12}{'MB/s':>10}")
    print("-" * 50)
    for name, source in docs.items():
        iterations = max(1, args.iterations // 10) if name == "stress" else args.iterations
        for label, options in OPTION_SETS.items():
            median = statistics.median(benchmark(source, options, iterations))
            throughput = (len(source) / 1_000_000) / (median / 1000) if median else float("inf")
            print(f"{name:<10}{label:<18}{median:>12.3f}{throughput:>10.1f}")


if __name__ == "__main__":
    main()
