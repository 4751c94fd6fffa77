"""Benchmark autolink against bleach.linkify.

Run with:
    python benchmarks/benchmark_vs_bleach.py

bleach is optional (pip install -e ".[benchmark]"); without it only
autolink is timed.
"""

import random
import time


def make_corpus(count: int = 500, seed: int = 0) -> list[str]:
    """Generate comment-sized HTML fragments with a mix of bare and linked URLs."""
    rng = random.Random(seed)
    words = "the quick brown fox jumps over lazy dog see docs here".split()
    fragments = []
    for i in range(count):
        parts = [rng.choice(words) for _ in range(rng.randint(10, 60))]
        for _ in range(rng.randint(0, 4)):
            url = f"https://example{rng.randint(0, 99)}.com/p/{i}?q={rng.randint(0, 9)}"
            shape = rng.choice(["{}", "({})", "{}.", "<a href='{}'>link</a>", "<li>{}</li>"])
            parts.insert(rng.randrange(len(parts) + 1), shape.format(url))
        fragments.append(" ".join(parts))
    return fragments


def benchmark_autolink(docs: list[str], iterations: int = 10) -> float:
    """Benchmark autolink."""
    from autolink import AutoLinker

    linker = AutoLinker()

    # Warmup
    for doc in docs[:10]:
        linker(doc)

    start = time.perf_counter()
    for _ in range(iterations):
        for doc in docs:
            linker(doc)
    elapsed = time.perf_counter() - start

    return elapsed / iterations


def benchmark_bleach(docs: list[str], iterations: int = 10) -> float:
    """Benchmark bleach.linkify."""
    try:
        import bleach
    except ImportError:
        print("bleach not installed. Run: pip install bleach")
        return float("inf")

    # Warmup
    for doc in docs[:10]:
        bleach.linkify(doc)

    start = time.perf_counter()
    for _ in range(iterations):
        for doc in docs:
            bleach.linkify(doc)
    elapsed = time.perf_counter() - start

    return elapsed / iterations


def main() -> None:
    """Run benchmarks and print results."""
    import sys

    docs = make_corpus()
    print(f"Generated {len(docs)} fragments ({sum(map(len, docs))} characters)")
    print(f"Python {sys.version.split()[0]}\n")

    iterations = 10
    results = {
        "autolink": benchmark_autolink(docs, iterations),
        "bleach": benchmark_bleach(docs, iterations),
    }

    baseline = results["autolink"]
    for name, seconds in results.items():
        if seconds == float("inf"):
            print(f"{name:>10}: skipped")
            continue
        print(f"{name:>10}: {seconds * 1000:8.2f} ms/iteration ({seconds / baseline:.1f}x)")


if __name__ == "__main__":
    main()
