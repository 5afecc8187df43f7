# tools/profile_check.py
"""
Profiling harness for SpellChecker: build time, check() latency and the filter's
measured false-positive rate.

Usage:
  python tools/profile_check.py --dictionary dictionary.txt --runs 500
  python tools/profile_check.py --synthetic 20000

Without --dictionary a synthetic word list is generated.
"""

import argparse
import random
import statistics
import string
import time

from intelligent_spellchecker.core.dictionary import load_dictionary
from intelligent_spellchecker.core.spell_checker import SpellChecker
from intelligent_spellchecker.utils.config_manager import Config
from intelligent_spellchecker.utils.logger_utils import Log


def synthetic_words(n: int, seed: int = 1) -> list:
    rng = random.Random(seed)
    words = set()
    while len(words) < n:
        words.add("".join(rng.choice(string.ascii_lowercase) for _ in range(rng.randint(3, 10))))
    out = sorted(words)
    rng.shuffle(out)  # insertion order shapes the tree, alphabetical is a poor case
    return out


def typo(word: str, rng: random.Random) -> str:
    """One random edit: swap, drop, or replace a character."""
    if len(word) < 2:
        return word + "x"
    i = rng.randrange(len(word) - 1)
    op = rng.choice("sdr")
    if op == "s":
        return word[:i] + word[i + 1] + word[i] + word[i + 2:]
    if op == "d":
        return word[:i] + word[i + 1:]
    return word[:i] + rng.choice(string.ascii_lowercase) + word[i + 1:]


def profile(sc: SpellChecker, queries: list, runs: int, warmup: int) -> list:
    for i in range(warmup):
        sc.check(queries[i % len(queries)])

    times = []
    for i in range(runs):
        q = queries[i % len(queries)]
        t0 = time.perf_counter()
        sc.check(q)
        times.append((time.perf_counter() - t0) * 1000.0)
    return times


def measured_fp_rate(sc: SpellChecker, probes: int, seed: int = 2) -> float:
    rng = random.Random(seed)
    hits = 0
    tried = 0
    while tried < probes:
        w = "".join(rng.choice(string.ascii_lowercase) for _ in range(12))
        if sc.tree.contains(w):
            continue
        tried += 1
        if sc.bloom.might_contain(w):
            hits += 1
    return hits / probes


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--dictionary", help="word list to build from")
    parser.add_argument("--synthetic", type=int, default=20000, help="synthetic word count")
    parser.add_argument("--runs", type=int, default=300)
    parser.add_argument("--warmup", type=int, default=30)
    parser.add_argument("--probes", type=int, default=20000, help="non-member filter probes")
    parser.add_argument("--fp-rate", type=float, default=0.01)
    parser.add_argument("--max-radius", type=int, default=2)
    args = parser.parse_args()

    Log.setup("INFO")
    cfg = Config(fp_rate=args.fp_rate, max_radius=args.max_radius)
    if args.dictionary:
        words = list(load_dictionary(args.dictionary).words)
    else:
        words = synthetic_words(args.synthetic)

    sc = SpellChecker.from_words(words, cfg)

    rng = random.Random(3)
    sample = rng.sample(words, min(200, len(words)))
    queries = sample + [typo(w, rng) for w in sample]
    times = profile(sc, queries, runs=args.runs, warmup=args.warmup)

    print("words:", len(words))
    print("build s:", round(sc.build_seconds, 3))
    print("calls:", len(times))
    print("mean ms:", round(statistics.mean(times), 3))
    print("median ms:", round(statistics.median(times), 3))
    print("p99 ms:", round(sorted(times)[max(0, int(len(times) * 0.99) - 1)], 3))
    print("filter fp rate: target", args.fp_rate, "measured", round(measured_fp_rate(sc, args.probes), 5))
    for k, v in sc.stats().items():
        print(f"{k:20} {v}")


if __name__ == "__main__":
    main()
