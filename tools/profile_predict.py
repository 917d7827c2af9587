# tools/profile_predict.py
"""
Small profiling harness for word and sentence prediction.
Usage:
  python tools/profile_predict.py --warm 50 --iters 500 --sentence "happy birthday to you"

Prints mean/median/stdev latency and a sample of predictions.
"""
import argparse
import random
import statistics
import time

from emoji_predictor.core.matcher import default_matcher

WORD_QUERIES = ["ha", "happ", "hapy", "pizz", "birth", "celeb", "lov", "rain", "code", "xq"]
SENTENCE_QUERIES = [
    "happy birthday to you",
    "i love pizza and coffee in the morning",
    "so tired after the gym today",
    "it is raining and cold outside",
    "thank you so much for the gift",
]


def benchmark(fn, queries, iterations=200):
    times = []
    for _ in range(iterations):
        q = random.choice(queries)
        t0 = time.perf_counter()
        fn(q)
        t1 = time.perf_counter()
        times.append((t1 - t0) * 1000.0)  # ms
    return times


def summarize(times):
    times_sorted = sorted(times)
    return {
        "count": len(times_sorted),
        "mean_ms": statistics.mean(times_sorted),
        "median_ms": statistics.median(times_sorted),
        "stdev_ms": statistics.pstdev(times_sorted),
        "p90_ms": times_sorted[max(0, int(0.9 * len(times_sorted)) - 1)],
        "max_ms": max(times_sorted),
    }


def main(argv=None):
    parser = argparse.ArgumentParser()
    parser.add_argument("--warm", type=int, default=50, help="warmup iterations")
    parser.add_argument("--iters", type=int, default=500, help="measured iterations")
    parser.add_argument("--sentence", type=str, default="happy birthday to you", help="sample sentence")
    args = parser.parse_args(argv)

    matcher = default_matcher()
    print("Warming up...")
    for _ in range(args.warm):
        matcher.predict_for_word("happ", 6)
        matcher.predict_for_sentence(args.sentence, 12)

    print("Measuring...")
    word_stats = summarize(benchmark(lambda q: matcher.predict_for_word(q, 6), WORD_QUERIES, args.iters))
    sent_stats = summarize(benchmark(lambda q: matcher.predict_for_sentence(q, 12), SENTENCE_QUERIES, args.iters))
    print("word (ms):", {k: round(v, 3) for k, v in word_stats.items()})
    print("sentence (ms):", {k: round(v, 3) for k, v in sent_stats.items()})
    print("Sample sentence output:", matcher.predict_for_sentence(args.sentence, 12))


if __name__ == "__main__":
    main()
