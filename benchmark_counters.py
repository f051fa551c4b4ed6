import sys
import os
import time
import csv
import random
import argparse
from typing import Dict, Any, List

# Add project root to path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from inversions.counters.counter_interface import COUNTERS
from inversions.counters import natural_merge_sort

SHAPES = ("random", "sorted", "reversed", "nearly_sorted", "sawtooth")


def generate_input(shape: str, length: int, rng: random.Random) -> List[int]:
    """
    Build one benchmark input of the given shape.
    """
    if shape == "random":
        return [rng.randint(0, length) for _ in range(length)]
    if shape == "sorted":
        return list(range(length))
    if shape == "reversed":
        return list(range(length, 0, -1))
    if shape == "nearly_sorted":
        data = list(range(length))
        # ~2% adjacent swaps
        for _ in range(max(1, length // 50)):
            if length < 2:
                break
            i = rng.randrange(length - 1)
            data[i], data[i + 1] = data[i + 1], data[i]
        return data
    if shape == "sawtooth":
        tooth = max(2, int(length ** 0.5))
        return [(tooth - 1 - i % tooth) if (i // tooth) % 2 else i % tooth
                for i in range(length)]
    raise ValueError(f"Unknown input shape {shape!r}; expected one of {', '.join(SHAPES)}")


def run_single_case(case_id: int, shape: str, length: int, seed: int,
                    brute_force_limit: int) -> Dict[str, Any]:
    """
    Runs every registered counter on its own copy of one input.
    """
    rng = random.Random(seed)
    base = generate_input(shape, length, rng)

    result = {
        "case_id": case_id,
        "shape": shape,
        "length": length,
    }

    counts = {}
    for name, counter in COUNTERS.items():
        if name == "brute_force" and length > brute_force_limit:
            result[f"{name}_time"] = None
            result[f"{name}_inversions"] = None
            continue
        data = list(base)
        start_time = time.perf_counter()
        counts[name] = counter(data)
        result[f"{name}_time"] = time.perf_counter() - start_time
        result[f"{name}_inversions"] = counts[name]

    report = natural_merge_sort.count_with_report(list(base))
    result["initial_runs"] = report.initial_runs
    result["merge_passes"] = report.merge_passes
    result["agree"] = len(set(counts.values())) == 1
    return result


def run_benchmark(shapes, lengths, repeats, seed=0, brute_force_limit=2000):
    """
    Run every (shape, length) configuration `repeats` times.
    Returns a flat list of result rows.
    """
    results = []
    total = len(shapes) * len(lengths) * repeats
    case_id = 0
    for shape in shapes:
        for length in lengths:
            for r in range(repeats):
                case_id += 1
                print(f"  [{case_id}/{total}] {shape} n={length} run {r+1}/{repeats} ...", end="\r")
                results.append(run_single_case(case_id, shape, length, seed + case_id,
                                               brute_force_limit))
    print()
    return results


def summarize(results: List[Dict[str, Any]]) -> Dict[str, Dict[str, float]]:
    """
    Average time per counter per input shape (seconds).
    """
    summary = {}
    for shape in dict.fromkeys(r["shape"] for r in results):
        rows = [r for r in results if r["shape"] == shape]
        summary[shape] = {}
        for name in COUNTERS:
            times = [r[f"{name}_time"] for r in rows if r[f"{name}_time"] is not None]
            summary[shape][name] = sum(times) / len(times) if times else None
    return summary


def main(argv=None):
    parser = argparse.ArgumentParser(description="Benchmark inversion counters")
    parser.add_argument("--shapes", nargs="+", default=list(SHAPES), choices=SHAPES,
                        help="Input shapes to generate")
    parser.add_argument("--lengths", nargs="+", type=int, default=[100, 1000, 10000],
                        help="Input lengths")
    parser.add_argument("--repeats", type=int, default=3, help="Runs per configuration")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    parser.add_argument("--brute-force-limit", type=int, default=2000,
                        help="Skip the quadratic counter above this length")
    parser.add_argument("--output", type=str, default="benchmark_results.csv", help="Output CSV file")

    args = parser.parse_args(argv)

    # Benchmarks must not pay for debug output
    natural_merge_sort.DEBUG_MODE = False

    print(f"Starting Benchmark: shapes={args.shapes}, lengths={args.lengths}, repeats={args.repeats}")
    results = run_benchmark(args.shapes, args.lengths, args.repeats,
                            args.seed, args.brute_force_limit)

    disagreements = [r for r in results if not r["agree"]]
    print(f"Benchmark Complete!")
    print(f"Cases where counters disagreed: {len(disagreements)}/{len(results)}")

    # Save to CSV
    keys = results[0].keys()
    with open(args.output, "w", newline="") as f:
        dict_writer = csv.DictWriter(f, fieldnames=keys)
        dict_writer.writeheader()
        dict_writer.writerows(results)

    print(f"Results saved to {args.output}")

    # Print Summary Table
    print("\nAverage time per counter (s):")
    header = f"{'Shape':<14} | " + " | ".join(f"{name:<12}" for name in COUNTERS)
    print(header)
    print("-" * len(header))
    for shape, times in summarize(results).items():
        cells = " | ".join(f"{t:>12.5f}" if t is not None else f"{'skipped':>12}"
                           for t in times.values())
        print(f"{shape:<14} | {cells}")

    return 1 if disagreements else 0


if __name__ == "__main__":
    sys.exit(main())
