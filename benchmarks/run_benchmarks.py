"""
Benchmark suite for arithmos.

Compares the gcd strategies on fixed-width integers and the recursive and
iterative forms of pow.
"""

import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import argparse
import json
import platform
import time
from datetime import datetime

import numpy as np

import arithmos as ar


def _time(func, iterations):
    start = time.perf_counter()
    for _ in range(iterations):
        func()
    elapsed = time.perf_counter() - start
    return {
        "iterations": iterations,
        "total_s": elapsed,
        "per_call_us": elapsed / iterations * 1e6,
    }


class ArithmeticBenchmarks:
    """Run arithmos benchmarks and collect their results."""

    def __init__(self, output_dir="benchmark_results", iterations=2000, seed=12345):
        self.output_dir = output_dir
        self.iterations = iterations
        self.rng = np.random.default_rng(seed)
        os.makedirs(output_dir, exist_ok=True)
        self.results = {}

    def run_gcd_benchmarks(self):
        """Benchmark binary versus Euclidean gcd per integer width."""
        print("\n=== GCD Benchmarks ===")

        results = {}
        for tp in (np.uint32, np.int64, np.uint64):
            info = np.iinfo(tp)
            low = max(int(info.min) + 1, -(2 ** 62))
            high = min(int(info.max), 2 ** 62)
            pairs = [(tp(a), tp(b)) for a, b in self.rng.integers(low, high, size=(64, 2))]

            def run():
                for a, b in pairs:
                    ar.gcd(a, b)

            for strategy in ar.GcdStrategy:
                with ar.arithmetic_context(gcd_strategy=strategy):
                    stats = _time(run, max(1, self.iterations // 64))
                key = f"{tp.__name__}/{strategy.value}"
                results[key] = stats
                print(f"{key:>22}: {stats['per_call_us']:.1f} us per 64 pairs")

        self.results["gcd"] = results
        return results

    def run_pow_benchmarks(self):
        """Benchmark recursive versus iterative exponentiation."""
        print("\n=== pow Benchmarks ===")

        results = {}
        for mode in ar.RecursionMode:
            with ar.arithmetic_context(recursion=mode):
                stats = _time(lambda: ar.pow(np.float64(1.0000001), 10 ** 6), self.iterations)
            results[mode.value] = stats
            print(f"{mode.value:>22}: {stats['per_call_us']:.1f} us per call")

        self.results["pow"] = results
        return results

    def save_results(self):
        """Save all benchmark results."""
        timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")

        output = {
            "timestamp": timestamp,
            "results": self.results,
            "system_info": {
                "python": platform.python_version(),
                "numpy": np.__version__,
                "arithmos": ar.__version__,
                "machine": platform.machine(),
            },
        }

        filename = os.path.join(self.output_dir, f"benchmarks_{timestamp}.json")
        with open(filename, "w") as f:
            json.dump(output, f, indent=2, default=str)

        print(f"\nResults saved to {filename}")


def main():
    """Run all benchmarks."""
    parser = argparse.ArgumentParser(description="Run arithmos benchmarks")
    parser.add_argument(
        "--output", default="benchmark_results", help="Output directory for results"
    )
    parser.add_argument(
        "--iterations", type=int, default=2000, help="Iterations per measurement"
    )
    parser.add_argument(
        "--suite",
        nargs="+",
        choices=["gcd", "pow", "all"],
        default=["all"],
        help="Benchmark suites to run",
    )

    args = parser.parse_args()

    print("arithmos Benchmarks")
    print("===================")

    benchmarks = ArithmeticBenchmarks(args.output, args.iterations)

    suites = {
        "gcd": benchmarks.run_gcd_benchmarks,
        "pow": benchmarks.run_pow_benchmarks,
    }

    if "all" in args.suite:
        to_run = list(suites.values())
    else:
        to_run = [suites[name] for name in args.suite]

    for func in to_run:
        func()

    benchmarks.save_results()

    print("\n===================")
    print("Benchmarking complete!")


if __name__ == "__main__":
    main()
