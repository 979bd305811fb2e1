#!/usr/bin/env python3
"""
Performance Test Script for the Red-Black Tree containers

Tests:
1. Sequential insert throughput
2. Random insert throughput
3. Random lookup throughput
4. Range query performance
5. Neighbour query performance
6. Random delete throughput
7. Mixed workload (insert/lookup/delete)

Metrics:
- Operations per second (ops/sec)
- Latency (p50, p95, p99)

Usage:
    python benchmark.py          # full run
    python benchmark.py quick    # smaller sizes
"""

import logging
import os
import random
import statistics
import sys
import time

from llrb import Direction, RedBlackTree, SortedMap

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


class PerformanceTest:
    def __init__(self, seed: int = 42):
        self.rng = random.Random(seed)
        self.tree: RedBlackTree = RedBlackTree()

    def reset(self) -> None:
        self.tree = RedBlackTree()

    @staticmethod
    def generate_key(i: int, prefix: str = "key") -> str:
        """Generate a key with zero-padding for sorting."""
        return f"{prefix}_{i:010d}"

    @staticmethod
    def calculate_stats(latencies: list[int]) -> dict:
        """Calculate latency statistics (latencies in nanoseconds)."""
        if not latencies:
            return {}

        sorted_latencies = sorted(latencies)
        return {
            "min_us": min(latencies) / 1_000,
            "max_us": max(latencies) / 1_000,
            "mean_us": statistics.mean(latencies) / 1_000,
            "median_us": statistics.median(latencies) / 1_000,
            "p95_us": sorted_latencies[int(len(sorted_latencies) * 0.95)] / 1_000,
            "p99_us": sorted_latencies[int(len(sorted_latencies) * 0.99)] / 1_000,
        }

    def _timed(self, name: str, operations, count: int) -> dict:
        """Run each zero-argument callable and collect per-call latencies."""
        print(f"\n{'='*60}")
        print(f"{name}: {count} operations")
        print(f"{'='*60}")

        latencies = []
        start_time = time.perf_counter_ns()
        for operation in operations:
            op_start = time.perf_counter_ns()
            operation()
            latencies.append(time.perf_counter_ns() - op_start)
        elapsed = (time.perf_counter_ns() - start_time) / 1_000_000_000

        results = {
            "test": name,
            "count": count,
            "elapsed_sec": elapsed,
            "ops_per_sec": count / elapsed if elapsed else float("inf"),
            **self.calculate_stats(latencies),
        }
        self.print_results(results)
        return results

    def test_sequential_insert(self, count: int) -> dict:
        """Insert keys in ascending order (worst case for an unbalanced BST)."""
        self.reset()
        keys = [self.generate_key(i) for i in range(count)]
        return self._timed(
            "Sequential Insert",
            (lambda k=k: self.tree.add(k, k) for k in keys),
            count,
        )

    def test_random_insert(self, count: int) -> dict:
        """Insert keys in random order."""
        self.reset()
        keys = [self.generate_key(i) for i in range(count)]
        self.rng.shuffle(keys)
        return self._timed(
            "Random Insert",
            (lambda k=k: self.tree.add(k, k) for k in keys),
            count,
        )

    def test_random_lookup(self, count: int, key_range: int) -> dict:
        """Look up random keys, about half of which exist."""
        keys = [self.generate_key(self.rng.randrange(key_range * 2)) for _ in range(count)]
        return self._timed(
            "Random Lookup",
            (lambda k=k: self.tree.find(k) for k in keys),
            count,
        )

    def test_range_query(self, num_queries: int, range_size: int, total_keys: int) -> dict:
        """Walk bounded ranges in both directions."""
        starts = [self.rng.randrange(max(total_keys - range_size, 1)) for _ in range(num_queries)]

        def query(start: int, direction: Direction) -> int:
            lower = self.generate_key(start)
            upper = self.generate_key(start + range_size - 1)
            return sum(1 for _ in self.tree.iterator(lower, upper, direction))

        directions = [Direction.ASCENDING, Direction.DESCENDING]
        return self._timed(
            "Range Query",
            (
                lambda s=s, d=directions[i % 2]: query(s, d)
                for i, s in enumerate(starts)
            ),
            num_queries,
        )

    def test_neighbour_query(self, count: int, key_range: int) -> dict:
        """Sibling and nearest queries on probes that may or may not be stored."""
        probes = [self.generate_key(self.rng.randrange(key_range)) + "~" for _ in range(count)]
        return self._timed(
            "Neighbour Query",
            (
                lambda p=p, i=i: (self.tree.sibling_nodes(p) if i % 2 else self.tree.nearest_nodes(p))
                for i, p in enumerate(probes)
            ),
            count,
        )

    def test_random_delete(self, count: int) -> dict:
        """Delete every stored key in random order."""
        keys = [node.key for node in self.tree]
        self.rng.shuffle(keys)
        results = self._timed(
            "Random Delete",
            (lambda k=k: self.tree.delete(k) for k in keys[:count]),
            min(count, len(keys)),
        )
        self.tree.validate()
        return results

    def test_mixed_workload(self, count: int, key_range: int) -> dict:
        """Interleave upserts, lookups and deletes on a SortedMap."""
        mapping = SortedMap()

        def operation(i: int) -> None:
            key = self.generate_key(self.rng.randrange(key_range))
            roll = i % 10
            if roll < 4:
                mapping[key] = i
            elif roll < 8:
                mapping.get(key)
            else:
                mapping.discard(key)

        results = self._timed(
            "Mixed Workload",
            (lambda i=i: operation(i) for i in range(count)),
            count,
        )
        logger.info(f"Mixed workload left {len(mapping)} entries")
        return results

    @staticmethod
    def print_results(results: dict):
        """Print test results in a formatted way."""
        print(f"\nResults:")
        print(f"  Operations: {results['count']}")
        print(f"  Elapsed: {results['elapsed_sec']:.2f}s")
        print(f"  Throughput: {results['ops_per_sec']:.2f} ops/sec")

        if 'median_us' in results:
            print(f"  Latency (p50/p95/p99): {results['median_us']:.2f}/{results['p95_us']:.2f}/{results['p99_us']:.2f} us")


def run_tests(count: int) -> None:
    test = PerformanceTest()

    print(f"\n{'#'*60}")
    print(f"# Red-Black Tree Performance Test ({count} keys)")
    print(f"{'#'*60}")

    test.test_sequential_insert(count)
    test.test_random_insert(count)
    test.test_random_lookup(count, key_range=count)
    test.test_range_query(num_queries=max(count // 100, 1), range_size=100, total_keys=count)
    test.test_neighbour_query(count, key_range=count)
    test.test_random_delete(count)
    test.test_mixed_workload(count, key_range=count)

    black_height = test.tree.validate()
    logger.info(f"Tree valid after run: {test.tree.size()} keys, black height {black_height}")


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == "quick":
        run_tests(10_000)
    else:
        run_tests(200_000)
