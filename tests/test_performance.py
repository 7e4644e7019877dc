import os
import sys
import gc
import time
import pytest
try:
    import psutil
    PSUTIL_AVAILABLE = True
except ImportError:
    PSUTIL_AVAILABLE = False

# Ensure repository root is on path
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

import lazy_sequence as ls
from lazy_sequence import LazyIterator


class TestLazyIteratorPerformance:
    """Performance tests for LazyIterator and the free combinators."""

    def test_lazy_iterator_large_dataset_performance(self):
        """Test LazyIterator performance with large datasets."""
        dataset_size = 100_000

        start_time = time.time()

        result = list(
            LazyIterator(range(dataset_size))
            .filter(lambda x: x % 10 == 0)  # Keep every 10th element
            .map(lambda x: x * x)           # Square them
            .filter(lambda x: x % 100 == 0) # Keep every 100th squared
            .take(1000)                     # Take first 1000
        )

        processing_time = time.time() - start_time

        assert len(result) == 1000
        assert processing_time < 5.0, f"Processing too slow: {processing_time:.3f}s"

        assert result[0] == 0
        assert result[1] == 100

        print(f"\nLazyIterator Large Dataset Performance:")
        print(f"  Dataset size: {dataset_size:,}")
        print(f"  Results: {len(result)}")
        print(f"  Processing time: {processing_time:.3f}s")

    def test_lazy_iterator_infinite_source(self):
        """Infinite sources are safe as long as something bounds the traversal."""
        def infinite_sequence():
            i = 0
            while True:
                yield i
                i += 1

        start_time = time.time()

        result = list(
            LazyIterator(infinite_sequence())
            .filter(lambda x: x % 1000 == 0)  # Every 1000th number
            .map(lambda x: x // 1000)         # Normalize
            .take(100)                        # Only take 100
        )

        processing_time = time.time() - start_time

        assert result == list(range(100))
        assert processing_time < 2.0, f"Should be fast: {processing_time:.3f}s"

    def test_generate_bounded_by_take_while(self):
        """generate() without a count stops where take_while stops."""
        result = ls.take_while(ls.generate(lambda i: i * i), lambda v: v < 10_000).to_list()
        assert len(result) == 100
        assert result[-1] == 99 * 99

    def test_nested_flat_map_throughput(self):
        """Deep flat_map nesting stays linear in the number of yielded elements."""
        size = 200
        start_time = time.time()

        grid = ls.flat_map(range(size), lambda row: ls.map(range(size), lambda col: row * size + col))
        total = ls.sum(grid)

        processing_time = time.time() - start_time

        assert total == sum(range(size * size))
        assert processing_time < 5.0, f"Processing too slow: {processing_time:.3f}s"

    def test_reduction_on_large_sequence(self):
        """Reductions stream through the input."""
        dataset_size = 200_000
        assert ls.sum(ls.generate(lambda i: i, dataset_size)) == sum(range(dataset_size))
        assert ls.max(ls.map(range(dataset_size), lambda x: -x)) == 0
        assert ls.min(ls.map(range(dataset_size), lambda x: -x)) == -(dataset_size - 1)

    @pytest.mark.skipif(not PSUTIL_AVAILABLE, reason="psutil not available")
    def test_streaming_memory_stays_flat(self):
        """Folding a long generated sequence does not materialize it."""
        process = psutil.Process()

        def get_memory_mb():
            gc.collect()
            return process.memory_info().rss / 1024 / 1024

        baseline = get_memory_mb()

        count = ls.fold(
            ls.filter(ls.generate(lambda i: ("x" * 64, i), 300_000), lambda v: v[1] % 2 == 0),
            lambda acc, _: acc + 1,
            0,
        )
        growth = get_memory_mb() - baseline

        assert count == 150_000
        assert growth < 30, f"Memory grew by {growth:.1f}MB"

        print(f"\nStreaming memory growth: {growth:.2f}MB")
