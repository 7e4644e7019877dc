import argparse
import logging
import os
import random
import sys
import time
from typing import Dict, Any, List

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import lazy_sequence as ls
from lazy_sequence import LazyIterator, keyed

logger = logging.getLogger("demo")


def generate_large_dataset(size: int = 10000) -> List[Dict[str, Any]]:
    """Generate a large dataset for the pipeline demonstration"""
    categories = ["electronics", "clothing", "books", "home", "sports", "automotive", "furniture"]
    regions = ["north", "south", "east", "west", "central"]

    data = []
    for i in range(size):
        data.append({
            "id": i,
            "category": random.choice(categories),
            "region": random.choice(regions),
            "value": random.uniform(10.0, 2000.0),
            "quantity": random.randint(1, 50),
            "customer_id": f"customer_{random.randint(1, 1000)}",
        })
    return data


def demo_pipeline(count: int):
    """Demonstrate chained lazy stages over a large dataset"""
    print("\n" + "="*60)
    print("🔄 LAZY PIPELINE DEMONSTRATION")
    print("="*60)

    print(f"📊 Generating dataset ({count:,} records)...")
    dataset = generate_large_dataset(count)

    pipeline = (LazyIterator(dataset)
        .filter(lambda x: x['value'] > 100)
        .filter(lambda x: x['category'] in ['electronics', 'automotive'])
        .map(lambda x: {**x, 'total_value': x['value'] * x['quantity']})
        .filter(lambda x: x['total_value'] > 500)
        .uniq(lambda x: x['customer_id'])
        .take(20)
    )
    print("✅ Lazy pipeline created (nothing processed yet)")

    start_time = time.time()
    rows = pipeline.to_list()
    elapsed = time.time() - start_time

    print(f"🚀 Materialized {len(rows)} rows in {elapsed:.4f} seconds")
    for entry in ls.take(ls.entries(rows), 3):
        row = entry.value
        print(f"   #{entry.key}: {row['category']} - ${row['total_value']:.2f} ({row['customer_id']})")

    squares = (LazyIterator(range(1, 1001))
        .filter(lambda x: x % 2 == 0)
        .map(lambda x: x * x)
        .sum())
    print(f"🔢 Sum of squares of even numbers 1-1000: {squares}")
    print(f"🔢 Running totals of 1..5: {ls.scan(range(1, 6), lambda a, v: a + v, 0).to_list()}")


def demo_infinite():
    """Demonstrate unbounded generation bounded by take/zip/take_while"""
    print("\n" + "="*60)
    print("♾️  INFINITE SEQUENCE DEMONSTRATION")
    print("="*60)

    powers = ls.generate(lambda i: 2 ** i)
    print(f"   First 10 powers of two: {ls.take(powers, 10).to_list()}")
    print(f"   Powers below 1000: {ls.take_while(powers, lambda v: v < 1000).to_list()}")

    labels = ls.zip(ls.generate(lambda i: i + 1), ["alpha", "beta", "gamma"])
    print(f"   Numbered labels: {labels.to_list()}")
    print(f"   Separator line: {ls.join(ls.repeat('-', 12), '')}")


def demo_keyed(count: int):
    """Demonstrate grouping sequences into keyed collections"""
    print("\n" + "="*60)
    print("🗂️  KEYED COLLECTION DEMONSTRATION")
    print("="*60)

    dataset = generate_large_dataset(count)
    pairs = ls.map(dataset, lambda row: keyed.name_value(row['region'], row['quantity']))
    by_region = keyed.group_by(pairs, lambda a, b: a + b)

    for name, quantity in keyed.entries(by_region):
        print(f"   {name:<8} {quantity:>8,}")
    print(f"   Busiest region total: {ls.max(keyed.values(by_region)):,}")

    latest = keyed.to_dict(ls.map(dataset, lambda row: (row['category'], row['id'])))
    print(f"   Last record id per category: {latest}")


def demo_equality():
    """Demonstrate sequence comparison helpers"""
    print("\n" + "="*60)
    print("⚖️  EQUALITY DEMONSTRATION")
    print("="*60)

    evens = ls.filter(range(10), lambda v: v % 2 == 0)
    print(f"   evens == [0, 2, 4, 6, 8]: {ls.is_equal(evens, [0, 2, 4, 6, 8])}")
    print(f"   evens == [0, 2, 4]: {ls.is_equal(evens, [0, 2, 4])}")
    print(f"   case-insensitive: {ls.is_equal(['A', 'b'], ['a', 'B'], lambda a, b: a.lower() == b.lower())}")
    print(f"   None vs None: {ls.is_equal(None, None)}")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Walkthrough of the lazy sequence combinators")
    parser.add_argument(
        "--mode",
        choices=["all", "pipeline", "infinite", "keyed", "equality"],
        default="all",
        help="Demo mode to run (default: all)"
    )
    parser.add_argument("--count", type=int, default=10000, help="Number of records to generate")
    parser.add_argument(
        "--log-level", default=os.getenv("LOG_LEVEL", "INFO"), help="Logging level (default: %(default)s)"
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(message)s")

    try:
        if args.mode in ("all", "pipeline"):
            demo_pipeline(args.count)
        if args.mode in ("all", "infinite"):
            demo_infinite()
        if args.mode in ("all", "keyed"):
            demo_keyed(args.count)
        if args.mode in ("all", "equality"):
            demo_equality()
    except Exception:
        logger.exception("Demo execution failed")
        raise


if __name__ == "__main__":
    main()
