"""
AVL Set Benchmark -- Height growth and direct-vs-fold cost comparison.

Prints text tables for:
- tree height against the AVL bound for sorted and shuffled inputs
- membership by order-guided search vs membership by fold
- size by direct recursion vs size by fold

Run with ``python -m avl_set.benchmark``.
"""

import time
from typing import Callable, Dict, List

import numpy as np

from .operations import from_list, member, member_by_fold, size, size_by_fold
from .tree import Tree, height

SEED = 42
SIZES = [10, 100, 1000, 5000]
N_RUNS = 5
N_PROBES = 50

# Worst-case AVL height is about 1.44 * log2(n + 2).
AVL_HEIGHT_FACTOR = 1.44


def avl_height_bound(n: int) -> float:
    return AVL_HEIGHT_FACTOR * float(np.log2(n + 2))


def measure_heights(sizes: List[int], seed: int = SEED) -> List[Dict[str, float]]:
    """Height of trees built from sorted and from shuffled inputs of each size."""
    rng = np.random.default_rng(seed)
    rows = []
    for n in sizes:
        sorted_tree = from_list(range(n))
        shuffled_tree = from_list(rng.permutation(n).tolist())
        rows.append({
            "n": n,
            "sorted": height(sorted_tree),
            "shuffled": height(shuffled_tree),
            "bound": avl_height_bound(n),
        })
    return rows


def time_call(fn: Callable[[], object], n_runs: int = N_RUNS) -> float:
    """Median wall-clock time of ``fn`` in milliseconds."""
    fn()
    runs = []
    for _ in range(n_runs):
        t0 = time.perf_counter()
        fn()
        runs.append(time.perf_counter() - t0)
    return float(np.median(runs)) * 1000


def _probes(tree_size: int, rng: np.random.Generator) -> List[int]:
    # Half hits, half misses.
    hits = rng.integers(0, tree_size, N_PROBES // 2)
    misses = rng.integers(tree_size, 2 * tree_size, N_PROBES - N_PROBES // 2)
    return np.concatenate([hits, misses]).tolist()


def compare_member_styles(
    sizes: List[int],
    seed: int = SEED,
    n_runs: int = N_RUNS,
) -> List[Dict[str, float]]:
    rng = np.random.default_rng(seed)
    rows = []
    for n in sizes:
        tree: Tree = from_list(rng.permutation(n).tolist())
        probes = _probes(n, rng)

        def direct() -> List[bool]:
            return [member(p, tree) for p in probes]

        def by_fold() -> List[bool]:
            return [member_by_fold(p, tree) for p in probes]

        if direct() != by_fold():
            raise RuntimeError(f"member and member_by_fold disagree at n={n}")

        t_direct = time_call(direct, n_runs)
        t_fold = time_call(by_fold, n_runs)
        rows.append({
            "n": n,
            "direct_ms": t_direct,
            "fold_ms": t_fold,
            "ratio": t_fold / t_direct if t_direct > 0 else float("inf"),
        })
    return rows


def compare_size_styles(
    sizes: List[int],
    seed: int = SEED,
    n_runs: int = N_RUNS,
) -> List[Dict[str, float]]:
    rng = np.random.default_rng(seed)
    rows = []
    for n in sizes:
        tree: Tree = from_list(rng.permutation(n).tolist())

        if size(tree) != size_by_fold(tree):
            raise RuntimeError(f"size and size_by_fold disagree at n={n}")

        t_direct = time_call(lambda: size(tree), n_runs)
        t_fold = time_call(lambda: size_by_fold(tree), n_runs)
        rows.append({
            "n": n,
            "direct_ms": t_direct,
            "fold_ms": t_fold,
            "ratio": t_fold / t_direct if t_direct > 0 else float("inf"),
        })
    return rows


# ---------------------------------------------------------------------------
# Example 1: Height Growth
# ---------------------------------------------------------------------------
def example_1_height_growth():
    """Sorted input is the worst case for a plain BST; AVL keeps it logarithmic."""
    print("=" * 60)
    print("Example 1: Height Growth")
    print("=" * 60)

    print(f"\n  {'n':>8} {'Sorted':>8} {'Shuffled':>10} {'Bound':>8}")
    print(f"  {'-'*38}")
    for row in measure_heights(SIZES):
        print(f"  {row['n']:>8} {row['sorted']:>8} {row['shuffled']:>10} {row['bound']:>8.2f}")


# ---------------------------------------------------------------------------
# Example 2: Membership, Search vs Fold
# ---------------------------------------------------------------------------
def example_2_member_styles():
    """Fold cannot prune by order, so membership by fold grows linearly."""
    print("\n" + "=" * 60)
    print("Example 2: Membership -- Search vs Fold")
    print("=" * 60)

    print(f"\n  {N_PROBES} probes per size, median of {N_RUNS} runs")
    print(f"\n  {'n':>8} {'Search (ms)':>14} {'Fold (ms)':>12} {'Ratio':>10}")
    print(f"  {'-'*48}")
    for row in compare_member_styles(SIZES):
        print(f"  {row['n']:>8} {row['direct_ms']:>14.3f} {row['fold_ms']:>12.3f} {row['ratio']:>9.1f}x")


# ---------------------------------------------------------------------------
# Example 3: Size, Recursion vs Fold
# ---------------------------------------------------------------------------
def example_3_size_styles():
    """Both styles visit every node once; the ratio should stay roughly flat."""
    print("\n" + "=" * 60)
    print("Example 3: Size -- Recursion vs Fold")
    print("=" * 60)

    print(f"\n  {'n':>8} {'Direct (ms)':>14} {'Fold (ms)':>12} {'Ratio':>10}")
    print(f"  {'-'*48}")
    for row in compare_size_styles(SIZES):
        print(f"  {row['n']:>8} {row['direct_ms']:>14.3f} {row['fold_ms']:>12.3f} {row['ratio']:>9.2f}x")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    print("AVL Set Benchmark")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print(f"Sizes: {SIZES}")
    print()

    example_1_height_growth()
    example_2_member_styles()
    example_3_size_styles()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print("=" * 60)


if __name__ == "__main__":
    main()
