"""
Indexed Min-Heap Demo — Scenarios, build cost, and removal cost.

Generates:
- viz/*.png — Individual visualization files
- report.pdf — PDF report
"""

import os
import sys
import time
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from indexed_min_heap import IndexedMinHeap
from array_queue import ArrayQueue

SEED = 42
SIZES = [1_000, 2_000, 4_000, 8_000, 16_000, 32_000]
REPEATS = 3

VIZ_DIR = Path(__file__).parent / "viz"
REPORT_PATH = Path(__file__).parent / "report.pdf"

COLORS = {
    "from_array": "#3498db",
    "from_iterable": "#e74c3c",
    "remove": "#27ae60",
    "linear scan": "#e67e22",
}


def _best_of(fn, repeats=REPEATS):
    best = float("inf")
    for _ in range(repeats):
        start = time.perf_counter()
        fn()
        best = min(best, time.perf_counter() - start)
    return best


def example_1_scenarios():
    """Walk through the round-trip, removal and empty scenarios."""
    print("=" * 60)
    print("Example 1: Basic Scenarios")
    print("=" * 60)

    values = [5, 3, 8, 1, 9, 2]
    heap = IndexedMinHeap()
    for v in values:
        heap.add(v)
    print(f"  after adding {values}: {heap!r}")
    drained = [heap.poll() for _ in range(len(values))]
    print(f"  polled: {drained}")

    heap = IndexedMinHeap.from_iterable(values)
    print(f"  remove(8) -> {heap.remove(8)}, contains(8) -> {heap.contains(8)}")
    print(f"  drain after removal: {list(heap)}")
    print(f"  valid heap: {heap.is_min_heap()}")

    empty = IndexedMinHeap()
    print(f"  empty heap: peek={empty.peek()}, poll={empty.poll()}, size={empty.size()}")

    names = ArrayQueue("Charles")
    names.enqueue("Erick")
    names.dequeue()
    names.dequeue()
    print(f"  queue dequeue past empty -> {names.dequeue()}")
    names.enqueue("Alexander")
    names.enqueue("Kane")
    print(f"  queue peek -> {names.peek()}")
    print()


def example_2_build_cost(rng):
    """Compare bottom-up heapify with repeated insertion."""
    print("=" * 60)
    print("Example 2: Build Cost — from_array vs from_iterable")
    print("=" * 60)

    heapify_times = []
    insert_times = []
    for n in SIZES:
        data = [int(v) for v in rng.permutation(n)[::-1]]
        t_heapify = _best_of(lambda: IndexedMinHeap.from_array(data))
        t_insert = _best_of(lambda: IndexedMinHeap.from_iterable(data))
        heapify_times.append(t_heapify)
        insert_times.append(t_insert)
        print(f"  n={n:>6}: from_array={t_heapify * 1e3:8.2f} ms, "
              f"from_iterable={t_insert * 1e3:8.2f} ms, "
              f"ratio={t_insert / t_heapify:5.2f}")

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.loglog(SIZES, heapify_times, "o-", color=COLORS["from_array"], linewidth=2,
              label="from_array (heapify)")
    ax.loglog(SIZES, insert_times, "s-", color=COLORS["from_iterable"], linewidth=2,
              label="from_iterable (repeated add)")
    ax.set_xlabel("n", fontsize=12)
    ax.set_ylabel("seconds (best of %d)" % REPEATS, fontsize=12)
    ax.set_title("Heap Construction Cost", fontsize=14, fontweight="bold")
    ax.legend(fontsize=11)
    ax.grid(True, alpha=0.3, which="both")
    fig.tight_layout()
    path = VIZ_DIR / "01_build_cost.png"
    fig.savefig(path, dpi=150)
    plt.close(fig)

    print()
    return [path]


def example_3_removal_cost(rng):
    """Time remove() through the position index against a linear scan."""
    print("=" * 60)
    print("Example 3: Removal Cost — Position Index vs Linear Scan")
    print("=" * 60)

    indexed_times = []
    scan_times = []
    for n in SIZES:
        data = [int(v) for v in rng.integers(0, n, size=n)]
        targets = [int(v) for v in rng.choice(data, size=200, replace=False)]

        heap = IndexedMinHeap.from_array(data)
        start = time.perf_counter()
        for t in targets:
            heap.remove(t)
        indexed_times.append((time.perf_counter() - start) / len(targets))

        heap = IndexedMinHeap.from_array(data)
        start = time.perf_counter()
        for t in targets:
            heap.to_list().index(t)
            heap.remove(t)
        scan_times.append((time.perf_counter() - start) / len(targets))

        print(f"  n={n:>6}: indexed={indexed_times[-1] * 1e6:8.2f} us, "
              f"with scan={scan_times[-1] * 1e6:8.2f} us, valid={heap.is_min_heap()}")

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.loglog(SIZES, indexed_times, "o-", color=COLORS["remove"], linewidth=2,
              label="remove() via position index")
    ax.loglog(SIZES, scan_times, "s-", color=COLORS["linear scan"], linewidth=2,
              label="linear scan + remove()")
    ax.set_xlabel("n", fontsize=12)
    ax.set_ylabel("seconds per removal", fontsize=12)
    ax.set_title("Arbitrary Removal Cost", fontsize=14, fontweight="bold")
    ax.legend(fontsize=11)
    ax.grid(True, alpha=0.3, which="both")
    fig.tight_layout()
    path = VIZ_DIR / "02_removal_cost.png"
    fig.savefig(path, dpi=150)
    plt.close(fig)

    print()
    return [path]


def generate_pdf_report(all_figures):
    """Bundle the visualizations into a PDF report."""
    print("=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    titles = [
        "Example 2: Heap Construction Cost",
        "Example 3: Arbitrary Removal Cost",
    ]

    with PdfPages(REPORT_PATH) as pdf:
        fig, ax = plt.subplots(figsize=(10, 7))
        ax.axis("off")
        ax.text(0.5, 0.6, "Indexed Min-Heap", fontsize=28, fontweight="bold",
                ha="center", va="center", transform=ax.transAxes)
        ax.text(0.5, 0.45, f"Seed: {SEED}  |  sizes {SIZES[0]}..{SIZES[-1]}",
                fontsize=11, ha="center", va="center", transform=ax.transAxes,
                color="#888888")
        pdf.savefig(fig)
        plt.close(fig)

        for fig_path, title in zip(all_figures, titles):
            if fig_path.exists():
                img = plt.imread(str(fig_path))
                fig, ax = plt.subplots(figsize=(11, 8))
                ax.imshow(img)
                ax.axis("off")
                ax.set_title(title, fontsize=14, fontweight="bold", pad=10)
                fig.tight_layout()
                pdf.savefig(fig)
                plt.close(fig)

    print(f"  Report saved to: {REPORT_PATH}")
    print()


def main():
    print()
    print("*" * 60)
    print("  INDEXED MIN-HEAP — DEMO")
    print(f"  Seed: {SEED}")
    print("*" * 60)
    print()

    VIZ_DIR.mkdir(exist_ok=True)
    rng = np.random.default_rng(SEED)

    all_figures = []
    example_1_scenarios()
    all_figures.extend(example_2_build_cost(rng))
    all_figures.extend(example_3_removal_cost(rng))

    generate_pdf_report(all_figures)

    print("=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)
    print(f"  Visualizations: {VIZ_DIR}/")
    for f in sorted(VIZ_DIR.glob("*.png")):
        print(f"    - {f.name}")
    print(f"  PDF Report:     {REPORT_PATH}")
    print()


if __name__ == "__main__":
    main()
