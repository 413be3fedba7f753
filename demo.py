"""
Ordered Tree Demo — Worked examples and shape statistics.

Generates:
- viz/*.png — Individual visualization files
- report.pdf — Comprehensive PDF report
"""

import os
import sys

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages
from pathlib import Path

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))

from ordered_tree import OrderedTree
from tree_errors import ElementNotFoundError, EmptyTreeError

SEED = 42
SIZES = [10, 50, 100, 250, 500, 1000]
TRIALS = 20

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)


def build(values) -> OrderedTree:
    tree: OrderedTree = OrderedTree()
    for v in values:
        tree.insert(int(v))
    return tree


def example_1_basic_operations():
    """Insert, look up and remove on a small tree."""
    print("=" * 60)
    print("Example 1: Basic Operations")
    print("=" * 60)

    tree = build([5, 3, 8, 1, 4, 7, 9])
    print(f"Inserted 5, 3, 8, 1, 4, 7, 9")
    print(f"In-order:    {tree.in_order()}")
    print(f"Level-order: {tree.level_order()}")
    print(f"min = {tree.find_min()}, max = {tree.find_max()}, height = {tree.height()}")

    removed = tree.remove(5)
    print(f"remove(5) -> {removed}; new root = {tree.get_root_element()}")
    print(f"In-order after removal: {tree.in_order()}")

    try:
        tree.remove(42)
    except ElementNotFoundError as e:
        print(f"remove(42) raised ElementNotFoundError({e.target})")

    empty: OrderedTree = OrderedTree()
    try:
        empty.find_min()
    except EmptyTreeError as e:
        print(f"find_min() on empty tree raised EmptyTreeError: {e}")


def example_2_duplicates():
    """Duplicates chain to the right and leave one at a time."""
    print("\n" + "=" * 60)
    print("Example 2: Duplicates")
    print("=" * 60)

    tree = build([5, 3, 5, 8, 5, 1])
    print(f"In-order: {tree.in_order()}  (size {tree.size()})")
    tree.remove(5)
    print(f"After one remove(5):  {tree.in_order()}")
    count = tree.remove_all(5)
    print(f"remove_all(5) removed {count}; in-order: {tree.in_order()}")


def example_3_height_vs_insertion_order():
    """Compare tree height for sorted and shuffled insertion."""
    print("\n" + "=" * 60)
    print("Example 3: Height vs Insertion Order")
    print("=" * 60)

    rng = np.random.default_rng(SEED)
    sorted_heights = []
    shuffled_mean = []
    shuffled_std = []

    for n in SIZES:
        sorted_heights.append(build(range(n)).height())
        heights = np.array([build(rng.permutation(n)).height() for _ in range(TRIALS)])
        shuffled_mean.append(heights.mean())
        shuffled_std.append(heights.std())
        print(f"n = {n:5d}: sorted height = {sorted_heights[-1]:5d}, "
              f"shuffled height = {heights.mean():6.1f} ± {heights.std():.1f}")

    sizes = np.array(SIZES)
    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    axes[0].plot(sizes, sorted_heights, "o-", color="firebrick", linewidth=2, label="Sorted input")
    axes[0].errorbar(sizes, shuffled_mean, yerr=shuffled_std, fmt="s-", color="steelblue",
                     linewidth=2, capsize=4, label="Shuffled input")
    axes[0].set_xlabel("Number of elements")
    axes[0].set_ylabel("Height")
    axes[0].set_title("Tree Height")
    axes[0].legend()
    axes[0].grid(True, alpha=0.3)

    axes[1].plot(sizes, shuffled_mean, "s-", color="steelblue", linewidth=2, label="Shuffled input")
    axes[1].plot(sizes, np.log2(sizes + 1), "g--", linewidth=2, label="log2(n + 1)")
    axes[1].set_xscale("log")
    axes[1].set_xlabel("Number of elements (log scale)")
    axes[1].set_ylabel("Height")
    axes[1].set_title("Shuffled Input vs Perfectly Balanced")
    axes[1].legend()
    axes[1].grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_height.png", dpi=150)
    plt.close(fig)

    return fig, (sorted_heights, shuffled_mean)


def example_4_drain():
    """Track size and height while draining with remove_min."""
    print("\n" + "=" * 60)
    print("Example 4: Draining with remove_min")
    print("=" * 60)

    rng = np.random.default_rng(SEED)
    n = 300
    tree = build(rng.integers(0, 100, size=n))

    sizes = [tree.size()]
    heights = [tree.height()]
    drained = []
    while not tree.is_empty():
        drained.append(tree.remove_min())
        sizes.append(tree.size())
        heights.append(tree.height())

    is_sorted = bool(np.all(np.diff(drained) >= 0))
    print(f"Drained {len(drained)} elements; output non-decreasing: {is_sorted}")

    fig, ax = plt.subplots(figsize=(8, 6))
    ax.plot(sizes, color="steelblue", linewidth=2, label="Size")
    ax.plot(heights, color="darkorange", linewidth=2, label="Height")
    ax.set_xlabel("remove_min calls")
    ax.set_ylabel("Nodes")
    ax.set_title("Size and Height During Drain")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "04_drain.png", dpi=150)
    plt.close(fig)

    return fig, drained


def generate_pdf_report(figures_data):
    pdf_path = Path(__file__).parent / "report.pdf"

    with PdfPages(pdf_path) as pdf:
        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.95, "Ordered Tree", fontsize=24, ha="center", fontweight="bold")
        summary_text = """
Summary

• Unbalanced binary search tree with duplicates routed right
• Removal replaces two-child nodes with their inorder successor

Key Findings:
  1. Sorted input degenerates the tree: height equals n
  2. Shuffled input keeps height within a small factor of log2(n)
  3. Draining with remove_min yields a non-decreasing sequence
"""
        fig.text(0.1, 0.85, summary_text, fontsize=12, ha="left", va="top",
                 fontfamily="monospace", linespacing=1.5)
        pdf.savefig(fig)
        plt.close(fig)

        for title, image_name in figures_data:
            page = plt.figure(figsize=(11, 8.5))
            page.text(0.5, 0.98, title, fontsize=14, ha="center", fontweight="bold")
            img = plt.imread(VIZ_DIR / image_name)
            ax = page.add_axes([0.05, 0.05, 0.9, 0.88])
            ax.imshow(img)
            ax.axis("off")
            pdf.savefig(page)
            plt.close(page)

    print(f"PDF report saved to: {pdf_path}")
    return pdf_path


def main():
    print("\n" + "#" * 60)
    print("#" + " " * 21 + "ORDERED TREE DEMO" + " " * 20 + "#")
    print("#" * 60)
    print(f"\nRandom seed: {SEED}")
    print(f"Output directory: {VIZ_DIR}")

    example_1_basic_operations()
    example_2_duplicates()
    example_3_height_vs_insertion_order()
    example_4_drain()

    generate_pdf_report([
        ("Example 3: Height vs Insertion Order", "03_height.png"),
        ("Example 4: Drain", "04_drain.png"),
    ])

    print("\n" + "=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)
    print(f"\nGenerated files:")
    for f in sorted(VIZ_DIR.glob("*.png")):
        print(f"  - {f.relative_to(VIZ_DIR.parent)}")
    print(f"  - report.pdf")


if __name__ == "__main__":
    main()
