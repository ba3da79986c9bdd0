"""
Binary Search Tree Demo — build, unbalance, rebalance, and visualize.

Generates:
- viz/*.png — Tree drawings before and after rebalancing
- report.pdf — All drawings bundled into one report
"""

import sys
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).parent / "src"))

from binary_search_tree import Tree
from random_values import random_array
from tree_display import layout_tree, pretty_print

SEED = 42
ARRAY_SIZE = 15
EXTRA_VALUES = [150, 200, 250, 400]

VIZ_DIR = Path(__file__).parent / "viz"
REPORT_PATH = Path(__file__).parent / "report.pdf"

COLORS = {
    "balanced": "#27ae60",
    "unbalanced": "#e74c3c",
    "edge": "gray",
}

all_figures = []


def save_fig(fig, name, title=None):
    fig.savefig(VIZ_DIR / name, dpi=150, bbox_inches="tight")
    all_figures.append({"fig_path": VIZ_DIR / name, "title": title or name})
    plt.close(fig)


def draw_tree(tree, title):
    positions = layout_tree(tree)
    balanced = tree.is_balanced()
    color = COLORS["balanced"] if balanced else COLORS["unbalanced"]

    width = max(6, 0.6 * len(positions))
    height = max(3, 1.2 * (tree.height_of(tree.root) + 1))
    fig, ax = plt.subplots(figsize=(width, height))

    def draw_edges(node):
        if node is None:
            return
        x, y = positions[node.value]
        for child in (node.left, node.right):
            if child is not None:
                cx, cy = positions[child.value]
                ax.plot([x, cx], [y, cy], color=COLORS["edge"], linewidth=1.5, zorder=1)
                draw_edges(child)

    draw_edges(tree.root)
    for value, (x, y) in positions.items():
        ax.scatter(x, y, s=600, color=color, edgecolors="black", zorder=2)
        ax.text(x, y, str(value), ha="center", va="center", fontsize=9,
                color="white", fontweight="bold", zorder=3)

    ax.set_title(f"{title}  (size={tree.size()}, height={tree.height_of(tree.root)}, "
                 f"balanced={balanced})")
    ax.axis("off")
    fig.tight_layout()
    return fig


def print_traversals(tree):
    print(f"Level order: {tree.level_order()}")
    print(f"In order:    {tree.in_order()}")
    print(f"Pre order:   {tree.pre_order()}")
    print(f"Post order:  {tree.post_order()}")


def example_1_build():
    print("=" * 60)
    print("Example 1: Build from a random array")
    print("=" * 60)

    values = random_array(ARRAY_SIZE, seed=SEED)
    tree = Tree(values)

    print(f"Initial random array: {values}")
    print(f"Tree created: {tree}")
    print(f"Is tree balanced? {tree.is_balanced()}")
    print_traversals(tree)

    save_fig(draw_tree(tree, "Built from sorted unique values"), "01_built.png",
             "Example 1: Built Tree")
    return tree


def example_2_unbalance(tree):
    print("\n" + "=" * 60)
    print(f"Example 2: Insert {EXTRA_VALUES}")
    print("=" * 60)

    for value in EXTRA_VALUES:
        tree.insert(value)

    print(f"Tree after inserts: {tree}")
    print(f"Is tree balanced? {tree.is_balanced()}")
    print(f"Depth of {EXTRA_VALUES[-1]}: {tree.depth(EXTRA_VALUES[-1])}")

    save_fig(draw_tree(tree, "After inserting large values"), "02_unbalanced.png",
             "Example 2: Unbalanced Tree")
    return tree


def example_3_rebalance(tree):
    print("\n" + "=" * 60)
    print("Example 3: Rebalance")
    print("=" * 60)

    tree.rebalance()

    print(f"Tree rebalanced: {tree}")
    print(f"Is tree balanced? {tree.is_balanced()}")
    print_traversals(tree)
    print()
    pretty_print(tree.root)

    save_fig(draw_tree(tree, "After rebalance"), "03_rebalanced.png",
             "Example 3: Rebalanced Tree")
    return tree


def generate_pdf_report():
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    with PdfPages(REPORT_PATH) as pdf:
        fig = plt.figure(figsize=(10, 7.5))
        fig.text(0.5, 0.60, "Binary Search Tree", ha="center", va="center",
                 fontsize=32, fontweight="bold")
        fig.text(0.5, 0.48, "Build, Unbalance, Rebalance", ha="center", va="center",
                 fontsize=20, color="gray")
        fig.text(0.5, 0.35, f"Seed: {SEED}", ha="center", va="center",
                 fontsize=12, color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        for entry in all_figures:
            page = plt.figure(figsize=(11, 8.5))
            page.text(0.5, 0.96, entry["title"], fontsize=14, ha="center", fontweight="bold")
            ax = page.add_axes([0.05, 0.05, 0.9, 0.86])
            ax.imshow(plt.imread(entry["fig_path"]))
            ax.axis("off")
            pdf.savefig(page)
            plt.close(page)

    print(f"PDF report saved to: {REPORT_PATH}")
    return REPORT_PATH


def main():
    VIZ_DIR.mkdir(exist_ok=True)

    print("\n" + "#" * 60)
    print("#" + " " * 18 + "BINARY SEARCH TREE DEMO" + " " * 17 + "#")
    print("#" * 60)
    print(f"\nRandom seed: {SEED}")
    print(f"Output directory: {VIZ_DIR}\n")

    tree = example_1_build()
    example_2_unbalance(tree)
    example_3_rebalance(tree)

    generate_pdf_report()

    print("\n" + "=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)
    print("\nGenerated files:")
    for f in sorted(VIZ_DIR.glob("*.png")):
        print(f"  - {f.relative_to(VIZ_DIR.parent)}")
    print("  - report.pdf")


if __name__ == "__main__":
    main()
