"""Text and coordinate renderings of a binary search tree for debugging."""

import sys
from typing import Any, Dict, List, Optional, TextIO, Tuple


def pretty_print(node: Optional[Any], prefix: str = "", is_left: bool = True,
                 out: Optional[TextIO] = None) -> None:
    """
    Write the subtree rooted at ``node`` sideways, right subtree on top.

    Args:
        node: Subtree root; anything with ``value``, ``left`` and ``right``
        prefix: Connector columns inherited from the ancestors
        is_left: Whether ``node`` hangs to the left of its parent
        out: Text sink, ``sys.stdout`` when omitted
    """
    if node is None:
        return
    if out is None:
        out = sys.stdout

    if node.right is not None:
        pretty_print(node.right, prefix + ("│   " if is_left else "    "), False, out)
    out.write(f"{prefix}{'└── ' if is_left else '┌── '}{node.value}\n")
    if node.left is not None:
        pretty_print(node.left, prefix + ("    " if is_left else "│   "), True, out)


def layout_tree(tree) -> Dict[Any, Tuple[float, float]]:
    """
    Assign plot coordinates to every value in ``tree``.

    x is the value's in-order rank, so no two nodes overlap horizontally;
    y is the negated depth, so the root sits on top.
    """
    positions: Dict[Any, Tuple[float, float]] = {}
    stack: List[Tuple[Any, int]] = []
    node, depth = tree.root, 0
    while stack or node is not None:
        while node is not None:
            stack.append((node, depth))
            node, depth = node.left, depth + 1
        node, depth = stack.pop()
        positions[node.value] = (float(len(positions)), float(-depth))
        node, depth = node.right, depth + 1
    return positions
