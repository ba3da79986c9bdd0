"""Binary search tree that is only rebalanced on request.

Insert and delete keep the ordering invariant but never restore balance;
``rebalance`` flattens the tree in order and rebuilds it from the midpoints.
Walks over the tree use loops with explicit stacks, so a degenerate chain of
any length can still be searched, traversed and rebalanced.
"""

from collections import deque
from typing import Any, Callable, Deque, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

T = TypeVar('T')

_ROOT: Any = object()


class Node(Generic[T]):
    def __init__(self, value: T) -> None:
        self.value: T = value
        self.left: Optional['Node[T]'] = None
        self.right: Optional['Node[T]'] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


def _require_callable(callback: Any) -> None:
    if not callable(callback):
        raise TypeError(f"callback must be callable, got {type(callback).__name__}")


class Tree(Generic[T]):
    def __init__(self, values: Iterable[T] = ()) -> None:
        ordered: List[T] = []
        for value in sorted(values):
            if not ordered or ordered[-1] < value:
                ordered.append(value)
        self.root: Optional[Node[T]] = self.build_tree(ordered, 0, len(ordered) - 1)
        self._size: int = len(ordered)

    def build_tree(self, values: List[T], start: int, end: int) -> Optional[Node[T]]:
        if start > end:
            return None

        mid = (start + end) // 2
        node = Node(values[mid])
        node.left = self.build_tree(values, start, mid - 1)
        node.right = self.build_tree(values, mid + 1, end)
        return node

    # --- mutation ---

    def _insert(self, node: Optional[Node[T]], value: T) -> Node[T]:
        if node is None:
            self._size += 1
            return Node(value)

        current = node
        while True:
            if value < current.value:
                if current.left is None:
                    current.left = Node(value)
                    self._size += 1
                    return node
                current = current.left
            elif value > current.value:
                if current.right is None:
                    current.right = Node(value)
                    self._size += 1
                    return node
                current = current.right
            else:
                return node

    def insert(self, value: T) -> None:
        self.root = self._insert(self.root, value)

    insert_value = insert

    def find_next(self, node: Node[T]) -> Optional[Node[T]]:
        """Leftmost node of ``node``'s right subtree, or None without one."""
        current = node.right
        while current is not None and current.left is not None:
            current = current.left
        return current

    def _delete(self, node: Optional[Node[T]], value: T) -> Optional[Node[T]]:
        parent: Optional[Node[T]] = None
        current = node
        while current is not None:
            if value < current.value:
                parent, current = current, current.left
            elif value > current.value:
                parent, current = current, current.right
            else:
                break

        if current is None:
            return node

        if current.left is not None and current.right is not None:
            successor = self.find_next(current)
            assert successor is not None
            current.value = successor.value
            # the successor has no left child, so this call does not recurse again
            current.right = self._delete(current.right, successor.value)
            return node

        self._size -= 1
        replacement = current.right if current.left is None else current.left
        if parent is None:
            return replacement
        if parent.left is current:
            parent.left = replacement
        else:
            parent.right = replacement
        return node

    def delete(self, value: T) -> None:
        self.root = self._delete(self.root, value)

    delete_item = delete

    def rebalance(self) -> None:
        values = self.in_order()
        self.root = self.build_tree(values, 0, len(values) - 1)
        self._size = len(values)

    # --- search ---

    def _find(self, node: Optional[Node[T]], value: T) -> Optional[Node[T]]:
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return node
        return None

    def find(self, value: T) -> Optional[Node[T]]:
        return self._find(self.root, value)

    find_value = find

    def contains(self, value: T) -> bool:
        return self.find(value) is not None

    # --- traversals ---

    def level_order_for_each(self, callback: Callable[[Node[T]], Any]) -> None:
        _require_callable(callback)

        queue: Deque[Node[T]] = deque()
        if self.root is not None:
            queue.append(self.root)

        while queue:
            node = queue.popleft()
            callback(node)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)

    def in_order_for_each(self, callback: Callable[[Node[T]], Any]) -> None:
        _require_callable(callback)

        stack: List[Node[T]] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            callback(node)
            node = node.right

    def pre_order_for_each(self, callback: Callable[[Node[T]], Any]) -> None:
        _require_callable(callback)

        if self.root is None:
            return
        stack: List[Node[T]] = [self.root]
        while stack:
            node = stack.pop()
            callback(node)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def post_order_for_each(self, callback: Callable[[Node[T]], Any]) -> None:
        _require_callable(callback)

        if self.root is None:
            return
        # root-right-left order, reversed
        visited: List[Node[T]] = []
        stack: List[Node[T]] = [self.root]
        while stack:
            node = stack.pop()
            visited.append(node)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        for node in reversed(visited):
            callback(node)

    def level_order(self) -> List[T]:
        result: List[T] = []
        self.level_order_for_each(lambda node: result.append(node.value))
        return result

    def in_order(self) -> List[T]:
        result: List[T] = []
        self.in_order_for_each(lambda node: result.append(node.value))
        return result

    def pre_order(self) -> List[T]:
        result: List[T] = []
        self.pre_order_for_each(lambda node: result.append(node.value))
        return result

    def post_order(self) -> List[T]:
        result: List[T] = []
        self.post_order_for_each(lambda node: result.append(node.value))
        return result

    # --- shape queries ---

    def height_of(self, node: Optional[Node[T]]) -> int:
        height = -1
        level = [node] if node is not None else []
        while level:
            height += 1
            level = [child for n in level for child in (n.left, n.right) if child is not None]
        return height

    def height(self, value: T) -> int:
        node = self.find(value)
        if node is None:
            return -1
        return self.height_of(node)

    def depth_from(self, root: Optional[Node[T]], target: Node[T]) -> int:
        if root is None:
            return -1

        stack: List[Tuple[Node[T], int]] = [(root, 0)]
        while stack:
            node, depth = stack.pop()
            if node is target:
                return depth
            if node.right is not None:
                stack.append((node.right, depth + 1))
            if node.left is not None:
                stack.append((node.left, depth + 1))
        return -1

    def depth(self, value: T) -> int:
        node = self.find(value)
        if node is None:
            return -1
        return self.depth_from(self.root, node)

    def _is_balanced(self, node: Optional[Node[T]]) -> bool:
        stack = [node] if node is not None else []
        while stack:
            current = stack.pop()
            if abs(self.height_of(current.left) - self.height_of(current.right)) > 1:
                return False
            if current.right is not None:
                stack.append(current.right)
            if current.left is not None:
                stack.append(current.left)
        return True

    def is_balanced(self, node: Optional[Node[T]] = _ROOT) -> bool:
        """Check the AVL height condition below ``node`` (the root by default)."""
        return self._is_balanced(self.root if node is _ROOT else node)

    # --- container protocol ---

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self.root is None

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        return iter(self.in_order())

    def __repr__(self) -> str:
        return f"Tree({self.in_order()})"

    def __str__(self) -> str:
        return f"Tree(size={self._size}, height={self.height_of(self.root)})"
