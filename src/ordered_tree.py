from collections import deque
from typing import Deque, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

T = TypeVar('T')


class UnderflowError(ValueError):
    pass


class RotationError(ValueError):
    pass


class OrderedTree(Generic[T]):
    class Node:
        def __init__(
            self,
            value: T,
            left: Optional['OrderedTree.Node'] = None,
            right: Optional['OrderedTree.Node'] = None,
        ) -> None:
            self.value: T = value
            self.left: Optional['OrderedTree.Node'] = left
            self.right: Optional['OrderedTree.Node'] = right

    def __init__(self, values: Optional[Iterable[T]] = None) -> None:
        self._root: Optional[OrderedTree.Node] = None
        if values is not None:
            for value in values:
                self.insert(value)

    def _locate(self, value: T) -> Tuple[Optional[Node], Optional[Node]]:
        parent: Optional[OrderedTree.Node] = None
        node = self._root
        while node is not None:
            if value < node.value:
                parent, node = node, node.left
            elif value > node.value:
                parent, node = node, node.right
            else:
                break
        return parent, node

    def _replace(self, parent: Optional[Node], node: Node, subtree: Optional[Node]) -> None:
        # Store the rebuilt subtree in the slot that held ``node``.
        if parent is None:
            self._root = subtree
        elif parent.left is node:
            parent.left = subtree
        else:
            parent.right = subtree

    def insert(self, value: T) -> None:
        if self._root is None:
            self._root = OrderedTree.Node(value)
            return

        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = OrderedTree.Node(value)
                    return
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = OrderedTree.Node(value)
                    return
                node = node.right
            else:
                return

    def _splice(self, node: Node) -> Optional[Node]:
        return node.left if node.left is not None else node.right

    def remove(self, value: T) -> None:
        parent, node = self._locate(value)
        if node is None:
            return

        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.value = successor.value
            self._replace(successor_parent, successor, self._splice(successor))
        else:
            self._replace(parent, node, self._splice(node))

    def _find_min(self, node: Node) -> Node:
        while node.left is not None:
            node = node.left
        return node

    def _find_max(self, node: Node) -> Node:
        while node.right is not None:
            node = node.right
        return node

    def find_min(self) -> T:
        if self._root is None:
            raise UnderflowError("find_min from empty tree")
        return self._find_min(self._root).value

    def find_max(self) -> T:
        if self._root is None:
            raise UnderflowError("find_max from empty tree")
        return self._find_max(self._root).value

    def contains(self, value: T) -> bool:
        return self._locate(value)[1] is not None

    def is_empty(self) -> bool:
        return self._root is None

    def make_empty(self) -> None:
        self._root = None

    def node_count(self) -> int:
        return sum(1 for _ in self.pre_order())

    def is_full(self) -> bool:
        if self._root is None:
            return True
        stack: List[OrderedTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            if (node.left is None) != (node.right is None):
                return False
            if node.left is not None:
                stack.append(node.left)
                stack.append(node.right)
        return True

    def height(self) -> int:
        """Edges on the longest root-to-leaf path; -1 for an empty tree."""
        return sum(1 for _ in self.level_order()) - 1

    def _matches(
        self,
        other: 'OrderedTree[T]',
        compare_values: bool,
        mirrored: bool,
    ) -> bool:
        stack: List[Tuple[Optional[OrderedTree.Node], Optional[OrderedTree.Node]]] = [
            (self._root, other._root)
        ]
        while stack:
            a, b = stack.pop()
            if a is None or b is None:
                if a is not b:
                    return False
                continue
            if compare_values and a.value != b.value:
                return False
            if mirrored:
                stack.append((a.left, b.right))
                stack.append((a.right, b.left))
            else:
                stack.append((a.left, b.left))
                stack.append((a.right, b.right))
        return True

    def compare_structure(self, other: 'OrderedTree[T]') -> bool:
        return self._matches(other, compare_values=False, mirrored=False)

    def equals(self, other: 'OrderedTree[T]') -> bool:
        return self._matches(other, compare_values=True, mirrored=False)

    def is_mirror(self, other: 'OrderedTree[T]') -> bool:
        return self._matches(other, compare_values=True, mirrored=True)

    def _clone(self, mirrored: bool) -> 'OrderedTree[T]':
        clone: OrderedTree[T] = OrderedTree()
        if self._root is None:
            return clone

        clone._root = OrderedTree.Node(self._root.value)
        stack: List[Tuple[OrderedTree.Node, OrderedTree.Node]] = [(self._root, clone._root)]
        while stack:
            source, target = stack.pop()
            left, right = (source.right, source.left) if mirrored else (source.left, source.right)
            if left is not None:
                target.left = OrderedTree.Node(left.value)
                stack.append((left, target.left))
            if right is not None:
                target.right = OrderedTree.Node(right.value)
                stack.append((right, target.right))
        return clone

    def copy(self) -> 'OrderedTree[T]':
        return self._clone(mirrored=False)

    def mirror(self) -> 'OrderedTree[T]':
        """
        Return a new tree that is the left/right reflection of this one.

        The result stores its elements in descending in-order, so it is not a
        search tree under the element ordering. Use it for comparison and
        traversal only; insert, remove and contains assume ascending order.
        """
        return self._clone(mirrored=True)

    def _left_rotate(self, x: Node) -> Node:
        y = x.right
        if y is None:
            raise RotationError(f"cannot rotate {x.value!r} left: no right child")
        t2 = y.left

        y.left = x
        x.right = t2

        return y

    def _right_rotate(self, y: Node) -> Node:
        x = y.left
        if x is None:
            raise RotationError(f"cannot rotate {y.value!r} right: no left child")
        t2 = x.right

        x.right = y
        y.left = t2

        return x

    def rotate_left(self, key: T) -> None:
        """
        Promote the right child of the node holding ``key`` into its place.

        Does nothing when ``key`` is absent. Raises RotationError, leaving
        the tree untouched, when that node has no right child.
        """
        parent, node = self._locate(key)
        if node is not None:
            self._replace(parent, node, self._left_rotate(node))

    def rotate_right(self, key: T) -> None:
        parent, node = self._locate(key)
        if node is not None:
            self._replace(parent, node, self._right_rotate(node))

    def in_order(self) -> Iterator[T]:
        stack: List[OrderedTree.Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def pre_order(self) -> Iterator[T]:
        if self._root is None:
            return
        stack: List[OrderedTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            yield node.value
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def post_order(self) -> Iterator[T]:
        # root-right-left, reversed.
        result: List[T] = []
        if self._root is not None:
            stack: List[OrderedTree.Node] = [self._root]
            while stack:
                node = stack.pop()
                result.append(node.value)
                if node.left is not None:
                    stack.append(node.left)
                if node.right is not None:
                    stack.append(node.right)
        return reversed(result)

    def level_order(self) -> Iterator[List[T]]:
        if self._root is None:
            return
        queue: Deque[OrderedTree.Node] = deque([self._root])
        while queue:
            level: List[T] = []
            for _ in range(len(queue)):
                node = queue.popleft()
                level.append(node.value)
                if node.left is not None:
                    queue.append(node.left)
                if node.right is not None:
                    queue.append(node.right)
            yield level

    def __len__(self) -> int:
        return self.node_count()

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        return self.in_order()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedTree):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"OrderedTree({list(self.in_order())})"

    def __str__(self) -> str:
        return f"OrderedTree(size={self.node_count()}, height={self.height()})"
