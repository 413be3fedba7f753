from collections import deque
from typing import Any, Deque, Generic, Iterator, List, Optional, TypeVar

from tree_errors import EmptyTreeError

T = TypeVar('T')

NO_ELEMENT: Any = object()


class LinkedBinaryTree(Generic[T]):
    class Node:
        def __init__(self, element: T) -> None:
            self.element: T = element
            self.left: Optional['LinkedBinaryTree.Node'] = None
            self.right: Optional['LinkedBinaryTree.Node'] = None

    def __init__(
        self,
        element: T = NO_ELEMENT,
        left: Optional['LinkedBinaryTree[T]'] = None,
        right: Optional['LinkedBinaryTree[T]'] = None,
    ) -> None:
        self._root: Optional[LinkedBinaryTree.Node] = None
        if element is NO_ELEMENT:
            if left is not None or right is not None:
                raise ValueError("subtrees need a root element")
            return

        self._root = LinkedBinaryTree.Node(element)
        # The new tree takes the donors' nodes; a node never has two owners.
        if left is not None:
            self._root.left = left._root
            left._root = None
        if right is not None:
            self._root.right = right._root
            right._root = None

    def get_root_element(self) -> T:
        if self._root is None:
            raise EmptyTreeError("root of empty tree")
        return self._root.element

    def is_empty(self) -> bool:
        return self._root is None

    def size(self) -> int:
        count = 0
        for _ in self._walk_pre_order():
            count += 1
        return count

    def height(self) -> int:
        """Number of nodes on the longest path from the root to a leaf."""
        if self._root is None:
            return 0
        levels = 0
        queue: Deque[LinkedBinaryTree.Node] = deque([self._root])
        while queue:
            levels += 1
            for _ in range(len(queue)):
                node = queue.popleft()
                if node.left is not None:
                    queue.append(node.left)
                if node.right is not None:
                    queue.append(node.right)
        return levels

    def find(self, target: T) -> Optional[T]:
        """Returns the stored element equal to target, or None.

        A stored None is indistinguishable from a miss here; use contains.
        """
        node = self._find_node(target)
        return node.element if node is not None else None

    def contains(self, target: T) -> bool:
        return self._find_node(target) is not None

    def _find_node(self, target: T) -> Optional[Node]:
        # Visits every node, O(n). Ordered subclasses descend instead.
        for node in self._walk_pre_order():
            if node.element == target:
                return node
        return None

    def in_order(self) -> List[T]:
        result: List[T] = []
        stack: List[LinkedBinaryTree.Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.element)
            node = node.right
        return result

    def pre_order(self) -> List[T]:
        return [node.element for node in self._walk_pre_order()]

    def post_order(self) -> List[T]:
        result: List[T] = []
        if self._root is None:
            return result
        stack: List[LinkedBinaryTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node.element)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def level_order(self) -> List[T]:
        result: List[T] = []
        if self._root is None:
            return result
        queue: Deque[LinkedBinaryTree.Node] = deque([self._root])
        while queue:
            node = queue.popleft()
            result.append(node.element)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return result

    def _walk_pre_order(self) -> Iterator[Node]:
        if self._root is None:
            return
        stack: List[LinkedBinaryTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, target: T) -> bool:
        return self.contains(target)

    def __iter__(self) -> Iterator[T]:
        return iter(self.in_order())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.level_order()})"

    def __str__(self) -> str:
        return f"{type(self).__name__}(size={self.size()})"
