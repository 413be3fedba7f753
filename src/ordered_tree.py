from typing import Optional, TypeVar

from linked_binary_tree import LinkedBinaryTree, NO_ELEMENT
from tree_errors import ElementNotFoundError, EmptyTreeError, InvalidElementKindError

T = TypeVar('T')

Node = LinkedBinaryTree.Node


def _is_orderable(element: object) -> bool:
    try:
        element < element
    except TypeError:
        return False
    return True


class OrderedTree(LinkedBinaryTree[T]):
    def __init__(self, element: T = NO_ELEMENT) -> None:
        if element is not NO_ELEMENT and not _is_orderable(element):
            raise InvalidElementKindError(element)
        super().__init__(element)

    def insert(self, element: T) -> None:
        if self._root is None:
            self._root = Node(element)
            return

        node = self._root
        while True:
            if element < node.element:
                if node.left is None:
                    node.left = Node(element)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = Node(element)
                    return
                node = node.right

    def _find_node(self, target: T) -> Optional[Node]:
        node = self._root
        while node is not None:
            if target < node.element:
                node = node.left
            elif target > node.element:
                node = node.right
            else:
                return node
        return None

    def remove(self, target: T) -> T:
        """Removes and returns the first element equal to target on the search path.

        Raises ElementNotFoundError when no such element exists; the tree
        is left untouched in that case.
        """
        parent: Optional[Node] = None
        node = self._root
        is_left_child = False

        while node is not None and (target < node.element or target > node.element):
            parent = node
            if target < node.element:
                node = node.left
                is_left_child = True
            else:
                node = node.right
                is_left_child = False

        if node is None:
            raise ElementNotFoundError(target)

        result = node.element
        replacement = self._replacement(node)

        if parent is None:
            # The root object stays; it takes over its replacement's payload.
            if replacement is None:
                self._root = None
            else:
                node.element = replacement.element
                node.left = replacement.left
                node.right = replacement.right
        elif is_left_child:
            parent.left = replacement
        else:
            parent.right = replacement
        return result

    def _replacement(self, node: Node) -> Optional[Node]:
        """Returns the subtree that takes node's place once node is spliced out."""
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left

        successor_parent = node
        successor = node.right
        while successor.left is not None:
            successor_parent = successor
            successor = successor.left

        successor.left = node.left
        if successor is not node.right:
            successor_parent.left = successor.right
            successor.right = node.right
        return successor

    def remove_all(self, target: T) -> int:
        """Removes every element equal to target and returns how many went.

        Raises ElementNotFoundError if target was not present at all.
        """
        self.remove(target)
        removed = 1
        try:
            while self.contains(target):
                self.remove(target)
                removed += 1
        except ElementNotFoundError:
            pass
        return removed

    def remove_min(self) -> T:
        if self._root is None:
            raise EmptyTreeError("remove_min from empty tree")

        parent: Optional[Node] = None
        node = self._root
        while node.left is not None:
            parent = node
            node = node.left

        if parent is None:
            self._root = node.right
        else:
            parent.left = node.right
        return node.element

    def remove_max(self) -> T:
        if self._root is None:
            raise EmptyTreeError("remove_max from empty tree")

        parent: Optional[Node] = None
        node = self._root
        while node.right is not None:
            parent = node
            node = node.right

        if parent is None:
            self._root = node.left
        else:
            parent.right = node.left
        return node.element

    def find_min(self) -> T:
        if self._root is None:
            raise EmptyTreeError("find_min from empty tree")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.element

    def find_max(self) -> T:
        if self._root is None:
            raise EmptyTreeError("find_max from empty tree")
        node = self._root
        while node.right is not None:
            node = node.right
        return node.element

    def copy(self) -> 'OrderedTree[T]':
        clone: OrderedTree[T] = OrderedTree()
        for element in self.pre_order():
            clone.insert(element)
        return clone

    def __repr__(self) -> str:
        return f"OrderedTree({self.in_order()})"
