"""An unbalanced binary search tree of comparable values."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterator, Optional

logger = logging.getLogger(__name__)


@dataclass
class BSTNode:
    data: Any
    left: Optional[BSTNode] = None
    right: Optional[BSTNode] = None


class BinarySearchTree:
    """Binary search tree; equal values go to the right subtree."""

    def __init__(self) -> None:
        self.root: Optional[BSTNode] = None

    def insert(self, value: Any) -> None:
        node = BSTNode(value)
        if self.root is None:
            self.root = node
            return
        current = self.root
        while True:
            if value < current.data:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def _walk(self, value: Any) -> Iterator[BSTNode]:
        current = self.root
        while current is not None:
            yield current
            if current.data == value:
                return
            if value < current.data:
                logger.debug("Going left from %s", current.data)
                current = current.left
            else:
                logger.debug("Going right from %s", current.data)
                current = current.right

    def find(self, value: Any) -> Optional[BSTNode]:
        """Return the node holding ``value``, or ``None``."""
        last = None
        for last in self._walk(value):
            pass
        if last is not None and last.data == value:
            logger.debug("Found %s", value)
            return last
        return None

    def search_path(self, value: Any) -> list[Any]:
        """Values of the nodes compared while searching for ``value``."""
        return [node.data for node in self._walk(value)]

    def __contains__(self, value: Any) -> bool:
        return self.find(value) is not None

    def inorder(self) -> list[Any]:
        """All values in ascending order."""
        result: list[Any] = []
        stack: list[BSTNode] = []
        current = self.root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            result.append(current.data)
            current = current.right
        return result

    def successor(self, start: BSTNode) -> Optional[BSTNode]:
        """Leftmost node of ``start``'s right subtree, or ``None``."""
        current = start.right
        while current is not None and current.left is not None:
            current = current.left
        return current

    def delete(self, value: Any) -> None:
        """Remove one occurrence of ``value``; a missing value is ignored."""
        self.root = self._delete(self.root, value)

    def _delete(self, start: Optional[BSTNode], value: Any) -> Optional[BSTNode]:
        if start is None:
            return None
        if value < start.data:
            start.left = self._delete(start.left, value)
        elif value > start.data:
            start.right = self._delete(start.right, value)
        else:
            if start.left is None:
                return start.right
            if start.right is None:
                return start.left
            succ = self.successor(start)
            start.data = succ.data
            start.right = self._delete(start.right, succ.data)
        return start