"""An organisation chart where every position has at most two subordinates."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator, Optional


class PositionNotFoundError(LookupError):
    """Raised when a named position does not exist in the tree."""


class TooManySubordinatesError(ValueError):
    """Raised when a position already has two subordinates."""


@dataclass
class OrgNode:
    """A position and its (up to two) direct subordinates."""

    position: str
    first: Optional[OrgNode] = None
    second: Optional[OrgNode] = None

    def children(self) -> Iterator[OrgNode]:
        if self.first is not None:
            yield self.first
        if self.second is not None:
            yield self.second


class OrgTree:
    """A binary tree of positions rooted at a single top position."""

    def __init__(self, root_position: str) -> None:
        self.root = OrgNode(root_position)

    def find(self, value: str) -> Optional[OrgNode]:
        """Return the first node (in pre-order) holding ``value``, or ``None``."""
        return next((node for node in self._pre_order_nodes(self.root) if node.position == value), None)

    def add_subordinate(self, manager: str, subordinate: str) -> OrgNode:
        """Attach ``subordinate`` under ``manager`` and return the new node."""
        manager_node = self.find(manager)
        if manager_node is None:
            raise PositionNotFoundError(f"No position named {manager}")
        if manager_node.first is not None and manager_node.second is not None:
            raise TooManySubordinatesError(f"{manager} already has 2 subordinates.")
        node = OrgNode(subordinate)
        if manager_node.first is None:
            manager_node.first = node
        else:
            manager_node.second = node
        return node

    @classmethod
    def _pre_order_nodes(cls, node: Optional[OrgNode]) -> Iterator[OrgNode]:
        if node is None:
            return
        yield node
        yield from cls._pre_order_nodes(node.first)
        yield from cls._pre_order_nodes(node.second)

    @classmethod
    def _in_order_nodes(cls, node: Optional[OrgNode]) -> Iterator[OrgNode]:
        if node is None:
            return
        yield from cls._in_order_nodes(node.first)
        yield node
        yield from cls._in_order_nodes(node.second)

    @classmethod
    def _post_order_nodes(cls, node: Optional[OrgNode]) -> Iterator[OrgNode]:
        if node is None:
            return
        yield from cls._post_order_nodes(node.first)
        yield from cls._post_order_nodes(node.second)
        yield node

    def pre_order(self) -> list[str]:
        return [node.position for node in self._pre_order_nodes(self.root)]

    def in_order(self) -> list[str]:
        return [node.position for node in self._in_order_nodes(self.root)]

    def post_order(self) -> list[str]:
        return [node.position for node in self._post_order_nodes(self.root)]

    def level_order(self) -> list[list[str]]:
        """Positions grouped by depth, left to right within each level."""
        levels: list[list[str]] = []
        queue = deque([self.root])
        while queue:
            level = [queue.popleft() for _ in range(len(queue))]
            levels.append([node.position for node in level])
            for node in level:
                queue.extend(node.children())
        return levels