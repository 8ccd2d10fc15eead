"""
Source adapters.

The reporter only needs one capability from a source: an ordered,
finite sequence of child nodes of the same capability.

Domain objects are never modified to provide it. They are wrapped:

    WrappedNode(run, lambda r: r.readings)

and the wrapper can be re-pointed at another child collection
(branching) without touching the wrapped value:

    node.branch(lambda r: r.calibrations)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, List, Optional, Sequence


class Node(ABC):
    """A source value exposing ordered children of the same kind."""

    @abstractmethod
    def children(self) -> Sequence["Node"]:
        """Return child nodes in source order."""


@dataclass
class TreeNode(Node):
    """
    Plain in-memory node.

    Properties:
        value: Payload read by getters
        nodes: Child TreeNodes in order
    """

    value: Any = None
    nodes: List["TreeNode"] = field(default_factory=list)

    def children(self) -> Sequence["TreeNode"]:
        return list(self.nodes)


@dataclass
class WrappedNode(Node):
    """
    Wraps an arbitrary domain value.

    Properties:
        value: The wrapped domain value
        child_getter: value -> iterable of child domain values
            If None, the node is a leaf of the source tree.
        default_getter: Getter the yielded children are wrapped with.
            If None, child_getter is used. branch() sets it so that
            only this node walks the branched collection.
    """

    value: Any
    child_getter: Optional[Callable[[Any], Iterable[Any]]] = None
    default_getter: Optional[Callable[[Any], Iterable[Any]]] = None

    def children(self) -> Sequence["WrappedNode"]:
        if self.child_getter is None:
            return []
        getter = self.default_getter or self.child_getter
        return [WrappedNode(child, getter) for child in self.child_getter(self.value)]

    def branch(self, child_getter: Callable[[Any], Iterable[Any]]) -> "WrappedNode":
        """
        Return a wrapper on the same value that walks another child collection.

        The children it yields walk their default collection again.
        """
        return WrappedNode(self.value, child_getter, self.default_getter or self.child_getter)
