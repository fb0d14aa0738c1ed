# core/composite.py

"""
Composite display tree.

A tree is made of `Group` nodes, which hold an ordered list of child nodes, and `Leaf`
nodes, which hold only a name. Trees are transient: they are built for a single display
request (e.g., the list of top-scoring students) and are never persisted.

Rendering is returned as text; printing is left to the caller.
"""

from __future__ import annotations

from core.errors import StructuralError

DEPTH_MARKER = "-"


class Component:

    def __init__(self, name: str):
        self._name: str = name

    # === properties ===

    @property
    def name(self) -> str:
        return self._name

    # === tree operations ===

    def add(self, component: Component) -> None:
        raise NotImplementedError

    def remove(self, component: Component) -> None:
        raise NotImplementedError

    def display(self, depth: int = 0) -> str:
        return f"{DEPTH_MARKER * depth}{self._name}"


class Group(Component):

    def __init__(self, name: str, children: list[Component] | None = None):
        super().__init__(name)
        self._children: list[Component] = list(children or [])

    @property
    def children(self) -> list[Component]:
        return self._children.copy()

    def add(self, component: Component) -> None:
        self._children.append(component)

    def remove(self, component: Component) -> None:
        # removes the first structurally equal child, if any
        try:
            self._children.remove(component)
        except ValueError:
            pass

    def display(self, depth: int = 0) -> str:
        """
        Renders this group and all of its descendants, one node per line.

        Args:
            depth (int, optional): Number of depth markers prefixed to this group's name. Defaults to 0.

        Returns:
            The rendered subtree. Each child is rendered with `depth + 2` markers.
        """
        lines = [super().display(depth)]
        lines.extend(child.display(depth + 2) for child in self._children)

        return "\n".join(lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Group):
            return NotImplemented
        return self._name == other._name and self._children == other._children

    def __repr__(self) -> str:
        return f"Group({self._name!r}, {self._children!r})"


class Leaf(Component):

    def add(self, component: Component) -> None:
        raise StructuralError("Cannot attach children to a leaf.")

    def remove(self, component: Component) -> None:
        raise StructuralError("Cannot remove children from a leaf.")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Leaf):
            return NotImplemented
        return self._name == other._name

    def __repr__(self) -> str:
        return f"Leaf({self._name!r})"
