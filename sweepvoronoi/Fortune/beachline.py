import math
from typing import List, Optional

from sweepvoronoi.Fortune.geometry import breakpoint_x


class BeachLineError(RuntimeError):
    """The beach-line tree is corrupted; the sweep cannot continue."""


class Node:
    """
    Element of the beach-line arena. A leaf is an arc (it has a site and the
    half-edges adjoining its left and right breakpoints); an internal node is
    the breakpoint between the last arc of its left subtree and the first arc
    of its right subtree. Links are arena indices.
    """

    def __init__(self, index, site=None, parent=None):
        self.index = index
        self.site = site
        self.parent = parent
        self.left = None
        self.right = None
        self.left_edges = []
        self.right_edges = []

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self):
        if self.is_leaf():
            return f"Arc#{self.index}[{self.site}]"
        return f"Breakpoint#{self.index}"


class BeachLine:
    """
    Binary tree over the arcs currently cut by the sweep line. The in-order
    sequence of leaves is the left-to-right order of the arcs; breakpoint
    positions are never stored, they are recomputed for the current sweep y.
    """

    def __init__(self):
        self.nodes: List[Node] = []
        self.root: Optional[int] = None

    def _new_node(self, site=None, parent=None) -> Node:
        node = Node(len(self.nodes), site, parent)
        self.nodes.append(node)
        return node

    def node(self, index) -> Node:
        return self.nodes[index]

    def is_empty(self) -> bool:
        return self.root is None

    def root_node(self) -> Optional[Node]:
        return None if self.root is None else self.nodes[self.root]

    def set_root_arc(self, site) -> Node:
        if self.root is not None:
            raise BeachLineError("beach line already has a root")
        arc = self._new_node(site)
        self.root = arc.index
        return arc

    # --- traversal -------------------------------------------------------

    def first_arc(self, node: Optional[Node]) -> Optional[Node]:
        while node is not None and not node.is_leaf():
            child = node.left if node.left is not None else node.right
            node = self.nodes[child]
        return node

    def last_arc(self, node: Optional[Node]) -> Optional[Node]:
        while node is not None and not node.is_leaf():
            child = node.right if node.right is not None else node.left
            node = self.nodes[child]
        return node

    def prev_arc(self, arc: Optional[Node]) -> Optional[Node]:
        if arc is None:
            return None
        child = arc
        while child.parent is not None:
            parent = self.nodes[child.parent]
            if parent.right == child.index:
                return self.last_arc(self.nodes[parent.left])
            child = parent
        return None

    def next_arc(self, arc: Optional[Node]) -> Optional[Node]:
        if arc is None:
            return None
        child = arc
        while child.parent is not None:
            parent = self.nodes[child.parent]
            if parent.left == child.index:
                return self.first_arc(self.nodes[parent.right])
            child = parent
        return None

    def arcs(self):
        """Arcs from left to right."""
        arc = self.first_arc(self.root_node())
        while arc is not None:
            yield arc
            arc = self.next_arc(arc)

    def arc_count(self) -> int:
        return sum(1 for _ in self.arcs())

    def breakpoint_x(self, node: Node, sweep_y) -> float:
        if node.left is None or node.right is None:
            raise BeachLineError(f"breakpoint {node.index} is missing a child")
        left = self.last_arc(self.nodes[node.left])
        right = self.first_arc(self.nodes[node.right])
        return breakpoint_x(left.site, right.site, sweep_y)

    def breakpoints(self, sweep_y):
        """Breakpoint x positions from left to right."""
        positions = []
        arc = self.first_arc(self.root_node())
        nxt = self.next_arc(arc)
        while nxt is not None:
            positions.append(breakpoint_x(arc.site, nxt.site, sweep_y))
            arc, nxt = nxt, self.next_arc(nxt)
        return positions

    # --- queries and updates ----------------------------------------------

    def find_arc_above(self, site, sweep_y) -> Node:
        if self.root is None:
            raise BeachLineError(f"could not find arc above {site}: beach line is empty")

        node = self.nodes[self.root]
        while not node.is_leaf():
            x = self.breakpoint_x(node, sweep_y)
            if math.isnan(x):
                raise BeachLineError(f"could not find arc above {site} at {node} - this should never happen")
            node = self.nodes[node.left if site.x < x else node.right]

        if node.site is None:
            raise BeachLineError(f"leaf {node.index} has no site")
        return node

    def insert_site(self, arc: Node, site):
        """
        Split ``arc`` by the arc of ``site``. The leaf turns into the
        breakpoint old|new with subtree [old_left, [new, old_right]].
        Returns (old_left, new, old_right).
        """
        if not arc.is_leaf() or arc.site is None:
            raise BeachLineError(f"cannot split non-arc node {arc.index}")

        left = self._new_node(arc.site, parent=arc.index)
        inner = self._new_node(parent=arc.index)
        new = self._new_node(site, parent=inner.index)
        right = self._new_node(arc.site, parent=inner.index)

        inner.left, inner.right = new.index, right.index
        arc.left, arc.right = left.index, inner.index

        left.left_edges = list(arc.left_edges)
        right.right_edges = list(arc.right_edges)

        arc.site = None
        arc.left_edges = []
        arc.right_edges = []
        return left, new, right

    def insert_beside(self, arc: Node, site) -> Node:
        """
        Put the arc of ``site`` next to ``arc`` with one breakpoint between
        them; used while every arc still lies on the first sweep row.
        """
        if not arc.is_leaf():
            raise BeachLineError(f"cannot insert beside non-arc node {arc.index}")

        joint = self._new_node(parent=arc.parent)
        new = self._new_node(site, parent=joint.index)
        self._replace_child(arc.parent, arc.index, joint.index)
        arc.parent = joint.index

        if site.x < arc.site.x:
            joint.left, joint.right = new.index, arc.index
        else:
            joint.left, joint.right = arc.index, new.index
        return new

    def remove_arc(self, arc: Node):
        """
        Detach ``arc`` and its parent breakpoint; the sibling subtree takes
        the parent's place.
        """
        if not arc.is_leaf():
            raise BeachLineError(f"cannot remove non-arc node {arc.index}")
        if arc.parent is None:
            self.root = None
            return

        parent = self.nodes[arc.parent]
        sibling_index = parent.right if parent.left == arc.index else parent.left
        sibling = self.nodes[sibling_index]

        sibling.parent = parent.parent
        self._replace_child(parent.parent, parent.index, sibling_index)

        arc.parent = None
        parent.parent = parent.left = parent.right = None

    def _replace_child(self, parent_index, old, new):
        if parent_index is None:
            self.root = new
            return
        parent = self.nodes[parent_index]
        if parent.left == old:
            parent.left = new
        elif parent.right == old:
            parent.right = new
        else:
            raise BeachLineError(f"node {old} is not a child of {parent_index}")

    def _describe(self, node: Optional[Node]) -> str:
        if node is None:
            return "()"
        s = ""
        if node.left is not None:
            s += self._describe(self.nodes[node.left]) + " "
        if node.is_leaf():
            s += f"[{node.site}]"
        elif node.parent is None:
            s += "<root>"
        else:
            s += "<int>"
        if node.right is not None:
            s += " " + self._describe(self.nodes[node.right])
        return "(" + s + ")"

    def __repr__(self):
        return self._describe(self.root_node())
