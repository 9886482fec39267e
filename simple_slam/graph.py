"""Model of a node-and-link diagram: nodes, links, legend and dragging."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple

Color = tuple[int, ...]
Point = tuple[int, int]

WHITE: Color = (255, 255, 255)
BLACK: Color = (0, 0, 0)

DEFAULT_NODE_SIZE: tuple[int, int] = (120, 60)
DEFAULT_LINE_WIDTH = 2
ARROW_LENGTH = 15
ARROW_ANGLE = math.pi / 6


def _half_toward_zero(value: int) -> int:
    return value // 2 if value >= 0 else -((-value) // 2)


class NodeShape(Enum):
    RECTANGLE = "rectangle"
    ELLIPSE = "ellipse"


class Rect(NamedTuple):
    """An integer rectangle whose right and bottom edges are inclusive."""

    left: int
    top: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.left + self.width - 1

    @property
    def bottom(self) -> int:
        return self.top + self.height - 1

    @property
    def center(self) -> Point:
        return (
            _half_toward_zero(self.left + self.right),
            _half_toward_zero(self.top + self.bottom),
        )

    def contains(self, x: int, y: int) -> bool:
        return self.left <= x <= self.right and self.top <= y <= self.bottom


@dataclass
class Node:
    """A box or ellipse centred on ``position`` and labelled with ``text``."""

    id: str
    text: str
    position: Point
    shape: NodeShape = NodeShape.RECTANGLE
    color: Color = WHITE
    size: tuple[int, int] = DEFAULT_NODE_SIZE

    def bounding_rect(self) -> Rect:
        x, y = self.position
        width, height = self.size
        return Rect(
            x - _half_toward_zero(width),
            y - _half_toward_zero(height),
            width,
            height,
        )

    def contains(self, x: int, y: int) -> bool:
        """Whether the point lies inside the node's outline."""
        rect = self.bounding_rect()
        if self.shape is NodeShape.RECTANGLE:
            return rect.contains(x, y)
        cx, cy = rect.center
        a = rect.width / 2.0
        b = rect.height / 2.0
        if a == 0 or b == 0:
            return False
        dx = x - cx
        dy = y - cy
        return (dx * dx) / (a * a) + (dy * dy) / (b * b) <= 1.0


@dataclass
class Link:
    """A directed, optionally labelled connection between two nodes."""

    from_id: str
    to_id: str
    text: str = ""
    color: Color = BLACK
    line_width: int = DEFAULT_LINE_WIDTH


@dataclass
class LegendItem:
    color: Color
    text: str


@dataclass
class Graph:
    """Nodes, links and legend entries, plus the state of a node drag."""

    nodes: list[Node] = field(default_factory=list)
    links: list[Link] = field(default_factory=list)
    legend: list[LegendItem] = field(default_factory=list)
    selected: Node | None = None
    dragging: bool = False
    _last_pos: Point = (0, 0)

    def add_node(self, node: Node) -> Node:
        self.nodes.append(node)
        return node

    def remove_node(self, node_id: str) -> bool:
        """Remove the first node with ``node_id`` and every link touching it."""
        node = self.node(node_id)
        if node is None:
            return False
        self.nodes.remove(node)
        self.links = [
            link
            for link in self.links
            if link.from_id != node_id and link.to_id != node_id
        ]
        return True

    def node(self, node_id: str) -> Node | None:
        """The first node with ``node_id``, or None."""
        return next((node for node in self.nodes if node.id == node_id), None)

    def add_link(self, link: Link) -> Link:
        self.links.append(link)
        return link

    def remove_link(self, from_id: str, to_id: str) -> bool:
        """Remove the first link from ``from_id`` to ``to_id``."""
        link = self.link(from_id, to_id)
        if link is None:
            return False
        self.links.remove(link)
        return True

    def link(self, from_id: str, to_id: str) -> Link | None:
        """The first link from ``from_id`` to ``to_id``, or None."""
        return next(
            (
                link
                for link in self.links
                if link.from_id == from_id and link.to_id == to_id
            ),
            None,
        )

    def add_legend(self, color: Color, text: str) -> LegendItem:
        item = LegendItem(color, text)
        self.legend.append(item)
        return item

    def clear_legend(self) -> None:
        self.legend.clear()

    def clear(self) -> None:
        self.nodes.clear()
        self.links.clear()
        self.legend.clear()
        self.selected = None
        self.dragging = False

    def press(self, x: int, y: int) -> Node | None:
        """Start dragging the first node under the point, if any."""
        for node in self.nodes:
            if node.contains(x, y):
                self.selected = node
                self.dragging = True
                self._last_pos = (x, y)
                return node
        return None

    def move(self, x: int, y: int) -> bool:
        """Move the dragged node by the pointer's motion; False if none."""
        if not (self.dragging and self.selected is not None):
            return False
        last_x, last_y = self._last_pos
        node_x, node_y = self.selected.position
        self.selected.position = (node_x + x - last_x, node_y + y - last_y)
        self._last_pos = (x, y)
        return True

    def release(self) -> None:
        self.dragging = False
        self.selected = None


def connection_point(node: Node, target: Point) -> Point:
    """Where a line from ``target`` ends near ``node``, leaving room for an arrow."""
    cx, cy = node.position
    rect = node.bounding_rect()
    dir_x = cx - target[0]
    dir_y = cy - target[1]
    if abs(dir_x) + abs(dir_y) == 0:
        return (cx, cy)
    length = math.hypot(dir_x, dir_y)
    dx = dir_x / length
    dy = dir_y / length

    if node.shape is NodeShape.RECTANGLE:
        half_w = rect.width / 2.0
        half_h = rect.height / 2.0
        angle = abs(math.atan2(abs(dy), abs(dx)))
        offset = math.cos(angle) * half_w + math.sin(angle) * half_h + ARROW_LENGTH
    else:
        a = rect.width / 2.0
        b = rect.height / 2.0
        offset = (a * b) / math.sqrt(b * b * dx * dx + a * a * dy * dy) + ARROW_LENGTH

    return (int(cx - offset * dx), int(cy - offset * dy))


def arrow_head(start: Point, end: Point) -> list[Point]:
    """The three corners of an arrow head pointing at ``end``."""
    angle = math.atan2(end[1] - start[1], end[0] - start[0])
    corners = [end]
    for side in (angle - ARROW_ANGLE, angle + ARROW_ANGLE):
        corners.append(
            (
                int(end[0] - ARROW_LENGTH * math.cos(side)),
                int(end[1] - ARROW_LENGTH * math.sin(side)),
            )
        )
    return corners