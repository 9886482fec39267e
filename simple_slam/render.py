"""Drawing of a node-and-link diagram onto a Pillow image."""

from __future__ import annotations

from os import PathLike
from typing import Union

from PIL import Image, ImageDraw, ImageFont

from simple_slam.graph import (
    BLACK,
    WHITE,
    Color,
    Graph,
    Link,
    Node,
    NodeShape,
    Point,
    Rect,
    arrow_head,
    connection_point,
)

DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600

NODE_OUTLINE_WIDTH = 2
ARROW_OUTLINE_WIDTH = 2
LEGEND_MARGIN = 200
LEGEND_TOP = 20
LEGEND_ITEM_HEIGHT = 25
LEGEND_BOX_WIDTH = 180
LEGEND_SWATCH = 15
LEGEND_TEXT_OFFSET = 25
LINK_LABEL_BACKGROUND: Color = (255, 255, 255, 200)
LEGEND_BACKGROUND: Color = (255, 255, 255, 240)

Font = Union[ImageFont.ImageFont, ImageFont.FreeTypeFont]


def _rgba(color: Color) -> tuple[int, int, int, int]:
    if len(color) == 3:
        return (color[0], color[1], color[2], 255)
    if len(color) == 4:
        return (color[0], color[1], color[2], color[3])
    raise ValueError(f"colour must have three or four components, got {color!r}")


def _box(rect: Rect) -> tuple[int, int, int, int]:
    return (rect.left, rect.top, rect.right, rect.bottom)


def _printable(draw: ImageDraw.ImageDraw, text: str, font: Font) -> str:
    """Text the font can draw; characters it cannot encode become '?'."""
    try:
        draw.textbbox((0, 0), text, font=font)
        return text
    except UnicodeEncodeError:
        return text.encode("latin-1", "replace").decode("latin-1")


def _text_width(draw: ImageDraw.ImageDraw, text: str, font: Font) -> float:
    left, _, right, _ = draw.textbbox((0, 0), text, font=font)
    return right - left


def _wrap(draw: ImageDraw.ImageDraw, text: str, font: Font, width: int) -> list[str]:
    lines: list[str] = []
    for paragraph in text.split("\n"):
        current = ""
        for word in paragraph.split(" "):
            candidate = f"{current} {word}" if current else word
            if current and _text_width(draw, candidate, font) > width:
                lines.append(current)
                current = word
            else:
                current = candidate
        lines.append(current)
    return lines


def _draw_centered(
    draw: ImageDraw.ImageDraw, center: Point, text: str, font: Font, fill: Color
) -> tuple[float, float, float, float]:
    """Draw ``text`` centred on ``center`` and return the box it covers."""
    left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
    x = center[0] - (left + right) / 2
    y = center[1] - (top + bottom) / 2
    draw.text((x, y), text, font=font, fill=_rgba(fill))
    return (x + left, y + top, x + right, y + bottom)


def _draw_node(draw: ImageDraw.ImageDraw, node: Node, font: Font) -> None:
    rect = node.bounding_rect()
    box = _box(rect)
    fill = _rgba(node.color)
    if node.shape is NodeShape.RECTANGLE:
        draw.rectangle(box, fill=fill, outline=_rgba(BLACK), width=NODE_OUTLINE_WIDTH)
    else:
        draw.ellipse(box, fill=fill, outline=_rgba(BLACK), width=NODE_OUTLINE_WIDTH)

    text = _printable(draw, node.text, font)
    if not text:
        return
    lines = _wrap(draw, text, font, rect.width)
    _, top, _, bottom = draw.textbbox((0, 0), "Ag", font=font)
    line_height = bottom - top + 2
    cx, cy = rect.center
    first_y = cy - line_height * (len(lines) - 1) / 2
    for row, line in enumerate(lines):
        _draw_centered(draw, (cx, round(first_y + row * line_height)), line, font, BLACK)


def _draw_link(draw: ImageDraw.ImageDraw, graph: Graph, link: Link, font: Font) -> None:
    source = graph.node(link.from_id)
    target = graph.node(link.to_id)
    if source is None or target is None:
        return
    start = connection_point(source, target.position)
    end = connection_point(target, source.position)
    color = _rgba(link.color)
    draw.line([start, end], fill=color, width=link.line_width)
    draw.polygon(arrow_head(start, end), fill=color, outline=color, width=ARROW_OUTLINE_WIDTH)

    text = _printable(draw, link.text, font)
    if not text:
        return
    mid = ((start[0] + end[0]) // 2, (start[1] + end[1]) // 2)
    left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
    half_w = (right - left) / 2
    half_h = (bottom - top) / 2
    draw.rectangle(
        (mid[0] - half_w - 2, mid[1] - half_h - 2, mid[0] + half_w + 2, mid[1] + half_h + 2),
        fill=LINK_LABEL_BACKGROUND,
    )
    _draw_centered(draw, mid, text, font, BLACK)


def _draw_legend(draw: ImageDraw.ImageDraw, graph: Graph, width: int, font: Font) -> None:
    if not graph.legend:
        return
    legend_x = width - LEGEND_MARGIN
    legend_y = LEGEND_TOP
    frame = Rect(
        legend_x - 10,
        legend_y - 10,
        LEGEND_BOX_WIDTH,
        len(graph.legend) * LEGEND_ITEM_HEIGHT + 20,
    )
    draw.rectangle(_box(frame), fill=LEGEND_BACKGROUND, outline=_rgba(BLACK), width=1)

    for row, item in enumerate(graph.legend):
        y = legend_y + row * LEGEND_ITEM_HEIGHT
        swatch = Rect(legend_x, y, LEGEND_SWATCH, LEGEND_SWATCH)
        draw.rectangle(_box(swatch), fill=_rgba(item.color), outline=_rgba(BLACK), width=1)
        text = _printable(draw, item.text, font)
        if text:
            _draw_centered(
                draw,
                (legend_x + LEGEND_TEXT_OFFSET, y + LEGEND_SWATCH // 2),
                "",
                font,
                BLACK,
            )
            _, top, _, bottom = draw.textbbox((0, 0), text, font=font)
            text_y = y + LEGEND_SWATCH / 2 - (top + bottom) / 2
            draw.text(
                (legend_x + LEGEND_TEXT_OFFSET, text_y), text, font=font, fill=_rgba(BLACK)
            )


def render(graph: Graph, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> Image.Image:
    """Draw links, then nodes, then the legend on a white RGB image."""
    if width <= 0 or height <= 0:
        raise ValueError("image size must be positive")
    image = Image.new("RGBA", (width, height), _rgba(WHITE))
    draw = ImageDraw.Draw(image, "RGBA")
    font = ImageFont.load_default()
    for link in graph.links:
        _draw_link(draw, graph, link, font)
    for node in graph.nodes:
        _draw_node(draw, node, font)
    _draw_legend(draw, graph, width, font)
    return image.convert("RGB")


def save_image(
    graph: Graph,
    filename: str | PathLike[str],
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
) -> Image.Image:
    """Render ``graph`` and write it to ``filename``; the format follows the suffix."""
    image = render(graph, width, height)
    image.save(filename)
    return image