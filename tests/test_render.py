from PIL import Image
import pytest

from simple_slam.graph import Graph, Link, Node, NodeShape
from simple_slam.render import render, save_image

BLUE = (0, 0, 255)
GREEN = (0, 255, 0)
WHITE = (255, 255, 255)


def _two_nodes(link_color=BLUE, text=""):
    graph = Graph()
    graph.add_node(Node("a", "", (100, 100)))
    graph.add_node(Node("b", "", (400, 100), NodeShape.ELLIPSE))
    graph.add_link(Link("a", "b", text, link_color, line_width=4))
    return graph


def test_empty_graph_is_all_white():
    image = render(Graph(), 320, 200)
    assert image.size == (320, 200)
    assert image.getcolors() == [(320 * 200, WHITE)]


def test_node_filled_with_its_colour():
    graph = Graph()
    graph.add_node(Node("n", "", (150, 120), color=GREEN))
    image = render(graph, 400, 300)
    assert image.getpixel((150, 120)) == GREEN
    assert image.getpixel((5, 5)) == WHITE


def test_ellipse_corner_stays_white():
    graph = Graph()
    graph.add_node(Node("n", "", (150, 120), NodeShape.ELLIPSE, GREEN))
    image = render(graph, 400, 300)
    rect = graph.node("n").bounding_rect()
    assert image.getpixel((rect.left + 2, rect.top + 2)) == WHITE
    assert image.getpixel((150, 120)) == GREEN


def test_link_line_drawn_in_its_colour():
    image = render(_two_nodes(), 600, 300)
    assert image.getpixel((250, 100)) == BLUE


def test_link_to_missing_node_is_skipped():
    graph = Graph()
    graph.add_link(Link("a", "missing", "x", BLUE))
    image = render(graph, 200, 200)
    assert image.getcolors() == [(200 * 200, WHITE)]


def test_link_label_adds_dark_pixels_near_midpoint():
    plain = render(_two_nodes(), 600, 300)
    labelled = render(_two_nodes(text="data"), 600, 300)
    region = (220, 85, 280, 115)
    assert plain.crop(region).getcolors() != labelled.crop(region).getcolors()


def test_legend_swatch_and_background():
    graph = Graph()
    graph.add_legend(GREEN, "output")
    width = 800
    image = render(graph, width, 600)
    assert image.getpixel((width - 200 + 7, 20 + 7)) == GREEN
    assert image.getpixel((width - 205, 15)) == WHITE


def test_non_latin_text_renders():
    graph = Graph()
    graph.add_node(Node("s", "传感器节点", (100, 100)))
    graph.add_legend(GREEN, "传感器类节点")
    image = render(graph, 400, 300)
    assert image.size == (400, 300)


def test_invalid_size_rejected():
    with pytest.raises(ValueError):
        render(Graph(), 0, 10)


def test_save_image_round_trip(tmp_path):
    path = tmp_path / "graph.png"
    graph = _two_nodes()
    saved = save_image(graph, path, 600, 300)
    with Image.open(path) as loaded:
        assert loaded.size == (600, 300)
        assert loaded.convert("RGB").getpixel((250, 100)) == saved.getpixel((250, 100))