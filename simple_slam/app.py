"""High-level diagram interface, an interactive window and a demo command."""

from __future__ import annotations

import argparse
from os import PathLike
from typing import Sequence

from simple_slam.graph import BLACK, WHITE, Color, Graph, Link, Node, NodeShape
from simple_slam.render import DEFAULT_HEIGHT, DEFAULT_WIDTH, render, save_image

LIGHT_GRAY: Color = (192, 192, 192)
CYAN: Color = (0, 255, 255)
GREEN: Color = (0, 255, 0)
YELLOW: Color = (255, 255, 0)
BLUE: Color = (0, 0, 255)
RED: Color = (255, 0, 0)
MAGENTA: Color = (255, 0, 255)
DARK_GREEN: Color = (0, 128, 0)


class ModuleGraph:
    """Builds a diagram by node and link ids and shows or saves it."""

    def __init__(
        self,
        title: str = "Module Graph",
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
    ) -> None:
        self.title = title
        self.width = width
        self.height = height
        self.graph = Graph()

    def add_node(
        self,
        node_id: str,
        text: str,
        x: int,
        y: int,
        shape: NodeShape = NodeShape.RECTANGLE,
        color: Color = WHITE,
    ) -> Node:
        return self.graph.add_node(Node(node_id, text, (x, y), shape, color))

    def remove_node(self, node_id: str) -> bool:
        return self.graph.remove_node(node_id)

    def _update_node(self, node_id: str, **changes: object) -> bool:
        node = self.graph.node(node_id)
        if node is None:
            return False
        for name, value in changes.items():
            setattr(node, name, value)
        return True

    def set_node_color(self, node_id: str, color: Color) -> bool:
        return self._update_node(node_id, color=color)

    def set_node_text(self, node_id: str, text: str) -> bool:
        return self._update_node(node_id, text=text)

    def set_node_position(self, node_id: str, x: int, y: int) -> bool:
        return self._update_node(node_id, position=(x, y))

    def set_node_shape(self, node_id: str, shape: NodeShape) -> bool:
        return self._update_node(node_id, shape=shape)

    def set_node_size(self, node_id: str, width: int, height: int) -> bool:
        return self._update_node(node_id, size=(width, height))

    def add_link(
        self, from_id: str, to_id: str, text: str = "", color: Color = BLACK
    ) -> Link:
        return self.graph.add_link(Link(from_id, to_id, text, color))

    def remove_link(self, from_id: str, to_id: str) -> bool:
        return self.graph.remove_link(from_id, to_id)

    def _update_link(self, from_id: str, to_id: str, **changes: object) -> bool:
        link = self.graph.link(from_id, to_id)
        if link is None:
            return False
        for name, value in changes.items():
            setattr(link, name, value)
        return True

    def set_link_color(self, from_id: str, to_id: str, color: Color) -> bool:
        return self._update_link(from_id, to_id, color=color)

    def set_link_text(self, from_id: str, to_id: str, text: str) -> bool:
        return self._update_link(from_id, to_id, text=text)

    def set_link_width(self, from_id: str, to_id: str, width: int) -> bool:
        return self._update_link(from_id, to_id, line_width=width)

    def add_legend(self, color: Color, text: str) -> None:
        self.graph.add_legend(color, text)

    def clear_legend(self) -> None:
        self.graph.clear_legend()

    def clear(self) -> None:
        self.graph.clear()

    def save(self, filename: str | PathLike[str]) -> None:
        save_image(self.graph, filename, self.width, self.height)

    def show_window(self) -> None:
        """Open a window showing the diagram; nodes can be dragged with the mouse."""
        import tkinter as tk
        from tkinter import filedialog, messagebox

        from PIL import ImageTk

        root = tk.Tk()
        root.title(self.title)
        canvas = tk.Label(root, borderwidth=0)
        canvas.pack(fill="both", expand=True)

        def redraw() -> None:
            photo = ImageTk.PhotoImage(render(self.graph, self.width, self.height))
            canvas.configure(image=photo)
            canvas.image = photo

        def on_press(event: tk.Event) -> None:
            self.graph.press(event.x, event.y)

        def on_move(event: tk.Event) -> None:
            if self.graph.move(event.x, event.y):
                redraw()

        def on_release(_event: tk.Event) -> None:
            self.graph.release()

        def on_save() -> None:
            filename = filedialog.asksaveasfilename(
                parent=root,
                title="Save image",
                filetypes=[("PNG Files", "*.png"), ("JPEG Files", "*.jpg"), ("All Files", "*")],
            )
            if filename:
                self.save(filename)
                messagebox.showinfo("Saved", f"Image saved to: {filename}", parent=root)

        canvas.bind("<ButtonPress-1>", on_press)
        canvas.bind("<B1-Motion>", on_move)
        canvas.bind("<ButtonRelease-1>", on_release)

        buttons = tk.Frame(root)
        buttons.pack(fill="x")
        tk.Button(buttons, text="Save image", command=on_save).pack(side="left")

        redraw()
        root.mainloop()


def demo_graph() -> ModuleGraph:
    """A small example diagram of sensor, processing, output and control nodes."""
    graph = ModuleGraph(title="ROS node graph example")
    graph.add_node("sensor_node", "Sensor node", 100, 100, NodeShape.ELLIPSE, LIGHT_GRAY)
    graph.add_node("process_node", "Processing node", 300, 100, NodeShape.RECTANGLE, CYAN)
    graph.add_node("output_node", "Output node", 500, 100, NodeShape.RECTANGLE, GREEN)
    graph.add_node("control_node", "Control node", 300, 250, NodeShape.ELLIPSE, YELLOW)

    graph.add_link("sensor_node", "process_node", "sensor_data", BLUE)
    graph.add_link("process_node", "output_node", "processed_data", RED)
    graph.add_link("process_node", "control_node", "control_signal", MAGENTA)
    graph.add_link("control_node", "sensor_node", "config", DARK_GREEN)

    graph.add_legend(LIGHT_GRAY, "Sensor nodes")
    graph.add_legend(CYAN, "Processing nodes")
    graph.add_legend(GREEN, "Output nodes")
    graph.add_legend(YELLOW, "Control nodes")
    return graph


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Show an example module graph.")
    parser.add_argument(
        "-o",
        "--output",
        help="write the diagram to this image file instead of opening a window",
    )
    args = parser.parse_args(argv)
    graph = demo_graph()
    if args.output:
        graph.save(args.output)
    else:
        graph.show_window()
    return 0