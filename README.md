# simple_slam

This package provides building blocks for a modular SLAM pipeline. It also
includes a small tool that draws module graphs, either to image files or in a
window.

## What is inside

- `simple_slam.data_types`
  - `Pose6D` is an IMU sample with the state integrated from it. Its fields are
    `time`, `acc`, `gyr`, `vel`, `pos` and `rot`.
  - The vectors are stored as 3-element numpy arrays and `rot` as a 3×3 matrix.
    Any other shape raises `ValueError`.
  - `CTPoint` is a lidar point. Its fields are `timestamp`, `x`, `y`, `z` and
    `intensity`.
- `simple_slam.blocks` holds thread-safe, named containers:
  - `RefVectorBlock` and `RefDequeBlock` keep references to the items you give
    them.
  - `CopyVectorBlock` and `CopyDequeBlock` keep deep copies.
  - All of them support `len()`, `get`, `reset` and `all()`.
  - The vector blocks and `CopyDequeBlock` also have `set`. The copy blocks add
    `get_ref`, which returns the stored object itself.
  - The deque blocks take a `max_size`, which defaults to 1000. When a deque is
    full, pushing at one end drops the item at the other end.
- `simple_slam.manager` holds `DataManager`, a registry of blocks by name:
  - `register` adds a block. A block with the same name is replaced.
  - `get` and `get_typed` look blocks up. `get_typed` also checks the block's
    type.
  - `remove` and `clear` take blocks out.
  - `names` returns the names, sorted. `describe` returns a text listing.
  - `name in manager` and `len(manager)` work as well.
- `simple_slam.module` holds the `System` → `Module` → `SubModule` hierarchy:
  - Each level has `init`, `run` and `stop`.
  - Sub-modules reach the system's `DataManager` through
    `Module.data_manager()`.
- `simple_slam.eskf` holds `imu_mean(samples)`. It returns the running mean of
  `acc` and `gyr` over a sequence of `Pose6D` samples.
- `simple_slam.graph` is the diagram model:
  - `Node`, `Link`, `LegendItem` and `Graph`, with `NodeShape.RECTANGLE` and
    `NodeShape.ELLIPSE`.
  - Node dragging through `press`, `move` and `release`.
  - The geometry helpers `connection_point` and `arrow_head`.
- `simple_slam.render` draws a `Graph` with Pillow:
  - `render(graph, width, height)` returns the image.
  - `save_image(graph, filename, width, height)` writes the image to a file.
- `simple_slam.app` holds the `ModuleGraph` interface, `demo_graph()` and the
  `simple-slam-graph-demo` command.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Data blocks and the manager

```python
from simple_slam.blocks import CopyDequeBlock
from simple_slam.data_types import CTPoint
from simple_slam.manager import DataManager

manager = DataManager()
manager.init()

points = CopyDequeBlock("CTPointCloud", max_size=500)
manager.register(points)

points.push_back(CTPoint(0.1, 1.0, 2.0, 3.0))
first = manager.get_typed("CTPointCloud", CopyDequeBlock).pop_front()
```

The blocks raise these errors:

- An index outside a block's contents raises `IndexError`.
- `CopyDequeBlock.pop_front` and `pop_back` raise `IndexError` when the deque is
  empty. `try_pop_front(default)` and `try_pop_back(default)` return the default
  instead.
- `RefDequeBlock.pop_front` and `pop_back` return `None` when the deque is empty.

The manager raises these errors:

- `get` and `remove` raise `KeyError` for an unknown name.
- `get_typed` raises `TypeError` when the block is of another type.
- `register(None)` raises `TypeError`.

## Modules

```python
from simple_slam.module import Module, SubModule, System

system = System("slam")
frontend = Module("frontend")
system.register_module("frontend", frontend)
system.register_submodule("frontend", "odometry", SubModule("odometry"))
system.init()
system.run()
system.stop()
```

## Drawing a module graph

Colours are RGB or RGBA tuples.

```python
from simple_slam.app import ModuleGraph
from simple_slam.graph import NodeShape

graph = ModuleGraph()
graph.add_node("sensor_node", "Sensor", 100, 100, NodeShape.ELLIPSE, (192, 192, 192))
graph.add_node("process_node", "Process", 300, 100, NodeShape.RECTANGLE, (0, 255, 255))
graph.add_link("sensor_node", "process_node", "sensor_data", (0, 0, 255))
graph.add_legend((192, 192, 192), "Sensor nodes")
graph.save("graph.png")
```

The image format follows the file's suffix. The default size is 800×600.

`ModuleGraph.show_window()` opens a Tkinter window. In it you can drag nodes
with the mouse and save the picture with a button.

The demo command shows an example graph of sensor, processing, output and
control nodes in a window:

```
simple-slam-graph-demo
```

To write the demo graph to a file instead of opening a window:

```
simple-slam-graph-demo --output demo.png
```

## What it does not do

- The package reads no sensor data. There is no lidar or IMU input and no
  message subscription.
- There is no complete SLAM loop.
- Of the error-state Kalman filter, only `imu_mean` is provided. There is no
  prediction, update or correction step.
- `SubModule.run` and `stop` only set `is_active`. The algorithms are yours to
  supply in subclasses.