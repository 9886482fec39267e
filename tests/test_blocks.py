import pytest

from simple_slam.blocks import (
    CopyDequeBlock,
    CopyVectorBlock,
    DataBlock,
    RefDequeBlock,
    RefVectorBlock,
)
from simple_slam.data_types import CTPoint


def test_init_attaches_manager():
    block = RefVectorBlock("cloud")
    manager = object()
    assert block.init(manager) is True
    assert block.manager is manager
    assert block.name == "cloud"


def test_base_block_init():
    block = DataBlock("raw")
    assert block.init("mgr") is True
    assert block.manager == "mgr"


def test_ref_vector_keeps_identity():
    block = RefVectorBlock("cloud")
    point = CTPoint(0.0, 1.0, 2.0, 3.0)
    block.push_back(point)
    assert len(block) == 1
    assert block.get(0) is point


def test_ref_vector_order_and_set():
    block = RefVectorBlock("items")
    for value in ("a", "b", "c"):
        block.push_back(value)
    block.set(1, "z")
    assert block.all() == ["a", "z", "c"]


@pytest.mark.parametrize("index", [-1, 0, 3])
def test_vector_index_errors(index):
    block = RefVectorBlock("items")
    if index == 3:
        for value in range(3):
            block.push_back(value)
    with pytest.raises(IndexError):
        block.get(index)
    with pytest.raises(IndexError):
        block.set(index, "x")


def test_vector_reset_and_empty_all():
    block = RefVectorBlock("items")
    assert block.all() == []
    block.push_back(1)
    block.reset()
    assert len(block) == 0
    assert block.all() == []


def test_all_is_a_snapshot():
    block = RefVectorBlock("items")
    block.push_back(1)
    snapshot = block.all()
    snapshot.append(2)
    assert len(block) == 1


def test_copy_vector_copies_on_push_and_get():
    block = CopyVectorBlock("points")
    point = CTPoint(0.0, 1.0, 2.0, 3.0)
    block.push_back(point)
    point.x = 9.0
    fetched = block.get(0)
    assert fetched.x == 1.0
    fetched.y = 7.0
    assert block.get(0).y == 2.0


def test_copy_vector_get_ref_mutations_persist():
    block = CopyVectorBlock("points")
    block.push_back(CTPoint(0.0, 1.0, 2.0, 3.0))
    block.get_ref(0).intensity = 4.0
    assert block.get(0).intensity == 4.0
    with pytest.raises(IndexError):
        block.get_ref(1)


def test_copy_vector_set_stores_copy():
    block = CopyVectorBlock("points")
    block.push_back(CTPoint())
    replacement = CTPoint(1.0, 1.0, 1.0, 1.0)
    block.set(0, replacement)
    replacement.z = 5.0
    assert block.get(0) == CTPoint(1.0, 1.0, 1.0, 1.0)


def test_ref_deque_default_max_size():
    assert RefDequeBlock("q").max_size == 1000


def test_ref_deque_push_back_drops_front():
    block = RefDequeBlock("q", max_size=3)
    for value in range(5):
        block.push_back(value)
    assert block.all() == [2, 3, 4]


def test_ref_deque_push_front_drops_back():
    block = RefDequeBlock("q", max_size=2)
    for value in ("a", "b", "c"):
        block.push_front(value)
    assert block.all() == ["c", "b"]


def test_ref_deque_pops_and_empty_returns_none():
    block = RefDequeBlock("q")
    block.push_back("first")
    block.push_back("second")
    assert block.pop_front() == "first"
    assert block.pop_back() == "second"
    assert block.pop_front() is None
    assert block.pop_back() is None


def test_ref_deque_get_and_reset():
    block = RefDequeBlock("q")
    item = ["payload"]
    block.push_back(item)
    assert block.get(0) is item
    with pytest.raises(IndexError):
        block.get(1)
    block.reset()
    assert len(block) == 0


def test_negative_max_size_rejected():
    with pytest.raises(ValueError):
        RefDequeBlock("q", max_size=-1)


def test_copy_deque_pop_empty_raises():
    block = CopyDequeBlock("imu")
    with pytest.raises(IndexError):
        block.pop_front()
    with pytest.raises(IndexError):
        block.pop_back()


def test_copy_deque_try_pop_default():
    block = CopyDequeBlock("imu")
    marker = object()
    assert block.try_pop_front(marker) is marker
    assert block.try_pop_back(marker) is marker
    block.push_back(1)
    block.push_back(2)
    assert block.try_pop_front(marker) == 1
    assert block.try_pop_back(marker) == 2
    assert len(block) == 0


def test_copy_deque_stores_copies():
    block = CopyDequeBlock("imu")
    sample = {"acc": [0.0, 0.0, 9.8]}
    block.push_front(sample)
    sample["acc"][2] = 0.0
    assert block.get(0) == {"acc": [0.0, 0.0, 9.8]}
    block.get_ref(0)["acc"][0] = 1.0
    assert block.get(0)["acc"][0] == 1.0


def test_copy_deque_set_and_limit():
    block = CopyDequeBlock("imu", max_size=2)
    for value in ("a", "b", "c"):
        block.push_back(value)
    block.set(0, "x")
    assert block.all() == ["x", "c"]
    with pytest.raises(IndexError):
        block.set(2, "y")


def test_pop_order_round_trip():
    block = CopyDequeBlock("imu")
    values = [1, 2, 3, 4]
    for value in values:
        block.push_back(value)
    popped = [block.pop_front() for _ in values]
    assert popped == values