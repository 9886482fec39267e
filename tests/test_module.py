import pytest

from simple_slam.blocks import RefVectorBlock
from simple_slam.manager import DataManager
from simple_slam.module import Module, SubModule, System


class _Recorder(SubModule):
    def __init__(self, name, log):
        super().__init__(name)
        self.log = log

    def init(self, module):
        result = super().init(module)
        self.manager.register(RefVectorBlock(f"{self.name}_data"))
        return result

    def run(self):
        super().run()
        self.log.append(("run", self.name))

    def stop(self):
        super().stop()
        self.log.append(("stop", self.name))


def _build():
    log = []
    system = System("slam")
    front = Module("front")
    back = Module("back")
    system.register_module("front", front)
    system.register_module("back", back)
    system.register_submodule("front", "io", _Recorder("io", log))
    system.register_submodule("back", "opt", _Recorder("opt", log))
    return system, log


def test_data_manager_before_init_raises():
    with pytest.raises(RuntimeError):
        Module("m").data_manager()


def test_system_init_wires_everything():
    system, _ = _build()
    assert system.init() is True
    manager = system.data_manager
    assert manager.is_initialized
    assert system.get_module("front").data_manager() is manager
    sub = system.get_submodule("front", "io")
    assert sub.module is system.get_module("front")
    assert manager.names() == ["io_data", "opt_data"]


def test_given_data_manager_is_used():
    manager = DataManager()
    system = System("s", manager)
    module = Module("m")
    system.register_module("m", module)
    system.init()
    assert module.data_manager() is manager


def test_missing_lookups_raise():
    system, _ = _build()
    with pytest.raises(KeyError):
        system.get_module("nope")
    with pytest.raises(KeyError):
        system.get_submodule("front", "nope")
    with pytest.raises(KeyError):
        system.register_submodule("nope", "x", SubModule("x"))


def test_run_and_stop_order():
    system, log = _build()
    system.init()
    system.run()
    assert system.is_active
    assert system.get_submodule("back", "opt").is_active
    system.stop()
    assert not system.is_active
    assert not system.get_module("front").is_active
    assert log == [("run", "io"), ("run", "opt"), ("stop", "opt"), ("stop", "io")]


def test_late_registration_is_initialised():
    system, log = _build()
    system.init()
    late = Module("late")
    system.register_module("late", late)
    assert late.data_manager() is system.data_manager
    system.register_submodule("late", "extra", _Recorder("extra", log))
    assert "extra_data" in system.data_manager


def test_submodule_init_failure_propagates():
    class _Failing(SubModule):
        def init(self, module):
            super().init(module)
            return False

    system = System("s")
    module = Module("m")
    module.register_submodule("f", _Failing("f"))
    system.register_module("m", module)
    assert system.init() is False