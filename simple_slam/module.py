"""Systems, modules and sub-modules that make up a SLAM pipeline.

A system holds modules (front end, back end, loop closure and so on); a
module holds sub-modules, each of which implements one algorithm.
"""

from __future__ import annotations

from simple_slam.manager import DataManager


class SubModule:
    """One algorithm inside a module.

    Subclasses extend ``init``, ``run`` and ``stop`` with their own work.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self.is_active = False
        self.module: Module | None = None
        self.manager: DataManager | None = None

    def init(self, module: Module) -> bool:
        """Attach to the owning module and its data manager."""
        self.module = module
        self.manager = module.data_manager()
        return True

    def run(self) -> None:
        self.is_active = True

    def stop(self) -> None:
        self.is_active = False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class Module:
    """One function of the system, built out of sub-modules."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.is_active = False
        self.system: System | None = None
        self._manager: DataManager | None = None
        self._submodules: dict[str, SubModule] = {}

    def init(self, system: System) -> bool:
        """Attach to ``system`` and initialise every registered sub-module."""
        self.system = system
        self._manager = system.data_manager
        return all([sub.init(self) for sub in self._submodules.values()])

    def data_manager(self) -> DataManager:
        """The data manager of the owning system."""
        if self._manager is None:
            raise RuntimeError("DataManage is not initialized")
        return self._manager

    def get_submodule(self, name: str) -> SubModule:
        try:
            return self._submodules[name]
        except KeyError:
            raise KeyError(f"sub-module {name!r} not found in {self.name!r}") from None

    def register_submodule(self, name: str, submodule: SubModule) -> None:
        """Add ``submodule``; it is initialised at once if the module already is."""
        self._submodules[name] = submodule
        if self._manager is not None:
            submodule.init(self)

    @property
    def submodules(self) -> dict[str, SubModule]:
        return dict(self._submodules)

    def run(self) -> None:
        self.is_active = True
        for submodule in self._submodules.values():
            submodule.run()

    def stop(self) -> None:
        for submodule in reversed(list(self._submodules.values())):
            submodule.stop()
        self.is_active = False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class System:
    """A collection of modules sharing one data manager."""

    def __init__(self, name: str, data_manager: DataManager | None = None) -> None:
        self.name = name
        self.is_active = False
        self.data_manager = data_manager if data_manager is not None else DataManager()
        self._modules: dict[str, Module] = {}
        self._initialized = False

    def init(self) -> bool:
        """Initialise the data manager and every registered module."""
        self.data_manager.init()
        results = [module.init(self) for module in self._modules.values()]
        self._initialized = True
        return all(results)

    def get_module(self, name: str) -> Module:
        try:
            return self._modules[name]
        except KeyError:
            raise KeyError(f"module {name!r} not found in {self.name!r}") from None

    def get_submodule(self, module_name: str, submodule_name: str) -> SubModule:
        return self.get_module(module_name).get_submodule(submodule_name)

    def register_module(self, name: str, module: Module) -> None:
        """Add ``module``; it is initialised at once if the system already is."""
        self._modules[name] = module
        if self._initialized:
            module.init(self)

    def register_submodule(
        self, module_name: str, submodule_name: str, submodule: SubModule
    ) -> None:
        self.get_module(module_name).register_submodule(submodule_name, submodule)

    @property
    def modules(self) -> dict[str, Module]:
        return dict(self._modules)

    def run(self) -> None:
        self.is_active = True
        for module in self._modules.values():
            module.run()

    def stop(self) -> None:
        for module in reversed(list(self._modules.values())):
            module.stop()
        self.is_active = False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"