"""Registry of named data blocks shared between SLAM modules."""

from __future__ import annotations

import logging
import threading
from typing import TypeVar

from simple_slam.blocks import DataBlock

logger = logging.getLogger(__name__)

B = TypeVar("B", bound=DataBlock)


class DataManager:
    """Keeps every data block under its name and hands them out on request.

    All operations are safe to call from several threads at once.
    """

    def __init__(self) -> None:
        self._blocks: dict[str, DataBlock] = {}
        self._lock = threading.RLock()
        self._initialized = False

    def init(self) -> bool:
        """Mark the manager as ready for use."""
        with self._lock:
            self._initialized = True
        return True

    @property
    def is_initialized(self) -> bool:
        with self._lock:
            return self._initialized

    def register(self, block: DataBlock) -> DataBlock:
        """Attach ``block`` and store it under its name.

        A block already registered under the same name is replaced.
        Raises TypeError for a missing block and ValueError when the
        block refuses to initialise.
        """
        if block is None:
            raise TypeError("cannot register an empty data block")
        with self._lock:
            name = block.name
            if name in self._blocks:
                logger.warning("data block %r already exists and will be replaced", name)
            if not block.init(self):
                raise ValueError(f"data block {name!r} failed to initialise")
            self._blocks[name] = block
        logger.info("registered data block %s", name)
        return block

    def get(self, name: str) -> DataBlock:
        """Return the block called ``name``; raise KeyError if there is none."""
        with self._lock:
            try:
                return self._blocks[name]
            except KeyError:
                raise KeyError(f"data block {name!r} not found") from None

    def get_typed(self, name: str, block_type: type[B]) -> B:
        """Return the block called ``name``, checking that it is a ``block_type``."""
        block = self.get(name)
        if not isinstance(block, block_type):
            raise TypeError(
                f"data block {name!r} is a {type(block).__name__}, "
                f"not a {block_type.__name__}"
            )
        return block

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._blocks

    def __len__(self) -> int:
        with self._lock:
            return len(self._blocks)

    def remove(self, name: str) -> DataBlock:
        """Remove and return the block called ``name``; raise KeyError if absent."""
        with self._lock:
            try:
                block = self._blocks.pop(name)
            except KeyError:
                raise KeyError(f"cannot remove missing data block {name!r}") from None
        logger.info("removed data block %s", name)
        return block

    def names(self) -> list[str]:
        """Names of all registered blocks, in sorted order."""
        with self._lock:
            return sorted(self._blocks)

    def clear(self) -> None:
        """Forget every registered block."""
        with self._lock:
            self._blocks.clear()
        logger.info("cleared all data blocks")

    def describe(self) -> str:
        """A short human-readable listing of the registered blocks."""
        lines = ["Registered data blocks:"]
        names = self.names()
        if names:
            lines.extend(f"  - {name}" for name in names)
        else:
            lines.append("  (no data blocks)")
        return "\n".join(lines)