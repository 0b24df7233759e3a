# terrain_generator/world/instances.py
from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, List

from ..core.types import PlacementRequest

logger = logging.getLogger(__name__)


class ManagedInstanceSet:
    """
    Host-side bookkeeping for spawned world elements.

    The generator never tracks what the host created; a host keeps one of these
    per terrain and calls replace_all() with every new placement list, which
    destroys all handles from the previous pass before spawning the new ones.
    """

    def __init__(self):
        self._handles: List[Any] = []

    def __len__(self) -> int:
        return len(self._handles)

    @property
    def handles(self) -> List[Any]:
        return list(self._handles)

    def clear(self, destroy: Callable[[Any], None]) -> None:
        for handle in self._handles:
            destroy(handle)
        self._handles.clear()

    def replace_all(
        self,
        requests: Iterable[PlacementRequest],
        spawn: Callable[[PlacementRequest], Any],
        destroy: Callable[[Any], None],
    ) -> List[Any]:
        previous = len(self._handles)
        self.clear(destroy)
        # each handle is recorded as soon as it exists
        for request in requests:
            self._handles.append(spawn(request))
        logger.debug("Replaced %d managed instances with %d.", previous, len(self._handles))
        return list(self._handles)
