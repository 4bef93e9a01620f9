from __future__ import annotations

from ..core.constants import DEFAULT_ID_SEED


class IdentityAllocator:
    """Issues sequential person identifiers.

    One allocator belongs to one directory. Identifiers start right after
    ``seed`` and are never handed out twice.
    """

    def __init__(self, seed: int = DEFAULT_ID_SEED):
        self._counter = int(seed)

    @property
    def current(self) -> int:
        """Last issued identifier (the seed if nothing was issued yet)."""
        return self._counter

    def next(self) -> int:
        self._counter += 1
        return self._counter
