"""
Instance id allocation.
"""

import logging
from typing import Dict, Hashable, Iterable, Optional, Set

logger = logging.getLogger(__name__)


class IdentifierAllocator:
    """
    Maps element identities to instance ids for one normalization.

    Ids are synthesized from a counter starting at "0". Explicit ids are
    honored verbatim and reserved, so a synthesized id never collides with
    one of them.
    """

    def __init__(self, reserved: Optional[Iterable[str]] = None):
        self._last_id = -1
        self._ids: Dict[Hashable, str] = {}
        self._reserved: Set[str] = set(reserved or ())

    def __contains__(self, key: Hashable) -> bool:
        return key in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def identifier_for(self, key: Hashable, explicit: Optional[str] = None) -> str:
        """Return the id of key, assigning one on first sight"""
        identifier = self._ids.get(key)
        if identifier is not None:
            return identifier
        if explicit is not None:
            identifier = explicit
            self._reserved.add(explicit)
        else:
            identifier = self._next_id()
        self._ids[key] = identifier
        return identifier

    def _next_id(self) -> str:
        while True:
            self._last_id += 1
            candidate = str(self._last_id)
            if candidate not in self._reserved:
                return candidate
            logger.debug(f"Skipping id {candidate}: claimed by an explicit id")
