# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from typing import Dict

from .primitives import EntityKindEnum

logger = logging.getLogger(__name__)


class IdentityAllocator:
    """
    Issues monotonically increasing integer identifiers per entity kind.

    Each kind has an independent sequence starting at 1. Identifiers are
    never reused, even for entities that are logically inactive.

    Callers build and validate a record with ``peek()`` first and only
    ``next_id()`` once it is accepted, so rejected input leaves no gap.
    """

    def __init__(self):
        self._last: Dict[EntityKindEnum, int] = {kind: 0 for kind in EntityKindEnum}

    def peek(self, kind: EntityKindEnum) -> int:
        """Identifier the next ``next_id(kind)`` call will return."""
        return self._last[kind] + 1

    def next_id(self, kind: EntityKindEnum) -> int:
        """Allocate the next identifier for ``kind``."""
        self._last[kind] += 1
        new_id = self._last[kind]
        logger.debug(f"Allocated {kind.value} id {new_id}")
        return new_id
