# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Base reporting classes.

Reports read the session store and lay its entities out as pandas
DataFrames. They only format and present data; all calculation lives on the
models and in the APIs.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List

import pandas as pd

if TYPE_CHECKING:
    from ..store import LeaseDeskStore


class BaseReport(ABC):
    """
    Abstract base class for all tabular reports.

    Subclasses declare ``columns`` so an empty store still yields a frame
    with the expected shape.
    """

    columns: List[str] = []

    def __init__(self, store: "LeaseDeskStore"):
        # Import at runtime to avoid circular dependencies
        from ..store import LeaseDeskStore  # noqa: PLC0415

        if not isinstance(store, LeaseDeskStore):
            raise TypeError("BaseReport requires a LeaseDeskStore")
        self._store = store

    @abstractmethod
    def rows(self) -> List[dict]:
        """One dict per output row, keyed by ``columns``."""
        raise NotImplementedError

    def generate(self) -> pd.DataFrame:
        """Build the report frame."""
        return pd.DataFrame(self.rows(), columns=self.columns)

    def to_text(self) -> str:
        """Plain-text rendering for logs and non-interactive output."""
        df = self.generate()
        if df.empty:
            return "(no rows)"
        return df.to_string(index=False, float_format=lambda v: f"{v:,.2f}")
