# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from typing import Annotated

from pydantic import Field

# constrained types
PositiveInt = Annotated[int, Field(ge=0)]
PositiveIntGt0 = Annotated[int, Field(gt=0)]
PositiveFloat = Annotated[float, Field(ge=0, allow_inf_nan=False)]
FloatBetween0And1 = Annotated[float, Field(ge=0, le=1, allow_inf_nan=False)]
CardLast4 = Annotated[str, Field(pattern=r"^\d{4}$")]
