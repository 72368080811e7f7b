"""Shared typing aliases for HermiteKit."""

from __future__ import annotations

from typing import Sequence, TypeAlias

import numpy as np
from numpy.typing import NDArray

FloatArray: TypeAlias = NDArray[np.float64]

Point: TypeAlias = Sequence[float]
Knot: TypeAlias = Sequence[float]

PointsLike: TypeAlias = Sequence[Point] | NDArray[np.floating]
