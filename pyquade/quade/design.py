"""
Quade design object.

Wraps the validated observation matrix of an unreplicated complete block
design: one row per block, one column per treatment.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pyquade.core.validation import (
    check_array,
    check_finite,
    check_2d,
    check_min_samples,
    check_min_columns,
)


@dataclass(frozen=True)
class QuadeDesign:
    """
    Validated data container for the Quade test.

    Created via from_matrix(), not directly. The stored matrix is a
    read-only float64 copy, so the caller's data is never touched.
    """
    x: NDArray[np.floating[Any]]
    blocks: int
    treatments: int

    @property
    def n_obs(self) -> int:
        return self.blocks * self.treatments

    @staticmethod
    def from_matrix(x: Any) -> 'QuadeDesign':
        """
        Create design from a blocks x treatments matrix.

        Non-integer data is accepted; the Quade test only uses ranks and
        block ranges.

        Args:
            x: 2D real numeric array-like, at least 2 x 2, all finite

        Returns:
            QuadeDesign

        Raises:
            ValidationError: non-numeric, complex or non-finite data
            DimensionError: not 2D, or fewer than 2 blocks or treatments
        """
        x_arr = check_array(x, "x")
        check_2d(x_arr, "x")
        check_min_samples(x_arr, 2, "x")
        check_min_columns(x_arr, 2, "x")
        check_finite(x_arr, "x")

        x_arr = np.array(x_arr, dtype=np.float64, copy=True)
        x_arr.setflags(write=False)

        r, c = x_arr.shape
        return QuadeDesign(x=x_arr, blocks=r, treatments=c)
