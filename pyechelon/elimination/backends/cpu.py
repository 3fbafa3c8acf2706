"""
CPU backend for elimination on float arrays.

Runs the vectorized NumPy sweeps on a working copy of the design matrix.
"""

from typing import Any

from pyechelon.core.compute.timing import timed
from pyechelon.core.result import Result
from pyechelon.elimination._backward import back_sweep
from pyechelon.elimination._common import EliminationParams, elimination_warnings
from pyechelon.elimination._forward import forward_sweep
from pyechelon.elimination._rank import leading_columns
from pyechelon.elimination.design import EliminationDesign


class CPUGaussJordanBackend:
    """
    CPU backend over NumPy floating arrays.

    Implements the Backend protocol for EliminationDesign -> EliminationParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_gauss_jordan'

    def solve(self, design: EliminationDesign) -> Result[EliminationParams]:
        """
        Reduce the design matrix according to design.mode.

        Algorithm:
            1. Forward sweep ('prepare_reduce' for mode 'reduce')
            2. Back sweep (mode 'reduce' only)
            3. Rank from a staircase pass over an untouched copy

        Args:
            design: Validated array design

        Returns:
            Result containing EliminationParams
        """
        matrix = design.working_copy()
        forward_mode = 'prepare_reduce' if design.mode == 'reduce' else design.mode

        with timed() as timer:
            with timer.section('forward'):
                diagonal = forward_sweep(matrix, forward_mode)

            if design.mode == 'reduce':
                with timer.section('backward'):
                    back_sweep(matrix)

            with timer.section('rank'):
                leads = leading_columns(design.working_copy())

        params = EliminationParams(
            matrix=matrix,
            diagonal_pivots=diagonal,
            pivot_columns=leads,
            rank=len(leads),
            n_rows=design.n_rows,
            n_cols=design.n_cols,
        )

        info: dict[str, Any] = {
            'mode': design.mode,
            'shape': design.shape,
            'dtype': str(matrix.dtype),
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=elimination_warnings(diagonal, params.rank, design.n_rows),
        )
