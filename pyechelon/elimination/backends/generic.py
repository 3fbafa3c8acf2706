"""
Generic backend for elimination over any ScalarField.

Used for exact arithmetic (rationals, prime fields) and for matrices
whose entries numpy cannot represent natively.
"""

from typing import Any

from pyechelon.core.compute.timing import timed
from pyechelon.core.result import Result
from pyechelon.elimination._common import EliminationParams, elimination_warnings
from pyechelon.elimination._generic import back_sweep_generic, forward_sweep_generic
from pyechelon.elimination._rank import leading_columns_generic
from pyechelon.elimination.design import EliminationDesign
from pyechelon.elimination.fields import OPERATOR_FIELD, ScalarField


class GenericGaussJordanBackend:
    """
    Element-wise backend over a list of rows.

    Args:
        field: Arithmetic to use; Python operators if None
    """

    def __init__(self, field: ScalarField | None = None):
        self._field = field if field is not None else OPERATOR_FIELD

    @property
    def name(self) -> str:
        return 'generic_gauss_jordan'

    @property
    def field(self) -> ScalarField:
        return self._field

    def solve(self, design: EliminationDesign) -> Result[EliminationParams]:
        rows = design.working_copy()
        forward_mode = 'prepare_reduce' if design.mode == 'reduce' else design.mode

        with timed() as timer:
            with timer.section('forward'):
                diagonal = forward_sweep_generic(rows, forward_mode, self._field)

            if design.mode == 'reduce':
                with timer.section('backward'):
                    back_sweep_generic(rows, self._field)

            with timer.section('rank'):
                leads = leading_columns_generic(design.working_copy(), self._field)

        params = EliminationParams(
            matrix=rows,
            diagonal_pivots=diagonal,
            pivot_columns=leads,
            rank=len(leads),
            n_rows=design.n_rows,
            n_cols=design.n_cols,
        )

        info: dict[str, Any] = {
            'mode': design.mode,
            'shape': design.shape,
            'field': self._field.name,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=elimination_warnings(diagonal, params.rank, design.n_rows),
        )
