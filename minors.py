"""
Invertible submatrix (nonzero minor) search.

find_invertible_submatrix is the exhaustive scan: every square size from
min(rows, cols) down to 1, row subsets outer and column subsets inner, both in
lexicographic order. Its cost is exponential in the matrix dimensions and only
max_candidates bounds it. find_maximal_invertible_submatrix reaches a minor of
the same (maximal) size from two elimination passes.
"""
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

from combinatorics import count_square_selections, iter_combinations
from errors import SearchBudgetExceeded
from logging_utils import get_logger

if TYPE_CHECKING:
    from gf_matrix import Matrix

logger = get_logger("gf.minors")


@dataclass
class SubmatrixInfo:
    rows: List[int]
    cols: List[int]
    submatrix: "Matrix"

    @property
    def size(self) -> int:
        return len(self.rows)


def find_invertible_submatrix(mat: "Matrix", max_candidates: Optional[int] = None) -> Optional[SubmatrixInfo]:
    tested = 0
    for size in range(min(mat.rows, mat.cols), 0, -1):
        logger.debug(f"size {size}: {count_square_selections(mat.rows, mat.cols, size)} candidate minors")
        for row_combo in iter_combinations(mat.rows, size):
            for col_combo in iter_combinations(mat.cols, size):
                if max_candidates is not None and tested >= max_candidates:
                    logger.warning(f"minor search stopped after {tested} candidates at size {size}")
                    raise SearchBudgetExceeded(
                        f"no invertible minor found within {max_candidates} candidates (reached size {size})"
                    )
                tested += 1
                minor = mat.submatrix(row_combo, col_combo)
                if minor.is_invertible():
                    logger.info(f"invertible {size}x{size} minor at rows {row_combo} cols {col_combo} ({tested} tested)")
                    return SubmatrixInfo(row_combo, col_combo, minor)
    logger.info(f"no invertible minor in {mat.rows}x{mat.cols} matrix ({tested} tested)")
    return None


def find_maximal_invertible_submatrix(mat: "Matrix") -> Optional[SubmatrixInfo]:
    """
    Pivot columns of A pick the columns; pivot columns of the transpose of
    that column slice pick the rows. The rank x rank minor they span is
    invertible.
    """
    forward = mat.forward_gauss()
    if forward.rank == 0:
        return None
    cols = list(forward.pivot_cols)
    column_slice = mat.submatrix(list(range(mat.rows)), cols)
    rows = list(column_slice.transpose().forward_gauss().pivot_cols)
    minor = mat.submatrix(rows, cols)
    logger.info(f"maximal invertible {len(rows)}x{len(cols)} minor at rows {rows} cols {cols}")
    return SubmatrixInfo(rows, cols, minor)
