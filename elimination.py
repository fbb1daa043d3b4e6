"""
Gaussian elimination over GF(p^m).

Every routine works on a copy of its input and returns fresh objects; the
caller's matrix is never touched. Pivoting is plain first-nonzero search since
field arithmetic is exact.
"""
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

from errors import DimensionMismatchError
from logging_utils import get_logger

if TYPE_CHECKING:
    from gf_element import GFElement
    from gf_matrix import Matrix

logger = get_logger("gf.elimination")


@dataclass
class GaussResult:
    matrix: "Matrix"
    rank: int = 0
    pivot_cols: List[int] = field(default_factory=list)
    steps: List[str] = field(default_factory=list)


def find_pivot(mat: "Matrix", col: int, start_row: int) -> Optional[int]:
    for i in range(start_row, mat.rows):
        if not mat.data[i, col].is_zero():
            return i
    return None


def _forward(result: GaussResult, educational: bool) -> None:
    mat = result.matrix
    current = 0
    for col in range(mat.cols):
        if current >= mat.rows:
            break
        pivot_row = find_pivot(mat, col, current)
        if pivot_row is None:
            if educational:
                result.steps.append(f"Column {col}: every entry from row {current} down is zero")
            continue

        if pivot_row != current:
            mat.swap_rows(current, pivot_row)
            if educational:
                result.steps.append(f"Swap rows {current} and {pivot_row} (pivot found in column {col})")
        result.pivot_cols.append(col)

        pivot = mat.data[current, col]
        if not pivot.is_one():
            inv = pivot.inverse()
            mat.multiply_row(current, inv)
            if educational:
                result.steps.append(f"Multiply row {current} by {inv} (pivot becomes 1)")

        for row in range(current + 1, mat.rows):
            entry = mat.data[row, col]
            if entry.is_zero():
                continue
            factor = -entry
            mat.add_row(row, current, factor)
            if educational:
                result.steps.append(
                    f"Add row {current} times {factor} to row {row} (clears entry [{row},{col}])"
                )

        current += 1
        result.rank += 1

    if educational:
        result.steps.append(f"Forward pass complete. Rank: {result.rank}")


def _rediscover_pivots(result: GaussResult) -> None:
    mat = result.matrix
    result.pivot_cols = []
    result.rank = 0
    for row in range(mat.rows):
        for col in range(mat.cols):
            if not mat.data[row, col].is_zero():
                result.pivot_cols.append(col)
                result.rank += 1
                break


def _backward(result: GaussResult, educational: bool) -> None:
    mat = result.matrix
    for pivot_row in range(len(result.pivot_cols) - 1, -1, -1):
        pivot_col = result.pivot_cols[pivot_row]
        # rediscovered pivots need not be one
        pivot_inv = mat.data[pivot_row, pivot_col].inverse()
        for row in range(pivot_row - 1, -1, -1):
            entry = mat.data[row, pivot_col]
            if entry.is_zero():
                continue
            factor = -(entry * pivot_inv)
            mat.add_row(row, pivot_row, factor)
            if educational:
                result.steps.append(
                    f"Add row {pivot_row} times {factor} to row {row} (clears entry [{row},{pivot_col}])"
                )
    if educational:
        result.steps.append("Backward pass complete. Matrix is in reduced row echelon form")


def forward_gauss(mat: "Matrix", educational: bool = False) -> GaussResult:
    """
    Row echelon form with unit pivots; rank and pivot columns in discovery order.
    """
    result = GaussResult(mat.copy())
    _forward(result, educational)
    logger.debug(f"forward_gauss {mat.rows}x{mat.cols} over {mat.field}: rank={result.rank} pivots={result.pivot_cols}")
    return result


def backward_gauss(mat: "Matrix", educational: bool = False) -> GaussResult:
    """
    Clear the entries above each pivot of a matrix already in row echelon
    form. Pivots are re-derived as the first nonzero entry of each row, so
    non-echelon input gives an unspecified result.
    """
    result = GaussResult(mat.copy())
    _rediscover_pivots(result)
    if educational:
        result.steps.append(f"Pivot columns found by row scan: {result.pivot_cols}")
    _backward(result, educational)
    return result


def reduced_row_echelon_form(mat: "Matrix", educational: bool = False) -> GaussResult:
    result = GaussResult(mat.copy())
    _forward(result, educational)
    if result.rank > 0:
        if educational:
            result.steps.append("Starting backward pass")
        _backward(result, educational)
    logger.debug(f"rref {mat.rows}x{mat.cols} over {mat.field}: rank={result.rank} pivots={result.pivot_cols}")
    return result


def rank(mat: "Matrix") -> int:
    return forward_gauss(mat).rank


def is_invertible(mat: "Matrix") -> bool:
    if mat.rows != mat.cols:
        return False
    return rank(mat) == mat.rows


def determinant(mat: "Matrix") -> "GFElement":
    """
    Determinant by elimination: product of the pivots, sign flipped per row swap.
    """
    if mat.rows != mat.cols:
        raise DimensionMismatchError(f"determinant of a non-square {mat.rows}x{mat.cols} matrix")
    m = mat.copy()
    n = m.rows
    det = m.field.one()
    for i in range(n):
        pivot_row = find_pivot(m, i, i)
        if pivot_row is None:
            return m.field.zero()
        if pivot_row != i:
            m.swap_rows(i, pivot_row)
            det = -det
        pivot = m.data[i, i]
        det = det * pivot
        inv = pivot.inverse()
        for r in range(i + 1, n):
            entry = m.data[r, i]
            if not entry.is_zero():
                m.add_row(r, i, -(entry * inv))
    return det


def inverse(mat: "Matrix", educational: bool = False) -> Optional["Matrix"]:
    """
    Inverse via RREF of [A | I]. Returns None unless the left block reduces
    to exactly the identity.
    """
    n = mat.rows
    if n != mat.cols:
        if educational:
            logger.info(f"{mat.rows}x{mat.cols} matrix is not square, no inverse")
        return None

    augmented = mat.hstack(mat.identity(n, field=mat.field))
    if educational:
        logger.info(f"Augmented matrix [A | I]:\n{augmented}")

    result = reduced_row_echelon_form(augmented, educational)
    if educational:
        logger.info(f"After reduction to RREF:\n{result.matrix}")
        for step in result.steps:
            logger.info(step)

    reduced = result.matrix
    for i in range(n):
        for j in range(n):
            entry = reduced.data[i, j]
            if (i == j and not entry.is_one()) or (i != j and not entry.is_zero()):
                if educational:
                    logger.info(f"Matrix is singular (rank {result.rank} < {n})")
                return None

    inv = reduced.submatrix(list(range(n)), list(range(n, 2 * n)))
    if educational:
        logger.info("Inverse found")
    return inv
