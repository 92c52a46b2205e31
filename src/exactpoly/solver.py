"""Polynomial reconstruction by exact Gaussian elimination.

Fits the unique degree-(k-1) polynomial through k points by solving the
Vandermonde-style system

    c_0 * x_i^(k-1) + c_1 * x_i^(k-2) + ... + c_{k-1} = y_i

with partial pivoting over exact rationals, then checks the result
against any leftover points. Coefficients are ordered highest degree
first.
"""

import logging
from dataclasses import dataclass

from exactpoly.errors import MalformedProblem, SingularSystem
from exactpoly.problem import Point, Problem
from exactpoly.rational import Rational, ZERO

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PointCheck:
    """Outcome of evaluating the fitted polynomial at one unused point."""
    x: int
    expected: int
    actual: Rational
    ok: bool


@dataclass(frozen=True)
class Solution:
    degree: int
    coefficients: tuple
    checks: tuple = ()

    @property
    def valid(self) -> bool:
        """True when every unused point agrees (vacuously true if none)."""
        return all(c.ok for c in self.checks)

    @property
    def is_integral(self) -> bool:
        return all(c.is_integer() for c in self.coefficients)

    def __call__(self, x: int) -> Rational:
        return evaluate(x, self.coefficients)


def _xy(point) -> tuple:
    if isinstance(point, Point):
        return point.x, point.y
    x, y = point
    return x, y


def build_system(points: list, degree: int = None) -> list:
    """Build the k x (k+1) augmented matrix for the given points.

    Row i is [x_i^degree, ..., x_i, 1, y_i].
    """
    if degree is None:
        degree = len(points) - 1
    matrix = []
    for point in points:
        x, y = _xy(point)
        row = [Rational(x ** (degree - j)) for j in range(degree + 1)]
        row.append(Rational(y))
        matrix.append(row)
    return matrix


def _pivot_row(matrix: list, col: int) -> int:
    """Row index in [col, k) with the largest |numerator| in column col.

    Denominators are always positive, so numerator magnitude is exact
    int comparison. Ties keep the first row.
    """
    best = col
    best_mag = abs(matrix[col][col].num)
    for r in range(col + 1, len(matrix)):
        mag = abs(matrix[r][col].num)
        if mag > best_mag:
            best, best_mag = r, mag
    return best


def eliminate(matrix: list, progress=None) -> list:
    """Forward elimination with partial pivoting, in place.

    Args:
        matrix: k x (k+1) augmented matrix of Rational.
        progress: Optional callable(row, total), called once per pivot
            row with a 1-based row number.

    Returns:
        The same matrix, now upper triangular.

    Raises:
        SingularSystem: a column has no nonzero pivot candidate.
    """
    k = len(matrix)
    for i in range(k):
        log.debug("Processing matrix row %d of %d", i + 1, k)
        if progress is not None:
            progress(i + 1, k)

        p = _pivot_row(matrix, i)
        if p != i:
            matrix[i], matrix[p] = matrix[p], matrix[i]

        pivot = matrix[i][i]
        if pivot.is_zero():
            raise SingularSystem(
                f"Zero pivot in column {i}: points do not determine a "
                f"unique degree-{k - 1} polynomial"
            )

        for j in range(i + 1, k):
            factor = matrix[j][i].div(pivot)
            if factor.is_zero():
                continue
            for col in range(i, k + 1):
                matrix[j][col] = matrix[j][col].sub(factor.mul(matrix[i][col]))

    return matrix


def back_substitute(matrix: list) -> tuple:
    """Solve an upper-triangular augmented system for the coefficients."""
    k = len(matrix)
    coeffs = [ZERO] * k
    for i in range(k - 1, -1, -1):
        s = ZERO
        for j in range(i + 1, k):
            s = s.add(matrix[i][j].mul(coeffs[j]))
        if matrix[i][i].is_zero():
            raise SingularSystem(f"Zero diagonal entry at row {i}")
        coeffs[i] = matrix[i][k].sub(s).div(matrix[i][i])
    return tuple(coeffs)


def evaluate(x: int, coefficients) -> Rational:
    """Evaluate at x using Horner's method.

    coefficients = [c_d, c_{d-1}, ..., c_0] (highest degree first).
    """
    xr = Rational(x)
    result = ZERO
    for c in coefficients:
        result = result.mul(xr).add(c)
    return result


def validate(points: list, coefficients) -> tuple:
    """Check each point against the polynomial.

    A point passes only when the value is an integer equal to its y.
    """
    checks = []
    for point in points:
        x, y = _xy(point)
        actual = evaluate(x, coefficients)
        ok = actual.is_integer() and actual.num == y
        if not ok:
            log.warning("Point (%d, ...) does not lie on the polynomial", x)
        checks.append(PointCheck(x, y, actual, ok))
    return tuple(checks)


def solve(points: list, k: int = None, progress=None) -> tuple:
    """Coefficients of the degree-(k-1) polynomial through the first k points.

    Points are used in the order given; callers wanting the ascending-x
    solving set should pass Problem.solving_points.
    """
    if k is None:
        k = len(points)
    if k < 1 or k > len(points):
        raise MalformedProblem(f"k must be in [1, {len(points)}], got {k}")

    matrix = build_system(points[:k], k - 1)
    eliminate(matrix, progress)
    return back_substitute(matrix)


def reconstruct(problem: Problem, progress=None) -> Solution:
    """Solve a Problem and validate it against its unused points."""
    coeffs = solve(problem.solving_points, problem.k, progress)
    checks = validate(problem.validation_points, coeffs)
    solution = Solution(problem.degree, coeffs, checks)

    if checks:
        log.info("Validated %d/%d extra points",
                 sum(c.ok for c in checks), len(checks))
    log.info("Degree %d polynomial: %s", solution.degree,
             ', '.join(str(c) for c in coeffs))
    return solution
