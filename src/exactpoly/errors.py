"""Exception hierarchy for exact polynomial reconstruction.

Every error is deterministic and input-dependent. Each also derives from
the matching builtin so callers can catch ValueError / ZeroDivisionError.
"""


class ExactPolyError(Exception):
    """Base class for all exactpoly errors."""


class InvalidRational(ExactPolyError, ValueError):
    """Rational constructed with a zero denominator or non-integer parts."""


class DivisionByZero(ExactPolyError, ZeroDivisionError):
    """Division by a zero-valued rational."""


class SingularSystem(ExactPolyError, ArithmeticError):
    """A zero pivot survived partial pivoting.

    The chosen points do not determine a unique polynomial of the
    requested degree.
    """


class MalformedProblem(ExactPolyError, ValueError):
    """Problem description rejected before any matrix is built."""
