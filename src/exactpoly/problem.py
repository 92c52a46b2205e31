"""Problem descriptions: points, radix decoding, JSON loading.

Input format (one problem per document):

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        ...
    }

Every key other than "keys" is a decimal x-coordinate; its y-coordinate is
the digit string "value" read in radix "base".
"""

import json
import logging
import re
from dataclasses import dataclass, field
from typing import Optional

from exactpoly.errors import MalformedProblem

log = logging.getLogger(__name__)

MIN_BASE = 2
MAX_BASE = 36
_DIGITS = '0123456789abcdefghijklmnopqrstuvwxyz'
_DECIMAL = re.compile(r'-?[0-9]+')


@dataclass(frozen=True)
class Point:
    x: int
    y: int


def _parse_decimal(text: str) -> Optional[int]:
    """Plain ASCII decimal with optional leading '-', else None.

    int() alone would also take underscores and non-ASCII digits.
    """
    text = text.strip()
    if not _DECIMAL.fullmatch(text):
        return None
    return int(text, 10)


def parse_base(base) -> int:
    """Accept a radix given as int or decimal string, within [2, 36]."""
    if isinstance(base, bool):
        raise MalformedProblem(f"Invalid base {base!r}")
    if isinstance(base, str):
        parsed = _parse_decimal(base)
        if parsed is None:
            raise MalformedProblem(f"Invalid base {base!r}")
        base = parsed
    if not isinstance(base, int):
        raise MalformedProblem(f"Invalid base {base!r}")
    if not (MIN_BASE <= base <= MAX_BASE):
        raise MalformedProblem(f"Base must be in [{MIN_BASE}, {MAX_BASE}], got {base}")
    return base


def decode_value(value: str, base) -> int:
    """Decode a digit string in the given radix into an exact int.

    Digits are 0-9 then a-z (case-insensitive). A leading '-' is allowed.
    Accumulates digit by digit, so there is no size limit and no float.
    """
    base = parse_base(base)
    if not isinstance(value, str):
        raise MalformedProblem(f"Value must be a digit string, got {value!r}")

    text = value.strip().lower()
    negative = text.startswith('-')
    if negative:
        text = text[1:]
    if not text:
        raise MalformedProblem(f"Empty value {value!r}")

    result = 0
    for ch in text:
        digit = _DIGITS.find(ch)
        if digit < 0 or digit >= base:
            raise MalformedProblem(f"Digit {ch!r} out of range for base {base} in {value!r}")
        result = result * base + digit

    return -result if negative else result


def _parse_x(key) -> int:
    x = _parse_decimal(str(key))
    if x is None:
        raise MalformedProblem(f"Point key {key!r} is not an integer x-value")
    return x


@dataclass
class Problem:
    """k plus the points sorted by ascending x.

    The first k points form the solving set; the rest are only used to
    validate the reconstructed polynomial.
    """
    points: list[Point]
    k: int
    n: Optional[int] = None
    solving_points: list[Point] = field(init=False, repr=False)
    validation_points: list[Point] = field(init=False, repr=False)

    def __post_init__(self):
        self.points = sorted(self.points, key=lambda p: p.x)
        self.check()
        self.solving_points = self.points[:self.k]
        self.validation_points = self.points[self.k:]

    @property
    def degree(self) -> int:
        return self.k - 1

    def check(self):
        """Reject problems that cannot yield a unique degree-(k-1) polynomial."""
        if isinstance(self.k, bool) or not isinstance(self.k, int):
            raise MalformedProblem(f"k must be an integer, got {self.k!r}")
        if self.k < 1:
            raise MalformedProblem(f"k must be >= 1, got {self.k}")
        if self.k > len(self.points):
            raise MalformedProblem(
                f"k={self.k} exceeds the number of points ({len(self.points)})"
            )

        seen = set()
        for p in self.points[:self.k]:
            if p.x in seen:
                raise MalformedProblem(f"Duplicate x-value {p.x} in solving set")
            seen.add(p.x)

        if self.n is not None and self.n != len(self.points):
            log.warning("Declared n=%s but %d points supplied", self.n, len(self.points))

    @classmethod
    def from_dict(cls, data: dict) -> 'Problem':
        if not isinstance(data, dict):
            raise MalformedProblem(f"Problem must be a JSON object, got {type(data).__name__}")
        keys = data.get('keys')
        if not isinstance(keys, dict) or 'k' not in keys:
            raise MalformedProblem("Missing 'keys.k'")

        k = _as_int(keys['k'], 'keys.k')
        n = _as_int(keys['n'], 'keys.n') if 'n' in keys else None

        points = []
        for key, entry in data.items():
            if key == 'keys':
                continue
            x = _parse_x(key)
            if not isinstance(entry, dict) or 'base' not in entry or 'value' not in entry:
                raise MalformedProblem(f"Point {key!r} needs 'base' and 'value'")
            points.append(Point(x, decode_value(entry['value'], entry['base'])))

        log.debug("Parsed %d points, k=%d", len(points), k)
        return cls(points, k, n)

    @classmethod
    def from_json(cls, text: str) -> 'Problem':
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise MalformedProblem(f"Invalid JSON: {e}") from e
        return cls.from_dict(data)


def _as_int(value, name: str) -> int:
    if isinstance(value, bool):
        raise MalformedProblem(f"{name} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        parsed = _parse_decimal(value)
        if parsed is not None:
            return parsed
    raise MalformedProblem(f"{name} must be an integer, got {value!r}")


def load_problem(path: str) -> Problem:
    """Read a problem from a JSON file."""
    with open(path, encoding='utf-8') as f:
        try:
            text = f.read()
        except UnicodeDecodeError as e:
            raise MalformedProblem(f"{path}: not valid UTF-8: {e}") from e
    return Problem.from_json(text)
