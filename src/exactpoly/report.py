"""Text and JSON rendering of a reconstructed polynomial."""

import json

from exactpoly.solver import Solution


def to_dict(solution: Solution) -> dict:
    """Export as a plain dict; rationals become display strings."""
    return {
        'degree': solution.degree,
        'coefficients': [str(c) for c in solution.coefficients],
        'checks': [
            {'x': c.x, 'expected': str(c.expected), 'actual': str(c.actual), 'ok': c.ok}
            for c in solution.checks
        ],
        'valid': solution.valid,
    }


def to_json(solution: Solution) -> str:
    return json.dumps(to_dict(solution), indent=2)


def to_text(solution: Solution) -> str:
    """Human-readable summary: validation lines, then one line per coefficient."""
    lines = ["Validating solution with remaining points..."]
    if solution.checks:
        for c in solution.checks:
            lines.append(f"  - Point ({c.x}, ...): {'OK' if c.ok else 'FAILED!'}")
        if solution.valid:
            lines.append("Validation successful!")
    else:
        lines.append("  - No extra points to validate with.")

    d = solution.degree
    lines += [
        "",
        "Solution Found",
        "---------------------",
        f"Polynomial Degree: {d}",
        f"Coefficients (c{d} ... c0):",
    ]
    for i, coeff in enumerate(solution.coefficients):
        lines.append(f"  c{d - i}: {coeff}")
    return '\n'.join(lines)
