"""Tests for report rendering and the command-line entry point."""

import io
import json
import logging
import pytest
from exactpoly import report
from exactpoly.cli import main, EXIT_OK, EXIT_MISMATCH, EXIT_ERROR
from exactpoly.problem import Point, Problem
from exactpoly.rational import Rational
from exactpoly.solver import reconstruct, Solution


@pytest.fixture(autouse=True)
def restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


@pytest.fixture
def write_problem(tmp_path):
    def _write(data, name="problem.json"):
        path = tmp_path / name
        path.write_text(data if isinstance(data, str) else json.dumps(data))
        return str(path)
    return _write


class TestReport:

    def test_text_ok(self, quadratic_problem):
        text = report.to_text(reconstruct(Problem.from_dict(quadratic_problem)))
        assert "  - Point (6, ...): OK" in text
        assert "Validation successful!" in text
        assert "Polynomial Degree: 2" in text
        assert "Coefficients (c2 ... c0):" in text
        assert text.endswith("  c2: 1\n  c1: 0\n  c0: 3")

    def test_text_failed(self, quadratic_problem):
        quadratic_problem["6"]["value"] = "0"
        text = report.to_text(reconstruct(Problem.from_dict(quadratic_problem)))
        assert "  - Point (6, ...): FAILED!" in text
        assert "Validation successful!" not in text

    def test_text_no_extra_points(self):
        text = report.to_text(reconstruct(Problem([Point(1, 0), Point(2, 1), Point(3, 3)], 3)))
        assert "No extra points to validate with." in text
        assert "  c2: 1/2" in text
        assert "  c1: -1/2" in text

    def test_dict(self):
        sol = Solution(1, (Rational(1, 2), Rational(3)))
        d = report.to_dict(sol)
        assert d == {'degree': 1, 'coefficients': ['1/2', '3'], 'checks': [], 'valid': True}

    def test_json(self, quadratic_problem):
        out = json.loads(report.to_json(reconstruct(Problem.from_dict(quadratic_problem))))
        assert out['coefficients'] == ['1', '0', '3']
        assert out['checks'] == [{'x': 6, 'expected': '39', 'actual': '39', 'ok': True}]
        assert out['valid'] is True


class TestMain:

    def test_solves_file(self, write_problem, quadratic_problem, capsys):
        assert main([write_problem(quadratic_problem)]) == EXIT_OK
        out = capsys.readouterr().out
        assert "c2: 1" in out
        assert "Point (6, ...): OK" in out

    def test_json_output(self, write_problem, quadratic_problem, capsys):
        assert main(["--json", write_problem(quadratic_problem)]) == EXIT_OK
        out = json.loads(capsys.readouterr().out)
        assert out['coefficients'] == ['1', '0', '3']

    def test_stdin(self, monkeypatch, quadratic_problem, capsys):
        monkeypatch.setattr('sys.stdin', io.StringIO(json.dumps(quadratic_problem)))
        assert main([]) == EXIT_OK
        assert "Polynomial Degree: 2" in capsys.readouterr().out

    def test_mismatch_exit_code(self, write_problem, quadratic_problem, capsys):
        quadratic_problem["6"]["value"] = "1"
        assert main(["-q", write_problem(quadratic_problem)]) == EXIT_MISMATCH
        captured = capsys.readouterr()
        assert "Point (6, ...): FAILED!" in captured.out
        assert captured.err == ""

    def test_malformed_exit_code(self, write_problem, capsys):
        assert main([write_problem("{broken")]) == EXIT_ERROR
        assert capsys.readouterr().err.startswith("error: ")

    def test_k_exceeds_points_exit_code(self, write_problem, capsys):
        data = {"keys": {"k": 2}, "1": {"base": "10", "value": "1"}}
        assert main([write_problem(data)]) == EXIT_ERROR
        assert "exceeds" in capsys.readouterr().err

    def test_not_utf8_exit_code(self, tmp_path, capsys):
        path = tmp_path / "problem.json"
        path.write_bytes(b'{"keys": {"k": 1}, "1": {"base": "10", "value": "\xff"}}')
        assert main([str(path)]) == EXIT_ERROR
        assert "not valid UTF-8" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "nope.json")]) == EXIT_ERROR
        assert "error:" in capsys.readouterr().err

    def test_multiple_files_worst_status(self, write_problem, quadratic_problem, capsys):
        good = write_problem(quadratic_problem, "good.json")
        bad = write_problem("[]", "bad.json")
        assert main([good, bad]) == EXIT_ERROR
        out = capsys.readouterr().out
        assert f"--- Solving {good} ---" in out
        assert f"--- Solving {bad} ---" in out

    def test_verbose_logs_rows(self, write_problem, quadratic_problem, caplog):
        with caplog.at_level(logging.DEBUG, logger="exactpoly.solver"):
            assert main(["-vv", write_problem(quadratic_problem)]) == EXIT_OK
        assert "Processing matrix row 3 of 3" in caplog.text

    def test_single_verbose_stops_at_info(self, write_problem, quadratic_problem, caplog):
        assert main(["-v", write_problem(quadratic_problem)]) == EXIT_OK
        assert "Degree 2 polynomial" in caplog.text
        assert "Processing matrix row" not in caplog.text
