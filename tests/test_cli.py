"""
Tests for the command-line interface.
"""

import math

import pytest

from roots_by_distribution.cli import build_parser, main, resolve_function
from roots_by_distribution.config import DEFAULT_RTOL


class TestResolveFunction:
    """Looking up 'module:attribute' targets."""

    def test_module_function(self):
        assert resolve_function("math:cos") is math.cos

    def test_dotted_module(self):
        import os.path
        assert resolve_function("os.path:join") is os.path.join

    def test_nested_attribute(self):
        f = resolve_function("mpmath:mp.cos")
        assert f(0) == 1

    @pytest.mark.parametrize("target", ["math.cos", "math:", ":cos", ""])
    def test_malformed_target(self, target):
        with pytest.raises(ValueError, match="module:attribute"):
            resolve_function(target)

    def test_not_callable(self):
        with pytest.raises(ValueError, match="non-callable"):
            resolve_function("math:pi")

    def test_missing_module(self):
        with pytest.raises(ImportError):
            resolve_function("roots_by_distribution_no_such_module:f")

    def test_missing_attribute(self):
        with pytest.raises(AttributeError):
            resolve_function("math:no_such_function")

    def test_source_text_is_not_evaluated(self):
        """Only names are resolved; expressions are rejected."""
        with pytest.raises(ValueError):
            resolve_function("__import__('os').system('true')")
        with pytest.raises(AttributeError):
            resolve_function("math:cos(0)")


class TestParser:

    def test_defaults(self):
        args = build_parser().parse_args(["math:cos", "-n", "2"])
        assert args.function == "math:cos"
        assert args.count == 2
        assert args.lo == 0.0
        assert args.hi == 1.0
        assert args.method == "brentq"
        assert args.rtol == DEFAULT_RTOL
        assert not args.log
        assert not args.brackets_only

    def test_rtol(self):
        args = build_parser().parse_args(["math:cos", "-n", "1", "--rtol", "1e-10"])
        assert args.rtol == 1e-10

    def test_count_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["math:cos"])

    def test_unknown_method(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["math:cos", "-n", "1", "--method", "newton"])


class TestMain:
    """Running the CLI end to end."""

    def test_roots(self, capsys):
        assert main(["math:cos", "-n", "2", "--hi", "6"]) == 0
        lines = capsys.readouterr().out.split()
        assert [float(v) for v in lines] == pytest.approx(
            [math.pi / 2, 3 * math.pi / 2], abs=1e-10
        )

    def test_brackets_only(self, capsys):
        main(["math:sin", "-n", "1", "--lo", "-1", "--hi", "1", "--brackets-only"])
        assert capsys.readouterr().out.strip() == "-1.0 1.0"

    def test_log_sampling(self, capsys):
        main(["math:log10", "-n", "1", "--lo", "0.1", "--hi", "100", "--log"])
        assert float(capsys.readouterr().out) == pytest.approx(1.0)

    def test_exact_zeros(self, capsys):
        main(["mpmath:sinpi", "-n", "3", "--hi", "2"])
        lines = capsys.readouterr().out.split()
        assert [float(v) for v in lines] == [0.0, 1.0, 2.0]

    def test_mpmath_method(self, capsys):
        main(["mpmath:cos", "-n", "1", "--lo", "1", "--hi", "2",
              "--method", "mpmath", "--dps", "30"])
        root = capsys.readouterr().out.strip()
        assert root.startswith("1.57079632679489661923132169")
        assert float(root) == pytest.approx(math.pi / 2)

    def test_rtol_reaches_config(self):
        with pytest.raises(ValueError, match="rtol=-1.0"):
            main(["math:cos", "-n", "1", "--hi", "6", "--rtol", "-1"])

    def test_zero_count(self, capsys):
        main(["math:cos", "-n", "0"])
        assert capsys.readouterr().out == ""

    def test_bad_target(self):
        with pytest.raises(ValueError, match="module:attribute"):
            main(["cos", "-n", "1"])

    def test_verbose(self, capsys):
        main(["math:cos", "-n", "2", "--hi", "6", "--verbose"])
        out = capsys.readouterr().out
        assert "Bracket search: n = 2" in out
        roots = [float(line) for line in out.splitlines()
                 if not line.startswith(("Bracket", "Found", " "))]
        assert roots == pytest.approx([math.pi / 2, 3 * math.pi / 2])
