"""
Unit tests for the SetTheory command-line interface.
"""

import io
import json

import pytest

from settheory import __version__
from settheory.cli import Colors, create_parser, main


@pytest.fixture(autouse=True)
def no_colors():
    """Run every CLI test with plain output."""
    Colors.disable()


class TestShow:
    def test_canonical_rendering(self, capsys):
        assert main(["show", "{2, 1, 1}"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out[0] == "{1, 2}"
        assert "2 element(s)" in out[1]

    def test_atom(self, capsys):
        assert main(["show", "x"]) == 0
        assert capsys.readouterr().out.splitlines() == ["x", "atom"]

    def test_json(self, capsys):
        assert main(["show", "--json", "{{1}, 2}"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data == {"text": "{2, {1}}", "kind": "set", "cardinality": 2, "height": 2}

    def test_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("{b,\n a}\n"))
        assert main(["show", "-"]) == 0
        assert capsys.readouterr().out.splitlines()[0] == "{a, b}"

    def test_parse_error(self, capsys):
        assert main(["show", "{1 2}"]) == 1
        err = capsys.readouterr().err
        assert "Error:" in err
        assert "Expected ',' or '}'" in err


class TestCompare:
    def test_less(self, capsys):
        assert main(["compare", "{1, 2}", "{1, 2, 3}"]) == 0
        assert capsys.readouterr().out.strip() == "{1, 2} < {1, 2, 3}"

    def test_equivalent(self, capsys):
        assert main(["cmp", "{1, 2}", "{2, 1}"]) == 0
        assert capsys.readouterr().out.strip() == "{1, 2} ~ {1, 2}"

    def test_greater_json(self, capsys):
        assert main(["compare", "--json", "{}", "1"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["result"] == 1


class TestSort:
    def test_sort_collapses(self, capsys):
        assert main(["sort", "{1}", "b", "{}", "a", "{1}"]) == 0
        assert capsys.readouterr().out.splitlines() == ["a", "b", "{}", "{1}"]

    def test_keep_duplicates(self, capsys):
        assert main(["sort", "--keep-duplicates", "{1, 2}", "{2, 1}"]) == 0
        assert capsys.readouterr().out.splitlines() == ["{1, 2}", "{1, 2}"]


class TestOps:
    def test_table(self, capsys):
        assert main(["ops", "{1, 2}", "{2, 3}"]) == 0
        out = capsys.readouterr().out
        assert "A ∪ B  {1, 2, 3}" in out
        assert "A ∩ B  {2}" in out
        assert "A ⊆ B  False" in out

    def test_atom_operand(self, capsys):
        assert main(["ops", "{1}", "1"]) == 1
        assert "expected a set" in capsys.readouterr().err


class TestPower:
    def test_power(self, capsys):
        assert main(["power", "{1}"]) == 0
        assert capsys.readouterr().out.strip() == "{{}, {1}}"


class TestMisc:
    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out.lower()

    def test_version(self, capsys):
        with pytest.raises(SystemExit):
            main(["--version"])
        assert __version__ in capsys.readouterr().out

    def test_info(self, capsys):
        assert main(["info"]) == 0
        out = capsys.readouterr().out
        assert "Literal syntax" in out
        assert "{1, 2}" in out

    def test_verbose_flag_parses(self):
        args = create_parser().parse_args(["-v", "show", "1"])
        assert args.verbose is True
        assert args.command == "show"
