"""
Tests for the ``python -m rbtree`` entry point.
"""

from rbtree.__main__ import build_parser, main


class TestMain:
    """Tests for the demo command."""

    def test_insert_and_print(self, capsys):
        """Inserted keys are printed as a tree."""
        assert main(["10", "20", "30"]) == 0

        out = capsys.readouterr().out
        assert out.splitlines() == ["20(B)", "    L: 10(R)", "    R: 30(R)"]

    def test_remove(self, capsys):
        """Keys given to --remove are gone from the output."""
        assert main(["10", "20", "30", "--remove", "10"]) == 0

        out = capsys.readouterr().out
        assert "10(" not in out
        assert "20(B)" in out

    def test_remove_missing_key_fails(self, capsys):
        """Removing an absent key exits with status 1."""
        assert main(["10", "--remove", "5"]) == 1
        assert capsys.readouterr().out == ""

    def test_empty(self, capsys):
        """No keys prints the empty placeholder."""
        assert main([]) == 0
        assert capsys.readouterr().out.strip() == "<empty>"

    def test_parser(self):
        """Arguments are parsed as integers."""
        args = build_parser().parse_args(["3", "1", "--remove", "1", "3"])
        assert args.keys == [3, 1]
        assert args.remove == [1, 3]
