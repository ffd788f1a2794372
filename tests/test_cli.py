"""
Tests for the hull_search command line interface.
"""

import json

import pytest

from hull_search.cli import create_parser, main


@pytest.fixture
def points_csv(tmp_path):
    """A square with one interior point."""
    path = tmp_path / "points.csv"
    path.write_text("x,y,label\n0,0,a\n4,0,b\n4,4,c\n0,4,d\n2,1,inside\n")
    return path


class TestParser:
    """Tests for argument parsing."""

    def test_compute_options(self):
        """compute accepts the run settings."""
        args = create_parser().parse_args(
            ["compute", "-i", "p.csv", "-a", "quick-hull", "--order", "centroid"]
        )

        assert args.command == "compute"
        assert args.input == "p.csv"
        assert args.algorithm == "quick-hull"
        assert args.order == "centroid"

    def test_no_command(self, capsys):
        """No command prints help and succeeds."""
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out


class TestCompute:
    """Tests for the compute command."""

    def test_prints_hull(self, points_csv, capsys):
        """Hull vertices are printed with labels."""
        assert main(["compute", "--input", str(points_csv)]) == 0

        out = capsys.readouterr().out
        assert "Hull vertices: 4" in out
        assert "[a]" in out
        assert "inside" not in out

    def test_output_and_plot(self, points_csv, tmp_path):
        """--output and --plot write files."""
        output = tmp_path / "hull.json"
        plot = tmp_path / "hull.png"

        code = main([
            "compute", "-i", str(points_csv), "-a", "quick-hull",
            "--order", "centroid", "-o", str(output), "--plot", str(plot),
        ])

        assert code == 0
        labels = [p["label"] for p in json.loads(output.read_text())["points"]]
        assert labels == ["a", "b", "c", "d"]
        assert plot.exists()

    def test_config_file(self, points_csv, tmp_path, capsys):
        """Settings come from a YAML file; paths resolve next to it."""
        config = tmp_path / "hull.yaml"
        config.write_text(
            "hull:\n  algorithm: graham-scan\ninput:\n  path: points.csv\noutput:\n  path: out.csv\n"
        )

        assert main(["compute", "--config", str(config)]) == 0
        assert "Algorithm: graham-scan" in capsys.readouterr().out
        assert (tmp_path / "out.csv").exists()

    def test_missing_input(self, tmp_path, capsys):
        """A missing file is reported and exits 1."""
        assert main(["compute", "-i", str(tmp_path / "none.csv")]) == 1
        assert "not found" in capsys.readouterr().err

    def test_no_input(self, capsys):
        """Neither --input nor a config file."""
        assert main(["compute"]) == 1
        assert "no input" in capsys.readouterr().err

    def test_invalid_points(self, tmp_path, capsys):
        """Too few points exit 1 with the error message."""
        path = tmp_path / "two.csv"
        path.write_text("0,0\n1,1\n")

        assert main(["compute", "-i", str(path)]) == 1
        assert "less than 3" in capsys.readouterr().err

    def test_short_csv_row(self, tmp_path, capsys):
        """A malformed CSV row exits 1 instead of raising."""
        path = tmp_path / "bad.csv"
        path.write_text("0,0\n4,0\n4,4\n3\n")

        assert main(["compute", "-i", str(path)]) == 1
        assert "too few columns" in capsys.readouterr().err

    def test_config_not_a_mapping(self, points_csv, tmp_path, capsys):
        """A config file holding a list exits 1."""
        config = tmp_path / "hull.yaml"
        config.write_text("- quick-hull\n")

        assert main(["compute", "-i", str(points_csv), "-c", str(config)]) == 1
        assert "mapping" in capsys.readouterr().err

    def test_unknown_algorithm(self, points_csv, capsys):
        """Unknown algorithm names exit 1."""
        assert main(["compute", "-i", str(points_csv), "-a", "chan"]) == 1
        assert "Unknown algorithm" in capsys.readouterr().err


class TestCompare:
    """Tests for the compare command."""

    def test_agree(self, points_csv, capsys):
        """All three algorithms agree on a square."""
        assert main(["compare", "-i", str(points_csv)]) == 0

        out = capsys.readouterr().out
        assert "quick-hull: 4 vertices" in out
        assert "Algorithms agree: yes" in out

    def test_graham_failure_reported(self, tmp_path, capsys):
        """A degenerate Graham scan is listed as an error."""
        path = tmp_path / "below.csv"
        path.write_text("0,-1\n1,-2\n2,-1\n")

        assert main(["compare", "-i", str(path)]) == 1
        assert "graham-scan" in capsys.readouterr().out

        assert main(["compare", "-i", str(path), "--angle-reference", "anchor"]) == 0

    def test_short_csv_row(self, tmp_path, capsys):
        """A malformed CSV row exits 1 before any algorithm runs."""
        path = tmp_path / "bad.csv"
        path.write_text("0,0\n4,0\n4,4\n3\n")

        assert main(["compare", "-i", str(path)]) == 1
        assert "too few columns" in capsys.readouterr().err


def test_algorithms_command(capsys):
    """Registered names are listed."""
    assert main(["algorithms"]) == 0

    out = capsys.readouterr().out
    for name in ("gift-wrapping", "graham-scan", "quick-hull"):
        assert name in out
