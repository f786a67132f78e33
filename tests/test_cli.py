"""Tests for the command-line interface."""

import os
import pathlib
import subprocess
import sys

import matplotlib
import pytest

# Use non-interactive backend for testing
matplotlib.use("Agg")

from dual_extrude.cli import EXIT_FAILURE, EXIT_OK, main, parse_diameter

SRC_DIR = pathlib.Path(__file__).resolve().parent.parent / "src"

PROGRAM = "; test\nM104 S210 T0\nM101 T0\nG1 X10 E5.0\nG1 X20 E7.5\nM103 T0\n"


@pytest.fixture
def infile(tmp_path):
    """Right-extruder input file."""
    path = tmp_path / "in.gcode"
    path.write_text(PROGRAM, encoding="utf-8")
    return path


class TestParseDiameter:
    """Tests for parse_diameter."""

    def test_valid_diameter(self):
        """Test a common filament diameter."""
        assert parse_diameter("1.75") == 1.75

    @pytest.mark.parametrize("text", ["1.5", "2.2", "2.85", "1.0", "0", "-1.75"])
    def test_out_of_band(self, text):
        """Test that bounds are exclusive."""
        with pytest.raises(ValueError, match="outside"):
            parse_diameter(text)

    def test_not_a_number(self):
        """Test that non-numeric input is rejected."""
        with pytest.raises(ValueError):
            parse_diameter("thick")


class TestMain:
    """Tests for main()."""

    def test_two_arguments(self, infile, tmp_path, capsys):
        """Test equal-diameter mode."""
        outfile = tmp_path / "out.gcode"
        assert main([str(infile), str(outfile)]) == EXIT_OK

        out = capsys.readouterr().out
        assert "Checking file..." in out
        assert "File uses right extruder, added left." in out
        assert "6 Lines processed" in out
        assert outfile.read_text(encoding="utf-8").splitlines() == [
            "; test",
            "M104 S210 T1",
            "M104 S210 T0",
            "M101 T1",
            "M101 T0",
            "G1 X10 A5.00000 B5.00000",
            "G1 X20 B7.50000 A7.50000",
            "M103 T1",
            "M103 T0",
        ]

    def test_four_arguments(self, infile, tmp_path, capsys):
        """Test diameter correction mode."""
        outfile = tmp_path / "out.gcode"
        assert main([str(infile), "2.0", str(outfile), "1.6"]) == EXIT_OK

        out = capsys.readouterr().out
        assert "Input file diameter: 2.0   Added extruder diameter: 1.6" in out
        # new = ((7.5 - 5.0) * 1.5625) + 5.0 = 8.90625
        assert "G1 X20 B8.90625 A7.50000" in outfile.read_text(encoding="utf-8")

    def test_diameter_out_of_band_rejected_before_io(self, tmp_path, capsys):
        """Test that a bad diameter exits before any file is touched."""
        missing = tmp_path / "missing.gcode"
        outfile = tmp_path / "out.gcode"
        with pytest.raises(SystemExit) as exc:
            main([str(missing), "1.75", str(outfile), "2.85"])
        assert exc.value.code == 2
        assert "Filament diameter: 2.85 too big/small!" in capsys.readouterr().err
        assert not outfile.exists()

    @pytest.mark.parametrize("count", [1, 3, 5])
    def test_wrong_argument_count(self, tmp_path, count):
        """Test that only two or four positional arguments are accepted."""
        args = [str(tmp_path / f"f{i}") for i in range(count)]
        with pytest.raises(SystemExit) as exc:
            main(args)
        assert exc.value.code == 2

    def test_validation_failure(self, tmp_path, capsys):
        """Test the exit code and message for a two-extruder file."""
        infile = tmp_path / "in.gcode"
        outfile = tmp_path / "out.gcode"
        infile.write_text("M101 T0\nM101 T1\n", encoding="utf-8")

        assert main([str(infile), str(outfile)]) == EXIT_FAILURE
        assert "ERROR: File already uses both extruders in line 2" in capsys.readouterr().err
        assert not outfile.exists()

    def test_missing_input(self, tmp_path, capsys):
        """Test the exit code and message for a missing input."""
        missing = tmp_path / "missing.gcode"
        assert main([str(missing), str(tmp_path / "out.gcode")]) == EXIT_FAILURE
        assert "ERROR: Can't open input file" in capsys.readouterr().err

    def test_conversion_failure(self, tmp_path, capsys):
        """Test the exit code and message for a malformed line."""
        infile = tmp_path / "in.gcode"
        infile.write_text("M101 T0\nG1 X1\nM108 T0\n", encoding="utf-8")

        assert main([str(infile), str(tmp_path / "out.gcode")]) == EXIT_FAILURE
        assert "ERROR: no speed in command in line 3" in capsys.readouterr().err

    def test_plot(self, infile, tmp_path, capsys):
        """Test saving an extrusion split plot."""
        outfile = tmp_path / "out.gcode"
        plot = tmp_path / "split.png"
        assert main([str(infile), str(outfile), "--plot", str(plot)]) == EXIT_OK
        assert plot.exists()
        assert f"Plot saved: {plot}" in capsys.readouterr().out

    def test_plot_without_moves_warns(self, tmp_path, capsys):
        """Test that a file without extrusion still converts."""
        infile = tmp_path / "in.gcode"
        infile.write_text("M101 T0\nM103 T0\n", encoding="utf-8")
        plot = tmp_path / "split.png"

        assert main([str(infile), str(tmp_path / "out.gcode"), "--plot", str(plot)]) == EXIT_OK
        assert "WARNING: No extrusion moves to plot" in capsys.readouterr().err
        assert not plot.exists()


def test_cli_runs_and_writes_output(tmp_path: pathlib.Path):
    infile = tmp_path / "in.gcode"
    outfile = tmp_path / "out.gcode"
    infile.write_text(PROGRAM, encoding="utf-8")

    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC_DIR), env.get("PYTHONPATH")]))
    cmd = [sys.executable, "-m", "dual_extrude", str(infile), str(outfile), "-v"]
    res = subprocess.run(cmd, capture_output=True, text=True, env=env)
    assert res.returncode == 0, res.stderr
    assert outfile.exists()
    assert "M101 T1\nM101 T0\n" in outfile.read_text(encoding="utf-8")
