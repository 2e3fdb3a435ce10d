"""
Tests for the command-line interface
"""

import json

import pytest

from tilequery.cli import main


def run_cli(argv):
    """Run the CLI and return its exit code"""
    with pytest.raises(SystemExit) as exc:
        main(argv)
    return exc.value.code


class TestSelectCommand:
    """Test `tilequery select`"""

    def test_select_full_extent(self, capsys, berkeley):
        """Test JSON plan is printed for a valid query"""
        code = run_cli(
            [
                "select",
                f"--ullon={berkeley.ullon}",
                f"--ullat={berkeley.ullat}",
                f"--lrlon={berkeley.lrlon}",
                f"--lrlat={berkeley.lrlat}",
                "--width=256",
                "--height=256",
            ]
        )

        assert code == 0
        result = json.loads(capsys.readouterr().out)
        assert result["depth"] == 0
        assert result["render_grid"] == [["d0_x0_y0.png"]]
        assert result["query_success"] is True

    def test_select_custom_pyramid(self, capsys, tmp_path, square_pyramid):
        """Test --pyramid accepts a JSON file"""
        path = tmp_path / "square.json"
        path.write_text(json.dumps(square_pyramid.to_dict()))

        code = run_cli(
            [
                "select",
                "--ullon=1", "--ullat=7", "--lrlon=3", "--lrlat=5",
                "--width=129", "--height=129",
                f"--pyramid={path}",
            ]
        )

        assert code == 0
        result = json.loads(capsys.readouterr().out)
        assert result["depth"] == 2
        assert result["render_grid"][1] == ["d2_x0_y1.png", "d2_x1_y1.png"]

    def test_select_invalid_viewport(self, capsys):
        """Test errors exit with status 1"""
        code = run_cli(
            [
                "select",
                "--ullon=-122.26", "--ullat=37.87", "--lrlon=-122.25", "--lrlat=37.86",
                "--width=0", "--height=100",
            ]
        )

        assert code == 1
        assert "Error:" in capsys.readouterr().out

    def test_select_unknown_pyramid(self, capsys):
        """Test unknown pyramid names exit with status 1"""
        code = run_cli(
            [
                "select",
                "--ullon=1", "--ullat=7", "--lrlon=3", "--lrlat=5",
                "--width=100", "--height=100",
                "--pyramid=atlantis",
            ]
        )

        assert code == 1
        assert "atlantis" in capsys.readouterr().out


class TestPyramidCommand:
    """Test `tilequery pyramid`"""

    def test_default_pyramid(self, capsys):
        """Test default pyramid summary lists every depth"""
        code = run_cli(["pyramid"])

        assert code == 0
        out = capsys.readouterr().out
        assert "Pyramid: berkeley" in out
        assert "128x128" in out
        assert "256px" in out

    def test_unknown_pyramid(self, capsys):
        """Test unknown pyramid exits with status 1"""
        assert run_cli(["pyramid", "atlantis"]) == 1


def test_no_command_prints_help(capsys):
    """Test missing command exits with status 1"""
    assert run_cli([]) == 1
    assert "usage" in capsys.readouterr().out.lower()
