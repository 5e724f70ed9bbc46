from PIL import Image

from fractal_cli import main


class TestCLI:
    def test_list(self, capsys) -> None:
        assert main(["--list"]) == 0
        out = capsys.readouterr().out
        assert "Barnsley Fern" in out
        assert "Fractal Tree" in out
        assert len(out.strip().splitlines()) == 13

    def test_info(self, capsys) -> None:
        assert main(["--fractal", "2", "--iterations", "1", "--info"]) == 0
        # FX -> FX+YF+
        assert "Dragon Curve: 6 symbols" in capsys.readouterr().out

    def test_render(self, tmp_path) -> None:
        out = tmp_path / "snowflake.png"
        code = main([
            "--fractal", "12", "--iterations", "2", "--out", str(out),
            "--width", "80", "--height", "60", "--color1", "#000000", "--color2", "#FFFFFF",
        ])
        assert code == 0
        assert Image.open(out).size == (80, 60)

    def test_default_iterations_capped(self, tmp_path, capsys) -> None:
        out = tmp_path / "segment.png"
        assert main(["--fractal", "3", "--out", str(out), "--width", "20", "--height", "20"]) == 0
        assert out.exists()
        assert main(["--fractal", "3", "--info"]) == 0
        assert "after 3 iterations" in capsys.readouterr().out

    def test_unknown_fractal(self, capsys) -> None:
        assert main(["--fractal", "77", "--info"]) == 2
        assert "Unknown fractal" in capsys.readouterr().err

    def test_iteration_limit(self, tmp_path, capsys) -> None:
        out = tmp_path / "x.png"
        assert main(["--fractal", "3", "--iterations", "4", "--out", str(out)]) == 2
        assert not out.exists()
        assert "between 0 and 3" in capsys.readouterr().err

    def test_invalid_color(self, tmp_path, capsys) -> None:
        code = main(["--color1", "#12345", "--out", str(tmp_path / "x.png"), "--width", "10", "--height", "10"])
        assert code == 2
        assert "Invalid color" in capsys.readouterr().err

    def test_unwritable_output(self, tmp_path, capsys) -> None:
        out = tmp_path / "missing" / "x.png"
        code = main(["--iterations", "1", "--out", str(out), "--width", "10", "--height", "10"])
        assert code == 2
        assert "File error" in capsys.readouterr().err
