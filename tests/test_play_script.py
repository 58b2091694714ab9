"""
Tests for the play script's argument handling.
"""

import pytest


class TestPlayScript:
    """Tests for scripts/play.py."""

    def test_overrides(self, mock_pygame_module, sample_config_file):
        from play import build_config, parse_args

        args = parse_args([
            "--config", str(sample_config_file),
            "--width", "20",
            "--length", "5",
            "--seed", "9",
            "--tick-ms", "100",
        ])
        config = build_config(args)

        assert config.game.grid_width == 20
        assert config.game.grid_height == 8
        assert config.game.initial_length == 5
        assert config.game.seed == 9
        assert config.display.tick_ms == 100

    def test_invalid_override(self, mock_pygame_module, sample_config_file):
        from play import build_config, parse_args

        args = parse_args(["--config", str(sample_config_file), "--height", "0"])

        with pytest.raises(ValueError):
            build_config(args)

    def test_main_rejects_bad_config(self, mock_pygame_module, sample_config_file, capsys):
        from play import main

        assert main(["--config", str(sample_config_file), "--tick-ms", "-5"]) == 2
        assert "[Config] display.tick_ms" in capsys.readouterr().out

    def test_main_rejects_malformed_file(self, mock_pygame_module, tmp_path, capsys):
        from play import main

        path = tmp_path / "malformed.yaml"
        path.write_text("game: 5\n")

        assert main(["--config", str(path)]) == 2
        assert "[Config] game must be a mapping" in capsys.readouterr().out
