"""
Unit tests for config defaults and override files.
"""

from pathlib import Path

from capmenu.config import Config, default_config_path, load_config, parse_config_text
from capmenu.tools import Picker


class TestParseConfigText:
    """Unit tests for key=value parsing."""

    def test_comments_and_blank_lines(self):
        text = "# capture dirs\n\nvideo_dir=/tmp/videos\n"
        assert parse_config_text(text) == {"video_dir": "/tmp/videos"}

    def test_quotes_and_export(self):
        text = 'export menu_cmd="rofi -dmenu -p {prompt}"\ngif_scale=\'480\'\n'
        values = parse_config_text(text)

        assert values["menu_cmd"] == "rofi -dmenu -p {prompt}"
        assert values["gif_scale"] == "480"

    def test_trailing_comment(self):
        assert parse_config_text("gif_fps=10  # smoother\n") == {"gif_fps": "10"}

    def test_multi_word_value_keeps_quoting(self, runner):
        """Quoted words inside an unquoted value survive a second split."""
        values = parse_config_text('menu_cmd=fuzzel --dmenu --prompt "{prompt}: "\n')
        picker = Picker(runner, values["menu_cmd"])

        assert picker.command("Capture") == ["fuzzel", "--dmenu", "--prompt", "Capture: "]

    def test_unquoted_words_joined(self):
        assert parse_config_text("video_dir=/home/me/My Videos\n") == {"video_dir": "/home/me/My Videos"}

    def test_line_without_equals_skipped(self):
        assert parse_config_text("nonsense\ngif_fps=10\n") == {"gif_fps": "10"}


class TestLoadConfig:
    """Unit tests for load_config."""

    def test_missing_file_uses_defaults(self, tmp_path):
        config = load_config(str(tmp_path / "absent"))

        assert config == Config()

    def test_partial_override_keeps_defaults(self, tmp_path):
        path = tmp_path / "config"
        path.write_text("gif_scale=480\nrecord_audio=yes\n")

        config = load_config(str(path))

        assert config.gif_scale == 480
        assert config.record_audio is True
        assert config.gif_fps == Config().gif_fps
        assert config.menu_cmd == Config().menu_cmd

    def test_invalid_and_unknown_values_ignored(self, tmp_path):
        path = tmp_path / "config"
        path.write_text("gif_fps=fast\ncolour=blue\nno_upload=on\n")

        config = load_config(str(path))

        assert config.gif_fps == 15
        assert config.no_upload is True
        assert not hasattr(config, "colour")

    def test_dirs_expand_home(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        path = tmp_path / "config"
        path.write_text("image_dir=~/shots\n")

        config = load_config(str(path))

        assert config.image_dir == str(tmp_path / "shots")

    def test_default_path_honors_xdg(self, tmp_path, monkeypatch):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert default_config_path() == tmp_path / "capmenu" / "config"

    def test_default_path_under_home(self, tmp_path, monkeypatch):
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))
        assert default_config_path() == Path(tmp_path) / ".config" / "capmenu" / "config"


class TestUploadEnabled:

    def test_needs_url(self):
        assert not Config().upload_enabled

    def test_suppressed(self):
        assert not Config(upload_url="https://0x0.st", no_upload=True).upload_enabled

    def test_enabled(self):
        assert Config(upload_url="https://0x0.st").upload_enabled
