"""
End-to-end tests for the clipcopy command line.

pyperclip is monkeypatched with an in-memory clipboard.
"""

import pyperclip
import pytest
import yaml

from cli import create_parser, main


class MemoryClipboard:
    def __init__(self, text=""):
        self.text = text

    def paste(self):
        return self.text

    def copy(self, text):
        self.text = text


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("CLIPCOPY_CONFIG", raising=False)
    return home


@pytest.fixture
def clipboard(monkeypatch):
    board = MemoryClipboard("OLD")
    monkeypatch.setattr(pyperclip, "paste", board.paste)
    monkeypatch.setattr(pyperclip, "copy", board.copy)
    return board


@pytest.fixture
def project(tmp_path):
    src = tmp_path / "src"
    src.mkdir()
    (src / "a.ts").write_text("const a = 1;\n")
    (src / "b.png").write_bytes(b"\x89PNG")
    (src / "c.md").write_text("# C\n")
    return src


class TestModes:
    """Test mode flags through the command line."""

    def test_clear_ignores_paths(self, clipboard, project, capsys):
        """Test that --clear empties the clipboard and processes nothing."""
        assert main(["--clear", str(project / "a.ts")]) == 0
        assert clipboard.text == ""
        assert "Clipboard cleared" in capsys.readouterr().out

    def test_clear_after_other_flags(self, clipboard, project):
        assert main(["--fresh", str(project), "--clear"]) == 0
        assert clipboard.text == ""

    def test_default_is_append(self, clipboard, project):
        assert main([str(project / "a.ts")]) == 0
        assert clipboard.text.startswith("OLD//=====")
        assert "const a = 1;" in clipboard.text

    def test_fresh(self, clipboard, project):
        assert main(["--fresh", str(project)]) == 0
        assert not clipboard.text.startswith("OLD")
        assert "─── a.ts " in clipboard.text
        assert "─── c.md " in clipboard.text
        assert "b.png" not in clipboard.text

    def test_last_mode_flag_wins(self, clipboard, project):
        assert main(["--fresh", "--append", str(project / "a.ts")]) == 0
        assert clipboard.text.startswith("OLD")

    def test_ide_style_arguments(self, clipboard, project):
        """Test quoted flags, glued paths and an unexpanded placeholder."""
        glued = f'"{project / "a.ts"} {project / "c.md"}"'
        assert main(['"--fresh"', glued, "$SelectedFiles$"]) == 0
        assert clipboard.text.index("a.ts") < clipboard.text.index("c.md")
        assert "$SelectedFiles$" not in clipboard.text


class TestOptions:
    """Test clipcopy's own options."""

    def test_style_rule(self, clipboard, project):
        assert main(["--fresh", "--style", "rule", str(project / "c.md")]) == 0
        assert clipboard.text.startswith("=" * 80 + "\n// ")

    def test_config_default_mode(self, clipboard, project, tmp_path):
        cfg = tmp_path / "clipcopy.yaml"
        cfg.write_text(yaml.dump({"default_mode": "fresh", "allowed_extensions": [".png"]}))

        assert main(["--config", str(cfg), str(project / "a.ts")]) == 0
        assert not clipboard.text.startswith("OLD")

    def test_config_extension_list(self, clipboard, project, tmp_path):
        cfg = tmp_path / "clipcopy.yaml"
        cfg.write_text(yaml.dump({"allowed_extensions": [".md"]}))

        assert main(["--fresh", "--config", str(cfg), str(project)]) == 0
        assert "c.md" in clipboard.text
        assert "a.ts" not in clipboard.text

    def test_invalid_config_fails(self, clipboard, project, tmp_path, capsys):
        cfg = tmp_path / "clipcopy.yaml"
        cfg.write_text(yaml.dump({"style": "fancy"}))

        assert main(["--config", str(cfg), str(project)]) == 1
        assert clipboard.text == "OLD"
        assert "Invalid settings" in capsys.readouterr().err

    def test_missing_config_fails(self, clipboard, project, tmp_path):
        assert main(["--config", str(tmp_path / "nope.yaml"), str(project)]) == 1

    def test_check_config(self, clipboard, tmp_path, capsys):
        cfg = tmp_path / "clipcopy.yaml"
        cfg.write_text(yaml.dump({"style": "rule"}))

        assert main(["--check-config", "--config", str(cfg)]) == 0
        assert "Settings are valid" in capsys.readouterr().out
        assert clipboard.text == "OLD"

    def test_check_config_invalid(self, clipboard, tmp_path):
        cfg = tmp_path / "clipcopy.yaml"
        cfg.write_text(yaml.dump({"separator_length": 0}))
        assert main(["--check-config", "--config", str(cfg)]) == 1

    def test_parser_does_not_abbreviate(self):
        args, rest = create_parser().parse_known_args(["--conf", "x"])
        assert args.config is None
        assert rest == ["--conf", "x"]


class TestFailures:
    """Test exit codes for warnings and failures."""

    def test_missing_path_is_a_warning(self, clipboard, project, tmp_path, capsys):
        assert main(["--fresh", str(tmp_path / "missing"), str(project / "c.md")]) == 0
        assert "# C" in clipboard.text
        assert "Cannot access" in capsys.readouterr().err

    def test_no_paths_is_a_warning(self, clipboard, capsys):
        assert main(["--fresh"]) == 0
        assert clipboard.text == "OLD"
        assert "No files/folders detected" in capsys.readouterr().err

    def test_clipboard_write_failure(self, monkeypatch, project, capsys):
        def broken_copy(text):
            raise pyperclip.PyperclipException("no copy/paste mechanism")

        monkeypatch.setattr(pyperclip, "paste", lambda: "")
        monkeypatch.setattr(pyperclip, "copy", broken_copy)

        assert main(["--fresh", str(project / "a.ts")]) == 1
        assert "Could not write clipboard" in capsys.readouterr().err

    def test_unexpected_error(self, monkeypatch, clipboard, project, capsys):
        import commands.copy

        def explode(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr(commands.copy, "resolve_paths", explode)
        assert main(["--fresh", str(project)]) == 1
        assert "Unexpected error: boom" in capsys.readouterr().err
