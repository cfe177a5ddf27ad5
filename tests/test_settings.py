import logging
import textwrap

import pytest

from mazegen.errors import SettingsError
from mazegen.settings import MazeSettings


def test_packaged_defaults():
    s = MazeSettings.load(environ={})
    assert (s.maze.width, s.maze.height) == (20, 20)
    assert s.maze.seed is None
    assert s.maze.start == "random"
    assert (s.render.cell_width, s.render.cell_height) == (5, 2)
    assert s.render.terminus_char == "*"


def test_user_file_overlays_defaults(tmp_path):
    path = tmp_path / "maze.yaml"
    path.write_text(
        textwrap.dedent(
            """
            maze:
              width: 8
              seed: 31
            render:
              terminus_char: null
            """
        ),
        encoding="utf-8",
    )
    s = MazeSettings.load(path, environ={})
    assert s.maze.width == 8
    assert s.maze.height == 20
    assert s.maze.seed == 31
    assert s.render.cell_width == 5
    assert s.render.terminus_char is None


def test_missing_user_file_falls_back(tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        s = MazeSettings.load(tmp_path / "nope.yaml", environ={})
    assert s.maze.width == 20
    assert "not found" in caplog.text


def test_environment_overrides_file(tmp_path):
    path = tmp_path / "maze.yaml"
    path.write_text("maze:\n  width: 8\n", encoding="utf-8")
    env = {"MAZEGEN_WIDTH": "12", "MAZEGEN_HEIGHT": "3", "MAZEGEN_SEED": "9", "MAZEGEN_START": "Origin"}
    s = MazeSettings.load(path, environ=env)
    assert (s.maze.width, s.maze.height, s.maze.seed, s.maze.start) == (12, 3, 9, "origin")


def test_os_environment_is_read_by_default(monkeypatch):
    monkeypatch.setenv("MAZEGEN_HEIGHT", "4")
    assert MazeSettings.load().maze.height == 4


def test_non_integer_environment_rejected():
    with pytest.raises(SettingsError):
        MazeSettings.load(environ={"MAZEGEN_WIDTH": "wide"})


@pytest.mark.parametrize(
    "content",
    [
        "maze:\n  width: 0\n",
        "maze:\n  height: -2\n",
        "maze:\n  start: middle\n",
        "maze:\n  seed: abc\n",
        "render:\n  cell_width: 0\n",
        "render:\n  terminus_char: '##'\n",
        "maze:\n  depth: 3\n",
        "- just\n- a list\n",
    ],
)
def test_invalid_files_rejected(tmp_path, content):
    path = tmp_path / "bad.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(SettingsError):
        MazeSettings.load(path, environ={})


def test_saved_settings_load_back(tmp_path):
    s = MazeSettings.load(environ={})
    s.maze.width = 33
    s.render.terminus_char = "@"
    path = tmp_path / "nested" / "maze.yaml"
    s.save(path)
    assert MazeSettings.load(path, environ={}) == s


def test_malformed_yaml_rejected(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("maze: [unclosed\n", encoding="utf-8")
    with pytest.raises(SettingsError, match="Cannot read settings file"):
        MazeSettings.load(path, environ={})


def test_directory_as_settings_file_rejected(tmp_path):
    with pytest.raises(SettingsError, match="Cannot read settings file"):
        MazeSettings.load(tmp_path, environ={})
