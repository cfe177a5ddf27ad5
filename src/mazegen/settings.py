from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .errors import SettingsError
from .maze import START_ORIGIN, START_RANDOM

logger = logging.getLogger(__name__)

ENV_WIDTH = "MAZEGEN_WIDTH"
ENV_HEIGHT = "MAZEGEN_HEIGHT"
ENV_SEED = "MAZEGEN_SEED"
ENV_START = "MAZEGEN_START"


@dataclass
class MazeOptions:
    width: int = 20
    height: int = 20
    seed: Optional[int] = None
    start: str = START_RANDOM


@dataclass
class RenderOptions:
    cell_width: int = 5
    cell_height: int = 2
    terminus_char: Optional[str] = "*"


@dataclass
class MazeSettings:
    maze: MazeOptions = field(default_factory=MazeOptions)
    render: RenderOptions = field(default_factory=RenderOptions)

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise SettingsError(f"Cannot read settings file {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise SettingsError(f"Settings file {path} must contain a mapping")
        return data

    @classmethod
    def _deep_merge(cls, base: dict, overlay: dict) -> dict:
        merged = dict(base)
        for k, v in (overlay or {}).items():
            if isinstance(v, dict) and isinstance(base.get(k), dict):
                merged[k] = cls._deep_merge(base[k], v)
            else:
                merged[k] = v
        return merged

    @classmethod
    def _from_dict(cls, data: dict) -> "MazeSettings":
        try:
            maze = MazeOptions(**(data.get("maze") or {}))
            render = RenderOptions(**(data.get("render") or {}))
        except TypeError as exc:
            raise SettingsError(f"Unknown settings key: {exc}") from exc
        return MazeSettings(maze=maze, render=render)

    @classmethod
    def load(cls, user_path: Optional[Path] = None, environ: Optional[Mapping[str, str]] = None) -> "MazeSettings":
        """Load settings from built-in defaults, an optional user file and the environment.

        Later sources win: packaged defaults < user YAML file < MAZEGEN_* variables.
        """
        try:
            with resources.files("mazegen.data").joinpath("default_settings.yaml").open("r", encoding="utf-8") as f:
                default_data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.warning("Default settings not found; falling back to dataclass defaults.")
            default_data = dataclasses.asdict(MazeSettings())

        user_data = {}
        if user_path is not None:
            if user_path.exists():
                user_data = cls._load_yaml(user_path)
                logger.info("Loaded user settings from %s", user_path)
            else:
                logger.warning("User settings file not found: %s", user_path)

        settings = cls._from_dict(cls._deep_merge(default_data, user_data))
        settings.apply_env(os.environ if environ is None else environ)
        settings.validate()
        logger.debug("Settings merged: %s", settings)
        return settings

    def apply_env(self, environ: Mapping[str, str]) -> None:
        for name, attr in ((ENV_WIDTH, "width"), (ENV_HEIGHT, "height"), (ENV_SEED, "seed")):
            raw = environ.get(name)
            if raw is None or raw == "":
                continue
            try:
                setattr(self.maze, attr, int(raw))
            except ValueError as exc:
                raise SettingsError(f"{name} must be an integer, got {raw!r}") from exc
        start = environ.get(ENV_START)
        if start:
            self.maze.start = start.strip().lower()

    def validate(self) -> None:
        m, r = self.maze, self.render
        for name, value in (
            ("maze.width", m.width),
            ("maze.height", m.height),
            ("render.cell_width", r.cell_width),
            ("render.cell_height", r.cell_height),
        ):
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise SettingsError(f"{name} must be a positive integer, got {value!r}")
        if m.seed is not None and (isinstance(m.seed, bool) or not isinstance(m.seed, int)):
            raise SettingsError(f"maze.seed must be an integer or null, got {m.seed!r}")
        if m.start not in (START_RANDOM, START_ORIGIN):
            raise SettingsError(f"maze.start must be '{START_RANDOM}' or '{START_ORIGIN}', got {m.start!r}")
        if r.terminus_char is not None and (not isinstance(r.terminus_char, str) or len(r.terminus_char) != 1):
            raise SettingsError(f"render.terminus_char must be one character or null, got {r.terminus_char!r}")

    def to_dict(self) -> Dict[str, Any]:
        return {"maze": dataclasses.asdict(self.maze), "render": dataclasses.asdict(self.render)}

    def save(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(self.to_dict(), f, sort_keys=False)
        logger.info("Saved settings to %s", path)
