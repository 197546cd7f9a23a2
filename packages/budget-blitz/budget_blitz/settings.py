"""Player settings persistence and query-string overrides.

Nothing in here may disturb a run: every load failure degrades to defaults
and every save failure is logged and reported as ``False``.
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any
from urllib.parse import parse_qsl

from budget_blitz.config import DIFFICULTIES, RunConfig

log = logging.getLogger(__name__)

SETTINGS_ENV = "BUDGET_BLITZ_SETTINGS"
SETTINGS_FILENAME = ".budget_blitz.json"


@dataclass(frozen=True)
class Settings:
    income: int = 50000
    difficulty: str = "normal"
    reduced_motion: bool = False
    sound: bool = False


def default_settings_path() -> Path:
    env = os.environ.get(SETTINGS_ENV)
    if env:
        return Path(env)
    return Path.home() / SETTINGS_FILENAME


def _valid(name: str, value: Any) -> bool:
    if name == "income":
        return isinstance(value, int) and not isinstance(value, bool) and value > 0
    if name == "difficulty":
        return value in DIFFICULTIES
    return isinstance(value, bool)


def load_settings(path: str | Path | None = None) -> Settings:
    """Read settings JSON merged over defaults. Never raises."""
    path = Path(path) if path is not None else default_settings_path()
    defaults = Settings()
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return defaults
    except OSError as exc:
        log.warning("could not read settings %s: %s", path, exc)
        return defaults
    try:
        data = json.loads(raw)
    except ValueError as exc:
        log.warning("malformed settings %s: %s", path, exc)
        return defaults
    if not isinstance(data, dict):
        log.warning("settings %s is not a JSON object, using defaults", path)
        return defaults

    overrides = {}
    for f in fields(Settings):
        if f.name not in data:
            continue
        if _valid(f.name, data[f.name]):
            overrides[f.name] = data[f.name]
        else:
            log.warning("ignoring invalid setting %s=%r", f.name, data[f.name])
    return replace(defaults, **overrides)


def save_settings(settings: Settings, path: str | Path | None = None) -> bool:
    path = Path(path) if path is not None else default_settings_path()
    try:
        path.write_text(json.dumps(asdict(settings), indent=2), encoding="utf-8")
    except OSError as exc:
        log.warning("could not save settings %s: %s", path, exc)
        return False
    return True


def parse_query(query: str) -> dict[str, str]:
    """Parse ``income=..&difficulty=..``; a leading ``?`` is allowed."""
    if query.startswith("?"):
        query = query[1:]
    return dict(parse_qsl(query, keep_blank_values=True))


def _parse_income(value: str | None) -> int | None:
    if not value:
        return None
    try:
        income = int(value.strip())
    except ValueError:
        return None
    return income if income > 0 else None


def resolve_config(params: dict[str, str], settings: Settings) -> RunConfig:
    """Query parameters win over saved settings when they are valid."""
    income = _parse_income(params.get("income")) or settings.income
    difficulty = params.get("difficulty") or ""
    if difficulty not in DIFFICULTIES:
        difficulty = settings.difficulty
    return RunConfig(income=income, difficulty=difficulty)
