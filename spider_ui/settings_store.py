import configparser
from pathlib import Path

from spider_ui.ui_config import DIFFICULTY_ORDER, LOG_LEVEL_ORDER

SETTINGS_PATH = Path(__file__).with_name("settings.ini")

DEFAULT_SETTINGS = {
    "difficulty": "1",
    "width": "1000",
    "height": "700",
    "log_level": "WARNING",
}

MIN_WIDTH = 400
MIN_HEIGHT = 300


def _as_int(value, default):
    try:
        return int(value)
    except (TypeError, ValueError):
        return int(default)


def _sanitize(settings):
    data = dict(DEFAULT_SETTINGS)
    data.update({k: str(v) for k, v in settings.items() if k in DEFAULT_SETTINGS})

    difficulty = _as_int(data["difficulty"], DEFAULT_SETTINGS["difficulty"])
    if difficulty not in DIFFICULTY_ORDER:
        difficulty = int(DEFAULT_SETTINGS["difficulty"])
    data["difficulty"] = str(difficulty)

    data["width"] = str(max(MIN_WIDTH, _as_int(data["width"], DEFAULT_SETTINGS["width"])))
    data["height"] = str(max(MIN_HEIGHT, _as_int(data["height"], DEFAULT_SETTINGS["height"])))

    level = data["log_level"].strip().upper()
    if level not in LOG_LEVEL_ORDER:
        level = DEFAULT_SETTINGS["log_level"]
    data["log_level"] = level
    return data


def load_settings():
    parser = configparser.ConfigParser()
    if not SETTINGS_PATH.exists():
        return dict(DEFAULT_SETTINGS)
    try:
        parser.read(SETTINGS_PATH, encoding="utf-8")
    except (configparser.Error, UnicodeDecodeError):
        return dict(DEFAULT_SETTINGS)
    if "ui" not in parser:
        return dict(DEFAULT_SETTINGS)
    return _sanitize(dict(parser["ui"]))


def save_settings(settings):
    data = _sanitize(settings)
    parser = configparser.ConfigParser()
    parser["ui"] = data
    SETTINGS_PATH.parent.mkdir(parents=True, exist_ok=True)
    with SETTINGS_PATH.open("w", encoding="utf-8") as f:
        parser.write(f)
    return data
