import json

import pytest

from contrastlab.core import config as c
from contrastlab.core.models import ThemePreset

WHITE = "#ffffff"
BLACK = "#000000"


def all_roles(bg: str = WHITE, fg: str = BLACK) -> dict:
    """Role map where every audited pair is fg on bg."""
    roles = {}
    for spec in c.DEFAULT_COLOR_PAIRS:
        roles[spec[0]] = bg
        roles[spec[1]] = fg
    return roles


def make_preset(preset_id: str, category: str = "default", light=None, dark=None, label=None) -> ThemePreset:
    return ThemePreset(
        id=preset_id,
        label=label or preset_id.replace("-", " ").title(),
        category=category,
        styles={
            "light": all_roles() if light is None else light,
            "dark": all_roles(BLACK, WHITE) if dark is None else dark,
        },
    )


@pytest.fixture
def compliant_preset():
    return make_preset("clean-slate", "minimal")


@pytest.fixture
def one_failure_preset():
    light = all_roles()
    light["muted-foreground"] = "#777777"
    return make_preset("soft-fog", "nature", light=light)


@pytest.fixture
def write_json(tmp_path):
    def _write(name, data):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return str(path)
    return _write
