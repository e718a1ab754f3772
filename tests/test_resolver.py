import pytest

from contrastlab.core.models import ThemePreset
from contrastlab.logic.audit.resolver import coerce_preset, load_catalog, load_pairs


def test_coerce_preset_from_mapping():
    preset = coerce_preset({"id": "ocean", "label": "Ocean", "category": "nature", "styles": {"light": {}}})
    assert preset == ThemePreset(id="ocean", label="Ocean", category="nature", styles={"light": {}})


def test_coerce_preset_fills_defaults():
    preset = coerce_preset({"id": "bare", "styles": "nope"})
    assert preset.label == "bare"
    assert preset.category == "uncategorized"
    assert preset.role_map("light") == {}


@pytest.mark.parametrize("entry", [None, "ocean", 3, {}, {"id": ""}, {"id": 7}])
def test_coerce_preset_rejects_unusable_records(entry):
    assert coerce_preset(entry) is None


def test_load_catalog_list_and_object(write_json):
    record = {"id": "a", "label": "A", "category": "default", "styles": {"light": {}, "dark": {}}}
    assert [p.id for p in load_catalog(write_json("list.json", [record]))] == ["a"]
    assert [p.id for p in load_catalog(write_json("obj.json", {"presets": [record]}))] == ["a"]


def test_load_catalog_skips_malformed_records(write_json, capsys):
    path = write_json("cat.json", [{"id": "ok"}, {"label": "no id"}, 42])
    presets = load_catalog(path)
    assert [p.id for p in presets] == ["ok"]
    assert "skipped 2 malformed preset record(s)" in capsys.readouterr().err


def test_load_catalog_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        load_catalog(str(tmp_path / "missing.json"))
    assert exc.value.code == 2
    assert "catalog file not found" in capsys.readouterr().err


def test_load_catalog_invalid_json(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        load_catalog(str(path))
    assert exc.value.code == 2


def test_load_catalog_wrong_shape(write_json):
    with pytest.raises(SystemExit) as exc:
        load_catalog(write_json("shape.json", {"themes": []}))
    assert exc.value.code == 2


def test_load_pairs(write_json):
    pairs = load_pairs(write_json("pairs.json", [["background", "foreground"], ["card", "ring", "focus ring"]]))
    assert pairs == (("background", "foreground"), ("card", "ring", "focus ring"))


@pytest.mark.parametrize("data", [[], [["background"]], [["a", "b", "c", "d"]], [["a", 1]], {"a": "b"}])
def test_load_pairs_rejects_bad_entries(write_json, data):
    with pytest.raises(SystemExit) as exc:
        load_pairs(write_json("pairs.json", data))
    assert exc.value.code == 2
