import io
import json

import pytest

from orgtree.errors import OrgDataLoadError
from preprocessing.org_json import coerce_org_tree, dump_org_json, load_org_json


SAMPLE = {"Engineering Team": {"Frontend": {}, "Backend": {}}, "Design": {}}


# ------------------------------------------------------------
# Sources
# ------------------------------------------------------------

def test_load_from_json_text() -> None:
    assert load_org_json(json.dumps(SAMPLE)) == SAMPLE


def test_load_from_bytes_with_bom() -> None:
    raw = b"\xef\xbb\xbf" + json.dumps(SAMPLE).encode("utf-8")
    assert load_org_json(raw) == SAMPLE


def test_load_from_path_and_str_path(tmp_path) -> None:
    path = tmp_path / "org.json"
    path.write_text(json.dumps(SAMPLE), encoding="utf-8")

    assert load_org_json(path) == SAMPLE
    assert load_org_json(str(path)) == SAMPLE


def test_load_from_file_like() -> None:
    buffer = io.BytesIO(json.dumps(SAMPLE).encode("utf-8"))
    assert load_org_json(buffer) == SAMPLE

    text_buffer = io.StringIO(json.dumps(SAMPLE))
    assert load_org_json(text_buffer) == SAMPLE


def test_non_utf8_bytes_fall_back_to_latin1() -> None:
    raw = b'{"Caf\xe9 Team": {}}'
    assert load_org_json(raw) == {"Café Team": {}}


# ------------------------------------------------------------
# Failures
# ------------------------------------------------------------

def test_invalid_json_raises() -> None:
    with pytest.raises(OrgDataLoadError, match="Invalid org JSON"):
        load_org_json('{"Engineering": ')


def test_top_level_list_raises() -> None:
    with pytest.raises(OrgDataLoadError, match="top level"):
        load_org_json('["Engineering", "Design"]')


def test_missing_file_raises(tmp_path) -> None:
    with pytest.raises(OrgDataLoadError, match="Could not read"):
        load_org_json(tmp_path / "missing.json")


def test_load_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        load_org_json("{not json}")


# ------------------------------------------------------------
# Coercion
# ------------------------------------------------------------

def test_scalar_and_null_children_become_leaves() -> None:
    data = {"A": None, "B": "", "C": True, "D": 3, "E": []}
    assert coerce_org_tree(data) == {"A": {}, "B": {}, "C": {}, "D": {}, "E": {}}


def test_list_of_names_becomes_leaf_children() -> None:
    data = {"Engineering": ["Frontend", "Backend", "Frontend"]}
    assert coerce_org_tree(data) == {"Engineering": {"Frontend": {}, "Backend": {}}}


def test_list_of_objects_is_key_unioned() -> None:
    data = {
        "Engineering": [
            {"Web": ["React"]},
            {"Mobile": {}},
            {"Web": {"Vue": {}}},
        ]
    }
    assert coerce_org_tree(data) == {"Engineering": {"Web": {"Vue": {}}, "Mobile": {}}}


def test_coercion_through_loader() -> None:
    text = '{"Engineering": {"Web": null, "Teams": ["iOS", "Android"]}}'
    assert load_org_json(text) == {
        "Engineering": {"Web": {}, "Teams": {"iOS": {}, "Android": {}}}
    }


def test_non_string_key_raises() -> None:
    with pytest.raises(OrgDataLoadError):
        coerce_org_tree({"Engineering": {1: {}}})


# ------------------------------------------------------------
# Dumping
# ------------------------------------------------------------

def test_dump_keeps_non_ascii_readable() -> None:
    text = dump_org_json({"Café": {"Équipe": {}}})

    assert "Café" in text
    assert "\\u00e9" not in text
    assert json.loads(text) == {"Café": {"Équipe": {}}}
