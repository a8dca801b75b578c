import pytest

from orgtree.config import OrgProcessingConfig
from orgtree.org_engine import OrgChartEngine


RAW = {
    "Engineering Team": {
        "Frontend": {"React Team": {}},
        "Front-End": {"Vue Team": {}},
    },
    "Frontend Development": {},
    "Frontend Design": {},
    ")": {"Lost": {}},
}


def test_engine_builds_clean_tree() -> None:
    engine = OrgChartEngine(RAW)

    assert engine.get_clean_tree() == {
        "Engineering": {"Front-end": {"React": {}, "Vue": {}}},
        "Frontend Development": {},
        "Frontend Design": {},
    }


def test_engine_keeps_private_copies() -> None:
    raw = {"Design Team": {"Web": {}}}
    engine = OrgChartEngine(raw)

    raw["Design Team"]["Mobile"] = {}
    assert engine.get_raw_tree() == {"Design Team": {"Web": {}}}

    handed_out = engine.get_clean_tree()
    handed_out["Design"]["Mobile"] = {}
    assert engine.get_clean_tree() == {"Design": {"Web": {}}}


def test_summary() -> None:
    summary = OrgChartEngine(RAW).summary()

    assert summary == {
        "raw_nodes": 9,
        "clean_nodes": 6,
        "raw_top_level": 4,
        "clean_top_level": 3,
        "clean_leaves": 4,
        "clean_depth": 3,
    }


def test_reprocess_with_new_config() -> None:
    engine = OrgChartEngine(RAW)
    engine.get_tree_df()

    engine.reprocess(OrgProcessingConfig(min_group_size=2))

    assert engine.config.min_group_size == 2
    clean = engine.get_clean_tree()
    assert clean["Frontend"] == {"Development": {}, "Design": {}}
    assert "Frontend" in set(engine.get_tree_df()["label"])


def test_invalid_config_is_rejected() -> None:
    with pytest.raises(ValueError):
        OrgChartEngine(RAW, OrgProcessingConfig(similarity_ratio=0.0))


def test_tree_df_is_a_copy() -> None:
    engine = OrgChartEngine(RAW)

    df = engine.get_tree_df()
    df.drop(df.index, inplace=True)

    assert len(engine.get_tree_df()) == 6
