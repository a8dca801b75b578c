import pytest

from orgtree.config import DEFAULT_CONFIG, OrgProcessingConfig


def test_defaults() -> None:
    assert DEFAULT_CONFIG.min_group_size == 3
    assert DEFAULT_CONFIG.min_prefix_length == 3
    assert DEFAULT_CONFIG.similarity_ratio == pytest.approx(0.7)


def test_from_mapping_ignores_unknown_keys_and_casts() -> None:
    config = OrgProcessingConfig.from_mapping(
        {"min_group_size": "4", "similarity_ratio": 1, "page": "upload"}
    )

    assert config.min_group_size == 4
    assert config.similarity_ratio == 1.0
    assert config.min_prefix_length == 3


def test_from_empty_mapping_gives_defaults() -> None:
    assert OrgProcessingConfig.from_mapping(None) == DEFAULT_CONFIG
    assert OrgProcessingConfig.from_mapping({}) == DEFAULT_CONFIG


@pytest.mark.parametrize(
    "settings",
    [
        {"min_group_size": 1},
        {"min_prefix_length": 0},
        {"similarity_ratio": 0.0},
        {"similarity_ratio": 1.5},
    ],
)
def test_invalid_settings_raise(settings) -> None:
    with pytest.raises(ValueError):
        OrgProcessingConfig.from_mapping(settings)
