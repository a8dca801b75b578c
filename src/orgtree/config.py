# orgtree/config.py

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping


@dataclass(frozen=True)
class OrgProcessingConfig:
    """
    Tunable thresholds for the deduplication and prefix-grouping passes.

    - min_group_size    : siblings needed before a prefix group is created
    - min_prefix_length : shortest shared prefix that can seed a group
    - similarity_ratio  : min(len)/max(len) needed for a substring match
                          to count as "the same entity"
    """
    min_group_size: int = 3
    min_prefix_length: int = 3
    similarity_ratio: float = 0.7

    def validate(self) -> "OrgProcessingConfig":
        if self.min_group_size < 2:
            raise ValueError(
                f"min_group_size must be at least 2, got {self.min_group_size}"
            )
        if self.min_prefix_length < 2:
            raise ValueError(
                f"min_prefix_length must be at least 2, got {self.min_prefix_length}"
            )
        if not 0.0 < self.similarity_ratio <= 1.0:
            raise ValueError(
                f"similarity_ratio must be in (0, 1], got {self.similarity_ratio}"
            )
        return self

    @classmethod
    def from_mapping(cls, settings: Mapping[str, Any] | None) -> "OrgProcessingConfig":
        """
        Build a config from a loose settings dict (e.g. Streamlit session
        state). Unknown keys are ignored; missing keys keep their defaults.
        """
        if not settings:
            return cls()

        kwargs: dict[str, Any] = {}
        for name in (f.name for f in fields(cls)):
            if name in settings and settings[name] is not None:
                default = getattr(cls, name)
                kwargs[name] = type(default)(settings[name])

        return cls(**kwargs).validate()


DEFAULT_CONFIG = OrgProcessingConfig()
