# orgtree/label_cleaner.py

"""
Label cleaning for raw org-chart node names.

Scraped org charts are full of noise: trailing commas, possessives,
"(ABC)" acronyms, "Team"/"Group" suffixes, smart quotes and stray
private-use glyphs. `clean_team_name` turns one raw label into a
canonical display string, or returns None when the label is junk and
the node should be dropped.
"""

from __future__ import annotations

import logging
from typing import Optional

import regex as re

from .text_utils import normalize_typography, title_case_label

logger = logging.getLogger(__name__)


# ------------------------------------------------------------
# Patterns (applied in order by clean_team_name)
# ------------------------------------------------------------

ROLE_SUFFIXES = (
    "team",
    "group",
    "org",
    "organization",
    "department",
    "division",
)

_POSSESSIVE_RE = re.compile(r"'s$")
_TRAILING_PUNCT_RE = re.compile(r"[,.!]+\)*$")
_TWO_CHAR_ACRONYM_RE = re.compile(r"^[a-zA-Z0-9]{2}$")
_PAREN_ACRONYM_RE = re.compile(r"\s\([A-Z&]+\)$")
_TRAILING_PAREN_RE = re.compile(r"\)+$")
_ROLE_SUFFIX_RE = re.compile(
    r"\s(?:" + "|".join(ROLE_SUFFIXES) + r")$",
    flags=re.IGNORECASE,
)
_TRAILING_JUNK_RE = re.compile(r"[,.!)\"]+$")


def _strip(pattern: re.Pattern, s: str) -> str:
    return pattern.sub("", s, count=1).strip()


def _is_noise(s: str) -> bool:
    # Keeps two-character acronyms such as "AI", "ML" or "3D".
    return len(s) <= 2 and not _TWO_CHAR_ACRONYM_RE.match(s)


# ------------------------------------------------------------
# Public API
# ------------------------------------------------------------

def clean_team_name(raw: str) -> Optional[str]:
    """
    Clean one raw org-chart label.

    Returns the canonical display label, or None if the label is noise
    (punctuation-only fragments, single letters, empty strings).

    Examples
    --------
    >>> clean_team_name("Technology Development Group (TDG),")
    'Technology Development'
    >>> clean_team_name("Apple’s Team")
    'Apple'
    >>> clean_team_name(")") is None
    True
    """
    s = str(raw).strip()
    s = normalize_typography(s)

    s = _strip(_POSSESSIVE_RE, s)
    s = _strip(_TRAILING_PUNCT_RE, s)

    if _is_noise(s):
        logger.debug("Rejected label %r (noise after punctuation cleanup)", raw)
        return None

    s = _strip(_PAREN_ACRONYM_RE, s)
    s = _strip(_TRAILING_PAREN_RE, s)

    # "Apple's Team" → "Apple's" → "Apple"
    s = _strip(_ROLE_SUFFIX_RE, s)
    s = _strip(_POSSESSIVE_RE, s)
    s = _strip(_TRAILING_JUNK_RE, s)

    if not s:
        logger.debug("Rejected label %r (empty after suffix cleanup)", raw)
        return None

    return title_case_label(s)
