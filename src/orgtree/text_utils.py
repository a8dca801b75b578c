# orgtree/text_utils.py

"""
Text utilities shared by the label cleaner and the similarity merger.

This module provides:

    - Whitespace normalization
    - Typographic Unicode normalization (smart quotes, dashes, ellipsis)
    - Removal of control / private-use / "specials" code points
    - Display title-casing that preserves all-caps acronyms
    - The alphanumeric comparison key used for similarity checks
"""

from __future__ import annotations

import regex as re


# ============================================================
#   Character tables
# ============================================================

_SINGLE_QUOTES = "\u2018\u2019\u201a\u201b\u2032"
_DOUBLE_QUOTES = "\u201c\u201d\u201e\u201f\u2033"
_DASHES = "\u2010\u2011\u2012\u2013\u2014\u2015\u2212"

_TYPOGRAPHY_TABLE = str.maketrans(
    {
        **{ch: "'" for ch in _SINGLE_QUOTES},
        **{ch: None for ch in _DOUBLE_QUOTES},
        **{ch: "-" for ch in _DASHES},
        "\u2026": "...",
    }
)

# Tabs/newlines inside a label are spacing, not noise.
_INLINE_WHITESPACE_RE = re.compile(r"[\t\n\r\f\v]")

# C0/C1 controls, private use, surrogates, zero-width format characters
# and the Specials block (U+FFF0..U+FFFF, incl. the replacement char).
_UNPRINTABLE_RE = re.compile(
    r"[\p{Cc}\p{Co}\p{Cs}\u200b-\u200d\u2060\ufeff\ufff0-\uffff]"
)

_WRAPPING_QUOTE_START_RE = re.compile(r"^['\"]")
_WRAPPING_QUOTE_END_RE = re.compile(r"['\"]$")

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]")


# ============================================================
#   Basic normalization
# ============================================================

def normalize_text(text: str) -> str:
    """
    Collapse whitespace runs to a single space and strip the ends.
    """
    s = str(text)
    s = re.sub(r"\s+", " ", s)
    return s.strip()


def normalize_typography(text: str) -> str:
    """
    Rewrite typographic Unicode into plain ASCII punctuation and drop
    characters that never belong in a display label.

    - curly single quotes    → '
    - curly double quotes    → removed
    - en/em and other dashes → -
    - ellipsis               → ...
    - one wrapping straight quote at either end is stripped
    - control, private-use and "specials" code points are deleted
    """
    s = str(text).translate(_TYPOGRAPHY_TABLE)
    s = _WRAPPING_QUOTE_START_RE.sub("", s)
    s = _WRAPPING_QUOTE_END_RE.sub("", s)
    s = _INLINE_WHITESPACE_RE.sub(" ", s)
    s = _UNPRINTABLE_RE.sub("", s)
    return normalize_text(s)


# ============================================================
#   Display casing
# ============================================================

def title_case_token(token: str) -> str:
    # All-caps tokens ("GPU", "3D", "R&D") are acronyms and kept as-is.
    if token.upper() == token:
        return token
    return token[:1].upper() + token[1:].lower()


def title_case_label(label: str) -> str:
    """
    Title-case every space-delimited token of an already-normalized label.

    Mixed-case brand tokens are flattened ("iPhone" → "Iphone"); only
    fully upper-case tokens survive untouched.
    """
    return " ".join(title_case_token(tok) for tok in label.split(" "))


# ============================================================
#   Comparison keys
# ============================================================

def normalize_for_comparison(label: str) -> str:
    """
    Lowercase and keep only ASCII letters and digits, so that
    "3D Visual Merchandising" and "3D/Visual Merchandising" compare equal.
    """
    return _NON_ALNUM_RE.sub("", str(label).lower())
