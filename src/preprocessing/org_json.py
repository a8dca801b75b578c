# preprocessing/org_json.py

"""
Loading scraped org-chart JSON into raw org trees.

Scraped charts are mostly `{"name": {...children...}}` objects, but leaves
often show up as `null`, `[]`, `""` or `true`, and some scrapers emit lists
of names or lists of objects. `coerce_org_tree` folds all of these into the
plain nested-dict shape the cleaning pipeline expects.
"""

from __future__ import annotations

import io
import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from orgtree.errors import OrgDataLoadError
from orgtree.tree_types import OrgNode

logger = logging.getLogger(__name__)

JsonSource = Union[str, bytes, Path, io.IOBase, Any]


# ------------------------------------------------------------
# Decoding
# ------------------------------------------------------------

def _decode(raw: bytes) -> str:
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        # Handle common encoding issues
        logger.warning("Org JSON is not valid UTF-8; falling back to latin-1")
        return raw.decode("latin-1")


def _read_text(source: JsonSource) -> str:
    if isinstance(source, Path):
        return _decode(source.read_bytes())
    if isinstance(source, bytes):
        return _decode(source)
    if isinstance(source, str):
        return source
    if hasattr(source, "read"):
        # Streamlit UploadedFile, open file handles, BytesIO / StringIO
        data = source.read()
        return _decode(data) if isinstance(data, bytes) else str(data)

    raise OrgDataLoadError(f"Unsupported org JSON source: {type(source).__name__}")


# ------------------------------------------------------------
# Shape coercion
# ------------------------------------------------------------

def coerce_org_tree(data: Any, _path: tuple = ()) -> OrgNode:
    """
    Convert a decoded JSON value into an OrgNode.

    - dict           → each value coerced recursively
    - list of str    → leaf mapping {name: {}}
    - list of dicts  → key-union of the coerced dicts (later wins)
    - None / scalars / empty containers → {} (a leaf)
    """
    if isinstance(data, dict):
        node: OrgNode = {}
        for key, value in data.items():
            if not isinstance(key, str):
                raise OrgDataLoadError(
                    f"Non-string label {key!r} at {' > '.join(_path) or '<root>'}"
                )
            node[key] = coerce_org_tree(value, _path + (key,))
        return node

    if isinstance(data, list):
        node = {}
        for item in data:
            if isinstance(item, str):
                node.setdefault(item, {})
            elif isinstance(item, (dict, list)):
                node.update(coerce_org_tree(item, _path))
        return node

    return {}


# ------------------------------------------------------------
# Public API
# ------------------------------------------------------------

def load_org_json(source: JsonSource) -> OrgNode:
    """
    Load a raw org tree from a path, JSON text, bytes or a file-like object.

    Raises
    ------
    OrgDataLoadError
        If the file cannot be read, is not valid JSON, or its top level
        is not a JSON object.
    """
    if isinstance(source, str) and not source.lstrip().startswith(("{", "[")):
        source = Path(source)

    try:
        text = _read_text(source)
    except OSError as e:
        raise OrgDataLoadError(f"Could not read org JSON: {e}") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise OrgDataLoadError(f"Invalid org JSON: {e}") from e

    if not isinstance(data, dict):
        raise OrgDataLoadError(
            f"Org JSON must be an object at the top level, got {type(data).__name__}"
        )

    tree = coerce_org_tree(data)
    logger.info("Loaded org JSON with %d top-level labels", len(tree))
    return tree


def dump_org_json(tree: Dict[str, Any], indent: int = 2) -> str:
    """Serialize an org tree as JSON text, keeping non-ASCII labels readable."""
    return json.dumps(tree, indent=indent, ensure_ascii=False)
