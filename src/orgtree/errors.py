# orgtree/errors.py

"""
Exception types raised at the edges of the org-tree pipeline.

The cleaning pipeline itself never raises for odd label text: a label that
cannot be cleaned is simply dropped. These errors only signal input that is
not shaped like an org tree at all.
"""


class OrgStructureError(ValueError):
    """A node in the raw tree is not a string-keyed mapping."""

    def __init__(self, message: str, path: tuple[str, ...] = ()):
        self.path = path
        where = " > ".join(path) if path else "<root>"
        super().__init__(f"{message} (at {where})")


class OrgDataLoadError(ValueError):
    """Raw org data could not be read or decoded into a tree."""
