# replay/errors.py
from typing import Optional


class LoadError(Exception):
    """A coordinate or track source could not be loaded."""

    def __init__(self, path, message: str):
        self.path = str(path)
        super().__init__(f"{self.path}: {message}")


class ParseError(ValueError):
    """
    One row of a source failed validation.

    Never escapes a loader on its own: loaders re-raise it as the
    ``__cause__`` of a LoadError.
    """

    def __init__(self, row: int, message: str, field: Optional[str] = None):
        self.row = row
        self.field = field
        where = f"row {row}" if field is None else f"row {row}, column '{field}'"
        super().__init__(f"{where}: {message}")


class DegenerateBoundsError(ValueError):
    """Bounds requested for a coordinate store with no points."""
