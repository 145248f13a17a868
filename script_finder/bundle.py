"""In-process artifact store holding script entries and precompiled classes."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

from script_finder.errors import ClassNotFoundError


class Bundle:
    """A named bundle of source entries on disk and precompiled classes."""

    def __init__(
        self,
        symbolic_name: str,
        root: str | Path | None = None,
        classes: dict[str, Callable[[], Any]] | None = None,
    ) -> None:
        """Initialize the bundle with an optional entry root and class table."""
        self.symbolic_name = symbolic_name
        self.root = Path(root).resolve() if root is not None else None
        self._classes: dict[str, Callable[[], Any]] = dict(classes or {})

    def register_class(self, name: str, factory: Callable[[], Any]) -> None:
        """Add a precompiled class (any zero-argument constructible)."""
        self._classes[name] = factory

    def load_class(self, name: str) -> Callable[[], Any]:
        """Return the class registered under ``name``."""
        try:
            return self._classes[name]
        except KeyError:
            raise ClassNotFoundError(name) from None

    def get_entry(self, path: str) -> str | None:
        """Return a ``file://`` URL for the entry at ``path``, if present."""
        if self.root is None:
            return None
        entry = (self.root / path).resolve()
        # Entries must stay inside the bundle root
        if not entry.is_relative_to(self.root) or not entry.is_file():
            return None
        return entry.as_uri()

    def __repr__(self) -> str:
        """Return a short representation naming the bundle."""
        return f"Bundle({self.symbolic_name!r})"
