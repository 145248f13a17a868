"""Conversion of candidate script paths into precompiled class names."""

from script_finder.make_identifier import make_identifier
from script_finder.split_resource_type import SLASH


def script_path_to_class_name(script_path: str) -> str:
    """Escape each path segment and join them with dots."""
    return ".".join(make_identifier(part) for part in script_path.split(SLASH))
