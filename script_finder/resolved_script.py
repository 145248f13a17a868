"""Data models for the outcome of a script lookup."""

from dataclasses import dataclass
from typing import Any

from script_finder.bundle import Bundle
from script_finder.engine_registry import ScriptEngineFactory


@dataclass(frozen=True)
class PrecompiledScript:
    """An instantiated precompiled script found in a bundle."""

    bundle: Bundle
    engine: ScriptEngineFactory | None
    instance: Any


@dataclass(frozen=True)
class Script:
    """A source script entry found in a bundle."""

    bundle: Bundle
    url: str
    engine: ScriptEngineFactory | None


ResolvedScript = PrecompiledScript | Script
