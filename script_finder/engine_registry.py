"""Registry of the script engines available to the finder."""

import logging
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScriptEngineFactory:
    """A script engine together with the file extensions it handles."""

    name: str
    extensions: tuple[str, ...]
    engine: Any = field(default=None, compare=False)


class ScriptEngineRegistry:
    """Keeps engine factories in registration order."""

    def __init__(self, factories: list[ScriptEngineFactory] | None = None) -> None:
        """Initialize the registry with optional pre-registered factories."""
        self._factories: list[ScriptEngineFactory] = list(factories or [])

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "ScriptEngineRegistry":
        """Build a registry from the ``engines`` section of the configuration."""
        registry = cls()
        for entry in config.get("engines", []):
            registry.register(
                ScriptEngineFactory(
                    name=entry["name"],
                    extensions=tuple(entry.get("extensions", [])),
                )
            )
        return registry

    def register(self, factory: ScriptEngineFactory) -> None:
        """Append a factory; later registrations are probed first."""
        self._factories.append(factory)
        logger.debug(
            "Registered script engine %s for extensions %s",
            factory.name,
            ", ".join(factory.extensions),
        )

    def unregister(self, name: str) -> None:
        """Remove every factory registered under ``name``."""
        self._factories = [f for f in self._factories if f.name != name]

    def factories(self) -> list[ScriptEngineFactory]:
        """Return the registered factories in registration order."""
        return list(self._factories)

    def engine_by_extension(self, extension: str) -> ScriptEngineFactory | None:
        """Return the first registered factory declaring ``extension``."""
        for factory in self._factories:
            if extension in factory.extensions:
                return factory
        return None
