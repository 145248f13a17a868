"""Ordering of script extensions by engine registration."""

from script_finder.engine_registry import ScriptEngineRegistry


def ranked_extensions(registry: ScriptEngineRegistry) -> tuple[str, ...]:
    """Return every declared extension, last registered engine first.

    Duplicates are kept; the probe simply tries them twice.
    """
    extensions: list[str] = []
    for factory in registry.factories():
        extensions.extend(factory.extensions)
    extensions.reverse()
    return tuple(extensions)
