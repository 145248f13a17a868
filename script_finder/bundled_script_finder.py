"""Lookup of the script a bundle provides for a request."""

import logging
from collections.abc import Sequence
from dataclasses import replace
from typing import Any

from script_finder.build_script_matches import (
    DOT,
    build_script_matches_for_request,
)
from script_finder.bundle import Bundle
from script_finder.engine_registry import ScriptEngineRegistry
from script_finder.errors import ClassNotFoundError, ScriptInstantiationError
from script_finder.load_config import DEFAULT_CONFIG
from script_finder.ranked_extensions import ranked_extensions
from script_finder.request_descriptor import RequestDescriptor
from script_finder.resolved_script import PrecompiledScript, ResolvedScript, Script
from script_finder.script_path_to_class_name import script_path_to_class_name
from script_finder.split_resource_type import SLASH

logger = logging.getLogger(__name__)


class BundledScriptFinder:
    """Finds the first bundled script matching a request.

    Extensions are the outer search key: every candidate path is tried for
    one extension before the next extension is considered.
    """

    def __init__(
        self,
        registry: ScriptEngineRegistry,
        config: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the finder with an engine registry and optional config."""
        self.registry = registry
        config = config or DEFAULT_CONFIG
        self.default_methods = frozenset(
            config.get("default_methods", DEFAULT_CONFIG["default_methods"])
        )
        self.script_namespace = config.get(
            "script_namespace", DEFAULT_CONFIG["script_namespace"]
        )

    def get_script(
        self,
        request: RequestDescriptor,
        bundle: Bundle,
        precompiled: bool,
        delegated_resource_type: str | None = None,
    ) -> ResolvedScript | None:
        """Return the script for ``request`` or None when the bundle has none."""
        if delegated_resource_type:
            request = replace(request, delegated_resource_type=delegated_resource_type)
        candidates = build_script_matches_for_request(request, self.default_methods)
        return self.resolve(
            candidates, ranked_extensions(self.registry), precompiled, bundle
        )

    def resolve(
        self,
        candidates: Sequence[str],
        extensions: Sequence[str],
        precompiled: bool,
        bundle: Bundle,
    ) -> ResolvedScript | None:
        """Probe ``bundle`` for each (extension, candidate) pair in order."""
        for extension in extensions:
            for candidate in candidates:
                if precompiled:
                    script = self._load_precompiled(bundle, extension, candidate)
                else:
                    script = self._load_source(bundle, extension, candidate)
                if script is not None:
                    return script
        logger.info("No script found in %s", bundle)
        return None

    def _load_precompiled(
        self, bundle: Bundle, extension: str, candidate: str
    ) -> PrecompiledScript | None:
        class_name = script_path_to_class_name(candidate)
        logger.debug("Probing %s for class %s", bundle, class_name)
        try:
            factory = bundle.load_class(class_name)
        except ClassNotFoundError:
            return None
        try:
            instance = factory()
        except Exception as e:
            raise ScriptInstantiationError(class_name) from e
        logger.info("Resolved precompiled script %s in %s", class_name, bundle)
        return PrecompiledScript(
            bundle, self.registry.engine_by_extension(extension), instance
        )

    def _load_source(
        self, bundle: Bundle, extension: str, candidate: str
    ) -> Script | None:
        entry_path = f"{self.script_namespace}{SLASH}{candidate}{DOT}{extension}"
        logger.debug("Probing %s for entry %s", bundle, entry_path)
        url = bundle.get_entry(entry_path)
        if url is None:
            return None
        logger.info("Resolved script %s in %s", entry_path, bundle)
        return Script(bundle, url, self.registry.engine_by_extension(extension))
