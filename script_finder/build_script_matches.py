"""Logic for building the ordered list of candidate script paths."""

from collections.abc import Collection, Sequence

from script_finder.request_descriptor import RequestDescriptor
from script_finder.split_resource_type import SLASH, split_resource_type

DOT = "."
DEFAULT_METHODS = frozenset({"GET", "HEAD"})


def build_script_matches(
    resource_type: str,
    method: str,
    extension: str | None,
    selectors: Sequence[str],
    default_methods: Collection[str] = DEFAULT_METHODS,
) -> tuple[str, ...]:
    """Return candidate script paths, most specific first.

    Selector combinations go from all selectors down to none. GET and HEAD
    scripts may leave out the method token.
    """
    base, version = split_resource_type(resource_type)
    type_segment = f"{base}{SLASH}{version}{SLASH}" if version else f"{base}{SLASH}"
    default_method = method in default_methods

    matches: list[str] = []
    for i in range(len(selectors) - 1, -1, -1):
        joined = SLASH.join(selectors[: i + 1])
        _add_matches(
            matches,
            script_for_method=f"{type_segment}{method}{DOT}{joined}",
            script_no_method=f"{type_segment}{joined}",
            extension=extension,
            default_method=default_method,
        )

    # Base scripts are named after the last dot-delimited segment of the type
    _add_matches(
        matches,
        script_for_method=f"{type_segment}{method}",
        script_no_method=f"{type_segment}{base.rsplit(DOT, 1)[-1]}",
        extension=extension,
        default_method=default_method,
    )
    return tuple(matches)


def build_script_matches_for_request(
    request: RequestDescriptor,
    default_methods: Collection[str] = DEFAULT_METHODS,
) -> tuple[str, ...]:
    """Build candidate script paths for a request descriptor."""
    return build_script_matches(
        request.effective_resource_type,
        request.method,
        request.extension,
        request.selectors,
        default_methods,
    )


def _add_matches(
    matches: list[str],
    *,
    script_for_method: str,
    script_no_method: str,
    extension: str | None,
    default_method: bool,
) -> None:
    if extension:
        if default_method:
            matches.append(f"{script_no_method}{DOT}{extension}")
        matches.append(f"{script_for_method}{DOT}{extension}")
    if default_method:
        matches.append(script_no_method)
    matches.append(script_for_method)
