"""Logic for separating a resource type from its version suffix."""

SLASH = "/"


def split_resource_type(resource_type: str) -> tuple[str, str | None]:
    """Split ``type/version`` into its parts.

    Only a single slash marks a version. Types with more slashes are returned
    whole, without a version.
    """
    if resource_type.count(SLASH) != 1:
        return resource_type, None
    base, version = resource_type.split(SLASH)
    return base, version
