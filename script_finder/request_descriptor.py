"""Data model describing the request a script is resolved for."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RequestDescriptor:
    """Snapshot of the request fields that drive script resolution."""

    resource_type: str
    method: str
    extension: str | None = None
    selectors: tuple[str, ...] = ()
    delegated_resource_type: str | None = None

    @property
    def effective_resource_type(self) -> str:
        """Return the delegated resource type when set, else the request's own."""
        return self.delegated_resource_type or self.resource_type
