"""Exceptions raised while looking up bundled scripts."""


class ClassNotFoundError(LookupError):
    """A bundle holds no precompiled class under the requested name."""

    def __init__(self, class_name: str) -> None:
        """Record the missing class name."""
        super().__init__(class_name)
        self.class_name = class_name


class ScriptInstantiationError(RuntimeError):
    """A precompiled script class exists but could not be constructed."""

    def __init__(self, class_name: str) -> None:
        """Record the class that failed to instantiate."""
        super().__init__(f"Cannot correctly instantiate class {class_name}.")
        self.class_name = class_name
