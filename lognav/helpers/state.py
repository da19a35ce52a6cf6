"""Change tracking for state objects"""

from typing import Any

MISSING = object()


class State:
    """A simple state base class that tracks changes to its public attributes.

    Assigning a public attribute a different value records its name. In-place
    mutations of containers are not seen, so methods that mutate a container
    must call `_changed` themselves.
    """

    def __setattr__(self, name: str, value: Any) -> None:
        """Override setattr to track changes to public attributes."""
        old_value = getattr(self, name, MISSING)
        super().__setattr__(name, value)
        if not name.startswith("_") and old_value != value:
            self._changed(name)

    def _changed(self, name: str) -> None:
        self.__dict__.setdefault("_changes", set()).add(name)

    @property
    def changes(self) -> set[str]:
        """Get the names of the attributes that have changed."""
        return set(self.__dict__.get("_changes", ()))

    def clear_changes(self) -> None:
        """Clear the changes set."""
        self.__dict__.get("_changes", set()).clear()
