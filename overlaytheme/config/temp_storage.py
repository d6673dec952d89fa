"""
Session-scoped key-value storage.

Values live only for the lifetime of the process and are shared between
components (for example the session ui scale override read by the theme
manager).
"""

from typing import Any, Dict, Mapping, Optional


class TempStorage:
    """
    In-memory settings store.

    Supports nested keys with dot notation: "ui.scale"
    """

    def __init__(self, initial: Optional[Mapping[str, Any]] = None):
        self._values: Dict[str, Any] = {}
        if initial:
            self.update(initial)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a stored value.

        Args:
            key: Key (use dots for nested values)
            default: Value returned if key not found

        Returns:
            Stored value or default
        """
        value = self._values

        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def set(self, key: str, value: Any):
        """
        Store a value.

        Args:
            key: Key (use dots for nested values)
            value: Value to store
        """
        keys = key.split('.')
        target = self._values

        # Navigate to parent of target key
        for k in keys[:-1]:
            if k not in target or not isinstance(target[k], dict):
                target[k] = {}
            target = target[k]

        target[keys[-1]] = value

    def update(self, values: Mapping[str, Any]):
        """Store every top-level key of a mapping."""
        for key, value in values.items():
            self._values[key] = value

    def contains(self, key: str) -> bool:
        sentinel = object()
        return self.get(key, sentinel) is not sentinel

    def clear(self):
        self._values.clear()

    def as_dict(self) -> Dict[str, Any]:
        return dict(self._values)
