"""
Theme file reading and writing.

Theme files are UTF-8 JSON documents with four groups::

    {
        "details": {"name": ..., "renderer": 1, "layout": 0, "style": 1, ...},
        "blur":    {"blurEnabled": true, "blurSpeed": 0.3, "blurRadius": 1.0},
        "other":   {"uiScale": 1.0, "font": "Rubik", ...},
        "colors":  {"backgroundColor": [r, g, b, a], ...}
    }

Reading is tolerant per field: anything missing or of the wrong type keeps
its default and is recorded in a ParseReport.
"""

import enum
import json
import logging
import math
from pathlib import Path
from typing import Any, Dict, Tuple, Union

from .color import Color
from .defaults import resolve_defaults
from .exceptions import ParseReport, ThemeNotFoundError, ThemeParseError
from .model import GROUPS, THEME_FIELDS, FieldSpec, Theme
from ..utils.platform import Platform

logger = logging.getLogger(__name__)

_MISSING = object()


class ThemeSerializer:
    """Convert between Theme objects and their JSON representation."""

    INDENT = 4

    @staticmethod
    def parse_document(data: Union[str, bytes]) -> Dict[str, Any]:
        """
        Parse raw theme file contents into a JSON object.

        Args:
            data: File contents

        Returns:
            Top-level JSON object

        Raises:
            ThemeParseError: If the data is not well-formed JSON or the
                root is not an object
        """
        try:
            if isinstance(data, bytes):
                data = data.decode("utf-8-sig")
            document = json.loads(data)
        # JSONDecodeError, UnicodeDecodeError and the int digit limit are all ValueError
        except (ValueError, RecursionError) as e:
            raise ThemeParseError(f"Theme is not valid JSON: {e}")

        if not isinstance(document, dict):
            raise ThemeParseError(
                f"Theme root must be an object, got {type(document).__name__}"
            )
        return document

    @staticmethod
    def read_file(path: Union[str, Path]) -> bytes:
        """
        Read a theme file from disk.

        Raises:
            ThemeNotFoundError: If the file is missing or unreadable
        """
        path = Path(path)
        if not path.is_file():
            raise ThemeNotFoundError(f"Theme file not found: {path}")
        try:
            return path.read_bytes()
        except OSError as e:
            raise ThemeNotFoundError(f"Cannot open theme file {path}: {e}")

    @staticmethod
    def deserialize(
        data: Union[str, bytes],
        platform: Platform = Platform.DESKTOP,
    ) -> Tuple[Theme, ParseReport]:
        """
        Build a Theme from a JSON document.

        The result always starts from ``resolve_defaults(platform)``; this is
        never a merge onto an existing theme.

        Args:
            data: Document text or bytes
            platform: Platform used for default values

        Returns:
            (theme, report) where report lists every field that kept its default

        Raises:
            ThemeParseError: If the document itself is malformed
        """
        document = ThemeSerializer.parse_document(data)
        theme = resolve_defaults(platform)
        report = ParseReport()

        for spec in THEME_FIELDS:
            group = document.get(spec.group)
            if not isinstance(group, dict):
                report.add(spec.group, spec.key, f'group "{spec.group}" missing')
                continue

            raw = group.get(spec.key, _MISSING)
            if raw is _MISSING:
                report.add(spec.group, spec.key, "missing")
                continue

            try:
                value = ThemeSerializer._convert(spec, raw)
            except (TypeError, ValueError, OverflowError) as e:
                report.add(spec.group, spec.key, str(e))
                continue

            setattr(theme, spec.attr, value)

        for warning in report.warnings:
            logger.debug(f'Failed to read "{warning.key}" from theme: {warning.reason}')

        return theme, report

    @staticmethod
    def load(
        path: Union[str, Path],
        platform: Platform = Platform.DESKTOP,
    ) -> Tuple[Theme, ParseReport]:
        """
        Read and deserialize a theme file.

        Raises:
            ThemeNotFoundError: If the file is missing or unreadable
            ThemeParseError: If the file is not a JSON object
        """
        return ThemeSerializer.deserialize(ThemeSerializer.read_file(path), platform)

    @staticmethod
    def serialize(theme: Theme, flatten: bool = False) -> Dict[str, Any]:
        """
        Convert a Theme into a JSON-compatible dict.

        Args:
            theme: Theme to serialize
            flatten: If True, write all keys at a single level instead of
                the four nested groups

        Returns:
            Dict containing every theme field
        """
        result: Dict[str, Any] = {} if flatten else {group: {} for group in GROUPS}

        for spec in THEME_FIELDS:
            target = result if flatten else result[spec.group]
            target[spec.key] = ThemeSerializer._export(getattr(theme, spec.attr))

        return result

    @staticmethod
    def dumps(theme: Theme) -> str:
        """
        Serialize a theme to its persisted (nested) JSON text.

        Raises:
            ValueError: If a numeric field is NaN or infinite
        """
        return json.dumps(
            ThemeSerializer.serialize(theme), indent=ThemeSerializer.INDENT, allow_nan=False
        )

    @staticmethod
    def _convert(spec: FieldSpec, raw: Any) -> Any:
        """
        Validate a raw JSON value against a field's kind.

        Raises:
            TypeError: If the value has the wrong JSON type
            ValueError: If the value has the right type but is out of range
        """
        kind = spec.kind

        if kind is Color:
            return Color.from_value(raw)

        # bool is an int subclass; never accept it where a number is expected
        if kind is bool:
            if not isinstance(raw, bool):
                raise TypeError(f"expected boolean, got {type(raw).__name__}")
            return raw

        if kind is float:
            if isinstance(raw, bool) or not isinstance(raw, (int, float)):
                raise TypeError(f"expected number, got {type(raw).__name__}")
            value = float(raw)  # OverflowError for huge ints
            if not math.isfinite(value):
                raise ValueError(f"expected finite number, got {raw!r}")
            return value

        if kind is str:
            if not isinstance(raw, str):
                raise TypeError(f"expected string, got {type(raw).__name__}")
            return raw

        if issubclass(kind, enum.IntEnum):
            if isinstance(raw, bool) or not isinstance(raw, int):
                raise TypeError(f"expected integer, got {type(raw).__name__}")
            return kind(raw)  # ValueError for unknown ordinals

        raise TypeError(f"unsupported field kind {kind!r}")

    @staticmethod
    def _export(value: Any) -> Any:
        if isinstance(value, Color):
            return value.to_list()
        if isinstance(value, enum.IntEnum):
            return int(value)
        return value
