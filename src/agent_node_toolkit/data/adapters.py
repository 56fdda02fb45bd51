"""Adapters for converting between nested and flat data shapes."""

import json
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from .formatters import to_text

_BRACKET_KEY_RE = re.compile(r"^([^\[]+)(\[.*\])$")
_BRACKET_SEGMENT_RE = re.compile(r"\[([^\]]*)\]")


@dataclass
class AdapterOptions:
    """Options for adapter conversions."""

    # Keep None values instead of replacing them with default_value
    preserve_nullish: bool = False
    # JSON-encode arrays (flat records) or index them (key/value pairs)
    preserve_arrays: bool = False
    # Per-key transformers, keyed by the output key
    transformers: dict[str, Callable[[Any], Any]] = field(default_factory=dict)
    default_value: Any = ""


def _array_text(values: list[Any], preserve_arrays: bool) -> str:
    return json.dumps(values) if preserve_arrays else to_text(values)


def json_to_flat_record(data: dict[str, Any], options: AdapterOptions | None = None) -> dict[str, Any]:
    """Flatten a nested object into dotted keys.

    ``{"user": {"name": "John"}, "items": ["a", "b"]}`` becomes
    ``{"user.name": "John", "items": "a,b"}``. Empty nested objects are kept
    as values.
    """
    opts = options or AdapterOptions()
    result: dict[str, Any] = {}

    def flatten(obj: Any, prefix: str = "") -> None:
        for key, value in obj.items():
            path = f"{prefix}.{key}" if prefix else str(key)

            if path in opts.transformers:
                result[path] = opts.transformers[path](value)
            elif value is None:
                result[path] = None if opts.preserve_nullish else opts.default_value
            elif isinstance(value, dict) and value:
                flatten(value, path)
            elif isinstance(value, (list, tuple)):
                result[path] = _array_text(list(value), opts.preserve_arrays)
            else:
                result[path] = value

    flatten(data)
    return result


def flat_record_to_json(record: dict[str, Any], options: AdapterOptions | None = None) -> dict[str, Any]:
    """Re-nest a record with dotted keys.

    Transformers apply to top-level (undotted) keys only.
    """
    opts = options or AdapterOptions()
    result: dict[str, Any] = {}

    for key, value in record.items():
        if "." not in key:
            result[key] = opts.transformers[key](value) if key in opts.transformers else value
            continue

        *parents, leaf = key.split(".")
        current = result
        for part in parents:
            if not isinstance(current.get(part), dict):
                current[part] = {}
            current = current[part]
        current[leaf] = value

    return result


def object_to_key_value_pairs(data: dict[str, Any], options: AdapterOptions | None = None) -> list[dict[str, Any]]:
    """Convert an object to form-style key/value pairs.

    ``{"user": {"name": "John"}}`` becomes
    ``[{"key": "user[name]", "value": "John"}]``. Arrays are indexed
    (``items[0]``) unless ``preserve_arrays`` is False, in which case they are
    joined with commas. This adapter defaults ``preserve_arrays`` to True.
    """
    opts = options or AdapterOptions(preserve_arrays=True)
    result: list[dict[str, Any]] = []

    def process(value: Any, key_prefix: str) -> None:
        if isinstance(value, (list, tuple)):
            if not opts.preserve_arrays:
                result.append({"key": key_prefix, "value": to_text(list(value))})
                return
            for index, item in enumerate(value):
                item_key = f"{key_prefix}[{index}]"
                if isinstance(item, (dict, list, tuple)):
                    process(item, item_key)
                else:
                    result.append({"key": item_key, "value": item})
            return

        for key, prop in value.items():
            item_key = f"{key_prefix}[{key}]" if key_prefix else str(key)

            if item_key in opts.transformers:
                result.append({"key": item_key, "value": opts.transformers[item_key](prop)})
            elif prop is None:
                result.append({"key": item_key, "value": None if opts.preserve_nullish else opts.default_value})
            elif isinstance(prop, (dict, list, tuple)):
                process(prop, item_key)
            else:
                result.append({"key": item_key, "value": prop})

    process(data, "")
    return result


def _empty_container(segment: str) -> list[Any] | dict[str, Any]:
    return [] if segment.isdigit() else {}


def _get_child(container: Any, segment: str) -> Any:
    if isinstance(container, list):
        index = int(segment)
        return container[index] if index < len(container) else None
    return container.get(segment)


def _set_child(container: Any, segment: str, value: Any) -> None:
    if isinstance(container, list):
        if not segment.isdigit():
            raise ValueError(f"Cannot set key '{segment}' on a list")
        index = int(segment)
        container.extend([None] * (index + 1 - len(container)))
        container[index] = value
    else:
        container[segment] = value


def key_value_pairs_to_object(pairs: list[dict[str, Any]]) -> dict[str, Any]:
    """Rebuild a nested object from form-style key/value pairs.

    Numeric bracket segments create lists, other segments create objects.
    """
    result: dict[str, Any] = {}

    for pair in pairs:
        key, value = pair["key"], pair.get("value")
        match = _BRACKET_KEY_RE.match(key)
        if not match:
            result[key] = value
            continue

        main_key, rest = match.groups()
        segments = _BRACKET_SEGMENT_RE.findall(rest)
        if not segments:
            result[key] = value
            continue

        if not isinstance(result.get(main_key), (dict, list)):
            result[main_key] = _empty_container(segments[0])

        current = result[main_key]
        for index, segment in enumerate(segments):
            if index == len(segments) - 1:
                _set_child(current, segment, value)
                break
            child = _get_child(current, segment)
            if not isinstance(child, (dict, list)):
                child = _empty_container(segments[index + 1])
                _set_child(current, segment, child)
            current = child

    return result
