# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Utility helpers for validating and normalising option catalog payloads."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType

from .errors import CatalogIntegrityError
from .types import JSONValue


def expect_string(value: JSONValue | None, *, key: str, context: str) -> str:
    """Return ``value`` as a non-empty ``str`` or raise a catalog error.

    Args:
        value: Raw JSON value extracted from the catalog payload.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        str: Value coerced to a string.

    Raises:
        CatalogIntegrityError: If ``value`` is not a non-empty string.
    """
    if not isinstance(value, str) or not value.strip():
        raise CatalogIntegrityError(f"{context}: expected '{key}' to be a non-empty string")
    return value


def optional_string(value: JSONValue | None, *, key: str, context: str) -> str | None:
    """Return ``value`` as an optional string with validation.

    Args:
        value: Raw JSON value extracted from the catalog payload.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        str | None: ``value`` when present, otherwise ``None``.

    Raises:
        CatalogIntegrityError: If ``value`` is present but not a string.
    """
    if value is None:
        return None
    if not isinstance(value, str):
        raise CatalogIntegrityError(f"{context}: expected '{key}' to be a string if present")
    return value


def optional_bool(
    value: JSONValue | None,
    *,
    key: str,
    context: str,
    default: bool = False,
) -> bool:
    """Return ``value`` coerced to ``bool`` falling back to ``default``.

    Args:
        value: Raw JSON value extracted from the catalog payload.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.
        default: Value returned when ``value`` is ``None``.

    Returns:
        bool: Boolean value derived from ``value`` or ``default``.

    Raises:
        CatalogIntegrityError: If ``value`` is present and not a bool.
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    raise CatalogIntegrityError(f"{context}: expected '{key}' to be a boolean")


def optional_level(value: JSONValue | None, *, key: str, context: str) -> int:
    """Return an integer level such as ``Hide`` where absence means ``0``.

    Raises:
        CatalogIntegrityError: If ``value`` is present but not an integer.
    """
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise CatalogIntegrityError(f"{context}: expected '{key}' to be an integer")
    return value


def tag_tuple(value: JSONValue | None, *, key: str, context: str) -> tuple[str, ...]:
    """Return group tags from a comma-separated string or an array of strings.

    The remote-control API reports ``Groups`` as ``"Copy,Performance"``; older
    payloads and hand-written fixtures use a JSON array instead.

    Args:
        value: Raw JSON value extracted from the catalog payload.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        tuple[str, ...]: Stripped, non-empty tags in declaration order.

    Raises:
        CatalogIntegrityError: If ``value`` is neither a string nor an array of strings.
    """
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(token.strip() for token in value.split(",") if token.strip())
    if not isinstance(value, Sequence) or isinstance(value, (bytes, bytearray)):
        raise CatalogIntegrityError(f"{context}: expected '{key}' to be a string or an array of strings")
    result: list[str] = []
    for index, item in enumerate(value):
        if not isinstance(item, str):
            raise CatalogIntegrityError(f"{context}: expected '{key}[{index}]' to be a string")
        if item.strip():
            result.append(item.strip())
    return tuple(result)


def freeze_json_value(value: JSONValue, *, context: str) -> JSONValue:
    """Return a recursively frozen view of ``value``.

    Args:
        value: JSON value to normalise.
        context: Human-friendly prefix describing the validation context.

    Returns:
        JSONValue: Frozen JSON value (mappings become mapping proxies, sequences tuples).

    Raises:
        CatalogIntegrityError: If ``value`` is not JSON compatible.
    """
    if isinstance(value, Mapping):
        frozen: dict[str, JSONValue] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise CatalogIntegrityError(f"{context}: expected keys to be strings")
            frozen[key] = freeze_json_value(item, context=f"{context}.{key}")
        return MappingProxyType(frozen)
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return tuple(freeze_json_value(item, context=context) for item in value)
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    raise CatalogIntegrityError(f"{context}: unsupported JSON value type {type(value).__name__}")


def thaw_json_value(value: JSONValue) -> JSONValue:
    """Return a plain JSON-compatible representation of ``value``.

    Args:
        value: Frozen JSON value that may contain mapping proxies or tuples.

    Returns:
        JSONValue: JSON-compatible value composed of built-in ``dict`` and
        ``list`` containers.
    """

    if isinstance(value, Mapping):
        return {str(key): thaw_json_value(item) for key, item in value.items()}
    if isinstance(value, (tuple, list)):
        return [thaw_json_value(item) for item in value]
    return value


__all__ = [
    "expect_string",
    "freeze_json_value",
    "optional_bool",
    "optional_level",
    "optional_string",
    "tag_tuple",
    "thaw_json_value",
]
