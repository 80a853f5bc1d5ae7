# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Structural schema used to validate ``options/info`` payloads."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

from .errors import CatalogValidationError
from .types import JSONValue
from .utils import thaw_json_value

OPTIONS_INFO_SCHEMA: Final[Mapping[str, JSONValue]] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "rclone options/info payload",
    "type": "object",
    "additionalProperties": {"type": "array"},
}

_VALIDATOR: Final[Draft202012Validator] = Draft202012Validator(OPTIONS_INFO_SCHEMA)


def validate_payload(payload: Mapping[str, JSONValue], *, context: str) -> None:
    """Validate the payload root: an object of subsystem arrays.

    Individual descriptors are not checked here; malformed entries are
    skipped by the loader instead of failing the whole catalog.

    Args:
        payload: Raw catalog payload.
        context: Human-readable context used in error messages.

    Raises:
        CatalogValidationError: When the payload fails schema validation.
    """

    try:
        _VALIDATOR.validate(thaw_json_value(payload))
    except ValidationError as exc:
        location = "/".join(str(part) for part in exc.absolute_path) or "<root>"
        raise CatalogValidationError(f"{context}: {location}: {exc.message}") from exc


__all__ = ["OPTIONS_INFO_SCHEMA", "validate_payload"]
