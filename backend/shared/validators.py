"""Validation helpers for list-valued settings read from the environment."""

import json
from typing import Any

from pydantic.fields import FieldInfo
from pydantic_settings import EnvSettingsSource


def parse_string_list(value: str | list[str], *, allow_empty: bool = False) -> list[str]:
    """Parse a string list from an environment variable or config value.

    Accepts a list of strings, a JSON array string ('["a","b"]') or a
    comma-separated string ('a,b'). Blank strings and malformed JSON raise
    ValueError; so do empty lists unless allow_empty is set.
    """
    if isinstance(value, list):
        items = value
    else:
        stripped = value.strip()
        if not stripped:
            raise ValueError("String list value must not be empty")
        items = _parse_json_array(stripped) if stripped.startswith("[") else _parse_csv(stripped)

    if not allow_empty and not items:
        raise ValueError("String list value must not be empty")
    return items


def _parse_json_array(text: str) -> list[str]:
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON array: {e}") from e
    if not isinstance(parsed, list) or not all(isinstance(item, str) for item in parsed):
        raise ValueError("JSON value must be an array of strings")
    return parsed


def _parse_csv(text: str) -> list[str]:
    return [item.strip() for item in text.split(",") if item.strip()]


class StringListEnvSettingsSource(EnvSettingsSource):
    """Env settings source that hands list[str] fields to validators as raw strings.

    pydantic-settings JSON-decodes complex fields from env vars before
    validators run, which rejects CSV values. Fields named in string_list_fields
    are passed through untouched so parse_string_list can accept both formats.
    """

    def __init__(self, *args: Any, string_list_fields: frozenset[str], **kwargs: Any) -> None:  # noqa: ANN401
        super().__init__(*args, **kwargs)
        self._string_list_fields = string_list_fields

    def prepare_field_value(
        self,
        field_name: str,
        field: FieldInfo,
        value: Any,  # noqa: ANN401
        value_is_complex: bool,  # noqa: FBT001
    ) -> Any:  # noqa: ANN401
        if field_name in self._string_list_fields and isinstance(value, str):
            return value
        return super().prepare_field_value(field_name, field, value, value_is_complex)
