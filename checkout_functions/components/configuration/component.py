"""
Configuration component - Parse the function configuration metafield.

An absent metafield means the merchant has not configured the function yet,
which is a normal state. A metafield that is present but unusable fails the
invocation: silently doing nothing would hide a misconfigured rule.
"""

from __future__ import annotations

from typing import TypeVar

from pydantic import ValidationError

from checkout_functions.domain.errors import (
    ConfigurationIssue,
    ConfigurationMalformedError,
)

from .models import FunctionConfiguration

ConfigT = TypeVar("ConfigT", bound=FunctionConfiguration)


def _issue_code(error_type: str) -> str:
    """Map a pydantic error type to an issue code."""
    if error_type == "missing":
        return "required"
    if error_type == "json_invalid":
        return "invalid_json"
    if "type" in error_type or "parsing" in error_type:
        return "invalid_type"
    return "invalid_value"


def _parse_pydantic_errors(exc: ValidationError) -> list[ConfigurationIssue]:
    """Turn a pydantic ValidationError into field-specific issues."""
    issues: list[ConfigurationIssue] = []
    for error in exc.errors():
        loc = error.get("loc", ())
        field = ".".join(str(part) for part in loc) if loc else "_schema"
        msg = error.get("msg", "Invalid value")
        issues.append(
            ConfigurationIssue(
                field=field,
                code=_issue_code(error.get("type", "unknown")),
                message=f"Field '{field}': {msg}",
            )
        )
    return issues


def load_configuration(raw: str | None, model: type[ConfigT]) -> ConfigT | None:
    """
    Parse a raw configuration payload.

    Args:
        raw: Metafield value, or None when the metafield is not set.
        model: Configuration model to validate against.

    Returns:
        The parsed configuration, or None when ``raw`` is None.

    Raises:
        ConfigurationMalformedError: payload is not valid JSON, not an
            object, or misses / mistypes a recognized key.
    """
    if raw is None:
        return None

    try:
        return model.model_validate_json(raw)
    except ValidationError as e:
        raise ConfigurationMalformedError(_parse_pydantic_errors(e)) from e


def dump_configuration(config: FunctionConfiguration) -> str:
    """Serialize a configuration with the camelCase keys the loader expects."""
    return config.model_dump_json(by_alias=True)
