"""Configuration validation utilities."""

from dataclasses import dataclass, fields
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from ..logging.config import LOG_LEVELS
from .defaults import get_default_config

REFERENCE_RATE = Decimal("100")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _parse_rate(value: Any) -> Optional[Decimal]:
    """Parse a configured rate, None when it is not a finite number."""
    if isinstance(value, bool) or not isinstance(value, (int, float, str, Decimal)):
        return None
    try:
        rate = Decimal(str(value).strip())
    except InvalidOperation:
        return None
    return rate if rate.is_finite() else None


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_rate_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate rate table parameters."""
        errors = []

        reference = params.get("reference_currency")
        if not isinstance(reference, str) or not reference.strip():
            errors.append(ValidationError(
                field="reference_currency",
                message="Must be a non-empty currency code",
                value=reference
            ))
            reference = None

        rates = params.get("currencies")
        if not isinstance(rates, dict) or not rates:
            errors.append(ValidationError(
                field="currencies",
                message="Must be a non-empty mapping of currency code to rate entry",
                value=rates
            ))
            return errors

        seen_codes: set[str] = set()
        reference_rate = None

        for code, entry in rates.items():
            field_name = f"currencies.{code}"

            if not isinstance(code, str) or not code.strip():
                errors.append(ValidationError(
                    field=field_name,
                    message="Currency code must be a non-empty string",
                    value=code
                ))
                continue

            normalized = code.strip().upper()
            if normalized in seen_codes:
                errors.append(ValidationError(
                    field=field_name,
                    message="Duplicate currency code",
                    value=code
                ))
            seen_codes.add(normalized)

            if not isinstance(entry, dict):
                errors.append(ValidationError(
                    field=field_name,
                    message="Must be a mapping with 'name' and 'rate'",
                    value=entry
                ))
                continue

            name = entry.get("name")
            if not isinstance(name, str) or not name.strip():
                errors.append(ValidationError(
                    field=f"{field_name}.name",
                    message="Must be a non-empty string",
                    value=name
                ))

            rate = _parse_rate(entry.get("rate"))
            if rate is None or rate <= 0:
                errors.append(ValidationError(
                    field=f"{field_name}.rate",
                    message="Must be a positive number",
                    value=entry.get("rate")
                ))
            elif reference is not None and normalized == reference.strip().upper():
                reference_rate = rate

        if reference is not None:
            if reference.strip().upper() not in seen_codes:
                errors.append(ValidationError(
                    field="reference_currency",
                    message="Reference currency must be present in rates",
                    value=reference
                ))
            elif reference_rate is not None and reference_rate != REFERENCE_RATE:
                errors.append(ValidationError(
                    field=f"currencies.{reference}.rate",
                    message="Reference currency rate must be 100",
                    value=reference_rate
                ))

        return errors

    @staticmethod
    def validate_display_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate display parameters."""
        errors = []

        for field_name in ("amount_places", "converted_places"):
            if field_name in params:
                value = params[field_name]
                if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                    errors.append(ValidationError(
                        field=field_name,
                        message="Must be a non-negative integer",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_console_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate console parameters."""
        errors = []

        if "prompt" in params and not isinstance(params["prompt"], str):
            errors.append(ValidationError(
                field="prompt",
                message="Must be a string",
                value=params["prompt"]
            ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params and not isinstance(params["format_json"], bool):
            errors.append(ValidationError(
                field="format_json",
                message="Must be a boolean",
                value=params["format_json"]
            ))

        return errors

    @staticmethod
    def validate_known_fields(config: dict[str, Any]) -> list[ValidationError]:
        """Reject sections and fields the application does not understand."""
        errors = []
        defaults = get_default_config()
        sections = {f.name for f in fields(defaults)}

        for section, params in config.items():
            if section not in sections:
                errors.append(ValidationError(
                    field=section,
                    message="Unknown configuration section",
                    value=params
                ))
                continue

            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=params
                ))
                continue

            known = {f.name for f in fields(getattr(defaults, section))}
            for key in params:
                if key not in known:
                    errors.append(ValidationError(
                        field=f"{section}.{key}",
                        message="Unknown configuration field",
                        value=params[key]
                    ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = ConfigValidator.validate_known_fields(config)
        if errors:
            return errors

        if "rates" in config:
            errors.extend(ConfigValidator.validate_rate_params(config["rates"]))

        if "display" in config:
            errors.extend(ConfigValidator.validate_display_params(config["display"]))

        if "console" in config:
            errors.extend(ConfigValidator.validate_console_params(config["console"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
