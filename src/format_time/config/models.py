"""Configuration models for formatter factories."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

from format_time.types.aliases import Iso8601Format, Iso8601Round


class BaseConfig(BaseModel):
    """Base configuration model with common settings."""

    model_config: ConfigDict = ConfigDict(  # pyright: ignore[reportIncompatibleVariableOverride]
        extra="forbid",
        str_strip_whitespace=True,
        validate_default=True,
        populate_by_name=True,
        frozen=True,
    )


class Iso8601Options(BaseConfig):
    """Options selecting the ISO 8601 time layout.

    Each field maps directly to one formatter or separator; unknown keys and
    values outside the allowed sets are rejected when the model is built.
    """

    format: Iso8601Format = Field(
        default="extended",
        description="'basic' omits field separators, 'extended' uses ':'",
    )
    round: Iso8601Round = Field(
        default="none",
        description="'none' keeps fractional seconds, 'seconds' and 'ms' truncate",
    )
    leading_t: bool = Field(
        default=True,
        alias="leadingT",
        strict=True,
        description="Prefix the time with the 'T' marker",
    )


def by_field_name(model: type[BaseModel], values: Mapping[str, object]) -> dict[str, object]:
    """Rename alias keys (``leadingT``) to field names.

    Merging option layers by field name lets a later layer override an
    earlier one regardless of which spelling each used.
    """
    aliases = {
        field.alias: name
        for name, field in model.model_fields.items()
        if field.alias is not None
    }
    return {aliases.get(key, key): value for key, value in values.items()}
