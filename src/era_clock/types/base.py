"""Reusable, strict base model for configuration records."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StrictBaseModel(BaseModel):
    """
    A strict, immutable pydantic model keyed in camel case.

    The field name `system_start` in a Python model is read from and written
    to documents as `systemStart`, the key style used by genesis files.
    Snake case names are still accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_default=True,
        extra="forbid",
        frozen=True,
        strict=True,
    )
