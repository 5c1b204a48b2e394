"""Base model for timing records."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StrictBaseModel(BaseModel):
    """
    A strict, immutable pydantic model serialized with camel-case keys.

    Field `epoch_start_block` dumps as `epochStartBlock` with `by_alias=True`,
    the naming contract tooling reads. Construction still uses the Python
    field names.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_default=True,
        extra="forbid",
        frozen=True,
        strict=True,
    )
