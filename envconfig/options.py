"""
Options for a single envconfig invocation.

Uses Pydantic for validation, so misspelled option names fail loudly.
"""

from pydantic import BaseModel, ConfigDict, Field


class Options(BaseModel):
    """Customizes how a configuration object is parsed and populated."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    prefix: str = Field(
        default="",
        description="Outermost path segment added to every key",
    )
    all_optional: bool = Field(
        default=False,
        description="Treat every field as optional (no error on missing keys)",
    )
    allow_unexported: bool = Field(
        default=False,
        description="Skip fields that cannot be set instead of failing",
    )
