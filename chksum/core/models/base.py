"""
Pydantic bases shared by the chksum models.

Digest records travel from the computer through the engine to every sink,
so they are strict and frozen; config sections relax strictness on their
own (see models.config).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ChksumBaseModel(BaseModel):
    """Strict model: no coercion, no unknown fields, assignments revalidated.

    Enum fields hold their values, so an ErrorPolicy read from TOML and one
    built in code compare equal.
    """

    model_config = ConfigDict(
        strict=True,
        validate_assignment=True,
        extra="forbid",
        use_enum_values=True,
    )


class ImmutableModel(ChksumBaseModel):
    """Frozen and hashable. Entities and digest results are shared across worker threads."""

    model_config = ConfigDict(frozen=True)
