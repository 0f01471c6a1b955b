"""
Source tree node types.

A parsed token document is a tree of groups and leaves. The two node kinds
are discriminated explicitly on ``kind`` rather than by probing for a
``value`` member, so a group that happens to contain a child called
``value`` is never mistaken for a token.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class TokenLeaf(BaseModel):
    """A terminal token definition as authored."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["token"] = "token"
    value: Any = Field(description="Literal or {reference} as authored")
    meta: dict[str, Any] = Field(
        default_factory=dict, description="Every other key of the JSON leaf"
    )
    source: str | None = Field(default=None, description="File the leaf was read from")


class TokenGroup(BaseModel):
    """An intermediate grouping node."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["group"] = "group"
    children: dict[str, TokenNode] = Field(default_factory=dict)
    attributes: dict[str, Any] = Field(
        default_factory=dict,
        description="Non-object members ($description, arrays); replaced, never merged",
    )


TokenNode = Annotated[TokenLeaf | TokenGroup, Field(discriminator="kind")]

TokenGroup.model_rebuild()
