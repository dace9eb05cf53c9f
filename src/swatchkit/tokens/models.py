"""
Token file models.

One JSON document per category. Every category except viewports holds an
ordered ``items`` list; viewports is a flat name -> pixel width mapping.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_FLUID_RATIO = 1.125

# Keys in viewports.json that describe the file rather than a breakpoint
VIEWPORT_META_KEYS = frozenset({"title", "description", "meta", "$schema"})


class TokenItem(BaseModel):
    """A single named token.

    Static when ``value`` is set, otherwise fluid when either bound is set.
    Leading items may use ``step`` instead of ``value``.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str | None = None
    value: str | int | float | list[str] | None = None
    min: float | None = None
    max: float | None = None
    fluid_ratio: float | None = Field(default=None, alias="fluidRatio", gt=0)
    step: float | None = None

    @property
    def is_static(self) -> bool:
        return self.value is not None and self.value != "" and self.value != []

    @property
    def is_fluid(self) -> bool:
        return not self.is_static and (self.min is not None or self.max is not None)


class TokenFile(BaseModel):
    """A category document (colors, weights, sizes, spacing, fonts)."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    title: str | None = None
    description: str | None = None
    fluid_ratio: float = Field(default=DEFAULT_FLUID_RATIO, alias="fluidRatio", gt=0)
    items: list[TokenItem] = Field(default_factory=list)


class LeadingFile(TokenFile):
    """text-leading.json: items are explicit values or steps on a modular scale."""

    base: float | None = None
    ratio: float | None = Field(default=None, gt=0)


@dataclass(frozen=True)
class CompiledToken:
    """A custom property emitted for one token item."""

    category: str
    name: str
    slug: str
    variable: str  # "--color-primary"
    value: str


@dataclass
class TokenContext:
    """Accumulator built fresh for each token compilation.

    Holds the parsed viewports document for fluid derivation and the
    compiled tokens per category for utility classes and token pages.
    """

    viewports: dict[str, Any] | None = None
    tokens: dict[str, list[CompiledToken]] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)
    output_file: Path | None = None

    def category(self, key: str) -> list[CompiledToken]:
        return self.tokens.get(key, [])

    def is_empty(self) -> bool:
        return not any(self.tokens.values())
