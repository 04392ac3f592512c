"""Trail item model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class TrailItem(BaseModel):
    """A labeled link to a document, optionally owning a nested sub-trail.

    Attributes:
        text: Display label.
        link: Document stem the item points to (no directory, no extension).
        subtrail: Ordered child items, or None when the item is a leaf.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    link: str
    subtrail: tuple["TrailItem", ...] | None = None

    @model_validator(mode="before")
    @classmethod
    def _coerce_compact_form(cls, data: Any) -> Any:
        # [text, link] or [text, link, [children...]]
        if isinstance(data, (list, tuple)):
            if len(data) not in (2, 3):
                raise ValueError(
                    "Compact trail items must be [text, link] or [text, link, subtrail]"
                )
            coerced: dict[str, Any] = {"text": data[0], "link": data[1]}
            if len(data) == 3:
                coerced["subtrail"] = data[2]
            return coerced
        return data

    @field_validator("subtrail")
    @classmethod
    def _empty_subtrail_is_none(
        cls, value: tuple["TrailItem", ...] | None
    ) -> tuple["TrailItem", ...] | None:
        return value or None

    @property
    def has_subtrail(self) -> bool:
        return self.subtrail is not None

    def __repr__(self) -> str:
        children = f", {len(self.subtrail)} children" if self.subtrail else ""
        return f"TrailItem({self.text!r} -> {self.link!r}{children})"


Trail = tuple[TrailItem, ...]

TrailItem.model_rebuild()
