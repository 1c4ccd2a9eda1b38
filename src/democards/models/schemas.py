"""Pydantic models for serializing cards."""

from __future__ import annotations

from pydantic import BaseModel

from democards.models.domain import DemoCard


class DemoCardSchema(BaseModel):
    path: str
    cover: str | None = None
    id: str
    title: str
    description: str

    @classmethod
    def from_card(cls, card: DemoCard) -> DemoCardSchema:
        return cls(
            path=str(card.path),
            cover=str(card.cover) if card.cover is not None else None,
            id=card.id,
            title=card.title,
            description=card.description,
        )
