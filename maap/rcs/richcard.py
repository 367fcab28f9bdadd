from __future__ import annotations

from typing import Any, ClassVar

from pydantic import Field

from maap.rcs.constants import CARD_WIDTH_SMALL, ORIENTATION_HORIZONTAL, ORIENTATION_VERTICAL
from maap.rcs.messages import MessageContent, WireModel
from maap.rcs.suggestions import Suggestions


class Media(WireModel):
    media_url: str | None = None
    media_content_type: str | None = None
    thumbnail_url: str | None = None
    thumbnail_content_type: str | None = None
    media_file_size: int | None = None
    height: str | None = None


class Richcard(MessageContent):
    wire_key: ClassVar[str] = "richcardMessage"

    card_orientation: str = ORIENTATION_VERTICAL
    image_alignment: str | None = None
    media: Media | None = None
    title: str | None = None
    description: str | None = None
    suggestions: Suggestions | None = None

    def set_media(
        self,
        media_url: str,
        media_content_type: str | None = None,
        media_file_size: int | None = None,
        thumbnail_url: str | None = None,
        thumbnail_content_type: str | None = None,
        height: str | None = None,
    ) -> Richcard:
        self.media = Media(
            media_url=media_url,
            media_content_type=media_content_type,
            media_file_size=media_file_size,
            thumbnail_url=thumbnail_url,
            thumbnail_content_type=thumbnail_content_type,
            height=height,
        )
        return self

    def to_wire(self) -> dict[str, Any]:
        layout: dict[str, Any] = {"cardOrientation": self.card_orientation}
        if self.card_orientation == ORIENTATION_HORIZONTAL and self.image_alignment:
            layout["imageAlignment"] = self.image_alignment
        return {"message": {"generalPurposeCard": {"layout": layout, "content": self.content()}}}

    def content(self) -> dict[str, Any]:
        """Card body without layout, as embedded in single cards and carousels."""
        content: dict[str, Any] = {}
        if self.media is not None:
            content["media"] = self.media.to_wire()
        if self.title:
            content["title"] = self.title
        if self.description:
            content["description"] = self.description
        if self.suggestions is not None:
            content["suggestions"] = self.suggestions.to_wire()
        return content


class RichcardCarousel(MessageContent):
    wire_key: ClassVar[str] = "richcardMessage"

    card_width: str = CARD_WIDTH_SMALL
    richcards: list[Richcard] = Field(default_factory=list)

    def add_richcard(self, richcard: Richcard) -> RichcardCarousel:
        self.richcards.append(richcard)
        return self

    def to_wire(self) -> dict[str, Any]:
        return {
            "message": {
                "generalPurposeCardCarousel": {
                    "layout": {"cardWidth": self.card_width},
                    "content": [richcard.content() for richcard in self.richcards],
                }
            }
        }
