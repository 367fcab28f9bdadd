from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
        arbitrary_types_allowed=True,
    )

    def to_wire(self) -> dict[str, Any]:
        # Unset optionals are left off the wire instead of being sent as null.
        return self.model_dump(by_alias=True, exclude_none=True)


class MessageContact(WireModel):
    user_contact: str | None = None
    chat_id: str | None = None

    def __init__(self, user_contact: str | None = None, chat_id: str | None = None, **data: Any) -> None:
        super().__init__(user_contact=user_contact, chat_id=chat_id, **data)


def contact_to_wire(recipient: Any) -> Any:
    """Serialize a recipient; anything that is not a MessageContact is sent as given."""
    if isinstance(recipient, MessageContact):
        return recipient.to_wire()
    return recipient


class MessageContent(WireModel):
    """A content variant of an outbound RCS message.

    ``wire_key`` names the ``RCSMessage`` field the variant is sent under.
    """

    wire_key: ClassVar[str]


class TextMessage(MessageContent):
    wire_key: ClassVar[str] = "textMessage"

    text: str

    def __init__(self, text: str, **data: Any) -> None:
        super().__init__(text=text, **data)

    def to_wire(self) -> str:
        return self.text


class FileMessage(MessageContent):
    wire_key: ClassVar[str] = "fileMessage"

    file_url: str | None = None
    file_name: str | None = None
    file_mime_type: str | None = Field(default=None, alias="fileMIMEType")
    file_size: int | None = None
    thumbnail_url: str | None = None
    thumbnail_file_name: str | None = None
    thumbnail_mime_type: str | None = Field(default=None, alias="thumbnailMIMEType")
    thumbnail_file_size: int | None = None

    def __init__(self, file_url: str | None = None, **data: Any) -> None:
        super().__init__(file_url=file_url, **data)


class AudioMessage(MessageContent):
    wire_key: ClassVar[str] = "audioMessage"

    file_url: str | None = None
    file_name: str | None = None
    file_mime_type: str | None = Field(default=None, alias="fileMIMEType")
    file_size: int | None = None
    playing_length: int | None = None

    def __init__(self, file_url: str | None = None, **data: Any) -> None:
        super().__init__(file_url=file_url, **data)


class GeolocationPushMessage(MessageContent):
    wire_key: ClassVar[str] = "geolocationPushMessage"

    pos: Any = None
    label: str | None = None
    timestamp: str | None = None
    expiry: str | None = None
    time_offset: int | None = None
    radius: float | None = None

    def __init__(self, pos: Any = None, **data: Any) -> None:
        super().__init__(pos=pos, **data)
