from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class WebhookEnvelope(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    event: str | None = None
    message_contact: Any = Field(default=None, alias="messageContact")
    rcs_message: Any = Field(default=None, alias="RCSMessage")

    def has_event(self) -> bool:
        return bool(self.event)
