from maap.rcs.client import Bot
from maap.rcs.constants import (
    ALIGNMENT_LEFT,
    ALIGNMENT_RIGHT,
    CALL_TYPE_ENRICHED,
    CALL_TYPE_PHONE,
    CALL_TYPE_VIDEO,
    CARD_WIDTH_MEDIUM,
    CARD_WIDTH_SMALL,
    MEDIA_MEDIUM_HEIGHT,
    MEDIA_SHORT_HEIGHT,
    MEDIA_TALL_HEIGHT,
    MESSAGE_STATUS_CANCELLED,
    MESSAGE_STATUS_DISPLAYED,
    ORIENTATION_HORIZONTAL,
    ORIENTATION_VERTICAL,
    RECORDING_TYPE_AUDIO,
    RECORDING_TYPE_VIDEO,
    SETTINGS_DISABLEANONYMIZATION,
    SETTINGS_ENABLEDISPLAYEDNOTIFICATIONS,
)
from maap.rcs.errors import (
    BotApiError,
    ConfigurationError,
    MaapError,
    UnsupportedContentError,
    UnsupportedSuggestionsError,
)
from maap.rcs.messages import (
    AudioMessage,
    FileMessage,
    GeolocationPushMessage,
    MessageContact,
    MessageContent,
    TextMessage,
)
from maap.rcs.richcard import Media, Richcard, RichcardCarousel
from maap.rcs.suggestions import Suggestions
from maap.webhook import create_app, create_router

__all__ = [
    "ALIGNMENT_LEFT",
    "ALIGNMENT_RIGHT",
    "AudioMessage",
    "Bot",
    "BotApiError",
    "CALL_TYPE_ENRICHED",
    "CALL_TYPE_PHONE",
    "CALL_TYPE_VIDEO",
    "CARD_WIDTH_MEDIUM",
    "CARD_WIDTH_SMALL",
    "ConfigurationError",
    "FileMessage",
    "GeolocationPushMessage",
    "MEDIA_MEDIUM_HEIGHT",
    "MEDIA_SHORT_HEIGHT",
    "MEDIA_TALL_HEIGHT",
    "MESSAGE_STATUS_CANCELLED",
    "MESSAGE_STATUS_DISPLAYED",
    "MaapError",
    "Media",
    "MessageContact",
    "MessageContent",
    "ORIENTATION_HORIZONTAL",
    "ORIENTATION_VERTICAL",
    "RECORDING_TYPE_AUDIO",
    "RECORDING_TYPE_VIDEO",
    "Richcard",
    "RichcardCarousel",
    "SETTINGS_DISABLEANONYMIZATION",
    "SETTINGS_ENABLEDISPLAYEDNOTIFICATIONS",
    "Suggestions",
    "TextMessage",
    "UnsupportedContentError",
    "UnsupportedSuggestionsError",
    "create_app",
    "create_router",
]
