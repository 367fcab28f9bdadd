MESSAGE_STATUS_CANCELLED = "cancelled"
MESSAGE_STATUS_DISPLAYED = "displayed"

CALL_TYPE_PHONE = "dialPhoneNumber"
CALL_TYPE_ENRICHED = "dialEnrichedCall"
CALL_TYPE_VIDEO = "dialVideoCall"

ORIENTATION_VERTICAL = "VERTICAL"
ORIENTATION_HORIZONTAL = "HORIZONTAL"

ALIGNMENT_LEFT = "LEFT"
ALIGNMENT_RIGHT = "RIGHT"

MEDIA_SHORT_HEIGHT = "SHORT_HEIGHT"
MEDIA_MEDIUM_HEIGHT = "MEDIUM_HEIGHT"
MEDIA_TALL_HEIGHT = "TALL_HEIGHT"

CARD_WIDTH_SMALL = "SMALL_WIDTH"
CARD_WIDTH_MEDIUM = "MEDIUM_WIDTH"

SETTINGS_DISABLEANONYMIZATION = "disableAnonymization"
SETTINGS_ENABLEDISPLAYEDNOTIFICATIONS = "enableDisplayedNotifications"

RECORDING_TYPE_AUDIO = "AUDIO"
RECORDING_TYPE_VIDEO = "VIDEO"

TYPING_ACTIVE = "active"
TYPING_IDLE = "idle"

DIALER_CALL_TYPES = {CALL_TYPE_PHONE, CALL_TYPE_ENRICHED, CALL_TYPE_VIDEO}
SETTINGS_ACTION_TYPES = {SETTINGS_DISABLEANONYMIZATION, SETTINGS_ENABLEDISPLAYEDNOTIFICATIONS}

DEFAULT_FILE_RETENTION_DAYS = 30
