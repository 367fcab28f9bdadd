EVENT_MESSAGE = "message"
EVENT_IS_TYPING = "isTyping"
EVENT_MESSAGE_STATUS = "messageStatus"
EVENT_FILE_STATUS = "fileStatus"
EVENT_RESPONSE = "response"
EVENT_ALIAS = "alias"
EVENT_NEW_USER = "newUser"
