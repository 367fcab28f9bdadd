from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from maap.rcs.constants import (
    CALL_TYPE_ENRICHED,
    DIALER_CALL_TYPES,
    SETTINGS_ACTION_TYPES,
)


def _compact(values: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}


class Suggestions:
    """Ordered list of suggestion chips; entries are shown in insertion order."""

    def __init__(self) -> None:
        self._suggestions: list[dict[str, Any]] = []

    def __len__(self) -> int:
        return len(self._suggestions)

    def __iter__(self) -> Iterator[dict[str, Any]]:
        return iter(self.to_wire())

    def add_reply(self, display_text: str, postback_data: str) -> Suggestions:
        self._suggestions.append(
            {"reply": {"displayText": display_text, "postback": {"data": postback_data}}}
        )
        return self

    def add_url_action(self, display_text: str, postback_data: str, url: str) -> Suggestions:
        return self._add_action(display_text, postback_data, "urlAction", {"openUrl": {"url": url}})

    def add_dialer_action(
        self,
        display_text: str,
        postback_data: str,
        dial_type: str,
        phone_number: str,
        fallback_url: str | None = None,
        subject: str | None = None,
    ) -> Suggestions:
        dialer_action: dict[str, Any] = {}
        if dial_type in DIALER_CALL_TYPES:
            call = {"phoneNumber": phone_number, "fallbackUrl": fallback_url}
            if dial_type == CALL_TYPE_ENRICHED:
                call["subject"] = subject
            dialer_action[dial_type] = _compact(call)
        return self._add_action(display_text, postback_data, "dialerAction", dialer_action)

    def add_request_location_push_map_action(self, display_text: str, postback_data: str) -> Suggestions:
        return self._add_action(display_text, postback_data, "mapAction", {"requestLocationPush": {}})

    def add_show_location_map_action(
        self,
        display_text: str,
        postback_data: str,
        latitude: float,
        longitude: float,
        label: str | None = None,
        query: str | None = None,
        fallback_url: str | None = None,
    ) -> Suggestions:
        location = _compact(
            {"latitude": latitude, "longitude": longitude, "label": label, "query": query}
        )
        show_location = _compact({"location": location, "fallbackUrl": fallback_url})
        return self._add_action(display_text, postback_data, "mapAction", {"showLocation": show_location})

    def add_calendar_action(
        self,
        display_text: str,
        postback_data: str,
        start_time: str,
        end_time: str,
        title: str,
        description: str | None = None,
        fallback_url: str | None = None,
    ) -> Suggestions:
        event = _compact(
            {
                "startTime": start_time,
                "endTime": end_time,
                "title": title,
                "description": description,
                "fallbackUrl": fallback_url,
            }
        )
        return self._add_action(
            display_text, postback_data, "calendarAction", {"createCalendarEvent": event}
        )

    def add_text_compose_action(
        self, display_text: str, postback_data: str, phone_number: str, text: str
    ) -> Suggestions:
        compose = _compact({"phoneNumber": phone_number, "text": text})
        return self._add_action(
            display_text, postback_data, "composeAction", {"composeTextMessage": compose}
        )

    def add_recording_compose_action(
        self, display_text: str, postback_data: str, phone_number: str, recording_type: str
    ) -> Suggestions:
        compose = _compact({"phoneNumber": phone_number, "type": recording_type})
        return self._add_action(
            display_text, postback_data, "composeAction", {"composeRecordingMessage": compose}
        )

    def add_device_action(self, display_text: str, postback_data: str) -> Suggestions:
        return self._add_action(
            display_text, postback_data, "deviceAction", {"requestDeviceSpecifics": {}}
        )

    def add_settings_action(self, display_text: str, postback_data: str, settings_type: str) -> Suggestions:
        settings_action: dict[str, Any] = {}
        if settings_type in SETTINGS_ACTION_TYPES:
            settings_action[settings_type] = {}
        return self._add_action(display_text, postback_data, "settingsAction", settings_action)

    def to_wire(self) -> list[dict[str, Any]]:
        return list(self._suggestions)

    def _add_action(
        self, display_text: str, postback_data: str, action_type: str, action: dict[str, Any]
    ) -> Suggestions:
        self._suggestions.append(
            {
                "action": {
                    action_type: action,
                    "displayText": display_text,
                    "postback": {"data": postback_data},
                }
            }
        )
        return self
