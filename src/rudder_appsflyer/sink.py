"""Sink seam between the mapping engine and the AppsFlyer SDK.

`AppsFlyerSink` is the protocol the integration talks to. The real SDK binding
lives in the host application; this module only ships `JsonLinesSink`, which
serializes every call as one JSON object per line. The replay CLI uses it to
show what would be sent to AppsFlyer.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Protocol, TextIO

from .models.appsflyer import EmailCryptType

__all__ = ["AppsFlyerSink", "JsonLinesSink"]


class AppsFlyerSink(Protocol):
    def set_customer_user_id(self, user_id: Optional[str]) -> None: ...

    def set_user_emails(self, emails: List[str], crypt_type: EmailCryptType) -> None: ...

    def log_event(self, name: str, values: Dict[str, Any]) -> None: ...


class JsonLinesSink:
    """Write each sink call to a text stream as a JSON line.

    Line shapes:
        {"call": "setCustomerUserID", "userId": "..."}
        {"call": "setUserEmails", "emails": [...], "cryptType": "SHA256"}
        {"call": "logEvent", "eventName": "...", "values": {...}}

    Values that are not JSON-native are rendered with `str()`.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self.calls = 0

    def _write(self, payload: Dict[str, Any]) -> None:
        self._stream.write(json.dumps(payload, ensure_ascii=False, default=str) + "\n")
        self.calls += 1

    def set_customer_user_id(self, user_id: Optional[str]) -> None:
        self._write({"call": "setCustomerUserID", "userId": user_id})

    def set_user_emails(self, emails: List[str], crypt_type: EmailCryptType) -> None:
        self._write({"call": "setUserEmails", "emails": list(emails), "cryptType": crypt_type.value})

    def log_event(self, name: str, values: Dict[str, Any]) -> None:
        self._write({"call": "logEvent", "eventName": name, "values": values})
