"""Pydantic models for the outbound AppsFlyer side.

These are the target structures of the mapping layer: one `AppsFlyerEvent`
per `logEvent` call and one `IdentityUpdate` per identify event. The
integration hands them to the sink; the replay CLI serializes them.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

__all__ = ["AppsFlyerEvent", "EmailCryptType", "IdentityUpdate"]


class EmailCryptType(str, Enum):
    """Hash marker passed along with user emails.

    Hashing is performed by the SDK; the marker only tells it which algorithm
    to apply.
    """

    SHA256 = "SHA256"


class AppsFlyerEvent(BaseModel):
    """A single `logEvent(name, values)` call."""

    name: str
    values: Dict[str, Any] = Field(default_factory=dict)


class IdentityUpdate(BaseModel):
    """Identity setters to apply for one identify event.

    `customer_user_id` is None when the user id was absent or blank; `emails`
    is empty when no usable email trait exists. Either, both or neither may be
    set.
    """

    customer_user_id: Optional[str] = None
    emails: List[str] = Field(default_factory=list)
    crypt_type: EmailCryptType = EmailCryptType.SHA256

    @property
    def is_empty(self) -> bool:
        return self.customer_user_id is None and not self.emails
