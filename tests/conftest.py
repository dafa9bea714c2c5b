import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import pytest

# Ensure `src` is on sys.path for tests when the package is not installed editable.
SRC = Path(__file__).resolve().parent.parent / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from rudder_appsflyer.integration import AppsFlyerIntegration  # noqa: E402
from rudder_appsflyer.models.appsflyer import EmailCryptType  # noqa: E402


class MockAppsFlyerSink:
    """Records every sink call for later assertions."""

    def __init__(self) -> None:
        self.customer_user_id_calls: List[Optional[str]] = []
        self.user_emails_calls: List[Tuple[List[str], EmailCryptType]] = []
        self.log_event_calls: List[Tuple[str, Dict[str, Any]]] = []

    def set_customer_user_id(self, user_id: Optional[str]) -> None:
        self.customer_user_id_calls.append(user_id)

    def set_user_emails(self, emails: List[str], crypt_type: EmailCryptType) -> None:
        self.user_emails_calls.append((emails, crypt_type))

    def log_event(self, name: str, values: Dict[str, Any]) -> None:
        self.log_event_calls.append((name, values))


@pytest.fixture
def sink() -> MockAppsFlyerSink:
    return MockAppsFlyerSink()


@pytest.fixture
def integration(sink: MockAppsFlyerSink) -> AppsFlyerIntegration:
    plugin = AppsFlyerIntegration(sink)
    plugin.create({"useRichEventName": False, "devKey": "test_dev_key"})
    return plugin
