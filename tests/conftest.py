from typing import Dict, List, Optional, Tuple

import pytest

from recaptcha_validator import RecaptchaValidator

MOCK_SECRET = "mockSecretKey"
MOCK_TOKEN = "mockToken"
MOCK_IP_ADDRESS = "192.168.1.1"

ERROR_RESPONSE = b"""{
    "success": false,
    "error-codes": [
        "missing-input-response",
        "missing-input-secret"
    ]
}"""

SUCCESS_RESPONSE = b"""{
    "success": true,
    "challenge_ts": "2017-09-18T22:28:24Z",
    "hostname": "www.example.com"
}"""


class FakeResponse:
    """Body-bearing stand-in for requests.Response that tracks close()."""

    def __init__(self, content: bytes):
        self._content = content
        self.closed = False
        self.reads = 0

    @property
    def content(self) -> bytes:
        self.reads += 1
        return self._content

    def close(self) -> None:
        self.closed = True


class FakeTransport:
    """Records each call and returns a canned response or raises a canned error."""

    def __init__(self, content: bytes = b"", error: Optional[Exception] = None):
        self.calls: List[Tuple[str, Dict[str, str]]] = []
        self.response = FakeResponse(content)
        self.error = error

    def __call__(self, url: str, data: Dict[str, str]) -> FakeResponse:
        self.calls.append((url, dict(data)))
        if self.error is not None:
            raise self.error
        return self.response

    @property
    def passed_url(self) -> str:
        return self.calls[-1][0]

    @property
    def passed_params(self) -> Dict[str, str]:
        return self.calls[-1][1]


@pytest.fixture
def fake_transport():
    return FakeTransport(SUCCESS_RESPONSE)


@pytest.fixture
def validator(fake_transport):
    return RecaptchaValidator(MOCK_SECRET, post_form=fake_transport)
