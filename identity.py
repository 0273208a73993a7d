"""
Gatekeeper Demo - Identity headers

nginx copies the user and email reported by OAuth2 Proxy into these two
headers. They are trusted as-is; nothing here verifies them.
"""
from datetime import datetime, timezone
from typing import Mapping, Optional

USER_HEADER = 'x-user'
EMAIL_HEADER = 'x-email'
PLACEHOLDER = 'Unknown'


def decode_header(value: Optional[str]) -> Optional[str]:
    """Re-decode raw header bytes that are not valid UTF-8 as latin-1"""
    if not value:
        return value

    raw = value.encode('utf-8', 'surrogateescape')
    try:
        return raw.decode('utf-8')
    except UnicodeDecodeError:
        return raw.decode('latin-1')


def resolve(value: Optional[str]) -> str:
    """Return the header value, or the placeholder when absent or empty"""
    return decode_header(value) or PLACEHOLDER


def now_iso() -> str:
    """UTC timestamp with millisecond precision, e.g. 2024-05-01T12:00:00.123Z"""
    stamp = datetime.now(timezone.utc).isoformat(timespec='milliseconds')
    return stamp.replace('+00:00', 'Z')


class Identity:
    """Per-request user/email pair taken from the proxy headers"""

    def __init__(self, user: str, email: str):
        self.user = user
        self.email = email

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> 'Identity':
        return cls(
            user=resolve(headers.get(USER_HEADER)),
            email=resolve(headers.get(EMAIL_HEADER))
        )

    def to_dict(self) -> dict:
        return {
            'user': self.user,
            'email': self.email
        }
