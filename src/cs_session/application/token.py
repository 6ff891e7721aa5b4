"""Signed session cookie values.

The cookie carries only the session id, signed as an HS256 JWT with
SESSION_SECRET. There is no exp claim: the store TTL decides how long a
session lives, and an id whose data has expired simply starts over.
"""

from datetime import UTC, datetime

from jose import JWTError, jwt

from config.settings import settings

_TOKEN_TYPE = "session"


def encode_session_id(session_id: str) -> str:
    payload = {
        "sid": session_id,
        "type": _TOKEN_TYPE,
        "iat": datetime.now(UTC),
    }
    return str(
        jwt.encode(payload, settings.SESSION_SECRET, algorithm=settings.SESSION_ALGORITHM)
    )


def decode_session_id(token: str) -> str | None:
    """Return the session id, or None for a forged, foreign or garbled cookie."""
    try:
        payload = jwt.decode(
            token,
            settings.SESSION_SECRET,
            algorithms=[settings.SESSION_ALGORITHM],
        )
    except JWTError:
        return None
    if payload.get("type") != _TOKEN_TYPE:
        return None
    sid = payload.get("sid")
    return sid if isinstance(sid, str) and sid else None
