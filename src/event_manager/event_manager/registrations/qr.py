"""QR tokens handed to attendees at registration.

A token is compact JSON ``{"eventId", "userId", "timestamp"}``, so a scanner
can tell which event and attendee it belongs to without a lookup. The same
text is rendered as a PNG QR code for display.
"""

from __future__ import annotations

import base64
import io
import json
from dataclasses import dataclass
from typing import Any

import qrcode

from ..core.exceptions import InvalidTokenError


@dataclass(frozen=True)
class QRPayload:
    event_id: int
    user_id: int
    issued_at: str


def encode_token(*, event_id: int, user_id: int, issued_at: str) -> str:
    return json.dumps({"eventId": event_id, "userId": user_id, "timestamp": issued_at}, separators=(",", ":"))


def _as_id(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError("boolean id")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value)
    raise ValueError(f"not an id: {value!r}")


def decode_token(token: Any) -> QRPayload:
    if not isinstance(token, str) or not token.strip():
        raise InvalidTokenError("Invalid QR code")
    try:
        data = json.loads(token)
        if not isinstance(data, dict):
            raise ValueError("token is not an object")
        return QRPayload(
            event_id=_as_id(data.get("eventId")),
            user_id=_as_id(data.get("userId")),
            issued_at=str(data.get("timestamp") or ""),
        )
    except ValueError:
        raise InvalidTokenError("Invalid QR code")


def render_png(data: str) -> bytes:
    qr = qrcode.QRCode(error_correction=qrcode.constants.ERROR_CORRECT_M, box_size=10, border=4)
    qr.add_data(data)
    qr.make(fit=True)
    img = qr.make_image(fill_color="black", back_color="white")
    buf = io.BytesIO()
    img.save(buf)
    return buf.getvalue()


def to_data_url(png: bytes) -> str:
    return "data:image/png;base64," + base64.b64encode(png).decode("ascii")
