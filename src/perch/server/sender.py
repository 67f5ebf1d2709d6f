"""Write a perch Response to an ASGI ``send`` callable."""

from perch._internal.asgi import Send
from perch.http.response import Response

# Statuses that never carry a message body (1xx are checked by range)
_BODYLESS = frozenset({204, 304})


def body_for(response: Response) -> bytes:
    """The bytes to put on the wire; empty when the status forbids a body."""
    if response.status < 200 or response.status in _BODYLESS:
        return b""
    return response.body_bytes


def encode_headers(response: Response, body_length: int) -> list[tuple[bytes, bytes]]:
    """ASGI header pairs: content-type, then the response's own headers, then content-length."""
    pairs = [("content-type", response.content_type), *response.headers]
    encoded = [(k.lower().encode("latin-1"), v.encode("latin-1")) for k, v in pairs]
    encoded.append((b"content-length", b"%d" % body_length))
    return encoded


async def send_response(response: Response, send: Send) -> None:
    """Emit ``http.response.start`` followed by a single ``http.response.body``."""
    body = body_for(response)
    start = {
        "type": "http.response.start",
        "status": response.status,
        "headers": encode_headers(response, len(body)),
    }
    await send(start)
    await send({"type": "http.response.body", "body": body, "more_body": False})
