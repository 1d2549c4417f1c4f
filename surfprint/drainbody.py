"""Reading a request or response body into memory so it can be read twice."""

from __future__ import annotations

import io
from typing import BinaryIO, Optional


def drain_body(body: Optional[BinaryIO]) -> tuple[Optional[io.BytesIO], Optional[io.BytesIO]]:
    """Read all of ``body``, close it, and return two readers over the same bytes.

    A missing body gives ``(None, None)``. Errors from reading or closing propagate.
    """
    if body is None:
        return None, None
    data = body.read()
    body.close()
    return io.BytesIO(data), io.BytesIO(data)