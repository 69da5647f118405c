from http import HTTPStatus
from typing import Any, Callable, Iterable, List, Optional, Tuple

from flask import Response
from pydantic import BaseModel, ConfigDict
from werkzeug.datastructures import Headers


class ResolvedResponse(BaseModel):
    status: int = 200
    content_type: str = ""
    body: bytes = b""

    model_config = ConfigDict(frozen=True)

    def to_response(self) -> Response:
        response = Response(self.body, status=self.status)
        if self.content_type:
            response.headers["Content-Type"] = self.content_type
        else:
            del response.headers["Content-Type"]

        return response


class ResponseSink:
    """Collects what a WSGI application writes so it can be replayed as one
    materialized Flask response.

    Works as the ``start_response`` callable handed to the application; the
    ``write`` callable it returns and the iterable the application returns
    both end up in the same body buffer.  A status that is never set means 200.
    """

    def __init__(self, content_type: str = "") -> None:
        self.status = 200
        self.headers = Headers()
        self.chunks: List[bytes] = []
        self.content_type = content_type

    def set_status(self, status: int) -> None:
        self.status = status

    def set_header(self, name: str, value: str) -> None:
        self.headers[name] = value

    def write(self, data: bytes) -> None:
        self.chunks.append(data)

    def start_response(
        self,
        status: str,
        headers: List[Tuple[str, str]],
        exc_info: Optional[Any] = None,
    ) -> Callable[[bytes], None]:
        if exc_info is not None and self.chunks:
            raise exc_info[1].with_traceback(exc_info[2])

        self.set_status(int(status.split(None, 1)[0]))
        self.headers = Headers(headers)

        return self.write

    def consume(self, app_iter: Iterable[bytes]) -> "ResponseSink":
        try:
            for chunk in app_iter:
                if chunk:
                    self.write(chunk)
        finally:
            close = getattr(app_iter, "close", None)
            if close is not None:
                close()

        return self

    @property
    def body(self) -> bytes:
        return b"".join(self.chunks)

    def to_response(self) -> Response:
        headers = Headers(self.headers)
        # Body is materialized, so the length is ours to state
        headers.remove("Content-Length")
        # Error pages keep whatever type the fallback gave them
        if self.content_type and self.status < 400:
            headers["Content-Type"] = self.content_type

        response = Response(self.body, status=self.status, headers=headers)
        if "Content-Type" not in headers:
            del response.headers["Content-Type"]

        return response


def text_response(status: HTTPStatus, body: str = "") -> Response:
    return ResolvedResponse(
        status=int(status),
        content_type="text/plain; charset=utf-8" if body else "",
        body=body.encode(),
    ).to_response()
