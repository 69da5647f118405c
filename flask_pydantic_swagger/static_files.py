import os
from typing import Any, Iterable, Optional

from werkzeug.exceptions import HTTPException
from werkzeug.utils import send_from_directory
from werkzeug.wrappers import Request


def bundled_assets_path() -> str:
    """Directory of the Swagger UI distribution shipped by ``swagger-ui-bundle``"""
    from swagger_ui_bundle import swagger_ui_path

    return str(swagger_ui_path)


class StaticFilesHandler:
    """WSGI application serving files of one directory below ``prefix``.

    ``prefix`` is the leading part of the request path that is stripped
    before the remainder is looked up in ``directory``.  It is left empty at
    construction; the Swagger UI handler assigns it from the first request it
    recognizes.
    """

    def __init__(self, directory: Optional[str] = None, prefix: str = "") -> None:
        self.directory = ensure_directory(directory or bundled_assets_path())
        self.prefix = prefix

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.directory!r} prefix={self.prefix!r}>"

    def relative_path(self, path: str) -> str:
        if self.prefix and path.startswith(self.prefix):
            path = path[len(self.prefix) :]

        return path.lstrip("/")

    def __call__(self, environ: dict, start_response: Any) -> Iterable[bytes]:
        request = Request(environ)
        try:
            response = send_from_directory(
                self.directory, self.relative_path(request.path), environ
            )
        except HTTPException as e:
            return e(environ, start_response)

        return response(environ, start_response)


def ensure_directory(path: str) -> str:
    if not os.path.isdir(path):
        raise NotADirectoryError(path)

    return path
