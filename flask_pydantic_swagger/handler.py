import json
import logging
import os
from http import HTTPStatus
from typing import Any, Callable, Optional

from flask import Response, render_template_string, request
from jinja2 import TemplateError

from .capture import ResolvedResponse, ResponseSink, text_response
from .config import Option, SwaggerConfig
from .errors import DocumentFormatError, SwaggerUIError
from .matcher import DOC, INDEX, AssetMatch, OnceValue, match_asset
from .registry import DocLookup, DocText, read_doc as read_registered_doc
from .static_files import StaticFilesHandler

logger = logging.getLogger("flask_pydantic_swagger")

INDEX_TEMPLATE = os.path.join(os.path.dirname(__file__), "templates/swagger_index.html")

INTERNAL_ERROR_MESSAGE = "internal server error"


class SwaggerUIHandler:
    """Serves the Swagger UI entry page, the description document and the
    static UI assets for one mount point.

    The mount prefix is taken from the first recognized request and handed to
    the fallback handler once.  A handler mounted below several prefixes keeps
    serving static assets below the first one it saw.
    """

    def __init__(
        self,
        config: SwaggerConfig,
        fallback: Optional[Any] = None,
        read_doc: Optional[DocLookup] = None,
    ) -> None:
        self.config = config
        self.fallback = fallback if fallback is not None else StaticFilesHandler()
        self.read_doc = read_doc or read_registered_doc

        with open(INDEX_TEMPLATE, encoding="utf-8") as f:
            self.index_template = f.read()

        self.prefix: OnceValue[str] = OnceValue(on_set=self._set_fallback_prefix)

    def _set_fallback_prefix(self, prefix: str) -> None:
        self.fallback.prefix = prefix

    def __call__(self) -> Response:
        if request.method != "GET":
            response = text_response(HTTPStatus.METHOD_NOT_ALLOWED)
            response.headers["Allow"] = "GET"
            return response

        match = match_asset(request.path)
        if match is None:
            return text_response(HTTPStatus.NOT_FOUND, HTTPStatus.NOT_FOUND.phrase)

        self.prefix.set(match.prefix)

        return self.resolve(match)

    def resolve(self, match: AssetMatch) -> Response:
        if match.asset == INDEX:
            resolved = self.render_index(match.content_type)
        elif match.asset == DOC:
            resolved = self.render_doc(match.content_type)
        else:
            return self.delegate(match.content_type)

        return resolved.to_response()

    def render_index(self, content_type: str) -> ResolvedResponse:
        try:
            html = render_template_string(
                self.index_template, **self.config.template_context()
            )
        except TemplateError:
            logger.exception("rendering swagger index page failed")
            return internal_error()

        return ResolvedResponse(content_type=content_type, body=html.encode("utf-8"))

    def render_doc(self, content_type: str) -> ResolvedResponse:
        name = self.config.instance_name
        try:
            text = self.read_doc(name)
        except Exception:
            # Injected lookups may fail any way they like
            logger.exception("reading description document %r failed", name)
            return internal_error()

        try:
            body = round_trip_document(text)
        except SwaggerUIError:
            logger.exception("serving description document %r failed", name)
            return internal_error()

        return ResolvedResponse(content_type=content_type, body=body)

    def delegate(self, content_type: str) -> Response:
        sink = ResponseSink(content_type)
        sink.consume(self.fallback(request.environ, sink.start_response))

        return sink.to_response()


def round_trip_document(text: DocText) -> bytes:
    """Decode the description document and encode it again.

    Keys and values come out as they went in; only whitespace may change.
    """
    try:
        document = json.loads(text, parse_constant=_reject_constant)
    except (TypeError, ValueError) as e:
        raise DocumentFormatError(f"description document is not valid JSON: {e}") from e

    if not isinstance(document, dict):
        raise DocumentFormatError(
            f"description document must be a JSON object, not {type(document).__name__}"
        )

    try:
        encoded = json.dumps(document, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise DocumentFormatError(f"encoding description document failed: {e}") from e

    return encoded.encode("utf-8")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def internal_error() -> ResolvedResponse:
    return ResolvedResponse(
        status=int(HTTPStatus.INTERNAL_SERVER_ERROR),
        content_type="text/plain; charset=utf-8",
        body=INTERNAL_ERROR_MESSAGE.encode(),
    )


def _as_view(handler: Any) -> Callable[..., Response]:
    # Path converters from the url rule are ignored; the handler reads the
    # request path itself.
    def swagger_ui(**kwargs: Any) -> Response:
        return handler()

    # Marker for introspection of mounted endpoints
    swagger_ui.__swagger_ui__ = handler  # type: ignore

    return swagger_ui


def custom_wrap_handler(
    config: SwaggerConfig,
    fallback: Optional[Any] = None,
    read_doc: Optional[DocLookup] = None,
) -> Callable[..., Response]:
    return _as_view(SwaggerUIHandler(config, fallback=fallback, read_doc=read_doc))


def wrap_handler(
    *options: Option,
    fallback: Optional[Any] = None,
    read_doc: Optional[DocLookup] = None,
    **overrides: Any,
) -> Callable[..., Response]:
    config = SwaggerConfig().with_options(*options, **overrides)

    return custom_wrap_handler(config, fallback=fallback, read_doc=read_doc)


def _disabled_view() -> Callable[..., Response]:
    return _as_view(lambda: text_response(HTTPStatus.NOT_FOUND))


def is_disabled(env_name: str) -> bool:
    return bool(os.environ.get(env_name))


# Turns the handler off when the given environment variable is set
def disabling_wrap_handler(
    env_name: str,
    *options: Option,
    fallback: Optional[Any] = None,
    read_doc: Optional[DocLookup] = None,
    **overrides: Any,
) -> Callable[..., Response]:
    if is_disabled(env_name):
        return _disabled_view()

    return wrap_handler(*options, fallback=fallback, read_doc=read_doc, **overrides)


def disabling_custom_wrap_handler(
    config: SwaggerConfig,
    env_name: str,
    fallback: Optional[Any] = None,
    read_doc: Optional[DocLookup] = None,
) -> Callable[..., Response]:
    if is_disabled(env_name):
        return _disabled_view()

    return custom_wrap_handler(config, fallback=fallback, read_doc=read_doc)
