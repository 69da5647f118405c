# Mounting helpers.  The handler answers every method itself so that non-GET
# requests get a 405 from it rather than from Flask's routing.

from typing import Any, Callable, Optional, Union

from flask import Blueprint, Flask, Response

from .config import Option, SwaggerConfig
from .handler import custom_wrap_handler, disabling_custom_wrap_handler
from .registry import DocLookup

METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE"]


def _build_view(
    config: Optional[SwaggerConfig],
    options: tuple,
    fallback: Optional[Any],
    read_doc: Optional[DocLookup],
    disable_env: Optional[str],
) -> Callable[..., Response]:
    config = (config or SwaggerConfig()).with_options(*options)
    if disable_env:
        return disabling_custom_wrap_handler(
            config, disable_env, fallback=fallback, read_doc=read_doc
        )

    return custom_wrap_handler(config, fallback=fallback, read_doc=read_doc)


def _add_rules(
    target: Union[Flask, Blueprint],
    prefix: str,
    endpoint: str,
    view: Callable[..., Response],
) -> None:
    prefix = prefix.rstrip("/")
    target.add_url_rule(
        f"{prefix}/<path:asset>",
        endpoint=endpoint,
        view_func=view,
        methods=METHODS,
        provide_automatic_options=False,
    )


def served_on_prefix(
    app: Flask,
    prefix: str = "/swagger",
    *options: Option,
    config: Optional[SwaggerConfig] = None,
    fallback: Optional[Any] = None,
    read_doc: Optional[DocLookup] = None,
    disable_env: Optional[str] = None,
    endpoint: str = "swagger_ui",
) -> Callable[..., Response]:
    view = _build_view(config, options, fallback, read_doc, disable_env)
    _add_rules(app, prefix, endpoint, view)

    return view


def create_blueprint(
    *options: Option,
    name: str = "swagger_ui",
    url_prefix: str = "/swagger",
    config: Optional[SwaggerConfig] = None,
    fallback: Optional[Any] = None,
    read_doc: Optional[DocLookup] = None,
    disable_env: Optional[str] = None,
) -> Blueprint:
    blueprint = Blueprint(name, __name__, url_prefix=url_prefix)
    view = _build_view(config, options, fallback, read_doc, disable_env)
    _add_rules(blueprint, "", "ui", view)

    return blueprint
