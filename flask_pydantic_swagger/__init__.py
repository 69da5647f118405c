from .capture import ResolvedResponse, ResponseSink
from .config import (
    SwaggerConfig,
    deep_linking,
    default_models_expand_depth,
    doc_expansion,
    instance_name,
    oauth2_default_client_id,
    persist_authorization,
    title,
    url,
)
from .errors import (
    DocumentFormatError,
    DocumentLookupError,
    DocumentNotRegistered,
    SwaggerUIError,
)
from .handler import (
    SwaggerUIHandler,
    custom_wrap_handler,
    disabling_custom_wrap_handler,
    disabling_wrap_handler,
    wrap_handler,
)
from .matcher import match_asset
from .registry import DocRegistry, default_registry, read_doc, register
from .static_files import StaticFilesHandler
from .views import create_blueprint, served_on_prefix

__all__ = [
    "DocRegistry",
    "DocumentFormatError",
    "DocumentLookupError",
    "DocumentNotRegistered",
    "ResolvedResponse",
    "ResponseSink",
    "StaticFilesHandler",
    "SwaggerConfig",
    "SwaggerUIError",
    "SwaggerUIHandler",
    "create_blueprint",
    "custom_wrap_handler",
    "deep_linking",
    "default_models_expand_depth",
    "default_registry",
    "disabling_custom_wrap_handler",
    "disabling_wrap_handler",
    "doc_expansion",
    "instance_name",
    "match_asset",
    "oauth2_default_client_id",
    "persist_authorization",
    "read_doc",
    "register",
    "served_on_prefix",
    "title",
    "url",
    "wrap_handler",
]
