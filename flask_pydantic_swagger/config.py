from typing import Any, Callable, Dict, Literal

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_INSTANCE_NAME = "swagger"
DEFAULT_TITLE = "Swagger UI"

DocExpansion = Literal["list", "full", "none"]

# Evaluated by the browser, so the redirect page is always a sibling of index.html
OAUTH2_REDIRECT_URL = (
    "`${window.location.protocol}//${window.location.host}$"
    "{window.location.pathname.split('/').slice(0, "
    "window.location.pathname.split('/').length - 1).join('/')}"
    "/oauth2-redirect.html`"
)


class SwaggerConfig(BaseModel):
    """Settings for the Swagger UI entry page and description lookup.

    ``url`` is what the browser fetches the description from (normally
    ``doc.json`` relative to the entry page), while ``instance_name`` is the
    key the description document is read from the registry with.
    """

    url: str = "doc.json"
    instance_name: str = DEFAULT_INSTANCE_NAME
    title: str = DEFAULT_TITLE
    doc_expansion: DocExpansion = "list"
    default_models_expand_depth: int = 1
    deep_linking: bool = True
    persist_authorization: bool = False
    oauth2_default_client_id: str = ""

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("instance_name", mode="before")
    @classmethod
    def default_instance_name(cls, value: Any) -> Any:
        return value or DEFAULT_INSTANCE_NAME

    @field_validator("title", mode="before")
    @classmethod
    def default_title(cls, value: Any) -> Any:
        return value or DEFAULT_TITLE

    def with_options(self, *options: "Option", **overrides: Any) -> "SwaggerConfig":
        values = self.model_dump()
        for option in options:
            option(values)
        values.update(overrides)

        return SwaggerConfig(**values)

    def template_context(self) -> Dict[str, Any]:
        return {
            "url": self.url,
            "title": self.title,
            "oauth2_redirect_url": OAUTH2_REDIRECT_URL,
            "persist_authorization": self.persist_authorization,
            "doc_expansion": self.doc_expansion,
            "deep_linking": self.deep_linking,
            "default_models_expand_depth": self.default_models_expand_depth,
            "oauth2_default_client_id": self.oauth2_default_client_id,
        }


Option = Callable[[Dict[str, Any]], None]


def _setter(field: str, value: Any) -> Option:
    def apply(values: Dict[str, Any]) -> None:
        values[field] = value

    return apply


# The url pointing to the API definition (normally swagger.json or swagger.yaml)
def url(value: str) -> Option:
    return _setter("url", value)


# One of list, full, none
def doc_expansion(value: str) -> Option:
    return _setter("doc_expansion", value)


def deep_linking(value: bool) -> Option:
    return _setter("deep_linking", value)


# -1 hides the models section completely
def default_models_expand_depth(value: int) -> Option:
    return _setter("default_models_expand_depth", value)


# Registry name the description document was registered under
def instance_name(value: str) -> Option:
    return _setter("instance_name", value)


# Keep authorization data across browser close/refresh
def persist_authorization(value: bool) -> Option:
    return _setter("persist_authorization", value)


def oauth2_default_client_id(value: str) -> Option:
    return _setter("oauth2_default_client_id", value)


def title(value: str) -> Option:
    return _setter("title", value)
