import pytest
from pydantic import ValidationError

from flask_pydantic_swagger import (
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
from flask_pydantic_swagger.config import OAUTH2_REDIRECT_URL


def test_defaults() -> None:
    config = SwaggerConfig()

    assert config.url == "doc.json"
    assert config.instance_name == "swagger"
    assert config.title == "Swagger UI"
    assert config.doc_expansion == "list"
    assert config.default_models_expand_depth == 1
    assert config.deep_linking is True
    assert config.persist_authorization is False
    assert config.oauth2_default_client_id == ""


def test_url() -> None:
    expected = "https://github.com/swaggo/http-swagger"
    config = SwaggerConfig().with_options(url(expected))
    assert config.url == expected


@pytest.mark.parametrize("expected", ["list", "full", "none"])
def test_doc_expansion(expected: str) -> None:
    config = SwaggerConfig().with_options(doc_expansion(expected))
    assert config.doc_expansion == expected


def test_doc_expansion_invalid() -> None:
    with pytest.raises(ValidationError):
        SwaggerConfig().with_options(doc_expansion("everything"))


def test_deep_linking() -> None:
    config = SwaggerConfig().with_options(deep_linking(False))
    assert config.deep_linking is False

    config = config.with_options(deep_linking(True))
    assert config.deep_linking is True


@pytest.mark.parametrize("expected", [-1, 0, 1, 3])
def test_default_models_expand_depth(expected: int) -> None:
    config = SwaggerConfig().with_options(default_models_expand_depth(expected))
    assert config.default_models_expand_depth == expected


def test_instance_name() -> None:
    config = SwaggerConfig().with_options(instance_name("custom_name"))
    assert config.instance_name == "custom_name"

    # Empty falls back to the default registry name
    config = config.with_options(instance_name(""))
    assert config.instance_name == "swagger"


def test_persist_authorization() -> None:
    config = SwaggerConfig().with_options(persist_authorization(True))
    assert config.persist_authorization is True

    config = config.with_options(persist_authorization(False))
    assert config.persist_authorization is False


def test_oauth2_default_client_id() -> None:
    config = SwaggerConfig().with_options(oauth2_default_client_id("my-client"))
    assert config.oauth2_default_client_id == "my-client"


def test_title() -> None:
    assert SwaggerConfig().with_options(title("Pets")).title == "Pets"
    assert SwaggerConfig(title="").title == "Swagger UI"


def test_options_then_overrides() -> None:
    config = SwaggerConfig().with_options(title("Pets"), title="Cats")
    assert config.title == "Cats"


def test_with_options_leaves_original_alone() -> None:
    config = SwaggerConfig()
    config.with_options(title("Pets"), deep_linking(False))

    assert config.title == "Swagger UI"
    assert config.deep_linking is True


def test_frozen() -> None:
    config = SwaggerConfig()
    with pytest.raises(ValidationError):
        config.title = "Changed"  # type: ignore


def test_unknown_field() -> None:
    with pytest.raises(ValidationError):
        SwaggerConfig(colour="blue")  # type: ignore


def test_template_context() -> None:
    context = SwaggerConfig(url="/api/openapi.json", persist_authorization=True).template_context()

    assert context == {
        "url": "/api/openapi.json",
        "title": "Swagger UI",
        "oauth2_redirect_url": OAUTH2_REDIRECT_URL,
        "persist_authorization": True,
        "doc_expansion": "list",
        "deep_linking": True,
        "default_models_expand_depth": 1,
        "oauth2_default_client_id": "",
    }
    assert "window.location" in context["oauth2_redirect_url"]
    assert context["oauth2_redirect_url"].endswith("/oauth2-redirect.html`")
