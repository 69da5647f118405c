from pathlib import Path

import pytest
from flask import Flask

from flask_pydantic_swagger import (
    DocRegistry,
    StaticFilesHandler,
    SwaggerConfig,
    create_blueprint,
    served_on_prefix,
    title,
)
from tests.utils import write_assets


def test_served_on_prefix(tmp_path: Path) -> None:
    app = Flask("test_app")
    view = served_on_prefix(
        app, "/swagger/", fallback=StaticFilesHandler(str(write_assets(tmp_path)))
    )

    assert "swagger_ui" in app.view_functions
    assert app.view_functions["swagger_ui"] is view

    response = app.test_client().get("/swagger/index.html")
    assert response.status_code == 200
    assert response.headers["Content-Type"] == "text/html; charset=utf-8"


def test_create_blueprint(tmp_path: Path) -> None:
    docs = DocRegistry()
    docs.register("swagger", lambda: '{"openapi": "3.1.0"}')

    blueprint = create_blueprint(
        title("Blueprint Docs"),
        url_prefix="/api/docs",
        fallback=StaticFilesHandler(str(write_assets(tmp_path))),
        read_doc=docs.read_doc,
    )

    app = Flask("test_app")
    app.register_blueprint(blueprint)
    client = app.test_client()

    response = client.get("/api/docs/index.html")
    assert response.status_code == 200
    assert "<title>Blueprint Docs</title>" in response.get_data(as_text=True)

    assert client.get("/api/docs/doc.json").json == {"openapi": "3.1.0"}

    response = client.get("/api/docs/swagger-ui.css")
    assert response.status_code == 200
    assert response.headers["Content-Type"] == "text/css; charset=utf-8"

    assert client.post("/api/docs/index.html").status_code == 405


def test_create_blueprint_with_config(tmp_path: Path) -> None:
    blueprint = create_blueprint(
        config=SwaggerConfig(title="From Config", doc_expansion="none"),
        fallback=StaticFilesHandler(str(write_assets(tmp_path))),
    )

    app = Flask("test_app")
    app.register_blueprint(blueprint)

    body = app.test_client().get("/swagger/index.html").get_data(as_text=True)
    assert "<title>From Config</title>" in body
    assert 'docExpansion: "none"' in body


def test_create_blueprint_disabled(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("NO_DOCS", "yes")

    blueprint = create_blueprint(
        disable_env="NO_DOCS",
        fallback=StaticFilesHandler(str(write_assets(tmp_path))),
    )

    app = Flask("test_app")
    app.register_blueprint(blueprint)

    assert app.test_client().get("/swagger/index.html").status_code == 404
