from pathlib import Path
from typing import Dict

ASSET_CONTENTS: Dict[str, bytes] = {
    "favicon-16x16.png": b"\x89PNG\r\n\x1a\n16",
    "favicon-32x32.png": b"\x89PNG\r\n\x1a\n32",
    "oauth2-redirect.html": b"<html>redirect</html>",
    "swagger-ui.css": b".swagger-ui {}",
    "swagger-ui.css.map": b"{}",
    "swagger-ui.js": b"var ui;",
    "swagger-ui-bundle.js": b"var SwaggerUIBundle;",
    "swagger-ui-standalone-preset.js": b"var SwaggerUIStandalonePreset;",
}


def write_assets(directory: Path) -> Path:
    for name, content in ASSET_CONTENTS.items():
        (directory / name).write_bytes(content)

    return directory
