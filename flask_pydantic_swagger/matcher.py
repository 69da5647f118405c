import posixpath
import re
import threading
from typing import Any, Callable, Generic, NamedTuple, Optional, TypeVar

INDEX = "index.html"
DOC = "doc.json"

ASSETS = (
    INDEX,
    DOC,
    "favicon-16x16.png",
    "favicon-32x32.png",
    "oauth2-redirect.html",
    "swagger-ui.css",
    "swagger-ui.css.map",
    "swagger-ui.js",
    "swagger-ui.js.map",
    "swagger-ui-bundle.js",
    "swagger-ui-bundle.js.map",
    "swagger-ui-standalone-preset.js",
    "swagger-ui-standalone-preset.js.map",
)

CONTENT_TYPES = {
    ".html": "text/html; charset=utf-8",
    ".css": "text/css; charset=utf-8",
    ".js": "application/javascript",
    ".png": "image/png",
    ".json": "application/json; charset=utf-8",
}

ASSET_PATTERN = re.compile(
    r"^(?P<prefix>.*)(?P<asset>{})$".format(
        "|".join(re.escape(asset) for asset in ASSETS)
    )
)


class AssetMatch(NamedTuple):
    prefix: str
    asset: str
    content_type: str


def content_type_for(asset: str) -> str:
    """Content type for an asset name, judged by extension only.

    An empty string means the fallback handler's own header is used.
    """
    return CONTENT_TYPES.get(posixpath.splitext(asset)[1], "")


def match_asset(path: str) -> Optional[AssetMatch]:
    match = ASSET_PATTERN.match(path.split("?", 1)[0])
    if not match:
        return None

    prefix, asset = match.group("prefix", "asset")

    # "xindex.html" is not index.html
    if prefix and not prefix.endswith("/"):
        return None

    return AssetMatch(prefix, asset, content_type_for(asset))


T = TypeVar("T")


class OnceValue(Generic[T]):
    """A value assigned by the first caller only.

    Concurrent first callers race on a lock; exactly one of them runs
    ``on_set`` and every later ``set`` is a no-op returning the stored value.
    """

    def __init__(self, on_set: Optional[Callable[[T], Any]] = None) -> None:
        self._lock = threading.Lock()
        self._is_set = False
        self._value: Optional[T] = None
        self._on_set = on_set

    @property
    def is_set(self) -> bool:
        return self._is_set

    @property
    def value(self) -> Optional[T]:
        return self._value

    def set(self, value: T) -> T:
        if not self._is_set:
            with self._lock:
                if not self._is_set:
                    self._value = value
                    if self._on_set is not None:
                        self._on_set(value)
                    self._is_set = True

        return self._value  # type: ignore[return-value]
