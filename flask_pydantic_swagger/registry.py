import threading
from typing import Awaitable, Callable, Dict, Optional, Union

from .errors import DocumentLookupError, DocumentNotRegistered
from .utils import sync_async_wrapper

DocText = Union[str, bytes]

# A reader returns the JSON text of one description document.  Coroutine
# functions are accepted and run to completion on the calling thread.
DocReader = Callable[[], Union[DocText, Awaitable[DocText]]]

# What the handler needs from a registry: name in, JSON text out.
DocLookup = Callable[[str], DocText]


class DocRegistry:
    """Named description documents, looked up when ``doc.json`` is requested.

    Registrations may happen at any time, including after the handler was
    built; the lookup is done per request.
    """

    def __init__(self) -> None:
        self._readers: Dict[str, DocReader] = {}
        self._lock = threading.Lock()

    def register(self, name: str, reader: DocReader) -> None:
        with self._lock:
            self._readers[name] = reader

    def unregister(self, name: str) -> Optional[DocReader]:
        with self._lock:
            return self._readers.pop(name, None)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._readers

    def read_doc(self, name: str) -> DocText:
        with self._lock:
            reader = self._readers.get(name)
        if reader is None:
            raise DocumentNotRegistered(name)

        try:
            return sync_async_wrapper(reader)
        except Exception as e:
            raise DocumentLookupError(
                f"reading description document {name!r} failed: {e}"
            ) from e


# Convenience process-wide registry; handlers accept their own lookup instead.
default_registry = DocRegistry()


def register(name: str, reader: DocReader) -> None:
    default_registry.register(name, reader)


def read_doc(name: str) -> DocText:
    return default_registry.read_doc(name)
