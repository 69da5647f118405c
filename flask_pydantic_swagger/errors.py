class SwaggerUIError(Exception):
    pass


class DocumentLookupError(SwaggerUIError):
    """The description document could not be read from the registry"""


class DocumentNotRegistered(DocumentLookupError):
    def __init__(self, name: str) -> None:
        super().__init__(f"no description document registered under {name!r}")
        self.name = name


class DocumentFormatError(SwaggerUIError):
    """The description document is not a JSON encoded object"""
