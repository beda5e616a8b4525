"""Domain errors raised by the services and translated to HTTP responses in the routes."""


class DocumentNotFoundError(Exception):
    def __init__(self, path: str):
        super().__init__(f"Document not found: {path}")
        self.path = path


class GlossaryError(Exception):
    """The glossary file is missing or malformed."""


class TermNotFoundError(KeyError):
    def __init__(self, term: str):
        super().__init__(term)
        self.term = term

    def __str__(self) -> str:
        return f"Term not found: {self.term}"
