"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DimensionMismatchError(Exception):
    """Raised when two vectors that must be compared have different lengths.

    Reaching this means a data invariant was already violated upstream
    (mixed embedding models, truncated vectors). The comparison is aborted
    rather than silently truncated.
    """

    def __init__(self, expected: int, actual: int, context: str = ""):
        self.expected = expected
        self.actual = actual
        self.context = context
        message = f"Vector dimension mismatch: expected {expected}, got {actual}"
        if context:
            message = f"{message} ({context})"
        super().__init__(message)


class EmbeddingUnavailableError(Exception):
    """Raised when the embedding provider cannot produce a vector.

    Provider-agnostic — covers missing configuration, HTTP errors and
    transport failures alike.
    """

    def __init__(self, provider: str, message: str, status_code: int | None = None):
        self.provider = provider
        self.message = message
        self.status_code = status_code
        prefix = f"[{provider}] {status_code}: " if status_code is not None else f"[{provider}] "
        super().__init__(f"{prefix}{message}")


class DuplicateIdError(Exception):
    """Raised when a document lists the same chunk or vector id more than once."""

    def __init__(self, kind: str, ids: list[str]):
        self.kind = kind
        self.ids = ids
        super().__init__(f"Duplicate {kind} id(s): {', '.join(ids)}")
