"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class FrontMatterError(Exception):
    """Base class for every article contract violation.

    ``code`` is a stable machine-readable identifier used by the API and the
    lint output; ``source`` names the offending document when known.
    """

    code = "front_matter_error"

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        line: int | None = None,
        source: str | None = None,
    ):
        self.message = message
        self.field = field
        self.line = line
        self.source = source
        super().__init__(message)

    def __str__(self) -> str:
        location = ""
        if self.source:
            location = self.source
            if self.line is not None:
                location += f":{self.line}"
            location += ": "
        elif self.line is not None:
            location = f"line {self.line}: "
        return f"{location}{self.message}"


class MalformedFrontMatter(FrontMatterError):
    """Raised when the delimiters or a ``key: value`` line are invalid."""

    code = "malformed_front_matter"


class MissingRequiredField(FrontMatterError):
    """Raised when a required front-matter field is absent."""

    code = "missing_required_field"

    def __init__(self, field: str, *, source: str | None = None):
        super().__init__(f"missing required field '{field}'", field=field, source=source)


class TypeMismatch(FrontMatterError):
    """Raised when a field value cannot be read as its declared type."""

    code = "type_mismatch"

    def __init__(
        self,
        field: str,
        value: str,
        expected: str,
        *,
        line: int | None = None,
        source: str | None = None,
    ):
        self.value = value
        self.expected = expected
        super().__init__(
            f"field '{field}' expected {expected}, got {value!r}",
            field=field,
            line=line,
            source=source,
        )


class DuplicateKey(FrontMatterError):
    """Raised when two articles share a corpus-unique value."""

    code = "duplicate_key"

    def __init__(self, field: str, value: str, sources: list[str]):
        self.value = value
        self.sources = list(sources)
        super().__init__(
            f"duplicate {field} '{value}' in {', '.join(self.sources)}",
            field=field,
        )
