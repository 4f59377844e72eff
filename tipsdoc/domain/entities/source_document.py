from dataclasses import dataclass, field

from tipsdoc.domain.exceptions import FrontMatterError


@dataclass(frozen=True)
class SourceDocument:
    """Raw text of one article file, keyed by its path inside the content root.

    A file that could not be decoded keeps its name, an empty ``text`` and
    the ``error`` describing why, so one bad file never hides the rest.
    """

    name: str
    text: str
    error: FrontMatterError | None = field(default=None, compare=False)
