"""Domain entities — pure Python business objects, no framework dependencies."""

import re
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal

# "Updated: 2024-03-18", "*Updated 2017-09-18*", "Updated: March 18, 2024"
_UPDATED_LINE = re.compile(
    r"^[\s*_>]*Updated:?[\s*_]*(?P<date>[A-Za-z0-9 ,/-]+?)[\s*_.]*$",
    re.IGNORECASE | re.MULTILINE,
)
_DATE_FORMATS = ("%Y-%m-%d", "%Y/%m/%d", "%B %d, %Y", "%b %d, %Y", "%d %B %Y")


@dataclass(frozen=True)
class Article:
    """One tip: the front-matter record plus its untouched markdown body."""

    title: str
    layout: str
    published: bool
    permalink: str
    type: str
    order: str
    body: str = ""
    sidenav: str | None = None
    source: str | None = field(default=None, compare=False)

    @property
    def order_key(self) -> Decimal:
        """Numeric sort key for ``order``; validated at parse time."""
        return Decimal(self.order.strip())

    @property
    def revision_date(self) -> date | None:
        """Date from the first ``Updated:`` line in the body, if it parses."""
        for match in _UPDATED_LINE.finditer(self.body):
            raw = match.group("date").strip()
            for fmt in _DATE_FORMATS:
                try:
                    return datetime.strptime(raw, fmt).date()
                except ValueError:
                    continue
        return None
