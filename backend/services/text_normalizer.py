"""Document wrapper exposing raw and lower-cased views of input text."""

from dataclasses import dataclass
from functools import cached_property


def normalize(text: str) -> str:
    """Lower-case text for substring matching. Total: '' maps to ''."""
    return text.lower()


@dataclass(frozen=True)
class Document:
    """Immutable view over one input document (resume or job posting)."""

    raw: str = ""

    @cached_property
    def normalized(self) -> str:
        return normalize(self.raw)

    @cached_property
    def lines(self) -> list[str]:
        # An empty document still has one (empty) line
        return self.raw.split("\n")

    @property
    def first_line(self) -> str:
        return self.lines[0]

    def contains(self, term: str) -> bool:
        """Case-insensitive substring check against the normalized text."""
        return normalize(term) in self.normalized
