"""ParsedName: the result of classifying one DNS name.

A ParsedName holds the normalized name, its character-reversed form,
and three spans into the name:

    www.example.com
        suffix       -> "com"
        root         -> "example.com"
        registrable  -> "example"

Spans are (start, end) offsets into `name`. They are computed against
the name with any trailing dot removed, so `end` never covers the dot.
The suffix and root accessors still read through to the end of the
stored name, which keeps the trailing dot of a fully-qualified name:

    www.bluecatnetworks.uk.com.
        suffix       -> "uk.com."
        root         -> "bluecatnetworks.uk.com."
        registrable  -> "bluecatnetworks"

A ParsedName owns a copy of its strings and does not reference the
rule trie it was classified against.
"""

from __future__ import annotations

from dataclasses import dataclass, field

Span = tuple[int, int]


@dataclass(frozen=True, slots=True)
class ParsedName:
    name: str
    suffix_span: Span | None = None
    root_span: Span | None = None
    rname: str = field(init=False, compare=False)
    registrable_span: Span | None = field(init=False)

    def __post_init__(self) -> None:
        # Frozen dataclass: derived fields go through object.__setattr__.
        object.__setattr__(self, "rname", self.name[::-1])
        registrable = None
        if self.suffix_span is not None and self.root_span is not None:
            registrable = (self.root_span[0], self.suffix_span[0] - 1)
        object.__setattr__(self, "registrable_span", registrable)

    @classmethod
    def root_name(cls) -> ParsedName:
        """The DNS root ".", which has no suffix, root or registrable."""
        return cls(".")

    @property
    def is_root(self) -> bool:
        return self.name == "."

    @property
    def suffix(self) -> str | None:
        return self._tail(self.suffix_span)

    @property
    def root(self) -> str | None:
        return self._tail(self.root_span)

    @property
    def registrable(self) -> str | None:
        span = self.registrable_span
        if span is None:
            return None
        start, end = span
        if start < len(self.name) and end < len(self.name):
            return self.name[start:end]
        return None

    def _tail(self, span: Span | None) -> str | None:
        if span is None or span[0] >= len(self.name):
            return None
        return self.name[span[0]:]

    def __str__(self) -> str:
        return self.name.rstrip(".").lower()

    def __repr__(self) -> str:
        return (
            f"ParsedName(name={self.name!r}, suffix={self.suffix!r}, "
            f"root={self.root!r}, registrable={self.registrable!r})"
        )
