"""
Case-neutral names for model concepts.

A name is an ordered sequence of lowercase words that can later be rendered
in any naming style (class, member, constant, file, schema tag).
"""

import re
from dataclasses import dataclass
from functools import total_ordering
from typing import Iterator, Optional, Tuple


# Split points: explicit separators, lower->upper and acronym->word boundaries
_SEPARATORS = re.compile(r"[\s_\-.]+")
_CASE_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])|([A-Z])([A-Z][a-z])")


@total_ordering
@dataclass(frozen=True)
class Name:
    """Immutable sequence of lowercase words."""

    words: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "words", tuple(w.lower() for w in self.words if w))

    @classmethod
    def parse(cls, text: str) -> "Name":
        """
        Parse a name written in any common case style.

        ``VirtualMachine``, ``virtual_machine``, ``virtual-machine`` and
        ``virtual machine`` all produce the same name.
        """
        spaced = _CASE_BOUNDARY.sub(
            lambda m: f"{m.group(1) or m.group(3)} {m.group(2) or m.group(4)}",
            text,
        )
        return cls(tuple(_SEPARATORS.split(spaced.strip())))

    @classmethod
    def of(cls, *words: str) -> "Name":
        return cls(tuple(words))

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    def __len__(self) -> int:
        return len(self.words)

    def __bool__(self) -> bool:
        return bool(self.words)

    def __add__(self, other: Optional["Name"]) -> "Name":
        if other is None:
            return self
        return Name(self.words + other.words)

    def __lt__(self, other: "Name") -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self.words < other.words

    def with_last(self, word: str) -> "Name":
        """Return a copy with the last word replaced."""
        if not self.words:
            return self
        return Name(self.words[:-1] + (word,))

    def __str__(self) -> str:
        return "_".join(self.words)
