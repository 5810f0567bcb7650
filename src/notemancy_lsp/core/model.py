from __future__ import annotations
from dataclasses import dataclass

NotePath = str  # vault-relative, POSIX separators


@dataclass(frozen=True)
class LinkOccurrence:
    start: int  # offset of the opening "[[" within its line
    end: int  # offset just past the closing "]]"
    target: str
    title: str | None = None

    def contains(self, cursor: int) -> bool:
        # both delimiters count as inside
        return self.start <= cursor <= self.end


@dataclass(frozen=True)
class Heading:
    line: int  # zero-based line number
    level: int  # 1-6
    name: str
    length: int  # length of the whole source line


@dataclass(frozen=True)
class Directive:
    command: str  # "nw" | "atw" | "dfw"
    argument: str  # workspace name
    line: int
