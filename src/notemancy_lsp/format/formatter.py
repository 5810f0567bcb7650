"""Main formatter driver for notemancy notes."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ..adapters.markdown_parser import MarkdownParser
from ..adapters.yaml_codec import YamlFrontmatter
from ..core.model import Directive
from ..core.ports import WorkspaceStore
from .directives import run_directives, strip_directives
from .transformer import transform_inline


class MarkdownFormatter:
    """
    Canonicalize markdown while keeping [[wiki-links]] in source form.

    A leading YAML frontmatter block is carried over byte for byte; only the
    body after it is reformatted.
    """

    def __init__(
        self,
        parser: MarkdownParser | None = None,
        frontmatter: YamlFrontmatter | None = None,
    ):
        self.parser = parser or MarkdownParser()
        self.frontmatter = frontmatter or YamlFrontmatter()

    def render(self, text: str) -> str:
        block, body = self.frontmatter.split(text)
        env: dict[str, Any] = {}
        tokens = self.parser.parse(body, env)
        transform_inline(tokens)
        return block + self.parser.render(tokens, env)


@dataclass
class FormatResult:
    """Result of formatting a note."""

    original_text: str
    formatted_text: str
    directives: list[Directive] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return self.formatted_text != self.original_text


def format_note(
    raw_text: str,
    note: Path | None,
    workspaces: WorkspaceStore,
    formatter: MarkdownFormatter | None = None,
) -> FormatResult:
    """Format a note.

    Args:
        raw_text: The full note content
        note: Filesystem path of the note, None for unsaved/remote documents
        workspaces: Store receiving the note's workspace directives
        formatter: Markdown formatter (a default one is built if omitted)

    Returns:
        FormatResult with formatted text and the directives that were run
    """
    if formatter is None:
        formatter = MarkdownFormatter()

    # Step 1: execute and drop directive lines
    body, directives = strip_directives(raw_text)
    run_directives(directives, note, workspaces)

    # Step 2: canonical markdown
    formatted = formatter.render(body)

    return FormatResult(
        original_text=raw_text,
        formatted_text=formatted,
        directives=directives,
    )
