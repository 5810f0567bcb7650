"""Wiki-link aware rewriting of markdown-it token streams."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Union

from markdown_it.token import Token

from ..adapters.markdown_parser import WIKILINK_MARKUP, WIKILINK_META


@dataclass
class Idle:
    pass


@dataclass
class InsideWikiLink:
    target: str
    title: str = ""


State = Union[Idle, InsideWikiLink]


def wikilink_literal(target: str, title: str = "") -> str:
    """Source form of a wiki-link: [[target]] or [[target|title]]."""
    if title:
        return f"[[{target}|{title}]]"
    return f"[[{target}]]"


class WikiLinkTransformer(Iterator[Token]):
    """
    Collapse each wiki-link into a single literal text token.

    Pulls one event at a time from `events`:

    - Idle: a wiki-link `link_open` is swallowed and starts buffering;
      everything else, other links included, passes through untouched.
    - InsideWikiLink: text runs accumulate into the title; `link_close`
      emits "[[target|title]]" as one text token, flagged in `meta` so the
      renderer writes it unescaped, and returns to Idle; any
      other event is dropped, so titles flatten to plain text.

    Running out of events inside a wiki-link simply ends the stream.
    """

    def __init__(self, events: Iterable[Token]):
        self._events = iter(events)
        self._state: State = Idle()

    def __iter__(self) -> "WikiLinkTransformer":
        return self

    def __next__(self) -> Token:
        while True:
            event = next(self._events)
            state = self._state

            if isinstance(state, Idle):
                if event.type == "link_open" and event.markup == WIKILINK_MARKUP:
                    self._state = InsideWikiLink(
                        target=str(event.attrGet("href") or ""),
                        title=str(event.attrGet("title") or ""),
                    )
                    continue
                return event

            if event.type == "link_close":
                self._state = Idle()
                return Token(
                    "text",
                    "",
                    0,
                    content=wikilink_literal(state.target, state.title),
                    meta={WIKILINK_META: True},
                )
            if event.type in ("text", "code_inline"):
                state.title += event.content
            elif event.type in ("softbreak", "hardbreak"):
                state.title += " "


def transform_inline(tokens: list[Token]) -> list[Token]:
    """Run the transformer over the children of every inline token, in place."""
    for token in tokens:
        if token.type == "inline" and token.children:
            token.children = list(WikiLinkTransformer(token.children))
    return tokens
