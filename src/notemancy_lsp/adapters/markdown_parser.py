from collections.abc import Mapping, MutableMapping, Sequence
from typing import Any

from markdown_it import MarkdownIt
from markdown_it.rules_inline import StateInline
from markdown_it.token import Token
from mdformat.renderer import DEFAULT_RENDERERS, MDRenderer, RenderContext, RenderTreeNode

from ..core.wikilinks import WIKILINK_RE

# Token.markup of link_open/link_close pairs produced for [[...]]
WIKILINK_MARKUP = "wikilink"
# Token.meta key marking a text token that holds a literal [[...]]
WIKILINK_META = "wikilink"


def _wikilink_rule(state: StateInline, silent: bool) -> bool:
    # Handles: [[target]] | [[target|title]]
    if not state.src.startswith("[[", state.pos):
        return False
    m = WIKILINK_RE.match(state.src, state.pos)
    if m is None or m.end() > state.posMax or "\n" in m.group(0):
        return False
    target = m.group("target").strip()
    if not target:
        return False

    if not silent:
        token = state.push("link_open", "a", 1)
        token.attrSet("href", target)
        token.markup = WIKILINK_MARKUP
        title = (m.group("title") or "").strip()
        if title:
            token = state.push("text", "", 0)
            token.content = title
        token = state.push("link_close", "a", -1)
        token.markup = WIKILINK_MARKUP

    state.pos = m.end()
    return True


def _render_text(node: RenderTreeNode, context: RenderContext) -> str:
    # wiki-link literals are written as-is; other text gets mdformat's escaping
    if node.meta.get(WIKILINK_META):
        return node.content
    return DEFAULT_RENDERERS["text"](node, context)


class WikiLinkRendering:
    """mdformat parser extension that leaves wiki-link literals unescaped."""

    RENDERERS: Mapping[str, Any] = {"text": _render_text}
    POSTPROCESSORS: Mapping[str, Any] = {}


def wikilinks_plugin(md: MarkdownIt) -> None:
    """Teach markdown-it to emit link events for wiki-links."""
    md.inline.ruler.before("link", "wikilink", _wikilink_rule)


class MarkdownParser:
    """
    CommonMark parser whose output renders back to markdown.

    Parsing goes through markdown-it-py with the wiki-link rule; rendering
    goes through mdformat's markdown renderer.
    """

    def __init__(self) -> None:
        md = MarkdownIt("commonmark", renderer_cls=MDRenderer)
        md.use(wikilinks_plugin)
        # options read by MDRenderer, as mdformat itself sets them up
        md.options["mdformat"] = {"wrap": "keep", "number": False, "end_of_line": "lf"}
        md.options["store_labels"] = True
        md.options["parser_extension"] = [WikiLinkRendering]
        md.options["codeformatters"] = {}
        self.md = md

    def parse(self, text: str, env: MutableMapping[str, Any]) -> list[Token]:
        return self.md.parse(text, env)

    def render(self, tokens: Sequence[Token], env: MutableMapping[str, Any]) -> str:
        return self.md.renderer.render(tokens, self.md.options, env)
