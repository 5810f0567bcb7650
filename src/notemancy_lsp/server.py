"""
notemancy language server.

Owns the document session store and the vault runtime, and maps each LSP
request onto a handler. Every request takes exactly one snapshot of its
document text and works on that copy only.
"""

import logging

from lsprotocol import types as lsp
from pygls.exceptions import JsonRpcInternalError
from pygls.lsp.server import LanguageServer

from . import __version__
from .core.errors import ConfigError
from .core.sessions import DocumentSessionStore
from .handlers import (
    document_symbols,
    format_document,
    goto_wikilink,
    hover_wikilink,
    wiki_link_completions,
    workspace_symbols,
)
from .runtime import Runtime

logger = logging.getLogger(__name__)


class NotemancyLanguageServer(LanguageServer):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.sessions = DocumentSessionStore()
        self.runtime: Runtime | None = None
        self.config_error: ConfigError | None = None

    def configure(
        self, runtime: Runtime | None = None, error: ConfigError | None = None
    ) -> None:
        """Install the vault runtime, or the reason there is none."""
        self.runtime = runtime
        self.config_error = error

    def require_runtime(self) -> Runtime:
        """Runtime for vault-backed requests; a config problem fails the request."""
        if self.runtime is None:
            message = str(self.config_error or "Vault is not configured")
            raise JsonRpcInternalError(message=message)
        return self.runtime

    async def snapshot(self, uri: str) -> str:
        """Current text of `uri`; unknown documents read as empty."""
        text = await self.sessions.read(uri)
        return text if text is not None else ""


server = NotemancyLanguageServer(
    "notemancy-lsp",
    __version__,
    text_document_sync_kind=lsp.TextDocumentSyncKind.Full,
)


@server.feature(lsp.INITIALIZED)
def initialized(ls: NotemancyLanguageServer, params: lsp.InitializedParams) -> None:
    if ls.config_error is not None:
        ls.window_log_message(
            lsp.LogMessageParams(type=lsp.MessageType.Error, message=str(ls.config_error))
        )
    else:
        ls.window_log_message(
            lsp.LogMessageParams(type=lsp.MessageType.Info, message="Notemancy LSP is ready")
        )


@server.feature(lsp.TEXT_DOCUMENT_DID_OPEN)
async def did_open(
    ls: NotemancyLanguageServer, params: lsp.DidOpenTextDocumentParams
) -> None:
    await ls.sessions.open(params.text_document.uri, params.text_document.text)


@server.feature(lsp.TEXT_DOCUMENT_DID_CHANGE)
async def did_change(
    ls: NotemancyLanguageServer, params: lsp.DidChangeTextDocumentParams
) -> None:
    if not params.content_changes:
        return
    # full sync: the last change carries the whole document
    await ls.sessions.change(params.text_document.uri, params.content_changes[-1].text)


@server.feature(lsp.TEXT_DOCUMENT_DID_CLOSE)
async def did_close(
    ls: NotemancyLanguageServer, params: lsp.DidCloseTextDocumentParams
) -> None:
    await ls.sessions.close(params.text_document.uri)


@server.feature(
    lsp.TEXT_DOCUMENT_COMPLETION,
    lsp.CompletionOptions(trigger_characters=["["], resolve_provider=False),
)
async def completion(
    ls: NotemancyLanguageServer, params: lsp.CompletionParams
) -> lsp.CompletionList | None:
    runtime = ls.require_runtime()
    text = await ls.snapshot(params.text_document.uri)
    return wiki_link_completions(text, params.position, runtime.notes)


@server.feature(lsp.TEXT_DOCUMENT_HOVER)
async def hover(
    ls: NotemancyLanguageServer, params: lsp.HoverParams
) -> lsp.Hover | None:
    runtime = ls.require_runtime()
    text = await ls.snapshot(params.text_document.uri)
    return hover_wikilink(text, params.position, runtime.notes)


@server.feature(lsp.TEXT_DOCUMENT_DEFINITION)
async def definition(
    ls: NotemancyLanguageServer, params: lsp.DefinitionParams
) -> lsp.Location | None:
    runtime = ls.require_runtime()
    text = await ls.snapshot(params.text_document.uri)
    return goto_wikilink(text, params.position, runtime.notes)


@server.feature(lsp.TEXT_DOCUMENT_DOCUMENT_SYMBOL)
async def document_symbol(
    ls: NotemancyLanguageServer, params: lsp.DocumentSymbolParams
) -> list[lsp.DocumentSymbol]:
    text = await ls.snapshot(params.text_document.uri)
    return document_symbols(text)


@server.feature(lsp.WORKSPACE_SYMBOL)
def workspace_symbol(
    ls: NotemancyLanguageServer, params: lsp.WorkspaceSymbolParams
) -> list[lsp.SymbolInformation]:
    runtime = ls.require_runtime()
    return workspace_symbols(params.query, runtime.notes, runtime.matcher)


@server.feature(lsp.TEXT_DOCUMENT_FORMATTING)
async def formatting(
    ls: NotemancyLanguageServer, params: lsp.DocumentFormattingParams
) -> list[lsp.TextEdit] | None:
    runtime = ls.require_runtime()
    uri = params.text_document.uri
    text = await ls.snapshot(uri)
    return format_document(text, uri, runtime.workspaces, runtime.formatter)
