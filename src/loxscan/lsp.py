"""Minimal LSP server for Lox — lexical diagnostics only."""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from loxscan import __version__
from loxscan.errors import LexError
from loxscan.scanner import scan

server = LanguageServer(
    "loxscan-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)


def _utf16_length(text: str) -> int:
    """Length of *text* in UTF-16 code units, the default LSP position encoding."""
    return len(text.encode("utf-16-le")) // 2


def _line_range(source: str, line: int) -> Range:
    """Range covering the whole of the 1-based *line* (empty past the last line)."""
    lines = source.split("\n")
    idx = line - 1
    length = _utf16_length(lines[idx].rstrip("\r")) if 0 <= idx < len(lines) else 0
    return Range(
        start=Position(line=idx, character=0),
        end=Position(line=idx, character=length),
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Scan the document and publish diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    source = doc.source
    diagnostics: list[Diagnostic] = []

    try:
        scan(source)
    except LexError as exc:
        message = exc.message
        if exc.where:
            message += f" ({exc.where})"
        diagnostics.append(
            Diagnostic(
                range=_line_range(source, exc.line),
                message=message,
                severity=DiagnosticSeverity.Error,
                source="loxscan",
            )
        )

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
