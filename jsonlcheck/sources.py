from collections.abc import Iterator
from contextlib import ExitStack, contextmanager
import gzip
import io
import logging
import sys
from typing import BinaryIO, TextIO
from urllib.parse import unquote, urlsplit
import zlib

import requests
import urllib3

from jsonlcheck.errors import (
    DecompressionError,
    InvalidLocatorError,
    NoPipeError,
    SourceOpenError,
    UnrecognizedTypeError,
    UnsupportedSchemeError,
)
from jsonlcheck.schemas import Encoding, SourceDescriptor, SourceKind


logger = logging.getLogger(__name__)

# Smallest locator that still carries a scheme and a path: "s://p".
MIN_LOCATOR_LENGTH = 5

_SCHEMES = {
    "file": SourceKind.FILE,
    "http": SourceKind.HTTP,
    "https": SourceKind.HTTPS,
}


def resolve_source(locator: str, file_type: str = "") -> SourceDescriptor:
    if not locator:
        return SourceDescriptor(kind=SourceKind.STDIN, locator="", path="-", encoding=Encoding.PLAIN)

    if len(locator) < MIN_LOCATOR_LENGTH:
        raise InvalidLocatorError(f"input URL is too short to parse: {locator!r}")

    try:
        parts = urlsplit(locator)
    except ValueError as exc:
        raise InvalidLocatorError(f"input URL could not be parsed: {locator!r}") from exc

    kind = _SCHEMES.get(parts.scheme.lower())
    if kind is None:
        raise UnsupportedSchemeError(f"We don't handle {parts.scheme or '(missing)'} input URLs.")

    return SourceDescriptor(
        kind=kind,
        locator=locator,
        path=unquote(parts.path) if kind is SourceKind.FILE else parts.path,
        encoding=_select_encoding(parts.path, file_type),
    )


def _select_encoding(path: str, file_type: str) -> Encoding:
    override = (file_type or "").strip().upper()
    lowered = path.lower()
    if lowered.endswith(".jsonl") or override == Encoding.PLAIN.value:
        return Encoding.PLAIN
    if lowered.endswith(".gz") or override == Encoding.GZIP.value:
        return Encoding.GZIP
    raise UnrecognizedTypeError(
        "If this is a valid JSONL file, please rename with the .jsonl extension "
        "or use the file type override (--file-type)."
    )


@contextmanager
def open_source(
    source: SourceDescriptor,
    *,
    stdin: TextIO | None = None,
    timeout: float = 30.0,
) -> Iterator[Iterator[str]]:
    """Open the source and yield its lines as text.

    Everything opened here is closed when the block exits, whether the run
    finished or failed. Standard input is read but never closed.
    """
    with ExitStack() as stack:
        raw = _open_raw(source, stack, stdin=stdin, timeout=timeout)
        if source.encoding is Encoding.GZIP:
            raw = stack.enter_context(gzip.GzipFile(fileobj=raw, mode="rb"))
        # Records end at "\n" only; a stray "\r" stays inside its line.
        text = io.TextIOWrapper(raw, encoding="utf-8", errors="replace", newline="\n")
        # detach() keeps the wrapper from closing a stream owned by someone else.
        stack.callback(text.detach)
        yield _iter_lines(text, source)


def _open_raw(
    source: SourceDescriptor,
    stack: ExitStack,
    *,
    stdin: TextIO | None,
    timeout: float,
) -> BinaryIO:
    if source.kind is SourceKind.STDIN:
        stream = stdin if stdin is not None else sys.stdin
        if stream.isatty():
            raise NoPipeError("no input URL given and standard input is not piped")
        return stream.buffer

    if source.kind is SourceKind.FILE:
        try:
            return stack.enter_context(open(source.path, "rb"))
        except OSError as exc:
            raise SourceOpenError(f"could not open {source.path}: {exc}") from exc

    try:
        response = requests.get(source.locator, stream=True, timeout=timeout)
    except requests.RequestException as exc:
        raise SourceOpenError(f"could not fetch {source.locator}: {exc}") from exc
    stack.callback(response.close)
    try:
        response.raise_for_status()
    except requests.HTTPError as exc:
        raise SourceOpenError(f"could not fetch {source.locator}: {exc}") from exc
    logger.debug("http source opened", extra={"url": source.locator, "status": response.status_code})
    # Undo any transport Content-Encoding; file-level gzip is handled separately.
    response.raw.decode_content = True
    # urllib3 would close the body at EOF under the text wrapper; response.close releases it.
    response.raw.auto_close = False
    return response.raw


def _iter_lines(text: io.TextIOWrapper, source: SourceDescriptor) -> Iterator[str]:
    try:
        yield from text
    except (gzip.BadGzipFile, EOFError, zlib.error) as exc:
        raise DecompressionError(f"{source.locator} is not a readable gzip stream: {exc}") from exc
    except (OSError, urllib3.exceptions.HTTPError) as exc:
        raise SourceOpenError(f"failed reading {source.locator or 'standard input'}: {exc}") from exc
