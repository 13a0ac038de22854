"""
Quoted string literal extraction.

Literals are isolated with a linear scan instead of a language parser: a
literal opens on ", ' or a backtick and closes on the same quote character,
with backslash escapes consumed as a unit so an escaped quote does not close
it. Escapes are returned undecoded.

Neither the escaped character nor the literal body may be a line break
(\\n, \\r, U+2028, U+2029). A literal spanning several lines, typically a
template string, therefore produces no match at its opening quote; scanning
resumes one character later, so fragments of it may come back as separate
literals. Consumers may rely on this output, so it is kept as is.

When reading a backslash as an escape leads nowhere, the backslash is taken
as a plain character instead, the same order a backtracking regular
expression would try. Closing positions are computed once per line and quote
character, which keeps the scan linear on long runs of backslashes.
"""

import re
from typing import Dict, Iterator, List, Optional

QUOTES = frozenset('"\'`')

_LINE_BREAK = re.compile(r'[\n\r\u2028\u2029]')


def _closing_positions(line: str, quote: str) -> List[Optional[int]]:
    """
    For every offset of ``line``, the offset of the quote that closes a
    literal body starting there, or None when the body never closes.
    """
    size = len(line)
    closing: List[Optional[int]] = [None] * (size + 1)

    for i in range(size - 1, -1, -1):
        char = line[i]
        if char == quote:
            closing[i] = i
            continue

        end = None
        if char == '\\' and i + 1 < size:
            end = closing[i + 2]
        if end is None:
            end = closing[i + 1]
        closing[i] = end

    return closing


def _iter_line_literals(line: str) -> Iterator[str]:
    tables: Dict[str, List[Optional[int]]] = {}
    pos = 0
    size = len(line)

    while pos < size:
        quote = line[pos]
        if quote in QUOTES:
            if quote not in tables:
                tables[quote] = _closing_positions(line, quote)
            end = tables[quote][pos + 1]
            if end is not None:
                yield line[pos + 1:end]
                pos = end + 1
                continue
        pos += 1


def iter_literals(source: str) -> Iterator[str]:
    if not source:
        return

    start = 0
    for brk in _LINE_BREAK.finditer(source):
        yield from _iter_line_literals(source[start:brk.start()])
        start = brk.end()
    yield from _iter_line_literals(source[start:])


class Literals:
    """Restartable view over the literals of a source text."""

    def __init__(self, source: str):
        self.source = source or ""

    def __iter__(self) -> Iterator[str]:
        return iter_literals(self.source)


def extract_strings(source: str) -> list:
    return list(iter_literals(source))
