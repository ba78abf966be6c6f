"""Per-language pretty printers.

Each printer receives text with ``\\n`` line endings and no tabs and returns
the formatted text. Printers raise FormattingError when the input is too
broken to format; the caller decides what to do about it. Apart from tab
expansion, string literal contents (template literals, quoted CSS values,
``<pre>`` bodies) are not rewritten.
"""

import textwrap
from dataclasses import dataclass
from typing import Collection

from bs4 import BeautifulSoup
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter

from ..exceptions import FormattingError

_OPENERS = "{[("
_CLOSERS = "}])"
_CONTINUATION_PREFIXES = (".", "?", "&&", "||")


def tidy_lines(text: str, verbatim: Collection[int] = ()) -> str:
    """
    Strip trailing whitespace and collapse runs of blank lines.

    Lines whose index is in ``verbatim`` are kept exactly as they are and
    never count towards a blank run.
    """
    lines = []
    keep = []
    blank = False
    for index, line in enumerate(text.split("\n")):
        if index in verbatim:
            lines.append(line)
            keep.append(True)
            blank = False
            continue
        line = line.rstrip()
        if not line:
            if blank or not lines:
                continue
            blank = True
        else:
            blank = False
        lines.append(line)
        keep.append(False)
    while lines and not lines[-1] and not keep[-1]:
        lines.pop()
        keep.pop()
    return "\n".join(lines)


@dataclass
class _ScanState:
    """Lexical state carried from one line to the next."""

    block_comment: bool = False
    template: bool = False


def _bracket_deltas(line: str, state: _ScanState) -> list:
    """Return +1/-1 for every bracket outside strings and comments."""
    deltas = []
    quote = None
    i = 0
    while i < len(line):
        ch = line[i]
        pair = line[i:i + 2]
        if state.block_comment:
            if pair == "*/":
                state.block_comment = False
                i += 2
                continue
        elif state.template:
            if ch == "\\":
                i += 2
                continue
            if ch == "`":
                state.template = False
        elif quote:
            if ch == "\\":
                i += 2
                continue
            if ch == quote:
                quote = None
        elif pair == "//":
            break
        elif pair == "/*":
            state.block_comment = True
            i += 2
            continue
        elif ch in "'\"":
            quote = ch
        elif ch == "`":
            state.template = True
        elif ch in _OPENERS:
            deltas.append(1)
        elif ch in _CLOSERS:
            deltas.append(-1)
        i += 1
    return deltas


def reindent_brackets(code: str, indent: str, preprocessor: bool = False) -> str:
    """
    Re-indent a C-family snippet by bracket depth.

    Line breaks are kept as written; only leading whitespace changes.
    Template literal bodies are left untouched, blank lines and trailing
    spaces included.

    Args:
        code: Source text
        indent: One level of indentation
        preprocessor: Pin ``#`` directives to column zero

    Returns:
        Re-indented source

    Raises:
        FormattingError: If brackets do not balance
    """
    state = _ScanState()
    depth = 0
    out = []
    verbatim = set()

    for number, raw in enumerate(code.split("\n"), start=1):
        stripped = raw.strip()
        in_template = state.template

        if in_template:
            line = raw
        elif state.block_comment:
            body = " " + stripped if stripped.startswith("*") else stripped
            text = indent * depth + body
            line = raw
        elif not stripped:
            out.append("")
            continue
        elif preprocessor and stripped.startswith("#"):
            out.append(stripped)
            continue
        else:
            closers = len(stripped) - len(stripped.lstrip(_CLOSERS))
            level = max(depth - closers, 0)
            if stripped.startswith(_CONTINUATION_PREFIXES) and not closers:
                level += 1
            text = indent * level + stripped
            line = stripped

        for delta in _bracket_deltas(line, state):
            depth += delta
            if depth < 0:
                raise FormattingError(f"Unbalanced closing bracket on line {number}")

        if in_template:
            text = raw if state.template else raw.rstrip()
            verbatim.add(len(out))
        elif state.template:
            # A template opened on this line; its trailing spaces are string content.
            text = text[:len(text) - len(stripped)] + raw.lstrip()
            verbatim.add(len(out))
        out.append(text)

    if depth:
        raise FormattingError(f"Unbalanced brackets: {depth} left open")
    return tidy_lines("\n".join(out), verbatim)


def format_css(code: str, indent: str) -> str:
    """Reflow a stylesheet to one declaration per line."""
    out = []
    buf = []
    depth = 0
    parens = 0
    quote = None
    i = 0

    def push(ch: str) -> None:
        # Whitespace outside quotes collapses to a single space.
        if ch.isspace():
            if buf and buf[-1] != " ":
                buf.append(" ")
        else:
            buf.append(ch)

    def flush(terminator: str = "") -> None:
        text = "".join(buf).strip()
        buf.clear()
        if not text:
            return
        if terminator == ";" and depth > 0 and not text.startswith("@") and ":" in text:
            prop, _, value = text.partition(":")
            text = f"{prop.strip()}: {value.strip()}"
        out.append(indent * depth + text + terminator)

    while i < len(code):
        ch = code[i]
        if quote:
            buf.append(ch)
            if ch == "\\" and i + 1 < len(code):
                buf.append(code[i + 1])
                i += 1
            elif ch == quote:
                quote = None
        elif code.startswith("/*", i):
            end = code.find("*/", i + 2)
            if end == -1:
                raise FormattingError("Unterminated comment")
            flush()
            out.append(indent * depth + code[i:end + 2].strip())
            i = end + 2
            continue
        elif ch in "'\"":
            quote = ch
            buf.append(ch)
        elif ch == "(":
            parens += 1
            buf.append(ch)
        elif ch == ")":
            parens -= 1
            buf.append(ch)
        elif parens > 0:
            push(ch)
        elif ch == "{":
            flush(" {")
            depth += 1
        elif ch == ";":
            flush(";")
        elif ch == "}":
            flush(";")
            depth -= 1
            if depth < 0:
                raise FormattingError("Unbalanced closing brace")
            out.append(indent * depth + "}")
            if depth == 0:
                out.append("")
        else:
            push(ch)
        i += 1

    if quote or parens:
        raise FormattingError("Unterminated string or parenthesis")
    if depth:
        raise FormattingError(f"Unbalanced braces: {depth} left open")
    flush()
    return tidy_lines("\n".join(out))


def format_html(code: str, indent: str) -> str:
    """
    Parse markup with BeautifulSoup and print one tag or text run per line.

    ``<pre>`` and ``<textarea>`` bodies keep their whitespace and script or
    style bodies are not entity-escaped. Elements left open (``<p>``,
    ``<li>``) are closed and stray closing tags are dropped, the way the
    parser recovers from them.
    """
    soup = BeautifulSoup(code, "html.parser")
    formatter = HTMLFormatter(
        entity_substitution=EntitySubstitution.substitute_xml,
        void_element_close_prefix="",
        indent=indent,
    )
    return soup.prettify(formatter=formatter).rstrip("\n")


def format_python(code: str, indent: str) -> str:
    return textwrap.dedent(code).strip("\n")


def format_plaintext(code: str, indent: str) -> str:
    return "\n".join(line.rstrip() for line in code.split("\n"))
