import enum
import re
from dataclasses import dataclass
from typing import Iterator, Optional

from filecalc.utils import INT64_DIGITS, PrintableEnum, fits_int64
from filecalc.value import Float, Integer, Value


class TokenType(PrintableEnum):
    EOF = enum.auto()
    NUMBER = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    STAR = enum.auto()
    SLASH = enum.auto()
    POW = enum.auto()
    BRACKET_OPEN = enum.auto()
    BRACKET_CLOSE = enum.auto()
    INVALID = enum.auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    position: int  # 1-based, every character including newlines counts as one
    lexeme: str
    value: Optional[Value] = None

    def __str__(self) -> str:
        return f"<{self.type}@{self.position}>{self.lexeme}"


WHITESPACE = " \t\r\n"
COMMENT_START = "#"

SINGLE_CHAR_TOKENS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "/": TokenType.SLASH,
    "(": TokenType.BRACKET_OPEN,
    ")": TokenType.BRACKET_CLOSE,
}

# an exponent marker without digits after it is left out of the literal: "1e" is 1 followed by "e"
NUMBER_RE = re.compile(r"(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def _skip_whitespace_and_comments(code: str, i: int) -> int:
    while i < len(code):
        if code[i] in WHITESPACE:
            i += 1
        elif code[i] == COMMENT_START:
            line_end = code.find("\n", i)
            i = len(code) if line_end == -1 else line_end
        else:
            break
    return i


def _number_value(lexeme: str) -> Value:
    as_float = float(lexeme)
    if any(c in lexeme for c in ".eE"):
        return Float(as_float)
    # int() refuses very long digit strings, and past 19 significant digits it overflows anyway
    digits = lexeme.lstrip("0") or "0"
    if len(digits) > INT64_DIGITS:
        return Float(as_float)
    as_int = int(digits)
    if fits_int64(as_int):
        return Integer(as_int)
    else:
        return Float(as_float)


def tokenize(code: str) -> Iterator[Token]:
    """Lazily yields tokens left to right, ending with a single EOF token.

    Never raises: characters that cannot start a token come out as INVALID
    tokens one character long, and the parser reports them as unexpected.
    """
    i = 0
    while True:
        i = _skip_whitespace_and_comments(code, i)
        if i >= len(code):
            yield Token(type=TokenType.EOF, position=i + 1, lexeme="")
            return

        c = code[i]
        if c.isascii() and (c.isdigit() or c == "."):
            match = NUMBER_RE.match(code, i)
            if match is None:
                # lone dot
                yield Token(type=TokenType.INVALID, position=i + 1, lexeme=c)
                i += 1
                continue
            lexeme = match.group()
            yield Token(type=TokenType.NUMBER, position=i + 1, lexeme=lexeme, value=_number_value(lexeme))
            i = match.end()
        elif c == "*":
            if code.startswith("**", i):
                yield Token(type=TokenType.POW, position=i + 1, lexeme="**")
                i += 2
            else:
                yield Token(type=TokenType.STAR, position=i + 1, lexeme=c)
                i += 1
        elif c in SINGLE_CHAR_TOKENS:
            yield Token(type=SINGLE_CHAR_TOKENS[c], position=i + 1, lexeme=c)
            i += 1
        else:
            yield Token(type=TokenType.INVALID, position=i + 1, lexeme=c)
            i += 1
