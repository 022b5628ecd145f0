"""Line-oriented lexer for the small scripting language."""

from __future__ import annotations

import logging
import string
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from .tokens import Token, TokenType

logger = logging.getLogger(__name__)

MAX_WORD_LENGTH = 63

KEYWORDS: dict[str, TokenType] = {
    "IfTrue": TokenType.CONDITION,
    "Otherwise": TokenType.CONDITION,
    "Imw": TokenType.INTEGER,
    "SIMw": TokenType.SINTEGER,
    "Chj": TokenType.CHARACTER,
    "Series": TokenType.STRING,
    "IMwf": TokenType.FLOAT,
    "NOReturn": TokenType.VOID,
    "SIMwf": TokenType.SFLOAT,
    "RepeatWhen": TokenType.LOOP,
    "Reiterate": TokenType.LOOP,
    "Turnback": TokenType.RETURN,
    "OutLoop": TokenType.BREAK,
    "Loli": TokenType.STRUCT,
    "Include": TokenType.INCLUSION,
}

_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)
_SPACES = frozenset(" \t\n\v\f\r")
_QUOTES = frozenset("\"'")


def _at(text: str, pos: int) -> str:
    """Character at ``pos``, or an empty string past the end."""
    return text[pos] if pos < len(text) else ""


def _skip_digits(text: str, pos: int) -> int:
    while _at(text, pos) in _DIGITS:
        pos += 1
    return pos


def read_word(text: str, pos: int, line: int) -> tuple[Token, int]:
    """Read a keyword or identifier of at most 63 letters starting at ``pos``."""
    end = pos
    while end - pos < MAX_WORD_LENGTH and _at(text, end) in _LETTERS:
        end += 1
    word = text[pos:end]
    return Token(KEYWORDS.get(word, TokenType.IDENTIFIER), word, line), end


def read_number(text: str, pos: int, line: int) -> tuple[Token, int]:
    """Read an optionally negative integer or decimal number."""
    end = pos
    signed = _at(text, end) == "-"
    if signed:
        end += 1
    end = _skip_digits(text, end)
    if _at(text, end) == ".":
        end = _skip_digits(text, end + 1)
        kind = TokenType.SFLOAT if signed else TokenType.FLOAT
    else:
        kind = TokenType.SINTEGER if signed else TokenType.INTEGER
    return Token(kind, text[pos:end], line), end


def read_symbol(
    text: str, pos: int, line: int, default_type: TokenType
) -> tuple[Token | None, int]:
    """Read an operator or separator.

    Returns ``(None, pos)`` when the character opens a comment marker that
    cannot be handled here.
    """
    char = _at(text, pos)
    nxt = _at(text, pos + 1)
    match char:
        case "+" | "-":
            if char == "-" and nxt == ">":
                return Token(TokenType.ACCESS_OP, "->", line), pos + 2
            kind = TokenType.ARITHMETIC_OP
        case "*" | "/":
            if nxt == "@":
                return None, pos
            kind = TokenType.ARITHMETIC_OP
        case "&" | "|":
            if nxt == char:
                return Token(TokenType.LOGIC_OP, char * 2, line), pos + 2
            kind = TokenType.LOGIC_OP
        case "=":
            if nxt == "=":
                return Token(TokenType.RELATIONAL_OP, "==", line), pos + 2
            kind = TokenType.ASSIGNMENT_OP
        case ">" | "<" | "!":
            if nxt == "=":
                return Token(TokenType.RELATIONAL_OP, char + "=", line), pos + 2
            kind = TokenType.ERROR if char == "!" else TokenType.RELATIONAL_OP
        case "(" | ")" | "[" | "]" | "{" | "}":
            kind = TokenType.BRACES
        case ";":
            kind = TokenType.ERROR
        case _:
            kind = default_type
    return Token(kind, char, line), pos + 1


def _comment_tokens(text: str, pos: int, line: int) -> tuple[list[Token], int]:
    tokens = [Token(TokenType.COMMENT_START, "/@", line)]
    start = pos + 2
    end = text.find("@/", start)
    closed = end != -1
    if not closed:
        end = len(text)
    content = text[start:end]
    if content:
        tokens.append(Token(TokenType.COMMENT_CONTENT, content, line))
    if closed:
        tokens.append(Token(TokenType.COMMENT_END, "@/", line))
        end += 2
    return tokens, end


def tokenize_line(text: str, line: int) -> Iterator[Token]:
    """Yield the tokens of one source line."""
    pos = 0
    while pos < len(text):
        char = text[pos]
        if char in _SPACES:
            pos += 1
            continue

        if text.startswith("/@", pos):
            comment, pos = _comment_tokens(text, pos, line)
            yield from comment
            continue

        token: Token | None
        if char in _LETTERS:
            token, new_pos = read_word(text, pos, line)
        elif char in _DIGITS or (char == "-" and _at(text, pos + 1) in _DIGITS):
            token, new_pos = read_number(text, pos, line)
        elif char in _QUOTES:
            token, new_pos = read_symbol(text, pos, line, TokenType.QUOTATION_MARK)
        else:
            token, new_pos = read_symbol(text, pos, line, TokenType.ERROR)

        if new_pos == pos:
            logger.warning("Line %d: Forcing skip of character '%s'", line, char)
            new_pos = pos + 1
        pos = new_pos

        if token is not None:
            yield token


def tokenize(lines: Iterable[str]) -> Iterator[Token]:
    """Yield the tokens of every line, numbering lines from 1."""
    for number, text in enumerate(lines, start=1):
        yield from tokenize_line(text, number)


def print_tokens(tokens: Iterable[Token], out: TextIO | None = None) -> None:
    """Write one report line per token to ``out`` (standard output by default)."""
    stream = sys.stdout if out is None else out
    for token in tokens:
        stream.write(token.format() + "\n")