"""Split declaration source text into tokens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class GeneratorError(Exception):
    """Raised when the interface generator meets input it cannot handle."""


class TokenType(Enum):
    COMMA = "comma"
    LEFT = "left"
    RIGHT = "right"
    AMPERSAND = "ampersand"
    SEMICOLON = "semicolon"
    CURLYLEFT = "curlyleft"
    CURLYRIGHT = "curlyright"
    COMMENT = "comment"
    PREPROCESSOR = "preprocessor"
    IDENTIFIER = "identifier"


@dataclass(frozen=True)
class Token:
    """A single lexical token and its text (empty for punctuation)."""

    type: TokenType
    value: str = ""


# Braces are reported as parentheses, as the declaration parser expects.
_PUNCTUATION = {
    ",": TokenType.COMMA,
    "(": TokenType.LEFT,
    ")": TokenType.RIGHT,
    "&": TokenType.AMPERSAND,
    ";": TokenType.SEMICOLON,
    "{": TokenType.LEFT,
    "}": TokenType.RIGHT,
}

_IDENTIFIER_STOP = frozenset({"\n", " ", "(", ")", ",", "&", "/"})
_KEEP_AFTER_IDENTIFIER = frozenset({"(", ")", "&", "/"})


def _read_line_comment(text: str, pos: int, tokens: list[Token]) -> int:
    end = len(text)
    newline = text.find("\n", pos)
    stop = min(newline if newline != -1 else end, end - 1)
    stop = max(stop, pos)
    tokens.append(Token(TokenType.COMMENT, text[pos:stop].rstrip(" ")))
    return stop


def _read_block_comment(text: str, pos: int, tokens: list[Token]) -> int:
    end = len(text)
    value = ""
    while True:
        star = text.find("*", pos)
        if star == -1:
            value += text[pos:]
            tokens.append(Token(TokenType.COMMENT, value))
            return end
        value += text[pos:star]
        pos = star + 1
        if pos < end and text[pos] == "/":
            tokens.append(Token(TokenType.COMMENT, value))
            return pos + 1
        value += "*"
        tokens.append(Token(TokenType.COMMENT, value))


def _read_comment(text: str, pos: int, tokens: list[Token]) -> int:
    if pos >= len(text):
        raise GeneratorError(" / found where not expected.")
    marker = text[pos]
    pos += 1
    if marker == "/":
        return _read_line_comment(text, pos, tokens)
    if marker == "*":
        return _read_block_comment(text, pos, tokens)
    raise GeneratorError(" / found where not expected.")


def _read_directive(text: str, pos: int, tokens: list[Token]) -> int:
    end = len(text)
    if pos >= end:
        tokens.append(Token(TokenType.PREPROCESSOR, ""))
        return end
    stop = text.find("\n", pos + 1)
    if stop == -1:
        stop = end
    tokens.append(Token(TokenType.PREPROCESSOR, text[pos:stop]))
    return stop + 1 if stop < end else end


def _read_identifier(text: str, start: int, tokens: list[Token]) -> int:
    end = len(text)
    pos = start + 1
    while pos < end and text[pos] not in _IDENTIFIER_STOP:
        pos += 1
    tokens.append(Token(TokenType.IDENTIFIER, text[start:pos]))
    if pos < end and text[pos] not in _KEEP_AFTER_IDENTIFIER:
        pos += 1
    return pos


def tokenize(text: str) -> list[Token]:
    """Split declaration text into a list of tokens."""
    tokens: list[Token] = []
    pos = 0
    end = len(text)
    while pos < end:
        char = text[pos]
        pos += 1
        if char in (" ", "\n"):
            continue
        kind = _PUNCTUATION.get(char)
        if kind is not None:
            tokens.append(Token(kind))
        elif char == "/":
            pos = _read_comment(text, pos, tokens)
        elif char == "#":
            pos = _read_directive(text, pos, tokens)
        else:
            pos = _read_identifier(text, pos - 1, tokens)
    return tokens