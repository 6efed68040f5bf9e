from typing import Optional, List
from arith.tokenizer import Token, TokenTypes
from arith.exceptions import LexError
from arith.logging_config import get_logger


logger = get_logger("lexer")

whitespaces_toks = (" ", "\t")

# identifier lexemes only end at a space, tabs and operators are kept in them
identifier_delimiter = " "

single_chr_toks = {
    "+": Token(TokenTypes.ADD),
    "-": Token(TokenTypes.SUB),
    "*": Token(TokenTypes.MUL),
    "/": Token(TokenTypes.DIV),
    "(": Token(TokenTypes.LPAREN),
    ")": Token(TokenTypes.RPAREN),
}


def _is_digit(c: Optional[str]) -> bool:
    return c is not None and "0" <= c <= "9"


def _is_lower(c: Optional[str]) -> bool:
    return c is not None and "a" <= c <= "z"


class Lexer:
    def __init__(self, input: str = ""):
        self._buffer = input
        self._pos = 0

    @property
    def buffer(self):
        return self._buffer

    @property
    def pos(self):
        return self._pos

    @property
    def current_char(self) -> Optional[str]:
        if self._pos >= len(self._buffer):
            return None
        return self._buffer[self._pos]

    def _advance(self, offset=1) -> None:
        if offset < 0:
            raise IndexError(f"{self._advance.__name__} can only advance forward")
        if self._pos + offset > len(self._buffer):
            raise IndexError("Index out of range")
        self._pos += offset

    def _is_eof(self) -> bool:
        return self._pos >= len(self._buffer)

    def _num(self) -> Token:
        start = self._pos
        while _is_digit(self.current_char):
            self._advance()
        return Token(TokenTypes.NUMBER, int(self._buffer[start : self._pos]))

    def _identifier(self) -> Token:
        end = self._buffer.find(identifier_delimiter, self._pos)
        if end == -1:
            end = len(self._buffer)
        lexeme = self._buffer[self._pos : end]
        self._advance(end - self._pos)
        return Token(TokenTypes.IDENTIFIER, lexeme)

    def _skip_spaces(self) -> None:
        while self.current_char is not None and self.current_char in whitespaces_toks:
            self._advance()

    def _get_next_token(self) -> Optional[Token]:
        self._skip_spaces()
        if self._is_eof():
            return None

        curr_char = self.current_char
        if curr_char in single_chr_toks:
            self._advance()
            return single_chr_toks[curr_char]
        elif _is_digit(curr_char):
            return self._num()
        elif _is_lower(curr_char):
            return self._identifier()

        raise LexError(curr_char, self._pos)

    def get_tokens(self) -> List[Token]:
        tokens = []
        curr_token = self._get_next_token()
        while curr_token is not None:
            tokens.append(curr_token)
            curr_token = self._get_next_token()
        logger.debug("scanned %d tokens from %r", len(tokens), self._buffer)
        return tokens


def scan(text: str) -> List[Token]:
    """Split ``text`` into tokens, raising LexError on unknown characters."""
    return Lexer(text).get_tokens()
