from typing import List, Optional
from arith import config
from arith.lexer import scan
from arith.tokenizer import Token, TokenTypes as TT
from arith.exceptions import ParseError
from arith.logging_config import get_logger
from arith.ast import AST, BinaryOp, Literal


logger = get_logger("parser")

# (left, right) binding power per infix operator.
# left < right makes every operator left-associative.
BINDING_POWERS = {
    TT.ADD: (4, 5),
    TT.SUB: (4, 5),
    TT.MUL: (6, 7),
    TT.DIV: (6, 7),
}


class ASTParser:
    def __init__(self, tokens: List[Token]):
        self._tokens = list(tokens)
        self._tok_idx = 0

    @property
    def current_token(self) -> Optional[Token]:
        if self._tok_idx >= len(self._tokens):
            return None
        return self._tokens[self._tok_idx]

    @property
    def remaining(self) -> List[Token]:
        return self._tokens[self._tok_idx :]

    def _advance(self) -> Token:
        token = self.current_token
        if token is None:
            raise ParseError("unexpected end of input")
        self._tok_idx += 1
        return token

    def primary(self) -> AST:
        curr_token = self.current_token
        if curr_token is None:
            raise ParseError("unexpected end of input")
        if curr_token.type == TT.NUMBER:
            self._advance()
            return Literal(curr_token)
        elif curr_token.type == TT.LPAREN:
            self._advance()
            node = self.expression(0)
            closing = self.current_token
            if closing is None or closing.type != TT.RPAREN:
                raise ParseError("mismatched parentheses", closing)
            self._advance()
            return node

        raise ParseError("unexpected token", curr_token)

    def expression(self, min_bp: int = 0) -> AST:
        node = self.primary()

        while True:
            op = self.current_token
            if op is None or op.type not in BINDING_POWERS:
                break
            left_bp, right_bp = BINDING_POWERS[op.type]
            if left_bp < min_bp:
                break
            self._advance()
            node = BinaryOp(op, node, self.expression(right_bp))

        return node

    def parse(self, strict: bool = False) -> AST:
        node = self.expression(0)
        if self.current_token is not None:
            if strict:
                raise ParseError("unexpected trailing input", self.current_token)
            logger.debug("ignoring trailing tokens %s", self.remaining)
        return node


def parse_expression(tokens: List[Token], strict: Optional[bool] = None) -> AST:
    if strict is None:
        strict = config.STRICT_PARSE
    node = ASTParser(tokens).parse(strict=strict)
    logger.debug("parsed %d tokens", len(tokens))
    return node


def parse(text: str, strict: Optional[bool] = None) -> AST:
    """Scan and parse ``text`` into an expression tree."""
    return parse_expression(scan(text), strict=strict)
