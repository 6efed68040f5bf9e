from arith.tokenizer import Token, TokenTypes


class AST(object):
    def __str__(self):
        return f"AST()"

    def __repr__(self):
        return str(self)


class Literal(AST):
    def __init__(self, number: Token):
        if number.type not in (TokenTypes.NUMBER,):
            raise TypeError(f"invalid token type {number.type} for {Literal.__name__}")
        super().__init__()
        self._token = number

    @property
    def token(self):
        return self._token

    @property
    def value(self):
        return self._token.value

    def __str__(self):
        return f"{Literal.__name__}({self.value})"

    def __repr__(self):
        return str(self)

    def __eq__(self, other):
        if type(self) != type(other):
            return False
        if self.token != other.token:
            return False
        return True

    def __hash__(self):
        return hash(self._token)


class BinaryOp(AST):
    def __init__(self, op: Token, left: AST, right: AST):
        if not op.is_operator:
            raise TypeError(f"invalid token type {op.type} for {BinaryOp.__name__}")
        if not isinstance(left, AST) or not isinstance(right, AST):
            raise TypeError(f"operands of {BinaryOp.__name__} must be AST nodes")
        super().__init__()
        self._token = self._op = op
        self._left, self._right = left, right

    @property
    def op(self):
        return self._op

    @property
    def token(self):
        return self._token

    @property
    def left(self):
        return self._left

    @property
    def right(self):
        return self._right

    def __str__(self):
        return f"{BinaryOp.__name__}({self._op.type.name}, {self.left}, {self.right})"

    def __repr__(self):
        return str(self)

    def __eq__(self, other):
        if type(self) != type(other):
            return False
        if (self._token, self.left, self.right) != (
            other.token,
            other.left,
            other.right,
        ):
            return False
        return True

    def __hash__(self):
        return hash((self._token, self._left, self._right))
