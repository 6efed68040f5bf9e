class ArithError(Exception):
    def __init__(self, msg):
        self.message = msg
        super().__init__(msg)

    def __str__(self):
        return self.message


class LexError(ArithError):
    def __init__(self, symbol, position):
        self.symbol = symbol
        self.position = position
        super().__init__(f"unknown symbol {symbol!r} at position {position}")


class ParseError(ArithError):
    def __init__(self, msg, token=None):
        self.token = token
        super().__init__(msg)


class EvaluationError(ArithError):
    pass
