from typing import Union, Optional
from enum import Enum, auto


class AutoName(Enum):
    def _generate_next_value_(name, start, count, last_values):
        return name


class TokenTypes(AutoName):
    """
    The boolean indicates if the token object contains an associated value
    """

    NUMBER = (auto(), True)
    IDENTIFIER = (auto(), True)

    ADD = (auto(), False)
    SUB = (auto(), False)
    MUL = (auto(), False)
    DIV = (auto(), False)

    LPAREN = (auto(), False)
    RPAREN = (auto(), False)


operator_types = (TokenTypes.ADD, TokenTypes.SUB, TokenTypes.MUL, TokenTypes.DIV)


class Token:
    def __init__(self, type: TokenTypes, value: Optional[Union[int, str]] = None):
        if not isinstance(type, TokenTypes):
            raise TypeError(f"invalid token type: {type}")
        if type.value[1] == (value is None):
            s = "n't"
            raise ValueError(
                f"value should{s if type.value[1] else ''} be None for {type}"
            )

        if value is not None:
            self._validate_value(type, value)

        self._type = type
        self._value = value

    def _validate_value(self, token_type: TokenTypes, value: Union[int, str]):
        if token_type == TokenTypes.IDENTIFIER and (
            not isinstance(value, str) or not value or " " in value
        ):
            raise TypeError("value for IDENTIFIER must be a non-empty string without spaces")
        elif token_type == TokenTypes.NUMBER and (
            not isinstance(value, int) or isinstance(value, bool) or value < 0
        ):
            raise TypeError("value for NUMBER token must be a non-negative integer")

    @property
    def type(self):
        return self._type

    @property
    def value(self):
        return self._value

    @property
    def is_operator(self) -> bool:
        return self._type in operator_types

    def __str__(self) -> str:
        return f"Token({self._type}, {self._value})"

    def __repr__(self) -> str:
        return self.__str__()

    def __eq__(self, other):
        if not isinstance(other, type(self)):
            return False
        if (self._type, self._value) != (other._type, other._value):
            return False
        return True

    def __hash__(self):
        return hash((self._type, self._value))
