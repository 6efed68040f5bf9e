from pytest import raises
from arith.tokenizer import Token, TokenTypes as TT


def test_token_instanciation():
    Token(TT.ADD)
    Token(TT.NUMBER, 42)
    Token(TT.IDENTIFIER, "abc")


def test_token_types():
    with raises(TypeError):
        s = 42
        assert Token(s)._type

    with raises(TypeError):
        s = "WRONG_TYPE"
        assert Token(s)._type

    for op in (TT.ADD, TT.SUB, TT.MUL, TT.DIV, TT.LPAREN, TT.RPAREN):
        with raises(ValueError):
            Token(op, 42)

    with raises(ValueError):
        Token(TT.NUMBER)
    with raises(TypeError):
        Token(TT.NUMBER, "42")
    with raises(TypeError):
        Token(TT.NUMBER, True)
    with raises(TypeError):
        Token(TT.NUMBER, -1)

    with raises(ValueError):
        Token(TT.IDENTIFIER)
    with raises(TypeError):
        Token(TT.IDENTIFIER, 42)
    with raises(TypeError):
        Token(TT.IDENTIFIER, "")
    with raises(TypeError):
        Token(TT.IDENTIFIER, "a b")


def test_token_zero_value():
    assert Token(TT.NUMBER, 0).value == 0


def test_token_types_enum():
    """
    Verify that TokenTypes types variables have the same name as their values
    """
    TokenTypes_dict = {type.name: type.value for type in TT}
    for name, val in TokenTypes_dict.items():
        assert name == val[0]
        assert type(val[1]) == bool


def test_token_equality():
    assert Token(TT.NUMBER, 1) == Token(TT.NUMBER, 1)
    assert Token(TT.NUMBER, 1) != Token(TT.NUMBER, 2)
    assert Token(TT.ADD) != Token(TT.SUB)
    assert Token(TT.ADD) != "+"
    assert len({Token(TT.MUL), Token(TT.MUL)}) == 1


def test_token_is_immutable():
    token = Token(TT.NUMBER, 7)
    with raises(AttributeError):
        token.value = 8
    with raises(AttributeError):
        token.type = TT.ADD


def test_is_operator():
    assert Token(TT.ADD).is_operator
    assert Token(TT.DIV).is_operator
    assert not Token(TT.LPAREN).is_operator
    assert not Token(TT.NUMBER, 3).is_operator
