import pytest

from jabascript.errors import LexError
from jabascript.lexer import tokenize
from jabascript.tokens import Token, TokenKind


def kinds(source):
    return [t.kind for t in tokenize(source)]


def test_operators_and_punctuation():
    assert kinds("/ * % - + = ( ) ? : |") == [
        TokenKind.DIV, TokenKind.MUL, TokenKind.MOD, TokenKind.MINUS,
        TokenKind.PLUS, TokenKind.ASSIGNMENT, TokenKind.LPAREN,
        TokenKind.RPAREN, TokenKind.TERNARY_START, TokenKind.TERNARY_SEP,
        TokenKind.PIPE, TokenKind.EOF,
    ]


def test_integer_and_identifier_runs():
    tokens = tokenize("x_1 = 1234\n")
    assert tokens == [
        Token(TokenKind.IDENTIFIER, 'x_1'),
        Token(TokenKind.ASSIGNMENT, '='),
        Token(TokenKind.INTEGER, '1234'),
        Token(TokenKind.NEWLINE),
        Token(TokenKind.EOF),
    ]


def test_digits_then_letters_split():
    tokens = tokenize("12ab")
    assert tokens[0] == Token(TokenKind.INTEGER, '12')
    assert tokens[1] == Token(TokenKind.IDENTIFIER, 'ab')


def test_newline_runs_collapse():
    assert kinds("1\n\n\n2\n") == [
        TokenKind.INTEGER, TokenKind.NEWLINE, TokenKind.INTEGER,
        TokenKind.NEWLINE, TokenKind.EOF,
    ]


def test_whitespace_is_skipped():
    assert kinds(" \t 1 \t+\t2 ") == [
        TokenKind.INTEGER, TokenKind.PLUS, TokenKind.INTEGER, TokenKind.EOF,
    ]


def test_double_pipe_is_two_tokens():
    assert kinds("||") == [TokenKind.PIPE, TokenKind.PIPE, TokenKind.EOF]


def test_empty_source_has_only_eof():
    assert tokenize("") == [Token(TokenKind.EOF)]


def test_invalid_character():
    with pytest.raises(LexError) as excinfo:
        tokenize("1 + $\n")
    assert "'$'" in str(excinfo.value)


def test_identifier_cannot_start_with_underscore():
    with pytest.raises(LexError):
        tokenize("_x\n")


def test_tokenize_is_stateless():
    assert tokenize("a = |b| b + 1\n") == tokenize("a = |b| b + 1\n")


def test_token_str():
    assert str(Token(TokenKind.INTEGER, '5')) == "(integer 5)"
    assert str(Token(TokenKind.NEWLINE)) == "(newline)"
