"""
字句解析のユニットテスト

使用方法:
    python -m pytest minicc/test_lexer.py -v
"""
import unittest

from minicc.errors import LexError
from minicc.lexer import Lexer, tokenize
from minicc.tokens import Token, TokenKind


def kinds(tokens):
    return [t.kind for t in tokens]


class TestTokenize(unittest.TestCase):
    """tokenize のテスト"""

    def test_assignment_statement(self):
        """代入文のトークン種別"""
        tokens = tokenize("x = 3 + 4 * 2;")
        self.assertEqual(kinds(tokens), [
            TokenKind.IDENTIFIER, TokenKind.ASSIGN, TokenKind.NUMBER,
            TokenKind.PLUS, TokenKind.NUMBER, TokenKind.STAR, TokenKind.NUMBER,
            TokenKind.SEMICOLON, TokenKind.EOF,
        ])
        self.assertEqual([t.lexeme for t in tokens], ["x", "=", "3", "+", "4", "*", "2", ";", ""])

    def test_all_operators(self):
        """1文字の演算子はそれぞれ1トークン"""
        tokens = tokenize("=+-*/;")
        self.assertEqual(kinds(tokens), [
            TokenKind.ASSIGN, TokenKind.PLUS, TokenKind.MINUS,
            TokenKind.STAR, TokenKind.SLASH, TokenKind.SEMICOLON, TokenKind.EOF,
        ])

    def test_positions(self):
        """トークンの開始位置は0始まり"""
        tokens = tokenize("total  = a1 / 10")
        self.assertEqual([t.position for t in tokens], [0, 7, 9, 12, 14, 16])

    def test_maximal_munch(self):
        """識別子・数値は最長一致で切り出す"""
        tokens = tokenize("abc_1 12x")
        self.assertEqual(tokens[0], Token(TokenKind.IDENTIFIER, "abc_1", 0))
        self.assertEqual(tokens[1], Token(TokenKind.NUMBER, "12", 6))
        self.assertEqual(tokens[2], Token(TokenKind.IDENTIFIER, "x", 8))

    def test_whitespace_is_skipped(self):
        """空白・タブ・改行はトークンにならない"""
        tokens = tokenize(" \t a\n=\r\n 1 ")
        self.assertEqual(kinds(tokens), [TokenKind.IDENTIFIER, TokenKind.ASSIGN, TokenKind.NUMBER, TokenKind.EOF])

    def test_empty_input(self):
        """空の入力は EOF だけ"""
        tokens = tokenize("")
        self.assertEqual(tokens, [Token(TokenKind.EOF, "", 0)])

    def test_eof_position(self):
        """EOF の位置は入力の末尾"""
        self.assertEqual(tokenize("a = 1  ")[-1].position, 7)

    def test_no_signed_literal(self):
        """符号付きの数値リテラルは無く、- は演算子になる"""
        tokens = tokenize("-5")
        self.assertEqual(kinds(tokens), [TokenKind.MINUS, TokenKind.NUMBER, TokenKind.EOF])


class TestLexError(unittest.TestCase):
    """字句エラーのテスト"""

    def test_unknown_character(self):
        """未知の文字とその位置を報告する"""
        with self.assertRaises(LexError) as cm:
            tokenize("a = 1 @ 2;")
        self.assertEqual(cm.exception.char, "@")
        self.assertEqual(cm.exception.position, 6)
        self.assertIn("'@'", str(cm.exception))

    def test_leading_underscore(self):
        """識別子は英字で始まる必要がある"""
        with self.assertRaises(LexError) as cm:
            tokenize("_x = 1;")
        self.assertEqual(cm.exception.position, 0)

    def test_fraction_not_supported(self):
        """小数点は受け付けない"""
        with self.assertRaises(LexError) as cm:
            tokenize("x = 3.5;")
        self.assertEqual(cm.exception.char, ".")
        self.assertEqual(cm.exception.position, 5)

    def test_parentheses_not_supported(self):
        """括弧は受け付けない"""
        with self.assertRaises(LexError):
            tokenize("x = (1 + 2);")


class TestLexer(unittest.TestCase):
    """Lexer クラスのテスト"""

    def test_next_token_advances(self):
        """next_token は1トークンずつ進み、最後は EOF を返し続ける"""
        lexer = Lexer("a=1")
        self.assertEqual(lexer.next_token().kind, TokenKind.IDENTIFIER)
        self.assertEqual(lexer.next_token().kind, TokenKind.ASSIGN)
        self.assertEqual(lexer.next_token().kind, TokenKind.NUMBER)
        self.assertEqual(lexer.next_token().kind, TokenKind.EOF)
        self.assertEqual(lexer.next_token().kind, TokenKind.EOF)

    def test_tokens_are_immutable(self):
        """トークンは生成後に変更できない"""
        token = tokenize("a")[0]
        with self.assertRaises(AttributeError):
            token.lexeme = "b"


if __name__ == '__main__':
    unittest.main(verbosity=2)
