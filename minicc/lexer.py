"""
字句解析: ソース文字列をトークン列に変換する

空白は読み飛ばし、最後に必ず EOF トークンを付ける。
"""
from typing import List

from minicc.errors import LexError
from minicc.tokens import Token, TokenKind, SINGLE_CHAR_TOKENS

import logging
logger = logging.getLogger(__name__)


def is_digit(ch: str) -> bool:
    # str.isdigit() は '²' なども真になるので ASCII の数字に限定する
    return "0" <= ch <= "9"


def is_ident_char(ch: str) -> bool:
    return ch.isalpha() or is_digit(ch) or ch == "_"


class Lexer:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    @property
    def current_char(self):
        if self.pos >= len(self.text):
            return None
        return self.text[self.pos]

    def read_while(self, condition) -> str:
        start = self.pos
        while self.current_char is not None and condition(self.current_char):
            self.pos += 1
        return self.text[start:self.pos]

    def next_token(self) -> Token:
        while self.current_char is not None and self.current_char.isspace():
            self.pos += 1

        ch = self.current_char
        start = self.pos
        if ch is None:
            return Token(TokenKind.EOF, "", start)

        if ch.isalpha():
            return Token(TokenKind.IDENTIFIER, self.read_while(is_ident_char), start)

        if is_digit(ch):
            return Token(TokenKind.NUMBER, self.read_while(is_digit), start)

        kind = SINGLE_CHAR_TOKENS.get(ch)
        if kind is None:
            raise LexError(ch, start)
        self.pos += 1
        return Token(kind, ch, start)

    def tokenize(self) -> List[Token]:
        tokens = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.kind is TokenKind.EOF:
                break
        logger.debug("tokenize: %r -> %s", self.text, tokens)
        return tokens


def tokenize(text: str) -> List[Token]:
    """テキスト1行分をトークン列に変換する。未知の文字は LexError"""
    return Lexer(text).tokenize()
