"""
字句解析の結果となるトークンの定義

"""
from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    NUMBER = "Number"
    IDENTIFIER = "Identifier"
    ASSIGN = "Assign"
    PLUS = "Plus"
    MINUS = "Minus"
    STAR = "Star"
    SLASH = "Slash"
    SEMICOLON = "Semicolon"
    EOF = "EOF"

    def __str__(self):
        return self.name


# 1文字の演算子 -> トークン種別
SINGLE_CHAR_TOKENS = {
    "=": TokenKind.ASSIGN,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    ";": TokenKind.SEMICOLON,
}


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    lexeme: str
    position: int = 0   # 入力文字列中の開始位置(0始まり)

    def __repr__(self):
        if self.lexeme:
            return f"{self.kind}({self.lexeme})"
        return f"{self.kind}"
