"""
構文解析: トークン列から1文分の Assignment ノードを作る（再帰下降・先読み1トークン）

    statement  := IDENT '=' expression [';']
    expression := term (('+' | '-') term)*
    term       := factor (('*' | '/') factor)*
    factor     := NUMBER | IDENT

括弧・単項マイナスは扱わない。
"""
from typing import List, Sequence

from minicc.errors import LiteralTooLargeError, ParseError
from minicc.nodes import Assignment, BinaryOp, NumberLiteral, VariableReference, max_int_digits
from minicc.tokens import Token, TokenKind

import logging
logger = logging.getLogger(__name__)

ADDITIVE = {TokenKind.PLUS: "+", TokenKind.MINUS: "-"}
MULTIPLICATIVE = {TokenKind.STAR: "*", TokenKind.SLASH: "/"}


class Parser:
    def __init__(self, tokens: Sequence[Token], require_semicolon: bool = True):
        self.tokens = list(tokens)
        # EOF で終わらないトークン列にも対応する
        if not self.tokens or self.tokens[-1].kind is not TokenKind.EOF:
            end = self.tokens[-1].position + len(self.tokens[-1].lexeme) if self.tokens else 0
            self.tokens.append(Token(TokenKind.EOF, "", end))
        self.pos = 0
        self.require_semicolon = require_semicolon
        # 直前に解析した文のソース上の範囲 (開始, 終了)
        self.span = (0, 0)

    def peek(self) -> Token:
        return self.tokens[self.pos]

    def advance(self) -> Token:
        token = self.tokens[self.pos]
        # EOF の先には進まない
        if token.kind is not TokenKind.EOF:
            self.pos += 1
        return token

    def eat(self, kind: TokenKind) -> Token:
        token = self.peek()
        if token.kind is not kind:
            raise ParseError(kind, token.kind)
        return self.advance()

    def at_end(self) -> bool:
        return self.peek().kind is TokenKind.EOF

    # --- 文 ---
    def parse_statement(self) -> Assignment:
        start = self.peek().position
        name = self.eat(TokenKind.IDENTIFIER).lexeme
        self.eat(TokenKind.ASSIGN)
        value = self.parse_expression()

        if self.require_semicolon:
            self.eat(TokenKind.SEMICOLON)
        elif self.peek().kind is TokenKind.SEMICOLON:
            self.advance()

        last = self.tokens[self.pos - 1]
        self.span = (start, last.position + len(last.lexeme))
        node = Assignment(name, value)
        logger.debug("parse_statement: %s", node)
        return node

    # --- 式 ---
    def parse_expression(self):
        left = self.parse_term()
        while self.peek().kind in ADDITIVE:
            op = ADDITIVE[self.advance().kind]
            left = BinaryOp(op, left, self.parse_term())
        return left

    def parse_term(self):
        left = self.parse_factor()
        while self.peek().kind in MULTIPLICATIVE:
            op = MULTIPLICATIVE[self.advance().kind]
            left = BinaryOp(op, left, self.parse_factor())
        return left

    def parse_factor(self):
        token = self.peek()
        match token.kind:
            case TokenKind.NUMBER:
                self.advance()
                # 上限を超える桁数は int() が ValueError になるので先に検査する
                limit = max_int_digits()
                if limit and len(token.lexeme) > limit:
                    raise LiteralTooLargeError(token.lexeme, limit)
                return NumberLiteral(int(token.lexeme))
            case TokenKind.IDENTIFIER:
                self.advance()
                return VariableReference(token.lexeme)
            case _:
                raise ParseError((TokenKind.NUMBER, TokenKind.IDENTIFIER), token.kind)


def parse(tokens: Sequence[Token], require_semicolon: bool = True) -> Assignment:
    """先頭の1文だけを解析する。後続のトークンは読まずに残す"""
    return Parser(tokens, require_semicolon).parse_statement()


def parse_program(tokens: Sequence[Token], require_semicolon: bool = True) -> List[Assignment]:
    """EOF まで文を繰り返し解析する。空の入力なら空リスト"""
    parser = Parser(tokens, require_semicolon)
    statements = []
    while not parser.at_end():
        statements.append(parser.parse_statement())
    return statements
