"""
コンパイラの各フェーズをまとめて実行するセッション

セッションごとに変数表と宣言済み集合を1組ずつ持つ。複数のセッション間で共有はしない。
"""
from dataclasses import dataclass
from typing import Dict, List, Optional, Set, Tuple

from minicc.analyzer import analyze
from minicc.classes import MiniSystemConfig
from minicc.errors import MiniError
from minicc.interpreter import evaluate
from minicc.lexer import tokenize
from minicc.nodes import Assignment, to_source
from minicc.parser import Parser, parse_program
from minicc.tokens import Token

import logging
logger = logging.getLogger(__name__)


@dataclass
class StatementResult:
    """1文の実行結果。成功なら value、失敗なら error が入る"""
    source: str
    name: Optional[str] = None
    value: Optional[int] = None
    error: Optional[MiniError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class MiniSession:
    def __init__(self, config: Optional[MiniSystemConfig] = None):
        self.config = config or MiniSystemConfig()
        self.store: Dict[str, int] = {}
        self.declared: Set[str] = set()

    # --- フェーズ1: 字句解析 ---
    def lex(self, text: str) -> List[Token]:
        return tokenize(text)

    # --- フェーズ2: 構文解析 ---
    def syntax(self, text: str) -> List[Assignment]:
        tokens = tokenize(text)
        return parse_program(tokens, require_semicolon=self.config.enabled("Semicolon"))

    # --- フェーズ3: 意味解析 ---
    def check(self, text: str) -> List[str]:
        """文ごとに意味解析し、受理された文の代入先を宣言済みにする。受理した名前を返す"""
        accepted = []
        for ast in self.syntax(text):
            analyze(ast, self.declared)
            accepted.append(ast.name)
        return accepted

    # --- フェーズ4: 実行 ---
    def statements(self, text: str) -> List[Tuple[Assignment, str]]:
        """構文解析した文と、その文の入力どおりのテキストの組を返す"""
        parser = Parser(tokenize(text), self.config.enabled("Semicolon"))
        statements = []
        while not parser.at_end():
            ast = parser.parse_statement()
            start, end = parser.span
            statements.append((ast, text[start:end]))
        return statements

    def execute(self, text: str) -> List[StatementResult]:
        try:
            statements = self.statements(text)
        except MiniError as e:
            logger.debug("execute: %s: %s", e.phase, e)
            return [StatementResult(text.rstrip(), error=e)]

        return [self.execute_statement(ast, source) for ast, source in statements]

    def execute_statement(self, ast: Assignment, source: str = None) -> StatementResult:
        if source is None:
            source = to_source(ast)
        # 作業用コピーに対して解析・評価し、文全体が成功してから反映する
        declared = set(self.declared)
        store = dict(self.store)
        try:
            if self.config.enabled("Analyze"):
                analyze(ast, declared)
            value = evaluate(ast, store, int32=self.config.enabled("Int32"))
        except MiniError as e:
            logger.debug("execute: %s -> %s: %s", source, e.phase, e)
            return StatementResult(source, ast.name, error=e)

        declared.add(ast.name)
        self.declared = declared
        self.store = store
        logger.info("execute: %s -> %s", source, value)
        return StatementResult(source, ast.name, value)

    # --- フェーズ5: 記号表 ---
    def symbols(self) -> Dict[str, int]:
        return dict(self.store)

    def reset(self) -> None:
        self.store.clear()
        self.declared.clear()

    def run_file(self, path: str) -> List[StatementResult]:
        """ファイルを1行ずつ実行する。空行と # で始まる行は読み飛ばす"""
        results = []
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                stripped = line.strip()
                if not stripped or stripped.startswith("#"):
                    continue
                results.extend(self.execute(stripped))
        return results
