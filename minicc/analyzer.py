"""
意味解析: 参照している変数が宣言済みかどうかを検査する

変数の値には触れず、名前だけを扱う。代入は右辺を先に検査してから左辺の名前を宣言済みにする。
"""
from typing import MutableSet

from minicc.errors import UndeclaredVariableError
from minicc.nodes import Assignment, BinaryOp, Node, NumberLiteral, VariableReference

import logging
logger = logging.getLogger(__name__)


class SemanticAnalyzer:
    def __init__(self, declared: MutableSet[str]):
        self.declared = declared

    def analyze(self, node: Node) -> None:
        # 作業用コピーで検査し、成功したときだけ反映する
        symbols = set(self.declared)
        self.visit(node, symbols)
        added = symbols - self.declared
        if added:
            logger.debug("declare: %s", sorted(added))
        self.declared |= added

    def visit(self, node: Node, symbols: set) -> None:
        match node:
            case NumberLiteral():
                pass
            case VariableReference(name=name):
                if name not in symbols:
                    raise UndeclaredVariableError(name)
            case BinaryOp(left=left, right=right):
                self.visit(left, symbols)
                self.visit(right, symbols)
            case Assignment(name=name, value=value):
                self.visit(value, symbols)
                symbols.add(name)
            case _:
                raise TypeError(f"Unknown AST node type: {type(node).__name__}")


def analyze(ast: Node, declared: MutableSet[str]) -> None:
    """成功すると declared に代入先の名前が追加される"""
    SemanticAnalyzer(declared).analyze(ast)
