"""
抽象構文木(AST)のノード

ノードは4種類に閉じている。解析器・インタプリタは match 文でこの4種類を網羅する。
"""
import sys
from dataclasses import dataclass
from typing import Union

OPERATORS = ("+", "-", "*", "/")


@dataclass(frozen=True)
class NumberLiteral:
    value: int


@dataclass(frozen=True)
class VariableReference:
    name: str


@dataclass(frozen=True)
class BinaryOp:
    operator: str
    left: "Node"
    right: "Node"

    def __post_init__(self):
        if self.operator not in OPERATORS:
            raise ValueError(f"unknown operator: {self.operator!r}")


@dataclass(frozen=True)
class Assignment:
    name: str
    value: "Node"


Node = Union[NumberLiteral, VariableReference, BinaryOp, Assignment]


def ast_to_dict(node: Node) -> dict:
    """ASTを辞書に変換する（表示・デバッグ用）"""
    match node:
        case NumberLiteral(value=value):
            return {"type": "NumberLiteral", "value": value}
        case VariableReference(name=name):
            return {"type": "VariableReference", "name": name}
        case BinaryOp(operator=op, left=left, right=right):
            return {"type": "BinaryOp", "operator": op,
                    "left": ast_to_dict(left), "right": ast_to_dict(right)}
        case Assignment(name=name, value=value):
            return {"type": "Assignment", "name": name, "value": ast_to_dict(value)}
        case _:
            raise TypeError(f"not an AST node: {node!r}")


def to_source(node: Node) -> str:
    """ASTをソース表記に戻す。優先順位どおりに読めるよう二項演算は括弧で囲む"""
    match node:
        case NumberLiteral(value=value):
            return str(value)
        case VariableReference(name=name):
            return name
        case BinaryOp(operator=op, left=left, right=right):
            return f"({to_source(left)} {op} {to_source(right)})"
        case Assignment(name=name, value=value):
            return f"{name} = {to_source(value)};"
        case _:
            raise TypeError(f"not an AST node: {node!r}")


def max_int_digits() -> int:
    """整数を10進文字列に変換できる桁数の上限。0 なら上限なし（Python 3.11 未満も 0）"""
    get_limit = getattr(sys, "get_int_max_str_digits", None)
    return get_limit() if get_limit is not None else 0
