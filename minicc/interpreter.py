"""
インタプリタ: ASTを後順で評価し、代入を変数表に反映する
"""
from typing import Dict, MutableMapping

from minicc.errors import DivisionByZeroError, IntegerTooLargeError, UnboundVariableError
from minicc.nodes import Assignment, BinaryOp, Node, NumberLiteral, VariableReference, max_int_digits

import logging
logger = logging.getLogger(__name__)

INT32_MIN = -2**31
INT32_MOD = 2**32


def wrap_int32(value: int) -> int:
    """符号付き32ビット整数として桁あふれさせる"""
    return (value - INT32_MIN) % INT32_MOD + INT32_MIN


def check_digits(value: int) -> int:
    """10進で表示できない大きさの整数は IntegerTooLargeError"""
    limit = max_int_digits()
    # log2(10) より小さい係数で見積もる。ビット数がこれ以下なら桁数は limit 以下
    if not limit or value.bit_length() <= limit * 3321 // 1000:
        return value
    if abs(value) >= 10 ** limit:
        raise IntegerTooLargeError(limit)
    return value


def truncating_div(left: int, right: int) -> int:
    """0方向への切り捨て除算（Python の // は負の無限大方向なので使わない）"""
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


class Interpreter:
    def __init__(self, store: MutableMapping[str, int], int32: bool = False):
        self.store = store
        self.int32 = int32

    def evaluate(self, node: Node) -> int:
        # 代入はいったん pending に溜め、評価がすべて成功してから変数表へ書き込む
        pending: Dict[str, int] = {}
        result = self.visit(node, pending)
        self.store.update(pending)
        return result

    def lookup(self, name: str, pending: Dict[str, int]) -> int:
        if name in pending:
            return pending[name]
        if name not in self.store:
            raise UnboundVariableError(name)
        return self.store[name]

    def visit(self, node: Node, pending: Dict[str, int]) -> int:
        match node:
            case NumberLiteral(value=value):
                return self.normalize(value)
            case VariableReference(name=name):
                return self.lookup(name, pending)
            case Assignment(name=name, value=expr):
                value = self.visit(expr, pending)
                pending[name] = value
                logger.debug("%s <- %s", name, value)
                return value
            case BinaryOp(operator=op, left=left, right=right):
                # 左右とも必ず評価する（左が先）
                lhs = self.visit(left, pending)
                rhs = self.visit(right, pending)
                return self.normalize(self.apply(op, lhs, rhs))
            case _:
                raise TypeError(f"Invalid AST node: {type(node).__name__}")

    def apply(self, op: str, lhs: int, rhs: int) -> int:
        match op:
            case "+":
                return lhs + rhs
            case "-":
                return lhs - rhs
            case "*":
                return lhs * rhs
            case "/":
                if rhs == 0:
                    raise DivisionByZeroError()
                return truncating_div(lhs, rhs)
            case _:
                raise ValueError(f"Unknown operator: {op}")

    def normalize(self, value: int) -> int:
        if self.int32:
            return wrap_int32(value)
        return check_digits(value)


def evaluate(ast: Node, store: MutableMapping[str, int], int32: bool = False) -> int:
    """評価結果を返す。成功したときだけ store が更新される"""
    return Interpreter(store, int32).evaluate(ast)
