"""
コンパイラ各フェーズのエラー

どのエラーも処理中の1文だけを中断する。変数表・宣言済み集合は文の開始前の状態に保たれる。
"""
from minicc.tokens import TokenKind


class MiniError(Exception):
    """minicc の全エラーの基底クラス"""
    phase = "Error"


class LexError(MiniError):
    phase = "Lexical Error"

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(f"Unknown character {char!r} at position {position}")


class ParseError(MiniError):
    phase = "Syntax Error"

    def __init__(self, expected, found):
        # expected は TokenKind 1つ、またはそのタプル
        if not isinstance(expected, tuple):
            expected = (expected,)
        self.expected = expected
        self.found = found
        names = " or ".join(str(kind) for kind in expected)
        super().__init__(f"Expected {names} but found {found}")


class SemanticError(MiniError):
    phase = "Semantic Error"


class UndeclaredVariableError(SemanticError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Undeclared variable: {name}")


class EvaluationError(MiniError):
    phase = "Runtime Error"


class UnboundVariableError(EvaluationError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Variable '{name}' is not initialized.")


class DivisionByZeroError(EvaluationError):
    def __init__(self):
        super().__init__("Division by zero")


class ConfigError(MiniError):
    phase = "Config Error"


class LiteralTooLargeError(ParseError):
    """10進の桁数が上限を超える数値リテラル"""

    def __init__(self, lexeme: str, limit: int):
        self.lexeme = lexeme
        self.limit = limit
        MiniError.__init__(self, f"Integer literal has {len(lexeme)} digits (limit {limit})")
        self.expected = (TokenKind.NUMBER,)
        self.found = TokenKind.NUMBER


class IntegerTooLargeError(EvaluationError):
    """計算結果の10進の桁数が上限を超えた"""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Integer result exceeds {limit} digits")
