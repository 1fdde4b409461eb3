"""
意味解析のユニットテスト

使用方法:
    python -m pytest minicc/test_analyzer.py -v
"""
import unittest

from minicc.analyzer import SemanticAnalyzer, analyze
from minicc.errors import SemanticError, UndeclaredVariableError
from minicc.lexer import tokenize
from minicc.nodes import Assignment, BinaryOp, NumberLiteral, VariableReference
from minicc.parser import parse


def ast_of(text):
    return parse(tokenize(text))


class TestAnalyze(unittest.TestCase):
    """analyze のテスト"""

    def setUp(self):
        """テストの前準備"""
        self.declared = set()

    def test_declares_target(self):
        """受理された代入の左辺は宣言済みになる"""
        analyze(ast_of("x = 1 + 2;"), self.declared)
        self.assertEqual(self.declared, {"x"})

    def test_undeclared_reference(self):
        """未宣言の変数の参照はエラーで、宣言済み集合は変わらない"""
        with self.assertRaises(UndeclaredVariableError) as cm:
            analyze(ast_of("y = x + 1;"), self.declared)
        self.assertEqual(cm.exception.name, "x")
        self.assertIsInstance(cm.exception, SemanticError)
        self.assertEqual(self.declared, set())

    def test_declared_reference(self):
        """宣言済みの変数は参照できる"""
        self.declared.add("x")
        analyze(ast_of("y = x + 1;"), self.declared)
        self.assertEqual(self.declared, {"x", "y"})

    def test_self_reference_requires_earlier_declaration(self):
        """自分自身の右辺では、以前に宣言されていない限り参照できない"""
        with self.assertRaises(UndeclaredVariableError):
            analyze(ast_of("v = v + 1;"), self.declared)

        analyze(ast_of("v = 1;"), self.declared)
        analyze(ast_of("v = v + 1;"), self.declared)
        self.assertEqual(self.declared, {"v"})

    def test_later_statements_see_declaration(self):
        """文 i で宣言した変数は後続のすべての文で参照できる"""
        statements = ["a = 1;", "b = a;", "c = a * b;", "d = c - b - a;"]
        for text in statements:
            analyze(ast_of(text), self.declared)
        self.assertEqual(self.declared, {"a", "b", "c", "d"})

    def test_left_to_right(self):
        """左から順に検査し、最初の未宣言変数を報告する"""
        with self.assertRaises(UndeclaredVariableError) as cm:
            analyze(ast_of("z = a + b;"), self.declared)
        self.assertEqual(cm.exception.name, "a")

        self.declared.add("a")
        with self.assertRaises(UndeclaredVariableError) as cm:
            analyze(ast_of("z = a + b;"), self.declared)
        self.assertEqual(cm.exception.name, "b")

    def test_number_literal_is_noop(self):
        """数値リテラルだけの木は何も変えない"""
        analyze(NumberLiteral(5), self.declared)
        self.assertEqual(self.declared, set())

    def test_no_partial_declaration(self):
        """途中で失敗した場合、それまでの宣言も反映しない"""
        tree = BinaryOp("+", Assignment("a", NumberLiteral(1)), VariableReference("b"))
        with self.assertRaises(UndeclaredVariableError):
            analyze(tree, self.declared)
        self.assertEqual(self.declared, set())

    def test_unknown_node(self):
        """ASTノード以外は受け付けない"""
        with self.assertRaises(TypeError):
            SemanticAnalyzer(self.declared).analyze("x")


if __name__ == '__main__':
    unittest.main(verbosity=2)
