"""
minicc: 整数の代入文だけを扱う小さなコンパイラ

    text -> tokenize -> parse -> analyze / evaluate
"""
from minicc.analyzer import analyze
from minicc.interpreter import evaluate
from minicc.lexer import tokenize
from minicc.parser import parse, parse_program
from minicc.session import MiniSession, StatementResult

__version__ = "0.1.0"
