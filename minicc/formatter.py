"""
画面に出力するフォーマットを行う

"""
from typing import Dict, Iterable, List

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from minicc.errors import MiniError, LexError
from minicc.nodes import Assignment, BinaryOp, Node, NumberLiteral, VariableReference
from minicc.session import StatementResult
from minicc.tokens import Token


class MiniFormatter:
    """トークン・構文木・記号表・実行結果を rich の表示オブジェクトに整形するクラス"""

    def format_tokens(self, tokens: List[Token], title: str = "Tokens") -> Table:
        table = Table(title=title, title_justify="left")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Type", style="cyan")
        table.add_column("Value", style="green")
        table.add_column("Pos", justify="right", style="dim")
        for i, token in enumerate(tokens, start=1):
            table.add_row(str(i), token.kind.value, repr(token.lexeme), str(token.position))
        return table

    def format_tree(self, node: Node, tree: Tree = None) -> Tree:
        """
        構文木を rich.Tree に変換する

        Args:
            node: ASTノード
            tree: 追加先の親（省略時は新しい木を作る）

        Returns:
            ノードを追加した木
        """
        match node:
            case NumberLiteral(value=value):
                label = f"[green]NumberLiteral[/green] {value}"
                children = []
            case VariableReference(name=name):
                label = f"[cyan]VariableReference[/cyan] {name}"
                children = []
            case BinaryOp(operator=op, left=left, right=right):
                label = f"[magenta]BinaryOp[/magenta] {op}"
                children = [left, right]
            case Assignment(name=name, value=value):
                label = f"[bold yellow]Assignment[/bold yellow] {name} ="
                children = [value]
            case _:
                raise TypeError(f"not an AST node: {node!r}")

        branch = Tree(label) if tree is None else tree.add(label)
        for child in children:
            self.format_tree(child, branch)
        return branch

    def format_symbols(self, symbols: Dict[str, int]):
        if not symbols:
            return Text("  [Empty] No variables declared yet.", style="dim")
        table = Table(title="Symbol Table", title_justify="left")
        table.add_column("Variable", style="cyan")
        table.add_column("Value", justify="right", style="green")
        for name, value in symbols.items():
            table.add_row(name, str(value))
        return table

    def format_result(self, result: StatementResult) -> str:
        if result.ok:
            return f"[green]{result.name}[/green] = {result.value}"
        return self.format_error(result.error, result.source)

    def format_results(self, results: Iterable[StatementResult]) -> List[str]:
        return [self.format_result(r) for r in results]

    def format_error(self, error: MiniError, source: str = None) -> str:
        message = f"[bold red]{error.phase}:[/bold red] {escape(str(error))}"
        if isinstance(error, LexError) and source is not None:
            # エラー位置にカーソルを付ける
            return message + f"\n  {escape(source)}\n  {' ' * error.position}[red]^[/red]"
        return message

    def format_settings(self, env: Dict[str, str]) -> Panel:
        lines = [f"{key:<10}: {value}" for key, value in env.items()]
        return Panel("\n".join(lines), title="Settings", border_style="blue", expand=False)
