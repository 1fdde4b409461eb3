import logging # ログの設定
logging.basicConfig(
level=logging.WARNING, # 出力レベル (DEBUG, INFO, WARNING, ERROR, CRITICAL)
format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger =  logging.getLogger(__name__)

import cmd
import sys

from minicc.classes import Constants, MiniSystemConfig, MiniLexer
from minicc.classes import console
from minicc.completer import mini_completer
from minicc.errors import MiniError
from minicc.formatter import MiniFormatter
from minicc.minihelp import help_help, setting_help
from minicc.parser import parse_program
from minicc.session import MiniSession

# 入力中のコマンドにシンタックスハイライト
from prompt_toolkit import PromptSession
from prompt_toolkit.lexers import PygmentsLexer
from prompt_toolkit.formatted_text import HTML

from prompt_toolkit.styles.pygments import style_from_pygments_cls
from pygments.styles import get_style_by_name

# 黒背景に映える鮮やかな配色を適用
selected_style = style_from_pygments_cls(get_style_by_name('paraiso-dark'))

from rich.panel import Panel


class MiniShell(cmd.Cmd):
    ## ここでHelpの見出しをカスタマイズ
    doc_header = "実行可能なコマンド一覧:"
    undoc_header = "ヘルプ未作成のコマンド:"

    # prompt_toolkitで使うためのHTMLタグ付きプロンプト
    colored_prompt = HTML('<ansicyan>minicc</ansicyan><ansigray>></ansigray> ')
    prompt = "minicc> "

    intro_text = """
[bold magenta]MINI COMPILER[/bold magenta] [dim]lexer / parser / semantic / interpreter[/dim]

    [cyan]Type 'help' for commands, 'exit' to quit.[/cyan]
    """

    def __init__(self, session: MiniSession = None):
        super().__init__()
        self.session = session or MiniSession()
        self.config = self.session.config
        self.formatter = MiniFormatter()
        self.prompt_session = None

    def cmdloop(self, intro=None):
        # 標準のイントロ表示をスキップし、Richで表示
        console.print(Panel(self.intro_text, border_style="blue"))

        # 入力ハイライト用のセッション
        self.prompt_session = PromptSession(
                lexer=PygmentsLexer(MiniLexer),   # シンタックスハイライト
                completer=mini_completer,         # 補完機能
                style=selected_style
        )
        stop = None
        while not stop:
            try:
                text = self.prompt_session.prompt(self.colored_prompt, reserve_space_for_menu=0)
            except EOFError:
                break
            except KeyboardInterrupt:
                continue
            line = self.precmd(text)
            stop = self.onecmd(line)
            stop = self.postcmd(stop, line)

    def precmd(self, line):
        logging.getLogger().setLevel(self.config.log_level)
        # "vars = 1;" のようにコマンド名と同じ変数への代入はプログラムとして扱う
        command, arg, line = self.parseline(line)
        if command and arg and arg.startswith("="):
            return f"run {line}"
        return line

    def emptyline(self):
        # 何もしないように上書き（これがないと直前のコマンドが走る）
        pass

    def default(self, line):
        # コマンド以外の入力はすべてプログラムとして実行する
        self.do_run(line)

    def report(self, error: MiniError, source: str = None):
        console.print(self.formatter.format_error(error, source))

    # --- コンパイラのフェーズ ---
    def do_run(self, line):
        """run <文> : 字句解析から実行までを行う（コマンド名は省略可）"""
        if not line.strip():
            return
        logger.debug("run: %s", line)

        if self.config.enabled("Tokens") or self.config.enabled("Tree"):
            self.show_phases(line)

        for result in self.session.execute(line):
            if not result.ok:
                console.print(self.formatter.format_result(result))
            elif self.config.enabled("Echo"):
                console.print(self.formatter.format_result(result))

    def show_phases(self, line):
        try:
            tokens = self.session.lex(line)
            if self.config.enabled("Tokens"):
                console.print(self.formatter.format_tokens(tokens))
            if self.config.enabled("Tree"):
                for ast in parse_program(tokens, self.config.enabled("Semicolon")):
                    console.print(self.formatter.format_tree(ast))
        except MiniError as e:
            # エラーは続く実行で表示される
            logger.debug("show_phases: %s", e)

    def do_tokens(self, line):
        """tokens <文> : 字句解析の結果を表示する"""
        try:
            tokens = self.session.lex(line)
        except MiniError as e:
            self.report(e, line)
            return
        console.print(self.formatter.format_tokens(tokens))

    def do_syntax(self, line):
        """syntax <文> : 構文解析を行い構文木を表示する"""
        try:
            statements = self.session.syntax(line)
        except MiniError as e:
            self.report(e, line)
            return
        for i, ast in enumerate(statements, start=1):
            console.print(self.formatter.format_tree(ast))
            console.print(f"Statement {i}: [green]Syntax OK[/green]")

    def do_check(self, line):
        """check <文> : 意味解析（宣言チェック）を行う。受理された変数は宣言済みになる"""
        try:
            names = self.session.check(line)
        except MiniError as e:
            self.report(e, line)
            return
        for i, name in enumerate(names, start=1):
            console.print(f"Statement {i}: [green]Semantic OK[/green] ({name} declared)")

    def do_vars(self, arg):
        """vars : 記号表（変数と値）を表示する"""
        console.print(self.formatter.format_symbols(self.session.symbols()))

    def do_reset(self, arg):
        """reset : 記号表と宣言済み変数をすべて消去する"""
        self.session.reset()
        console.print("記号表を初期化しました")

    def do_load(self, arg):
        """load <ファイル名> : ファイルの各行を順に実行する"""
        path = arg.strip()
        if not path:
            console.print("ファイル名を入力してください")
            return
        try:
            results = self.session.run_file(path)
        except OSError as e:
            console.print(f"[red]Error:[/red] {e}")
            return
        for result in results:
            if not result.ok or self.config.enabled("Echo"):
                console.print(self.formatter.format_result(result))

    def do_demo(self, arg):
        """demo : 未宣言変数を参照するエラーハンドリングのデモ"""
        console.print(f"🛠 Using demo code for error handling:\n{Constants.DEMO_SOURCE}")
        try:
            self.session.check(Constants.DEMO_SOURCE)
        except MiniError as e:
            self.report(e, Constants.DEMO_SOURCE)
            return
        console.print("[green]Semantic OK[/green]")

    # --- 設定 ---
    def do_set(self, arg):
        """set <項目> <値> : 設定を変更する 例: set Echo off"""
        parts = arg.split()
        if len(parts) != 2:
            console.print("使い方: set <項目> <値>")
            return
        key, value = parts
        # 項目名は大文字小文字を区別しない
        key = next((k for k in self.config.env if k.lower() == key.lower()), key)
        try:
            console.print(self.config.set(key, value))
        except MiniError as e:
            self.report(e)

    def complete_set(self, text, line, begidx, endidx):
        return [k for k in self.config.env if k.lower().startswith(text.lower())]

    def do_show(self, arg):
        """show : 現在の設定を表示する"""
        console.print(self.formatter.format_settings(self.config.env))

    # --- シェル制御コマンド ---
    def do_exit(self, arg):
        """exit : 終了する"""
        console.print("minicc を終了します")
        return True # Trueを返すとループが終了する

    def do_quit(self, arg):
        """終了コマンド"""
        return True

    # EOF (Ctrl+D) での終了対応
    def do_EOF(self, arg):
        print()
        return True

    def do_help(self, arg):
        """
        help と打つとコマンド一覧、help [コマンド名|設定項目] で詳細を表示します。
        """
        if not arg:
            console.print("\n".join(help_help), markup=False)
        elif arg in setting_help:
            console.print(f"{arg}: {setting_help[arg]}")
            return
        return cmd.Cmd.do_help(self, arg)


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv

    config = MiniSystemConfig()
    try:
        config.load()
    except MiniError as e:
        console.print(f"[red]{Constants.CONFIG_FILE}:[/red] {e}")
    shell = MiniShell(MiniSession(config))

    # 引数にファイルが指定されたら実行して終了
    if argv:
        for path in argv:
            shell.onecmd(f"load {path}")
        return 0

    try:
        shell.cmdloop()
    except KeyboardInterrupt:
        # Ctrl+C での強制終了をきれいに処理
        print("\nGoodbye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
