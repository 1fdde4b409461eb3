"""
定数・システム設定・ハイライト用レキサなど、各モジュールで共有するクラス

"""
import configparser
import logging

from rich.console import Console

from minicc.errors import ConfigError

logger = logging.getLogger(__name__)

console = Console()


# ===== 定数定義 =====
class Constants:
    """定数クラス"""
    DEFAULT_ECHO = "Yes"
    DEFAULT_LOG = "No"
    DEFAULT_SEMICOLON = "Yes"
    DEFAULT_ANALYZE = "Yes"
    DEFAULT_TOKENS = "No"
    DEFAULT_TREE = "No"
    DEFAULT_INT32 = "No"

    CONFIG_FILE = "minicc.ini"
    CONFIG_SECTION = "ENV"

    TRUE_WORDS = ("1", "on", "true", "yes")
    FALSE_WORDS = ("0", "off", "false", "no")
    LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

    # エラーハンドリングのデモで使う文（x は未宣言）
    DEMO_SOURCE = "y = x + 1;"

    """エラーメッセージ"""
    ERR_BOOLEAN = "{key} には on/off, yes/no, true/false, 1/0 のいずれかを指定してください。"
    ERR_LOG = "Log には Yes/No または DEBUG, INFO, WARNING, ERROR, CRITICAL を指定してください。"
    ERR_UNKNOWN_KEY = "設定項目 {key} はありません。"


def boolean_setter(key_name: str):
    """
    1/0, on/off, true/false, yes/no を Yes/No に変換するデコレータ
    """
    def decorator(func):
        def wrapper(self, value):
            s_val = str(value).strip().strip('"').lower()
            if s_val in Constants.FALSE_WORDS:
                final_val = "No"
            elif s_val in Constants.TRUE_WORDS:
                final_val = "Yes"
            else:
                raise ConfigError(Constants.ERR_BOOLEAN.format(key=key_name))

            self.env[key_name] = final_val
            return f"{key_name} mode: {self.env.get(key_name)}"
        wrapper.__doc__ = func.__doc__
        return wrapper
    return decorator


# ===== システム設定管理クラス =====
class MiniSystemConfig:
    """システム設定管理クラス"""

    def __init__(self):
        self.env = {
            "Echo"      : Constants.DEFAULT_ECHO,
            "Log"       : Constants.DEFAULT_LOG,
            "Semicolon" : Constants.DEFAULT_SEMICOLON,
            "Analyze"   : Constants.DEFAULT_ANALYZE,
            "Tokens"    : Constants.DEFAULT_TOKENS,
            "Tree"      : Constants.DEFAULT_TREE,
            "Int32"     : Constants.DEFAULT_INT32,
        }

    @boolean_setter("Echo")
    def set_Echo(self, value):
        """評価結果を表示するか"""

    @boolean_setter("Semicolon")
    def set_Semicolon(self, value):
        """文末の ; を必須にするか"""

    @boolean_setter("Analyze")
    def set_Analyze(self, value):
        """実行前に意味解析を行うか"""

    @boolean_setter("Tokens")
    def set_Tokens(self, value):
        """実行前にトークン列を表示するか"""

    @boolean_setter("Tree")
    def set_Tree(self, value):
        """実行前に構文木を表示するか"""

    @boolean_setter("Int32")
    def set_Int32(self, value):
        """演算結果を32ビット符号付き整数で桁あふれさせるか"""

    def set_Log(self, value) -> str:
        """ログモードを設定"""
        s_val = str(value).strip().strip('"')
        if s_val.lower() in Constants.TRUE_WORDS:
            s_val = "Yes"
        elif s_val.lower() in Constants.FALSE_WORDS:
            s_val = "No"
        elif s_val.upper() in Constants.LOG_LEVELS:
            s_val = s_val.upper()
        else:
            raise ConfigError(Constants.ERR_LOG)
        self.env["Log"] = s_val
        return f"Log mode: {self.env['Log']}"

    def set(self, key: str, value) -> str:
        """set_<key> を呼び出す"""
        method = getattr(self, f"set_{key}", None)
        if key not in self.env or method is None:
            raise ConfigError(Constants.ERR_UNKNOWN_KEY.format(key=key))
        return method(value)

    def enabled(self, key: str) -> bool:
        return self.env[key] == "Yes"

    @property
    def log_level(self) -> int:
        """Log 設定をロギングのレベルに変換する"""
        log_mode = self.env["Log"]
        if log_mode == "Yes":
            return logging.DEBUG
        if log_mode == "No":
            return logging.CRITICAL
        return getattr(logging, log_mode, logging.CRITICAL)

    def load(self, path: str = Constants.CONFIG_FILE) -> bool:
        """INIファイルの [ENV] セクションを読み込む。ファイルが無ければ既定値のまま"""
        ini = configparser.ConfigParser()
        ini.optionxform = str   # キーの大文字小文字を保持する
        if not ini.read(path, encoding="utf-8"):
            logger.debug("config file not found: %s", path)
            return False
        if Constants.CONFIG_SECTION not in ini:
            return True
        for key, value in ini[Constants.CONFIG_SECTION].items():
            logger.debug("config: %s = %s", key, value)
            self.set(key, value)
        return True


from pygments.lexer import RegexLexer
from pygments.token import Name, Number, Operator, Punctuation, Comment, Text, Error

class MiniLexer(RegexLexer):
    name = 'minicc'

    tokens = {
        'root': [
            # コメント（ファイル読み込み時のみ）
            (r'#.*', Comment.Single),
            # 数値 (NUMBER)
            (r'\d+', Number.Integer),
            # 演算子 (= + - * /)
            (r'[=+\-*/]', Operator),
            # 文末 (;)
            (r';', Punctuation),
            # 識別子 (IDENT)
            (r'[^\W\d_]\w*', Name.Variable),
            # 空白
            (r'\s+', Text),
            # それ以外は字句エラーになる文字
            (r'.', Error),
        ]
    }
