help_help = [
        "\n" + "="*30,
        "【入力形式のガイド】",
        "  代入 : 変数 = 式;",
        "  式   : 整数・変数と + - * / の組み合わせ（* / が優先、左結合）",
        "  例   : x = 3 + 4 * 2;",
        "",
        "1行に複数の文を書けます。 例: a = 1; b = a * 2;",
        "変数は代入してからでないと参照できません。",
        "括弧と単項マイナスは使えません。除算は0方向に切り捨てます。",
        "",
        "フェーズごとに確認するには tokens / syntax / check を使います。",
        "記号表は vars、初期化は reset で行います。",
        "設定の確認は show、変更は set <項目> <値> です。",
        "コマンド名や設定項目はTabキーで文字入力補完機能が使えます。",

        "- 終了するには 'exit' または 'quit' と入力してください。",
        "="*30 + "\n",
]


setting_help = {
    "Echo":     "実行結果を表示する (Yes/No)",
    "Log":      "ログ出力 (Yes/No または DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    "Semicolon": "文末の ; を必須にする (Yes/No)\n" \
                 "No の場合 ; は省略可能。 例: x = 1 + 2",
    "Analyze":  "実行前に意味解析（宣言チェック）を行う (Yes/No)",
    "Tokens":   "実行前にトークン列を表示する (Yes/No)",
    "Tree":     "実行前に構文木を表示する (Yes/No)",
    "Int32":    "演算結果を32ビット符号付き整数で桁あふれさせる (Yes/No)",
}
