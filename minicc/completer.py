from prompt_toolkit.completion import WordCompleter

from minicc.classes import MiniSystemConfig

mini_completer = WordCompleter([
    'run', 'tokens', 'syntax', 'check',                 # 上位ほど優先順位が高い
    'vars', 'reset', 'load', 'demo',
    'set', 'show', 'help', 'exit', 'quit',
    ### 設定項目 ###
    *MiniSystemConfig().env.keys(),
    'on', 'off',
], ignore_case=True) # 大文字小文字を区別しない設定
