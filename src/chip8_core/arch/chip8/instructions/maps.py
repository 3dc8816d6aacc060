"""
命令ワードと命令実装のマッピング定義。

CHIP-8は上位4bit（オペコードファミリ）でディスパッチしますが、
ファミリ0x0のみ16bitワード全体で命令が決まります。
そのため、完全一致のワードテーブルを先に引き、次にファミリテーブルを引きます。
"""
from . import control
from . import display
from . import load

# @intent:map 16bitワード完全一致からデコード関数へのマッピングテーブル。
DECODE_WORD_MAP = {
    0x00E0: display.decode_cls,
    0x00EE: control.decode_ret,
}

# @intent:map オペコードファミリ（上位4bit）からデコード関数へのマッピングテーブル。
DECODE_FAMILY_MAP = {
    0x0: control.decode_sys,
    0x1: control.decode_jp,
    0x2: control.decode_call,
    0xA: load.decode_ld_i,
}

# @intent:map 16bitワード完全一致から実行関数へのマッピングテーブル。
EXECUTE_WORD_MAP = {
    0x00E0: display.execute_cls,
    0x00EE: control.execute_ret,
}

# @intent:map オペコードファミリ（上位4bit）から実行関数へのマッピングテーブル。
EXECUTE_FAMILY_MAP = {
    0x0: control.execute_sys,
    0x1: control.execute_jp,
    0x2: control.execute_call,
    0xA: load.execute_ld_i,
}

# @intent:utility_function ワードテーブル、ファミリテーブルの順にハンドラを検索します。
def lookup(word: int, word_map: dict, family_map: dict):
    handler = word_map.get(word)
    if handler is None:
        handler = family_map.get(word >> 12)
    return handler
