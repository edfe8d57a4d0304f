# hp45_core/instructions/__init__.py
"""
HP-45命令セット実装パッケージ。

各デコーダはクラス内フラグメント（命令ワードのビット2-9）と状態を受け取り、
maps.py のテーブルを引いて命令を実行し、ステータスコードを返します。
"""
from typing import Callable, Dict

from hp45_core.core.state import Hp45CpuState
from .base import STATUS_OK, STATUS_TYPE7_UNDEFINED, STATUS_TYPE8_UNDEFINED, STATUS_MISC_UNDEFINED
from .base import fragment_of, sub_op, operand_n
from .maps import ARITHMETIC_MAP, STATUS_MAP, POINTER_MAP, DATA_ENTRY_MAP, DISPLAY_MAP, MISC_MAP

# @intent:responsibility 算術/レジスタ命令（xxxx_xxxx_10）をデコードして実行します。
# @intent:rationale テーブルにないキーは成功扱いのNOPとします。他のデコーダと異なり
#                  エラーを返さないのは実機マイクロコード由来の既存の挙動です。
def decode_arithmetic(state: Hp45CpuState, fragment: int) -> int:
    """
    下位3ビットをワードセレクトに設定し、上位5ビットで命令を選びます。
    """
    state.word_select = fragment & 7
    handler = ARITHMETIC_MAP.get(fragment >> 3)
    if handler:
        handler(state)
    return STATUS_OK

# @intent:responsibility ステータス操作命令（xxxx_xx01_00）をデコードして実行します。
def decode_status(state: Hp45CpuState, fragment: int) -> int:
    return STATUS_MAP[sub_op(fragment)](state, operand_n(fragment))

# @intent:responsibility ポインタ操作命令（xxxx_xx11_00）をデコードして実行します。
def decode_pointer(state: Hp45CpuState, fragment: int) -> int:
    return POINTER_MAP[sub_op(fragment)](state, operand_n(fragment))

# @intent:responsibility データ入力/表示命令（xxxx_xx10_00）をデコードして実行します。
def decode_data_entry(state: Hp45CpuState, fragment: int) -> int:
    op = sub_op(fragment)
    n = operand_n(fragment)
    if op in DATA_ENTRY_MAP:
        return DATA_ENTRY_MAP[op](state, n)
    return DISPLAY_MAP[n](state)

# @intent:responsibility ROMセレクト/その他の命令（xxxx_xx00_00）をデコードして実行します。
def decode_misc(state: Hp45CpuState, fragment: int) -> int:
    """
    ビット2: タイプ6, ビット3: タイプ7, ビット4: タイプ8, それ以外: タイプ9/10。
    タイプ9/10はフラグメントが0のNOPのみ定義されています。
    """
    n = fragment >> 5
    if fragment & 0x04:
        return MISC_MAP[(fragment >> 3) & 0x03](state, n)
    if fragment & 0x08:
        return STATUS_TYPE7_UNDEFINED
    if fragment & 0x10:
        return STATUS_TYPE8_UNDEFINED
    if fragment:
        return STATUS_MISC_UNDEFINED
    return STATUS_OK

# @intent:map タイプA命令（下位2ビットが00）のビット2-3からデコーダへのマッピング。
CLASS_A_DECODERS: Dict[int, Callable[[Hp45CpuState, int], int]] = {
    0: decode_misc,
    1: decode_status,
    2: decode_data_entry,
    3: decode_pointer,
}

# @intent:responsibility タイプA命令を4つのクラスデコーダのいずれかへ振り分けます。
def execute_class_a(state: Hp45CpuState, opcode: int) -> int:
    fragment = fragment_of(opcode)
    return CLASS_A_DECODERS[fragment & 0x03](state, fragment)
