# hp45_core/instructions/maps.py
"""
命令クラスごとのオペレーションキーと命令実装のマッピング定義。

各テーブルはハードウェアのマイクロコードで決まっている閉じた対応表です。
テーブルに存在しないキーは「未定義」として扱われます
（算術/レジスタ命令のみ、成功扱いのNOPになります）。
"""
from typing import Dict

from . import arithmetic, status, pointer, data_entry, misc
from .base import RegisterOp, OperandOp

# @intent:map 算術/レジスタ命令: フラグメントのビット3-7（5ビット）から実装へのマッピング。
ARITHMETIC_MAP: Dict[int, RegisterOp] = {
    # Clear
    23: arithmetic.clear_a,
    1: arithmetic.clear_b,
    6: arithmetic.clear_c,

    # Transfer / Exchange
    9: arithmetic.a_to_b,
    4: arithmetic.b_to_c,
    12: arithmetic.c_to_a,
    25: arithmetic.exchange_a_b,
    17: arithmetic.exchange_b_c,
    29: arithmetic.exchange_c_a,

    # Add / Subtract
    14: arithmetic.a_plus_c_to_c,
    10: arithmetic.a_minus_c_to_c,
    28: arithmetic.a_plus_b_to_a,
    24: arithmetic.a_minus_b_to_a,
    30: arithmetic.a_plus_c_to_a,
    26: arithmetic.a_minus_c_to_a,
    21: arithmetic.c_plus_c_to_c,

    # Compare
    0: arithmetic.compare_b_zero,
    13: arithmetic.compare_c_zero,
    2: arithmetic.compare_a_ge_c,
    16: arithmetic.compare_a_ge_b,
    19: arithmetic.compare_a_ge_one,
    3: arithmetic.compare_c_ge_one,

    # Complement
    5: arithmetic.tens_complement_c,
    7: arithmetic.nines_complement_c,

    # Increment / Decrement
    31: arithmetic.increment_a,
    15: arithmetic.increment_c,
    27: arithmetic.decrement_a,
    11: arithmetic.decrement_c,

    # Shift
    22: arithmetic.shift_right_a,
    20: arithmetic.shift_right_b,
    18: arithmetic.shift_right_c,
    8: arithmetic.shift_left_a,
}

# @intent:map ステータス操作命令: 操作選択（フラグメントのビット2-3）から実装へのマッピング。
STATUS_MAP: Dict[int, OperandOp] = {
    0: status.set_flag,
    1: status.interrogate_flag,
    2: status.reset_flag,
    3: status.clear_flags,
}

# @intent:map ポインタ操作命令: 操作選択から実装へのマッピング。
POINTER_MAP: Dict[int, OperandOp] = {
    0: pointer.set_pointer,
    1: pointer.decrement_pointer,
    2: pointer.interrogate_pointer,
    3: pointer.increment_pointer,
}

# @intent:map データ入力/表示命令: 操作選択0-1から実装へのマッピング。
# 操作選択2と3は共通で、オペランドNにより DISPLAY_MAP で分岐します。
DATA_ENTRY_MAP: Dict[int, OperandOp] = {
    0: data_entry.undefined,
    1: data_entry.load_constant,
}

# @intent:map 表示/レジスタ転送命令: オペランドN（4ビット）から実装へのマッピング。
DISPLAY_MAP = {
    0: data_entry.display_toggle,
    2: data_entry.exchange_c_m,
    4: data_entry.stack_up,
    6: data_entry.stack_down,
    8: data_entry.display_off,
    10: data_entry.recall_m,
    11: data_entry.recall_data,
    12: data_entry.rotate_down,
    14: data_entry.clear_registers,

    # Unsupported on the HP-45
    1: data_entry.is_to_a,
    5: data_entry.is_to_a,
    9: data_entry.is_to_a,
    13: data_entry.is_to_a,
    3: data_entry.bcd_to_c,
    7: data_entry.bcd_to_c,
    15: data_entry.bcd_to_c,
}

# @intent:map タイプ6命令: フラグメントのビット3-4から実装へのマッピング。
MISC_MAP: Dict[int, OperandOp] = {
    0: misc.rom_select,
    1: misc.subroutine_return,
    2: misc.keyboard_entry,
    3: misc.data_storage,
}
