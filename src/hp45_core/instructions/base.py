# hp45_core/instructions/base.py
"""
命令デコーダ共通の定義。

各デコーダの戻り値（ステータスコード）と、命令ワードからフィールドを
切り出すユーティリティをまとめています。
"""
from typing import Callable

from hp45_core.core.state import Hp45CpuState

# @intent:constant 命令が正常に適用されたことを示すステータス。
STATUS_OK = 0

# @intent:constant 未定義フラグメントを示す負のステータス（デコーダごとに固有）。
# Status class
STATUS_SET_FLAG_RANGE = -2
STATUS_TEST_FLAG_RANGE = -4
STATUS_RESET_FLAG_RANGE = -7
STATUS_CLEAR_FLAGS_OPERAND = -10
# Data entry/display class
STATUS_DATA_ENTRY_UNDEFINED = -1
STATUS_CONSTANT_RANGE = -2
STATUS_IS_TO_A = -3
STATUS_BCD_TO_C = -4
# ROM select/misc class
STATUS_EXTERNAL_KEY_ENTRY = -1
STATUS_DATA_STORAGE_UNDEFINED = -2
STATUS_TYPE7_UNDEFINED = -3
STATUS_TYPE8_UNDEFINED = -4
STATUS_MISC_UNDEFINED = -5

# @intent:data_structure デコードテーブルに登録されるハンドラの型。
# 算術/レジスタ命令のハンドラは状態のみを受け取り、戻り値を持ちません。
RegisterOp = Callable[[Hp45CpuState], None]
# クラスA命令のハンドラは状態とオペランドNを受け取り、ステータスコードを返します。
OperandOp = Callable[[Hp45CpuState, int], int]

# @intent:utility_function 命令ワードからクラス内フラグメント（ビット2-9）を切り出します。
def fragment_of(opcode: int) -> int:
    return (opcode >> 2) & 0xFF

# @intent:utility_function フラグメントから2ビットの操作選択フィールドを取り出します。
def sub_op(fragment: int) -> int:
    return (fragment >> 2) & 0x03

# @intent:utility_function フラグメントから4ビットのオペランドNを取り出します。
def operand_n(fragment: int) -> int:
    return fragment >> 4
