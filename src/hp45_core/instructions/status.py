# hp45_core/instructions/status.py
"""
ステータス操作命令（タイプ3, xxxx_xx01_00）の実装。

オペランドNは操作対象のフラグ番号です。フラグは12本しかないため、
N >= 12 の組み合わせは未定義としてステータスワードを変更せずに負の値を返します。
"""
from hp45_core.core.state import STATUS_BITS, Hp45CpuState
from hp45_core.instructions.base import (
    STATUS_OK, STATUS_SET_FLAG_RANGE, STATUS_TEST_FLAG_RANGE,
    STATUS_RESET_FLAG_RANGE, STATUS_CLEAR_FLAGS_OPERAND,
)

# @intent:responsibility フラグNをセットします。
def set_flag(state: Hp45CpuState, n: int) -> int:
    if n >= STATUS_BITS:
        return STATUS_SET_FLAG_RANGE
    state.set_flag(n, True)
    return STATUS_OK

# @intent:responsibility フラグNを調べ、セットされていればキャリーをセットします。
def interrogate_flag(state: Hp45CpuState, n: int) -> int:
    if n >= STATUS_BITS:
        return STATUS_TEST_FLAG_RANGE
    if state.get_flag(n):
        state.carry = True
    return STATUS_OK

# @intent:responsibility フラグNをリセットします。
def reset_flag(state: Hp45CpuState, n: int) -> int:
    if n >= STATUS_BITS:
        return STATUS_RESET_FLAG_RANGE
    state.set_flag(n, False)
    return STATUS_OK

# @intent:responsibility 全フラグをクリアします。N=0000 の場合のみ定義されています。
def clear_flags(state: Hp45CpuState, n: int) -> int:
    if n:
        return STATUS_CLEAR_FLAGS_OPERAND
    state.status = 0
    return STATUS_OK
