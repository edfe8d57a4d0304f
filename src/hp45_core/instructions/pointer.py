# hp45_core/instructions/pointer.py
"""
ポインタ操作命令（タイプ4, xxxx_xx11_00）の実装。

ポインタは4ビットのレジスタです。0からのデクリメントは15に、
15からのインクリメントは0に折り返します（実機の挙動）。
"""
from hp45_core.core.state import POINTER_MASK, Hp45CpuState
from hp45_core.instructions.base import STATUS_OK

def set_pointer(state: Hp45CpuState, n: int) -> int:
    state.p = n & POINTER_MASK
    return STATUS_OK

# @intent:responsibility P=XXXX（オペランドは無視）でポインタをデクリメントします。
def decrement_pointer(state: Hp45CpuState, n: int) -> int:
    state.p = (state.p - 1) & POINTER_MASK
    return STATUS_OK

# @intent:responsibility ポインタがNを指しているかを調べ、結果をキャリーに設定します。
def interrogate_pointer(state: Hp45CpuState, n: int) -> int:
    state.carry = state.p == n
    return STATUS_OK

def increment_pointer(state: Hp45CpuState, n: int) -> int:
    state.p = (state.p + 1) & POINTER_MASK
    return STATUS_OK
