# hp45_core/instructions/data_entry.py
"""
データ入力/表示命令（タイプ5, xxxx_xx10_00）の実装。

定数ロード、表示制御、スタック操作、M/補助記憶との転送を扱います。
ここでの転送はワードセレクトを使わず、常にレジスタ全体が対象です。
"""
from hp45_core.core.state import DIGITS, POINTER_MASK, Hp45CpuState
from hp45_core.instructions.base import (
    STATUS_OK, STATUS_DATA_ENTRY_UNDEFINED, STATUS_CONSTANT_RANGE,
    STATUS_IS_TO_A, STATUS_BCD_TO_C,
)

# @intent:responsibility 操作選択00は16命令分が割り当てられておらず、常に未定義です。
def undefined(state: Hp45CpuState, n: int) -> int:
    return STATUS_DATA_ENTRY_UNDEFINED

# @intent:responsibility 4ビット定数NをCレジスタのP桁にロードし、ポインタをデクリメントします。
# @intent:rationale Pが14/15を指す場合は書き込み先の桁が存在しないため書き込みを行いませんが、
#                  デクリメントは常に行われます。
def load_constant(state: Hp45CpuState, n: int) -> int:
    if n >= 10:
        return STATUS_CONSTANT_RANGE
    if state.p < DIGITS:
        state.c[state.p] = n
    state.p = (state.p - 1) & POINTER_MASK
    return STATUS_OK

# --- Display ---
def display_toggle(state: Hp45CpuState) -> int:
    state.display_on = not state.display_on
    return STATUS_OK

def display_off(state: Hp45CpuState) -> int:
    state.display_on = False
    return STATUS_OK

# --- Memory (M) ---
def exchange_c_m(state: Hp45CpuState) -> int:
    """C -> M -> C"""
    state.c.nibbles, state.m.nibbles = state.m.nibbles, state.c.nibbles
    return STATUS_OK

def recall_m(state: Hp45CpuState) -> int:
    """M -> M -> C"""
    state.c.copy_from(state.m)
    return STATUS_OK

# --- Stack ---
def stack_up(state: Hp45CpuState) -> int:
    """C -> C -> D -> E -> F"""
    state.f.copy_from(state.e)
    state.e.copy_from(state.d)
    state.d.copy_from(state.c)
    return STATUS_OK

def stack_down(state: Hp45CpuState) -> int:
    """F -> F -> E -> D -> A"""
    state.a.copy_from(state.d)
    state.d.copy_from(state.e)
    state.e.copy_from(state.f)
    return STATUS_OK

def rotate_down(state: Hp45CpuState) -> int:
    """C -> F -> E -> D -> C"""
    saved = list(state.c.nibbles)
    state.c.copy_from(state.d)
    state.d.copy_from(state.e)
    state.e.copy_from(state.f)
    state.f.nibbles[:] = saved
    return STATUS_OK

# @intent:responsibility 補助データ記憶回路から選択中のレジスタをCへ読み出します。
# @intent:pre-condition データアドレスが10以上の場合は何もしません。
def recall_data(state: Hp45CpuState) -> int:
    if state.data_address < len(state.ram):
        state.c.copy_from(state.ram[state.data_address])
    return STATUS_OK

# @intent:responsibility A, B, C, D, E, F, M の全レジスタを0にします。補助記憶は対象外です。
def clear_registers(state: Hp45CpuState) -> int:
    for register in state.working_registers():
        register.clear()
    return STATUS_OK

# --- Unsupported ---
# HP-45のマイクロコードでは使用されない命令です。
def is_to_a(state: Hp45CpuState) -> int:
    return STATUS_IS_TO_A

def bcd_to_c(state: Hp45CpuState) -> int:
    return STATUS_BCD_TO_C
