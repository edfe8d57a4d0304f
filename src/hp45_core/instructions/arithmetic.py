# hp45_core/instructions/arithmetic.py
"""
算術/レジスタ命令（タイプ2, xxxx_xxxx_10）の実装。

いずれもワードセレクトで指定されたフィールドに対して作用します。
ワードセレクトの設定はデコーダ側（instructions/__init__.py）で行います。
"""
from hp45_core.core import bcd
from hp45_core.core.state import DigitRegister, Hp45CpuState

# --- Clear ---
def clear_a(state: Hp45CpuState) -> None:
    bcd.copy(state, state.a, DigitRegister())

def clear_b(state: Hp45CpuState) -> None:
    bcd.copy(state, state.b, DigitRegister())

def clear_c(state: Hp45CpuState) -> None:
    bcd.copy(state, state.c, DigitRegister())

# --- Transfer / Exchange ---
def a_to_b(state: Hp45CpuState) -> None:
    bcd.copy(state, state.b, state.a)

def b_to_c(state: Hp45CpuState) -> None:
    bcd.copy(state, state.c, state.b)

def c_to_a(state: Hp45CpuState) -> None:
    bcd.copy(state, state.a, state.c)

def exchange_a_b(state: Hp45CpuState) -> None:
    bcd.exchange(state, state.a, state.b)

def exchange_b_c(state: Hp45CpuState) -> None:
    bcd.exchange(state, state.b, state.c)

def exchange_c_a(state: Hp45CpuState) -> None:
    bcd.exchange(state, state.a, state.c)

# --- Add / Subtract ---
def a_plus_c_to_c(state: Hp45CpuState) -> None:
    bcd.add(state, state.a, state.c, state.c)

def a_minus_c_to_c(state: Hp45CpuState) -> None:
    bcd.subtract(state, state.a, state.c, state.c)

def a_plus_b_to_a(state: Hp45CpuState) -> None:
    bcd.add(state, state.a, state.b, state.a)

def a_minus_b_to_a(state: Hp45CpuState) -> None:
    bcd.subtract(state, state.a, state.b, state.a)

def a_plus_c_to_a(state: Hp45CpuState) -> None:
    bcd.add(state, state.a, state.c, state.a)

def a_minus_c_to_a(state: Hp45CpuState) -> None:
    bcd.subtract(state, state.a, state.c, state.a)

def c_plus_c_to_c(state: Hp45CpuState) -> None:
    bcd.add(state, state.c, state.c, state.c)

# --- Compare ---
# @intent:responsibility 比較命令はキャリーのみを変更し、レジスタは変更しません。
def compare_b_zero(state: Hp45CpuState) -> None:
    """0 - B: B != 0 ならキャリーをセット。"""
    bcd.compare_zero(state, state.b)

def compare_c_zero(state: Hp45CpuState) -> None:
    """0 - C: C != 0 ならキャリーをセット。"""
    bcd.compare_zero(state, state.c)

def compare_a_ge_c(state: Hp45CpuState) -> None:
    bcd.compare_ge(state, state.a, state.c)

def compare_a_ge_b(state: Hp45CpuState) -> None:
    bcd.compare_ge(state, state.a, state.b)

def compare_a_ge_one(state: Hp45CpuState) -> None:
    one = DigitRegister()
    bcd.set_one(state, one)
    bcd.compare_ge(state, state.a, one)

def compare_c_ge_one(state: Hp45CpuState) -> None:
    one = DigitRegister()
    bcd.set_one(state, one)
    bcd.compare_ge(state, state.c, one)

# --- Complement ---
def tens_complement_c(state: Hp45CpuState) -> None:
    """0 - C -> C"""
    bcd.subtract(state, DigitRegister(), state.c, state.c)

def nines_complement_c(state: Hp45CpuState) -> None:
    """0 - C - 1 -> C"""
    bcd.subtract(state, DigitRegister(), state.c, state.c)
    one = DigitRegister()
    bcd.set_one(state, one)
    bcd.subtract(state, state.c, one, state.c)

# --- Increment / Decrement ---
# 定数1は呼び出しごとのローカルなスクラッチレジスタに合成します。
def increment_a(state: Hp45CpuState) -> None:
    one = DigitRegister()
    bcd.set_one(state, one)
    bcd.add(state, state.a, one, state.a)

def increment_c(state: Hp45CpuState) -> None:
    one = DigitRegister()
    bcd.set_one(state, one)
    bcd.add(state, state.c, one, state.c)

def decrement_a(state: Hp45CpuState) -> None:
    one = DigitRegister()
    bcd.set_one(state, one)
    bcd.subtract(state, state.a, one, state.a)

def decrement_c(state: Hp45CpuState) -> None:
    one = DigitRegister()
    bcd.set_one(state, one)
    bcd.subtract(state, state.c, one, state.c)

# --- Shift ---
def shift_right_a(state: Hp45CpuState) -> None:
    bcd.shift(state, state.a, left=False)

def shift_right_b(state: Hp45CpuState) -> None:
    bcd.shift(state, state.b, left=False)

def shift_right_c(state: Hp45CpuState) -> None:
    bcd.shift(state, state.c, left=False)

def shift_left_a(state: Hp45CpuState) -> None:
    bcd.shift(state, state.a, left=True)
