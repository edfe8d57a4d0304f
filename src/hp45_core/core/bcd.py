# hp45_core/core/bcd.py
"""
BCD演算ユニット。

ワードセレクトで指定された桁範囲だけに作用する基本演算（転送、交換、シフト、
加減算、定数1の設定、比較）を提供します。範囲外の桁は変更しません。
キャリーフラグの更新もここで行います。
"""
from hp45_core.core.state import DigitRegister, Hp45CpuState
from hp45_core.core.word_select import field_range

# @intent:responsibility 指定フィールドの桁をsrcからdstへコピーします。
def copy(state: Hp45CpuState, dst: DigitRegister, src: DigitRegister) -> None:
    for i in field_range(state):
        dst[i] = src[i]

# @intent:responsibility 指定フィールドの桁を2つのレジスタ間で交換します。
def exchange(state: Hp45CpuState, r1: DigitRegister, r2: DigitRegister) -> None:
    for i in field_range(state):
        r1[i], r2[i] = r2[i], r1[i]

# @intent:responsibility 指定フィールド内で1桁シフトし、空いた桁を0にします。
# @intent:rationale 左シフトは上位方向へ移動して開始桁を、右シフトは下位方向へ移動して終了桁をクリアします。
def shift(state: Hp45CpuState, r: DigitRegister, left: bool) -> None:
    """
    フィールド内シフト。フィールドがWの場合のみレジスタ全体のシフトになります。
    """
    cells = field_range(state)
    if not cells:
        return
    if left:
        for i in reversed(cells[1:]):
            r[i] = r[i - 1]
        r[cells[0]] = 0
    else:
        for i in cells[:-1]:
            r[i] = r[i + 1]
        r[cells[-1]] = 0

# @intent:responsibility z = x + y をBCDで計算し、最上位からのキャリーをキャリーフラグに設定します。
# @intent:pre-condition x, y, z は同一のレジスタであっても構いません。
def add(state: Hp45CpuState, x: DigitRegister, y: DigitRegister, z: DigitRegister) -> None:
    carry = 0
    for i in field_range(state):
        digit = x[i] + y[i] + carry
        if digit >= 10:
            digit -= 10
            carry = 1
        else:
            carry = 0
        z[i] = digit
    state.carry = carry == 1

# @intent:responsibility z = x - y をBCDで計算し、最上位からのボローをキャリーフラグに設定します。
def subtract(state: Hp45CpuState, x: DigitRegister, y: DigitRegister, z: DigitRegister) -> None:
    borrow = 0
    for i in field_range(state):
        digit = x[i] - y[i] - borrow
        if digit < 0:
            digit += 10
            borrow = 1
        else:
            borrow = 0
        z[i] = digit
    state.carry = borrow == 1

# @intent:responsibility フィールドの最下位桁を1、それより上の桁を0にします。
# @intent:rationale インクリメント/デクリメントで使う「定数1」のフィールドを合成するために使用します。
def set_one(state: Hp45CpuState, r: DigitRegister) -> None:
    cells = field_range(state)
    if not cells:
        return
    r[cells[0]] = 1
    for i in cells[1:]:
        r[i] = 0

# @intent:responsibility r1 >= r2 を上位桁から比較します。r1 < r2 の場合のみキャリーをセットします。
def compare_ge(state: Hp45CpuState, r1: DigitRegister, r2: DigitRegister) -> None:
    for i in reversed(field_range(state)):
        if r1[i] > r2[i]:
            break
        if r1[i] < r2[i]:
            state.carry = True
            break

# @intent:responsibility フィールド内に0以外の桁があればキャリーをセットします。
def compare_zero(state: Hp45CpuState, r: DigitRegister) -> None:
    if any(r[i] for i in field_range(state)):
        state.carry = True
