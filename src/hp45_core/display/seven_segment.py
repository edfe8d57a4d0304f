# hp45_core/display/seven_segment.py
"""
7セグメントLED表示用のアダプタ。

レジスタAが表示する桁を、レジスタBがマスクを保持します。
Bの桁が9なら消灯、2なら小数点を点灯、それ以外は通常表示です。
桁13と桁2は符号桁で、Aの値が9のときマイナス記号を表示します。
"""
from typing import List

from hp45_core.core.state import DIGITS, Hp45CpuState

# @intent:constant 各セグメントに対応するビット。
BIT_NONE = 0x00
BIT_A = 0x01
BIT_B = 0x02
BIT_C = 0x04
BIT_D = 0x08
BIT_E = 0x10
BIT_F = 0x20
BIT_G = 0x40
BIT_H = 0x80  # Decimal point

SEVEN_SEGMENT_TABLE = (
    BIT_F | BIT_E | BIT_D | BIT_C | BIT_B | BIT_A,          # 0
    BIT_C | BIT_B,                                          # 1
    BIT_G | BIT_E | BIT_D | BIT_B | BIT_A,                  # 2
    BIT_G | BIT_D | BIT_C | BIT_B | BIT_A,                  # 3
    BIT_G | BIT_F | BIT_C | BIT_B,                          # 4
    BIT_G | BIT_F | BIT_D | BIT_C | BIT_A,                  # 5
    BIT_G | BIT_F | BIT_E | BIT_D | BIT_C | BIT_A,          # 6
    BIT_C | BIT_B | BIT_A,                                  # 7
    BIT_G | BIT_F | BIT_E | BIT_D | BIT_C | BIT_B | BIT_A,  # 8
    BIT_G | BIT_F | BIT_D | BIT_C | BIT_B | BIT_A,          # 9
)

SIGN_DIGITS = (13, 2)
MASK_BLANK = 9
MASK_DECIMAL_POINT = 2

# @intent:responsibility レジスタA/Bの内容をLEDスキャンバッファ（最上位桁が先頭）に変換します。
def make_display(state: Hp45CpuState) -> List[int]:
    """
    14要素のセグメントビットマップのリストを返します。
    表示のON/OFFは呼び出し側が state.display_on を見て判断します。
    """
    buffer = []
    for i in reversed(range(DIGITS)):
        mask = state.b[i]
        if mask == MASK_BLANK:
            buffer.append(BIT_NONE)
            continue
        if i in SIGN_DIGITS:
            segments = BIT_G if state.a[i] == 9 else BIT_NONE
        else:
            segments = SEVEN_SEGMENT_TABLE[state.a[i]]
        if mask == MASK_DECIMAL_POINT:
            segments |= BIT_H
        buffer.append(segments)
    return buffer
