# hp45_core/core/word_select.py
"""
ワードセレクト（フィールド指定）の解決。

算術/レジスタ命令の下位3ビットは、命令が作用する桁範囲を指定します。
このモジュールはその3ビットとポインタ値から、開始/終了の桁インデックスを求めます。
"""
from enum import IntEnum
from typing import Dict, Tuple

from hp45_core.core.state import DIGITS, Hp45CpuState

# @intent:responsibility ワードセレクトの8つのモードを名前付きで定義します。
class WordSelect(IntEnum):
    P = 0   # The digit indicated by P
    M = 1   # Mantissa
    X = 2   # Exponent
    W = 3   # Whole word
    WP = 4  # Word up to and including P
    MS = 5  # Mantissa and sign
    XS = 6  # Exponent sign
    S = 7   # Mantissa sign

# @intent:map ポインタに依存しないモードの固定範囲テーブル。
# P と WP はポインタで置き換えるため、ここには含めません。
FIXED_FIELDS: Dict[int, Tuple[int, int]] = {
    WordSelect.M: (3, 12),
    WordSelect.X: (0, 2),
    WordSelect.W: (0, 13),
    WordSelect.MS: (3, 13),
    WordSelect.XS: (2, 2),
    WordSelect.S: (13, 13),
}

# @intent:responsibility ポインタ値とモードから包含的な(start, end)を返します。
def resolve_field(p: int, mode: int) -> Tuple[int, int]:
    """
    ワードセレクトのモードを(start, end)の桁インデックスに変換します。
    end は範囲に含まれます。
    """
    mode &= 7
    if mode == WordSelect.P:
        return p, p
    if mode == WordSelect.WP:
        return 0, p
    return FIXED_FIELDS[mode]

# @intent:responsibility 現在の状態に対する桁範囲をrangeとして返します。
# @intent:rationale ポインタが14/15を指す場合、その桁は存在しないため範囲を0-13に切り詰めます。
#                  実機のシミュレータは2つの余剰ニブルまで演算するため、例えばWPでP=14のとき
#                  桁上がりは余剰ニブルに吸収されキャリーが立ちません。この切り詰めはその挙動とは
#                  意図的に異なります（P=14/15でのフィールド演算は未定義）。
def field_range(state: Hp45CpuState) -> range:
    start, end = resolve_field(state.p, state.word_select)
    return range(start, min(end, DIGITS - 1) + 1)
