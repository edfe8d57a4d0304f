# hp45_core/instructions/misc.py
"""
ROMセレクト/その他の命令（タイプ6-10, xxxx_xx00_00）の実装。

タイプ6はビット2が立っている命令で、ビット3-4で4種類に分かれます。
オペランドNはフラグメントのビット5-7（3ビット）です。
"""
from hp45_core.core.state import Hp45CpuState
from hp45_core.instructions.base import (
    STATUS_OK, STATUS_EXTERNAL_KEY_ENTRY, STATUS_DATA_STORAGE_UNDEFINED,
)

# @intent:responsibility 8つのROMページのうちNで指定されたページを選択します。オフセットは保持されます。
def rom_select(state: Hp45CpuState, n: int) -> int:
    state.page = n
    return STATUS_OK

# @intent:responsibility 保存されたリターンアドレスを現在のページ内のオフセットとして復帰します。
# @intent:rationale ネストは1段のみで、ページは保存されていません。
def subroutine_return(state: Hp45CpuState, n: int) -> int:
    state.offset = state.return_address
    return STATUS_OK

# @intent:responsibility キーボード入力: ラッチされたキーコードへジャンプします（Nが奇数の場合）。
# Nが偶数の場合は外部キーコード入力で、HP-45では使用されません。
def keyboard_entry(state: Hp45CpuState, n: int) -> int:
    if not n & 1:
        return STATUS_EXTERNAL_KEY_ENTRY
    state.offset = state.key_code
    return STATUS_OK

# @intent:responsibility 補助データ記憶回路とのアドレス/データ転送を行います。
def data_storage(state: Hp45CpuState, n: int) -> int:
    """
    N = 1x0: Cの桁12を補助記憶のアドレスとして送ります。
    N = 101: Cの内容を選択中の補助記憶レジスタへ書き込みます。
    """
    if (n & 0x5) == 0x4:
        state.data_address = state.c[12]
    elif n == 0x5:
        if state.data_address < len(state.ram):
            state.ram[state.data_address].copy_from(state.c)
    else:
        return STATUS_DATA_STORAGE_UNDEFINED
    return STATUS_OK
