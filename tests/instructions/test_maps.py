# tests/instructions/test_maps.py
"""
デコードテーブル（maps.py）の構造の検証。
"""
from hp45_core.core.state import Hp45CpuState
from hp45_core.instructions import CLASS_A_DECODERS, decode_arithmetic, decode_data_entry
from hp45_core.instructions import decode_misc, decode_pointer, decode_status
from hp45_core.instructions.base import STATUS_OK
from hp45_core.instructions.maps import (
    ARITHMETIC_MAP, DATA_ENTRY_MAP, DISPLAY_MAP, MISC_MAP, POINTER_MAP, STATUS_MAP,
)

# @intent:test_suite 閉じたデコードテーブルが全てのキーを網羅していることを検証します。

def test_arithmetic_map_covers_all_keys():
    assert sorted(ARITHMETIC_MAP) == list(range(32))
    assert len(set(ARITHMETIC_MAP.values())) == 32

def test_class_a_maps_cover_operation_selector():
    assert sorted(STATUS_MAP) == [0, 1, 2, 3]
    assert sorted(POINTER_MAP) == [0, 1, 2, 3]
    assert sorted(MISC_MAP) == [0, 1, 2, 3]
    assert sorted(DATA_ENTRY_MAP) == [0, 1]

def test_display_map_covers_all_operands():
    assert sorted(DISPLAY_MAP) == list(range(16))

def test_class_a_routing():
    assert CLASS_A_DECODERS == {
        0: decode_misc,
        1: decode_status,
        2: decode_data_entry,
        3: decode_pointer,
    }

# @intent:test_case_legacy 算術/レジスタデコーダは全フラグメントで成功を返します。
def test_arithmetic_decoder_never_reports_error():
    for fragment in range(256):
        assert decode_arithmetic(Hp45CpuState(), fragment) == STATUS_OK

def test_pointer_decoder_never_reports_error():
    for fragment in range(3, 256, 4):
        assert decode_pointer(Hp45CpuState(), fragment) == STATUS_OK
