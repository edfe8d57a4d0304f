# hp45_core/core/snapshot.py
"""
プロセッサ状態の不変スナップショット

このモジュールは、ある時点のプロセッサ状態を丸ごと複製して保持する
不変のデータ構造を定義します。セーブ/リストアの単位として使用します。
"""
import copy
from dataclasses import dataclass

from hp45_core.core.state import Hp45CpuState

# @intent:responsibility ある一時点におけるプロセッサ状態を不変に記録します。
@dataclass(frozen=True) # 不変データ構造
class StateSnapshot:
    """
    プロセッサ状態の完全なコピーを保持するデータクラス。
    命令メモリは構成データであり、スナップショットには含めません。
    """
    state: Hp45CpuState

    # @intent:responsibility 状態を深くコピーしてスナップショットを生成します。
    # @intent:rationale Hp45CpuStateは可変なので、元の状態が変化してもスナップショットが影響を受けないようにします。
    @classmethod
    def capture(cls, state: Hp45CpuState) -> "StateSnapshot":
        return cls(state=copy.deepcopy(state))

    # @intent:responsibility スナップショットから独立した新しい状態オブジェクトを生成します。
    def to_state(self) -> Hp45CpuState:
        return copy.deepcopy(self.state)
