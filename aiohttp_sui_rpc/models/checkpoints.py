from typing import Any, Dict, List, Optional

from pydantic import Field

from .base import BigInt, SuiModel
from .transactions import GasCostSummary


class ExecutionDigests(SuiModel):
    transaction: str
    effects: str


class CheckpointContents(SuiModel):
    transactions: List[ExecutionDigests] = Field(default_factory=list)
    user_signatures: List[List[str]] = Field(default_factory=list)


class CheckpointSummary(SuiModel):
    epoch: BigInt
    sequence_number: BigInt
    network_total_transactions: BigInt
    content_digest: str
    previous_digest: Optional[str] = None
    epoch_rolling_gas_cost_summary: GasCostSummary
    timestamp_ms: BigInt
    end_of_epoch_data: Optional[Dict[str, Any]] = None
    version_specific_data: Optional[List[int]] = None
