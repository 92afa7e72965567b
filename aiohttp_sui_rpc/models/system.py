from typing import List, Optional, Tuple

from pydantic import Field

from .base import BigInt, SuiModel


class ValidatorMetadata(SuiModel):
    sui_address: str
    name: str
    description: str = ''
    image_url: str = ''
    project_url: str = ''
    net_address: str = ''
    p2p_address: str = ''
    primary_address: str = ''
    worker_address: str = ''
    protocol_pubkey_bytes: Optional[str] = None
    network_pubkey_bytes: Optional[str] = None
    worker_pubkey_bytes: Optional[str] = None
    voting_power: BigInt = 0
    gas_price: BigInt = 0
    commission_rate: BigInt = 0
    next_epoch_stake: BigInt = 0
    next_epoch_gas_price: BigInt = 0
    next_epoch_commission_rate: BigInt = 0
    staking_pool_id: Optional[str] = None
    staking_pool_sui_balance: BigInt = 0


class SuiSystemState(SuiModel):
    epoch: BigInt
    protocol_version: BigInt
    system_state_version: BigInt
    storage_fund_total_object_storage_rebates: BigInt = 0
    storage_fund_non_refundable_balance: BigInt = 0
    reference_gas_price: BigInt
    safe_mode: bool = False
    epoch_start_timestamp_ms: BigInt
    epoch_duration_ms: BigInt = 0
    total_stake: BigInt = 0
    active_validators: List[ValidatorMetadata] = Field(default_factory=list)
    pending_active_validators_size: BigInt = 0
    validator_candidates_size: BigInt = 0


class CommitteeInfoResponse(SuiModel):
    epoch: BigInt
    # (authority name, stake)
    validators: List[Tuple[str, BigInt]] = Field(default_factory=list)
