from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field

from .base import BigInt, Page, SuiModel
from .events import SuiEvent
from .objects import Owner, OwnedObjectRef, SuiObjectRef


class ExecuteTransactionRequestType(str, Enum):
    WAIT_FOR_EFFECTS_CERT = 'WaitForEffectsCert'
    WAIT_FOR_LOCAL_EXECUTION = 'WaitForLocalExecution'


class TransactionBlockResponseOptions(SuiModel):
    show_input: bool = False
    show_raw_input: bool = False
    show_effects: bool = False
    show_events: bool = False
    show_object_changes: bool = False
    show_balance_changes: bool = False

    @classmethod
    def full(cls):
        return cls(**{name: True for name in cls.model_fields})


class ExecutionStatus(SuiModel):
    status: str
    error: Optional[str] = None

    @property
    def success(self):
        return self.status == 'success'


class GasCostSummary(SuiModel):
    computation_cost: BigInt
    storage_cost: BigInt
    storage_rebate: BigInt
    non_refundable_storage_fee: BigInt = 0


class TransactionEffects(SuiModel):
    message_version: str = 'v1'
    status: ExecutionStatus
    executed_epoch: BigInt
    gas_used: GasCostSummary
    transaction_digest: str
    gas_object: Optional[OwnedObjectRef] = None
    created: List[OwnedObjectRef] = Field(default_factory=list)
    mutated: List[OwnedObjectRef] = Field(default_factory=list)
    unwrapped: List[OwnedObjectRef] = Field(default_factory=list)
    deleted: List[SuiObjectRef] = Field(default_factory=list)
    wrapped: List[SuiObjectRef] = Field(default_factory=list)
    shared_objects: List[SuiObjectRef] = Field(default_factory=list)
    events_digest: Optional[str] = None
    dependencies: List[str] = Field(default_factory=list)


class BalanceChange(SuiModel):
    owner: Owner
    coin_type: str
    amount: BigInt


class TransactionBlockResponse(SuiModel):
    digest: str
    transaction: Optional[Dict[str, Any]] = None
    raw_transaction: Optional[str] = None
    effects: Optional[TransactionEffects] = None
    events: Optional[List[SuiEvent]] = None
    object_changes: Optional[List[Dict[str, Any]]] = None
    balance_changes: Optional[List[BalanceChange]] = None
    timestamp_ms: Optional[BigInt] = None
    checkpoint: Optional[BigInt] = None
    confirmed_local_execution: Optional[bool] = None
    errors: Optional[List[str]] = None


class TransactionBlockResponseQuery(SuiModel):
    filter: Optional[Dict[str, Any]] = None
    options: Optional[TransactionBlockResponseOptions] = None


PaginatedTransactionResponse = Page[TransactionBlockResponse, str]


class TransactionBytes(SuiModel):
    """Unsigned transaction as returned by the builder methods.

    ``tx_bytes`` is the base64 encoded transaction data to be signed by
    the caller and handed to ``ExecutionClient.execute_transaction``.
    """

    tx_bytes: str
    gas: List[SuiObjectRef] = Field(default_factory=list)
    input_objects: List[Any] = Field(default_factory=list)


class TransferObjectParams(SuiModel):
    recipient: str
    object_id: str


class MoveCallParams(SuiModel):
    package_object_id: str
    module: str
    function: str
    type_arguments: List[str] = Field(default_factory=list)
    arguments: List[Any] = Field(default_factory=list)


class RPCTransactionRequestParams(SuiModel):
    """One step of a ``sui_batchTransaction`` request.

    Exactly one of the two fields is expected to be set; use the
    ``transfer_object``/``move_call`` constructors.
    """

    transfer_object_request_params: Optional[TransferObjectParams] = None
    move_call_request_params: Optional[MoveCallParams] = None

    @classmethod
    def transfer_object(cls, recipient, object_id):
        return cls(transfer_object_request_params=TransferObjectParams(
            recipient=recipient, object_id=object_id))

    @classmethod
    def move_call(cls, package_object_id, module, function,
                  type_arguments=(), arguments=()):

        return cls(move_call_request_params=MoveCallParams(
            package_object_id=package_object_id,
            module=module,
            function=function,
            type_arguments=list(type_arguments),
            arguments=list(arguments),
        ))
