from .base import BigInt, Page, SuiModel  # NOQA

from .objects import (  # NOQA
    ObjectDataOptions,
    SuiObjectRef,
    OwnedObjectRef,
    SuiObjectData,
    SuiObjectResponse,
    ObjectResponseQuery,
    PastObjectResponse,
    Balance,
    CoinStruct,
    CoinMetadata,
    PaginatedObjectsResponse,
    PaginatedCoins,
)

from .events import (  # NOQA
    EventId,
    SuiEvent,
    PaginatedEvents,
    EventFilter,
    EventQuery,
)

from .transactions import (  # NOQA
    ExecuteTransactionRequestType,
    TransactionBlockResponseOptions,
    ExecutionStatus,
    GasCostSummary,
    TransactionEffects,
    BalanceChange,
    TransactionBlockResponse,
    TransactionBlockResponseQuery,
    PaginatedTransactionResponse,
    TransactionBytes,
    TransferObjectParams,
    MoveCallParams,
    RPCTransactionRequestParams,
)

from .checkpoints import (  # NOQA
    ExecutionDigests,
    CheckpointContents,
    CheckpointSummary,
)

from .move import (  # NOQA
    MoveFunctionArgType,
    MoveAbilitySet,
    MoveModuleId,
    MoveStructTypeParameter,
    MoveField,
    MoveNormalizedStruct,
    MoveNormalizedFunction,
    MoveNormalizedModule,
)

from .system import (  # NOQA
    ValidatorMetadata,
    SuiSystemState,
    CommitteeInfoResponse,
)
