from .client import JsonRpcClient  # NOQA
from .subscription import Subscription  # NOQA
from .query import QueryClient, DEFAULT_COIN_TYPE  # NOQA
from .execution import ExecutionClient  # NOQA
from .transaction_builder import TransactionBuilder  # NOQA
from .events import EventClient  # NOQA
from .sui import SuiClient  # NOQA

from .exceptions import (  # NOQA
    RpcInvalidRequestError,
    RpcMethodNotFoundError,
    RpcInvalidParamsError,
    RpcInternalError,
    RpcParseError,
    RpcServerError,
    SuiTransportError,
    SuiApiError,
)
