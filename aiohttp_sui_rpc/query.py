from typing import Dict, List

from .client import RpcApi
from .exceptions import SuiApiError

from .models import (
    Balance,
    CheckpointContents,
    CheckpointSummary,
    CoinMetadata,
    CommitteeInfoResponse,
    MoveFunctionArgType,
    MoveNormalizedFunction,
    MoveNormalizedModule,
    MoveNormalizedStruct,
    PaginatedCoins,
    PaginatedEvents,
    PaginatedObjectsResponse,
    PaginatedTransactionResponse,
    PastObjectResponse,
    SuiObjectResponse,
    SuiSystemState,
    TransactionBlockResponse,
)

DEFAULT_COIN_TYPE = '0x2::sui::SUI'


class QueryClient(RpcApi):
    """
    Read-only access to chain state.

    Every method issues exactly one JSON-RPC call and returns the typed
    result; errors reported by the node are raised as ``SuiApiError``.
    Optional arguments left as ``None`` are sent as ``null``.
    """

    # objects

    async def get_object(self, object_id, options=None):
        return await self._call(
            'sui_getObject', [object_id, options], SuiObjectResponse)

    async def get_object_ref(self, object_id, options=None):
        response = await self.get_object(object_id, options)

        if response.data is None:
            raise SuiApiError(
                message='object {} not available'.format(object_id),
                data=response.error,
            )

        return response.data.object_ref()

    async def get_objects_owned_by_address(self, address, query=None,
                                           cursor=None, limit=None):

        return await self._call(
            'sui_getOwnedObjects', [address, query, cursor, limit],
            PaginatedObjectsResponse)

    async def query_objects(self, query, cursor=None, limit=None):
        return await self._call(
            'sui_queryObjects', [query, cursor, limit],
            PaginatedObjectsResponse)

    async def multi_get_objects(self, object_ids, options=None):
        return await self._call(
            'sui_multiGetObjects', [list(object_ids), options],
            List[SuiObjectResponse])

    async def try_get_past_object(self, object_id, version, options=None):
        return await self._call(
            'sui_tryGetPastObject', [object_id, version, options],
            PastObjectResponse)

    # transactions

    async def get_total_transaction_blocks(self):
        return await self._call('sui_getTotalTransactionBlocks', [], int)

    async def get_transaction_block(self, digest, options=None):
        return await self._call(
            'sui_getTransactionBlock', [digest, options],
            TransactionBlockResponse)

    async def multi_get_transaction_blocks(self, digests, options=None):
        return await self._call(
            'sui_multiGetTransactionBlocks', [list(digests), options],
            List[TransactionBlockResponse])

    async def query_transaction_blocks(self, query, cursor=None, limit=None,
                                       descending=False):

        return await self._call(
            'sui_queryTransactionBlocks', [query, cursor, limit, descending],
            PaginatedTransactionResponse)

    async def get_events(self, query, cursor=None, limit=None,
                         descending=False):

        return await self._call(
            'sui_queryEvents', [query, cursor, limit, descending],
            PaginatedEvents)

    # system

    async def get_sui_system_state(self):
        return await self._call(
            'sui_getLatestSuiSystemState', [], SuiSystemState)

    async def get_validators(self):
        system_state = await self.get_sui_system_state()

        return system_state.active_validators

    async def get_committee_info(self, epoch=None):
        return await self._call(
            'sui_getCommitteeInfo', [epoch], CommitteeInfoResponse)

    async def get_reference_gas_price(self):
        return await self._call('sui_getReferenceGasPrice', [], int)

    # move

    async def get_normalized_move_modules_by_package(self, package):
        return await self._call(
            'sui_getNormalizedMoveModulesByPackage', [package],
            Dict[str, MoveNormalizedModule])

    async def get_normalized_move_module(self, package, module):
        return await self._call(
            'sui_getNormalizedMoveModule', [package, module],
            MoveNormalizedModule)

    async def get_normalized_move_function(self, package, module, function):
        return await self._call(
            'sui_getNormalizedMoveFunction', [package, module, function],
            MoveNormalizedFunction)

    async def get_normalized_move_struct(self, package, module, struct):
        return await self._call(
            'sui_getNormalizedMoveStruct', [package, module, struct],
            MoveNormalizedStruct)

    async def get_move_function_arg_types(self, package, module, function):
        return await self._call(
            'sui_getMoveFunctionArgTypes', [package, module, function],
            List[MoveFunctionArgType])

    # coins

    async def get_coin_metadata(self, coin_type=DEFAULT_COIN_TYPE):
        return await self._call(
            'sui_getCoinMetadata', [coin_type], CoinMetadata)

    async def get_all_balances(self, address):
        return await self._call(
            'sui_getAllBalances', [address], List[Balance])

    async def get_balance(self, address, coin_type=DEFAULT_COIN_TYPE):
        return await self._call(
            'sui_getBalance', [address, coin_type], Balance)

    async def get_all_coins(self, address, cursor=None, limit=None):
        return await self._call(
            'sui_getAllCoins', [address, cursor, limit], PaginatedCoins)

    async def get_coins(self, address, coin_type=DEFAULT_COIN_TYPE,
                        cursor=None, limit=None):

        return await self._call(
            'sui_getCoins', [address, coin_type, cursor, limit],
            PaginatedCoins)

    # checkpoints

    async def get_checkpoint_contents(self, sequence_number):
        return await self._call(
            'sui_getCheckpointContents', [sequence_number],
            CheckpointContents)

    async def get_checkpoint_contents_by_digest(self, digest):
        return await self._call(
            'sui_getCheckpointContentsByDigest', [digest],
            CheckpointContents)

    async def get_checkpoint_summary(self, sequence_number):
        return await self._call(
            'sui_getCheckpointSummary', [sequence_number],
            CheckpointSummary)

    async def get_checkpoint_summary_by_digest(self, digest):
        return await self._call(
            'sui_getCheckpointSummaryByDigest', [digest],
            CheckpointSummary)
