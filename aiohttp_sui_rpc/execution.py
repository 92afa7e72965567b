from .client import RpcApi

from .models import (
    ExecuteTransactionRequestType,
    TransactionBlockResponse,
    TransactionEffects,
)


class ExecutionClient(RpcApi):
    async def dry_run_transaction(self, tx_bytes):
        """Runs the transaction without committing it.

        ``tx_bytes`` is the base64 encoded transaction data as returned by
        the ``TransactionBuilder`` methods.
        """

        return await self._call(
            'sui_dryRunTransactionBlock', [tx_bytes], TransactionEffects)

    async def execute_transaction(
            self, tx_bytes, signatures, options=None,
            request_type=ExecuteTransactionRequestType.WAIT_FOR_LOCAL_EXECUTION):  # NOQA

        """Submits a signed transaction.

        ``signatures`` are the base64 encoded serialized signatures
        (flag || signature || public key), one per signer.
        ``request_type`` selects whether the node answers once the
        effects are certified or once they were executed locally.
        """

        request_type = ExecuteTransactionRequestType(request_type)

        return await self._call(
            'sui_executeTransactionBlock',
            [tx_bytes, list(signatures), options, request_type.value],
            TransactionBlockResponse)
