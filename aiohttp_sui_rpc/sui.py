from .client import JsonRpcClient
from .events import EventClient
from .execution import ExecutionClient
from .networks import network_url
from .query import QueryClient
from .transaction_builder import TransactionBuilder


class SuiClient(QueryClient, ExecutionClient, TransactionBuilder,
                EventClient):
    """
    All four façades on top of one ``JsonRpcClient``.

    Example usage:

    >>> import asyncio
    >>> async def balance_coro(address):
    ...     async with SuiClient('http://127.0.0.1:9000') as sui:
    ...         balance = await sui.get_balance(address)
    ...         return balance.total_balance

    Keyword arguments are passed to ``JsonRpcClient``.
    """

    def __init__(self, url=None, rpc_client=None, **kwargs):
        if rpc_client is None:
            if url is None:
                raise ValueError('either url or rpc_client is required')

            rpc_client = JsonRpcClient(url, **kwargs)

        super().__init__(rpc_client)

    @classmethod
    def for_network(cls, name, **kwargs):
        return cls(network_url(name), **kwargs)

    async def close(self):
        await self._rpc_client.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
        return False
