from .client import RpcApi
from .models import TransactionBytes


class TransactionBuilder(RpcApi):
    """
    Asks the node to assemble unsigned transactions.

    Each method returns ``TransactionBytes``; signing ``tx_bytes`` is up
    to the caller. ``gas`` is the id of the coin paying for gas or
    ``None`` to let the node pick one.
    """

    async def _build(self, method, params):
        return await self._call(method, params, TransactionBytes)

    async def split_coin(self, signer, coin, split_amounts, gas, gas_budget):
        return await self._build(
            'sui_splitCoin',
            [signer, coin, list(split_amounts), gas, gas_budget])

    async def split_coin_equal(self, signer, coin, split_count, gas,
                               gas_budget):

        return await self._build(
            'sui_splitCoinEqual',
            [signer, coin, split_count, gas, gas_budget])

    async def merge_coins(self, signer, primary_coin, to_merge_coin, gas,
                          gas_budget):

        return await self._build(
            'sui_mergeCoins',
            [signer, primary_coin, to_merge_coin, gas, gas_budget])

    async def pay(self, signer, input_coins, recipients, amounts, gas,
                  gas_budget):

        return await self._build(
            'unsafe_pay',
            [signer, list(input_coins), list(recipients),
             [str(i) for i in amounts], gas, gas_budget])

    async def pay_sui(self, signer, input_coins, recipients, amounts,
                      gas_budget):

        return await self._build(
            'unsafe_paySui',
            [signer, list(input_coins), list(recipients),
             [str(i) for i in amounts], gas_budget])

    async def pay_all_sui(self, signer, input_coins, recipient, gas_budget):
        return await self._build(
            'unsafe_payAllSui',
            [signer, list(input_coins), recipient, gas_budget])

    async def transfer_sui(self, signer, coin, gas_budget, recipient,
                           amount=None):

        return await self._build(
            'unsafe_transferSui',
            [signer, coin, gas_budget, recipient, amount])

    async def transfer_object(self, signer, sui_object, recipient, gas,
                              gas_budget):

        # the node expects the recipient last
        return await self._build(
            'unsafe_transferObject',
            [signer, sui_object, gas, gas_budget, recipient])

    async def batch_transaction(self, signer, batch_transaction_params, gas,
                                gas_budget):

        return await self._build(
            'sui_batchTransaction',
            [signer, list(batch_transaction_params), gas, gas_budget])

    async def move_call(self, signer, package_object_id, module, function,
                        type_arguments, arguments, gas, gas_budget):

        return await self._build(
            'sui_moveCall',
            [signer, package_object_id, module, function,
             list(type_arguments), list(arguments), gas, gas_budget])

    async def publish(self, signer, compiled_modules, dep_ids, gas,
                      gas_budget):

        return await self._build(
            'unsafe_publish',
            [signer, list(compiled_modules), list(dep_ids), gas, gas_budget])
