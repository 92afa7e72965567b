from .client import RpcApi
from .models import EventFilter, SuiEvent

SUBSCRIBE_EVENT = 'sui_subscribeEvent'
UNSUBSCRIBE_EVENT = 'sui_unsubscribeEvent'


class EventClient(RpcApi):
    async def subscribe_event(self, event_filter, on_next, on_error=None,
                              timeout=None):
        """
        Subscribes to events matching ``event_filter``.

        ``on_next`` receives every matching ``SuiEvent`` in the order the
        node sends them; ``on_error`` receives ``SuiApiError`` instances
        for error messages and for a lost connection, which also ends the
        subscription.

        Returns a ``Subscription``; call ``dispose()`` (or await
        ``unsubscribe()``) on it to stop delivery. Raises ``SuiApiError``
        if the node refuses the subscription.
        """

        if isinstance(event_filter, dict):
            event_filter = EventFilter.from_json(event_filter)

        return await self._rpc_client.subscribe(
            SUBSCRIBE_EVENT, [event_filter],
            on_next=on_next,
            on_error=on_error,
            unsubscribe_method=UNSUBSCRIBE_EVENT,
            result_type=SuiEvent,
            timeout=timeout,
        )
