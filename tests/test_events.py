import asyncio

import aiohttp
import pytest

from samples import ADDRESS, EVENT, PACKAGE_ID, RECIPIENT

from aiohttp_sui_rpc import (
    RpcInternalError,
    RpcInvalidParamsError,
    RpcParseError,
    SuiApiError,
    SuiTransportError,
    Subscription,
)

from aiohttp_sui_rpc.models import EventFilter, SuiEvent
from aiohttp_sui_rpc.protocol import encode_error


pytestmark = pytest.mark.asyncio


def make_event(seq, sender=ADDRESS):
    return dict(EVENT, id={'txDigest': EVENT['id']['txDigest'],
                           'eventSeq': str(seq)}, sender=sender)


async def wait_for(condition, timeout=1):
    async def poll():
        while not condition():
            await asyncio.sleep(0.01)

    await asyncio.wait_for(poll(), timeout)


async def test_subscribe_event(node_context):
    client = node_context.make_client()
    events = asyncio.Queue()
    errors = []

    subscription = await client.subscribe_event(
        EventFilter.sender(ADDRESS), events.put_nowait, errors.append)

    assert isinstance(subscription, Subscription)
    assert subscription.subscription_id == 1
    assert not subscription.disposed
    assert subscription in client.rpc_client.subscriptions

    request = node_context.node.last_request

    assert request.method == 'sui_subscribeEvent'
    assert request.params == [{'Sender': ADDRESS}]

    for seq in range(5):
        await node_context.node.publish(make_event(seq))

    received = [await asyncio.wait_for(events.get(), 1) for i in range(5)]

    assert all(isinstance(i, SuiEvent) for i in received)
    assert [i.id.event_seq for i in received] == [0, 1, 2, 3, 4]
    assert not errors


async def test_filter(node_context):
    client = node_context.make_client()
    events = asyncio.Queue()

    await client.subscribe_event(
        EventFilter.and_(EventFilter.package(PACKAGE_ID),
                         EventFilter.sender(RECIPIENT)),
        events.put_nowait,
    )

    assert await node_context.node.publish(make_event(0)) == 0
    assert await node_context.node.publish(make_event(1, RECIPIENT)) == 1

    event = await asyncio.wait_for(events.get(), 1)

    assert event.sender == RECIPIENT
    assert event.id.event_seq == 1
    assert events.empty()


async def test_dict_filter(node_context):
    client = node_context.make_client()

    await client.subscribe_event({'MoveModule': {
        'package': PACKAGE_ID, 'module': 'pay'}}, print)

    assert node_context.node.last_request.params == [
        {'MoveModule': {'package': PACKAGE_ID, 'module': 'pay'}},
    ]


async def test_coroutine_callbacks(node_context):
    client = node_context.make_client()
    received = []

    async def on_next(event):
        await asyncio.sleep(0)
        received.append(event.id.event_seq)

    await client.subscribe_event(EventFilter.all(), on_next)

    for seq in range(3):
        await node_context.node.publish(make_event(seq))

    await wait_for(lambda: len(received) == 3)

    assert received == [0, 1, 2]


async def test_independent_subscriptions(node_context):
    client = node_context.make_client()
    first, second = [], []

    await client.subscribe_event(EventFilter.sender(ADDRESS), first.append)
    await client.subscribe_event(EventFilter.sender(RECIPIENT),
                                 second.append)

    await node_context.node.publish(make_event(0, RECIPIENT))
    await node_context.node.publish(make_event(1, ADDRESS))

    await wait_for(lambda: first and second)

    assert [i.sender for i in first] == [ADDRESS]
    assert [i.sender for i in second] == [RECIPIENT]
    assert len(node_context.node.clients) == 2


async def test_dispose(node_context):
    client = node_context.make_client()
    received = []

    subscription = await client.subscribe_event(
        EventFilter.all(), received.append)

    await node_context.node.publish(make_event(0))
    await wait_for(lambda: received)

    subscription.dispose()

    assert subscription.disposed
    assert subscription not in client.rpc_client.subscriptions

    await node_context.node.publish(make_event(1))
    await asyncio.sleep(0.1)

    assert [i.id.event_seq for i in received] == [0]

    # the channel gets closed
    await wait_for(lambda: not node_context.node.clients)

    subscription.dispose()


async def test_dispose_right_after_subscribe(node_context):
    async with aiohttp.ClientSession() as session:
        client = node_context.make_client(session=session)
        received = []

        subscription = await client.subscribe_event(
            EventFilter.all(), received.append)

        subscription.dispose()

        assert subscription.disposed

        # the channel gets closed without any delivery
        await wait_for(lambda: not node_context.node.clients)

        assert not node_context.node.subscriptions
        assert await node_context.node.publish(make_event(0)) == 0

        await subscription.close()

        assert not received
        assert not session.closed


async def test_dispose_from_callback(node_context):
    client = node_context.make_client()
    received = []

    def on_next(event):
        received.append(event)
        subscription.dispose()

    subscription = await client.subscribe_event(EventFilter.all(), on_next)

    for seq in range(3):
        await node_context.node.publish(make_event(seq))

    await wait_for(lambda: subscription.disposed)
    await asyncio.sleep(0.1)

    assert len(received) == 1


async def test_unsubscribe(node_context):
    client = node_context.make_client()
    received = []

    subscription = await client.subscribe_event(
        EventFilter.all(), received.append)

    await subscription.unsubscribe()

    assert subscription.disposed

    await wait_for(
        lambda: node_context.node.requests_for('sui_unsubscribeEvent'))

    request = node_context.node.requests_for('sui_unsubscribeEvent')[0]

    assert request.params == [subscription.subscription_id]

    await wait_for(lambda: not node_context.node.subscriptions)
    await node_context.node.publish(make_event(0))
    await asyncio.sleep(0.1)

    assert not received


async def test_subscription_refused(node_context):
    async def sui_subscribeEvent(event_filter):
        raise RpcInvalidParamsError(message='unsupported filter')

    node_context.node.add_methods(('sui_subscribeEvent', sui_subscribeEvent))
    client = node_context.make_client()

    with pytest.raises(RpcInvalidParamsError):
        await client.subscribe_event(EventFilter.all(), print)

    assert not client.rpc_client.subscriptions
    await wait_for(lambda: not node_context.node.clients)


async def test_connection_lost(node_context):
    client = node_context.make_client()
    received = []
    errors = []

    subscription = await client.subscribe_event(
        EventFilter.all(), received.append, errors.append)

    await node_context.node.close_connections()
    await wait_for(lambda: errors)

    assert len(errors) == 1
    assert isinstance(errors[0], SuiTransportError)

    await wait_for(lambda: subscription.disposed)

    assert subscription not in client.rpc_client.subscriptions


async def test_error_messages(node_context):
    client = node_context.make_client()
    received = asyncio.Queue()
    errors = asyncio.Queue()

    subscription = await client.subscribe_event(
        EventFilter.all(), received.put_nowait, errors.put_nowait)

    await node_context.node.send_raw('garbage')
    await node_context.node.send_raw(encode_error(RpcInternalError()))

    error = await asyncio.wait_for(errors.get(), 1)

    assert isinstance(error, RpcParseError)

    error = await asyncio.wait_for(errors.get(), 1)

    assert isinstance(error, RpcInternalError)
    assert isinstance(error, SuiApiError)

    # malformed events are errors as well
    await node_context.node.publish({'sender': ADDRESS})

    error = await asyncio.wait_for(errors.get(), 1)

    assert isinstance(error, RpcParseError)

    # the subscription is still alive
    await node_context.node.publish(make_event(7))

    event = await asyncio.wait_for(received.get(), 1)

    assert event.id.event_seq == 7
    assert not subscription.disposed


async def test_failing_callback(node_context):
    client = node_context.make_client()
    received = []

    def on_next(event):
        received.append(event)

        if len(received) == 1:
            raise RuntimeError('callback failed')

    await client.subscribe_event(EventFilter.all(), on_next)

    await node_context.node.publish(make_event(0))
    await node_context.node.publish(make_event(1))

    await wait_for(lambda: len(received) == 2)


async def test_close_client(node_context):
    client = node_context.make_client()

    subscriptions = [
        await client.subscribe_event(EventFilter.all(), print)
        for i in range(3)
    ]

    await client.close()

    assert all(i.disposed for i in subscriptions)
    assert not client.rpc_client.subscriptions

    await wait_for(lambda: not node_context.node.clients)
