from collections import namedtuple
import inspect
import asyncio

from aiohttp import WSMsgType, web

from aiohttp_sui_rpc import SuiClient

from .exceptions import (
    RpcInvalidRequestError,
    RpcMethodNotFoundError,
    SuiApiError,
)

from .protocol import (
    JsonRpcMsgTyp,
    decode_msg,
    encode_error,
    encode_notification,
    encode_result,
)

RecordedRequest = namedtuple('RecordedRequest', ['method', 'params', 'id'])


def raw_response(function=None):
    """Marks a fake node method whose return value is sent verbatim.

    The method may return a ``str`` (used as response body) or any
    ``aiohttp.web`` response.
    """

    def decorator(function):
        function.raw_response = True

        return function

    if function:
        return decorator(function)

    return decorator


def event_matches(event_filter, event):
    (kind, value), = event_filter.items()

    if kind == 'All':
        return all(event_matches(i, event) for i in value)

    if kind == 'Any':
        return any(event_matches(i, event) for i in value)

    if kind == 'And':
        return event_matches(value[0], event) and \
            event_matches(value[1], event)

    if kind == 'Or':
        return event_matches(value[0], event) or \
            event_matches(value[1], event)

    if kind == 'Sender':
        return event.get('sender') == value

    if kind == 'Package':
        return event.get('packageId') == value

    if kind == 'Transaction':
        return event.get('id', {}).get('txDigest') == value

    if kind == 'MoveModule':
        return (event.get('packageId') == value['package'] and
                event.get('transactionModule') == value['module'])

    if kind == 'MoveEventType':
        return event.get('type') == value

    if kind == 'TimeRange':
        timestamp = int(event.get('timestampMs', -1))

        return int(value['startTime']) <= timestamp < int(value['endTime'])

    raise ValueError('unsupported event filter {!r}'.format(kind))


class FakeSuiNode:
    """
    In-process stand-in for a Sui full node.

    JSON-RPC requests are POSTed to ``/``; websockets connect to ``/`` as
    well and may subscribe to events with ``sui_subscribeEvent``.
    Methods are registered as ``(name, handler)`` pairs; a handler is
    either a (coroutine) function receiving the positional params or a
    plain value used as result. Every request is recorded in
    ``requests``.
    """

    SUBSCRIBE_EVENT = 'sui_subscribeEvent'
    UNSUBSCRIBE_EVENT = 'sui_unsubscribeEvent'

    def __init__(self):
        self.methods = {}
        self.requests = []
        self.http_headers = []
        self.clients = []
        self.subscriptions = {}
        self._subscription_id = 0

        self.app = web.Application()
        self.app.router.add_route('POST', '/', self.handle_http_request)
        self.app.router.add_route('GET', '/', self.handle_websocket_request)

    def add_methods(self, *methods):
        for name, handler in methods:
            self.methods[name] = handler

    @property
    def last_request(self):
        return self.requests[-1]

    def requests_for(self, method):
        return [i for i in self.requests if i.method == method]

    async def _dispatch(self, msg):
        msg_id = msg.data['id']
        method = msg.data['method']
        params = msg.data['params']

        self.requests.append(RecordedRequest(method, params, msg_id))

        if method not in self.methods:
            return encode_error(RpcMethodNotFoundError(msg_id=msg_id))

        handler = self.methods[method]

        if not callable(handler):
            return encode_result(msg_id, handler)

        try:
            if isinstance(params, list):
                result = handler(*params)

            else:
                result = handler(params)

            if inspect.isawaitable(result):
                result = await result

        except SuiApiError as e:
            return encode_error(e, id=msg_id)

        if getattr(handler, 'raw_response', False):
            return result

        return encode_result(msg_id, result)

    async def handle_http_request(self, http_request):
        self.http_headers.append(dict(http_request.headers))

        try:
            msg = decode_msg(await http_request.text())

        except SuiApiError as e:
            return web.Response(text=encode_error(e),
                                content_type='application/json')

        if msg.type != JsonRpcMsgTyp.REQUEST:
            return web.Response(
                text=encode_error(RpcInvalidRequestError()),
                content_type='application/json',
            )

        response = await self._dispatch(msg)

        if isinstance(response, web.StreamResponse):
            return response

        return web.Response(text=response, content_type='application/json')

    def _subscribe(self, ws, msg):
        self._subscription_id += 1
        event_filter = (msg.data['params'] or [{'All': []}])[0]

        self.subscriptions[self._subscription_id] = (ws, event_filter)
        self.requests.append(
            RecordedRequest(msg.data['method'], msg.data['params'],
                            msg.data['id']))

        return encode_result(msg.data['id'], self._subscription_id)

    def _unsubscribe(self, msg):
        subscription_id = (msg.data['params'] or [None])[0]
        found = self.subscriptions.pop(subscription_id, None) is not None

        self.requests.append(
            RecordedRequest(msg.data['method'], msg.data['params'],
                            msg.data['id']))

        return encode_result(msg.data['id'], found)

    async def handle_websocket_request(self, http_request):
        ws = web.WebSocketResponse()
        await ws.prepare(http_request)

        self.clients.append(ws)

        try:
            async for raw_msg in ws:
                if raw_msg.type != WSMsgType.TEXT:
                    continue

                try:
                    msg = decode_msg(raw_msg.data)

                except SuiApiError as e:
                    await ws.send_str(encode_error(e))

                    continue

                method = msg.data.get('method')

                if method in self.methods:
                    response = await self._dispatch(msg)

                elif method == self.SUBSCRIBE_EVENT:
                    response = self._subscribe(ws, msg)

                elif method == self.UNSUBSCRIBE_EVENT:
                    response = self._unsubscribe(msg)

                else:
                    response = await self._dispatch(msg)

                await ws.send_str(response)

        finally:
            self.clients.remove(ws)

            for subscription_id, (client, _) in list(
                    self.subscriptions.items()):

                if client is ws:
                    del self.subscriptions[subscription_id]

        return ws

    async def publish(self, event):
        """Sends ``event`` to every subscription whose filter matches."""

        if hasattr(event, 'to_json'):
            event = event.to_json()

        delivered = 0

        for subscription_id, (ws, event_filter) in list(
                self.subscriptions.items()):

            if not event_matches(event_filter, event):
                continue

            await ws.send_str(encode_notification(self.SUBSCRIBE_EVENT, {
                'subscription': subscription_id,
                'result': event,
            }))

            delivered += 1

        return delivered

    async def send_raw(self, data):
        await asyncio.gather(*[i.send_str(data) for i in self.clients])

    async def close_connections(self):
        await asyncio.gather(*[i.close() for i in list(self.clients)])


class NodeContext(object):
    def __init__(self, node, host, port):
        self.node = node
        self.host = host
        self.port = port
        self.url = 'http://{}:{}/'.format(host, port)
        self.clients = []

    def make_clients(self, count, **kwargs):
        clients = [SuiClient(self.url, **kwargs) for i in range(count)]
        self.clients += clients

        return clients

    def make_client(self, **kwargs):
        return self.make_clients(1, **kwargs)[0]

    async def finish_connections(self):
        await asyncio.gather(
            *[i.close() for i in self.clients]
        )


async def gen_node_context(node, host='127.0.0.1', port=0,
                           NodeContext=NodeContext):

    runner = web.AppRunner(node.app)
    await runner.setup()

    site = web.TCPSite(runner, host, port)
    await site.start()

    host, port = runner.addresses[0][:2]
    node_context = NodeContext(node, host, port)

    try:
        yield node_context

    finally:
        # teardown clients
        await node_context.finish_connections()
        await node.close_connections()

        # teardown server
        await runner.cleanup()


def pytest_configure(config):
    # node_context and sui_client are async fixtures
    if config.pluginmanager.hasplugin('asyncio'):
        from . import fixtures

        config.pluginmanager.register(fixtures, 'aiohttp-sui-rpc-fixtures')
