import aiohttp
import asyncio
import logging
from yarl import URL

from . import exceptions

from .protocol import (
    JsonRpcMsgTyp,
    encode_request,
    decode_error,
    decode_msg,
    convert_result,
)

from .subscription import Subscription


default_logger = logging.getLogger('aiohttp-sui-rpc.client')


def ws_url_for(url):
    url = URL(url)
    scheme = {'http': 'ws', 'https': 'wss'}.get(url.scheme, url.scheme)

    return url.with_scheme(scheme)


class JsonRpcClient:
    """
    JSON-RPC 2.0 transport to a Sui node.

    Requests are POSTed to ``url``; subscriptions open their own
    websocket to ``ws_url`` (derived from ``url`` if not given).
    ``timeout`` is either seconds or an ``aiohttp.ClientTimeout``. When a
    ``session`` is passed it is used as-is and never closed by the client.
    """

    _client_id = 0

    def __init__(self, url, ws_url=None, headers=None, timeout=None,
                 session=None, logger=default_logger):

        self._url = URL(url)
        self._ws_url = URL(ws_url) if ws_url is not None else ws_url_for(url)
        self._headers = dict(headers or {})

        if timeout is not None and \
           not isinstance(timeout, aiohttp.ClientTimeout):

            timeout = aiohttp.ClientTimeout(total=timeout)

        self._timeout = timeout
        self._session = session
        self._owns_session = session is None
        self._subscriptions = set()
        self._msg_id = 0
        self._logger = logger

        self._id = JsonRpcClient._client_id
        JsonRpcClient._client_id += 1

    @property
    def url(self):
        return self._url

    @property
    def ws_url(self):
        return self._ws_url

    @property
    def headers(self):
        return self._headers

    @property
    def timeout(self):
        return self._timeout

    @property
    def logger(self):
        return self._logger

    @property
    def client_id(self):
        return self._id

    @property
    def session(self):
        if self._session is None or \
           (self._owns_session and self._session.closed):

            self._session = aiohttp.ClientSession()

        return self._session

    @property
    def subscriptions(self):
        return set(self._subscriptions)

    def next_id(self):
        msg_id = self._msg_id
        self._msg_id += 1

        return msg_id

    def _request_kwargs(self, msg):
        kwargs = {
            'data': msg,
            'headers': {
                'Content-Type': 'application/json',
                **self._headers,
            },
        }

        if self._timeout is not None:
            kwargs['timeout'] = self._timeout

        return kwargs

    def _unwrap_response(self, method, msg_id, status, raw_body):
        try:
            msg = decode_msg(raw_body.decode('utf-8'))

        except (UnicodeDecodeError, exceptions.SuiApiError) as e:
            if status >= 400:
                raise exceptions.SuiTransportError(
                    message='HTTP {} from {}'.format(status, self._url),
                    data=raw_body.decode('utf-8', 'replace'),
                ) from e

            if isinstance(e, UnicodeDecodeError):
                raise exceptions.RpcParseError(
                    message='response to {} is not valid UTF-8'.format(
                        method),
                    data=raw_body,
                ) from e

            raise

        if msg.type == JsonRpcMsgTyp.ERROR:
            raise decode_error(msg)

        if msg.type != JsonRpcMsgTyp.RESULT:
            raise exceptions.RpcInvalidRequestError(
                message='expected a response to {}'.format(method),
                data=msg.data,
            )

        if msg.data['id'] != msg_id:
            raise exceptions.RpcInvalidRequestError(
                msg_id=msg.data['id'],
                message='response id {!r} does not match request id {!r}'.format(  # NOQA
                    msg.data['id'], msg_id),
            )

        return msg.data['result']

    async def call(self, method, params=None):
        msg_id = self.next_id()
        msg = encode_request(method, id=msg_id, params=params)

        self._logger.debug('#%s: > %s', self._id, msg)

        try:
            async with self.session.post(
                    self._url, **self._request_kwargs(msg)) as response:

                status = response.status
                raw_body = await response.read()

        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise exceptions.SuiTransportError(
                message='{} failed: {!r}'.format(method, e),
            ) from e

        self._logger.debug('#%s: < %s', self._id,
                           raw_body.decode('utf-8', 'replace'))

        return self._unwrap_response(method, msg_id, status, raw_body)

    async def call_and_unwrap(self, method, params, result_type=None):
        result = await self.call(method, params=params)

        return convert_result(result_type, result)

    async def subscribe(self, method, params, on_next, on_error=None,
                        unsubscribe_method=None, result_type=None,
                        timeout=None):

        subscription = Subscription(
            self, method, params,
            on_next=on_next,
            on_error=on_error,
            unsubscribe_method=unsubscribe_method,
            result_type=result_type,
        )

        self._subscriptions.add(subscription)

        try:
            await subscription.start(timeout=timeout)

        except BaseException:
            self._forget(subscription)
            raise

        return subscription

    def _forget(self, subscription):
        self._subscriptions.discard(subscription)

    async def close(self):
        await asyncio.gather(
            *[i.close() for i in list(self._subscriptions)]
        )

        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
        return False


class RpcApi:
    """Base of the façades; every method is one typed call on the client."""

    def __init__(self, rpc_client):
        self._rpc_client = rpc_client

    @property
    def rpc_client(self):
        return self._rpc_client

    async def _call(self, method, params, result_type=None):
        return await self._rpc_client.call_and_unwrap(
            method, params, result_type)
