import aiohttp
import asyncio
import inspect

from . import exceptions

from .protocol import (
    JsonRpcMsgTyp,
    encode_request,
    decode_error,
    decode_msg,
    convert_result,
)

CLOSING_MSG_TYPES = (
    aiohttp.WSMsgType.CLOSE,
    aiohttp.WSMsgType.CLOSING,
    aiohttp.WSMsgType.CLOSED,
    aiohttp.WSMsgType.ERROR,
)


class Subscription:
    """
    A live subscription on its own websocket channel.

    Notifications carrying this subscription's id are converted to
    ``result_type`` and handed to ``on_next`` one at a time, in the order
    they arrive. Error messages, undecodable messages and a lost
    connection are handed to ``on_error`` as ``SuiApiError``; a lost
    connection ends the subscription.

    Callbacks may be plain functions or coroutine functions.
    ``dispose()`` can be called from anywhere, including from inside a
    callback; once it returns no callback is invoked again.
    """

    def __init__(self, rpc_client, method, params, on_next, on_error=None,
                 unsubscribe_method=None, result_type=None):

        self._rpc_client = rpc_client
        self._method = method
        self._params = params
        self._on_next = on_next
        self._on_error = on_error
        self._unsubscribe_method = unsubscribe_method
        self._result_type = result_type
        self._logger = rpc_client.logger
        self._id = rpc_client.client_id

        self.subscription_id = None

        self._ws = None
        self._worker = None
        self._closing = None
        self._backlog = []
        self._disposed = False

    def __repr__(self):
        return '<Subscription {} id={!r}{}>'.format(
            self._method,
            self.subscription_id,
            ' disposed' if self._disposed else '',
        )

    @property
    def disposed(self):
        return self._disposed

    async def start(self, timeout=None):
        self._logger.debug('#%s: ws connect to %s...', self._id,
                           self._rpc_client.ws_url)

        try:
            self._ws = await self._rpc_client.session.ws_connect(
                self._rpc_client.ws_url,
                headers=self._rpc_client.headers,
            )

        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise exceptions.SuiTransportError(
                message='cannot connect to {}: {!r}'.format(
                    self._rpc_client.ws_url, e),
            ) from e

        self._logger.debug('#%s: ws connected', self._id)

        try:
            if timeout:
                self.subscription_id = await asyncio.wait_for(
                    self._subscribe(), timeout=timeout)

            else:
                self.subscription_id = await self._subscribe()

        except asyncio.TimeoutError as e:
            await self._ws.close()

            raise exceptions.SuiTransportError(
                message='{} was not confirmed in time'.format(self._method),
            ) from e

        except BaseException:
            await self._ws.close()

            raise

        self._logger.debug('#%s: subscribed as %s', self._id,
                           self.subscription_id)

        self._worker = asyncio.ensure_future(self._handle_msgs())

    async def _subscribe(self):
        msg_id = self._rpc_client.next_id()
        request = encode_request(self._method, id=msg_id,
                                 params=self._params)

        self._logger.debug('#%s: > %s', self._id, request)
        await self._ws.send_str(request)

        while True:
            raw_msg = await self._ws.receive()

            if raw_msg.type in CLOSING_MSG_TYPES:
                raise exceptions.SuiTransportError(
                    message='channel closed before {} was confirmed'.format(
                        self._method),
                )

            if raw_msg.type != aiohttp.WSMsgType.TEXT:
                continue

            self._logger.debug('#%s: < %s', self._id, raw_msg.data)

            msg = decode_msg(raw_msg.data)

            # notifications can overtake the confirmation
            if msg.type == JsonRpcMsgTyp.NOTIFICATION:
                self._backlog.append(msg)

                continue

            if msg.data['id'] != msg_id:
                continue

            if msg.type == JsonRpcMsgTyp.ERROR:
                raise decode_error(msg)

            return msg.data['result']

    async def _invoke(self, callback, value):
        if self._disposed:
            return

        try:
            result = callback(value)

            if inspect.isawaitable(result):
                await result

        except asyncio.CancelledError:
            raise

        except Exception as e:
            self._logger.error(e, exc_info=True)

    async def _notify_error(self, error):
        if self._on_error is None:
            self._logger.error('#%s: %s', self._id, error)

            return

        await self._invoke(self._on_error, error)

    async def _handle_msg(self, msg):
        # notifications
        if msg.type == JsonRpcMsgTyp.NOTIFICATION:
            params = msg.data['params']

            if type(params) is not dict or \
               params.get('subscription') != self.subscription_id:

                self._logger.debug('#%s: no handler found', self._id)

                return

            try:
                value = convert_result(self._result_type,
                                       params.get('result'))

            except exceptions.SuiApiError as e:
                await self._notify_error(e)

                return

            await self._invoke(self._on_next, value)

        # errors
        elif msg.type == JsonRpcMsgTyp.ERROR:
            await self._notify_error(decode_error(msg))

    async def _handle_msgs(self):
        self._logger.debug('#%s: worker start...', self._id)

        try:
            backlog, self._backlog = self._backlog, []

            for msg in backlog:
                await self._handle_msg(msg)

            while not self._ws.closed:
                raw_msg = await self._ws.receive()

                if raw_msg.type in CLOSING_MSG_TYPES:
                    error = exceptions.SuiTransportError(
                        message='subscription channel closed',
                        data=raw_msg.extra,
                    )

                    error.__cause__ = self._ws.exception()
                    await self._notify_error(error)

                    break

                if raw_msg.type != aiohttp.WSMsgType.TEXT:
                    continue

                self._logger.debug('#%s: < %s', self._id, raw_msg.data)

                try:
                    msg = decode_msg(raw_msg.data)

                except exceptions.SuiApiError as e:
                    await self._notify_error(e)

                    continue

                await self._handle_msg(msg)

        finally:
            self._disposed = True
            self._rpc_client._forget(self)
            await self._ws.close()

            self._logger.debug('#%s: worker stopped', self._id)

    def dispose(self):
        """Stops delivery at once; the channel is closed in the background."""

        if self._disposed:
            return

        self._disposed = True
        self._rpc_client._forget(self)

        if self._worker is not None:
            self._worker.cancel()

        # a worker cancelled before its first step never reaches its finally
        if self._ws is not None and not self._ws.closed:
            self._closing = asyncio.ensure_future(self._ws.close())

    async def close(self):
        self.dispose()

        pending = [i for i in (self._worker, self._closing)
                   if i is not None and i is not asyncio.current_task()]

        await asyncio.gather(*pending, return_exceptions=True)

    async def unsubscribe(self):
        """Tells the node to drop the subscription, then closes it."""

        try:
            if not self._disposed and not self._ws.closed and \
               self._unsubscribe_method is not None:

                request = encode_request(
                    self._unsubscribe_method,
                    id=self._rpc_client.next_id(),
                    params=[self.subscription_id],
                )

                self._logger.debug('#%s: > %s', self._id, request)
                await self._ws.send_str(request)

        except (aiohttp.ClientError, ConnectionError) as e:
            raise exceptions.SuiTransportError(
                message='{} failed: {!r}'.format(
                    self._unsubscribe_method, e),
            ) from e

        finally:
            await self.close()
