import logging

logger = logging.getLogger('aiohttp_sui_rpc.protocol')


class classproperty(object):
    def __init__(self, fget):
        self.fget = fget

    def __get__(self, owner_self, owner_cls):
        return self.fget(owner_cls)


class SuiApiError(Exception):
    MESSAGE = 'Sui API error'
    ERROR_CODE = None
    _lookup_table = None

    def __init__(self, *args, msg_id=None, data=None, error_code=None,
                 message='', **kwargs):

        self.data = data
        self.msg_id = msg_id
        self.error_code = error_code if error_code is not None \
            else self.ERROR_CODE
        self.message = message or self.MESSAGE

        super().__init__(*args, **kwargs)

    def __str__(self):
        if self.error_code is None:
            return self.message

        return '[{}] {}'.format(self.error_code, self.message)

    @classmethod
    def _gen_lookup_table(cls):
        logger.debug('regenerating error lookup table')

        cls._lookup_table = {
            **{
                -32600: RpcInvalidRequestError,
                -32601: RpcMethodNotFoundError,
                -32602: RpcInvalidParamsError,
                -32603: RpcInternalError,
                -32700: RpcParseError,

            },
            **{error_code: RpcServerError
               for error_code in range(-32000, -32100, -1)}
        }

    @classproperty
    def lookup_table(cls):
        if not cls._lookup_table:
            cls._gen_lookup_table()

        return cls._lookup_table


class RpcInvalidRequestError(SuiApiError):
    ERROR_CODE = -32600
    MESSAGE = 'Invalid request'


class RpcMethodNotFoundError(SuiApiError):
    ERROR_CODE = -32601
    MESSAGE = 'Method not found'


class RpcInternalError(SuiApiError):
    ERROR_CODE = -32603
    MESSAGE = 'Internal Error'


class RpcInvalidParamsError(SuiApiError):
    ERROR_CODE = -32602
    MESSAGE = 'Invalid params'


class RpcParseError(SuiApiError):
    ERROR_CODE = -32700
    MESSAGE = 'Invalid JSON was received'


class RpcServerError(SuiApiError):
    ERROR_CODE = None
    MESSAGE = 'Server error'


class SuiTransportError(SuiApiError):
    """
    Raised when the node could not be reached or answered with something
    that is not a JSON-RPC message (connection refused, timeout, HTTP error
    status, closed websocket). The underlying exception, if any, is
    available as ``__cause__``.
    """

    MESSAGE = 'Transport error'


def error_code_to_exception(error_code: int):
    """
    Translates a given error code to the corresponding exception.

    Parameters
    ----------
    error_code : int
        An error code taken from a JSON-RPC error object.

    Returns
    -------
        One of the SuiApiError exception classes defined in this file.
        Codes outside the ranges reserved by JSON-RPC 2.0 map to
        ``SuiApiError`` itself, since nodes are free to define their own.
    """

    return SuiApiError.lookup_table.get(error_code, SuiApiError)
