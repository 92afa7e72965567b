from collections import namedtuple
from functools import lru_cache
from enum import Enum
import json

from pydantic import TypeAdapter, ValidationError

from .exceptions import (
    error_code_to_exception,
    RpcInvalidRequestError,
    RpcParseError,
    SuiApiError,
)

JSONRPC = '2.0'
JsonRpcMsg = namedtuple('JsonRpcMsg', ['type', 'data'])


class JsonRpcMsgTyp:
    REQUEST = 10
    NOTIFICATION = 11
    RESULT = 21
    ERROR = 22


def _json_default(value):
    # models and filters know their own wire shape
    if hasattr(value, 'to_json'):
        return value.to_json()

    if isinstance(value, Enum):
        return value.value

    raise TypeError(
        'Object of type {} is not JSON serializable'.format(
            type(value).__name__))


def dumps(data):
    return json.dumps(data, default=_json_default)


def decode_msg(raw_msg):
    """
    Decodes jsonrpc 2.0 raw message objects into JsonRpcMsg objects.

    Examples:
        Request:
            {
                "jsonrpc": "2.0",
                "id": 1,
                "method": "sui_getObject",
                "params": ["0x5", {"showType": true}]
            }

        Notification:
            {
                "jsonrpc": "2.0",
                "method": "sui_subscribeEvent",
                "params": {"subscription": 7, "result": {...}}
            }

        Response:
            {
                "jsonrpc": "2.0",
                "id": 1,
                "result": {...},
            }

        Error:
            {
                "jsonrpc": "2.0",
                "id": 1,
                "error": {
                    "code": -32602,
                    "message": "Invalid params",
                    "data": null
                }
            }
    """

    try:
        msg_data = json.loads(raw_msg)

    except ValueError:
        raise RpcParseError

    if type(msg_data) is not dict:
        raise RpcInvalidRequestError

    # check jsonrpc version
    if 'jsonrpc' not in msg_data or not msg_data['jsonrpc'] == JSONRPC:
        raise RpcInvalidRequestError(msg_id=msg_data.get('id', None))

    # check requierd fields
    if not len(set(['error', 'result', 'method']) & set(msg_data)) == 1:
        raise RpcInvalidRequestError(msg_id=msg_data.get('id', None))

    # find message type
    if 'method' in msg_data:
        if 'id' in msg_data and msg_data['id'] is not None:
            msg_type = JsonRpcMsgTyp.REQUEST

        else:
            msg_type = JsonRpcMsgTyp.NOTIFICATION

    elif 'result' in msg_data:
        msg_type = JsonRpcMsgTyp.RESULT

    elif 'error' in msg_data:
        msg_type = JsonRpcMsgTyp.ERROR

    # Request Objects
    if msg_type in (JsonRpcMsgTyp.REQUEST, JsonRpcMsgTyp.NOTIFICATION):

        # 'method' fields have to be strings
        if type(msg_data['method']) is not str:
            raise RpcInvalidRequestError

        # set empty 'params' if not set
        if 'params' not in msg_data:
            msg_data['params'] = None

        # set empty 'id' if not set
        if 'id' not in msg_data:
            msg_data['id'] = None

    # Response Objects
    if msg_type in (JsonRpcMsgTyp.RESULT, JsonRpcMsgTyp.ERROR):

        # every Response object has to define an id
        if 'id' not in msg_data:
            raise RpcInvalidRequestError(msg_id=msg_data.get('id', None))

    # Error objects
    if msg_type == JsonRpcMsgTyp.ERROR:

        # the error field has to be a dict
        if type(msg_data['error']) is not dict:
            raise RpcInvalidRequestError(msg_id=msg_data.get('id', None))

        # the error field has to define 'code' and 'message'
        if not len(set(['code', 'message']) & set(msg_data['error'])) == 2:
            raise RpcInvalidRequestError(msg_id=msg_data.get('id', None))

        # the error code has to be an integer
        if type(msg_data['error']['code']) is not int:
            raise RpcInvalidRequestError(msg_id=msg_data.get('id', None))

        # set empty 'data' field if not set
        if 'data' not in msg_data['error']:
            msg_data['error']['data'] = None

    return JsonRpcMsg(msg_type, msg_data)


def encode_request(method, id=None, params=None):
    if type(method) is not str:
        raise ValueError('method has to be a string')

    msg = {
        'jsonrpc': JSONRPC,
        'method': method,
    }

    if id is not None:
        msg['id'] = id

    if params is not None:
        msg['params'] = params

    return dumps(msg)


def encode_notification(method, params=None):
    return encode_request(method, id=None, params=params)


def encode_result(id, result):
    msg = {
        'jsonrpc': JSONRPC,
        'id': id,
        'result': result
    }

    return dumps(msg)


def encode_error(error, id=None):
    if not isinstance(error, SuiApiError):
        raise ValueError

    msg = {
        'jsonrpc': JSONRPC,
        'id': None,
        'error': {
            'code': error.error_code,
            'message': error.message,
        }
    }

    if id is not None:
        msg['id'] = id

    elif error.msg_id is not None:
        msg['id'] = error.msg_id

    if error.data is not None:
        msg['error']['data'] = error.data

    return dumps(msg)


def decode_error(msg: JsonRpcMsg):
    error_code = msg.data['error']['code']

    exception = error_code_to_exception(error_code)

    return exception(
        msg_id=msg.data.get('id', None),
        data=msg.data['error'].get('data', None),
        error_code=error_code,
        message=msg.data['error'].get('message', ''),
    )


@lru_cache(maxsize=None)
def _type_adapter(result_type):
    return TypeAdapter(result_type)


def convert_result(result_type, result):
    """
    Converts a raw JSON-RPC ``result`` into ``result_type``.

    ``result_type`` can be anything pydantic understands (a model class,
    ``List[Model]``, ``Dict[str, Model]``, ``int``, ...). ``None`` returns
    the raw value.
    """

    if result_type is None:
        return result

    try:
        return _type_adapter(result_type).validate_python(result)

    except ValidationError as e:
        raise RpcParseError(
            message='unexpected result shape: {}'.format(e),
            data=result,
        ) from e
