"""异常与错误代码测试。"""

import pytest

from aurimyth.jsonrpc_kit.common import FoundationError
from aurimyth.jsonrpc_kit.rpc import (
    ClientError,
    ErrorCode,
    InvalidMethodError,
    JsonRpcError,
    MalformedResponseError,
    ProtocolViolationError,
    RemoteError,
    ResponseIdMismatchError,
    TransportError,
)


class TestErrorCode:
    """ErrorCode 测试。"""

    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            (-32700, ErrorCode.PARSE_ERROR),
            (-32600, ErrorCode.INVALID_REQUEST),
            (-32601, ErrorCode.METHOD_NOT_FOUND),
            (-32602, ErrorCode.INVALID_PARAMS),
            (-32603, ErrorCode.INTERNAL_ERROR),
            (-32000, None),
            (1, None),
            (True, None),
            ("-32601", None),
        ],
    )
    def test_from_code(self, code, expected):
        assert ErrorCode.from_code(code) is expected


class TestHierarchy:
    """异常层级。"""

    @pytest.mark.parametrize(
        "error_type",
        [InvalidMethodError, TransportError, MalformedResponseError, ProtocolViolationError],
    )
    def test_local_errors(self, error_type):
        assert issubclass(error_type, ClientError)
        assert issubclass(error_type, JsonRpcError)
        assert issubclass(error_type, FoundationError)

    def test_remote_error_is_not_local(self):
        assert issubclass(RemoteError, JsonRpcError)
        assert not issubclass(RemoteError, ClientError)

    def test_id_mismatch_is_protocol_violation(self):
        assert issubclass(ResponseIdMismatchError, ProtocolViolationError)


class TestRemoteError:
    """RemoteError 测试。"""

    def test_fields_from_error_object(self):
        error = {"code": -32602, "message": "Invalid params", "data": ["x"]}

        exc = RemoteError(error)

        assert exc.error is error
        assert exc.code == -32602
        assert str(exc) == "Invalid params"
        assert exc.data == ["x"]
        assert exc.error_code is ErrorCode.INVALID_PARAMS
        assert "code=-32602" in repr(exc)

    def test_non_object_error(self):
        exc = RemoteError("boom")

        assert exc.error == "boom"
        assert exc.code is None
        assert str(exc) == "boom"
        assert exc.error_code is None
