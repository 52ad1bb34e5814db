"""方法注册表。

调用方与服务端约定每个方法的参数、结果和错误数据类型，
在边界处用 pydantic 校验；未注册的方法按原样透传。
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from aurimyth.jsonrpc_kit.common.logging import logger

from .exceptions import InvalidMethodError, InvalidParamsError, InvalidResultError

T = TypeVar("T")


class MethodSpec:
    """单个方法的类型约定。

    Attributes:
        method: 方法名
        params: 参数类型（None 表示不校验）
        result: 结果类型（None 表示不校验）
        error_data: 错误附加数据类型（None 表示不校验）
    """

    def __init__(
        self,
        method: str,
        params: Any = None,
        result: Any = None,
        error_data: Any = None,
    ) -> None:
        self.method = method
        self.params = params
        self.result = result
        self.error_data = error_data
        self._params_adapter = TypeAdapter(params) if params is not None else None
        self._result_adapter = TypeAdapter(result) if result is not None else None
        self._error_data_adapter = TypeAdapter(error_data) if error_data is not None else None

    def dump_params(self, value: Any) -> Any:
        """校验参数并转换为可 JSON 序列化的值。

        Raises:
            InvalidParamsError: 参数不符合声明的类型
        """
        if self._params_adapter is None:
            return value
        try:
            validated = self._params_adapter.validate_python(value)
        except ValidationError as exc:
            raise InvalidParamsError(self.method, exc.errors(include_context=False)) from exc
        return self._params_adapter.dump_python(validated, mode="json")

    def validate_result(self, value: Any) -> Any:
        """校验结果。

        Raises:
            InvalidResultError: 结果不符合声明的类型
        """
        if self._result_adapter is None:
            return value
        try:
            return self._result_adapter.validate_python(value)
        except ValidationError as exc:
            raise InvalidResultError(self.method, value, exc.errors(include_context=False)) from exc

    def validate_error_data(self, value: Any) -> Any:
        """校验错误附加数据。

        校验失败时保留原始数据，远端错误本身仍是调用方收到的信号。
        """
        if self._error_data_adapter is None or value is None:
            return value
        try:
            return self._error_data_adapter.validate_python(value)
        except ValidationError:
            logger.debug(f"错误数据不符合约定类型，保留原始值: {self.method}")
            return value

    def __repr__(self) -> str:
        return f"<MethodSpec method={self.method} params={self.params} result={self.result}>"


class MethodRegistry:
    """方法注册表。

    使用示例:
        registry = MethodRegistry()
        registry.register("add", params=list[int], result=int)

        @registry.method("create_user", result=UserOut)
        class CreateUserParams(BaseModel):
            name: str
    """

    def __init__(self) -> None:
        """初始化方法注册表。"""
        self._methods: dict[str, MethodSpec] = {}

    def register(
        self,
        method: str,
        params: Any = None,
        result: Any = None,
        error_data: Any = None,
    ) -> MethodSpec:
        """注册方法的类型约定，重复注册会覆盖之前的约定。

        Args:
            method: 方法名
            params: 参数类型
            result: 结果类型
            error_data: 错误附加数据类型

        Returns:
            MethodSpec: 注册后的约定

        Raises:
            InvalidMethodError: 方法名为空
        """
        if not isinstance(method, str) or not method:
            raise InvalidMethodError(method)
        spec = MethodSpec(method, params=params, result=result, error_data=error_data)
        self._methods[method] = spec
        logger.debug(f"注册方法: {method}")
        return spec

    def method(
        self,
        name: str,
        result: Any = None,
        error_data: Any = None,
    ) -> Callable[[type[T]], type[T]]:
        """以装饰器方式注册，被装饰的类作为参数类型。"""

        def decorator(params: type[T]) -> type[T]:
            self.register(name, params=params, result=result, error_data=error_data)
            return params

        return decorator

    def unregister(self, method: str) -> None:
        """注销方法。"""
        if self._methods.pop(method, None) is not None:
            logger.debug(f"注销方法: {method}")

    def get(self, method: str) -> MethodSpec | None:
        """获取方法约定，未注册返回 None。"""
        return self._methods.get(method)

    def methods(self) -> list[str]:
        """获取所有已注册的方法名。"""
        return list(self._methods)

    def __contains__(self, method: object) -> bool:
        return method in self._methods

    def __len__(self) -> int:
        return len(self._methods)


__all__ = [
    "MethodRegistry",
    "MethodSpec",
]
