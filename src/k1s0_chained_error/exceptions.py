"""原因チェーンを持つ例外型定義"""

from __future__ import annotations

from typing import Any

from .fields import error_stack
from .serializer import serialize


class ChainedError(Exception):
    """原因 (cause) を保持できるエラー。

    cause には別のエラーだけでなく任意の値、または引数なしのアクセサを渡せる。
    アクセサはシリアライズ時に初めて呼び出される。
    """

    def __init__(
        self,
        message: str | None = None,
        cause: Any = None,
        *,
        code: str | int | None = None,
    ) -> None:
        if message is None:
            super().__init__()
        else:
            super().__init__(message)
        self._message = message
        self._cause = cause
        self._code = code
        if isinstance(cause, BaseException):
            self.__cause__ = cause

    def __setstate__(self, state: dict[str, Any]) -> None:
        # copy / pickle は args と __dict__ から復元するため __cause__ を張り直す
        super().__setstate__(state)
        if isinstance(self._cause, BaseException):
            self.__cause__ = self._cause

    def __str__(self) -> str:
        message = self._message or ""
        if self._code:
            return f"{self._code}: {message}"
        return message

    @property
    def message(self) -> str | None:
        """エラーメッセージ。"""
        return self._message

    @property
    def cause(self) -> Any:
        """このエラーの原因。未指定の場合は None。"""
        return self._cause

    @property
    def code(self) -> str | int | None:
        return self._code

    @property
    def name(self) -> str:
        return type(self).__name__

    @property
    def stack(self) -> str | None:
        """送出済みの場合のトレースバック文字列。"""
        return error_stack(self)

    def to_object(self, include_stack: bool = True) -> Any:
        """このエラーをシリアライズした辞書を返す。"""
        return serialize(self, include_stack)

    def to_json(self, key: str | None = None) -> Any:
        """JSON エンコーダー向けのフック。key は使用しない。"""
        return self.to_object()

    def __structlog__(self) -> Any:
        # structlog の JSONRenderer がフォールバック時に呼び出す
        return self.to_object()

    serialize = staticmethod(serialize)
