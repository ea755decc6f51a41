"""structlog プロセッサー"""

from __future__ import annotations

from typing import Any

import structlog

from .models import RendererConfig
from .serializer import serialize_with


class ChainedErrorRenderer(structlog.processors.ExceptionRenderer):
    """event_dict の exc_info を原因チェーン付きの辞書に置き換えるプロセッサー。

    exc_info の正規化 (True / 例外インスタンス / タプル) は ExceptionRenderer に任せ、
    整形だけを serialize_with に差し替える。
    structlog.processors.format_exc_info の代わりに JSONRenderer の前へ置く。

    Example:
        structlog.configure(processors=[
            structlog.processors.add_log_level,
            ChainedErrorRenderer(),
            structlog.processors.JSONRenderer(),
        ])
    """

    def __init__(self, config: RendererConfig | None = None) -> None:
        self._config = config or RendererConfig()
        super().__init__(self._serialize)

    def _serialize(self, exc_info: Any) -> Any:
        return serialize_with(exc_info[1], self._config.serialize)

    def __call__(
        self,
        logger: structlog.types.WrappedLogger,
        name: str,
        event_dict: structlog.types.EventDict,
    ) -> structlog.types.EventDict:
        if "exc_info" not in event_dict:
            return event_dict
        event_dict = super().__call__(logger, name, event_dict)
        # ExceptionRenderer は "exception" キーに格納する
        record = event_dict.pop("exception", None)
        if record is not None:
            event_dict[self._config.key] = record
        return event_dict
