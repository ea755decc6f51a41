"""標準 json モジュールとの統合"""

from __future__ import annotations

import json
from typing import Any

from .serializer import serialize


class ChainedErrorJSONEncoder(json.JSONEncoder):
    """エラーをシリアライズ済み辞書として出力する JSONEncoder。

    例外は serialize() で変換し、それ以外で to_json() を持つオブジェクトはそれを使う。
    """

    include_stack: bool = True

    def default(self, o: Any) -> Any:
        if isinstance(o, BaseException):
            return serialize(o, self.include_stack)
        to_json = getattr(o, "to_json", None)
        if callable(to_json):
            return to_json()
        return super().default(o)


class _NoStackEncoder(ChainedErrorJSONEncoder):
    include_stack = False


def dumps(obj: Any, *, include_stack: bool = True, **kwargs: Any) -> str:
    """エラーを含む値を JSON 文字列に変換する。

    Args:
        obj: 変換対象
        include_stack: 例外のトレースバックを含めるか
        **kwargs: json.dumps に渡す追加引数

    Returns:
        JSON 文字列
    """
    cls = ChainedErrorJSONEncoder if include_stack else _NoStackEncoder
    return json.dumps(obj, cls=cls, **kwargs)
