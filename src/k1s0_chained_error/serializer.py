"""エラーチェーンのシリアライズ"""

from __future__ import annotations

import logging
from typing import Any

from .cause import read_cause, resolve_cause
from .fields import error_code, error_message, error_name, error_signal, error_stack
from .models import SerializeConfig

logger = logging.getLogger(__name__)


def _to_record(err: BaseException, include_stack: bool) -> dict[str, Any]:
    """単一エラーのフィールドを値のあるものだけ辞書にする。"""
    record: dict[str, Any] = {}
    name = error_name(err)
    if name:
        record["name"] = name
    message = error_message(err)
    if message:
        record["message"] = message
    code = error_code(err)
    if code:
        record["code"] = code
    sig = error_signal(err)
    if sig:
        record["signal"] = sig
    if include_stack:
        stack = error_stack(err)
        if stack:
            record["stack"] = stack
    return record


def serialize_with(value: Any, config: SerializeConfig) -> Any:
    """設定に従って値をシリアライズ可能な形式に変換する。

    Args:
        value: 変換対象。BaseException 以外はそのまま返す。
        config: シリアライズ設定

    Returns:
        エラーの場合は name/message/code/signal/stack/cause を持つ辞書、
        それ以外は value 自身
    """
    if not isinstance(value, BaseException):
        return value

    root = _to_record(value, config.include_stack)
    # id -> エラー。遅延 cause が生成したオブジェクトも参照ごと保持する
    seen: dict[int, BaseException] = {id(value): value}
    record, current, depth = root, value, 1
    while True:
        cause = resolve_cause(read_cause(current))
        if not cause:
            break
        if not isinstance(cause, BaseException):
            record["cause"] = cause
            break
        if id(cause) in seen:
            logger.debug(
                "Cyclic error chain detected; cutting chain",
                extra={"error_type": error_name(cause), "depth": depth},
            )
            break
        if config.max_depth is not None and depth >= config.max_depth:
            logger.debug(
                "Error chain exceeds max_depth; cutting chain",
                extra={"max_depth": config.max_depth},
            )
            break
        child = _to_record(cause, config.include_stack)
        record["cause"] = child
        seen[id(cause)] = cause
        record, current = child, cause
        depth += 1
    return root


def serialize(value: Any, include_stack: bool = True) -> Any:
    """値をシリアライズ可能な形式に変換する。

    エラー以外の値はそのまま返す。エラーは値のあるフィールドのみを持つ辞書に変換し、
    原因 (cause) を再帰的に cause キーへ格納する。
    """
    return serialize_with(value, SerializeConfig(include_stack=include_stack))
