"""エラーオブジェクトのオプショナルフィールド取得"""

from __future__ import annotations

import errno
import signal
import subprocess
import traceback
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class HasMessage(Protocol):
    """message 属性を持つエラー。"""

    message: Any


@runtime_checkable
class HasCode(Protocol):
    """code 属性を持つエラー。"""

    code: Any


@runtime_checkable
class HasSignal(Protocol):
    """signal 属性を持つエラー。"""

    signal: Any


def error_name(err: BaseException) -> str:
    """エラーの種別名を返す。"""
    return type(err).__name__


def error_message(err: BaseException) -> Any:
    """エラーメッセージを返す。

    message 属性 (文字列または None) を持つ場合はそれを優先し、それ以外は str(err) を使う。
    __str__ が例外を送出した場合はメッセージなしとして扱う。
    """
    if isinstance(err, HasMessage):
        message = err.message
        if message is None or isinstance(message, str):
            return message
    try:
        return str(err)
    except Exception:
        return None


def error_code(err: BaseException) -> Any:
    """エラーコードを返す。OSError は errno のシンボル名 (ENOENT 等) を使う。"""
    if isinstance(err, HasCode):
        return err.code
    if isinstance(err, OSError) and err.errno is not None:
        return errno.errorcode.get(err.errno, err.errno)
    return None


def error_signal(err: BaseException) -> Any:
    """プロセスを終了させたシグナル名を返す。"""
    if isinstance(err, HasSignal):
        return err.signal
    if isinstance(err, (subprocess.CalledProcessError, subprocess.TimeoutExpired)):
        returncode = getattr(err, "returncode", None)
        if isinstance(returncode, int) and returncode < 0:
            try:
                return signal.Signals(-returncode).name
            except ValueError:
                return None
    return None


def error_stack(err: BaseException) -> str | None:
    """送出済みエラーのトレースバックを返す。未送出の場合は None。

    チェーンは cause として別途シリアライズするため、ここでは含めない。
    """
    if err.__traceback__ is None:
        return None
    return "".join(traceback.format_exception(type(err), err, err.__traceback__, chain=False))
