"""原因 (cause) の表現と解決"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class EagerCause:
    """値として保持された原因。"""

    value: Any


@dataclass(frozen=True)
class LazyCause:
    """シリアライズ時に初めて呼び出される引数なしのアクセサ。"""

    factory: Callable[[], Any]


Cause = EagerCause | LazyCause | None


def classify_cause(raw: Any) -> Cause:
    """生の cause 値を EagerCause / LazyCause / None に分類する。

    クラスは呼び出し可能だがアクセサではないため、値として扱う。
    """
    if raw is None:
        return None
    if isinstance(raw, (EagerCause, LazyCause)):
        return raw
    if callable(raw) and not isinstance(raw, type):
        return LazyCause(raw)
    return EagerCause(raw)


def resolve_cause(cause: Cause) -> Any:
    """原因を実際の値に解決する。

    LazyCause の呼び出しで例外が発生した場合は None を返す。
    例外は記録しない。
    """
    if cause is None:
        return None
    if isinstance(cause, LazyCause):
        try:
            return cause.factory()
        except Exception:
            return None
    return cause.value


def read_cause(value: BaseException) -> Cause:
    """エラーから原因を読み取って分類する。

    cause 属性がない、または None の場合は __cause__ (raise ... from) を参照する。
    """
    raw = getattr(value, "cause", None)
    if raw is None:
        raw = value.__cause__
    return classify_cause(raw)
