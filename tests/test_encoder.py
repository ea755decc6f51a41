"""JSON エンコーダー統合のユニットテスト"""

import json

import pytest
from k1s0_chained_error.encoder import ChainedErrorJSONEncoder, dumps
from k1s0_chained_error.exceptions import ChainedError


def _raised(err: BaseException) -> BaseException:
    try:
        raise err
    except BaseException as e:
        return e


def test_json_dumps_uses_chained_error_hook() -> None:
    """json.dumps がエンコーダー経由でシリアライズ済み辞書を出力すること。"""
    err = ChainedError("disk full", ChainedError("permission denied"))
    text = json.dumps(err, cls=ChainedErrorJSONEncoder)
    assert json.loads(text) == err.to_json()


def test_json_dumps_nested_error() -> None:
    """辞書内のエラーも変換されること。"""
    text = json.dumps({"event": "failed", "error": ValueError("bad")}, cls=ChainedErrorJSONEncoder)
    assert json.loads(text) == {
        "event": "failed",
        "error": {"name": "ValueError", "message": "bad"},
    }


def test_dumps_includes_stack_by_default() -> None:
    """dumps はデフォルトで stack を含めること。"""
    err = _raised(ChainedError("boom"))
    assert "stack" in json.loads(dumps(err))


def test_dumps_without_stack() -> None:
    """include_stack=False で stack を含めないこと。"""
    err = _raised(ChainedError("boom", _raised(OSError("io"))))
    data = json.loads(dumps(err, include_stack=False))
    assert "stack" not in data
    assert "stack" not in data["cause"]


def test_dumps_passes_kwargs() -> None:
    """追加引数が json.dumps に渡されること。"""
    text = dumps({"b": 1, "a": 2}, sort_keys=True)
    assert text == '{"a": 2, "b": 1}'


def test_encoder_uses_to_json_of_other_objects() -> None:
    """例外以外でも to_json を持つオブジェクトはそれを使うこと。"""

    class Payload:
        def to_json(self) -> dict[str, str]:
            return {"kind": "payload"}

    assert json.loads(dumps([Payload()])) == [{"kind": "payload"}]


def test_encoder_rejects_unknown_objects() -> None:
    """変換できないオブジェクトは TypeError になること。"""
    with pytest.raises(TypeError):
        dumps(object())
