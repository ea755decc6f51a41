"""シリアライズ設定モデル"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SerializeConfig:
    """エラーチェーンのシリアライズ設定。"""

    include_stack: bool = True
    max_depth: int | None = None  # None は無制限

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 1:
            raise ValueError("max_depth must be >= 1")


@dataclass(frozen=True)
class RendererConfig:
    """structlog プロセッサー設定。"""

    key: str = "error"
    serialize: SerializeConfig = field(default_factory=SerializeConfig)

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
