"""k1s0 chained error library."""

from .cause import EagerCause, LazyCause, classify_cause, resolve_cause
from .encoder import ChainedErrorJSONEncoder, dumps
from .exceptions import ChainedError
from .models import RendererConfig, SerializeConfig
from .processors import ChainedErrorRenderer
from .serializer import serialize, serialize_with

__all__ = [
    "ChainedError",
    "serialize",
    "serialize_with",
    "SerializeConfig",
    "RendererConfig",
    "EagerCause",
    "LazyCause",
    "classify_cause",
    "resolve_cause",
    "ChainedErrorJSONEncoder",
    "dumps",
    "ChainedErrorRenderer",
]
