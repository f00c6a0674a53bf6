"""Label renderer providers."""

from .json_renderer import JsonLabelRenderer
from .plain_renderer import PlainLabelRenderer
from .registration import BUILTIN_RENDERERS, new_label_renderer, register_builtin_renderers

__all__ = [
    "PlainLabelRenderer",
    "JsonLabelRenderer",
    "BUILTIN_RENDERERS",
    "register_builtin_renderers",
    "new_label_renderer",
]
