"""Domain ports - interfaces implemented by the infrastructure layer."""

from .label_renderer_port import LabelRendererPort

__all__ = ["LabelRendererPort"]
