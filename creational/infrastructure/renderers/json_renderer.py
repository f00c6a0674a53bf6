"""JSON nutrition label renderer."""
import json
from typing import Optional

from creational.domain.base.ports.label_renderer_port import LabelRendererPort
from creational.domain.nutrition.nutrition_facts import NutritionFacts


class JsonLabelRenderer(LabelRendererPort):
    """Renders a label as a JSON object with sorted keys."""

    name = "json"

    def __init__(self, indent: Optional[int] = None):
        self.indent = indent

    def render(self, facts: NutritionFacts) -> str:
        return json.dumps(facts.model_dump(), indent=self.indent, sort_keys=True)
