"""Plain-text nutrition label renderer."""
from creational.domain.base.ports.label_renderer_port import LabelRendererPort
from creational.domain.nutrition.nutrition_facts import NutritionFacts

_ROWS = (
    ("Calories", "calories", ""),
    ("Fat", "fat", "g"),
    ("Sodium", "sodium", "mg"),
    ("Carbohydrate", "carbohydrate", "g"),
)


class PlainLabelRenderer(LabelRendererPort):
    """Renders a fixed-width text label."""

    name = "plain"

    def __init__(self, width: int = 32):
        self.width = width

    def render(self, facts: NutritionFacts) -> str:
        rule = "-" * self.width
        lines = [
            "Nutrition Facts".center(self.width),
            rule,
            self._row("Serving size", f"{facts.serving_size} ml"),
            self._row("Servings", str(facts.servings)),
            rule,
        ]
        for label, field, unit in _ROWS:
            lines.append(self._row(label, f"{getattr(facts, field)}{unit}"))
        return "\n".join(lines)

    def _row(self, label: str, value: str) -> str:
        padding = max(self.width - len(label) - len(value), 1)
        return f"{label}{' ' * padding}{value}"
