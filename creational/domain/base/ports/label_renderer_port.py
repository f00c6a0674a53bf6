"""Label renderer port - service interface bound to providers at runtime."""
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from creational.domain.nutrition.nutrition_facts import NutritionFacts


class LabelRendererPort(ABC):
    """Renders a nutrition label.

    Client code depends only on this interface. Concrete renderers are
    registered with the provider registry under a name and looked up when a
    renderer is requested, so they need not exist when the client is written.
    """

    #: Short name the renderer is registered under.
    name: str = ""

    @abstractmethod
    def render(self, facts: "NutritionFacts") -> str:
        """Render ``facts`` as text."""
