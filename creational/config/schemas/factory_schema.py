"""Factory and registry configuration schemas."""
from pydantic import BaseModel, Field, model_validator

from creational.domain.student.value_objects import DEFAULT_CACHE_WINDOW, MAX_YEAR, MIN_YEAR


class FactoryConfig(BaseModel):
    """Settings for the caching static factories."""

    admission_year_cache_low: int = Field(
        DEFAULT_CACHE_WINDOW[0], description="First admission year served from the shared cache"
    )
    admission_year_cache_high: int = Field(
        DEFAULT_CACHE_WINDOW[1], description="Last admission year served from the shared cache"
    )

    @model_validator(mode="after")
    def validate_cache_window(self) -> "FactoryConfig":
        """Ensure the cache window is non-empty and within valid years."""
        low, high = self.admission_year_cache_low, self.admission_year_cache_high
        if low > high:
            raise ValueError("admission_year_cache_low must not exceed admission_year_cache_high")
        if low < MIN_YEAR or high > MAX_YEAR:
            raise ValueError(f"Admission year cache window must lie within {MIN_YEAR}..{MAX_YEAR}")
        return self


class RegistryConfig(BaseModel):
    """Settings for the label renderer provider registry."""

    default_renderer: str = Field("plain", description="Provider used when no name is given")
    register_builtin_renderers: bool = Field(
        True, description="Register the built-in plain and json renderers at startup"
    )
