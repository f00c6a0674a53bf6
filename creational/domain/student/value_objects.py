# creational/domain/student/value_objects.py
from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import ClassVar, Dict, Tuple

from creational.domain.core.exceptions import ValidationError

MIN_YEAR = 1900
MAX_YEAR = 2100
DEFAULT_CACHE_WINDOW: Tuple[int, int] = (1990, 2030)


@dataclass(frozen=True)
class AdmissionYear:
    """Year a student was admitted.

    ``AdmissionYear.of`` shares one instance per year inside the cache
    window and creates a fresh instance for years outside it. Calling the
    constructor directly always creates a fresh instance.
    """
    value: int

    _cache: ClassVar[Dict[int, AdmissionYear]] = {}
    _cache_window: ClassVar[Tuple[int, int]] = DEFAULT_CACHE_WINDOW
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError("Admission year must be an integer")
        if not MIN_YEAR <= self.value <= MAX_YEAR:
            raise ValidationError(
                f"Admission year must be between {MIN_YEAR} and {MAX_YEAR}, got {self.value}"
            )

    @classmethod
    def of(cls, year: int) -> AdmissionYear:
        low, high = cls._cache_window
        if isinstance(year, bool) or not isinstance(year, int) or not low <= year <= high:
            return cls(year)
        cached = cls._cache.get(year)
        if cached is not None:
            return cached
        with cls._lock:
            if year not in cls._cache:
                cls._cache[year] = cls(year)
            return cls._cache[year]

    @classmethod
    def configure_cache(cls, low: int, high: int) -> None:
        """Set the window of years served from the shared cache.

        Raises:
            ValidationError: If the window is empty or outside the valid years
        """
        if low > high:
            raise ValidationError(f"Empty cache window: {low}..{high}")
        if low < MIN_YEAR or high > MAX_YEAR:
            raise ValidationError(
                f"Cache window must lie within {MIN_YEAR}..{MAX_YEAR}, got {low}..{high}"
            )
        with cls._lock:
            cls._cache_window = (low, high)
            cls._cache.clear()

    @classmethod
    def cache_window(cls) -> Tuple[int, int]:
        return cls._cache_window

    @classmethod
    def clear_cache(cls) -> None:
        with cls._lock:
            cls._cache.clear()

    def years_since(self, current_year: int) -> int:
        return current_year - self.value

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
