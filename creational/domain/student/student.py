"""Student record created through named factories.

Naming conventions followed here and elsewhere in the package:

- ``from_*``       type conversion from another representation
- ``of``           aggregation of the parts of the value
- ``value_of``     like ``of``, may hand back a shared instance
- ``get_instance`` shared instance, possibly created on first use
- ``new_instance`` always a freshly created instance
- ``create_*``     fresh instance built with some extra policy
"""
from datetime import date
from typing import Optional, Union

from pydantic import Field, InstanceOf, field_validator

from creational.domain.base.value_object import ValueObject
from creational.domain.core.exceptions import ValidationError
from creational.domain.student.value_objects import AdmissionYear

RECORD_SEPARATOR = ":"


class Student(ValueObject):
    """Student with a name and an admission year."""
    name: str = Field(..., min_length=1)
    admission_year: InstanceOf[AdmissionYear]

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Strip surrounding whitespace and reject blank names."""
        v = v.strip()
        if not v:
            raise ValueError("Name must not be blank")
        if RECORD_SEPARATOR in v:
            raise ValueError(f"Name must not contain '{RECORD_SEPARATOR}'")
        return v

    @classmethod
    def of(cls, name: str, year: Union[int, AdmissionYear]) -> "Student":
        """Create a student; the admission year is taken from the shared cache."""
        if not isinstance(year, AdmissionYear):
            year = AdmissionYear.of(year)
        return cls(name=name, admission_year=year)

    @classmethod
    def new_instance(cls, name: str, year: Union[int, AdmissionYear]) -> "Student":
        """Create a student whose admission year is never shared."""
        value = year.value if isinstance(year, AdmissionYear) else year
        return cls(name=name, admission_year=AdmissionYear(value))

    @classmethod
    def from_record(cls, record: str) -> "Student":
        """Parse a ``"name:year"`` record.

        Raises:
            ValidationError: If the record is malformed
        """
        name, sep, year = record.rpartition(RECORD_SEPARATOR)
        if not sep:
            raise ValidationError(f"Malformed student record: '{record}'")
        try:
            year_value = int(year)
        except ValueError as e:
            raise ValidationError(f"Malformed student record: '{record}'") from e
        return cls.of(name, year_value)

    @classmethod
    def create_freshman(cls, name: str, today: Optional[date] = None) -> "Student":
        """Create a student admitted in the current year."""
        today = today or date.today()
        return cls.of(name, today.year)

    def to_record(self) -> str:
        return f"{self.name}{RECORD_SEPARATOR}{self.admission_year}"

    def years_enrolled(self, current_year: int) -> int:
        return self.admission_year.years_since(current_year)
