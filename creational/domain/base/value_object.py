"""Base value object - foundation for the immutable records built by the examples."""
import copy
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from creational.domain.core.exceptions import ValidationError


class ValueObject(BaseModel):
    """Base class for immutable domain records.

    Instances are frozen as soon as ``__init__`` returns, and a record that
    fails validation is never returned to the caller: pydantic errors are
    translated into the domain ``ValidationError`` with the offending fields
    named in the message and the raw error list kept in ``details``.
    """
    model_config = ConfigDict(
        frozen=True,  # Value objects are immutable
        arbitrary_types_allowed=True,
        extra="forbid",
    )

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except PydanticValidationError as e:
            errors = e.errors(include_url=False)
            fields = sorted({".".join(str(part) for part in err["loc"]) or "__root__" for err in errors})
            raise ValidationError(
                f"Invalid {type(self).__name__}: {', '.join(fields)}",
                details=errors,
            ) from e

    def model_copy(self, *, update: Optional[Dict[str, Any]] = None, deep: bool = False) -> "ValueObject":
        """Copy the record; any ``update`` goes through full validation."""
        if not update:
            return super().model_copy(deep=deep)
        data = {name: getattr(self, name) for name in type(self).model_fields}
        data.update(update)
        if deep:
            data = copy.deepcopy(data)
        return type(self)(**data)
