"""Answer - a two-valued value object with instance control.

``Answer.value_of`` never allocates: it hands out one of the two shared
instances created at import time, so identity comparison is as good as
equality for answers obtained through the factory.
"""
from dataclasses import dataclass
from typing import ClassVar

from creational.domain.core.exceptions import UnknownVariantError, ValidationError

_TRUE_WORDS = ("yes", "y", "true", "t", "1", "on")
_FALSE_WORDS = ("no", "n", "false", "f", "0", "off")


@dataclass(frozen=True)
class Answer:
    """Yes/no answer."""
    value: bool

    YES: ClassVar["Answer"]
    NO: ClassVar["Answer"]

    def __post_init__(self):
        if not isinstance(self.value, bool):
            raise ValidationError("Answer value must be a bool")

    @classmethod
    def value_of(cls, flag: bool) -> "Answer":
        """Return the shared instance for ``flag``."""
        return cls.YES if flag else cls.NO

    @classmethod
    def from_string(cls, text: str) -> "Answer":
        """Parse a yes/no word, case-insensitively."""
        word = text.strip().lower() if isinstance(text, str) else text
        if word in _TRUE_WORDS:
            return cls.YES
        if word in _FALSE_WORDS:
            return cls.NO
        raise UnknownVariantError("answer", str(text), _TRUE_WORDS + _FALSE_WORDS)

    def __bool__(self) -> bool:
        return self.value

    def __str__(self) -> str:
        return "yes" if self.value else "no"


Answer.YES = Answer(True)
Answer.NO = Answer(False)
