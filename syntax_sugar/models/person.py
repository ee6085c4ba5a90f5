"""
Person model
"""

from dataclasses import dataclass
from typing import Optional

from syntax_sugar.errors import IncomparableModelError, MissingValueError
from .base_model import BaseModel


@dataclass(eq=False)
class Person(BaseModel):
    """
    A person model.

    Two people are equal when both first_name and last_name match exactly.
    Comparing against None or against anything that is not a Person raises
    instead of returning False.
    """

    use_type_checking = True

    first_name: Optional[str] = None
    last_name: Optional[str] = None

    def __eq__(self, other):
        if other is None:
            raise MissingValueError('other')
        if not isinstance(other, Person):
            raise IncomparableModelError(self, other)
        return other.first_name == self.first_name and other.last_name == self.last_name

    # mutable value type
    __hash__ = None
