"""
syntax_sugar: small helpers showing syntax sugar side by side with its longhand.
"""

from .errors import IncomparableModelError, MissingValueError
from .models import Person
from .sequences import LazySequence, first_names_starting_with, select, starts_with, strip_all_dashes, where
from .text import DELIMITER, strip_dashes, strip_delimiter
