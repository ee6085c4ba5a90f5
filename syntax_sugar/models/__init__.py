"""
Models for syntax_sugar
"""

from .base_model import BaseModel, ModelValidationError
from .person import Person
