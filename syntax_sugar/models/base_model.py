import logging
import types
from dataclasses import dataclass, fields, is_dataclass
from typing import Any, Dict, List, Union, get_args, get_origin, get_type_hints

logger = logging.getLogger(__name__)

UNION_TYPES = (Union, types.UnionType)


class ModelValidationError(Exception):
    """
    Exception raised when one or more validation errors occur in the model.

    Attributes:
        errors (list): A list of error messages returned from validation methods.
    """

    def __init__(self, errors):
        # Ensure errors is a list of messages
        if isinstance(errors, str):
            errors = [errors]
        elif not isinstance(errors, list):
            raise ValueError("Errors should be a string or a list of strings")
        self.errors = errors
        super().__init__(self.format_errors())

    def format_errors(self):
        return "\n".join(self.errors)

    def __str__(self):
        return self.format_errors()


@dataclass
class BaseModel:
    """
    A base dataclass for syntax_sugar records.

    Subclasses declare their attributes as dataclass fields. Setting
    `use_type_checking = True` on a subclass makes `validate()` check every
    field value against its annotation in addition to any `validate_<field>`
    hooks.
    """

    use_type_checking = False

    @classmethod
    def fields(cls) -> List[str]:
        """
        Get a list of field names for this model.

        Returns:
            List[str]: A list of field names.
        """
        return [f.name for f in fields(cls)]

    def _convert_value(self, value):
        """Helper to convert a single value for as_dict."""
        if is_dataclass(value) and isinstance(value, BaseModel):
            return value.as_dict()
        if isinstance(value, list):
            return [self._convert_value(v) for v in value]
        return value

    def as_dict(self) -> Dict[str, Any]:
        """
        Convert the model into a plain dict keyed by field name.
        """
        return {name: self._convert_value(getattr(self, name)) for name in self.fields()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BaseModel":
        """
        Load the model from a dict. Keys that are not fields are ignored.
        """
        clean_data = {k: v for k, v in data.items() if k in cls.fields()}
        ignored = set(data) - set(clean_data)
        if ignored:
            logger.debug("Ignoring unknown keys for %s: %s", cls.__name__, sorted(ignored))
        return cls(**clean_data)

    def _run_field_validator(self, name: str, errors: list):
        """Run custom field validator if defined."""
        validator = getattr(self, f"validate_{name}", None)
        if callable(validator):
            error = validator()
            if error:
                errors.append(error)

    def _validate_union_type(self, name: str, value, args, errors: list):
        """Validate a field with Union type (which includes Optional)."""
        if value is None and type(None) in args:
            return
        # List[str] is checked as list, Dict[str, int] as dict
        checks = [get_origin(arg) or arg for arg in args if arg is not type(None)]
        if any(check is Any or not isinstance(check, type) for check in checks):
            return
        if not any(isinstance(value, check) for check in checks):
            expected = ", ".join(getattr(arg, "__name__", repr(arg)) for arg in args)
            errors.append(
                f"Invalid type for field '{name}': expected one of ({expected}), "
                f"got {type(value).__name__}")

    def _validate_simple_type(self, name: str, value, expected, errors: list):
        """Validate a field with a plain type annotation."""
        expected = get_origin(expected) or expected
        if expected is Any or not isinstance(expected, type):
            return
        if not isinstance(value, expected):
            errors.append(
                f"Invalid type for field '{name}': expected {expected.__name__}, "
                f"got {type(value).__name__}")

    def validate(self):
        """
        Validate all fields by calling corresponding `validate_<field_name>` methods if defined,
        and validate the type of each field when `use_type_checking` is enabled.
        Raise `ModelValidationError` if any validations fail.
        """
        errors = []
        hints = get_type_hints(type(self))

        for name in self.fields():
            value = getattr(self, name)
            expected = hints.get(name)
            self._run_field_validator(name, errors)

            if not getattr(type(self), 'use_type_checking', False) or expected is None:
                continue

            if get_origin(expected) in UNION_TYPES:
                self._validate_union_type(name, value, get_args(expected), errors)
            else:
                self._validate_simple_type(name, value, expected, errors)

        if errors:
            raise ModelValidationError(errors)
