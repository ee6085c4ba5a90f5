"""
Exceptions for syntax_sugar
"""


class MissingValueError(TypeError):
    """
    Raised when an absent (None) value is passed where a value is required.

    Attributes:
        name (str): Name of the argument or attribute that was missing.
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"'{name}' is required but was None")


class IncomparableModelError(TypeError):
    """
    Raised when a model is compared for equality against a value of another type.
    """

    def __init__(self, model, other):
        self.model_type = type(model)
        self.other_type = type(other)
        super().__init__(
            f"Cannot compare {self.model_type.__name__} with {self.other_type.__name__}")
