"""
String helpers that remove a delimiter from text.
"""
from syntax_sugar.errors import MissingValueError

DELIMITER = '-'


def strip_delimiter(phrase: str, delimiter: str = DELIMITER) -> str:
    """
    Return a copy of phrase with every occurrence of delimiter removed.

    Args:
        phrase (str) : Text to strip. None raises MissingValueError.
        delimiter (str) : Non-empty text to remove. Defaults to '-'.
    """
    if phrase is None:
        raise MissingValueError('phrase')
    if not isinstance(phrase, str):
        raise TypeError(f"phrase must be str, not {type(phrase).__name__}")
    if not delimiter:
        raise ValueError("delimiter must be a non-empty string")
    return phrase.replace(delimiter, '')


def strip_dashes(phrase: str) -> str:
    """
    Remove every '-' from phrase, e.g. '123-123-1234' -> '1231231234'.
    """
    return strip_delimiter(phrase, DELIMITER)
