"""
Query-style helpers over iterables.

Every helper returns a LazySequence: nothing is computed until the result is
iterated, and each new iteration runs the work again against the source.
"""
import logging
from typing import Any, Callable, Iterable, Iterator, List

from syntax_sugar.errors import MissingValueError
from syntax_sugar.models import Person
from syntax_sugar.text import strip_dashes

logger = logging.getLogger(__name__)


class LazySequence:
    """
    A re-iterable view over a source iterable and a generator function.

    Iterating calls `producer(source)` afresh, so a list source can be
    traversed any number of times while a one-shot iterator source is
    exhausted after the first pass.
    """

    def __init__(self, source: Iterable, producer: Callable[[Iterable], Iterator]):
        self._source = source
        self._producer = producer

    def __iter__(self) -> Iterator:
        if self._source is None:
            raise MissingValueError('source')
        return self._producer(self._source)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(source={self._source!r})"

    def where(self, predicate: Callable[[Any], bool]) -> "LazySequence":
        return where(self, predicate)

    def select(self, selector: Callable[[Any], Any]) -> "LazySequence":
        return select(self, selector)

    def to_list(self) -> List:
        return list(self)


def strip_all_dashes(phrases: Iterable[str]) -> LazySequence:
    """
    Lazily apply strip_dashes to every phrase, keeping order and length.
    """
    def produce(source):
        for phrase in source:
            logger.debug("Stripping dashes from %r", phrase)
            yield strip_dashes(phrase)

    return LazySequence(phrases, produce)


def where(items: Iterable, predicate: Callable[[Any], bool]) -> LazySequence:
    """
    Lazily keep the items for which predicate returns a truthy value.

    Exceptions raised by the predicate surface when the offending item is
    reached during iteration.
    """
    if predicate is None:
        raise MissingValueError('predicate')

    def produce(source):
        for item in source:
            if predicate(item):
                yield item

    return LazySequence(items, produce)


def select(items: Iterable, selector: Callable[[Any], Any]) -> LazySequence:
    """
    Lazily map every item through selector.
    """
    if selector is None:
        raise MissingValueError('selector')

    def produce(source):
        for item in source:
            yield selector(item)

    return LazySequence(items, produce)


def starts_with(prefix: str, attribute: str = 'first_name') -> Callable[[Any], bool]:
    """
    Build a predicate testing whether `record.<attribute>` starts with prefix.

    Args:
        prefix (str) : Case-sensitive prefix to match.
        attribute (str) : Name of the text attribute to read from each record.
    """
    if prefix is None:
        raise MissingValueError('prefix')

    def predicate(record) -> bool:
        value = getattr(record, attribute)
        if value is None:
            raise MissingValueError(attribute)
        return value.startswith(prefix)

    return predicate


def first_names_starting_with(people: Iterable[Person], prefix: str) -> LazySequence:
    """
    First names of the people whose first name starts with prefix, in order.
    """
    return where(people, starts_with(prefix)).select(lambda p: p.first_name)

