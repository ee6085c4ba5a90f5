"""
Side-by-side equivalents for common syntax sugar.

Each function covers one topic and returns every variant it builds, so the
variants can be compared with each other.
"""
import logging
from typing import Any, Dict, Iterable, List, Optional

from syntax_sugar import text
from syntax_sugar.config.config import DEFAULT_PHONE_NUMBERS, DEFAULT_PREFIX
from syntax_sugar.models import Person
from syntax_sugar.optional import coalesce, coalesce_assign, get_or_none
from syntax_sugar.sequences import select, starts_with, strip_all_dashes, where
from syntax_sugar.text import DELIMITER, strip_dashes, strip_delimiter

logger = logging.getLogger(__name__)


def constructor_examples() -> List[Person]:
    """
    All the ways to build the same person. Every returned Person is equal.
    """
    p1 = Person()
    p1.first_name = "Mariah"
    p1.last_name = "Carrie"

    p2 = Person(first_name="Mariah", last_name="Carrie")

    p3 = Person("Mariah", "Carrie")

    p4 = Person.from_dict({"first_name": "Mariah", "last_name": "Carrie"})

    # Declared first, assigned later
    p5: Optional[Person] = None
    p5 = Person(**{"first_name": "Mariah", "last_name": "Carrie"})

    logger.debug("Built %d equivalent people", 5)
    return [p1, p2, p3, p4, p5]


def array_initializations() -> List[List[str]]:
    """
    Equivalent ways to build the same list of names.
    """
    people = list(["Bob", "Dereck", "Susan"])
    people1 = ["Bob", "Dereck", "Susan"]
    people2 = [*("Bob", "Dereck", "Susan")]
    return [people, people1, people2]


def null_comparisons(person: Optional[Person]) -> Dict[str, Any]:
    """
    Explicit None checks next to their shorthand forms.

    Returns the first name found by each approach plus the person that the
    None-coalescing assignment settled on.
    """
    results: Dict[str, Any] = {}

    explicit = None
    if person is not None and person.first_name == "Mariah":
        explicit = person.first_name
    results['explicit'] = explicit

    results['optional_chaining'] = get_or_none(person, 'first_name')
    results['coalesced'] = coalesce(get_or_none(person, 'first_name'), "Unknown")
    results['person'] = coalesce_assign(person, Person)

    logger.debug("Null comparison results for %r: %s", person, results)
    return results


def lambdas(phone_number: str = "123-123-1234", delimiter: str = DELIMITER) -> List[str]:
    """
    A named function and its inline lambda forms all strip the same delimiter.
    """
    def strip_named(phrase: str) -> str:
        return strip_delimiter(phrase, delimiter)

    strip_inline = lambda phrase: strip_delimiter(phrase, delimiter)

    results = [
        strip_named(phone_number),
        strip_inline(phone_number),
        (lambda phrase: phrase.replace(delimiter, ''))(phone_number),
    ]
    logger.debug("Lambda results for %r: %s", phone_number, results)
    return results


def static_functions_and_extension_methods(phone_number: str = "123-123-1234") -> List[str]:
    """
    Module-qualified and imported-name calls to the same free function.
    """
    return [text.strip_dashes(phone_number), strip_dashes(phone_number)]


def query_functions(phone_numbers: Optional[Iterable[str]] = None,
                    prefix: str = DEFAULT_PREFIX) -> Dict[str, List]:
    """
    Query-style operations over phone numbers and people, each written a few ways.
    """
    if phone_numbers is None:
        phone_numbers = DEFAULT_PHONE_NUMBERS

    people = [Person(first_name="Bob"), Person(first_name="Gary"), Person(first_name="Bart")]

    starts_with_prefix = starts_with(prefix)
    by_named_predicate = list(where(people, starts_with_prefix))
    by_inline_lambda = list(where(people, lambda p: p.first_name.startswith(prefix)))
    by_builtin_filter = list(filter(starts_with_prefix, people))

    chained = where(people, starts_with_prefix).select(lambda p: p.first_name).to_list()
    composed = list(select(where(people, starts_with_prefix), lambda p: p.first_name))
    comprehension = [p.first_name for p in people if p.first_name.startswith(prefix)]
    # 'let'-style binding inside the query
    with_binding = [first_name for p in people
                    if (first_name := p.first_name).startswith(prefix)]

    results = {
        'phone_numbers': list(strip_all_dashes(phone_numbers)),
        'people': [by_named_predicate, by_inline_lambda, by_builtin_filter],
        'first_names': [chained, composed, comprehension, with_binding],
    }
    logger.debug("Query results: %s", results)
    return results
