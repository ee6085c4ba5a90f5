""" SETUP
- `pip install -e .`
- optionally put SYNTAX_SUGAR_DELIMITER / SYNTAX_SUGAR_PREFIX /
  SYNTAX_SUGAR_SAMPLE_PHONE_NUMBERS in a .env file next to where you run this
"""
import logging

from syntax_sugar import Person, strip_all_dashes
from syntax_sugar import equivalents
from syntax_sugar.config import SugarConfig

logging.basicConfig(level=logging.DEBUG)

config = SugarConfig()
config.validate_env_vars()

####################
# #### Models #######
####################

print("\n\n##### Models #######\n\n")

people = equivalents.constructor_examples()
print("people", people)
print("all equal", all(p == people[0] for p in people))

someone = Person(first_name="Mariah", last_name="Carrie")
print(someone.as_dict())
# {'first_name': 'Mariah', 'last_name': 'Carrie'}

someone.last_name = "Cara"
print("still equal after rename", someone == people[0])

print("\n\n##### None handling #######\n\n")

print(equivalents.null_comparisons(None))
print(equivalents.null_comparisons(someone))

print("\n\n##### Lambdas #######\n\n")

print(equivalents.lambdas(config.phone_numbers[0], config.delimiter))
print(equivalents.static_functions_and_extension_methods(config.phone_numbers[0]))

print("\n\n##### Queries #######\n\n")

stripped = strip_all_dashes(config.phone_numbers)
# Nothing has been stripped yet; the work happens while iterating.
for number in stripped:
    print("number", number)

print(equivalents.query_functions(config.phone_numbers, config.prefix))
