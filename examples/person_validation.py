"""
Validating a record: every failing field is reported, in field order.

Run: python examples/person_validation.py
"""
from dataclasses import dataclass

from eithervalidation import (
    ConsoleLogger,
    Either,
    Left,
    Right,
    LIST,
    STRING,
    Combinator,
    instrument,
    lift,
)


@dataclass(frozen=True)
class Person:
    age: int
    name: str
    postcode: str


def valid_age(s: str) -> Either[list, int]:
    try:
        n = int(s)
    except ValueError as ex:
        return Left([str(ex)])
    if n < 0:
        return Left(["Age must be greater than 0"])
    if n > 130:
        return Left(["Age must be less than 130"])
    return Right(n)


def valid_name(s: str) -> Either[list, str]:
    return Right(s) if s[:1].isupper() else Left(["Name must begin with a capital letter"])


def valid_postcode(s: str) -> Either[list, str]:
    return Right(s) if len(s) == 4 and s.isdigit() else Left(["Postcode must be 4 digits"])


def main():
    log = ConsoleLogger("person", level="DEBUG")
    age = instrument("age", valid_age, log)
    name = instrument("name", valid_name, log)
    postcode = instrument("postcode", valid_postcode, log)

    ok = lift(Person)(age("42"), name("Arthur"), postcode("1234"), merge=LIST)
    bad = lift(Person)(age("150"), name("dude"), postcode("a1"), merge=LIST)
    print("valid   =>", ok)     # Right(value=Person(age=42, name='Arthur', postcode='1234'))
    print("invalid =>", bad)    # Left(error=['Age must be less than 130', ...])

    # Same thing with text payloads and the uncurried combinator form
    as_line = lambda e: e.map_left(lambda errors: errors[0] + "\n")
    text = Combinator(Right(Person), STRING)(as_line(valid_age("150")), as_line(valid_name("dude")), as_line(valid_postcode("a1")))
    print(text.fold(lambda e: "errors:\n" + e, lambda p: f"person: {p}"), end="")


if __name__ == "__main__":
    main()
