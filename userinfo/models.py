"""
Design (models.py)
- Purpose: Define the UserRecord entity and its text form.
- Inputs: Field values (str, int).
- Outputs: Dataclass instances; formatted record blocks.
- Side effects: None.
"""

from dataclasses import dataclass

from .config import (
    LABEL_AGE,
    LABEL_FIRST_NAME,
    LABEL_SURNAME,
    MSG_FIELDS_REQUIRED,
    MSG_INVALID_AGE,
    RECORD_SEPARATOR,
)
from .exceptions import ValidationError
from .utils import clean_field, parse_age


@dataclass(frozen=True)
class UserRecord:
    """
    Design (UserRecord)
    - Purpose: One user's answers, alive only between validation and the file write.
    - Fields:
        first_name: Non-empty, trimmed.
        surname: Non-empty, trimmed.
        age: Parsed integer within the signed 32-bit range.
    - Invariant: __post_init__ rejects blank names and a non-int age, so every instance is writable as-is.
    """
    first_name: str
    surname: str
    age: int

    def __post_init__(self) -> None:
        if not clean_field(self.first_name):
            raise ValidationError("first_name", MSG_FIELDS_REQUIRED)
        if not clean_field(self.surname):
            raise ValidationError("surname", MSG_FIELDS_REQUIRED)
        # bool is an int subclass but never a valid age
        if not isinstance(self.age, int) or isinstance(self.age, bool):
            raise ValidationError("age", MSG_INVALID_AGE)

    @classmethod
    def from_input(cls, first_name: str | None, surname: str | None, age_text: str | None) -> "UserRecord":
        """
        Build a record from raw console answers.

        Blank checks run across all three fields before the age is parsed, so an
        empty age reports "fields required" rather than "invalid age".
        """
        first_name = clean_field(first_name)
        surname = clean_field(surname)
        age_text = clean_field(age_text)
        for field, value in (("first_name", first_name), ("surname", surname), ("age", age_text)):
            if not value:
                raise ValidationError(field, MSG_FIELDS_REQUIRED)
        return cls(first_name=first_name, surname=surname, age=parse_age(age_text))

    def to_text(self) -> str:
        """Render the four-line block appended to the output file."""
        return (
            f"{LABEL_FIRST_NAME}: {self.first_name}\n"
            f"{LABEL_SURNAME}: {self.surname}\n"
            f"{LABEL_AGE}: {self.age}\n"
            f"{RECORD_SEPARATOR}\n"
        )
