"""Required-field checks for the application form."""

from pydantic import BaseModel, Field

from .models import Draft
from .phone import is_complete

MESSAGES = {
    "name": "АИАңызды жазыңыз",
    "phone": "Туура номер киргизиңиз",
    "city": "Шаарыңызды жазыңыз",
    "schedule": "Графикти тандаңыз",
    "experience": "Тажрыйбаңызды көрсөтүңүз",
}

REQUIRED_FIELDS = tuple(MESSAGES)


class ValidationResult(BaseModel):
    errors: dict[str, str] = Field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def validate(draft: Draft) -> ValidationResult:
    """Check every required field independently."""
    errors = {}
    if len(draft.name.strip()) < 2:
        errors["name"] = MESSAGES["name"]
    if not is_complete(draft.phone):
        errors["phone"] = MESSAGES["phone"]
    if len(draft.city.strip()) < 2:
        errors["city"] = MESSAGES["city"]
    if not draft.schedule:
        errors["schedule"] = MESSAGES["schedule"]
    if not draft.experience:
        errors["experience"] = MESSAGES["experience"]
    return ValidationResult(errors=errors)
