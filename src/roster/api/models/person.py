from pydantic import BaseModel

from roster.api.models.modelmaker import make_pydantic_model_from_sqlalchemy
from roster.db.models import Person

PersonRead = make_pydantic_model_from_sqlalchemy(Person)


class ValidationErrors(BaseModel):
    errors: list[str]
