from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from typing import Union


class PersonRecord(BaseModel):
    """A person as handed to the matcher, read-only for the whole comparison"""
    id: Union[int, str]
    first_name: str
    last_name: str
    age: int = Field(ge=0)
    location: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    class Config:
        frozen = True
        alias_generator = to_camel
        populate_by_name = True
