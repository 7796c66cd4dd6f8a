from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# The age column is a 32-bit INTEGER
INT32_MIN = -2**31
INT32_MAX = 2**31 - 1

Int32 = Annotated[int, Field(ge=INT32_MIN, le=INT32_MAX)]


class UserBase(BaseModel):
    # Wire format is camelCase; snake_case input is accepted too.
    # JSON numbers are accepted for the name fields and stored as text.
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    first_name: str | None = None
    last_name: str | None = None
    age: Int32 | None = None


class UserCreate(UserBase):
    # Unknown keys, including a client-supplied `id`, are dropped.
    pass


class User(UserBase):
    id: int
    model_config = ConfigDict(from_attributes=True)
