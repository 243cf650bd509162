from pydantic import BaseModel, ConfigDict, Field, constr, field_validator, model_validator
from datetime import date
from typing import Optional

# range of a signed 64-bit INTEGER column
MIN_INT = -(2 ** 63)
MAX_INT = 2 ** 63 - 1

class UserBase(BaseModel):
    name: constr(min_length=1)
    age: Optional[int] = Field(default=None, ge=0, le=MAX_INT)
    archived: bool = False
    dob: Optional[date] = None

class UserCreate(UserBase):
    pass

class UserOut(UserBase):
    model_config = ConfigDict(from_attributes=True)
    id: int

class BookBase(BaseModel):
    title: constr(min_length=1)
    isbn: Optional[str] = None
    available: bool = True

class BookCreate(BookBase):
    pass

class BookOut(BookBase):
    model_config = ConfigDict(from_attributes=True)
    id: int

class BorrowCreate(BaseModel):
    user_id: int = Field(le=MAX_INT)
    book_id: int = Field(le=MAX_INT)
    borrow_date: date = Field(default_factory=date.today)
    return_date: Optional[date] = None

    @model_validator(mode="after")
    def check_dates(self):
        if self.return_date and self.return_date < self.borrow_date:
            raise ValueError("return_date must not be before borrow_date")
        return self

class BorrowOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    borrow_date: date
    return_date: Optional[date] = None
    returned: bool
    user: UserOut
    book: BookOut

class BorrowFilter(BaseModel):
    """Optional criteria for the borrow filter; ``None`` leaves a dimension unconstrained."""
    title: Optional[str] = None
    isbn: Optional[str] = None
    available: Optional[bool] = None
    user_age: Optional[int] = Field(default=None, ge=MIN_INT, le=MAX_INT)
    archived: Optional[bool] = None
    dob: Optional[date] = None
    returned: Optional[bool] = None

    @field_validator("title", "isbn", mode="before")
    @classmethod
    def blank_is_absent(cls, v):
        # "" means the caller sent the parameter without a value
        if v == "":
            return None
        return v
