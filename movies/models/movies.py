from sqlmodel import SQLModel
from typing import Optional


class Director(SQLModel):
    firstname: str = ""
    lastname: str = ""


class Movie(SQLModel):
    id: str = ""  # assigned by the store, kept on update
    isbn: str = ""
    title: str = ""
    director: Optional[Director] = None
