from sqlalchemy.orm import as_declarative
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Integer


@as_declarative()
class Base:
    __abstract__ = True  # Prevents creating a table for the base class

    # Surrogate key; business lookups go through hostel_code and the natural keys
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
