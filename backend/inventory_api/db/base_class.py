from sqlalchemy.orm import declarative_base, declared_attr
from typing import Any

class CustomBase:
    # Generate __tablename__ automatically: Category -> "category"
    @declared_attr
    def __tablename__(cls) -> str:
        return cls.__name__.lower()

Base: Any = declarative_base(cls=CustomBase)
