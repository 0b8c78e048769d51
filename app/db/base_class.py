# /student-records/app/db/base_class.py

from sqlalchemy.orm import declarative_base, declared_attr


class CustomBase:
    # Table names are the pluralized, lower-cased class name (Student -> students).
    @declared_attr
    def __tablename__(cls) -> str:
        return f"{cls.__name__.lower()}s"


Base = declarative_base(cls=CustomBase)
