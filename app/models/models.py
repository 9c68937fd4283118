from sqlalchemy import Column, Integer, String, Date
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(String, nullable=False)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False, index=True)
    sex = Column(String, nullable=False)
    birth_date = Column(Date, nullable=True)
    address = Column(String, nullable=False)
    department = Column(String, nullable=False)

    @property
    def is_new(self) -> bool:
        return self.id is None

    def __repr__(self) -> str:
        return f"<Student id={self.id} last_name={self.last_name!r}>"
