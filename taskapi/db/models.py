"""Database models"""

from sqlalchemy import Column, String

from taskapi.db.base import Base


class Task(Base):
    """Task record: a contact-style entry with name, surname, email and phone"""

    __tablename__ = "tasks"

    name = Column(String(255), nullable=False)
    surname = Column(String(255), nullable=False)
    email = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=False)

    def __repr__(self):
        return f"<Task {self.id} {self.name} {self.surname}>"
