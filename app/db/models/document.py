from sqlalchemy import Column, Integer, Text

from app.core.db import Base


class Document(Base):
    __tablename__ = "Documents"

    id = Column("Id", Integer, primary_key=True, autoincrement=True)
    title = Column("Title", Text, nullable=False)
    content = Column("Content", Text, nullable=True)
    status = Column("Status", Text, nullable=True)
    author = Column("Author", Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Document id={self.id} title={self.title!r}>"
