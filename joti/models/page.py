"""JotiPage model"""

from sqlalchemy import Column, Integer, String, Text, DateTime
from joti.core.database import Base


class JotiPage(Base):
    __tablename__ = "jotipage"
    # AUTOINCREMENT: un id supprimé n'est jamais réattribué
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)

    title = Column(String, nullable=False, default="")
    url = Column(String, unique=True, nullable=False, index=True)
    content = Column(Text, nullable=False, default="")
    description = Column(String, nullable=False, default="")
    author = Column(String, nullable=False, default="")
    editcode = Column(String, nullable=False, default="")  # hash bcrypt, jamais le code en clair

    created_at = Column(DateTime, nullable=False)
    last_read_at = Column(DateTime, nullable=False, index=True)

    def __repr__(self):
        return f"<JotiPage id={self.id} url={self.url!r}>"
