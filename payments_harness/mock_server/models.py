from sqlalchemy import Column, Integer, String, JSON
from payments_harness.mock_server.database import Base


class Record(Base):
    __tablename__ = "records"
    # ids are never reused after a delete
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    collection = Column(String, index=True, nullable=False)   # payments | refunds | ...
    data = Column(JSON, nullable=False)                       # body without the id

    def to_dict(self) -> dict:
        return {**self.data, "id": self.id}
