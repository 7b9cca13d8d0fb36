from sqlalchemy import Column, String, JSON
from sqlalchemy.orm import declarative_base

Base = declarative_base()

TEAMS_NAMESPACE = "teams"


class KvEntryTable(Base):
    """Generic key-value entries, grouped by namespace (e.g. "teams")."""

    __tablename__ = "kv_entries"
    namespace = Column(String, primary_key=True)
    key = Column(String, primary_key=True)
    value = Column(JSON, nullable=False)
