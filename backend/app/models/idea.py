import uuid
from datetime import datetime

from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.types import TypeDecorator, CHAR


from ..database import Base


class GUID(TypeDecorator):
    """Platform-independent UUID type.

    Uses CHAR(36) to store UUIDs as strings, compatible with all backends
    including SQLite.
    """

    impl = CHAR
    cache_ok = True

    def load_dialect_impl(self, dialect):
        return dialect.type_descriptor(CHAR(36))

    def process_bind_param(self, value, dialect):
        if value is not None:
            return str(value)
        return value

    def process_result_value(self, value, dialect):
        if value is not None:
            return uuid.UUID(value)
        return value


class Idea(Base):
    __tablename__ = "ideas"

    id = Column(GUID(), primary_key=True, default=uuid.uuid4)
    founder_name = Column(String, nullable=True)
    idea_title = Column(String, nullable=True)

    # JSON payloads. Score/canvas JSON never carries the source marker.
    answers_json = Column(Text, nullable=False, default="{}")
    scores_json = Column(Text, nullable=False, default="{}")
    lean_canvas_json = Column(Text, nullable=False, default="{}")

    # "ai" or "heuristic"
    analysis_source = Column(String(16), nullable=False, default="heuristic")

    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
