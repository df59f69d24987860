import uuid
from sqlalchemy import Column, DateTime, String
from sqlalchemy.orm import declarative_base
from datetime import datetime

# Create a declarative base which all models will inherit from
Base = declarative_base()


def generate_id() -> str:
    return str(uuid.uuid4())


# Common columns for every table; abstract, so no table is created for it.
# Ids are opaque UUID strings issued here, never by callers.
class BaseModel(Base):
    __abstract__ = True
    id = Column(String(36), primary_key=True, default=generate_id)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
