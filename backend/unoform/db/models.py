from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class GenerationLog(Base):
    __tablename__ = "generation_logs"

    id = Column(Integer, primary_key=True)
    style = Column(String(32))
    model_type = Column(String(32), nullable=False)
    prompt = Column(Text, nullable=False)
    image_url = Column(Text)
    output = Column(Text)
    succeeded = Column(Boolean, default=False)
    error = Column(Text)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
