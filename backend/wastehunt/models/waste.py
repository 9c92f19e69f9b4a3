# wastehunt/models/waste.py
from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Text, BigInteger, func
from sqlalchemy.orm import relationship
import enum
from .base import Base


class ReportSource(str, enum.Enum):
    OFFICIAL = "official"
    USER_SUBMITTED = "user-submitted"
    SOCIAL = "social"


class Report(Base):
    """Публичная запись ленты: сид-данные, соцсети или одобренный тип"""
    __tablename__ = "waste_items"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    amount = Column(BigInteger, nullable=False)
    location = Column(String, nullable=False)
    year = Column(Integer, nullable=False)
    shares = Column(Integer, nullable=False, default=0, server_default="0")
    source = Column(String, nullable=False, default=ReportSource.OFFICIAL.value, server_default=ReportSource.OFFICIAL.value)
    evidence = Column(Text, nullable=True)

    # Только для source == social
    author_handle = Column(String, nullable=True)
    platform_icon = Column(String, nullable=True)
    post_url = Column(String, nullable=True)

    def __str__(self):
        return self.title


class Tip(Base):
    __tablename__ = "waste_tips"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    amount = Column(BigInteger, nullable=False)
    location = Column(String, nullable=False)
    verified = Column(Integer, nullable=False, default=0, server_default="0")  # счётчик подтверждений модераторами
    impact_score = Column(Integer, nullable=False, default=0, server_default="0")
    evidence = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)

    user = relationship("User", back_populates="tips")

    def __str__(self):
        return f"{self.title} (user {self.user_id})"
