"""
Persistent record of completed assessments — append-only.
Schema: carefund.analysis_results
"""
from datetime import datetime, timezone
from sqlalchemy import Column, String, DateTime, JSON
from sqlalchemy.orm import DeclarativeBase


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class AnalysisResult(Base):
    __tablename__ = "analysis_results"
    __table_args__ = {"schema": "carefund"}

    id = Column(String(36), primary_key=True)
    user_id = Column(String(100), nullable=False, index=True)

    # ── Snapshots (opaque JSON, never re-read by the engines) ──
    profile_data = Column(JSON, nullable=False)
    risk_result = Column(JSON, nullable=False)
    financial_result = Column(JSON, nullable=False)

    # ── Metadata ──
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

    def __repr__(self):
        return f"<AnalysisResult {self.id} user={self.user_id}>"
