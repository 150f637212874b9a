from api.config import Base
from sqlalchemy import Column, Integer, String, JSON, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from datetime import datetime

class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True)
    hashed_password = Column(String)
    preferences = Column(JSON)


class FocusPlan(Base):
    __tablename__ = "focus_plans"
    id = Column(String, primary_key=True, index=True)  # uuid
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    focus_type = Column(String, nullable=False)  # language|project|smart_learning
    title = Column(String, nullable=False)
    configuration = Column(JSON, nullable=False)  # WizardConfiguration as JSON
    minutes_per_day = Column(Integer, nullable=False)
    duration_days = Column(Integer, nullable=False)
    plan_source = Column(String, nullable=True)  # generated|fallback|client, smart_learning only
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    user = relationship("User", backref="focus_plans", foreign_keys=[user_id])
    items = relationship(
        "FocusItem",
        backref="plan",
        cascade="all, delete-orphan",
        order_by="FocusItem.day",
    )


class FocusItem(Base):
    __tablename__ = "focus_items"
    id = Column(String, primary_key=True, index=True)  # uuid
    plan_id = Column(String, ForeignKey("focus_plans.id"), index=True, nullable=False)
    day = Column(Integer, nullable=False)  # 1-based
    title = Column(String, nullable=False)
    kind = Column(String, nullable=False)  # lesson|smart_lesson|task
    content = Column(JSON, nullable=True)  # authored later
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)


class FocusItemProgress(Base):
    __tablename__ = "focus_item_progress"
    __table_args__ = (UniqueConstraint("user_id", "focus_item_id", name="uq_focus_item_progress_user_item"),)
    id = Column(String, primary_key=True, index=True)  # uuid
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    focus_item_id = Column(String, ForeignKey("focus_items.id"), index=True, nullable=False)
    completed_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    user = relationship("User", backref="focus_item_progress", foreign_keys=[user_id])
    item = relationship("FocusItem", foreign_keys=[focus_item_id])


class UserFocusStats(Base):
    __tablename__ = "user_focus_stats"
    user_id = Column(Integer, ForeignKey("users.id"), primary_key=True)
    plans_created = Column(Integer, default=0, nullable=False)
    items_completed = Column(Integer, default=0, nullable=False)
    last_completed_at = Column(DateTime, nullable=True)
    updated_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    user = relationship("User", backref="focus_stats", foreign_keys=[user_id], uselist=False)
