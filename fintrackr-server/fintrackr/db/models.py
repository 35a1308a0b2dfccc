"""SQLAlchemy ORM models."""
import uuid
from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, Column, Date, DateTime, ForeignKey, String, Text, UniqueConstraint

from fintrackr.infrastructure.database.base import Base
from fintrackr.infrastructure.database.types import Money


def generate_uuid() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Wallet(Base):
    __tablename__ = "wallets"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    user_id = Column(String(36), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    balance = Column(Money, nullable=False, default=0)
    currency = Column(String(10), nullable=False, default="NPR")
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), onupdate=utcnow)


class Category(Base):
    __tablename__ = "categories"
    __table_args__ = (UniqueConstraint("user_id", "name", name="uq_categories_user_id_name"),)

    id = Column(String(36), primary_key=True, default=generate_uuid)
    user_id = Column(String(36), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    color = Column(String(7), nullable=False, default="#3B82F6")
    created_at = Column(DateTime(timezone=True), default=utcnow)


class Transfer(Base):
    __tablename__ = "transfers"
    __table_args__ = (
        CheckConstraint("from_wallet_id <> to_wallet_id", name="ck_transfers_distinct_wallets"),
        CheckConstraint("amount > 0", name="ck_transfers_positive_amount"),
    )

    id = Column(String(36), primary_key=True, default=generate_uuid)
    user_id = Column(String(36), nullable=False, index=True)
    from_wallet_id = Column(String(36), ForeignKey("wallets.id"), nullable=False, index=True)
    to_wallet_id = Column(String(36), ForeignKey("wallets.id"), nullable=False, index=True)
    amount = Column(Money, nullable=False)
    date = Column(Date, nullable=False)
    status = Column(String(20), nullable=False, default="completed")  # completed, pending, cancelled
    description = Column(Text)
    # effect currently reflected in wallet balances; all null when unapplied
    applied_amount = Column(Money)
    applied_from_wallet_id = Column(String(36))
    applied_to_wallet_id = Column(String(36))
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), onupdate=utcnow)


class Transaction(Base):
    __tablename__ = "transactions"
    __table_args__ = (CheckConstraint("amount > 0", name="ck_transactions_positive_amount"),)

    id = Column(String(36), primary_key=True, default=generate_uuid)
    user_id = Column(String(36), nullable=False, index=True)
    wallet_id = Column(String(36), ForeignKey("wallets.id"), nullable=False, index=True)
    category_id = Column(String(36), ForeignKey("categories.id", ondelete="SET NULL"), index=True)
    reason = Column(String(255), nullable=False)
    type = Column(String(20), nullable=False, default="expense")  # income, expense
    amount = Column(Money, nullable=False)
    date = Column(Date, nullable=False, index=True)
    # signed delta currently reflected in the wallet balance
    applied_amount = Column(Money)
    applied_wallet_id = Column(String(36))
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), onupdate=utcnow)


class Loan(Base):
    __tablename__ = "loans"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    user_id = Column(String(36), nullable=False, index=True)
    name = Column(String(150), nullable=False)
    type = Column(String(20), nullable=False, default="borrowed")  # borrowed, lent
    amount = Column(Money, nullable=False)
    remaining_amount = Column(Money, nullable=False)
    due_date = Column(Date)
    status = Column(String(20), nullable=False, default="active")  # active, completed
    description = Column(Text)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), onupdate=utcnow)
