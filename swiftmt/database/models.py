from datetime import datetime
from typing import Optional
from sqlalchemy import Boolean, DateTime, Integer, JSON, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

class Base(DeclarativeBase):
    pass

class ParseResultRecord(Base):
    """
    Table of parsed MT103 messages, valid or not.
    Party and remittance blocks are stored as JSON.
    """
    __tablename__ = "mt103_messages"

    id: Mapped[int] = mapped_column(primary_key=True)

    # Block 4 transaction fields
    reference: Mapped[Optional[str]] = mapped_column(Text, index=True)
    bank_operation_code: Mapped[Optional[str]] = mapped_column(Text)
    value_date: Mapped[Optional[str]] = mapped_column(String(10))
    currency: Mapped[Optional[str]] = mapped_column(String(3))
    amount: Mapped[Optional[str]] = mapped_column(Text)
    charge_bearer: Mapped[Optional[str]] = mapped_column(Text)

    ordering_customer: Mapped[Optional[dict]] = mapped_column(JSON)
    beneficiary: Mapped[Optional[dict]] = mapped_column(JSON)
    remittance_info: Mapped[Optional[list]] = mapped_column(JSON)
    extra_fields: Mapped[Optional[dict]] = mapped_column(JSON)

    # Header routing
    sender_bic: Mapped[Optional[str]] = mapped_column(String(12), index=True)
    receiver_bic: Mapped[Optional[str]] = mapped_column(String(12), index=True)
    message_type: Mapped[Optional[str]] = mapped_column(String(3))

    # Validation outcome
    valid: Mapped[bool] = mapped_column(Boolean, index=True)
    errors: Mapped[list] = mapped_column(JSON, default=list)

    # Audit trail
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    raw_payload_size: Mapped[Optional[int]] = mapped_column(Integer)
