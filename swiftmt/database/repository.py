import dataclasses
from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.orm import Session
from swiftmt.models import ParseResult
from swiftmt.database.models import Base, ParseResultRecord

class MessageRepository:
    """
    Repository layer for persisting parsed MT103 messages.
    """

    def __init__(self, session: Session):
        self.session = session

    def save(self, result: ParseResult, raw_payload_size: Optional[int] = None) -> ParseResultRecord:
        """
        Converts a ParseResult dataclass to a SQLAlchemy record and persists it.
        """
        record = self._to_record(result)
        record.raw_payload_size = raw_payload_size
        self.session.add(record)
        self.session.flush()  # Ensure ID is populated
        return record

    def get_by_reference(self, reference: str) -> Optional[ParseResultRecord]:
        """
        Retrieves a message record by its :20: sender's reference.
        """
        stmt = select(ParseResultRecord).where(ParseResultRecord.reference == reference)
        return self.session.execute(stmt).scalars().first()

    def list_by_sender(self, sender_bic: str) -> List[ParseResultRecord]:
        """
        Lists all messages whose Block 1 names the given sender address.
        """
        stmt = select(ParseResultRecord).where(ParseResultRecord.sender_bic == sender_bic)
        return list(self.session.execute(stmt).scalars().all())

    def list_invalid(self) -> List[ParseResultRecord]:
        """
        Lists all messages stored with validation errors.
        """
        stmt = select(ParseResultRecord).where(ParseResultRecord.valid.is_(False))
        return list(self.session.execute(stmt).scalars().all())

    def _to_record(self, result: ParseResult) -> ParseResultRecord:
        """
        Internal mapping logic from dataclass to relational record.
        """
        tx = dataclasses.asdict(result.transaction)
        header = result.header
        return ParseResultRecord(
            **tx,
            sender_bic=header.sender_bic if header else None,
            receiver_bic=header.receiver_bic if header else None,
            message_type=header.message_type if header else None,
            valid=result.valid,
            errors=list(result.errors),
        )

    @staticmethod
    def create_schema(engine) -> None:
        """
        Utility to create all defined tables in the target database.
        """
        Base.metadata.create_all(engine)
