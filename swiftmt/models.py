from dataclasses import asdict, dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True)
class RawField:
    """
    A single tagged field as it appears in Block 4, e.g. ``:32A:231205USD10000,00``.
    """

    tag: str
    value: str


@dataclass
class PartyInfo:
    """
    Standardized representation of an MT103 customer field (:50K: or :59:).

    Attributes:
        account (Optional[str]):
            Account number taken from a first line starting with '/'.
        name (Optional[str]):
            The first line following the optional account line.
        address (List[str]):
            All remaining lines, in their original order.
    """

    account: Optional[str] = None
    name: Optional[str] = None
    address: List[str] = field(default_factory=list)


@dataclass
class Transaction:
    """
    Structured representation of the MT103 Block 4 payload.

    Attributes:
        reference (Optional[str]):
            Sender's reference, field :20:.
        bank_operation_code (Optional[str]):
            Field :23B: (CRED, CRTS, SPAY, SPRI or SSTD).
        value_date (Optional[str]):
            ISO-8601 date derived from the YYMMDD part of :32A:.
        currency (Optional[str]):
            3-letter currency code from :32A:.
        amount (Optional[str]):
            Interbank settled amount from :32A:, using '.' as the decimal separator.
            Kept as a string to preserve exact decimal precision out of the raw document.
        ordering_customer (Optional[PartyInfo]):
            Field :50K:.
        beneficiary (Optional[PartyInfo]):
            Field :59:.
        remittance_info (Optional[List[str]]):
            Non-blank lines of field :70:.
        charge_bearer (Optional[str]):
            Field :71A: (BEN, OUR or SHA).
        extra_fields (Dict[str, str]):
            Raw values of every tag without a dedicated validator, keyed by tag.
    """

    reference: Optional[str] = None
    bank_operation_code: Optional[str] = None
    value_date: Optional[str] = None
    currency: Optional[str] = None
    amount: Optional[str] = None
    ordering_customer: Optional[PartyInfo] = None
    beneficiary: Optional[PartyInfo] = None
    remittance_info: Optional[List[str]] = None
    charge_bearer: Optional[str] = None
    extra_fields: Dict[str, str] = field(default_factory=dict)


@dataclass
class MessageHeader:
    """
    Raw Block 1 / Block 2 contents plus the routing data decoded from them.
    """

    basic_header: Optional[str] = None
    application_header: Optional[str] = None
    sender_bic: Optional[str] = None
    receiver_bic: Optional[str] = None
    direction: Optional[str] = None
    message_type: Optional[str] = None
    priority: Optional[str] = None


@dataclass
class ParseResult:
    """
    Outcome of parsing one MT103 message.

    ``valid`` is True exactly when ``errors`` is empty. The transaction is
    returned even when invalid so callers can inspect whatever was extracted.
    """

    transaction: Transaction = field(default_factory=Transaction)
    header: Optional[MessageHeader] = None
    valid: bool = True
    errors: List[str] = field(default_factory=list)
    raw_fields: List[RawField] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        self.errors.append(message)
        self.valid = False

    def to_dict(self) -> dict:
        """
        Converts the parse result into a standard Python dictionary.
        Returns:
            dict: Nested dictionary of header, transaction, validity and raw fields.
        """
        return asdict(self)
