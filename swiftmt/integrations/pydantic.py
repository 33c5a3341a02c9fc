from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from swiftmt.models import ParseResult


class _CamelModel(BaseModel):
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


class PydanticRawField(_CamelModel):
    tag: str
    value: str


class PydanticPartyInfo(_CamelModel):
    account: Optional[str] = None
    name: Optional[str] = None
    address: List[str] = []


class PydanticMessageHeader(_CamelModel):
    basic_header: Optional[str] = None
    application_header: Optional[str] = None
    sender_bic: Optional[str] = None
    receiver_bic: Optional[str] = None
    direction: Optional[str] = None
    message_type: Optional[str] = None
    priority: Optional[str] = None


class PydanticTransaction(_CamelModel):
    reference: Optional[str] = None
    bank_operation_code: Optional[str] = None
    value_date: Optional[str] = None
    currency: Optional[str] = None
    amount: Optional[str] = None
    ordering_customer: Optional[PydanticPartyInfo] = None
    beneficiary: Optional[PydanticPartyInfo] = None
    remittance_info: Optional[List[str]] = None
    charge_bearer: Optional[str] = None
    extra_fields: Dict[str, str] = {}


class PydanticParseResult(_CamelModel):
    header: Optional[PydanticMessageHeader] = None
    transaction: PydanticTransaction
    valid: bool
    errors: List[str] = []
    raw_fields: List[PydanticRawField] = []


def from_dataclass(result: ParseResult) -> PydanticParseResult:
    """
    Converts a core ParseResult dataclass into its Pydantic equivalent.
    Serialize with ``by_alias=True`` to get camelCase keys.
    """
    return PydanticParseResult.model_validate(result)
