import re
from typing import Any, Callable, Dict, List, Optional, Tuple

from swiftmt.models import PartyInfo

FieldOutcome = Tuple[Dict[str, Any], List[str]]


class Validator:
    """
    Field-level validation engine for MT103 Block 4.

    Every rule is a pure function taking the raw field value and returning
    ``(updates, errors)``: the Transaction attributes to set and the error
    messages to record. Rules never raise for malformed data; the value is
    stored wherever the field layout allows it, even when a rule fails.
    """

    MAX_REFERENCE_LENGTH = 16
    BANK_OPERATION_CODES = ("CRED", "CRTS", "SPAY", "SPRI", "SSTD")
    CHARGE_BEARER_CODES = ("BEN", "OUR", "SHA")

    # YYMMDD + 3 letter currency + amount with comma decimal
    _32a_pattern = re.compile(r"\A([0-9]{6})([A-Z]{3})([0-9,]+)\Z")

    @staticmethod
    def _validate_20(content: str) -> FieldOutcome:
        """
        Validates Field 20 (Sender's Reference): at most 16 characters.
        """
        errors = []
        if len(content) > Validator.MAX_REFERENCE_LENGTH:
            errors.append(
                f"Field :20: exceeds max length of {Validator.MAX_REFERENCE_LENGTH} characters"
            )
        return {"reference": content}, errors

    @staticmethod
    def _validate_23b(content: str) -> FieldOutcome:
        """
        Validates Field 23B (Bank Operation Code) against the allowed code list.
        """
        errors = []
        if content not in Validator.BANK_OPERATION_CODES:
            errors.append(
                f"Field :23B: invalid code '{content}'. "
                f"Must be one of: {', '.join(Validator.BANK_OPERATION_CODES)}"
            )
        return {"bank_operation_code": content}, errors

    @staticmethod
    def _validate_32a(content: str) -> FieldOutcome:
        """
        Validates Field 32A: :32A:YYMMDDCurrencyAmount

        Month and day are range checked independently so both problems are
        reported at once. The year always gets a '20' century prefix and the
        date is not checked against the length of the month.
        """
        match = Validator._32a_pattern.match(content)
        if not match:
            return {}, [f"Field :32A: invalid format. Expected YYMMDDCCCAMOUNT, got '{content}'"]

        date_part, currency, amount = match.groups()
        year, month, day = date_part[:2], date_part[2:4], date_part[4:6]

        errors = []
        if not 1 <= int(month) <= 12:
            errors.append(f"Field :32A: invalid month '{int(month)}'")
        if not 1 <= int(day) <= 31:
            errors.append(f"Field :32A: invalid day '{int(day)}'")

        updates = {
            "value_date": f"20{year}-{month}-{day}",
            "currency": currency,
            # SWIFT uses a comma as decimal separator
            "amount": amount.replace(",", ".", 1),
        }
        return updates, errors

    @staticmethod
    def parse_customer_field(content: str) -> PartyInfo:
        """
        Splits a customer field (:50K: ordering customer, :59: beneficiary)
        into account, name and address lines.

        An account is only recognized when the first line starts with '/'.
        The next line is the name and everything after it is the address.
        """
        lines = [line.strip() for line in content.split("\n") if line.strip()]
        party = PartyInfo()

        if lines and lines[0].startswith("/"):
            party.account = lines.pop(0)[1:]

        if lines:
            party.name = lines.pop(0)

        party.address = lines
        return party

    @staticmethod
    def _validate_50k(content: str) -> FieldOutcome:
        return {"ordering_customer": Validator.parse_customer_field(content)}, []

    @staticmethod
    def _validate_59(content: str) -> FieldOutcome:
        return {"beneficiary": Validator.parse_customer_field(content)}, []

    @staticmethod
    def _validate_70(content: str) -> FieldOutcome:
        lines = [line for line in content.splitlines() if line.strip()]
        return {"remittance_info": lines}, []

    @staticmethod
    def _validate_71a(content: str) -> FieldOutcome:
        """
        Validates Field 71A (Details of Charges) against the allowed code list.
        """
        errors = []
        if content not in Validator.CHARGE_BEARER_CODES:
            errors.append(
                f"Field :71A: invalid value '{content}'. "
                f"Must be one of: {', '.join(Validator.CHARGE_BEARER_CODES)}"
            )
        return {"charge_bearer": content}, errors

    # Recognized tags; anything else is passed through unvalidated
    RULES: Dict[str, Callable[[str], FieldOutcome]] = {
        "20": _validate_20.__func__,
        "23B": _validate_23b.__func__,
        "32A": _validate_32a.__func__,
        "50K": _validate_50k.__func__,
        "59": _validate_59.__func__,
        "70": _validate_70.__func__,
        "71A": _validate_71a.__func__,
    }

    @staticmethod
    def validate_field(tag: str, content: str) -> Optional[FieldOutcome]:
        """
        Runs the rule registered for ``tag``. Returns None for unrecognized
        tags; the caller keeps those as raw extra fields.
        """
        rule = Validator.RULES.get(tag)
        if rule is None:
            return None
        return rule(content)
