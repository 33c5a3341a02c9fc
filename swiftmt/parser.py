import logging
from typing import Any, Dict, Tuple, Union

from swiftmt.blocks import decode_header, extract_blocks
from swiftmt.models import ParseResult
from swiftmt.tokenizer import tokenize
from swiftmt.validator import Validator

logger = logging.getLogger(__name__)


class MT103Parser:
    """
    Core parser for SWIFT MT103 Single Customer Credit Transfer messages.

    Parsing is best-effort: every problem found is recorded in
    ``ParseResult.errors`` and processing continues with the next field.
    ``parse()`` never raises.
    """

    # (name reported in errors, Transaction attribute)
    REQUIRED_FIELDS: Tuple[Tuple[str, str], ...] = (
        ("reference", "reference"),
        ("bankOperationCode", "bank_operation_code"),
        ("valueDate", "value_date"),
        ("currency", "currency"),
        ("amount", "amount"),
        ("orderingCustomer", "ordering_customer"),
        ("beneficiary", "beneficiary"),
        ("chargeBearer", "charge_bearer"),
    )

    def __init__(self, message_data: Union[bytes, str]):
        if isinstance(message_data, bytes):
            message_data = message_data.decode("utf-8", errors="ignore")
        self.message_data = message_data

    def parse(self) -> ParseResult:
        """
        Parses the message and returns a ParseResult holding the header, the
        transaction, the raw fields and every validation error found.
        """
        result = ParseResult()

        try:
            blocks = extract_blocks(self.message_data)

            if blocks.block1 or blocks.block2:
                result.header = decode_header(blocks.block1, blocks.block2)

            if not blocks.block4:
                result.add_error("Missing Block 4 (transaction data)")
                return result

            result.raw_fields = tokenize(blocks.block4)
            logger.debug("Block 4 holds %d fields", len(result.raw_fields))

            for raw_field in result.raw_fields:
                self._apply_field(result, raw_field.tag, raw_field.value)

            self._check_required_fields(result)

        except Exception as e:
            logger.exception("Unexpected failure while parsing MT103 message")
            result.add_error(f"Parse error: {e}")

        logger.debug("Parsed MT103 reference=%s valid=%s errors=%d",
                     result.transaction.reference, result.valid, len(result.errors))
        return result

    @staticmethod
    def _apply_field(result: ParseResult, tag: str, value: str) -> None:
        outcome = Validator.validate_field(tag, value)
        if outcome is None:
            result.transaction.extra_fields[tag] = value
            return

        updates, errors = outcome
        # Later occurrences of a tag overwrite earlier ones
        for attr, attr_value in updates.items():
            setattr(result.transaction, attr, attr_value)
        for error in errors:
            result.add_error(error)

    @classmethod
    def _check_required_fields(cls, result: ParseResult) -> None:
        for name, attr in cls.REQUIRED_FIELDS:
            if not getattr(result.transaction, attr):
                result.add_error(f"Missing required field: {name}")

    def flatten(self) -> Dict[str, Any]:
        """
        Parses the message and returns the result as a nested dictionary.
        """
        return self.parse().to_dict()


def parse_message(message_data: Union[bytes, str]) -> ParseResult:
    """
    Convenience wrapper around ``MT103Parser(message_data).parse()``.
    """
    return MT103Parser(message_data).parse()
