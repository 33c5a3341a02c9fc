import re
from typing import List

from swiftmt.models import RawField

# A field starts at ':NN:' or ':NNA:' and runs until the next tag marker or end of input
_FIELD_PATTERN = re.compile(r":([0-9]{2}[A-Z]?):(.*?)(?=:[0-9]{2}[A-Z]?:|\Z)", re.DOTALL)


def tokenize(block4: str) -> List[RawField]:
    """
    Splits the Block 4 text into tagged fields in document order.

    Values are trimmed but keep their interior newlines so multi-line fields
    (:50K:, :59:, :70:) can be parsed line by line. Repeated tags produce
    repeated entries.
    """
    return [RawField(tag=m.group(1), value=m.group(2).strip()) for m in _FIELD_PATTERN.finditer(block4)]
