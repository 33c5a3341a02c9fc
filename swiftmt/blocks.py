import logging
import re
from dataclasses import dataclass
from typing import Optional

from swiftmt.models import MessageHeader

logger = logging.getLogger(__name__)


@dataclass
class MessageBlocks:
    """
    The three structural blocks of an MT message that the parser works on.
    Any of them may be None when the block is absent.
    """

    block1: Optional[str] = None
    block2: Optional[str] = None
    block4: Optional[str] = None


# No nested braces are expected inside the header blocks
_BLOCK1_PATTERN = re.compile(r"\{1:([^}]+)\}")
_BLOCK2_PATTERN = re.compile(r"\{2:([^}]+)\}")
# Text block runs to '-}', or to a bare '}' when the terminator is missing
_BLOCK4_PATTERN = re.compile(r"\{4:\s*(.*?)\s*-?\}", re.DOTALL)

# {1:F01<LT address 12><session 4><sequence 6>}
_BASIC_HEADER_PATTERN = re.compile(r"\A[A-Z]0[0-9]([A-Z0-9]{12})")
# {2:I103<receiver LT 12><priority>} or {2:O103<input time>...}
_INPUT_APP_HEADER_PATTERN = re.compile(r"\AI([0-9]{3})([A-Z0-9]{12})([SUN])?")
_OUTPUT_APP_HEADER_PATTERN = re.compile(r"\AO([0-9]{3})")


def extract_blocks(text: str) -> MessageBlocks:
    """
    Locates Block 1, Block 2 and Block 4 in a raw SWIFT MT message.

    Header blocks are returned verbatim. Block 4 keeps its interior newlines
    but is trimmed of surrounding whitespace and of the '-' terminator.
    """
    blocks = MessageBlocks()

    b1_match = _BLOCK1_PATTERN.search(text)
    if b1_match:
        blocks.block1 = b1_match.group(1)

    b2_match = _BLOCK2_PATTERN.search(text)
    if b2_match:
        blocks.block2 = b2_match.group(1)

    b4_match = _BLOCK4_PATTERN.search(text)
    if b4_match:
        blocks.block4 = b4_match.group(1)

    return blocks


def decode_header(block1: Optional[str], block2: Optional[str]) -> MessageHeader:
    """
    Builds a MessageHeader from the raw header blocks, decoding the sender and
    receiver logical terminal addresses and the message type where the layout
    is recognized. Never fails: unknown layouts simply leave fields as None.
    """
    header = MessageHeader(basic_header=block1, application_header=block2)

    if block1:
        b1_match = _BASIC_HEADER_PATTERN.match(block1.strip())
        if b1_match:
            header.sender_bic = b1_match.group(1)

    if block2:
        b2 = block2.strip()
        input_match = _INPUT_APP_HEADER_PATTERN.match(b2)
        if input_match:
            header.direction = "I"
            header.message_type = input_match.group(1)
            header.receiver_bic = input_match.group(2)
            header.priority = input_match.group(3)
        else:
            output_match = _OUTPUT_APP_HEADER_PATTERN.match(b2)
            if output_match:
                header.direction = "O"
                header.message_type = output_match.group(1)

    if header.message_type and header.message_type != "103":
        logger.warning("Application header announces MT%s, parsing as MT103", header.message_type)

    return header
