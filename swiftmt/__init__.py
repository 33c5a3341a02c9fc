"""
swiftmt: A lightweight Python package to parse and validate SWIFT MT103
Single Customer Credit Transfer messages into usable structured data.
"""

from .blocks import MessageBlocks, extract_blocks
from .exporter import Exporter
from .models import MessageHeader, ParseResult, PartyInfo, RawField, Transaction
from .parser import MT103Parser, parse_message
from .samples import SAMPLE_MT103, get_sample_message
from .tokenizer import tokenize
from .validator import Validator

__all__ = [
    "MT103Parser",
    "parse_message",
    "ParseResult",
    "Transaction",
    "PartyInfo",
    "RawField",
    "MessageHeader",
    "MessageBlocks",
    "extract_blocks",
    "tokenize",
    "Validator",
    "Exporter",
    "SAMPLE_MT103",
    "get_sample_message",
]
