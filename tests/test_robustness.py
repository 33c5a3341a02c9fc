import os

from swiftmt.models import ParseResult
from swiftmt.parser import MT103Parser, parse_message
from swiftmt.samples import SAMPLE_MT103


# --- 1. Internal failures become error entries ---


def test_internal_failure_is_reported(monkeypatch):
    def boom(block4):
        raise RuntimeError("tokenizer exploded")

    monkeypatch.setattr("swiftmt.parser.tokenize", boom)
    result = parse_message(SAMPLE_MT103)

    assert result.valid is False
    assert result.errors == ["Parse error: tokenizer exploded"]
    # Whatever was accumulated before the failure is kept
    assert result.header.sender_bic == "BANKBEBBAXXX"


def test_internal_failure_keeps_partial_transaction(monkeypatch):
    calls = []
    original = MT103Parser._apply_field

    def flaky(result, tag, value):
        if tag == "32A":
            raise ValueError("bad field")
        calls.append(tag)
        original(result, tag, value)

    monkeypatch.setattr(MT103Parser, "_apply_field", staticmethod(flaky))
    result = parse_message(SAMPLE_MT103)

    assert calls == ["20", "23B"]
    assert result.transaction.reference == "REF20231205001"
    assert result.errors == ["Parse error: bad field"]
    assert len(result.raw_fields) == 7


def test_internal_failure_is_logged(monkeypatch, caplog):
    monkeypatch.setattr("swiftmt.parser.extract_blocks", lambda text: 1 / 0)
    with caplog.at_level("ERROR", logger="swiftmt.parser"):
        result = parse_message(SAMPLE_MT103)

    assert result.errors[0].startswith("Parse error: ")
    assert "Unexpected failure" in caplog.text


# --- 2. Malformed input ---


def test_parser_truncated_message():
    truncated = "{1:F01BANKBEBBAXXX0000000000}{4:\n:20:TRUNCATED"
    result = parse_message(truncated)

    assert isinstance(result, ParseResult)
    assert result.errors == ["Missing Block 4 (transaction data)"]


def test_parser_pure_garbage_input():
    garbage = os.urandom(1024)
    result = MT103Parser(garbage).parse()

    assert isinstance(result, ParseResult)
    assert result.valid is False
    assert result.valid == (len(result.errors) == 0)


def test_parser_unicode_names():
    message = SAMPLE_MT103.replace("JOHN DOE", "Иван Петров").replace("JANE SMITH", "Beneficiary 中文")
    result = MT103Parser(message.encode("utf-8")).parse()

    assert result.valid is True
    assert result.transaction.ordering_customer.name == "Иван Петров"
    assert result.transaction.beneficiary.name == "Beneficiary 中文"


# --- 3. Boundary values ---


def test_parser_large_amount():
    message = SAMPLE_MT103.replace("231205USD10000,00", "231205USD999999999999,99")
    result = parse_message(message)
    assert result.transaction.amount == "999999999999.99"


def test_parser_huge_remittance():
    lines = "\n".join(f"LINE {i}" for i in range(10000))
    message = SAMPLE_MT103.replace(":70:INVOICE INV-2023-12345\nPAYMENT FOR SERVICES", f":70:{lines}")
    result = parse_message(message)

    assert result.valid is True
    assert len(result.transaction.remittance_info) == 10000
    assert result.transaction.remittance_info[-1] == "LINE 9999"
