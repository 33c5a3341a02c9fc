from swiftmt.models import RawField
from swiftmt.tokenizer import tokenize


def test_tokenize_simple_fields():
    fields = tokenize(":20:REF1\n:23B:CRED\n:71A:SHA")
    assert fields == [
        RawField(tag="20", value="REF1"),
        RawField(tag="23B", value="CRED"),
        RawField(tag="71A", value="SHA"),
    ]


def test_tokenize_keeps_interior_newlines():
    fields = tokenize(":50K:/123\nJOHN DOE\n1 MAIN ST\n:59:JANE")

    assert fields[0] == RawField(tag="50K", value="/123\nJOHN DOE\n1 MAIN ST")
    assert fields[1] == RawField(tag="59", value="JANE")


def test_tokenize_repeated_tags_in_document_order():
    fields = tokenize(":72:/A\n:20:X\n:72:/B")
    assert [(f.tag, f.value) for f in fields] == [("72", "/A"), ("20", "X"), ("72", "/B")]


def test_tokenize_ignores_text_before_first_tag():
    fields = tokenize("leading noise\n:20:REF1")
    assert fields == [RawField(tag="20", value="REF1")]


def test_tokenize_empty_value():
    fields = tokenize(":20:\n:59:")
    assert fields == [RawField(tag="20", value=""), RawField(tag="59", value="")]


def test_tokenize_no_tags():
    assert tokenize("nothing tagged here") == []
    assert tokenize("") == []
