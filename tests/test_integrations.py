import pytest
import json
from fastapi import FastAPI, Depends
from fastapi.testclient import TestClient
from swiftmt.models import ParseResult, PartyInfo, RawField, Transaction
from swiftmt.integrations.pydantic import from_dataclass, PydanticParseResult
from swiftmt.integrations.fastapi import get_mt103_message
from swiftmt.samples import SAMPLE_MT103

def test_dataclass_to_pydantic_conversion():
    """
    Verifies that a ParseResult dataclass converts correctly to PydanticParseResult.
    """
    result = ParseResult(
        transaction=Transaction(
            reference="REF_001",
            amount="100.50",
            currency="USD",
            ordering_customer=PartyInfo(account="123", name="John Doe", address=["New York"]),
            extra_fields={"72": "/INS/X"},
        ),
        raw_fields=[RawField(tag="20", value="REF_001")],
    )

    p_result = from_dataclass(result)

    assert isinstance(p_result, PydanticParseResult)
    assert p_result.valid is True
    assert p_result.transaction.reference == "REF_001"
    assert p_result.transaction.ordering_customer.address == ["New York"]
    assert p_result.raw_fields[0].tag == "20"

    # Verify JSON serialization
    parsed_json = json.loads(p_result.model_dump_json(by_alias=True))
    assert parsed_json["transaction"]["orderingCustomer"]["name"] == "John Doe"
    assert parsed_json["transaction"]["extraFields"] == {"72": "/INS/X"}
    assert parsed_json["rawFields"] == [{"tag": "20", "value": "REF_001"}]

def test_pydantic_accepts_field_names_and_aliases():
    by_name = PydanticParseResult(transaction={"bank_operation_code": "CRED"}, valid=True)
    by_alias = PydanticParseResult(transaction={"bankOperationCode": "CRED"}, valid=True)
    assert by_name == by_alias

# FastAPI Integration Test
app = FastAPI()

@app.post("/test-parse")
async def route_test_endpoint(msg=Depends(get_mt103_message)):
    return {"status": "success", "reference": msg.transaction.reference, "type": type(msg).__name__}

def test_fastapi_dependency_parsing():
    """
    Verifies that the FastAPI dependency correctly parses an MT103 into a Pydantic model.
    """
    client = TestClient(app)

    response = client.post("/test-parse", content=SAMPLE_MT103.encode("utf-8"))
    assert response.status_code == 200
    assert response.json() == {
        "status": "success",
        "reference": "REF20231205001",
        "type": "PydanticParseResult"
    }

def test_fastapi_dependency_failure_invalid_message():
    """
    Verifies that the FastAPI dependency returns 422 with the error list.
    """
    client = TestClient(app)

    invalid = SAMPLE_MT103.replace(":71A:SHA", ":71A:XXX")
    response = client.post("/test-parse", content=invalid.encode("utf-8"))
    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["message"] == "MT103 validation failed"
    assert detail["errors"] == ["Field :71A: invalid value 'XXX'. Must be one of: BEN, OUR, SHA"]

def test_fastapi_dependency_missing_block4():
    client = TestClient(app)

    response = client.post("/test-parse", content=b"{1:F01BANKBEBBAXXX0000000000}")
    assert response.status_code == 422
    assert response.json()["detail"]["errors"] == ["Missing Block 4 (transaction data)"]

def test_fastapi_dependency_empty_payload():
    client = TestClient(app)

    response = client.post("/test-parse", content=b"")
    assert response.status_code == 400
    assert response.json()["detail"] == "Empty payload"
