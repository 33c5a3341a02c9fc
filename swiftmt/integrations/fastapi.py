from fastapi import HTTPException, Request

from swiftmt.integrations.pydantic import PydanticParseResult, from_dataclass
from swiftmt.parser import MT103Parser


async def get_mt103_message(request: Request) -> PydanticParseResult:
    """
    FastAPI dependency that parses an incoming MT103 payload
    and returns the validated Pydantic parse result.
    """
    body = await request.body()
    if not body.strip():
        raise HTTPException(status_code=400, detail="Empty payload")

    result = MT103Parser(body).parse()
    if not result.valid:
        raise HTTPException(
            status_code=422,
            detail={"message": "MT103 validation failed", "errors": result.errors},
        )

    return from_dataclass(result)
