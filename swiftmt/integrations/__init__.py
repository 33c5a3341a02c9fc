"""
Integrations with third-party libraries like Pydantic and FastAPI.
"""

from .pydantic import from_dataclass, PydanticParseResult
from .fastapi import get_mt103_message

__all__ = ["from_dataclass", "PydanticParseResult", "get_mt103_message"]
