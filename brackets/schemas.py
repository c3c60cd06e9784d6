from pydantic import BaseModel, Field

from .config import config

class BalanceRequest(BaseModel):
    expression: str = Field(
        ..., max_length=config.MAX_EXPRESSION_LENGTH, description="Строка со скобками"
    )

class BalanceResponse(BaseModel):
    expression: str
    balanced: bool
