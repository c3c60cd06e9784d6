"""
HTTP API для проверки сбалансированности скобок.

Run:
    python -m brackets.main
    (или uvicorn brackets.main:app --reload)

POST /balance  {"expression": "(a[b]{c})"}
GET  /balance?expression=(a[b]{c})
"""
import logging

from fastapi import FastAPI, Query

from . import schemas
from .balance import is_balanced
from .config import config

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Brackets API",
    description="Проверка сбалансированности скобок",
    version="1.0",
    debug=config.DEBUG,
)

def check_expression(expression: str) -> schemas.BalanceResponse:
    balanced = is_balanced(expression)
    logger.info(f"Проверена строка длиной {len(expression)}: balanced={balanced}")
    return schemas.BalanceResponse(expression=expression, balanced=balanced)

@app.post("/balance", response_model=schemas.BalanceResponse)
def check_balance(request: schemas.BalanceRequest):
    return check_expression(request.expression)

@app.get("/balance", response_model=schemas.BalanceResponse)
def check_balance_query(
    expression: str = Query(
        ..., max_length=config.MAX_EXPRESSION_LENGTH, description="Строка со скобками"
    )
):
    return check_expression(expression)

@app.get("/health")
def health_check():
    return {"status": "healthy"}

def serve():
    import uvicorn

    logger.info(f"Сервер запущен на http://{config.HOST}:{config.PORT}")
    logger.info(f"Документация API доступна по адресу: http://{config.HOST}:{config.PORT}/docs")
    uvicorn.run(app, host=config.HOST, port=config.PORT)

if __name__ == "__main__":
    serve()
