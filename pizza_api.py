import logging
import os
from typing import Dict

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from cooking import kitchen
from inventory import InsufficientStock, store
from models import CookingResult, CookRequest

logger = logging.getLogger(__name__)

app = FastAPI(title="Cooking Agent")


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(InsufficientStock)
async def insufficient_stock_handler(request: Request, exc: InsufficientStock):
    # Only reachable if something mutated the store between check and commit
    logger.error("Inventory invariant violated: %s", exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc)},
    )


@app.get("/cook", response_class=PlainTextResponse)
def hello():
    return "Hello from Cooking Agent"


@app.post("/cook", response_model=CookingResult)
def cook_pizzas(req: CookRequest):
    return kitchen.cook_pizzas(req.pizzas)


@app.get("/cook/inventory", response_model=Dict[str, int])
def get_inventory():
    return {ingredient.value: qty for ingredient, qty in store.snapshot().items()}


@app.post("/cook/inventory/reset", response_model=Dict[str, int])
def reset_inventory():
    store.reset()
    return {ingredient.value: qty for ingredient, qty in store.snapshot().items()}


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s %(message)s")
    uvicorn.run(app, host=os.environ.get("HOST", "0.0.0.0"), port=int(os.environ.get("PORT", "8000")))
