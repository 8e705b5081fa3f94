import logging
from contextlib import asynccontextmanager
from time import perf_counter
from typing import Annotated, AsyncGenerator, Awaitable, Callable

from fastapi import Depends, FastAPI, Request, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy.orm import sessionmaker

from api.dependencies import get_oracle
from config import config
from db.db import create_db_engine
from domain.errors import OracleError, StateNotFound
from domain.messages import InstantiateMsg
from services.oracle import Attribute, ContractVersion, DummyPriceOracle

logger = logging.getLogger(__name__)


class InstantiateRequest(BaseModel):
    sender: str
    msg: InstantiateMsg


@asynccontextmanager
async def lifespan(fastapi_app: FastAPI) -> AsyncGenerator[None, None]:
    db_file = config().db_file
    db_file.parent.mkdir(parents=True, exist_ok=True)
    engine = create_db_engine(db_file)
    fastapi_app.state.sessionmaker = sessionmaker(engine)
    yield
    engine.dispose()


app = FastAPI(lifespan=lifespan)


@app.middleware("http")
async def log_process_time(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
    start_time = perf_counter()
    response = await call_next(request)
    process_time = perf_counter() - start_time
    logger.debug("Request time: %s %s: %.4fs", request.method, request.url, process_time)
    return response


@app.exception_handler(OracleError)
async def oracle_error_handler(request: Request, exc: OracleError) -> JSONResponse:
    status_code = 404 if isinstance(exc, StateNotFound) else 400
    return JSONResponse(status_code=status_code, content={"error": exc.message})


@app.post("/instantiate")
def instantiate(
    body: InstantiateRequest, oracle: Annotated[DummyPriceOracle, Depends(get_oracle)]
) -> list[Attribute]:
    return oracle.instantiate(body.sender, body.msg).attributes


@app.post("/execute")
async def execute(request: Request, oracle: Annotated[DummyPriceOracle, Depends(get_oracle)]) -> Response:
    sender = request.headers.get("x-sender", "")
    oracle.execute(sender, await request.body())
    return Response(status_code=204)


@app.post("/query")
async def query(request: Request, oracle: Annotated[DummyPriceOracle, Depends(get_oracle)]) -> Response:
    return Response(content=oracle.query_raw(await request.body()), media_type="application/json")


@app.get("/contract-version")
def get_contract_version(oracle: Annotated[DummyPriceOracle, Depends(get_oracle)]) -> ContractVersion:
    return oracle.contract_version()
