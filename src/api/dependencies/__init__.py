from typing import Annotated, Generator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from config import config
from services.oracle import DummyPriceOracle, build_oracle


def get_session(request: Request) -> Generator[Session, None, None]:
    with request.app.state.sessionmaker() as session:
        yield session


def get_oracle(session: Annotated[Session, Depends(get_session)]) -> DummyPriceOracle:
    return build_oracle(session, config())
