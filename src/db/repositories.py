from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel
from sqlalchemy.orm import Session

from db import models
from domain.errors import StateNotFound

M = TypeVar("M", bound=BaseModel)


class ItemRepository:
    """Single-slot typed load/save on top of the ``items`` table."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def save(self, key: str, value: BaseModel) -> None:
        payload = value.model_dump_json()
        orm_item = self._session.get(models.ItemOrm, key)
        if orm_item is None:
            self._session.add(models.ItemOrm(key=key, value=payload))
        else:
            orm_item.value = payload
        self._session.commit()

    def may_load(self, key: str, model_type: type[M]) -> M | None:
        orm_item = self._session.get(models.ItemOrm, key)
        if orm_item is None:
            return None
        return model_type.model_validate_json(orm_item.value)

    def load(self, key: str, model_type: type[M]) -> M:
        value = self.may_load(key, model_type)
        if value is None:
            raise StateNotFound(key)
        return value
