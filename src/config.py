from __future__ import annotations

from functools import cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from domain.triangulation import NATIVE_ANCHOR_DENOM, REFERENCE_ANCHOR_DENOM, Anchors

PROJECT_ROOT = Path(__file__).resolve().parents[1]
ARTIFACTS_DIR = PROJECT_ROOT / "artifacts"
DB_FILE = ARTIFACTS_DIR / "dummy_price_oracle.db"


class AppSettings(BaseSettings):
    db_file: Path = DB_FILE
    anchor_native_denom: str = NATIVE_ANCHOR_DENOM
    anchor_reference_denom: str = REFERENCE_ANCHOR_DENOM

    model_config = SettingsConfigDict(env_prefix="ORACLE_", env_file=".env", env_file_encoding="utf-8", extra="ignore")

    def anchors(self) -> Anchors:
        return Anchors(native=self.anchor_native_denom, reference=self.anchor_reference_denom)


@cache
def config() -> AppSettings:
    return AppSettings()
