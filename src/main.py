from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

from config import config
from db.db import init_db
from domain.errors import OracleError
from services.oracle import DummyPriceOracle, build_oracle

logger = logging.getLogger(__name__)


def run_instantiate(oracle: DummyPriceOracle, prices_path: Path, sender: str) -> None:
    response = oracle.instantiate_raw(sender, prices_path.read_text(encoding="utf-8"))
    for attribute in response.attributes:
        print(f"{attribute.key}: {attribute.value}")


def run_query(oracle: DummyPriceOracle, raw_msg: str) -> None:
    result = oracle.query_raw(raw_msg)
    print(json.dumps(json.loads(result), indent=2))


def run_version(oracle: DummyPriceOracle) -> None:
    version = oracle.contract_version()
    print(f"{version.contract} {version.version}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Deterministic DEX price oracle for tests.")
    parser.add_argument("--db", type=Path, default=None, help="SQLite file holding the oracle state.")
    parser.add_argument("--verbose", action="store_true")
    commands = parser.add_subparsers(dest="command", required=True)

    instantiate = commands.add_parser("instantiate", help="Store the price table from a JSON instantiate message.")
    instantiate.add_argument("--prices", type=Path, required=True)
    instantiate.add_argument("--sender", default="creator")

    query = commands.add_parser("query", help="Run a JSON query message and print the response.")
    query.add_argument("msg")

    commands.add_parser("version", help="Print the stored contract version.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s %(message)s")

    settings = config()
    db_file = args.db or settings.db_file
    db_file.parent.mkdir(parents=True, exist_ok=True)
    session = init_db(db_file=db_file)
    oracle = build_oracle(session, settings)
    try:
        if args.command == "instantiate":
            run_instantiate(oracle, args.prices, args.sender)
        elif args.command == "query":
            run_query(oracle, args.msg)
        else:
            run_version(oracle)
    except OracleError as exc:
        logger.info("Command %s failed: %s", args.command, exc)
        print(f"error: {exc.message}", file=sys.stderr)
        return 1
    finally:
        session.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
