"""
Point d'entrée: tick -addr :8080 -db tick.db
"""

import argparse
import logging
from pathlib import Path
from typing import List, Optional

import uvicorn
from sqlalchemy.exc import SQLAlchemyError

from tick.core.config import settings, parse_addr
from tick.main import create_app
from tick.services.store import Store

logger = logging.getLogger("tick")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tick", description="Tick - daily tasks and quicklinks")
    parser.add_argument("-addr", "--addr", default=settings.ADDR, help="address to listen on")
    parser.add_argument("-db", "--db", default=settings.DB_PATH, help="path to SQLite database")
    parser.add_argument("-static", "--static", default=settings.STATIC_DIR, help="directory of the web client")
    parser.add_argument("-log-level", "--log-level", default=settings.LOG_LEVEL, help="logging level")
    return parser


def open_store(db_path: str) -> Store:
    """Crée le dossier de la base, ouvre le Store et applique le schéma.

    Toute erreur ici est fatale: on log et on quitte avec le code 1.
    """
    try:
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error(f"Failed to create db directory: {e}")
        raise SystemExit(1)

    try:
        store = Store.open(db_path)
    except SQLAlchemyError as e:
        logger.error(f"Failed to open database: {e}")
        raise SystemExit(1)

    try:
        store.migrate()
    except SQLAlchemyError as e:
        store.close()
        logger.error(f"Failed to migrate database: {e}")
        raise SystemExit(1)

    return store


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        host, port = parse_addr(args.addr)
    except ValueError as e:
        parser.error(str(e))

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    store = open_store(args.db)
    try:
        app = create_app(store, static_dir=args.static)
        logger.info(f"Tick running at http://{host or 'localhost'}:{port}")
        uvicorn.run(app, host=host or "0.0.0.0", port=port, log_level=args.log_level.lower())
    finally:
        store.close()
