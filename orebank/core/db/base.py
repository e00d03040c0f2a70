# orebank/core/db/base.py
from __future__ import annotations
import os, sqlite3, threading
from contextlib import contextmanager

from orebank.core.config import settings

DB_FILE = "orebank.db"

# Aucun accès disque à l'import: le dossier parent est créé à la connexion,
# que le chemin vienne de la config ou de use_path()
DB_PATH = os.path.join(os.path.abspath(settings.data_dir), DB_FILE)

_tls = threading.local()

def _ensure_parent(path: str) -> None:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)

def _connect():
    _ensure_parent(DB_PATH)
    con = sqlite3.connect(DB_PATH, check_same_thread=False, isolation_level=None, timeout=5.0)
    con.row_factory = sqlite3.Row
    con.execute("PRAGMA journal_mode=WAL;")
    con.execute("PRAGMA foreign_keys=ON;")
    con.execute("PRAGMA synchronous=NORMAL;")
    con.execute("PRAGMA busy_timeout=5000;")
    return con

def get_conn():
    con = getattr(_tls, "con", None)
    if con is None:
        con = _connect()
        _tls.con = con
    return con

def close_conn() -> None:
    con = getattr(_tls, "con", None)
    if con is not None:
        con.close()
        _tls.con = None

def use_path(path: str) -> None:
    """Bascule sur un autre fichier DB (tests, outils). Ferme la connexion courante."""
    global DB_PATH
    close_conn()
    DB_PATH = os.path.abspath(path)

@contextmanager
def atomic(con=None, immediate=True):
    con = con or get_conn()
    try:
        con.execute("BEGIN IMMEDIATE;" if immediate else "BEGIN;")
        yield con
        con.execute("COMMIT;")
    except Exception:
        con.execute("ROLLBACK;")
        raise

def current_db_path() -> str:
    return DB_PATH
