from typing import Optional
from ..core.db.base import get_conn, atomic

def get_objective(name: str) -> Optional[dict]:
    con = get_conn()
    row = con.execute("SELECT name, display_name FROM objectives WHERE name=?", (name,)).fetchone()
    if row is None:
        return None
    return {"name": row[0], "display_name": row[1]}

def add_objective(name: str, display_name: str = "") -> dict:
    with atomic():
        con = get_conn()
        con.execute("INSERT OR IGNORE INTO objectives(name, display_name) VALUES(?,?)", (name, display_name or name))
        row = con.execute("SELECT name, display_name FROM objectives WHERE name=?", (name,)).fetchone()
    return {"name": row[0], "display_name": row[1]}

def get(objective: str, participant: str) -> Optional[int]:
    con = get_conn()
    row = con.execute("SELECT value FROM scores WHERE objective=? AND participant=?", (objective, participant)).fetchone()
    return int(row[0]) if row else None

def set(objective: str, participant: str, value: int) -> int:
    with atomic():
        con = get_conn()
        con.execute(
            "INSERT INTO scores(objective, participant, value) VALUES(?,?,?) "
            "ON CONFLICT(objective, participant) DO UPDATE SET value = excluded.value",
            (objective, participant, int(value))
        )
    return int(value)

def incr(objective: str, participant: str, delta: int) -> int:
    with atomic():
        con = get_conn()
        con.execute(
            "INSERT INTO scores(objective, participant, value) VALUES(?,?,?) "
            "ON CONFLICT(objective, participant) DO UPDATE SET value = value + excluded.value",
            (objective, participant, int(delta))
        )
        (val,) = con.execute("SELECT value FROM scores WHERE objective=? AND participant=?", (objective, participant)).fetchone()
    return int(val)
