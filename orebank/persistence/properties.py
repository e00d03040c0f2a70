from __future__ import annotations
from typing import Any
import json
from ..core.db.base import get_conn, atomic

def get(player_id: str, key: str) -> Any:
    con = get_conn()
    row = con.execute("SELECT value_json FROM dynamic_properties WHERE player_id=? AND key=?", (player_id, key)).fetchone()
    if row is None:
        return None
    return json.loads(row[0] or "null")

def set(player_id: str, key: str, value: Any) -> None:
    # None = suppression (même sémantique que l'hôte: "non défini")
    with atomic():
        con = get_conn()
        if value is None:
            con.execute("DELETE FROM dynamic_properties WHERE player_id=? AND key=?", (player_id, key))
            return
        con.execute(
            "INSERT INTO dynamic_properties(player_id, key, value_json) VALUES(?,?,?) "
            "ON CONFLICT(player_id, key) DO UPDATE SET value_json=excluded.value_json, updated_ts=strftime('%s','now')",
            (player_id, key, json.dumps(value, ensure_ascii=False))
        )
