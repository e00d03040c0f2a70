from ..core.db.base import get_conn, atomic

def has(player_id: str, tag: str) -> bool:
    con = get_conn()
    row = con.execute("SELECT 1 FROM tags WHERE player_id=? AND tag=? LIMIT 1", (player_id, tag)).fetchone()
    return bool(row)

def add(player_id: str, tag: str) -> bool:
    with atomic():
        con = get_conn()
        before = con.total_changes
        con.execute("INSERT OR IGNORE INTO tags(player_id, tag) VALUES(?,?)", (player_id, tag))
        return (con.total_changes - before) > 0

def all_for(player_id: str) -> set[str]:
    con = get_conn()
    rows = con.execute("SELECT tag FROM tags WHERE player_id=?", (player_id,)).fetchall()
    return {r[0] for r in rows}
