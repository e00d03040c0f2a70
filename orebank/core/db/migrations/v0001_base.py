DDL = """
CREATE TABLE IF NOT EXISTS objectives (
  name         TEXT PRIMARY KEY,
  display_name TEXT NOT NULL DEFAULT ''
);

CREATE TABLE IF NOT EXISTS scores (
  objective   TEXT NOT NULL REFERENCES objectives(name) ON DELETE CASCADE,
  participant TEXT NOT NULL,
  value       INTEGER NOT NULL DEFAULT 0,
  PRIMARY KEY (objective, participant)
);
CREATE INDEX IF NOT EXISTS idx_scores_value ON scores(objective, value DESC);

CREATE TABLE IF NOT EXISTS tags (
  player_id TEXT NOT NULL,
  tag       TEXT NOT NULL,
  ts        INTEGER NOT NULL DEFAULT (strftime('%s','now')),
  PRIMARY KEY (player_id, tag)
);

CREATE TABLE IF NOT EXISTS dynamic_properties (
  player_id  TEXT NOT NULL,
  key        TEXT NOT NULL,
  value_json TEXT NOT NULL DEFAULT 'null',   -- valeur libre (JSON string)
  updated_ts INTEGER NOT NULL DEFAULT (strftime('%s','now')),
  PRIMARY KEY (player_id, key)
);
"""
def apply(con): con.executescript(DDL)
