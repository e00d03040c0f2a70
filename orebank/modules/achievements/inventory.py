# orebank/modules/achievements/inventory.py
from __future__ import annotations

from orebank.core.host import World
from orebank.domain import achievements as d_ach

# (succès, cadence en ticks), un job indépendant par entrée
SCHEDULE: list[tuple[d_ach.Achievement, int]] = [
    (d_ach.MONSTER_HUNTER, 80),
    (d_ach.REAL_MONSTER_HUNTER, 100),
    (d_ach.STONE_INVENTORY, 100),
    (d_ach.ANCIENT_STONE_INVENTORY, 100),
]

def register(scheduler, world: World):
    jobs = []
    for ach, ticks in SCHEDULE:
        jobs.append(scheduler.run_interval(lambda a=ach: d_ach.run_achievements(world, [a]), ticks, name=ach.id))
    return jobs
