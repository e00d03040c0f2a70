# orebank/modules/achievements/collection.py
from __future__ import annotations

from orebank.core.host import World
from orebank.domain import collection as d_collection
from orebank.domain.players import for_each_player

COLLECTION_INTERVAL_TICKS = 20
MILESTONES_INTERVAL_TICKS = 20

def poll_new_items(world: World, reg: d_collection.ObtainedItemRegistry = d_collection.registry) -> None:
    for_each_player(world, lambda p: d_collection.reward_new_items(world, p, reg), rule="first_items")

def poll_milestones(world: World, reg: d_collection.ObtainedItemRegistry = d_collection.registry) -> None:
    for_each_player(world, lambda p: d_collection.reward_milestones(world, p, reg), rule="milestones")

def register(scheduler, world: World):
    return [
        scheduler.run_interval(lambda: poll_new_items(world), COLLECTION_INTERVAL_TICKS, name="first_items"),
        scheduler.run_interval(lambda: poll_milestones(world), MILESTONES_INTERVAL_TICKS, name="milestones"),
    ]
