# orebank/modules/economy/transfer.py
from __future__ import annotations

from orebank.core.host import World
from orebank.domain import transfer as d_transfer
from orebank.domain.players import for_each_player

TRANSFER_INTERVAL_TICKS = 20

def poll_transfers(world: World) -> None:
    # Un destinataire max par donneur et par fenêtre
    for_each_player(world, lambda giver: d_transfer.process_transfer(world, giver), rule="transfer")

def register(scheduler, world: World):
    return scheduler.run_interval(lambda: poll_transfers(world), TRANSFER_INTERVAL_TICKS, name="transfer")
