# orebank/modules/economy/hud.py
from __future__ import annotations

from orebank.core.host import Player, World
from orebank.domain import economy as d_economy
from orebank.domain.players import for_each_player
from orebank.modules.common.money import fmt_balance_bar

HUD_INTERVAL_TICKS = 20  # 1 s

def update_hud(world: World) -> None:
    """Projette le solde de chaque joueur dans son action bar (aucun état conservé)."""
    def _show(player: Player) -> None:
        player.set_action_bar(fmt_balance_bar(d_economy.balance(world, player)))
    for_each_player(world, _show, rule="hud")

def register(scheduler, world: World):
    return scheduler.run_interval(lambda: update_hud(world), HUD_INTERVAL_TICKS, name="hud")
