# orebank/domain/players.py
from __future__ import annotations
import logging
from typing import Callable

from orebank.core.host import Player, World

log = logging.getLogger(__name__)

def for_each_player(world: World, fn: Callable[[Player], object], *, rule: str = "") -> int:
    """
    Applique fn à chaque joueur connecté (ordre défini par l'hôte).
    Une erreur sur un joueur = joueur sauté pour ce tick, les autres continuent.
    Renvoie le nombre de joueurs traités sans erreur.
    """
    ok = 0
    for player in world.get_all_players():
        try:
            fn(player)
            ok += 1
        except Exception:
            log.exception("Règle %s: échec pour le joueur %s", rule or getattr(fn, "__name__", "?"), player.id)
    return ok
