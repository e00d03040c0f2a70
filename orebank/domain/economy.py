# orebank/domain/economy.py
from __future__ import annotations
import logging

from orebank.core.config import settings
from orebank.core.host import Objective, Player, ScoreNotFound, World

log = logging.getLogger(__name__)

# Soldes en G entiers. Source de vérité: l'objectif scoreboard de l'hôte.

def ensure_objective(world: World) -> tuple[Objective, bool]:
    """Renvoie (objective, created). Crée l'objectif monnaie s'il n'existe pas."""
    obj = world.scoreboard.get_objective(settings.money_objective)
    if obj is not None:
        return obj, False
    obj = world.scoreboard.add_objective(settings.money_objective, settings.money_display)
    log.info("Objectif scoreboard créé: %s", settings.money_objective)
    return obj, True

def balance(world: World, player: Player) -> int:
    """Solde courant. Score jamais initialisé => initialisé à 0."""
    obj, _ = ensure_objective(world)
    try:
        return int(obj.get_score(player))
    except ScoreNotFound:
        obj.set_score(player, 0)
        return 0

def add_money(world: World, player: Player, delta: int) -> int:
    """
    Applique delta (peut être négatif) puis joue le son de feedback chez le joueur.
    Aucun contrôle de borne: l'appelant vérifie le solde avant un débit.
    Renvoie le solde après application.
    """
    obj, _ = ensure_objective(world)
    new_balance = obj.add_score(player, int(delta))
    player.play_sound(
        settings.reward_sound,
        location=player.location,
        volume=settings.sound_volume,
        pitch=1.0,
    )
    log.info("Solde %s %+d -> %d", player.id, int(delta), int(new_balance))
    return int(new_balance)
