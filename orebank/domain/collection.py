# orebank/domain/collection.py
"""
Collection d'items: récompense du premier exemplaire de chaque type, et paliers
de variété (nombre de types distincts obtenus).

Le suivi des types obtenus vit en mémoire seulement: un redémarrage du process
le remet à zéro (et peut donc re-récompenser). Les paliers, eux, sont gardés
par des tags persistés côté hôte.
"""
from __future__ import annotations
import logging
from typing import Optional

from orebank.core.config import settings
from orebank.core.host import Player, World, iter_items
from orebank.domain import economy as d_economy
from orebank.modules.common.money import AQUA, GREEN, WHITE, fmt_reward

log = logging.getLogger(__name__)

# (nombre de types, récompense): croissant sur les deux colonnes
ITEM_MILESTONES: list[tuple[int, int]] = [
    (50, 200),
    (100, 250),
    (250, 300),
    (500, 350),
    (1000, 400),
    (1500, 500),
    (2000, 600),
    (3000, 700),
    (4000, 800),
    (5000, 900),
]


class ObtainedItemRegistry:
    """Types d'items déjà récompensés, par joueur. Grandit seulement; jamais évincé."""

    def __init__(self):
        self._by_player: dict[str, set[str]] = {}

    def for_player(self, player_id: str) -> set[str]:
        return self._by_player.setdefault(str(player_id), set())

    def get(self, player_id: str) -> Optional[set[str]]:
        return self._by_player.get(str(player_id))

    def count(self, player_id: str) -> int:
        return len(self._by_player.get(str(player_id), ()))

    def reset(self) -> None:
        self._by_player.clear()


registry = ObtainedItemRegistry()


def milestone_tag(count: int) -> str:
    return f"achievement_items_{int(count)}"


def reward_new_items(world: World, player: Player, reg: ObtainedItemRegistry = registry) -> list[str]:
    """Récompense chaque type pas encore vu. Renvoie les nouveaux types (ordre des slots)."""
    inv = player.get_inventory()
    if inv is None:
        return []

    obtained = reg.for_player(player.id)
    fresh: list[str] = []
    for _, stack in iter_items(inv):
        if stack is None or stack.type_id in obtained:
            continue
        d_economy.add_money(world, player, settings.item_reward)
        player.send_message(
            f"{GREEN}[Collection]{WHITE} {stack.short_name} obtenu pour la première fois ! ({fmt_reward(settings.item_reward)})"
        )
        obtained.add(stack.type_id)
        fresh.append(stack.type_id)

    if fresh:
        log.info("Collection %s: +%d types (total %d)", player.id, len(fresh), len(obtained))
    return fresh


def reward_milestones(world: World, player: Player, reg: ObtainedItemRegistry = registry) -> list[int]:
    """Tous les paliers atteints et pas encore taggés sont récompensés (pas seulement le plus haut)."""
    obtained = reg.get(player.id)
    if not obtained:
        return []

    count = len(obtained)
    granted: list[int] = []
    for threshold, reward in ITEM_MILESTONES:
        if count < threshold:
            break
        tag = milestone_tag(threshold)
        if player.has_tag(tag):
            continue
        player.add_tag(tag)
        d_economy.add_money(world, player, reward)
        player.send_message(f"{AQUA}[Succès]{WHITE} {threshold} types d'items obtenus ! ({fmt_reward(reward)})")
        granted.append(threshold)
        log.info("Palier collection %d atteint par %s (+%d)", threshold, player.id, reward)
    return granted
