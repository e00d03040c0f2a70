# orebank/domain/achievements.py
"""
Succès "une seule fois": un prédicat sur l'inventaire, une clé de drapeau
persistée (propriété dynamique), une récompense. Un seul driver les exécute tous.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

from orebank.core.host import Container, Player, World, iter_items
from orebank.domain import economy as d_economy
from orebank.domain.players import for_each_player
from orebank.modules.common.money import GOLD, GREEN, PURPLE, WHITE, fmt_reward

log = logging.getLogger(__name__)

Predicate = Callable[[Container], bool]

MAIN_INVENTORY = range(9, 36)  # hors hotbar

MONSTER_DROPS: tuple[str, ...] = (
    "minecraft:rotten_flesh",
    "minecraft:bone",
    "minecraft:arrow",
    "minecraft:gunpowder",
    "minecraft:string",
    "minecraft:spider_eye",
    "minecraft:phantom_membrane",
    "minecraft:totem_of_undying",
    "minecraft:prismarine_shard",
    "minecraft:prismarine_crystals",
)

STONE_ITEMS = frozenset({"minecraft:cobblestone", "minecraft:cobbled_deepslate"})
ANCIENT_STONE_ITEMS = frozenset({"minecraft:cobbled_deepslate"})


# ── Prédicats
def any_of(type_ids: Iterable[str]) -> Predicate:
    wanted = frozenset(type_ids)

    def check(inv: Container) -> bool:
        return any(stack is not None and stack.type_id in wanted for _, stack in iter_items(inv))
    return check

def all_of(type_ids: Iterable[str]) -> Predicate:
    """Tous les types présents en même temps dans l'inventaire (pas de cumul dans le temps)."""
    wanted = frozenset(type_ids)

    def check(inv: Container) -> bool:
        present = {stack.type_id for _, stack in iter_items(inv) if stack is not None}
        return wanted <= present
    return check

def slots_all(slots: range, type_ids: Iterable[str]) -> Predicate:
    """Chaque slot de la plage est occupé par un type autorisé. Un slot vide => échec."""
    allowed = frozenset(type_ids)

    def check(inv: Container) -> bool:
        if slots.stop > inv.size:
            return False
        for _, stack in iter_items(inv, slots):
            if stack is None or stack.type_id not in allowed:
                return False
        return True
    return check


@dataclass(frozen=True)
class Achievement:
    id: str
    title: str
    reward: int
    predicate: Predicate
    color: str = GOLD

    @property
    def flag(self) -> str:
        return f"achievement_{self.id}"


MONSTER_HUNTER = Achievement("monster_hunter", "Chasseur de monstres", 300, any_of(MONSTER_DROPS), GOLD)
REAL_MONSTER_HUNTER = Achievement("real_monster_hunter", "Vrai chasseur de monstres", 500, all_of(MONSTER_DROPS), PURPLE)
STONE_INVENTORY = Achievement("stone_inventory", "Inventaire de pierre", 300, slots_all(MAIN_INVENTORY, STONE_ITEMS), GOLD)
ANCIENT_STONE_INVENTORY = Achievement(
    "ancient_stone_inventory", "Inventaire de pierre antique", 500, slots_all(MAIN_INVENTORY, ANCIENT_STONE_ITEMS), PURPLE
)

ALL_ACHIEVEMENTS: tuple[Achievement, ...] = (
    MONSTER_HUNTER,
    REAL_MONSTER_HUNTER,
    STONE_INVENTORY,
    ANCIENT_STONE_INVENTORY,
)


def is_unlocked(player: Player, achievement: Achievement) -> bool:
    return bool(player.get_dynamic_property(achievement.flag))

def check_achievement(world: World, achievement: Achievement, player: Player) -> bool:
    """Débloque le succès si besoin. Renvoie True seulement au déblocage."""
    if is_unlocked(player, achievement):
        return False

    inv = player.get_inventory()
    if inv is None:
        return False

    if not achievement.predicate(inv):
        return False

    player.set_dynamic_property(achievement.flag, True)
    d_economy.add_money(world, player, achievement.reward)
    player.send_message(f"{achievement.color}[Succès débloqué]{WHITE} {achievement.title}")
    player.send_message(f"{GREEN}Récompense : {fmt_reward(achievement.reward)}")
    log.info("Succès %s débloqué par %s (+%d)", achievement.id, player.id, achievement.reward)
    return True

def run_achievements(world: World, achievements: Sequence[Achievement]) -> None:
    def _check(player: Player) -> None:
        for ach in achievements:
            check_achievement(world, ach, player)
    for_each_player(world, _check, rule="achievements:" + ",".join(a.id for a in achievements))
