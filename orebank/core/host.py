# orebank/core/host.py
"""
Contrat de l'hôte (serveur de jeu) tel que consommé par les règles.

Tout l'état réel (joueurs, inventaires, scoreboard, tags, propriétés dynamiques)
appartient à l'hôte. Les règles ne font que lire/écrire via ces interfaces.
"""
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Any, NamedTuple, Optional, Protocol, runtime_checkable


class ScoreNotFound(LookupError):
    """Lecture d'un score jamais initialisé pour ce participant."""


class Vector3(NamedTuple):
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def distance(self, other: "Vector3") -> float:
        return math.dist(self, other)


@dataclass
class ItemStack:
    type_id: str
    amount: int = 1
    custom_name: Optional[str] = None

    @property
    def short_name(self) -> str:
        # "minecraft:bone" -> "bone"
        _, _, name = self.type_id.partition(":")
        return name or self.type_id


@runtime_checkable
class Container(Protocol):
    size: int

    def get_item(self, slot: int) -> Optional[ItemStack]: ...


@runtime_checkable
class Player(Protocol):
    id: str
    name: str
    location: Vector3
    selected_slot: Any

    def get_inventory(self) -> Optional[Container]: ...
    def has_tag(self, tag: str) -> bool: ...
    def add_tag(self, tag: str) -> bool: ...
    def get_dynamic_property(self, key: str) -> Any: ...
    def set_dynamic_property(self, key: str, value: Any) -> None: ...
    def send_message(self, text: str) -> None: ...
    def set_action_bar(self, text: str) -> None: ...
    def play_sound(self, sound_id: str, *, location: Vector3, volume: float = 1.0, pitch: float = 1.0) -> None: ...


class Objective(Protocol):
    name: str
    display_name: str

    def get_score(self, player: Player) -> int: ...
    def set_score(self, player: Player, value: int) -> None: ...
    def add_score(self, player: Player, delta: int) -> int: ...


class Scoreboard(Protocol):
    def get_objective(self, name: str) -> Optional[Objective]: ...
    def add_objective(self, name: str, display_name: str = "") -> Objective: ...


class World(Protocol):
    scoreboard: Scoreboard

    def get_all_players(self) -> list[Player]: ...
    def send_message(self, text: str) -> None: ...


def iter_items(container: Container, slots: Optional[range] = None):
    """Yield (slot, item) pour chaque slot (vide => item None)."""
    for slot in (slots if slots is not None else range(container.size)):
        yield slot, container.get_item(slot)
