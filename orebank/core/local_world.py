# orebank/core/local_world.py
"""
Hôte local: implémente le contrat de core/host.py en process.

- joueurs / inventaires / position: en mémoire
- scoreboard, tags, propriétés dynamiques: persistés en SQLite (persistence/*)

Sert au runtime de dev et aux tests. Les messages, action bars et sons sont
enregistrés sur le joueur pour inspection.
"""
from __future__ import annotations
import logging
from typing import Any, Optional

from orebank.core.host import ItemStack, ScoreNotFound, Vector3
from orebank.persistence import scores as repo_scores
from orebank.persistence import tags as repo_tags
from orebank.persistence import properties as repo_props

log = logging.getLogger(__name__)

INVENTORY_SIZE = 36  # 0-8 = hotbar, 9-35 = inventaire principal


class Inventory:
    def __init__(self, size: int = INVENTORY_SIZE):
        self.size = int(size)
        self._slots: list[Optional[ItemStack]] = [None] * self.size

    def get_item(self, slot: int) -> Optional[ItemStack]:
        if not 0 <= slot < self.size:
            raise IndexError(f"slot {slot} hors inventaire (0..{self.size - 1})")
        return self._slots[slot]

    def set_item(self, slot: int, item: Optional[ItemStack]) -> None:
        if not 0 <= slot < self.size:
            raise IndexError(f"slot {slot} hors inventaire (0..{self.size - 1})")
        self._slots[slot] = item

    def add_item(self, item: ItemStack) -> int:
        """Place l'item dans le premier slot libre et renvoie son index."""
        for i, cur in enumerate(self._slots):
            if cur is None:
                self._slots[i] = item
                return i
        raise ValueError("inventaire plein")

    def fill(self, slots: range, type_id: str) -> None:
        for i in slots:
            self.set_item(i, ItemStack(type_id))

    def clear(self) -> None:
        self._slots = [None] * self.size


class LocalPlayer:
    def __init__(self, player_id: str, name: str, location: Vector3 = Vector3()):
        self.id = str(player_id)
        self.name = name
        self.location = Vector3(*location)
        self.selected_slot: Any = 0
        self.inventory = Inventory()
        self.has_inventory = True

        # Traces observables (messages, HUD, sons)
        self.messages: list[str] = []
        self.action_bar: str = ""
        self.sounds: list[dict] = []

    def __repr__(self) -> str:
        return f"<LocalPlayer id={self.id} name={self.name!r}>"

    def get_inventory(self) -> Optional[Inventory]:
        return self.inventory if self.has_inventory else None

    # Tags / propriétés dynamiques (persistés)
    def has_tag(self, tag: str) -> bool:
        return repo_tags.has(self.id, tag)

    def add_tag(self, tag: str) -> bool:
        return repo_tags.add(self.id, tag)

    def get_tags(self) -> set[str]:
        return repo_tags.all_for(self.id)

    def get_dynamic_property(self, key: str) -> Any:
        return repo_props.get(self.id, key)

    def set_dynamic_property(self, key: str, value: Any) -> None:
        repo_props.set(self.id, key, value)

    # Sorties
    def send_message(self, text: str) -> None:
        self.messages.append(text)

    def set_action_bar(self, text: str) -> None:
        self.action_bar = text

    def play_sound(self, sound_id: str, *, location: Vector3, volume: float = 1.0, pitch: float = 1.0) -> None:
        self.sounds.append({"id": sound_id, "location": Vector3(*location), "volume": volume, "pitch": pitch})


class LocalObjective:
    def __init__(self, name: str, display_name: str):
        self.name = name
        self.display_name = display_name

    def get_score(self, player) -> int:
        val = repo_scores.get(self.name, player.id)
        if val is None:
            raise ScoreNotFound(f"{self.name}: pas de score pour {player.id}")
        return val

    def set_score(self, player, value: int) -> None:
        repo_scores.set(self.name, player.id, int(value))

    def add_score(self, player, delta: int) -> int:
        return repo_scores.incr(self.name, player.id, int(delta))


class LocalScoreboard:
    def get_objective(self, name: str) -> Optional[LocalObjective]:
        row = repo_scores.get_objective(name)
        if row is None:
            return None
        return LocalObjective(row["name"], row["display_name"])

    def add_objective(self, name: str, display_name: str = "") -> LocalObjective:
        row = repo_scores.add_objective(name, display_name)
        return LocalObjective(row["name"], row["display_name"])


class LocalWorld:
    def __init__(self):
        self.scoreboard = LocalScoreboard()
        self._players: dict[str, LocalPlayer] = {}
        self.broadcasts: list[str] = []

    def join(self, player_id: str, name: str = "", location: Vector3 = Vector3()) -> LocalPlayer:
        p = LocalPlayer(str(player_id), name or str(player_id), location)
        self._players[p.id] = p
        log.info("Joueur connecté: %s (%s)", p.name, p.id)
        return p

    def leave(self, player: LocalPlayer) -> None:
        self._players.pop(player.id, None)
        log.info("Joueur déconnecté: %s (%s)", player.name, player.id)

    def get_all_players(self) -> list[LocalPlayer]:
        return list(self._players.values())

    def send_message(self, text: str) -> None:
        self.broadcasts.append(text)
        for p in self._players.values():
            p.send_message(text)
