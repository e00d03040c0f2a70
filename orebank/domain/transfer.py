# orebank/domain/transfer.py
from __future__ import annotations
import logging
import re
from typing import Optional

from orebank.core.config import settings
from orebank.core.host import Player, World
from orebank.domain import economy as d_economy
from orebank.modules.common.money import GOLD, GREEN, RED

log = logging.getLogger(__name__)

# Nom custom de l'item marqueur: "send30G" => 30
TRANSFER_PATTERN = re.compile(r"send([0-9]+)G", re.ASCII)

# Au-delà, le nombre ne tient plus exactement dans un flottant double côté hôte
MAX_AMOUNT_DIGITS = 15

MSG_NO_FUNDS = f"{RED}Solde insuffisant !"


def parse_amount(name: Optional[str]) -> Optional[int]:
    """Montant demandé, ou None si le nom n'encode pas un entier strictement positif."""
    if not name:
        return None
    m = TRANSFER_PATTERN.fullmatch(name)
    if not m:
        return None
    digits = m.group(1)
    if len(digits) > MAX_AMOUNT_DIGITS:
        return None
    amount = int(digits)
    return amount if amount > 0 else None

def requested_amount(giver: Player) -> Optional[int]:
    """Lit la demande de transfert dans le slot sélectionné (None si pas de demande valide)."""
    inv = giver.get_inventory()
    if inv is None:
        return None
    slot = giver.selected_slot
    if not isinstance(slot, int) or isinstance(slot, bool):
        return None
    if not 0 <= slot < inv.size:
        return None
    item = inv.get_item(slot)
    if item is None or item.type_id != settings.marker_item:
        return None
    return parse_amount(item.custom_name)

def find_recipient(world: World, giver: Player, radius: Optional[float] = None) -> Optional[Player]:
    """Premier autre joueur à portée (ordre d'énumération de l'hôte)."""
    radius = settings.transfer_range if radius is None else float(radius)
    for other in world.get_all_players():
        if other.id == giver.id:
            continue
        if giver.location.distance(other.location) > radius:
            continue
        return other
    return None

def transfer(world: World, giver: Player, amount: int) -> Optional[Player]:
    """
    Transfère amount de giver vers le premier joueur à portée.
    Renvoie le destinataire, ou None (solde insuffisant ou personne à portée).
    """
    if d_economy.balance(world, giver) < amount:
        giver.send_message(MSG_NO_FUNDS)
        log.debug("Transfert refusé: %s n'a pas %d", giver.id, amount)
        return None

    receiver = find_recipient(world, giver)
    if receiver is None:
        # Personne à portée: pas de message, pas de changement.
        return None

    d_economy.add_money(world, receiver, amount)
    d_economy.add_money(world, giver, -amount)

    giver.send_message(f"{GOLD}{amount}G envoyés à {receiver.name} !")
    receiver.send_message(f"{GREEN}{amount}G reçus de {giver.name} !")
    log.info("Transfert %s -> %s: %d", giver.id, receiver.id, amount)
    return receiver

def process_transfer(world: World, giver: Player) -> Optional[Player]:
    amount = requested_amount(giver)
    if amount is None:
        return None
    return transfer(world, giver, amount)
