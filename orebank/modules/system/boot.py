# orebank/modules/system/boot.py
from __future__ import annotations
import logging

from orebank.core.host import World
from orebank.domain import economy as d_economy
from orebank.modules.common.money import GREEN, YELLOW

log = logging.getLogger(__name__)

BOOT_DELAY_TICKS = 20

MSG_OBJECTIVE_CREATED = f"{GREEN}[Système] Tableau des soldes créé"
MSG_BOOT_DONE = f"{YELLOW}[Système] Démarrage terminé !"

def boot(world: World) -> bool:
    _, created = d_economy.ensure_objective(world)
    if created:
        world.send_message(MSG_OBJECTIVE_CREATED)
    world.send_message(MSG_BOOT_DONE)
    log.info("Boot terminé (objectif créé=%s)", created)
    return created

def register(scheduler, world: World):
    return scheduler.run_timeout(lambda: boot(world), BOOT_DELAY_TICKS, name="boot")
