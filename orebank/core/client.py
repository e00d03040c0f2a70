# orebank/core/client.py
from __future__ import annotations
import asyncio, importlib, inspect, logging

from .config import settings
from .db.base import get_conn, current_db_path
from .db.migrations import migrate_if_needed
from .local_world import LocalWorld
from .scheduler import TickScheduler

# ── Logging
log = logging.getLogger("orebank")

def setup_logging() -> None:
    logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO),
                        format="%(asctime)s %(levelname)s %(message)s")

# ═══════════════════════════════════════════════════════════════════
# Modules enregistrés au boot (l'ordre compte: boot d'abord, pour que
# l'objectif monnaie existe avant le premier affichage)
MODULES = [
    "orebank.modules.system.boot",
    "orebank.modules.economy.hud",
    "orebank.modules.economy.transfer",
    "orebank.modules.achievements.collection",
    "orebank.modules.achievements.inventory",
]

# Utilitaires d'enregistrement
def _call_with_best_signature(fn, scheduler, world):
    candidates = [
        (scheduler, world),   # register(scheduler, world)
        (scheduler,),         # register(scheduler)
    ]
    for params in candidates:
        try:
            inspect.signature(fn).bind(*params)
        except TypeError:
            continue
        return fn(*params)
    log.warning("Impossible d'appeler %s avec une signature connue (sig=%s)", fn.__name__, inspect.signature(fn))
    return None

def _register_one_module(dotted: str, scheduler, world):
    mod = importlib.import_module(dotted)
    if hasattr(mod, "register") and callable(mod.register):
        log.info("Register via register(): %s", dotted)
        return _call_with_best_signature(mod.register, scheduler, world)

    log.warning("Module %s: pas de register(), ignoré.", dotted)
    return None

def register_modules(scheduler: TickScheduler, world, modules: list[str] | None = None) -> list[str]:
    """Enregistre chaque module; un module en échec n'empêche pas les autres. Renvoie les modules OK."""
    ok: list[str] = []
    for dotted in (modules if modules is not None else MODULES):
        try:
            _register_one_module(dotted, scheduler, world)
            ok.append(dotted)
        except Exception as e:
            log.exception("Échec d'enregistrement du module %s: %s", dotted, e)
    return ok

# ═══════════════════════════════════════════════════════════════════

async def _serve(world) -> None:
    scheduler = TickScheduler()
    register_modules(scheduler, world)
    scheduler.start()
    log.info("orebank prêt: %d jobs, %d ticks/s", len(scheduler.jobs), scheduler.ticks_per_second)
    try:
        # Tourne pour la durée de vie du process
        await asyncio.Event().wait()
    finally:
        scheduler.stop()

def run(world=None):
    setup_logging()

    # 1) Migrations au boot
    con = get_conn()
    migrate_if_needed(con)
    log.info("DB: %s", current_db_path())

    # 2) Boucle de ticks (hôte local par défaut)
    try:
        asyncio.run(_serve(world if world is not None else LocalWorld()))
    except KeyboardInterrupt:
        log.info("Arrêt demandé")
