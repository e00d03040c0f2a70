# orebank/modules/common/money.py
from __future__ import annotations

from orebank.core.config import settings

# Codes couleur de l'hôte (§ + code)
GOLD = "§6"
GREEN = "§a"
AQUA = "§b"
PURPLE = "§d"
YELLOW = "§e"
RED = "§c"
WHITE = "§f"

CURRENCY = "G"

def fmt_gold(amount: int) -> str:
    """
    Formatte un montant → '1 250 G' (séparateur de milliers: espace).
    """
    s = int(amount)
    sign = "-" if s < 0 else ""
    return f"{sign}{abs(s):,} {CURRENCY}".replace(",", " ")

def fmt_reward(amount: int) -> str:
    return f"+{int(amount)}{CURRENCY}"

def fmt_balance_bar(amount: int) -> str:
    """Texte de l'action bar: '§6Solde : 120 G'."""
    return f"{GOLD}{settings.money_display} : {fmt_gold(amount)}"
