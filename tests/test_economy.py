from orebank.core.config import settings
from orebank.core.host import Vector3
from orebank.domain import economy as d_economy
from orebank.modules.common.money import fmt_balance_bar, fmt_gold


def test_balance_initialises_missing_score_to_zero(world):
    p = world.join("p1", "Alice")

    assert d_economy.balance(world, p) == 0
    # Le score existe désormais côté hôte
    obj = world.scoreboard.get_objective(settings.money_objective)
    assert obj.get_score(p) == 0


def test_add_money_sequence_including_negative(world):
    p = world.join("p1", "Alice")
    expected = d_economy.balance(world, p)

    for delta in (50, -20, 5, -100, 0, 7):
        before = d_economy.balance(world, p)
        after = d_economy.add_money(world, p, delta)
        expected += delta
        assert after == before + delta
        assert d_economy.balance(world, p) == expected

    assert expected == -58


def test_add_money_plays_feedback_sound_at_player(world):
    p = world.join("p1", "Alice", Vector3(3, 64, -2))

    d_economy.add_money(world, p, 10)

    assert len(p.sounds) == 1
    snd = p.sounds[0]
    assert snd["id"] == settings.reward_sound
    assert snd["location"] == Vector3(3, 64, -2)
    assert snd["volume"] == settings.sound_volume
    assert snd["pitch"] == 1.0


def test_ensure_objective_created_once(world):
    obj, created = d_economy.ensure_objective(world)
    assert created is True
    assert obj.name == settings.money_objective
    assert obj.display_name == settings.money_display

    _, created_again = d_economy.ensure_objective(world)
    assert created_again is False


def test_money_format():
    assert fmt_gold(0) == "0 G"
    assert fmt_gold(1250) == "1 250 G"
    assert fmt_gold(-30) == "-30 G"
    assert fmt_balance_bar(120) == f"§6{settings.money_display} : 120 G"
