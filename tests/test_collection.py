from orebank.core.host import ItemStack
from orebank.core.local_world import LocalWorld
from orebank.domain import collection as d_collection
from orebank.domain import economy as d_economy
from orebank.domain.collection import ITEM_MILESTONES, ObtainedItemRegistry, milestone_tag


def test_first_item_of_each_type_rewarded_once(world, registry):
    p = world.join("p1", "Alice")
    p.inventory.set_item(0, ItemStack("minecraft:dirt", 12))
    p.inventory.set_item(4, ItemStack("minecraft:stone"))
    p.inventory.set_item(20, ItemStack("minecraft:dirt", 3))

    fresh = d_collection.reward_new_items(world, p, registry)

    assert fresh == ["minecraft:dirt", "minecraft:stone"]
    assert d_economy.balance(world, p) == 50
    assert p.messages == [
        "§a[Collection]§f dirt obtenu pour la première fois ! (+25G)",
        "§a[Collection]§f stone obtenu pour la première fois ! (+25G)",
    ]

    # Même inventaire au poll suivant: rien de plus
    assert d_collection.reward_new_items(world, p, registry) == []
    assert d_economy.balance(world, p) == 50
    assert len(p.messages) == 2


def test_items_dropped_and_picked_again_not_rewarded_twice(world, registry):
    p = world.join("p1", "Alice")
    p.inventory.set_item(0, ItemStack("minecraft:bone"))
    d_collection.reward_new_items(world, p, registry)

    p.inventory.clear()
    d_collection.reward_new_items(world, p, registry)
    p.inventory.set_item(7, ItemStack("minecraft:bone"))
    d_collection.reward_new_items(world, p, registry)

    assert d_economy.balance(world, p) == 25
    assert registry.count(p.id) == 1


def test_tracking_is_per_player(world, registry):
    a = world.join("a", "A")
    b = world.join("b", "B")
    for p in (a, b):
        p.inventory.set_item(0, ItemStack("minecraft:apple"))
        d_collection.reward_new_items(world, p, registry)

    assert d_economy.balance(world, a) == 25
    assert d_economy.balance(world, b) == 25


def test_tracking_resets_with_a_fresh_registry(world, registry):
    # Limitation connue: le suivi n'est pas persisté (nouveau process = nouveau registre)
    p = world.join("p1", "Alice")
    p.inventory.set_item(0, ItemStack("minecraft:apple"))
    d_collection.reward_new_items(world, p, registry)

    d_collection.reward_new_items(world, p, ObtainedItemRegistry())

    assert d_economy.balance(world, p) == 50


def test_missing_inventory_is_skipped(world, registry):
    p = world.join("p1", "Alice")
    p.has_inventory = False

    assert d_collection.reward_new_items(world, p, registry) == []
    assert registry.get(p.id) is None


def test_milestones_table_is_increasing():
    counts = [c for c, _ in ITEM_MILESTONES]
    rewards = [r for _, r in ITEM_MILESTONES]
    assert counts == sorted(counts) and len(set(counts)) == len(counts)
    assert rewards == sorted(rewards)


def test_milestones_skip_players_without_obtained_items(world, registry):
    p = world.join("p1", "Alice")
    assert d_collection.reward_milestones(world, p, registry) == []


def test_milestone_jump_rewards_every_crossed_threshold(world, registry):
    p = world.join("p1", "Alice")
    obtained = registry.for_player(p.id)
    obtained.update(f"test:item_{i}" for i in range(40))

    assert d_collection.reward_milestones(world, p, registry) == []

    obtained.update(f"test:item_{i}" for i in range(40, 120))
    granted = d_collection.reward_milestones(world, p, registry)

    assert granted == [50, 100]
    assert d_economy.balance(world, p) == 200 + 250
    assert p.has_tag(milestone_tag(50)) and p.has_tag(milestone_tag(100))
    assert not p.has_tag(milestone_tag(250))
    assert len(p.messages) == 2

    # Poll suivant: déjà taggé
    assert d_collection.reward_milestones(world, p, registry) == []
    assert d_economy.balance(world, p) == 450


def test_milestone_tags_survive_a_new_registry(world, registry):
    p = world.join("p1", "Alice")
    registry.for_player(p.id).update(f"test:item_{i}" for i in range(50))
    d_collection.reward_milestones(world, p, registry)

    # Redémarrage: registre vide, puis re-collecte de 50 types; le tag bloque la re-récompense
    world2 = LocalWorld()
    p2 = world2.join("p1", "Alice")
    fresh = ObtainedItemRegistry()
    fresh.for_player(p2.id).update(f"test:item_{i}" for i in range(50))

    assert d_collection.reward_milestones(world2, p2, fresh) == []
    assert d_economy.balance(world2, p2) == 200


def test_global_registry_filled_by_a_test(world):
    p = world.join("p1", "Alice")
    p.inventory.set_item(0, ItemStack("minecraft:dirt"))

    d_collection.reward_new_items(world, p)

    assert d_collection.registry.count("p1") == 1


def test_global_registry_starts_empty_for_each_test():
    assert d_collection.registry.get("p1") is None
