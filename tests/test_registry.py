from campfire_survival.simulation import EntityRegistry, Resource, ResourceType


def make(kind, x, y, **kwargs):
    return Resource(x=x, y=y, type=kind, **kwargs)


def test_ids_are_unique_and_stable():
    a = make(ResourceType.BERRY, 0, 0)
    b = make(ResourceType.BERRY, 0, 0)
    assert a.id != b.id
    assert a != b
    assert len({a, b}) == 2


def test_add_and_typed_views():
    registry = EntityRegistry()
    tree = registry.add(make(ResourceType.TREE, 10, 10, hp=2))
    rock = registry.add(make(ResourceType.ROCK, 20, 20, hp=3))

    assert registry.of_type(ResourceType.TREE) == [tree]
    assert registry.of_type(ResourceType.ROCK) == [rock]
    assert registry.count(ResourceType.BERRY) == 0
    assert len(registry) == 2
    assert registry.get(tree.id) is tree


def test_marked_entities_are_hidden_until_compacted():
    registry = EntityRegistry()
    berries = [registry.add(make(ResourceType.BERRY, i, 0)) for i in range(5)]

    for berry in berries[::2]:
        assert registry.mark_removed(berry)

    assert registry.count(ResourceType.BERRY) == 2
    assert registry.of_type(ResourceType.BERRY) == [berries[1], berries[3]]
    assert registry.get(berries[0].id) is None
    assert registry.within(ResourceType.BERRY, 0, 0, 100) == [berries[1], berries[3]]

    assert registry.compact() == 3
    assert registry.compact() == 0
    assert len(registry) == 2


def test_marking_twice_reports_false():
    registry = EntityRegistry()
    berry = registry.add(make(ResourceType.BERRY, 0, 0))
    assert registry.mark_removed(berry)
    assert not registry.mark_removed(berry)


def test_within_is_strict():
    registry = EntityRegistry()
    inside = registry.add(make(ResourceType.TREE, 63.9, 0, hp=2))
    registry.add(make(ResourceType.TREE, 64, 0, hp=2))
    registry.add(make(ResourceType.TREE, 0, 100, hp=2))

    assert registry.within(ResourceType.TREE, 0, 0, 64) == [inside]


def test_within_filters_by_type():
    registry = EntityRegistry()
    registry.add(make(ResourceType.ROCK, 0, 0, hp=3))
    berry = registry.add(make(ResourceType.BERRY, 0, 0))
    assert registry.within(ResourceType.BERRY, 0, 0, 10) == [berry]
    assert registry.within(ResourceType.CAMPFIRE, 0, 0, 10) == []


def test_within_can_add_entity_radius():
    registry = EntityRegistry()
    pool = registry.add(make(ResourceType.WATER, 100, 0, radius=40))

    assert registry.within(ResourceType.WATER, 0, 0, 6) == []
    # 100 < 40 + 61
    assert registry.within(ResourceType.WATER, 0, 0, 61, use_entity_radius=True) == [pool]
    # 100 is not < 40 + 60
    assert registry.within(ResourceType.WATER, 0, 0, 60, use_entity_radius=True) == []


def test_clear_and_iteration():
    registry = EntityRegistry()
    items = [registry.add(make(kind, 0, 0)) for kind in ResourceType]
    registry.mark_removed(items[0])
    assert set(registry) == set(items[1:])

    registry.clear()
    assert len(registry) == 0
    assert list(registry) == []
