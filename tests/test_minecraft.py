from minecraft import Block, Effect, Entity, Item, Structure, canonical_name


def test_canonical_name():
  assert canonical_name(Item.DISPENSER) == 'dispenser'
  assert canonical_name(Entity.ZOMBIE) == 'zombie'
  assert str(Block.STONE) == 'stone'

def test_id_has_namespace():
  assert Item.DIAMOND_SWORD.id == 'minecraft:diamond_sword'

def test_lookup():
  assert Item['DIAMOND_SWORD'] is Item.DIAMOND_SWORD
  assert Effect('regeneration') is Effect.REGENERATION
  assert Structure.BURIED_TREASURE.value == 'buried_treasure'

def test_catalogs_are_distinct():
  assert Block.STONE != Item.STONE
  assert len(Effect) == 32
