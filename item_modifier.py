"""
アイテムモディファイア ({"function":...})

全てのモディファイアはキーワード引数 conditions でプレディケートを持てる

ItemModifier.SetCount(NumberProvider.Uniform(1,3),conditions=[Predicate.RandomChance(0.5)])
"""
from __future__ import annotations
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Literal

from mcpath import McPath
from minecraft import ICatalog, Structure
from number_provider import ContextEntity, NumberLike
from predicate import IPredicate
from tagged import IRecord, ITaggedDocument, Range, flag, json_field

BonusFormula = Literal['binomial_with_bonus_count','uniform_bonus_count','ore_drops']
CopySource = Literal['block_entity','this','killer','killer_player']
AttributeOperation = Literal['addition','multiply_base','multiply_total']


@dataclass(frozen=True)
class BinomialBonusParameters(IRecord):
  extra:int
  probability:float

@dataclass(frozen=True)
class UniformBonusParameters(IRecord):
  bonus_multiplier:float = json_field(key='bonusMultiplier')

@dataclass(frozen=True)
class CopyNbtOperation(IRecord):
  """ op: 'replace' / 'append' / 'merge' """
  source:str
  target:str
  op:Literal['replace','append','merge'] = 'replace'

@dataclass(frozen=True)
class AttributeModifier(IRecord):
  """
  attribute:
    McPath.parse('generic.max_health')
  slot:
    'mainhand' / ['head','chest']
  """
  name:str
  attribute:McPath
  operation:AttributeOperation
  amount:NumberLike
  slot:str|Sequence[str]
  id:str|None = None

@dataclass(frozen=True)
class BannerPattern(IRecord):
  pattern:str
  color:str

@dataclass(frozen=True)
class StewEffect(IRecord):
  type:ICatalog
  duration:NumberLike

def _item_entries(items:Sequence[ICatalog]) -> list[dict[str,Any]]:
  return [{'type':'minecraft:item','name':item.id} for item in items]


@dataclass(frozen=True)
class IItemModifier(ITaggedDocument,discriminant='function'):
  conditions:Sequence[IPredicate] = json_field((),omit_empty=True,kw_only=True)

class ItemModifier:
  @dataclass(frozen=True)
  class ApplyBonus(IItemModifier,function='apply_bonus'):
    """
    ApplyBonus.BinomialWithBonusCount / ApplyBonus.UniformBonusCount / ApplyBonus.OreDrops で作る
    """
    enchantment:ICatalog
    formula:BonusFormula
    parameters:BinomialBonusParameters|UniformBonusParameters|None = None

    def __post_init__(self):
      expected = {
        'binomial_with_bonus_count':BinomialBonusParameters,
        'uniform_bonus_count':UniformBonusParameters,
        'ore_drops':type(None)
        }[self.formula]
      if not isinstance(self.parameters,expected):
        raise ValueError(f'apply_bonus formula "{self.formula}" does not take {self.parameters!r}')

    @staticmethod
    def BinomialWithBonusCount(enchantment:ICatalog,extra:int,probability:float,**kwargs:Any):
      return ItemModifier.ApplyBonus(enchantment,'binomial_with_bonus_count',BinomialBonusParameters(extra,probability),**kwargs)

    @staticmethod
    def UniformBonusCount(enchantment:ICatalog,bonus_multiplier:float,**kwargs:Any):
      return ItemModifier.ApplyBonus(enchantment,'uniform_bonus_count',UniformBonusParameters(bonus_multiplier),**kwargs)

    @staticmethod
    def OreDrops(enchantment:ICatalog,**kwargs:Any):
      return ItemModifier.ApplyBonus(enchantment,'ore_drops',**kwargs)

  @dataclass(frozen=True)
  class CopyName(IItemModifier,function='copy_name'):
    source:CopySource

  @dataclass(frozen=True)
  class CopyNbt(IItemModifier,function='copy_nbt'):
    source:CopySource
    ops:Sequence[CopyNbtOperation]

  @dataclass(frozen=True)
  class CopyState(IItemModifier,function='copy_state'):
    block:ICatalog
    properties:Sequence[str]

  @dataclass(frozen=True)
  class EnchantRandomly(IItemModifier,function='enchant_randomly'):
    """ enchantments: 省略時は全てのエンチャントから選ぶ """
    enchantments:Sequence[ICatalog]|None = None

  @dataclass(frozen=True)
  class EnchantWithLevels(IItemModifier,function='enchant_with_levels'):
    levels:NumberLike
    treasure:bool = flag()

  @dataclass(frozen=True)
  class ExplorationMap(IItemModifier,function='exploration_map'):
    """ 既定値と同じ値は出力しない """
    destination:ICatalog = json_field(Structure.BURIED_TREASURE,omit_default=True)
    decoration:str = json_field('mansion',omit_default=True)
    zoom:int = json_field(2,omit_default=True)
    search_radius:int = json_field(50,omit_default=True)
    skip_existing_chunks:bool = json_field(True,omit_default=True)

  @dataclass(frozen=True)
  class ExplosionDecay(IItemModifier,function='explosion_decay'):
    pass

  @dataclass(frozen=True)
  class FurnaceSmelt(IItemModifier,function='furnace_smelt'):
    pass

  @dataclass(frozen=True)
  class FillPlayerHead(IItemModifier,function='fill_player_head'):
    entity:ContextEntity

  @dataclass(frozen=True)
  class LimitCountExact(IItemModifier,function='limit_count'):
    """ {"function":"limit_count","limit":5} """
    limit:NumberLike

  @dataclass(frozen=True)
  class LimitCountRange(IItemModifier,function='limit_count'):
    """ {"function":"limit_count","limit":{"min":1,"max":5}} """
    limit:Range

  @dataclass(frozen=True)
  class LootingEnchant(IItemModifier,function='looting_enchant'):
    """ limit: 0 は上限なし """
    count:NumberLike
    limit:int = json_field(0,omit_default=True)

  @dataclass(frozen=True)
  class SetAttributes(IItemModifier,function='set_attributes'):
    modifiers:Sequence[AttributeModifier]

  @dataclass(frozen=True)
  class SetBannerPattern(IItemModifier,function='set_banner_pattern'):
    patterns:Sequence[BannerPattern]
    append:bool = flag()

  @dataclass(frozen=True)
  class SetContents(IItemModifier,function='set_contents'):
    entries:Sequence[ICatalog] = json_field(encoder=_item_entries)

  @dataclass(frozen=True)
  class SetCount(IItemModifier,function='set_count'):
    count:NumberLike
    add:bool = flag()

  @dataclass(frozen=True)
  class SetDamage(IItemModifier,function='set_damage'):
    """ damage: 1.0 で耐久値最大 """
    damage:NumberLike
    add:bool = flag()

  @dataclass(frozen=True)
  class SetEnchantments(IItemModifier,function='set_enchantments'):
    """ enchantments: {Enchant.SHARPNESS:5,Enchant.LOOTING:NumberProvider.Uniform(1,3)} """
    enchantments:Mapping[ICatalog,NumberLike]
    add:bool = flag()

  @dataclass(frozen=True)
  class SetLootTable(IItemModifier,function='set_loot_table'):
    name:McPath
    seed:int = json_field(0,omit_default=True)

  @dataclass(frozen=True)
  class SetLore(IItemModifier,function='set_lore'):
    """ lore: テキストコンポーネントのリスト """
    lore:Sequence[Any]
    entity:ContextEntity|None = None
    replace:bool = flag()

  @dataclass(frozen=True)
  class SetName(IItemModifier,function='set_name'):
    name:Any
    entity:ContextEntity|None = None

  @dataclass(frozen=True)
  class SetNbt(IItemModifier,function='set_nbt'):
    """ tag: "{CustomModelData:1}" """
    tag:str

  @dataclass(frozen=True)
  class SetStewEffect(IItemModifier,function='set_stew_effect'):
    effects:Sequence[StewEffect]
