"""
プレディケート ({"condition":...})

サブ条件 (EntityPredicate 等) は全フィールド省略可能で、指定したものだけが AND 条件になる

EntityPredicate(
  distance=DistancePredicate(horizontal=Range(0,10)),
  equipment=EquipmentPredicate(mainhand=ItemPredicate(count=32))
)
"""
from __future__ import annotations
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from mcpath import McPath
from minecraft import ICatalog
from number_provider import ContextEntity, NumberLike
from selector import GameMode
from tagged import IRecord, ITaggedDocument, OptionalRange, Range, flag, json_field, to_json


def _advancements_json(advancements:Mapping[McPath,bool|Mapping[str,bool]]) -> dict[str,Any]:
  """
  進捗ごとに形が変わる

  達成済みか: {"foo:bar":true}
  達成基準ごと: {"foo:bar":{"criterion":false}}
  """
  result:dict[str,Any] = {}
  for name,value in advancements.items():
    match value:
      case bool():
        result[to_json(name)] = value
      case Mapping():
        result[to_json(name)] = {criterion:done for criterion,done in value.items()}
      case _:
        raise TypeError(f'invalid advancement predicate {value!r}')
  return result

def _light_json(light:OptionalRange) -> dict[str,Any]:
  return {'light':to_json(light)}


@dataclass(frozen=True)
class DamagePredicate(IRecord):
  bypasses_armor:bool|None = None
  bypasses_invulnerability:bool|None = None
  bypasses_magic:bool|None = None
  is_explosion:bool|None = None
  is_fire:bool|None = None
  is_magic:bool|None = None
  is_projectile:bool|None = None
  is_lightning:bool|None = None
  direct_entity:EntityPredicate|None = None
  source_entity:EntityPredicate|None = None

@dataclass(frozen=True)
class DistancePredicate(IRecord):
  absolute:Range|None = None
  horizontal:Range|None = None
  x:Range|None = None
  y:Range|None = None
  z:Range|None = None

@dataclass(frozen=True)
class EffectPredicate(IRecord):
  ambient:bool|None = None
  amplifier:OptionalRange|None = None
  duration:OptionalRange|None = None
  visible:bool|None = None

@dataclass(frozen=True)
class EquipmentPredicate(IRecord):
  mainhand:ItemPredicate|None = None
  offhand:ItemPredicate|None = None
  head:ItemPredicate|None = None
  chest:ItemPredicate|None = None
  legs:ItemPredicate|None = None
  feet:ItemPredicate|None = None

@dataclass(frozen=True)
class EntityFlags(IRecord):
  is_on_fire:bool|None = None
  is_sneaking:bool|None = None
  is_sprinting:bool|None = None
  is_swimming:bool|None = None
  is_baby:bool|None = None

@dataclass(frozen=True)
class StatisticPredicate(IRecord):
  """ type: minecraft:custom 等 / stat: 統計ID """
  type:McPath
  stat:McPath
  value:OptionalRange

@dataclass(frozen=True)
class PlayerPredicate(IRecord):
  """
  advancements:
    {McPath('story/mine_stone'):True,McPath('adventure/kill_all_mobs'):{'minecraft:zombie':False}}
  recipes:
    {McPath('bread'):True}
  """
  advancements:Mapping[McPath,bool|Mapping[str,bool]]|None = json_field(None,encoder=_advancements_json)
  gamemode:GameMode|None = None
  level:OptionalRange|None = None
  recipes:Mapping[McPath,bool]|None = None
  stats:Sequence[StatisticPredicate]|None = None

@dataclass(frozen=True)
class EnchantmentPredicate(IRecord):
  enchantment:ICatalog|None = None
  levels:OptionalRange|None = None

@dataclass(frozen=True)
class ItemPredicate(IRecord):
  count:OptionalRange|None = None
  durability:OptionalRange|None = None
  enchantments:Sequence[EnchantmentPredicate]|None = None
  stored_enchantments:Sequence[EnchantmentPredicate]|None = None
  item:ICatalog|None = None
  nbt:str|None = None
  potion:ICatalog|None = None
  tag:McPath|None = None

@dataclass(frozen=True)
class BlockPredicate(IRecord):
  block:ICatalog|None = None
  tag:McPath|None = None
  nbt:str|None = None
  state:Mapping[str,bool|int|str]|None = None

@dataclass(frozen=True)
class FluidPredicate(IRecord):
  fluid:McPath|None = None
  tag:McPath|None = None
  state:Mapping[str,bool|int|str]|None = None

@dataclass(frozen=True)
class PositionPredicate(IRecord):
  x:OptionalRange|None = None
  y:OptionalRange|None = None
  z:OptionalRange|None = None

@dataclass(frozen=True)
class LocationPredicate(IRecord):
  biome:McPath|None = None
  block:BlockPredicate|None = None
  dimension:McPath|None = None
  feature:ICatalog|None = None
  fluid:FluidPredicate|None = None
  light:OptionalRange|None = json_field(None,encoder=_light_json)
  position:PositionPredicate|None = None
  smokey:bool|None = None

@dataclass(frozen=True)
class EntityPredicate(IRecord):
  distance:DistancePredicate|None = None
  effects:Mapping[ICatalog,EffectPredicate]|None = None
  equipment:EquipmentPredicate|None = None
  flags:EntityFlags|None = None
  location:LocationPredicate|None = None
  nbt:str|None = None
  player:PlayerPredicate|None = None
  team:str|None = None
  type:ICatalog|None = None
  targeted_entity:EntityPredicate|None = None
  vehicle:EntityPredicate|None = None


class IPredicate(ITaggedDocument,discriminant='condition'):
  """
  ~pred で反転、pred | other で OR
  """
  def __invert__(self):
    return Predicate.Inverted(self)

  def __or__(self,other:IPredicate):
    return Predicate.Alternative((self,other))

class Predicate:
  @dataclass(frozen=True)
  class Alternative(IPredicate,condition='alternative'):
    """ いずれかを満たす """
    terms:Sequence[IPredicate]

  @dataclass(frozen=True)
  class BlockStateProperty(IPredicate,condition='block_state_property'):
    block:ICatalog
    properties:Mapping[str,str]|None = None

  @dataclass(frozen=True)
  class DamageSourceProperties(IPredicate,condition='damage_source_properties'):
    predicate:DamagePredicate

  @dataclass(frozen=True)
  class EntityProperties(IPredicate,condition='entity_properties'):
    entity:ContextEntity
    predicate:EntityPredicate

  @dataclass(frozen=True)
  class EntityScores(IPredicate,condition='entity_scores'):
    """
    scores:
      {"foo":10,"bar":Range(1,100)}
    """
    entity:ContextEntity
    scores:Mapping[str,OptionalRange]

  @dataclass(frozen=True)
  class Inverted(IPredicate,condition='inverted'):
    term:IPredicate

  @dataclass(frozen=True)
  class KilledByPlayer(IPredicate,condition='killed_by_player'):
    """ inverse=True でプレイヤーに倒されていないことを判定 """
    inverse:bool = flag()

  @dataclass(frozen=True)
  class LocationCheck(IPredicate,condition='location_check'):
    predicate:LocationPredicate
    offset_x:int|None = json_field(None,key='offsetX')
    offset_y:int|None = json_field(None,key='offsetY')
    offset_z:int|None = json_field(None,key='offsetZ')

  @dataclass(frozen=True)
  class MatchTool(IPredicate,condition='match_tool'):
    predicate:ItemPredicate

  @dataclass(frozen=True)
  class RandomChance(IPredicate,condition='random_chance'):
    chance:float

  @dataclass(frozen=True)
  class RandomChanceWithLooting(IPredicate,condition='random_chance_with_looting'):
    """ 成功率 = chance + ドロップ増加レベル * looting_multiplier """
    chance:float
    looting_multiplier:float

  @dataclass(frozen=True)
  class Reference(IPredicate,condition='reference'):
    name:McPath

  @dataclass(frozen=True)
  class SurvivesExplosion(IPredicate,condition='survives_explosion'):
    pass

  @dataclass(frozen=True)
  class TableBonus(IPredicate,condition='table_bonus'):
    """ chances[エンチャントレベル] の確率で成功 """
    enchantment:ICatalog
    chances:Sequence[float]

  @dataclass(frozen=True)
  class TimeCheck(IPredicate,condition='time_check'):
    """ period: 指定時は時刻をこの値で割った余りで判定する (24000 で1日) """
    value:OptionalRange
    period:int|None = None

  @dataclass(frozen=True)
  class WeatherCheck(IPredicate,condition='weather_check'):
    raining:bool|None = None
    thundering:bool|None = None

  @dataclass(frozen=True)
  class ValueCheck(IPredicate,condition='value_check'):
    value:NumberLike
    range:OptionalRange
