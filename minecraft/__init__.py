"""
ゲーム内コンテンツのカタログ

minecraft/*.txt (1行1ID, `minecraft:` 付き) から列挙型を生成する

Item.DISPENSER / Block.DIAMOND_BLOCK / Effect.REGENERATION ...
"""
from __future__ import annotations
from enum import Enum
from pathlib import Path

_catalog_dir = Path(__file__).parent
_prefix = 'minecraft:'

class ICatalog(Enum):
  """ カタログ値の基底 value は名前空間を除いた正規名 """
  def __str__(self) -> str:
    return self.value

  @property
  def id(self) -> str:
    return _prefix + self.value

def load_catalog(name:str,file:str) -> type[ICatalog]:
  """ リストファイルから列挙型を作る """
  ids:list[str] = []
  for line in (_catalog_dir/file).read_text(encoding='utf8').splitlines():
    line = line.strip()
    if not line:
      continue
    ids.append(line.removeprefix(_prefix))
  return ICatalog(name,names=[(id.upper(),id) for id in ids],module=__name__)

Block     = load_catalog('Block','blocks.txt')
Item      = load_catalog('Item','items.txt')
Entity    = load_catalog('Entity','entity.txt')
Effect    = load_catalog('Effect','effects.txt')
Enchant   = load_catalog('Enchant','enchant.txt')
Structure = load_catalog('Structure','structures.txt')
Potion    = load_catalog('Potion','potions.txt')

def canonical_name(value:ICatalog) -> str:
  """ Item.DISPENSER -> "dispenser" """
  return value.value
