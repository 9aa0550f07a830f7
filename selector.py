from __future__ import annotations
from abc import ABCMeta, abstractmethod
from dataclasses import dataclass, replace
from enum import Enum
import re
from typing import Any, Literal
from typing_extensions import Self

from minecraft import ICatalog, canonical_name
from util import float_to_str

SelectorSort = Literal['nearest','furthest','random','arbitrary']
GameMode = Literal['survival','creative','adventure','spectator']

class SelectorKind(Enum):
  SELF = 's'
  NEAREST_PLAYER = 'p'
  ALL_ENTITIES = 'e'
  ALL_PLAYERS = 'a'
  RANDOM_PLAYER = 'r'

_player_kinds = (SelectorKind.NEAREST_PLAYER,SelectorKind.ALL_PLAYERS,SelectorKind.RANDOM_PLAYER)

class ISelector(metaclass=ABCMeta):
  @abstractmethod
  def expression(self) -> str:
    pass

  def __str__(self) -> str:
    return self.expression()

_negatable = ('gamemode','name','type','tag')

@dataclass(frozen=True)
class Selector(ISelector):
  """
  エンティティセレクタ

  実際に生成するときは以下を用いる

  Selector.S() / Selector.P() / Selector.E() / Selector.A() / Selector.R()

  条件の追加は filter(...) で新しいセレクタを得る

  Parameters
  ----------
  limit:
      エンティティ最大数
  sort:
      'nearest'(近い順) / 'furthest'(遠い順) / 'random'(ランダム) / 'arbitrary'(スポーンした順)
  level:
      経験値レベル 10 / (11,20)
  gamemode:
      "survival" / ("creative",False)
  name:
      "foo" / ("foo",False)
  x_rotation:
      仰・俯角 90 / (-10,10)
  y_rotation:
      水平角 -180 / (-90,90)
  type:
      Entity.ZOMBIE / (Entity.ZOMBIE,False)
  tag:
      "foo" / ("foo",False)

  (値,False) は否定条件
  """
  kind:SelectorKind
  limit:int|None = None
  sort:SelectorSort|None = None
  level:int|tuple[int|None,int|None]|None = None
  gamemode:tuple[GameMode,bool]|None = None
  name:tuple[str,bool]|None = None
  x_rotation:float|tuple[float|None,float|None]|None = None
  y_rotation:float|tuple[float|None,float|None]|None = None
  type:tuple[ICatalog,bool]|None = None
  tag:tuple[str,bool]|None = None

  def __post_init__(self):
    for key in _negatable:
      value = getattr(self,key)
      if value is not None and not isinstance(value,tuple):
        object.__setattr__(self,key,(value,True))
    if self.kind in _player_kinds and self.type is not None:
      raise ValueError('@a/@p/@r selector must not have "type" argument')

  @staticmethod
  def S(**criteria:Any):
    """@s"""
    return Selector(SelectorKind.SELF,**criteria)

  @staticmethod
  def P(**criteria:Any):
    """@p"""
    return Selector(SelectorKind.NEAREST_PLAYER,**criteria)

  @staticmethod
  def E(**criteria:Any):
    """@e"""
    return Selector(SelectorKind.ALL_ENTITIES,**criteria)

  @staticmethod
  def A(**criteria:Any):
    """@a"""
    return Selector(SelectorKind.ALL_PLAYERS,**criteria)

  @staticmethod
  def R(**criteria:Any):
    """@r"""
    return Selector(SelectorKind.RANDOM_PLAYER,**criteria)

  @staticmethod
  def Player(name:str):
    return PlayerSelector(name)

  def filter(self,**criteria:Any) -> Self:
    """ 指定した条件だけを差し替えたセレクタを返す """
    return replace(self,**criteria)

  def bare(self) -> Selector:
    """ 条件なしの同種セレクタ """
    return Selector(self.kind)

  @property
  def is_bare(self) -> bool:
    return self == self.bare()

  def expression(self) -> str:
    selector = '@' + self.kind.value
    if self.is_bare:
      return selector

    def negatable(key:str,value:tuple[Any,bool]):
      v,positive = value
      return f'{key}=' + ('' if positive else '!') + v

    args:list[str] = []
    if self.limit is not None:
      args.append(f'limit={self.limit}')
    if self.sort is not None:
      args.append(f'sort={self.sort}')
    if self.level is not None:
      args.append(f'level={_range(self.level)}')
    if self.gamemode is not None:
      args.append(negatable('gamemode',self.gamemode))
    if self.name is not None:
      name,positive = self.name
      args.append(negatable('name',(_quote(name),positive)))
    if self.x_rotation is not None:
      args.append(f'x_rotation={_range(self.x_rotation)}')
    if self.y_rotation is not None:
      args.append(f'y_rotation={_range(self.y_rotation)}')
    if self.type is not None:
      entity,positive = self.type
      args.append(negatable('type',(canonical_name(entity),positive)))
    if self.tag is not None:
      args.append(negatable('tag',self.tag))
    return f'{selector}[{",".join(args)}]'

def _range(value:float|tuple[float|None,float|None]) -> str:
  """ 5 -> "5" / (1,5) -> "1..5" / (None,5) -> "..5" """
  match value:
    case (start,stop):
      return ('' if start is None else float_to_str(start)) + '..' + ('' if stop is None else float_to_str(stop))
    case _:
      return float_to_str(value)

def _quote(value:str) -> str:
  if re.search(r'[\s,=\[\]"!{}]',value):
    return '"' + value.replace('\\','\\\\').replace('"','\\"') + '"'
  return value

@dataclass(frozen=True)
class PlayerSelector(ISelector):
  """
  プレイヤー名を直接使うセレクタ
  txkodo / #global
  """
  player:str

  def expression(self) -> str:
    return self.player
