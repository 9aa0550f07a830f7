from __future__ import annotations
from abc import ABCMeta, abstractmethod
from dataclasses import dataclass
import re

from util import float_to_str


class Coordinate:
  @dataclass(frozen=True)
  class ICoordinate(metaclass=ABCMeta):
    value:float = 0

    @abstractmethod
    def expression(self) -> str:
      pass

    def __str__(self):
      return self.expression()

  @dataclass(frozen=True)
  class Absolute(ICoordinate):
    """x"""
    def expression(self) -> str:
      return float_to_str(self.value)

  @dataclass(frozen=True)
  class Relative(ICoordinate):
    """~x (0は~のみ)"""
    def expression(self) -> str:
      return '~' + _elide_zero(self.value)


def _elide_zero(value:float) -> str:
  return '' if value == 0 else float_to_str(value)

_axis = re.compile(r'([~^]?)(-?(?:\d+\.?\d*|\.\d+))?')

class Position:
  class IPosition(metaclass=ABCMeta):
    @abstractmethod
    def expression(self) -> str:
      pass

    def __str__(self):
      return self.expression()

  @dataclass(frozen=True)
  class Mixed(IPosition):
    """x ~y z (絶対/相対の混在可)"""
    x:Coordinate.ICoordinate
    y:Coordinate.ICoordinate
    z:Coordinate.ICoordinate

    def expression(self):
      return f'{self.x.expression()} {self.y.expression()} {self.z.expression()}'

  @dataclass(frozen=True)
  class Local(IPosition):
    """^x ^y ^z"""
    x:float = 0
    y:float = 0
    z:float = 0

    def expression(self):
      return f'^{_elide_zero(self.x)} ^{_elide_zero(self.y)} ^{_elide_zero(self.z)}'

  @staticmethod
  def World(x:float,y:float,z:float):
    """x y z"""
    return Position.Mixed(Coordinate.Absolute(x),Coordinate.Absolute(y),Coordinate.Absolute(z))

  @staticmethod
  def Relative(x:float=0,y:float=0,z:float=0):
    """~x ~y ~z"""
    return Position.Mixed(Coordinate.Relative(x),Coordinate.Relative(y),Coordinate.Relative(z))

  @staticmethod
  def parse(text:str) -> Position.IPosition:
    """
    コマンドと同じ表記から座標を作る

    "~ ~1 5" / "^ ^ ^5"

    ^ と ~/絶対座標は混在できない
    """
    tokens = text.split()
    if len(tokens) != 3:
      raise ValueError(f'"{text}" is not valid position')
    prefixes:list[str] = []
    values:list[float] = []
    for token in tokens:
      match = _axis.fullmatch(token)
      if not match:
        raise ValueError(f'"{text}" is not valid position')
      prefix,number = match.groups()
      if not prefix and number is None:
        raise ValueError(f'"{text}" is not valid position')
      prefixes.append(prefix)
      values.append(_number(number))

    if all(prefix == '^' for prefix in prefixes):
      return Position.Local(*values)
    if any(prefix == '^' for prefix in prefixes):
      raise ValueError(f'"{text}" mixes local and world coordinates')
    x,y,z = (Coordinate.Relative(v) if p == '~' else Coordinate.Absolute(v) for p,v in zip(prefixes,values))
    return Position.Mixed(x,y,z)


def _number(text:str|None) -> float:
  if text is None:
    return 0
  if re.fullmatch(r'-?\d+',text):
    return int(text)
  return float(text)
