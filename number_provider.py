from __future__ import annotations
from abc import ABCMeta, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeAlias, TypeVar

N = TypeVar('N',int,float)

ContextEntity = Literal['this','killer','direct_killer','killer_player']

class INumberProvider(Generic[N],metaclass=ABCMeta):
  """
  数値プロバイダ

  定数はそのままの数値として出力される
  """
  @abstractmethod
  def export_json(self) -> Any:
    pass

NumberLike:TypeAlias = 'int|float|INumberProvider[Any]'

def number_json(value:NumberLike) -> Any:
  """ 数値はそのまま、プロバイダは再帰的にjson化する """
  if isinstance(value,INumberProvider):
    return value.export_json()
  if isinstance(value,bool) or not isinstance(value,(int,float)):
    raise TypeError(f'{value!r} is not a number provider')
  return value

@dataclass(frozen=True)
class FixedTarget:
  """ {"type":"fixed","name":name} """
  name:str

  def export_json(self) -> Any:
    return {'type':'fixed','name':self.name}

ScoreTarget:TypeAlias = 'FixedTarget|ContextEntity'

class NumberProvider:
  @dataclass(frozen=True)
  class Constant(INumberProvider[N]):
    value:N

    def export_json(self) -> Any:
      return self.value

  @dataclass(frozen=True)
  class Uniform(INumberProvider[N]):
    min:N|INumberProvider[N]
    max:N|INumberProvider[N]

    def export_json(self) -> Any:
      return {
        'type':'uniform',
        'min':number_json(self.min),
        'max':number_json(self.max)
        }

  @dataclass(frozen=True)
  class Binomial(INumberProvider[int]):
    n:int|INumberProvider[int]
    p:float|INumberProvider[float]

    def export_json(self) -> Any:
      return {
        'type':'binomial',
        'n':number_json(self.n),
        'p':number_json(self.p)
        }

  @dataclass(frozen=True)
  class Score(INumberProvider[N]):
    """
    target:
      'this' / 'killer' / 'direct_killer' / 'killer_player' / FixedTarget('#global')
    scale:
      1.0 のときは出力しない
    """
    target:ScoreTarget
    score:str
    scale:float = 1.0

    def export_json(self) -> Any:
      result:dict[str,Any] = {
        'type':'score',
        'target':self.target.export_json() if isinstance(self.target,FixedTarget) else self.target,
        'score':self.score
        }
      if self.scale != 1.0:
        result['scale'] = self.scale
      return result
