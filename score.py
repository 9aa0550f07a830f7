from __future__ import annotations
from dataclasses import dataclass
import re
from typing import Any

from command import Command, ICommand, ScoreOperator
from selector import ISelector

_objective = re.compile(r'[-+._0-9A-Za-z]+')

@dataclass(frozen=True)
class Objective:
  """
  スコアボードのobjective

  idはスコアボード名
  """
  id:str

  def __post_init__(self):
    if not _objective.fullmatch(self.id):
      raise ValueError(f'"{self.id}" is not valid objective name')

  def expression(self) -> str:
    return self.id

  def Add(self,criteria:str='dummy',display:Any=None):
    """
    スコアボードを追加する

    display:
      表示名
    """
    return Command.Scoreboard.Objectives.Add(self,criteria,display)

  def Remove(self):
    """
    スコアボードを削除する
    """
    return Command.Scoreboard.Objectives.Remove(self)

  def Setdisplay(self,slot:str):
    """
    スコアボードを表示する

    slot:
      "sidebar" 等
    """
    return Command.Scoreboard.Objectives.Setdisplay(slot,self)

  def score(self,entity:ISelector|None):
    """
    エンティティのスコアを取得
    """
    return Scoreboard(self,entity)

@dataclass(frozen=True)
class Scoreboard:
  """ entity: None -> すべてのエンティティを対象にする """
  objective:Objective
  entity:ISelector|None

  def expression(self):
    if self.entity is None:
      return f'* {self.objective.id}'
    return f'{self.entity.expression()} {self.objective.id}'

  def Get(self):
    if self.entity is None:
      raise ValueError('scoreboard players get needs a target')
    return Command.Scoreboard.Players.Get(self)

  def Set(self,value:int):
    return Command.Scoreboard.Players.Set(self,value)

  def Add(self,value:int) -> ICommand:
    if value <= -1:
      return Command.Scoreboard.Players.Remove(self,-value)
    return Command.Scoreboard.Players.Add(self,value)

  def Remove(self,value:int) -> ICommand:
    if value <= -1:
      return Command.Scoreboard.Players.Add(self,-value)
    return Command.Scoreboard.Players.Remove(self,value)

  def Reset(self):
    return Command.Scoreboard.Players.Reset(self)

  def Operation(self,operator:ScoreOperator,other:Scoreboard):
    return Command.Scoreboard.Players.Operation(self,operator,other)
