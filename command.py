"""
コマンド

各コマンドは位置引数を宣言順のフィールドとして持つ dataclass

既定値を持たないフィールドは必須、既定値を持つフィールドは省略可能

出力時は既定値と異なる最後の引数までを出力し、それ以降は出力しない
(途中の引数は既定値でも出力する 位置引数を飛ばせないため)

Command.Effect.Give(Selector.S(),Effect.REGENERATION,hide_particles=True)
  -> "effect give @s regeneration 30 0 true"
"""
from __future__ import annotations
from abc import ABCMeta
from collections.abc import Callable
from dataclasses import MISSING, Field, dataclass, field, fields, replace
import json
from typing import Any, Literal, Protocol, runtime_checkable
from typing_extensions import Self

from mcpath import McPath
from minecraft import ICatalog, canonical_name
from position import Position
from selector import ISelector, Selector
from util import float_to_str

ScoreOperator = Literal['+=','-=','*=','/=','%=','=','<','>','><']


def arg(default:Any=MISSING,*,required:bool=False,encoder:Callable[[Any],str]|None=None) -> Any:
  """
  required:
    既定値があっても常に出力する
  encoder:
    引数の文字列化を差し替える
  """
  return field(default=default,metadata={'required':required,'encoder':encoder})

@runtime_checkable
class _IExpression(Protocol):
  def expression(self) -> str:pass

def token(value:Any) -> str:
  """ 引数1つ分の文字列 """
  match value:
    case bool():
      return 'true' if value else 'false'
    case int()|float():
      return float_to_str(value)
    case str():
      return value
    case McPath():
      return value.str
    case ICatalog():
      return canonical_name(value)
    case _IExpression():
      return value.expression()
  raise TypeError(f'cannot use {value!r} as command argument')

def _is_default(f:Field[Any],value:Any) -> bool:
  if f.default is MISSING or f.metadata.get('required'):
    return False
  return value == f.default


class ICommand(metaclass=ABCMeta):
  """ any minecraft command """
  keyword:str

  def __init_subclass__(cls,keyword:str|None=None,**kwargs:Any) -> None:
    super().__init_subclass__(**kwargs)
    if keyword is not None:
      cls.keyword = keyword
    elif not hasattr(cls,'keyword'):
      raise TypeError(f'{cls.__name__} must declare its keyword')

  def __post_init__(self) -> None:
    self.arguments()

  def arguments(self) -> list[tuple[Field[Any],Any]]:
    """ 出力する引数 (既定値から変化した最後の引数まで) """
    args = [(f,getattr(self,f.name)) for f in fields(self)]
    variation = -1
    for i,(f,value) in enumerate(args):
      if not _is_default(f,value):
        variation = i
    result = args[:variation+1]
    for f,value in result:
      if value is None:
        raise ValueError(f'{self.keyword}: argument "{f.name}" is required when a later argument is given')
    return result

  def export_command(self) -> str:
    tokens = [self.keyword]
    for f,value in self.arguments():
      encoder = f.metadata.get('encoder')
      tokens.append(encoder(value) if encoder else token(value))
    return ' '.join(tokens)

  def export(self) -> str:
    return self.export_command()

  def __str__(self) -> str:
    return self.export()


class Command:
  @dataclass(frozen=True)
  class Give(ICommand,keyword='give'):
    """ give <target> <item> [<count>] """
    target:ISelector
    item:ICatalog
    count:int = arg(1)

  @dataclass(frozen=True)
  class Clear(ICommand,keyword='clear'):
    """ clear [<target>] [<item>] [<maxcount>] """
    target:ISelector = arg(Selector.S())
    item:ICatalog|None = arg(None)
    maxcount:int|None = arg(None)

  @dataclass(frozen=True)
  class SetBlock(ICommand,keyword='setblock'):
    """ setblock <pos> <block> [destroy|keep|replace] """
    pos:Position.IPosition
    block:ICatalog
    mode:Literal['destroy','keep','replace'] = arg('replace')

  @dataclass(frozen=True)
  class Fill(ICommand,keyword='fill'):
    """ fill <from> <to> <block> [destroy|hollow|keep|outline|replace [<filter>]] """
    start:Position.IPosition
    end:Position.IPosition
    block:ICatalog
    mode:Literal['destroy','hollow','keep','outline','replace'] = arg('replace')
    filter:ICatalog|None = arg(None)

    def __post_init__(self) -> None:
      if self.filter is not None and self.mode != 'replace':
        raise ValueError(f'''fill mode "{self.mode}" doesn't needs argument "filter"''')
      super().__post_init__()

  @dataclass(frozen=True)
  class Kill(ICommand,keyword='kill'):
    """ kill [<target>] """
    target:ISelector = arg(Selector.S())

  class Effect:
    @dataclass(frozen=True)
    class Give(ICommand,keyword='effect give'):
      """ effect give <target> <effect> [<seconds>] [<amplifier>] [<hideParticles>] """
      target:ISelector
      effect:ICatalog
      seconds:int = arg(30)
      amplifier:int = arg(0)
      hide_particles:bool = arg(False)

    @dataclass(frozen=True)
    class Clear(ICommand,keyword='effect clear'):
      """ effect clear [<target>] [<effect>] """
      target:ISelector = arg(Selector.S())
      effect:ICatalog|None = arg(None)

  @dataclass(frozen=True)
  class Summon(ICommand,keyword='summon'):
    """ summon <entity> [<pos>] """
    entity:ICatalog
    pos:Position.IPosition = arg(Position.Relative())

  @dataclass(frozen=True)
  class Say(ICommand,keyword='say'):
    content:str

  @dataclass(frozen=True)
  class Tellraw(ICommand,keyword='tellraw'):
    """ message: テキストコンポーネント "foo" / {"text":"foo","color":"red"} """
    target:ISelector
    message:Any = arg(encoder=json.dumps)

  @dataclass(frozen=True)
  class Function(ICommand,keyword='function'):
    function:McPath

  class Tag:
    @dataclass(frozen=True)
    class Add(ICommand,keyword='tag'):
      target:ISelector
      name:str

      def export_command(self) -> str:
        return f'tag {self.target.expression()} add {self.name}'

    @dataclass(frozen=True)
    class Remove(ICommand,keyword='tag'):
      target:ISelector
      name:str

      def export_command(self) -> str:
        return f'tag {self.target.expression()} remove {self.name}'

    @dataclass(frozen=True)
    class List(ICommand,keyword='tag'):
      target:ISelector

      def export_command(self) -> str:
        return f'tag {self.target.expression()} list'

  class Scoreboard:
    class Objectives:
      @dataclass(frozen=True)
      class Add(ICommand,keyword='scoreboard objectives add'):
        """ display: 表示名 (テキストコンポーネント) """
        objective:_IExpression
        criteria:str = arg('dummy',required=True)
        display:Any = arg(None,encoder=json.dumps)

      @dataclass(frozen=True)
      class Remove(ICommand,keyword='scoreboard objectives remove'):
        objective:_IExpression

      @dataclass(frozen=True)
      class Setdisplay(ICommand,keyword='scoreboard objectives setdisplay'):
        """ objective: None で表示をやめる """
        slot:str
        objective:_IExpression|None = arg(None)

    class Players:
      @dataclass(frozen=True)
      class Get(ICommand,keyword='scoreboard players get'):
        score:_IExpression

      @dataclass(frozen=True)
      class Set(ICommand,keyword='scoreboard players set'):
        score:_IExpression
        value:int

      @dataclass(frozen=True)
      class Add(ICommand,keyword='scoreboard players add'):
        score:_IExpression
        value:int

      @dataclass(frozen=True)
      class Remove(ICommand,keyword='scoreboard players remove'):
        score:_IExpression
        value:int

      @dataclass(frozen=True)
      class Reset(ICommand,keyword='scoreboard players reset'):
        score:_IExpression

      @dataclass(frozen=True)
      class Operation(ICommand,keyword='scoreboard players operation'):
        target:_IExpression
        operator:ScoreOperator
        source:_IExpression

@dataclass(frozen=True)
class SubCommand(ICommand,keyword='execute'):
  """
  execute のサブコマンド列

  SubCommand の状態でも `execute ...` として実行できる (条件判定のみ)

  Execute.As(Selector.A()).At(Selector.S()).Run(Command.Kill())
  """
  segments:tuple[str,...] = ()

  def _then(self,*tokens:Any) -> Self:
    return replace(self,segments=self.segments + (' '.join(token(t) for t in tokens),))

  def __add__(self,other:SubCommand) -> SubCommand:
    return replace(self,segments=self.segments + other.segments)

  def As(self,entity:ISelector):
    """ execute as @ """
    return self._then('as',entity)

  def At(self,entity:ISelector):
    """ execute at @ """
    return self._then('at',entity)

  def Positioned(self,pos:Position.IPosition):
    """ execute positioned ~ ~ ~ """
    return self._then('positioned',pos)

  def IfEntity(self,entity:ISelector):
    """ execute if entity @ """
    return self._then('if','entity',entity)

  def UnlessEntity(self,entity:ISelector):
    """ execute unless entity @ """
    return self._then('unless','entity',entity)

  def IfBlock(self,pos:Position.IPosition,block:ICatalog):
    """ execute if block ~ ~ ~ {block} """
    return self._then('if','block',pos,block)

  def UnlessBlock(self,pos:Position.IPosition,block:ICatalog):
    """ execute unless block ~ ~ ~ {block} """
    return self._then('unless','block',pos,block)

  def IfScoreMatches(self,score:_IExpression,start:int,stop:int|None=None):
    """ execute if score @ obj matches start..stop """
    return self._then('if','score',score,'matches',_matches(start,stop))

  def UnlessScoreMatches(self,score:_IExpression,start:int,stop:int|None=None):
    """ execute unless score @ obj matches start..stop """
    return self._then('unless','score',score,'matches',_matches(start,stop))

  def IfPredicate(self,predicate:McPath):
    """ execute if predicate {predicate} """
    return self._then('if','predicate',predicate)

  def UnlessPredicate(self,predicate:McPath):
    """ execute unless predicate {predicate} """
    return self._then('unless','predicate',predicate)

  def Run(self,command:ICommand) -> ICommand:
    """ execute ... run {command} """
    return _ExecuteRun(self,command)

  def export_command(self) -> str:
    if not self.segments:
      raise ValueError('execute needs at least one subcommand')
    return 'execute ' + ' '.join(self.segments)

@dataclass(frozen=True)
class _ExecuteRun(ICommand,keyword='execute'):
  subcommand:SubCommand
  command:ICommand

  def export_command(self) -> str:
    return self.subcommand.export_command() + ' run ' + self.command.export()

def _matches(start:int,stop:int|None) -> str:
  if stop is None:
    return str(start)
  if stop < start:
    raise ValueError(f'{start}..{stop} is empty range')
  return f'{start}..{stop}'


class Execute:
  """
  サブコマンド生成メソッドをまとめたstaticクラス
  """

  @staticmethod
  def As(entity:ISelector):
    """ execute as @ """
    return SubCommand().As(entity)

  @staticmethod
  def At(entity:ISelector):
    """ execute at @ """
    return SubCommand().At(entity)

  @staticmethod
  def Positioned(pos:Position.IPosition):
    """ execute positioned ~ ~ ~ """
    return SubCommand().Positioned(pos)

  @staticmethod
  def IfEntity(entity:ISelector):
    """ execute if entity @ """
    return SubCommand().IfEntity(entity)

  @staticmethod
  def UnlessEntity(entity:ISelector):
    """ execute unless entity @ """
    return SubCommand().UnlessEntity(entity)

  @staticmethod
  def IfBlock(pos:Position.IPosition,block:ICatalog):
    """ execute if block ~ ~ ~ {block} """
    return SubCommand().IfBlock(pos,block)

  @staticmethod
  def UnlessBlock(pos:Position.IPosition,block:ICatalog):
    """ execute unless block ~ ~ ~ {block} """
    return SubCommand().UnlessBlock(pos,block)

  @staticmethod
  def IfScoreMatches(score:_IExpression,start:int,stop:int|None=None):
    """ execute if score @ obj matches start..stop """
    return SubCommand().IfScoreMatches(score,start,stop)

  @staticmethod
  def UnlessScoreMatches(score:_IExpression,start:int,stop:int|None=None):
    """ execute unless score @ obj matches start..stop """
    return SubCommand().UnlessScoreMatches(score,start,stop)

  @staticmethod
  def IfPredicate(predicate:McPath):
    """ execute if predicate {predicate} """
    return SubCommand().IfPredicate(predicate)

  @staticmethod
  def UnlessPredicate(predicate:McPath):
    """ execute unless predicate {predicate} """
    return SubCommand().UnlessPredicate(predicate)
