from dataclasses import dataclass

import pytest

from command import Command, Execute, ICommand, SubCommand, arg
from mcpath import McPath
from minecraft import Block, Effect, Entity, Item
from position import Position
from score import Objective
from selector import Selector


@dataclass(frozen=True)
class _Sample(ICommand,keyword='sample'):
  a:int = arg(1)
  b:int = arg(2)
  c:int = arg(3)

class TestElision:
  def test_all_default(self):
    assert _Sample().export() == 'sample'

  def test_value_equal_to_default_is_elided(self):
    assert _Sample(b=2).export() == 'sample'

  def test_earlier_defaults_are_printed(self):
    assert _Sample(c=5).export() == 'sample 1 2 5'

  def test_later_defaults_are_not_printed(self):
    assert _Sample(a=0).export() == 'sample 0'

def test_command_without_keyword_is_rejected():
  with pytest.raises(TypeError):
    class Broken(ICommand):
      pass


class TestGive:
  def test_count(self):
    assert Command.Give(Selector.A(tag='foo'),Item.DISPENSER,50).export() == 'give @a[tag=foo] dispenser 50'

  def test_default_count(self):
    assert Command.Give(Selector.S(),Item.APPLE).export() == 'give @s apple'
    assert Command.Give(Selector.S(),Item.APPLE,1).export() == 'give @s apple'


class TestClear:
  def test_defaults(self):
    assert Command.Clear().export() == 'clear'
    assert Command.Clear(Selector.S()).export() == 'clear'
    assert Command.Clear(Selector.A()).export() == 'clear @a'

  def test_item(self):
    assert Command.Clear(item=Item.STONE).export() == 'clear @s stone'
    assert Command.Clear(Selector.S(),Item.STONE,0).export() == 'clear @s stone 0'

  def test_count_without_item(self):
    with pytest.raises(ValueError):
      Command.Clear(maxcount=3)


def test_setblock():
  assert Command.SetBlock(Position.Relative(0,-1,0),Block.STONE).export() == 'setblock ~ ~-1 ~ stone'
  assert Command.SetBlock(Position.World(1,2,3),Block.STONE,'destroy').export() == 'setblock 1 2 3 stone destroy'

class TestFill:
  start = Position.World(0,0,0)
  end = Position.World(1,1,1)

  def test_plain(self):
    assert Command.Fill(self.start,self.end,Block.AIR).export() == 'fill 0 0 0 1 1 1 air'

  def test_mode(self):
    assert Command.Fill(self.start,self.end,Block.AIR,'hollow').export() == 'fill 0 0 0 1 1 1 air hollow'

  def test_filter_prints_replace(self):
    assert Command.Fill(self.start,self.end,Block.AIR,filter=Block.STONE).export() == 'fill 0 0 0 1 1 1 air replace stone'

  def test_filter_needs_replace(self):
    with pytest.raises(ValueError):
      Command.Fill(self.start,self.end,Block.AIR,'hollow',Block.STONE)


def test_kill():
  assert Command.Kill().export() == 'kill'
  assert Command.Kill(Selector.S()).export() == 'kill'
  assert Command.Kill(Selector.E(type=Entity.ZOMBIE)).export() == 'kill @e[type=zombie]'
  assert str(Command.Kill()) == 'kill'

class TestEffect:
  def test_hide_particles_prints_all_arguments(self):
    assert Command.Effect.Give(Selector.S(),Effect.REGENERATION,hide_particles=True).export() == 'effect give @s regeneration 30 0 true'

  def test_defaults(self):
    assert Command.Effect.Give(Selector.S(),Effect.SPEED).export() == 'effect give @s speed'
    assert Command.Effect.Give(Selector.S(),Effect.SPEED,10).export() == 'effect give @s speed 10'
    assert Command.Effect.Give(Selector.A(),Effect.SPEED,amplifier=1).export() == 'effect give @a speed 30 1'

  def test_clear(self):
    assert Command.Effect.Clear().export() == 'effect clear'
    assert Command.Effect.Clear(effect=Effect.SPEED).export() == 'effect clear @s speed'


def test_summon():
  assert Command.Summon(Entity.ZOMBIE).export() == 'summon zombie'
  assert Command.Summon(Entity.ZOMBIE,Position.Relative()).export() == 'summon zombie'
  assert Command.Summon(Entity.ZOMBIE,Position.Local(0,0,5)).export() == 'summon zombie ^ ^ ^5'

def test_text_commands():
  assert Command.Say('hello world').export() == 'say hello world'
  assert Command.Tellraw(Selector.A(),{'text':'hi'}).export() == 'tellraw @a {"text": "hi"}'

def test_function():
  assert Command.Function(McPath.parse('foo:bar/baz')).export() == 'function foo:bar/baz'

def test_tag():
  assert Command.Tag.Add(Selector.S(),'x').export() == 'tag @s add x'
  assert Command.Tag.Remove(Selector.E(tag='x'),'x').export() == 'tag @e[tag=x] remove x'
  assert Command.Tag.List(Selector.S()).export() == 'tag @s list'

def test_objectives():
  points = Objective('points')
  assert Command.Scoreboard.Objectives.Add(points).export() == 'scoreboard objectives add points dummy'
  assert Command.Scoreboard.Objectives.Add(points,'deathCount','Deaths').export() == 'scoreboard objectives add points deathCount "Deaths"'
  assert Command.Scoreboard.Objectives.Remove(points).export() == 'scoreboard objectives remove points'
  assert Command.Scoreboard.Objectives.Setdisplay('sidebar').export() == 'scoreboard objectives setdisplay sidebar'


class TestExecute:
  def test_run(self):
    command = Execute.As(Selector.A()).At(Selector.S()).Run(Command.Say('hi'))
    assert command.export() == 'execute as @a at @s run say hi'

  def test_condition_only(self):
    assert Execute.IfEntity(Selector.E(type=Entity.CREEPER)).export() == 'execute if entity @e[type=creeper]'

  def test_score_matches(self):
    score = Objective('x').score(Selector.S())
    assert Execute.IfScoreMatches(score,1,5).Run(Command.Kill()).export() == 'execute if score @s x matches 1..5 run kill'
    assert Execute.UnlessScoreMatches(score,3).export() == 'execute unless score @s x matches 3'
    with pytest.raises(ValueError):
      Execute.IfScoreMatches(score,5,1)

  def test_block_and_predicate(self):
    command = Execute.IfBlock(Position.Relative(0,-1,0),Block.DIAMOND_BLOCK).UnlessPredicate(McPath.parse('test:is_day'))
    assert command.export() == 'execute if block ~ ~-1 ~ diamond_block unless predicate test:is_day'

  def test_join(self):
    command = Execute.As(Selector.A()) + Execute.Positioned(Position.World(0,64,0))
    assert command.export() == 'execute as @a positioned 0 64 0'

  def test_empty(self):
    with pytest.raises(ValueError):
      SubCommand().export()
