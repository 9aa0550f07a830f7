import pytest

import command
import score
from score import Objective, Scoreboard
from selector import Selector


@pytest.fixture
def points():
  return Objective('points')

def test_objective_commands(points:Objective):
  assert points.Add().export() == 'scoreboard objectives add points dummy'
  assert points.Add('health',{'text':'HP'}).export() == 'scoreboard objectives add points health {"text": "HP"}'
  assert points.Remove().export() == 'scoreboard objectives remove points'
  assert points.Setdisplay('sidebar').export() == 'scoreboard objectives setdisplay sidebar points'

@pytest.mark.parametrize('name',['bad name','','a:b'])
def test_invalid_objective(name:str):
  with pytest.raises(ValueError):
    Objective(name)

def test_score_expression(points:Objective):
  assert points.score(Selector.S()).expression() == '@s points'
  assert points.score(None).expression() == '* points'
  assert points.score(Selector.S()) == Scoreboard(points,Selector.S())

def test_set_and_get(points:Objective):
  score = points.score(Selector.S())
  assert score.Set(5).export() == 'scoreboard players set @s points 5'
  assert score.Set(-5).export() == 'scoreboard players set @s points -5'
  assert score.Get().export() == 'scoreboard players get @s points'
  with pytest.raises(ValueError):
    points.score(None).Get()

def test_add_and_remove_flip_on_negative(points:Objective):
  score = points.score(Selector.S())
  assert score.Add(3).export() == 'scoreboard players add @s points 3'
  assert score.Add(-3).export() == 'scoreboard players remove @s points 3'
  assert score.Remove(2).export() == 'scoreboard players remove @s points 2'
  assert score.Remove(-2).export() == 'scoreboard players add @s points 2'

def test_reset(points:Objective):
  assert points.score(None).Reset().export() == 'scoreboard players reset * points'
  assert points.score(Selector.A()).Reset().export() == 'scoreboard players reset @a points'

def test_operation(points:Objective):
  source = Objective('other').score(Selector.Player('#global'))
  assert points.score(Selector.S()).Operation('+=',source).export() == 'scoreboard players operation @s points += #global other'
  assert points.score(Selector.S()).Operation('><',source).export() == 'scoreboard players operation @s points >< #global other'

def test_operator_type_is_shared():
  assert score.ScoreOperator is command.ScoreOperator
