import pytest

from minecraft import Entity
from selector import Selector, SelectorKind


@pytest.mark.parametrize('selector,expected',[
  (Selector.S(),'@s'),
  (Selector.P(),'@p'),
  (Selector.E(),'@e'),
  (Selector.A(),'@a'),
  (Selector.R(),'@r'),
])
def test_bare_selectors(selector:Selector,expected:str):
  assert selector.expression() == expected
  assert selector.is_bare

def test_single_criterion():
  assert Selector.A(tag='foo').expression() == '@a[tag=foo]'

def test_criteria_order():
  selector = Selector.E(
    tag='t',limit=2,name='n',sort='random',level=1,gamemode='survival',
    x_rotation=0,y_rotation=(1,2),type=Entity.CREEPER
    )
  assert selector.expression() == '@e[limit=2,sort=random,level=1,gamemode=survival,name=n,x_rotation=0,y_rotation=1..2,type=creeper,tag=t]'

def test_negated_criteria():
  assert Selector.E(type=(Entity.ZOMBIE,False),limit=1,sort='nearest').expression() == '@e[limit=1,sort=nearest,type=!zombie]'
  assert Selector.A(gamemode=('creative',False)).expression() == '@a[gamemode=!creative]'
  assert Selector.S(tag=('busy',False)).expression() == '@s[tag=!busy]'

@pytest.mark.parametrize('level,expected',[
  (3,'@a[level=3]'),
  ((10,None),'@a[level=10..]'),
  ((None,5),'@a[level=..5]'),
  ((1,5),'@a[level=1..5]'),
])
def test_level_range(level:object,expected:str):
  assert Selector.A(level=level).expression() == expected

def test_rotation_range():
  assert Selector.S(x_rotation=(-10,10.5)).expression() == '@s[x_rotation=-10..10.5]'

def test_name_is_quoted_when_needed():
  assert Selector.E(name='foo bar').expression() == '@e[name="foo bar"]'
  assert Selector.E(name='foo').expression() == '@e[name=foo]'

def test_filter_returns_new_selector():
  selector = Selector.A()
  filtered = selector.filter(tag='x')
  assert filtered != selector
  assert selector.expression() == '@a'
  assert filtered.expression() == '@a[tag=x]'
  assert filtered.bare() == Selector.A()
  assert filtered.bare().expression() == '@a'

def test_polarity_is_normalized():
  assert Selector.A(tag='foo') == Selector.A(tag=('foo',True))

def test_kind():
  assert Selector.E().kind is SelectorKind.ALL_ENTITIES
  assert Selector.A().kind is SelectorKind.ALL_PLAYERS

def test_player_selector_must_not_have_type():
  with pytest.raises(ValueError):
    Selector.A(type=Entity.ZOMBIE)

def test_player_name():
  assert Selector.Player('#global').expression() == '#global'
  assert str(Selector.Player('txkodo')) == 'txkodo'
