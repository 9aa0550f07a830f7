from pathlib import Path

import pytest

from mcpath import McPath, McPathError


def test_parse_with_namespace():
  path = McPath.parse('foo:bar/baz')
  assert path.str == 'foo:bar/baz'
  assert path.namespace == 'foo'
  assert path.folders == ('bar',)
  assert path.id == 'baz'

def test_parse_defaults_to_minecraft_namespace():
  assert McPath.parse('chests/simple_dungeon').str == 'minecraft:chests/simple_dungeon'
  assert str(McPath.parse('stone')) == 'minecraft:stone'

def test_parse_returns_same_mcpath():
  path = McPath('a',['b'])
  assert McPath.parse(path) is path

@pytest.mark.parametrize('namespace,parts',[
  ('foo',[]),
  ('',['bar']),
  ('foo',['Bar']),
  ('foo',['bar','']),
  ('foo bar',['baz']),
])
def test_invalid_mcpath(namespace:str,parts:list[str]):
  with pytest.raises(McPathError):
    McPath(namespace,parts)

@pytest.mark.parametrize('text',['foo:','Foo:bar','foo:bar/','foo::bar'])
def test_invalid_parse(text:str):
  with pytest.raises(McPathError):
    McPath.parse(text)

def test_truediv_appends_segments():
  assert McPath.parse('a:b') / 'c/d' == McPath('a',['b','c','d'])
  with pytest.raises(McPathError):
    McPath.parse('a:b') / 'C'

def test_value_semantics():
  assert McPath.parse('foo:bar') == McPath('foo',['bar'])
  assert McPath.parse('foo:bar') != McPath.parse('foo:baz')
  assert len({McPath.parse('foo:bar'),McPath('foo',('bar',))}) == 1

def test_file_paths():
  root = Path('data')
  path = McPath.parse('test:foo/bar')
  assert path.function(root) == Path('data','test','functions','foo','bar.mcfunction')
  assert path.predicate(root) == Path('data','test','predicates','foo','bar.json')
  assert path.item_modifier(root) == Path('data','test','item_modifiers','foo','bar.json')
  assert path.path(root,'loot_tables','.json') == Path('data','test','loot_tables','foo','bar.json')
