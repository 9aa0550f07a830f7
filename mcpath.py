from __future__ import annotations
from pathlib import Path
import re
from collections.abc import Iterable

class McPathError(Exception):pass

_part = re.compile(r'[0-9a-z_\.-]+')
_mcpath = re.compile(r'(?:([0-9a-z_\.-]+)\:)?((?:[0-9a-z_\.-]+/)*[0-9a-z_\.-]+)')

class McPath:
  """
  名前空間付きのリソースパス

  `namespace:folder/.../id`

  生成後は変更しない値オブジェクトとして扱う
  """
  default_namespace = 'minecraft'
  _namespace:str
  _parts:tuple[str,...]

  def __init__(self,namespace:str,parts:Iterable[str]) -> None:
    parts = tuple(parts)
    if not namespace or not _part.fullmatch(namespace):
      raise McPathError(f'"{namespace}" is not valid namespace')
    if not parts:
      raise McPathError(f'"{namespace}:" has no id')
    for part in parts:
      if not _part.fullmatch(part):
        raise McPathError(f'"{namespace}:{"/".join(parts)}" is not valid ResourceLocation')
    self._namespace = namespace
    self._parts = parts

  @classmethod
  def parse(cls,mcpath:str|McPath) -> McPath:
    """
    "test:foo/bar" / "foo" (名前空間省略時は minecraft)
    """
    if isinstance(mcpath,McPath):
      return mcpath
    match = _mcpath.fullmatch(mcpath)
    if not match:
      raise McPathError(f'"{mcpath}" is not valid ResourceLocation')
    namespace,path = match.groups()
    return cls(namespace or cls.default_namespace,path.split('/'))

  def __str__(self) -> str:
    return self.str

  def __repr__(self) -> str:
    return f'McPath({self.str!r})'

  def __eq__(self,other:object) -> bool:
    if not isinstance(other,McPath):
      return NotImplemented
    return self._namespace == other._namespace and self._parts == other._parts

  def __hash__(self) -> int:
    return hash((self._namespace,self._parts))

  @property
  def str(self) -> str:
    return self._namespace + ':' + '/'.join(self._parts)

  def __truediv__(self,path:str):
    if not re.fullmatch(r'(?:[0-9a-z_\.-]+/)*[0-9a-z_\.-]+',path):
      raise McPathError(f'"{self.str}/{path}" is not valid ResourceLocation')
    return McPath(self._namespace,self._parts + tuple(path.split('/')))

  @property
  def namespace(self):
    return self._namespace

  @property
  def parts(self):
    return self._parts

  @property
  def folders(self):
    return self._parts[:-1]

  @property
  def id(self):
    return self._parts[-1]

  def path(self,root:Path,folder:str,suffix:str) -> Path:
    """ root/{namespace}/{folder}/{folders...}/{id}{suffix} """
    return Path(root).joinpath(self._namespace,folder,*self.folders,self.id + suffix)

  def function(self,root:Path):
    return self.path(root,'functions','.mcfunction')

  def predicate(self,root:Path):
    return self.path(root,'predicates','.json')

  def item_modifier(self,root:Path):
    return self.path(root,'item_modifiers','.json')
