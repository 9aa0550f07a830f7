from __future__ import annotations
from collections.abc import Iterable, Sequence
import json
import logging
from pathlib import Path
from typing import Any, Literal

from command import Command, ICommand
from item_modifier import IItemModifier
from mcpath import McPath
from predicate import IPredicate, Predicate
from tagged import to_json

logger = logging.getLogger(__name__)

DocumentFolder = Literal['predicates','item_modifiers']


class Function:
  """
  新規作成するmcfunctionをあらわすクラス

  `Function += Command`でコマンドを追加できる。

  マイクラ上では`function {namespace}:{name}`となる。
  """
  def __init__(self,path:str|McPath,commands:Iterable[ICommand]=()) -> None:
    self.path = McPath.parse(path)
    self.commands:list[ICommand] = list(commands)

  def __iadd__(self,value:ICommand):
    self.append(value)
    return self

  def append(self,command:ICommand):
    self.commands.append(command)

  def extend(self,commands:Iterable[ICommand]):
    for command in commands:
      self.append(command)

  @property
  def expression(self) -> str:
    return self.path.str

  def Call(self) -> ICommand:
    return Command.Function(self.path)

  def export_lines(self) -> list[str]:
    return [command.export() for command in self.commands]


class TextSink:
  """
  1行ずつ追記するテキストファイル

  with を抜けたときにまとめて書き出す
  """
  def __init__(self,datapack:Datapack,path:Path) -> None:
    self.datapack = datapack
    self.path = path
    self.lines:list[str] = []

  def append(self,line:str):
    _check_line(line)
    self.lines.append(line)

  def close(self):
    self.datapack._write(self.path,''.join(line + '\n' for line in self.lines))

  def __enter__(self):
    return self

  def __exit__(self,exc_type:Any,exc:Any,tb:Any):
    if exc_type is None:
      self.close()


class DocumentSink:
  """
  jsonの値を1つだけ書き込むファイル
  """
  def __init__(self,datapack:Datapack,path:Path) -> None:
    self.datapack = datapack
    self.path = path
    self.written = False

  def write(self,value:Any):
    if self.written:
      raise ValueError(f'{self.path} is already written')
    self.datapack._write(self.path,json.dumps(to_json(value)))
    self.written = True

  def __enter__(self):
    return self

  def __exit__(self,exc_type:Any,exc:Any,tb:Any):
    pass


class Datapack:
  """
  データパック出力時の設定

  attrs
  ---
  pack_format:
    pack.mcmetaのpack_format

  description:
    データパックの説明 (pack.mcmetaのdescriptionの内容)

  manifest:
    前回出力したファイルの一覧 再出力時にこれらを削除する
  """
  pack_format = 7
  description = 'Pack generated with Copper'
  manifest = 'copper.txt'

  def __init__(self,path:str|Path,description:str|None=None,pack_format:int|None=None) -> None:
    """
    path: Path
      データパックのパス ...\\saves\\\\{world_name}\\datapacks\\\\{datapack_name}
    """
    self.path = Path(path)
    if description is not None: self.description = description
    if pack_format is not None: self.pack_format = pack_format
    self.functions:dict[McPath,Function] = {}
    self.predicates:dict[McPath,IPredicate|Sequence[IPredicate]] = {}
    self.item_modifiers:dict[McPath,IItemModifier|Sequence[IItemModifier]] = {}
    self.created_paths:list[Path] = []

  @property
  def data(self) -> Path:
    return self.path/'data'

  def function(self,path:str|McPath) -> Function:
    """ 同じパスなら同じ Function を返す """
    path = McPath.parse(path)
    if path not in self.functions:
      self.functions[path] = Function(path)
    return self.functions[path]

  def predicate(self,path:str|McPath,predicate:IPredicate|Sequence[IPredicate]):
    """
    プレディケートを登録して参照用のプレディケートを返す

    リストを渡すと全てを満たす(AND)ファイルになる
    """
    path = McPath.parse(path)
    self._check_unique(path,self.predicates)
    self.predicates[path] = predicate
    return Predicate.Reference(path)

  def item_modifier(self,path:str|McPath,modifier:IItemModifier|Sequence[IItemModifier]):
    """ リストを渡すと順に適用するファイルになる """
    path = McPath.parse(path)
    self._check_unique(path,self.item_modifiers)
    self.item_modifiers[path] = modifier
    return path

  @staticmethod
  def _check_unique(path:McPath,registry:dict[McPath,Any]):
    if path in registry:
      raise ValueError(f'"{path.str}" is already registered')

  def open_text_sink(self,path:str|McPath):
    return TextSink(self,McPath.parse(path).function(self.data))

  def open_document_sink(self,path:str|McPath,folder:DocumentFolder):
    return DocumentSink(self,McPath.parse(path).path(self.data,folder,'.json'))

  def _write(self,path:Path,content:str):
    paths:list[Path] = []
    _path = path
    while not _path.exists():
      paths.append(_path)
      _path = _path.parent
    self.created_paths.extend(reversed(paths))

    path.parent.mkdir(parents=True,exist_ok=True)
    path.write_text(content,encoding='utf8')

  def _clean(self):
    """ 前回出力したファイルと空になったフォルダを削除する """
    manifest = self.path/self.manifest
    if not manifest.exists():
      return
    removed = 0
    for s in reversed(manifest.read_text(encoding='utf8').split('\n')):
      if not s:
        continue
      p = (self.path / s)
      if not p.exists():
        continue
      if p.is_file():
        p.unlink()
        removed += 1
      elif p.is_dir() and not any(p.iterdir()):
        p.rmdir()
    logger.debug(f'removed {removed} files of previous export')

  def _write_manifest(self):
    pathstrs:list[str] = []
    for p in self.created_paths:
      relpath = p.relative_to(self.path)
      pathstrs.append(relpath.as_posix())
    (self.path/self.manifest).write_text('\n'.join(pathstrs),encoding='utf8')

  def export(self):
    """
    データパックを指定パスに出力する

    必ず一番最後に呼ぶこと

    全ての内容を先に文字列化し、失敗した場合は何も変更しない
    書き込み途中で失敗しても、書き込んだファイルはマニフェストに残る
    """
    functions:list[tuple[McPath,list[str]]] = []
    for function in self.functions.values():
      lines = function.export_lines()
      for line in lines:
        _check_line(line)
      functions.append((function.path,lines))
    predicates = [(path,to_json(predicate)) for path,predicate in self.predicates.items()]
    item_modifiers = [(path,to_json(modifier)) for path,modifier in self.item_modifiers.items()]

    self._clean()
    self.created_paths = []

    if not self.path.exists():
      self.path.mkdir(parents=True)

    try:
      mcmeta = {'pack':{'pack_format':self.pack_format,'description':self.description}}
      self._write(self.path/'pack.mcmeta',json.dumps(mcmeta,indent=2))

      for path,lines in functions:
        with self.open_text_sink(path) as sink:
          for line in lines:
            sink.append(line)

      for path,value in predicates:
        with self.open_document_sink(path,'predicates') as sink:
          sink.write(value)

      for path,value in item_modifiers:
        with self.open_document_sink(path,'item_modifiers') as sink:
          sink.write(value)
    finally:
      self._write_manifest()

    logger.info(
      f'exported {self.path} '
      f'({len(self.functions)} functions, {len(self.predicates)} predicates, {len(self.item_modifiers)} item modifiers)'
      )


def _check_line(line:str):
  if '\n' in line:
    raise ValueError(f'{line!r} contains a line break')
