"""
判別子付きjsonドキュメントの共通エンコーダ

アイテムモディファイア({"function":...}) とプレディケート({"condition":...}) は
どちらもこのモジュールの規則で出力される

フィールドごとの省略規則は json_field のメタデータで宣言する

- 値が None のフィールドは出力しない
- flag() は False のとき出力しない
- omit_default=True は既定値と等しいとき出力しない
- omit_empty=True は空のとき出力しない
"""
from __future__ import annotations
from abc import ABCMeta, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import MISSING, Field, dataclass, field, fields
from typing import Any, ClassVar, TypeAlias

from mcpath import McPath
from minecraft import ICatalog, canonical_name
from number_provider import INumberProvider, NumberLike


def json_field(
    default:Any=MISSING,
    *,
    key:str|None=None,
    omit_default:bool=False,
    omit_empty:bool=False,
    encoder:Callable[[Any],Any]|None=None,
    kw_only:Any=MISSING
  ) -> Any:
  """
  key:
    jsonでのキー名 (省略時はフィールド名)
  encoder:
    値のjson化を差し替える
  """
  metadata = {'key':key,'omit_default':omit_default,'omit_empty':omit_empty,'encoder':encoder}
  return field(default=default,kw_only=kw_only,metadata=metadata)

def flag(key:str|None=None) -> Any:
  """ False のとき出力しない真偽値 """
  return json_field(False,key=key,omit_default=True)


class IJsonSerializable(metaclass=ABCMeta):
  @abstractmethod
  def export_json(self) -> Any:
    pass

def to_json(value:Any) -> Any:
  match value:
    case bool()|str()|None:
      return value
    case int()|float():
      return value
    case McPath():
      return value.str
    case ICatalog():
      return canonical_name(value)
    case IJsonSerializable()|INumberProvider():
      return value.export_json()
    case Mapping():
      return {json_key(k):to_json(v) for k,v in value.items()}
    case list()|tuple():
      return [to_json(v) for v in value]
  raise TypeError(f'cannot encode {value!r} to json')

def json_key(key:Any) -> str:
  match key:
    case str():
      return key
    case McPath():
      return key.str
    case ICatalog():
      return canonical_name(key)
  raise TypeError(f'cannot use {key!r} as json key')

def _is_omitted(f:Field[Any],value:Any) -> bool:
  if value is None:
    return True
  if f.metadata.get('omit_empty') and not value:
    return True
  if f.metadata.get('omit_default'):
    return value == f.default
  return False

def export_fields(obj:Any) -> dict[str,Any]:
  """ dataclassのフィールドを宣言順に出力する (キーワード専用フィールドは最後) """
  result:dict[str,Any] = {}
  ordered = sorted(fields(obj),key=lambda f:bool(f.kw_only))
  for f in ordered:
    value = getattr(obj,f.name)
    if _is_omitted(f,value):
      continue
    encoder = f.metadata.get('encoder')
    result[f.metadata.get('key') or f.name] = encoder(value) if encoder else to_json(value)
  return result


class IRecord(IJsonSerializable):
  """
  判別子を持たないサブ条件

  未指定(None)のフィールドは条件なしとして出力しない
  """
  def export_json(self) -> dict[str,Any]:
    return export_fields(self)


@dataclass(frozen=True)
class Range(IRecord):
  """ {"min":..,"max":..} 片側のみも可 """
  min:NumberLike|None = None
  max:NumberLike|None = None

OptionalRange:TypeAlias = 'NumberLike|Range'


class ITaggedDocument(IJsonSerializable):
  """
  判別子付きドキュメント

  系統の基底は discriminant でキー名を宣言し、
  各バリアントはそのキー名のクラス引数で外部名を宣言する

  class IItemModifier(ITaggedDocument,discriminant='function'): ...
  class SetCount(IItemModifier,function='set_count'): ...

  外部名を宣言しないバリアントはクラス定義時に TypeError になる
  """
  discriminant_key:ClassVar[str]
  external_name:ClassVar[str]
  variants:ClassVar[list[type[ITaggedDocument]]]

  def __init_subclass__(cls,discriminant:str|None=None,**kwargs:Any) -> None:
    if discriminant is not None:
      cls.discriminant_key = discriminant
      cls.variants = []
      super().__init_subclass__(**kwargs)
      return
    key = getattr(cls,'discriminant_key',None)
    if key is None:
      raise TypeError(f'{cls.__name__} must declare discriminant')
    if key not in kwargs:
      raise TypeError(f'{cls.__name__} must declare its "{key}" name')
    cls.external_name = kwargs.pop(key)
    cls.variants.append(cls)
    super().__init_subclass__(**kwargs)

  def export_json(self) -> dict[str,Any]:
    return {self.discriminant_key:self.external_name,**export_fields(self)}
