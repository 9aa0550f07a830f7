from decimal import Decimal


def float_to_str(f:float|int) -> str:
  """
  数値をコマンド用の最短表記にする

  5.0 -> "5" / 0.5 -> "0.5" / 1e-07 -> "0.0000001"
  """
  if isinstance(f,bool):
    raise TypeError(f'{f!r} is not a number')
  if isinstance(f,int):
    return str(f)
  if f.is_integer():
    return str(int(f))
  return format(Decimal(repr(f)),'f')
