from __future__ import annotations

from typing import NewType

TableId = NewType("TableId", int)
OrderId = NewType("OrderId", int)

INT16_MIN = -(2**15)
INT16_MAX = 2**15 - 1
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
