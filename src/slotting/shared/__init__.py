from __future__ import annotations

from .attributes import AttributeValue, Attributes, as_bool, as_float, as_int, as_str
from .bin_location import BinLocation
from .quantity import Quantity
from .sku_code import SkuCode
from .work_type import WorkType

__all__ = [
    "AttributeValue",
    "Attributes",
    "BinLocation",
    "Quantity",
    "SkuCode",
    "WorkType",
    "as_bool",
    "as_float",
    "as_int",
    "as_str",
]
