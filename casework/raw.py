"""
Raw-backed variants: each case stands for one scalar, and back again.

Python's Enum already is a closed set of named cases with values attached,
so raw-backed variants are enums with two extra manners:

* A case with no explicit value gets a default: integer-backed cases count
  up by one from the case before (starting at zero), and text-backed cases
  use their own name, exactly as spelled.
* Converting a raw value back to a case never raises. No match means None.

Every declaration is checked as its class statement runs: no two cases may
share a raw value, and every raw value must be of the proper kind.
"""
from enum import Enum, EnumType
from typing import Optional, Union

from .ontology import Site
from .resolution import check_raw_values

Scalar = Union[int, str]

class RawType(EnumType):
	""" Checks the raw values of each enum that actually has cases. """
	def __new__(metacls, name, bases, classdict, **kwargs):
		site = Site.of_caller()
		enum_class = super().__new__(metacls, name, bases, classdict, **kwargs)
		if enum_class.__members__:
			check_raw_values(enum_class, enum_class.raw_kind(), site)
		return enum_class

class RawBacked(Enum, metaclass=RawType):

	@staticmethod
	def raw_kind() -> type:
		raise NotImplementedError

	@property
	def raw(self) -> Scalar:
		return self.value

	@classmethod
	def from_raw(cls, value) -> Optional["RawBacked"]:
		kind = cls.raw_kind()
		if not isinstance(value, kind) or isinstance(value, bool):
			return None
		try: return cls(value)
		except ValueError: return None

class IntBacked(RawBacked):
	@staticmethod
	def _generate_next_value_(name, start, count, last_values):
		return last_values[-1] + 1 if last_values else 0

	@staticmethod
	def raw_kind() -> type: return int

class TextBacked(RawBacked):
	@staticmethod
	def _generate_next_value_(name, start, count, last_values):
		return name

	@staticmethod
	def raw_kind() -> type: return str

def to_raw(case:RawBacked) -> Scalar:
	return case.raw

def from_raw(cls:type, value) -> Optional[RawBacked]:
	return cls.from_raw(value)
