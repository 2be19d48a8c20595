"""
The declaration vocabulary: cases, their fields, and where they came from.

These most-fundamental classes are separate from the rest to avoid
circular-import scenarios. A `Case` is a tag, not a class: the variant
that claims it fills in its name and owner, and the resolver fills in
the concrete kind of each field.
"""
import sys
from pathlib import Path
from typing import NamedTuple, Optional

class Site(NamedTuple):
	""" Aimed at whatever prints error messages """
	path: Optional[Path]
	line: int

	@staticmethod
	def of_caller(depth:int=1) -> "Site":
		""" Where the caller's caller is, give or take `depth` frames. """
		frame = sys._getframe(depth + 1)
		return Site(Path(frame.f_code.co_filename), frame.f_lineno)

	@staticmethod
	def of_function(fn) -> "Site":
		code = getattr(fn, "__code__", None)
		if code is None: return NOWHERE
		return Site(Path(code.co_filename), code.co_firstlineno)

NOWHERE = Site(None, 0)

class SelfReference:
	""" Stands for "the variant being declared" within its own case fields. """
	def __repr__(self): return "SELF"

SELF = SelfReference()

class Field:
	declared: object  # Whatever the author wrote: a type, SELF, or a forward name.
	kind: Optional[type]  # Resolver fills this in.

	def __init__(self, name:str, declared):
		self.name, self.declared = name, declared
		self.kind = None

	def __repr__(self): return "<Field %s:%r>" % (self.name, self.declared)

	def is_resolved(self): return self.kind is not None

class Case:
	"""
	One named alternative of a variant-type. Keyword arguments declare the
	associated fields, in order, as `name=kind`. A case with no fields is a
	plain tag and its variant makes a single value of it.
	"""
	name: str  # Variant fills this in.
	variant: type  # Also this.

	def __init__(self, *, indirect:bool=False, **fields):
		self.site = Site.of_caller()
		self.indirect = indirect
		self.fields = tuple(Field(name, declared) for name, declared in fields.items())
		self.index = {f.name: i for i, f in enumerate(self.fields)}
		self.name = None

	def __set_name__(self, owner, name):
		self.name = name

	def __repr__(self): return "<%s>" % self.name

	def field_names(self):
		return [f.name for f in self.fields]

	def is_resolved(self):
		return all(f.is_resolved() for f in self.fields)

class Box(NamedTuple):
	"""
	The indirection for a recursive case: the payload lives here,
	and the value holds only a reference to the box.
	"""
	content: tuple
