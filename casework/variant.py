"""
Tagged values. A subclass of Variant declares its cases as class attributes:

	class ShapeDimensions(Variant):
		point = Case()
		square = Case(side=float)

After the class statement, `ShapeDimensions.point` is the one and only
point value, and `ShapeDimensions.square` is a constructor for squares.
Every value knows its case (its tag) and carries exactly the fields its
case declares. Values are immutable and compare by case and contents.
"""
from typing import Any

from .ontology import Case, Box, Site
from .resolution import declare_variant, insist_resolved

def _admits(kind:type, value) -> bool:
	if kind is float: return isinstance(value, (int, float)) and not isinstance(value, bool)
	if kind is int: return isinstance(value, int) and not isinstance(value, bool)
	return isinstance(value, kind)

def _bind(case:Case, args:tuple, kwargs:dict) -> tuple:
	names = case.field_names()
	if len(args) > len(names):
		raise TypeError("<%s> takes %d field(s) but %d were given" % (case.name, len(names), len(args)))
	given = dict(zip(names, args))
	for key, value in kwargs.items():
		if key not in case.index:
			raise TypeError("<%s> has no field called '%s'" % (case.name, key))
		if key in given:
			raise TypeError("<%s> got two values for field '%s'" % (case.name, key))
		given[key] = value
	missing = [name for name in names if name not in given]
	if missing:
		raise TypeError("<%s> is missing field(s): %s" % (case.name, ", ".join(missing)))
	payload = []
	for field in case.fields:
		value = given[field.name]
		if not _admits(field.kind, value):
			pattern = "Field '%s' of <%s> must be %s, not %r"
			raise TypeError(pattern % (field.name, case.name, field.kind.__name__, value))
		payload.append(float(value) if field.kind is float else value)
	return tuple(payload)

class Constructor:
	""" The run-time manifestation of a case with fields: call it with those fields to make a value. """
	def __init__(self, variant:type, case:Case):
		self.variant = variant
		self.case = case

	def __repr__(self):
		return "<constructor %s.%s>" % (self.variant.__name__, self.case.name)

	def __call__(self, *args, **kwargs):
		insist_resolved(self.variant)
		return self.variant._make(self.case, _bind(self.case, args, kwargs))


class _CaseBook(dict):
	""" The namespace of a variant's class body. Notices when a case gets assigned over. """
	def __init__(self):
		super().__init__()
		self.repeats = {}

	def __setitem__(self, key, value):
		earlier = self.get(key)
		if isinstance(earlier, Case):
			self.repeats.setdefault(key, [earlier.site]).append(Site.of_caller())
		super().__setitem__(key, value)

class VariantType(type):
	""" Watches the class body for a case name assigned twice, the way Enum watches for reused member names. """
	@classmethod
	def __prepare__(mcs, name, bases, **kwargs):
		return _CaseBook()

	def __new__(mcs, name, bases, namespace, **kwargs):
		extra = {"_site": Site.of_caller(), "_repeats": getattr(namespace, "repeats", {})}
		return super().__new__(mcs, name, bases, {**namespace, **extra}, **kwargs)

def _rebuild(variant:type, name:str, fields:tuple) -> "Variant":
	""" The other half of Variant.__reduce__, so copy and pickle work. """
	case = variant._cases[name]
	if not case.fields: return getattr(variant, name)
	return variant._make(case, fields)


class Variant(metaclass=VariantType):
	"""
	Base class for variant-types. Subclasses never get instantiated directly;
	values come from the cases. Pass `indirect=True` in the class statement to
	make every case store its payload through a Box.
	"""
	__slots__ = ("_tag", "_payload")
	_cases: dict[str, Case] = {}
	_site: Site

	def __init_subclass__(cls, *, indirect:bool=False, **kwargs):
		super().__init_subclass__(**kwargs)
		cls._cases = {name: case for name, case in vars(cls).items() if isinstance(case, Case)}
		for case in cls._cases.values():
			case.variant = cls
			case.indirect = case.indirect or indirect
		declare_variant(cls, cls._site, vars(cls).get("_repeats", {}))
		for name, case in cls._cases.items():
			if case.fields: setattr(cls, name, Constructor(cls, case))
			else: setattr(cls, name, cls._make(case, ()))

	def __new__(cls, *args, **kwargs):
		raise TypeError("%s values come from its cases, e.g. %s" % (cls.__name__, _example_spelling(cls)))

	def __reduce__(self):
		return _rebuild, (type(self), self._tag.name, self.astuple())

	@classmethod
	def _make(cls, case:Case, payload:tuple) -> "Variant":
		self = object.__new__(cls)
		object.__setattr__(self, "_tag", case)
		object.__setattr__(self, "_payload", Box(payload) if case.indirect else payload)
		return self

	@classmethod
	def cases(cls) -> list[Case]:
		return list(cls._cases.values())

	@property
	def tag(self) -> Case:
		return self._tag

	def astuple(self) -> tuple:
		""" The field values, in declaration order, fetched through the box if need be. """
		payload = self._payload
		return payload.content if isinstance(payload, Box) else payload

	def as_dict(self) -> dict[str, Any]:
		return dict(zip(self._tag.field_names(), self.astuple()))

	def replace(self, **changes) -> "Variant":
		""" A new value of the same case, with some fields changed. This one stays as it is. """
		if not changes: return self
		return Constructor(type(self), self._tag)(**{**self.as_dict(), **changes})

	def __getattr__(self, name):
		if name.startswith("_"): raise AttributeError(name)
		try: index = self._tag.index[name]
		except KeyError:
			raise AttributeError("Case <%s> has no field '%s'" % (self._tag.name, name)) from None
		return self.astuple()[index]

	def __setattr__(self, name, value):
		raise AttributeError("%s values are immutable; make a new one instead." % type(self).__name__)

	def __delattr__(self, name):
		raise AttributeError("%s values are immutable." % type(self).__name__)

	def __eq__(self, other):
		if not isinstance(other, Variant): return NotImplemented
		return type(self) is type(other) and self._tag is other._tag and self.astuple() == other.astuple()

	def __hash__(self):
		return hash((type(self).__name__, self._tag.name, self.astuple()))

	def __repr__(self):
		head = "%s.%s" % (type(self).__name__, self._tag.name)
		if not self._tag.fields: return head
		inside = ", ".join("%s=%r" % pair for pair in self.as_dict().items())
		return "%s(%s)" % (head, inside)

def _example_spelling(cls) -> str:
	if not cls._cases: return "(none declared)"
	case = next(iter(cls._cases.values()))
	if case.fields: return "%s.%s(%s)" % (cls.__name__, case.name, ", ".join(case.field_names()))
	return "%s.%s" % (cls.__name__, case.name)
