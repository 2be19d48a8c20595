"""
Case analysis with the exhaustiveness check up front.

Subclass Match, name the variant-type in the class statement, and write one
`case_<name>` method per case. Each gets the subject value followed by
whatever arguments the caller passed along:

	class Area(Match, variant=ShapeDimensions):
		def case_point(self, shape): return 0
		def case_square(self, shape): return shape.side * shape.side
		...

If some case is missing and there is no `otherwise` method, the class
statement itself fails. Likewise for a clause naming a case that does not
exist, or an `otherwise` that could never run.
"""
from enum import Enum

from .ontology import Site
from .resolution import build_match_dispatch

PREFIX = "case_"
OTHERWISE = "otherwise"

class Match:
	variant = None
	dispatch: dict[str, str] = {}  # case name -> attribute name
	_site: Site

	def __init_subclass__(cls, *, variant=None, **kwargs):
		super().__init_subclass__(**kwargs)
		cls._site = Site.of_caller()
		if variant is None: return  # A mix-in of clauses; the concrete subclass gets checked.
		clauses = {}
		for klass in reversed(cls.__mro__):
			for attribute, fn in vars(klass).items():
				if attribute.startswith(PREFIX):
					clauses[attribute[len(PREFIX):]] = getattr(fn, "__func__", fn)
		otherwise = getattr(cls, OTHERWISE, None)
		table = build_match_dispatch(cls, variant, clauses, getattr(otherwise, "__func__", otherwise))
		cls.variant = variant
		cls.dispatch = {name: PREFIX+name for name in table}

	def __call__(self, subject, *args, **kwargs):
		variant = self.variant
		if variant is None:
			raise TypeError("%s has no variant-type to analyze." % type(self).__name__)
		if not isinstance(subject, variant):
			raise TypeError("%s analyzes %s, not %r" % (type(self).__name__, variant.__name__, subject))
		method = getattr(self, self.dispatch.get(case_name(subject), OTHERWISE))
		return method(subject, *args, **kwargs)

def case_name(subject) -> str:
	if isinstance(subject, Enum): return subject.name
	return subject.tag.name
