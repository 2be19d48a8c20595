"""
Spell out a variant-type's declaration, for the tour and for verbose checks.
"""
from boozetools.support.foundation import Visitor
from .ontology import Case

class KindName(Visitor):
	def visit_type(self, kind:type):
		return kind.__name__

	def visit_EnumType(self, kind:type):
		return kind.__name__

	def visit_str(self, name:str):
		return name + "?"  # Not resolved yet.

	def visit_SelfReference(self, _):
		return "SELF"

_kind_name = KindName()

def case_signature(case:Case) -> str:
	prefix = "indirect " if case.indirect else ""
	if not case.fields: return prefix + case.name
	fields = ", ".join("%s:%s" % (f.name, _kind_name.visit(f.kind or f.declared)) for f in case.fields)
	return "%s%s(%s)" % (prefix, case.name, fields)

def signature(variant:type) -> str:
	""" E.g. "ShapeDimensions is case point | square(side:float) | ..." """
	alternatives = " | ".join(case_signature(case) for case in variant.cases())
	return "%s is case %s" % (variant.__name__, alternatives)
