"""
Everything that happens when a class statement declares a variant or a
case-analysis: resolve the kinds of the fields, insist that recursion goes
through an indirection, and build exhaustive dispatch tables.

Problems go into a Report, and then the class statement fails with Yuck.
That way a malformed declaration never survives import.
"""
from enum import Enum
from typing import Callable, Iterable, Optional

from boozetools.support.foundation import Visitor, strongly_connected_components_hashable
from .diagnostics import Report, TooManyIssues
from .ontology import Case, Field, SelfReference, Site
from . import space

SCALARS = (int, float, str, bool)

class Yuck(Exception):
	"""
	The first argument will be the name of the pass fraught with error.
	The end-user might not care about this, but it's handy for testing.
	"""
	def __init__(self, phase:str, report:Optional[Report]=None):
		super().__init__(phase)
		self.report = report

def _fail_if_sick(report:Report, phase:str):
	if report.sick():
		report.info("Trouble while", phase)
		raise Yuck(phase, report)

class _Phase:
	""" Turn report overflow into the same failure as any other sick report. """
	def __init__(self, report:Report, phase:str):
		self.report, self.phase = report, phase
	def __enter__(self): return self.report
	def __exit__(self, exc_type, exc, tb):
		if exc_type is TooManyIssues:
			raise Yuck(self.phase, self.report) from exc
		if exc_type is None:
			_fail_if_sick(self.report, self.phase)

###############################################################################

class FieldKindResolver(Visitor):
	"""
	Work out the concrete kind of each field, or leave it unresolved if it
	names a variant not declared yet. Reports what cannot possibly work.
	"""
	def __init__(self, variant:type, report:Report):
		self._variant = variant
		self._roster = space.roster_for(variant.__module__)
		self._report = report

	def resolve_case(self, case:Case):
		for field in case.fields:
			if field.is_resolved(): continue
			if isinstance(field.declared, (type, str, SelfReference)):
				field.kind = self.visit(field.declared, case, field)
			else:
				self._report.unknown_field_type(case, field)

	def visit_SelfReference(self, _, case:Case, field:Field):
		return self._variant

	def visit_str(self, name:str, case:Case, field:Field):
		if name == self._variant.__name__: return self._variant
		return self._roster.lookup(name)

	def visit_type(self, kind:type, case:Case, field:Field):
		from .variant import Variant
		if kind in SCALARS or issubclass(kind, Variant): return kind
		self._report.unknown_field_type(case, field)

	def visit_EnumType(self, kind:type, case:Case, field:Field):
		return kind

def resolve_kinds(variants:Iterable[type], report:Report) -> list[type]:
	""" Returns the variants that are now completely resolved. """
	done = []
	for variant in variants:
		resolver = FieldKindResolver(variant, report)
		for case in variant._cases.values():
			resolver.resolve_case(case)
		if all(case.is_resolved() for case in variant._cases.values()):
			done.append(variant)
	return done

###############################################################################

def _inline_edges(variant:type) -> dict[type, list[Case]]:
	""" Which variants this one holds inline, and by way of which cases. """
	from .variant import Variant
	edges = {}
	for case in variant._cases.values():
		if case.indirect: continue
		for field in case.fields:
			kind = field.kind
			if isinstance(kind, type) and issubclass(kind, Variant):
				edges.setdefault(kind, []).append(case)
	return edges

def check_well_founded(fresh:list[type], report:Report):
	"""
	A variant may only contain itself (however circuitously) through a case
	marked indirect. Otherwise the size of a value would be unbounded.
	"""
	graph, todo = {}, list(fresh)
	while todo:
		variant = todo.pop()
		if variant in graph: continue
		graph[variant] = _inline_edges(variant)
		todo.extend(graph[variant])
	for scc in strongly_connected_components_hashable({v: list(e) for v, e in graph.items()}):
		if not any(v in fresh for v in scc): continue
		if len(scc) == 1 and scc[0] not in graph[scc[0]]: continue
		members = set(scc)
		guilty = [case for v in scc for w, cases in graph[v].items() if w in members for case in cases]
		report.not_indirect(scc, guilty)

###############################################################################

_pending: list[type] = []

def _forget(variant:type, fresh:list[type]):
	""" Undo the parts of a declaration that failed, so nothing refers to it. """
	space.roster_for(variant.__module__).release(variant.__name__)
	if variant in _pending: _pending.remove(variant)
	for other in fresh:
		if other is variant: continue
		for case in other._cases.values():
			for field in case.fields:
				if field.kind is variant: field.kind = None
		_pending.append(other)

def _spoken_for(owner:type, name:str) -> bool:
	""" Would a value of `owner` find something by this name before looking at its fields? """
	return name.startswith("_") or any(name in vars(k) for k in owner.__mro__)

def declare_variant(variant:type, site:Site, repeats:dict[str, list[Site]]):
	"""
	The Variant base class calls this for every subclass it sees declared.
	Case names must not shadow what every variant has. Field names must not
	shadow anything on this variant either, or the field would be unreachable.
	"""
	from .variant import Variant
	roster = space.roster_for(variant.__module__)
	cases = list(variant._cases.values())
	with _Phase(Report(), "declaring variant %s" % variant.__qualname__) as report:
		for name, sites in repeats.items():
			report.duplicate_case(variant, name, sites)
		for case in cases:
			if _spoken_for(Variant, case.name):
				report.reserved_name(case.site, case.name, variant)
			for name in case.field_names():
				if _spoken_for(variant, name):
					report.reserved_name(case.site, name, variant)
		if not cases:
			report.no_cases(variant)
		if report.sick(): return
		try: roster.claim(variant.__name__, site, variant)
		except space.AlreadyExists as ex:
			report.redefined(variant.__name__, ex.site, site)
			return
		_pending.append(variant)
		fresh = []
		try:
			fresh = resolve_kinds(list(_pending), report)
			for v in fresh: _pending.remove(v)
			check_well_founded(fresh, report)
		finally:
			if report.sick(): _forget(variant, fresh)

def _unresolved(variant:type, report:Report):
	for case in variant._cases.values():
		for field in case.fields:
			if not field.is_resolved():
				report.undefined_name(case, field)

def insist_resolved(variant:type):
	""" Called before building a value: forward references must have landed by now. """
	if variant not in _pending: return
	with _Phase(Report(), "resolving names in %s" % variant.__qualname__) as report:
		_unresolved(variant, report)

def check_everything(report:Report, package:str="casework"):
	""" For the command-line: complain about any forward reference in the package never resolved. """
	def ours(variant): return variant.__module__.split(".")[0] == package
	for variant in filter(ours, _pending):
		_unresolved(variant, report)
	for roster in space.every_roster():
		for variant in filter(ours, roster.variants()):
			report.info("Declared", variant.__module__ + "." + variant.__qualname__)

###############################################################################

def case_names(variant) -> Optional[list[str]]:
	from .variant import Variant
	if isinstance(variant, type):
		if issubclass(variant, Variant): return list(variant._cases)
		if issubclass(variant, Enum): return [member.name for member in variant]
	return None

def build_match_dispatch(match_cls:type, variant, clauses:dict[str, Callable], otherwise:Optional[Callable]) -> dict[str, Callable]:
	with _Phase(Report(), "checking case-analysis %s" % match_cls.__qualname__) as report:
		names = case_names(variant)
		if names is None:
			report.not_a_variant(match_cls, variant)
			return {}
		dispatch = {}
		for name, fn in clauses.items():
			if name in names: dispatch[name] = fn
			else: report.not_a_case_of(Site.of_function(fn), name, variant)
		exhaustive = len(dispatch) == len(names)
		if exhaustive and otherwise: report.redundant_else(match_cls, Site.of_function(otherwise))
		if not (exhaustive or otherwise): report.not_exhaustive(match_cls, variant, [n for n in names if n not in dispatch])
		return dispatch

###############################################################################

def check_raw_values(variant:type, kind:type, site:Site):
	with _Phase(Report(), "checking raw values of %s" % variant.__qualname__) as report:
		by_raw = {}
		for name, member in variant.__members__.items():
			raw = member.value
			if not isinstance(raw, kind) or isinstance(raw, bool):
				report.wrong_raw_kind(site, variant, name, raw, kind)
			by_raw.setdefault(raw, []).append(name)
		for raw, names in by_raw.items():
			if len(names) > 1:
				report.duplicate_raw(site, variant, raw, names)
