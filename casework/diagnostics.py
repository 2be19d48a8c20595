import sys, random, linecache
from typing import Sequence
from boozetools.support.failureprone import illustration

from .ontology import Site, Case, Field

class TooManyIssues(Exception):
	pass

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]

	minced_oaths = [
		'Ack', 'ARGH', 'Blargh', 'Blasted Thing',
		'Confound it', 'Crud', 'Curses', "Crikey",
		'Dag Blammit', 'Dag Nabbit', 'Drat',
		'Fiddlesticks', 'Flaming Flamingos',
		'Gack', 'Good Grief', 'Great Googly Moogly', "Great Scott",
		'SNAP', "Sweet Cheese and Crackers",
		"Infernal Tarnation", 'Jeepers', 'Heavens',
		"Mercy", 'Nuts', 'Rats',
	]

	resignations = [
		'I am undone.',
		'I cannot continue.',
		'I have no idea which case you meant.',
		'I need to ask for help.',
	]

	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

def _name(thing) -> str:
	return getattr(thing, "__qualname__", None) or repr(thing)

def site_of_class(cls) -> Site:
	return getattr(cls, "_site", None) or Site(None, 0)

class Report:
	""" Collects what went wrong while declaring variants and case-analyses. """
	_issues : list["Pic"]

	def __init__(self, *, verbose:int=0, max_issues:int=3):
		self._verbose = verbose or 0
		self._issues = []
		self._max_issues = max_issues

	def ok(self) -> bool: return not self._issues
	def sick(self) -> bool: return not self.ok()

	@property
	def issues(self) -> list["Pic"]: return list(self._issues)

	def issue(self, pic:"Pic"):
		""" File one complaint. At the limit, give up on the whole declaration. """
		self._issues.append(pic)
		if len(self._issues) >= self._max_issues:
			raise TooManyIssues(self)

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def complain_to_console(self):
		""" Every issue so far, illustrated, on stderr. """
		_bemoan(self._issues)

	# Methods the variant declaration calls:

	def redefined(self, name:str, first:Site, guilty:Site):
		intro = "The variant-type <%s> is declared more than once in the same module." % name
		problem = [Annotation(first, "Earliest definition"), Annotation(guilty)]
		self.issue(Pic(intro, problem))

	def duplicate_case(self, variant, name:str, sites:Sequence[Site]):
		intro = "The case '%s' of <%s> is assigned more than once, so only the last one would count." % (name, _name(variant))
		pic = Pic(intro, [Annotation(sites[0], "Earliest definition")])
		for site in sites[1:]:
			pic.also(site, "assigned again")
		self.issue(pic)

	def reserved_name(self, site:Site, name:str, owner):
		pattern = "The name '%s' is already spoken for by <%s> itself."
		intro = pattern % (name, _name(owner))
		footer = ["Case and field names must not shadow the methods and attributes of the variant."]
		self.issue(Pic(intro, [Annotation(site)], footer))

	def no_cases(self, cls):
		intro = "The variant-type <%s> declares no cases at all." % _name(cls)
		self.issue(Pic(intro, [Annotation(site_of_class(cls))]))

	def unknown_field_type(self, case:Case, field:Field):
		pattern = "Field '%s' of case <%s> has kind %r, which is neither a scalar type nor a variant."
		intro = pattern % (field.name, case.name, field.declared)
		self.issue(Pic(intro, [Annotation(case.site)]))

	def undefined_name(self, case:Case, field:Field):
		pattern = "I don't see what '%s' refers to, in field '%s' of case <%s>."
		intro = pattern % (field.declared, field.name, case.name)
		self.issue(Pic(intro, [Annotation(case.site)]))

	def not_indirect(self, scc:Sequence[type], cases:Sequence[Case]):
		intro = "What we have here is a recursive variant-type without indirection."
		problem = [Annotation(c.site, "holds <%s> inline" % _name(c.variant)) for c in cases]
		footer = [
			" - The cycle runs through: " + ", ".join(_name(v) for v in scc),
			"Mark the recursive cases with indirect=True, or the whole variant.",
		]
		self.issue(Pic(intro, problem, footer))

	# Methods the match-checker calls:

	def not_a_variant(self, match_cls, thing):
		intro = "<%s> analyzes %r, but that's not a variant-type." % (_name(match_cls), thing)
		self.issue(Pic(intro, [Annotation(site_of_class(match_cls))]))

	def not_a_case_of(self, site:Site, name:str, variant):
		pattern = "'%s' is not a case of the variant-type <%s>."
		intro = pattern % (name, _name(variant))
		self.issue(Pic(intro, [Annotation(site)]))

	def not_exhaustive(self, match_cls, variant, missing:Sequence[str]):
		pattern = "<%s> does not cover all the cases of <%s> and lacks an otherwise-clause."
		intro = pattern % (_name(match_cls), _name(variant))
		footer = [" - Missing: " + ", ".join(missing)]
		self.issue(Pic(intro, [Annotation(site_of_class(match_cls))], footer))

	def redundant_else(self, match_cls, otherwise:Site):
		intro = "<%s> has an extra otherwise-clause." % _name(match_cls)
		problem = [
			Annotation(site_of_class(match_cls), "covers every case"),
			Annotation(otherwise, "cannot happen"),
		]
		footer = ["That's probably an oversight."]
		self.issue(Pic(intro, problem, footer))

	# Methods the raw-value checker calls:

	def duplicate_raw(self, site:Site, variant, raw, names:Sequence[str]):
		pattern = "Cases %s of <%s> share the raw value %r."
		intro = pattern % (", ".join(names), _name(variant), raw)
		self.issue(Pic(intro, [Annotation(site)]))

	def wrong_raw_kind(self, site:Site, variant, name:str, raw, kind:type):
		pattern = "Case '%s' of <%s> has raw value %r, but its raw values must be %s."
		intro = pattern % (name, _name(variant), raw, kind.__name__)
		self.issue(Pic(intro, [Annotation(site)]))

class Annotation:
	def __init__(self, site:Site, caption:str=""):
		self.path = site.path
		self.line = site.line
		self.caption = caption
	def illustrate(self):
		if self.path is None:
			return "       | (somewhere built-in) " + self.caption
		text = linecache.getline(str(self.path), self.line).rstrip().expandtabs(4)
		stripped = text.lstrip()
		col = len(text) - len(stripped)
		return illustration(text, col, max(len(stripped), 1), prefix='% 6d |' % self.line, caption=self.caption)

class Pic:
	def __init__(self, intro:str, anns:list[Annotation], footer=()):
		self._intro, self._anns, self._footer = intro, anns, footer
	@property
	def description(self): return self._intro
	def also(self, site:Site, caption:str=""): self._anns.append(Annotation(site, caption))
	def as_text(self):
		lines = [self._intro, ""]
		path = None
		for ann in self._anns:
			if ann.path != path:
				path = ann.path
				lines.append(str(path))
			lines.append(ann.illustrate())
		lines.extend(self._footer)
		return '\n'.join(lines)

def _bemoan(issues):
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
