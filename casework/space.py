"""
Where declared variants can be found by name.

Forward references are spelled as the name of a variant that may not
exist yet, so each Python module keeps its own roster of variant names.
"""

from typing import Iterable, Optional
from .ontology import Site

class AlreadyExists(KeyError):
	""" Carries the site of the earlier claim on the same name. """
	def __init__(self, name:str, site:Site):
		super().__init__(name)
		self.site = site

class Roster[T]:
	""" One module's declared variants. Each name may be claimed only once. """
	_entries: dict[str, tuple[Site, T]]

	def __init__(self, module_name:str):
		self.module_name = module_name
		self._entries = {}

	def lookup(self, name:str) -> Optional[T]:
		entry = self._entries.get(name)
		return None if entry is None else entry[1]

	def claim(self, name:str, site:Site, variant:T) -> T:
		if name in self._entries:
			raise AlreadyExists(name, self._entries[name][0])
		self._entries[name] = site, variant
		return variant

	def release(self, name:str):
		self._entries.pop(name, None)

	def variants(self) -> Iterable[T]:
		return [variant for _, variant in self._entries.values()]


_rosters: dict[str, Roster] = {}

def roster_for(module_name:str) -> Roster:
	if module_name not in _rosters:
		_rosters[module_name] = Roster(module_name)
	return _rosters[module_name]

def every_roster() -> Iterable[Roster]:
	return list(_rosters.values())
