"""
A recursive variant. The recursive cases hold their ancestors through an
indirection; without `indirect=True` the declaration is refused.
"""
from ..ontology import Case, SELF
from ..variant import Variant
from ..dispatch import Match
from .. import traversal

class FamilyTree(Variant):
	no_known_parents = Case()
	one_known_parent = Case(name=str, ancestors=SELF, indirect=True)
	two_known_parents = Case(
		father_name=str, father_ancestors=SELF,
		mother_name=str, mother_ancestors=SELF,
		indirect=True,
	)

	def known_names(self) -> list[str]:
		""" Everyone named in the tree: pre-order, father's side before mother's. """
		names, stack = [], [self]
		while stack:
			here = stack.pop()
			if isinstance(here, str): names.append(here)
			else: stack.extend(reversed(_lineage(here)))
		return names

	def generations(self) -> int:
		return traversal.depth(self)

class Lineage(Match, variant=FamilyTree):
	""" One level of a tree: the names and the subtrees, in the order they are read. """
	def case_no_known_parents(self, _):
		return ()
	def case_one_known_parent(self, tree):
		return tree.name, tree.ancestors
	def case_two_known_parents(self, tree):
		return tree.father_name, tree.father_ancestors, tree.mother_name, tree.mother_ancestors

_lineage = Lineage()

def freds_ancestors() -> FamilyTree:
	return FamilyTree.two_known_parents(
		father_name="Fred Sr.",
		father_ancestors=FamilyTree.one_known_parent(name="Beth", ancestors=FamilyTree.no_known_parents),
		mother_name="Marsha",
		mother_ancestors=FamilyTree.no_known_parents,
	)
