"""
Walking recursive variants. Values form trees: each nested value belongs
to exactly one field of its parent, so there is nothing to mark as visited.
"""
from typing import Iterator
from .variant import Variant

def children(value:Variant) -> Iterator[Variant]:
	""" The variant values held directly in the fields of this one, in field order. """
	for item in value.astuple():
		if isinstance(item, Variant): yield item

def walk(value:Variant) -> Iterator[Variant]:
	""" Pre-order: the value itself, then each subtree left to right. """
	stack = [value]
	while stack:
		here = stack.pop()
		yield here
		stack.extend(reversed(list(children(here))))

def depth(value:Variant) -> int:
	""" How many levels of nesting sit below this value. A leaf is zero. """
	deepest, stack = 0, [(value, 0)]
	while stack:
		here, level = stack.pop()
		deepest = max(deepest, level)
		stack.extend((child, level + 1) for child in children(here))
	return deepest

def count(value:Variant) -> int:
	return sum(1 for _ in walk(value))
