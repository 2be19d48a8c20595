"""
Variants backed by raw values: integers that count up by default,
integers given explicitly, and strings that default to the case name.
"""
from enum import auto
from ..raw import IntBacked, TextBacked

class CountedAlignment(IntBacked):
	""" Nothing given, so the raw values are 0, 1, 2, 3. """
	left = auto()
	right = auto()
	center = auto()
	justify = auto()

class TextAlignment(IntBacked):
	left = 20
	right = 30
	center = 40
	justify = 50

class ProgrammingLanguage(TextBacked):
	swift = auto()
	objectiveC = "objective-c"
	c = auto()
	cpp = "c++"
	java = auto()
