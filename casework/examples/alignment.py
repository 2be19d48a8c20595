"""
The plainest variant: a closed set of cases with nothing attached.
"""
from ..ontology import Case
from ..variant import Variant
from ..dispatch import Match

class TextAlignment(Variant):
	left = Case()
	right = Case()
	center = Case()
	justify = Case()

class Describe(Match, variant=TextAlignment):
	def case_left(self, _): return "left aligned"
	def case_right(self, _): return "right aligned"
	def case_center(self, _): return "center aligned"
	def case_justify(self, _): return "justified"

describe = Describe()
