"""
Cases with associated data: each shape carries just the dimensions it needs.

A right triangle's area would need to know which two sides meet at the
right angle. The declaration does not say, so its area is taken to be zero.
"""
from ..ontology import Case
from ..variant import Variant
from ..dispatch import Match

UNDEFINED_AREA = 0.0

class ShapeDimensions(Variant):
	point = Case()  # dimensionless
	square = Case(side=float)
	rectangle = Case(width=float, height=float)
	right_triangle = Case(side1=float, side2=float, side3=float)

	def area(self) -> float:
		return _area(self)

	def perimeter(self) -> float:
		return _perimeter(self)

class Area(Match, variant=ShapeDimensions):
	def case_point(self, _): return 0.0
	def case_square(self, shape): return shape.side * shape.side
	def case_rectangle(self, shape): return shape.width * shape.height
	def case_right_triangle(self, _): return UNDEFINED_AREA

class Perimeter(Match, variant=ShapeDimensions):
	def case_point(self, _): return 0.0
	def case_square(self, shape): return shape.side * 4
	def case_rectangle(self, shape): return (2 * shape.width) + (2 * shape.height)
	def case_right_triangle(self, shape): return shape.side1 + shape.side2 + shape.side3

_area = Area()
_perimeter = Perimeter()
