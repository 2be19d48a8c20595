"""
A variant that computes things, and "changes" by being replaced.
"""
from ..ontology import Case
from ..variant import Variant
from ..dispatch import Match

BULB_HEAT = 150.0

class Lightbulb(Variant):
	on = Case()
	off = Case()

	def surface_temperature(self, ambient:float) -> float:
		return _surface_temperature(self, ambient)

	def toggled(self) -> "Lightbulb":
		""" The bulb as it is after flipping the switch. Rebind the name to keep it. """
		return _toggle(self)

class SurfaceTemperature(Match, variant=Lightbulb):
	def case_on(self, _, ambient): return ambient + BULB_HEAT
	def case_off(self, _, ambient): return ambient

class Toggle(Match, variant=Lightbulb):
	def case_on(self, _): return Lightbulb.off
	def case_off(self, _): return Lightbulb.on

_surface_temperature = SurfaceTemperature()
_toggle = Toggle()
