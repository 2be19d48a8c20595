"""
A guided tour of the examples, narrated to the console.
Nothing here computes anything the examples don't already offer.
"""
from .examples import alignment, raw_values, lightbulb, shapes, family
from .render import signature
from . import traversal

def tour_alignment(out):
	alignment_now = alignment.TextAlignment.right
	if alignment_now == alignment.TextAlignment.right:
		print("We should right-align the text.", file=out)
	alignment_now = alignment.TextAlignment.justify
	print(alignment.describe(alignment_now), file=out)

def tour_raw(out):
	for case in raw_values.CountedAlignment:
		print("%s has raw value %d" % (case.name, case.raw), file=out)
	for my_raw_value in (20, 99):
		my_alignment = raw_values.TextAlignment.from_raw(my_raw_value)
		if my_alignment is not None:
			print("successfully converted %d into a TextAlignment" % my_raw_value, file=out)
		else:
			print("%d has no corresponding TextAlignment case" % my_raw_value, file=out)
	my_favorite_language = raw_values.ProgrammingLanguage.swift
	print("my favorite programming language is %s" % my_favorite_language.raw, file=out)

def tour_methods(out):
	bulb = lightbulb.Lightbulb.on
	ambient_temperature = 77.0
	print("the bulb's temperature is %s" % bulb.surface_temperature(ambient_temperature), file=out)
	bulb = bulb.toggled()
	print("the bulb's temperature is %s" % bulb.surface_temperature(ambient_temperature), file=out)

def tour_shapes(out):
	ShapeDimensions = shapes.ShapeDimensions
	print(signature(ShapeDimensions), file=out)
	examples = [
		("square", ShapeDimensions.square(side=10.0)),
		("rectangle", ShapeDimensions.rectangle(width=5.0, height=10.0)),
		("point", ShapeDimensions.point),
		("rightTriangle", ShapeDimensions.right_triangle(side1=2, side2=3, side3=4)),
	]
	for label, shape in examples:
		print("%s's area = %s" % (label, shape.area()), file=out)
	for label, shape in examples:
		print("%s's perimeter = %s" % (label, shape.perimeter()), file=out)

def tour_family(out):
	print(signature(family.FamilyTree), file=out)
	fred = family.freds_ancestors()
	print("Fred's known ancestors: %s" % ", ".join(fred.known_names()), file=out)
	print("That goes back %d generation(s) across %d tree node(s)." % (fred.generations(), traversal.count(fred)), file=out)

CHAPTERS = {
	"alignment": tour_alignment,
	"raw": tour_raw,
	"methods": tour_methods,
	"shapes": tour_shapes,
	"family": tour_family,
}

def run_tour(chapters, out):
	for name in chapters:
		print("== %s ==" % name, file=out)
		CHAPTERS[name](out)
