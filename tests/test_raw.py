import unittest
from enum import auto

from casework.raw import IntBacked, TextBacked, to_raw, from_raw
from casework.resolution import Yuck
from casework.examples.raw_values import CountedAlignment, TextAlignment, ProgrammingLanguage

class RawValueTests(unittest.TestCase):

	def test_round_trip(self):
		for variant in (CountedAlignment, TextAlignment, ProgrammingLanguage):
			for case in variant:
				with self.subTest(case=case):
					self.assertIs(case, from_raw(variant, to_raw(case)))
					self.assertIs(case, variant.from_raw(case.raw))

	def test_counted_defaults_start_at_zero(self):
		self.assertEqual([0, 1, 2, 3], [case.raw for case in CountedAlignment])

	def test_counting_continues_from_an_explicit_base(self):
		class Floor(IntBacked):
			lobby = 10
			mezzanine = auto()
			roof = auto()
		self.assertEqual([10, 11, 12], [case.raw for case in Floor])

	def test_explicit_integers(self):
		self.assertIs(TextAlignment.left, TextAlignment.from_raw(20))
		self.assertEqual(50, TextAlignment.justify.raw)

	def test_text_defaults_to_the_case_name(self):
		self.assertEqual("swift", ProgrammingLanguage.swift.raw)
		self.assertEqual("objective-c", ProgrammingLanguage.objectiveC.raw)
		self.assertEqual("c", ProgrammingLanguage.c.raw)
		self.assertEqual("c++", ProgrammingLanguage.cpp.raw)
		self.assertIs(ProgrammingLanguage.java, ProgrammingLanguage.from_raw("java"))

	def test_no_match_is_none(self):
		for variant, value in [
			(TextAlignment, 99),
			(TextAlignment, 0),
			(TextAlignment, "20"),
			(TextAlignment, 20.0),
			(CountedAlignment, True),
			(CountedAlignment, None),
			(ProgrammingLanguage, "objectiveC"),
			(ProgrammingLanguage, "Swift"),
			(ProgrammingLanguage, 1),
		]:
			with self.subTest(variant=variant.__name__, value=value):
				self.assertIsNone(variant.from_raw(value))

	def test_duplicate_raw_values_are_refused(self):
		with self.assertRaises(Yuck) as cm:
			class Echo(IntBacked):
				first = 1
				second = 1
		self.assertIn("share the raw value 1", cm.exception.report.issues[0].description)

	def test_raw_values_must_be_the_right_kind(self):
		with self.assertRaises(Yuck):
			class Muddle(IntBacked):
				one = 1
				two = "2"
		with self.assertRaises(Yuck):
			class Babel(TextBacked):
				hello = "hello"
				number = 7

	def test_every_declaration_is_checked_where_it_stands(self):
		with self.assertRaises(Yuck) as cm:
			class Loose(IntBacked):
				a = 1
				b = "two"
				c = 1
		descriptions = [pic.description for pic in cm.exception.report.issues]
		self.assertEqual(2, len(descriptions))
		self.assertIn("Case 'b' of", descriptions[0])
		self.assertIn("Cases a, c of", descriptions[1])
		self.assertIn("class Loose(IntBacked):", cm.exception.report.issues[0].as_text())

	def test_bases_without_cases_are_left_alone(self):
		class Sturdy(IntBacked):
			@classmethod
			def biggest(cls): return max(case.raw for case in cls)
		class Stout(Sturdy):
			low = auto()
			high = auto()
		self.assertEqual(1, Stout.biggest())


if __name__ == '__main__':
	unittest.main()
