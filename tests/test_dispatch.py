import io
import unittest
from unittest import mock

from casework.ontology import Case
from casework.variant import Variant
from casework.dispatch import Match
from casework.resolution import Yuck
from casework.examples.raw_values import TextAlignment as RawAlignment

class Weather(Variant):
	sunny = Case()
	rainy = Case(millimeters=float)
	windy = Case(knots=float, gusting=bool)

class Umbrella(Match, variant=Weather):
	def case_sunny(self, _): return False
	def case_rainy(self, w): return w.millimeters > 0
	def case_windy(self, w): return False

class WorthMentioning(Match, variant=Weather):
	def case_sunny(self, _, name): return "%s: lovely" % name
	def otherwise(self, w, name): return "%s: %s" % (name, w.tag.name)

class RainyClause(Match):
	""" No variant named, so not checked yet: a mix-in of clauses. """
	def case_rainy(self, w): return "wet"

class Forecast(RainyClause, variant=Weather):
	@staticmethod
	def case_sunny(_): return "dry"
	def case_windy(self, w): return "gusty" if w.gusting else "breezy"

class MatchTests(unittest.TestCase):

	def test_exhaustive_dispatch(self):
		umbrella = Umbrella()
		self.assertFalse(umbrella(Weather.sunny))
		self.assertTrue(umbrella(Weather.rainy(millimeters=3)))
		self.assertFalse(umbrella(Weather.windy(knots=20, gusting=True)))
		self.assertEqual({"sunny": "case_sunny", "rainy": "case_rainy", "windy": "case_windy"}, Umbrella.dispatch)

	def test_otherwise_takes_the_rest(self):
		mention = WorthMentioning()
		self.assertEqual("Oslo: lovely", mention(Weather.sunny, "Oslo"))
		self.assertEqual("Bergen: rainy", mention(Weather.rainy(10), name="Bergen"))

	def test_clauses_may_be_inherited_and_static(self):
		forecast = Forecast()
		self.assertEqual("wet", forecast(Weather.rainy(1)))
		self.assertEqual("dry", forecast(Weather.sunny))
		self.assertEqual("gusty", forecast(Weather.windy(30, True)))
		self.assertEqual("breezy", forecast(Weather.windy(knots=5, gusting=False)))

	def test_wrong_subject(self):
		with self.assertRaises(TypeError):
			Umbrella()(RawAlignment.left)
		with self.assertRaises(TypeError):
			RainyClause()(Weather.sunny)

	def test_raw_variants_can_be_analyzed(self):
		class Justified(Match, variant=RawAlignment):
			def case_justify(self, _): return True
			def otherwise(self, _): return False
		self.assertEqual([False, False, False, True], [Justified()(a) for a in RawAlignment])

class ExhaustivenessTests(unittest.TestCase):
	""" These class statements must fail where they stand. """

	def test_missing_case(self):
		with self.assertRaises(Yuck) as cm:
			class Forgetful(Match, variant=Weather):
				def case_sunny(self, _): return 1
				def case_rainy(self, _): return 2
		pic = cm.exception.report.issues[0]
		self.assertIn("does not cover all the cases", pic.description)
		self.assertIn("windy", pic.as_text())

	def test_missing_case_of_a_raw_variant(self):
		with self.assertRaises(Yuck):
			class Lopsided(Match, variant=RawAlignment):
				def case_left(self, _): return 1
				def case_right(self, _): return 2

	def test_redundant_otherwise(self):
		with self.assertRaises(Yuck) as cm:
			class Belt(Umbrella, variant=Weather):
				def otherwise(self, _): return None
		self.assertIn("extra otherwise", cm.exception.report.issues[0].description)

	def test_not_a_case(self):
		with self.assertRaises(Yuck) as cm:
			class Typo(Match, variant=Weather):
				def case_sunny(self, _): return 1
				def case_rainey(self, _): return 2
				def otherwise(self, _): return 3
		self.assertIn("'rainey' is not a case", cm.exception.report.issues[0].description)

	def test_not_a_variant(self):
		for thing in [int, "Weather", Weather.sunny]:
			with self.subTest(thing=thing):
				with self.assertRaises(Yuck):
					class Confused(Match, variant=thing):
						def otherwise(self, x): return x

	def test_complaint_goes_to_stderr(self):
		with self.assertRaises(Yuck) as cm:
			class Lazy(Match, variant=Weather):
				pass
		with mock.patch("sys.stderr", new_callable=io.StringIO) as err:
			cm.exception.report.complain_to_console()
		text = err.getvalue()
		self.assertIn("<ExhaustivenessTests.test_complaint_goes_to_stderr.<locals>.Lazy>", text)
		self.assertIn("Missing: sunny, rainy, windy", text)
		self.assertIn("class Lazy(Match, variant=Weather):", text)


if __name__ == '__main__':
	unittest.main()
