import io
import unittest
from unittest import mock

from casework.diagnostics import Report, TooManyIssues, Pic, Annotation
from casework.ontology import Case, NOWHERE, Site
from casework.variant import Variant
from casework.resolution import Yuck

class Bystander:
	pass

class ReportTests(unittest.TestCase):

	def test_ok_until_an_issue(self):
		report = Report()
		self.assertTrue(report.ok())
		report.not_a_variant(Bystander, 5)
		self.assertTrue(report.sick())
		self.assertEqual(1, len(report.issues))
		report.issues.clear()
		self.assertTrue(report.sick())

	def test_too_many_issues(self):
		report = Report(max_issues=2)
		report.not_a_variant(Bystander, 1)
		with self.assertRaises(TooManyIssues):
			report.not_a_variant(Bystander, 2)

	def test_info_only_when_verbose(self):
		with mock.patch("sys.stderr", new_callable=io.StringIO) as err:
			Report(verbose=0).info("quiet")
			Report(verbose=1).info("loud")
		self.assertEqual("loud\n", err.getvalue())

	def test_pic_groups_annotations_by_file(self):
		here = Site.of_caller(0)
		pic = Pic("Look here.", [Annotation(NOWHERE, "nowhere")], ["That is all."])
		pic.also(here, "and here")
		text = pic.as_text()
		self.assertTrue(text.startswith("Look here.\n"))
		self.assertIn("(somewhere built-in) nowhere", text)
		self.assertIn(str(here.path), text)
		self.assertIn("here = Site.of_caller(0)", text)
		self.assertTrue(text.endswith("That is all."))

	def test_overflowing_declaration_is_still_yuck(self):
		with self.assertRaises(Yuck) as cm:
			class Squatter(Variant):
				tag = Case()
				cases = Case()
				replace = Case()
				as_dict = Case()
		self.assertIsInstance(cm.exception.__cause__, TooManyIssues)
		self.assertEqual(3, len(cm.exception.report.issues))


if __name__ == '__main__':
	unittest.main()
