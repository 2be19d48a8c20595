import io
import unittest
from unittest import mock

from casework import cmdline

def _run(*argv):
	with mock.patch("sys.stdout", new_callable=io.StringIO) as out:
		with mock.patch("sys.stderr", new_callable=io.StringIO) as err:
			status = cmdline.run(cmdline.parser.parse_args(list(argv)))
	return status, out.getvalue(), err.getvalue()

class CommandLineTests(unittest.TestCase):

	def test_check(self):
		status, out, err = _run("--check")
		self.assertEqual(0, status)
		self.assertEqual("", out)
		self.assertIn("Looks plausible to me.", err)

	def test_raw_chapter(self):
		status, out, _ = _run("raw")
		self.assertEqual(0, status)
		self.assertIn("left has raw value 0", out)
		self.assertIn("successfully converted 20 into a TextAlignment", out)
		self.assertIn("99 has no corresponding TextAlignment case", out)
		self.assertIn("my favorite programming language is swift", out)

	def test_every_chapter(self):
		status, out, _ = _run("all")
		self.assertEqual(0, status)
		for line in [
			"We should right-align the text.",
			"justified",
			"the bulb's temperature is 227.0",
			"the bulb's temperature is 77.0",
			"square's area = 100.0",
			"rightTriangle's area = 0.0",
			"rectangle's perimeter = 30.0",
			"rightTriangle's perimeter = 9.0",
			"Fred's known ancestors: Fred Sr., Beth, Marsha",
		]:
			with self.subTest(line):
				self.assertIn(line, out)

	def test_unknown_chapter(self):
		with mock.patch("sys.stderr", new_callable=io.StringIO):
			with self.assertRaises(SystemExit):
				_run("enums")

	def test_usage_without_arguments(self):
		with mock.patch("sys.argv", ["casework"]):
			with mock.patch("sys.stdout", new_callable=io.StringIO) as out:
				cmdline.main()
		self.assertIn("usage: casework", out.getvalue())


if __name__ == '__main__':
	unittest.main()
