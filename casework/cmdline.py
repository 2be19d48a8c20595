"""
This is a guided tour of tagged variants: plain cases, raw values,
methods, associated data, and recursive variants.

{0}

For example:

    casework all

will narrate every chapter, while

    casework --check

will verify every example declaration and case-analysis without narrating.

    casework -h

will explain all the arguments.
"""
import sys, argparse

CHAPTER_NAMES = ["alignment", "raw", "methods", "shapes", "family"]

parser = argparse.ArgumentParser(
	prog="casework",
	description="A guided tour of tagged variants and exhaustive case analysis.",
)
parser.add_argument("chapter", nargs="*", help="any of %s, or 'all'." % ", ".join(CHAPTER_NAMES))
parser.add_argument('-c', "--check", action="count", help="Check the examples (verbosely if repeated) but do not narrate.")

def run(args):
	from .diagnostics import Report, TooManyIssues
	from .resolution import Yuck, check_everything
	unknown = [c for c in args.chapter if c not in CHAPTER_NAMES and c != "all"]
	if unknown:
		parser.error("no such chapter: %s" % ", ".join(unknown))
	report = Report(verbose=(args.check or 0) > 1)
	try:
		from .tour import run_tour
		check_everything(report)
		if report.sick():
			report.complain_to_console()
			return 1
	except Yuck as ex:
		ex.report.complain_to_console()
		return 1
	except TooManyIssues:
		report.complain_to_console()
		print(" *"*35, file=sys.stderr)
		print("Giving up after a few issues. One crisis at a time, eh?", file=sys.stderr)
		return 1
	if args.check:
		print("Looks plausible to me.", file=sys.stderr)
		return 0
	if "all" in args.chapter or not args.chapter:
		chapters = CHAPTER_NAMES
	else:
		chapters = args.chapter
	run_tour(chapters, sys.stdout)
	return 0

def main():
	if len(sys.argv) > 1:
		exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))
