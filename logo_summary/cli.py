"""
CLI entry points for motif summary rendering.
"""

# Standard Library
import argparse
import json
import pathlib
import time

# local repo modules
import logo_summary as lsum
import logo_summary.config
import logo_summary.logo
import logo_summary.profile
import logo_summary.render
import logo_summary.table_model


SequenceLogo = lsum.logo.SequenceLogo
SummaryTable = lsum.table_model.SummaryTable


#============================================
def build_graphic(entry: dict, scale_by_information: bool) -> SequenceLogo:
	"""
	Build a logo from a JSON graphic entry.

	Args:
		entry: Either {"alphabet", "matrix"} or {"sequence", "profile"}.
		scale_by_information: Scale stacks by information content.

	Returns:
		SequenceLogo.
	"""
	if "profile" in entry:
		sequence = lsum.profile.validate_sequence(entry["sequence"])
		matrix = lsum.profile.profile_to_matrix(entry["profile"], len(sequence))
		return lsum.profile.profile_to_logo(matrix)
	return SequenceLogo(
		alphabet=entry["alphabet"],
		matrix=entry["matrix"],
		scale_by_information=scale_by_information,
	)


#============================================
def load_table(path: pathlib.Path) -> SummaryTable:
	"""
	Load a summary table from a JSON row file.

	Args:
		path: JSON file with a "rows" list.

	Returns:
		Populated SummaryTable.
	"""
	with path.open("r", encoding="utf-8") as handle:
		data = json.load(handle)
	table = SummaryTable()
	for index, entry in enumerate(data["rows"], start=1):
		try:
			table.add_row(
				motif=build_graphic(entry["motif"], True),
				seed=entry["seed"],
				pvalue=entry["pvalue"],
				seed_abundance=entry["seed_abundance"],
				motif_abundance=entry["motif_abundance"],
				trace=build_graphic(entry["trace"], False),
			)
		except KeyError as error:
			raise lsum.table_model.MalformedRowError(f"Row {index} is missing {error}") from error
	return table


#============================================
def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	"""
	Parse command line arguments.

	Args:
		argv: Argument list, defaults to sys.argv.

	Returns:
		Parsed argparse namespace.
	"""
	parser = argparse.ArgumentParser(description="Render a motif summary table to a one-page PDF.")

	io_group = parser.add_argument_group("Input/Output")
	io_group.add_argument("-i", "--input", dest="input_path", required=True, help="JSON row file.")
	io_group.add_argument("-o", "--output", dest="output_path", required=True, help="Output PDF path.")

	behavior_group = parser.add_argument_group("Behavior")
	behavior_group.add_argument("-v", "--verbose", dest="verbose", action="store_true", help="Print progress.")
	behavior_group.add_argument("-q", "--quiet", dest="verbose", action="store_false", help="Suppress progress.")
	parser.set_defaults(verbose=True)

	args = parser.parse_args(argv)
	return args


#============================================
def run_pipeline(args: argparse.Namespace) -> None:
	"""
	Load rows and render the summary PDF.

	Args:
		args: Parsed argparse namespace.
	"""
	input_path = pathlib.Path(args.input_path)
	output_path = pathlib.Path(args.output_path)
	if args.verbose:
		print("Motif summary pipeline")
		print(f"Input rows: {input_path}")
		print(f"Output PDF: {output_path}")

	start_time = time.perf_counter()
	table = load_table(input_path)
	load_end = time.perf_counter()
	if args.verbose:
		print(f"Rows loaded: {len(table)}")

	layout = lsum.render.render_table_to_pdf(
		table,
		output_path,
		style=lsum.config.build_default_style(),
		verbose=args.verbose,
	)
	render_end = time.perf_counter()
	if args.verbose:
		print(f"Canvas: {layout.canvas_width:.1f} x {layout.canvas_height:.1f} pt")
		print(
			"Timing: load={:.2f}s render={:.2f}s".format(
				load_end - start_time,
				render_end - load_end,
			)
		)
		print(f"PDF written: {output_path}")


#============================================
def main(argv: list[str] | None = None) -> None:
	"""
	Main entry point.
	"""
	args = parse_args(argv)
	run_pipeline(args)
