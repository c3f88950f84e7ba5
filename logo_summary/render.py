"""
Render pass: paint the summary table onto a single PDF page.
"""

# Standard Library
import os
import pathlib

# PIP3 modules
import pypdf
import reportlab.pdfgen.canvas

# local repo modules
import logo_summary as lsum
import logo_summary.config
import logo_summary.layout
import logo_summary.metrics
import logo_summary.table_model


TableStyle = lsum.config.TableStyle
TableLayout = lsum.layout.TableLayout
RowBand = lsum.layout.RowBand
MetricsProvider = lsum.metrics.MetricsProvider
SummaryTable = lsum.table_model.SummaryTable
Column = lsum.table_model.Column
FontRole = lsum.table_model.FontRole
Region = lsum.table_model.Region
COLUMN_SPECS = lsum.table_model.COLUMN_SPECS

SHADE_COLOR = lsum.config.SHADE_COLOR
SHADE_ALPHA = lsum.config.SHADE_ALPHA
SEPARATOR_COLOR = lsum.config.SEPARATOR_COLOR
SEPARATOR_THICKNESS = lsum.config.SEPARATOR_THICKNESS
PROGRESS_BAR_WIDTH = lsum.config.PROGRESS_BAR_WIDTH
PROGRESS_UPDATE_EVERY = lsum.config.PROGRESS_UPDATE_EVERY
SIZE_TOLERANCE = 0.01


class DocumentError(RuntimeError):
	"""
	A written document does not match the computed layout.
	"""


#============================================
def print_progress(prefix: str, current: int, total: int) -> None:
	"""
	Print a simple progress bar.

	Args:
		prefix: Label text.
		current: Current count.
		total: Total count.
	"""
	if total <= 0:
		return
	percent = int(round((current / total) * 100.0))
	filled = int(round(PROGRESS_BAR_WIDTH * percent / 100.0))
	bar = "#" * filled + "-" * (PROGRESS_BAR_WIDTH - filled)
	print(f"{prefix} [{bar}] {current}/{total} ({percent}%)", end="\r")


#============================================
def text_x(layout: TableLayout, column: Column) -> float:
	"""
	Compute the x position of a text run in a column.

	Args:
		layout: Table layout.
		column: Column.

	Returns:
		X position in points.
	"""
	x = layout.column_origins[column]
	if COLUMN_SPECS[column].padded:
		x += layout.style.text_padding
	return x


#============================================
def draw_text_cell(
	pdf: reportlab.pdfgen.canvas.Canvas,
	text: str,
	x: float,
	baseline_y: float,
	font_name: str,
	font_size: float,
) -> None:
	"""
	Draw a single text run.

	Args:
		pdf: ReportLab canvas.
		text: Text to draw.
		x: Text x position.
		baseline_y: Text baseline y position.
		font_name: ReportLab font name.
		font_size: Font size in points.
	"""
	pdf.setFont(font_name, font_size)
	pdf.setFillColorRGB(0.0, 0.0, 0.0)
	pdf.drawString(x, baseline_y, text)


#============================================
def draw_header(
	pdf: reportlab.pdfgen.canvas.Canvas,
	table: SummaryTable,
	layout: TableLayout,
	metrics: MetricsProvider,
) -> None:
	"""
	Draw the header labels and the separator line beneath them.

	Args:
		pdf: ReportLab canvas.
		table: Summary table.
		layout: Table layout.
		metrics: Metrics provider.
	"""
	band = lsum.layout.compute_row_band(layout, 0)
	font_name = metrics.font_name(FontRole.HEADER)
	for column, cell in zip(Column, table.header):
		draw_text_cell(
			pdf,
			cell.text,
			text_x(layout, column),
			band.text_baseline,
			font_name,
			layout.style.font_size,
		)
	draw_separator(pdf, layout, band.bottom)


#============================================
def draw_separator(pdf: reportlab.pdfgen.canvas.Canvas, layout: TableLayout, y: float) -> None:
	"""
	Draw a horizontal line across the table.

	Args:
		pdf: ReportLab canvas.
		layout: Table layout.
		y: Line y position.
	"""
	margin = layout.style.document_margin
	color = lsum.config.parse_hex_color(SEPARATOR_COLOR)
	pdf.setStrokeColorRGB(color[0], color[1], color[2])
	pdf.setLineWidth(SEPARATOR_THICKNESS)
	pdf.line(margin, y, layout.canvas_width - margin, y)


#============================================
def draw_row_background(
	pdf: reportlab.pdfgen.canvas.Canvas,
	layout: TableLayout,
	band: RowBand,
) -> None:
	"""
	Draw the translucent background of a shaded row.

	Args:
		pdf: ReportLab canvas.
		layout: Table layout.
		band: Row band geometry.
	"""
	inset = layout.style.document_margin / 2.0
	color = lsum.config.parse_hex_color(SHADE_COLOR)
	pdf.saveState()
	pdf.setFillColorRGB(color[0], color[1], color[2])
	pdf.setFillAlpha(SHADE_ALPHA)
	pdf.rect(
		inset,
		band.bottom,
		layout.canvas_width - 2.0 * inset,
		band.top - band.bottom,
		stroke=0,
		fill=1,
	)
	pdf.restoreState()


#============================================
def draw_graphic_cell(
	pdf: reportlab.pdfgen.canvas.Canvas,
	handle,
	region: Region,
) -> None:
	"""
	Let a graphic handle paint itself into a region.

	Args:
		pdf: ReportLab canvas.
		handle: Graphic handle.
		region: Destination rectangle.
	"""
	pdf.saveState()
	handle.paint(pdf, region)
	pdf.restoreState()


#============================================
def draw_data_row(
	pdf: reportlab.pdfgen.canvas.Canvas,
	cells: tuple,
	band: RowBand,
	layout: TableLayout,
	metrics: MetricsProvider,
) -> None:
	"""
	Draw one data row, background first.

	Args:
		pdf: ReportLab canvas.
		cells: Row cells in column order.
		band: Row band geometry.
		layout: Table layout.
		metrics: Metrics provider.
	"""
	if band.shaded:
		draw_row_background(pdf, layout, band)
	for column, cell in zip(Column, cells):
		if cell.kind == "graphic":
			width, _height = metrics.measure_graphic(cell.handle)
			region = Region(layout.column_origins[column], band.bottom, width, band.top - band.bottom)
			draw_graphic_cell(pdf, cell.handle, region)
			continue
		draw_text_cell(
			pdf,
			cell.text,
			text_x(layout, column),
			band.text_baseline,
			metrics.font_name(COLUMN_SPECS[column].font_role),
			layout.style.font_size,
		)


#============================================
def render_table(
	pdf: reportlab.pdfgen.canvas.Canvas,
	table: SummaryTable,
	layout: TableLayout,
	metrics: MetricsProvider,
	verbose: bool = False,
) -> None:
	"""
	Paint the header and all data rows.

	Args:
		pdf: ReportLab canvas sized to the layout.
		table: Summary table.
		layout: Layout computed for this table.
		metrics: Metrics provider.
		verbose: Print a progress bar.
	"""
	if layout.data_row_count != len(table):
		raise ValueError("Layout is stale: table changed after layout was computed")
	draw_header(pdf, table, layout, metrics)
	total = len(table)
	for index, row in enumerate(table.rows, start=1):
		band = lsum.layout.compute_row_band(layout, index)
		draw_data_row(pdf, row.cells(), band, layout, metrics)
		if verbose and (index % PROGRESS_UPDATE_EVERY == 0 or index == total):
			print_progress("Rows", index, total)
	if verbose and total > 0:
		print()


#============================================
def verify_document(path: pathlib.Path, width: float, height: float) -> None:
	"""
	Check that a PDF holds exactly one page of the expected size.

	Args:
		path: PDF path.
		width: Expected page width in points.
		height: Expected page height in points.

	Raises:
		DocumentError: If the page count or size does not match.
	"""
	reader = pypdf.PdfReader(str(path))
	if len(reader.pages) != 1:
		raise DocumentError(f"{path} has {len(reader.pages)} pages, expected 1")
	box = reader.pages[0].mediabox
	if abs(float(box.width) - width) > SIZE_TOLERANCE or abs(float(box.height) - height) > SIZE_TOLERANCE:
		raise DocumentError(
			f"{path} page is {float(box.width):.2f}x{float(box.height):.2f}, "
			f"expected {width:.2f}x{height:.2f}"
		)


#============================================
def render_table_to_pdf(
	table: SummaryTable,
	output_path: pathlib.Path,
	style: TableStyle | None = None,
	metrics: MetricsProvider | None = None,
	verbose: bool = False,
) -> TableLayout:
	"""
	Lay out and render a summary table to a one-page PDF.

	The page is written to a temporary file next to the destination and
	only moved into place once it is complete and verified. The destination
	directory must already exist.

	Args:
		table: Summary table.
		output_path: Output PDF path.
		style: Table style, defaults to build_default_style().
		metrics: Metrics provider, built from style when omitted.
		verbose: Print a progress bar.

	Returns:
		TableLayout used for the page.
	"""
	if style is None:
		style = metrics.style if metrics is not None else lsum.config.build_default_style()
	if metrics is None:
		metrics = MetricsProvider(style)
	layout = lsum.layout.compute_layout(table, metrics, style)

	output_path = pathlib.Path(output_path)
	temp_path = output_path.with_name(f".{output_path.name}.tmp")
	try:
		with temp_path.open("wb") as handle:
			pdf = reportlab.pdfgen.canvas.Canvas(
				handle,
				pagesize=(layout.canvas_width, layout.canvas_height),
			)
			pdf.setTitle("Motif summary")
			render_table(pdf, table, layout, metrics, verbose=verbose)
			pdf.save()
		verify_document(temp_path, layout.canvas_width, layout.canvas_height)
		os.replace(temp_path, output_path)
	except BaseException:
		temp_path.unlink(missing_ok=True)
		raise
	return layout
