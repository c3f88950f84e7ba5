"""
Layout pass: column widths, canvas extent and row band geometry.
"""

# Standard Library
import dataclasses

# local repo modules
import logo_summary as lsum
import logo_summary.config
import logo_summary.metrics
import logo_summary.table_model


TableStyle = lsum.config.TableStyle
MetricsProvider = lsum.metrics.MetricsProvider
FontRole = lsum.table_model.FontRole
Column = lsum.table_model.Column
SummaryTable = lsum.table_model.SummaryTable
COLUMN_SPECS = lsum.table_model.COLUMN_SPECS
COLUMN_COUNT = lsum.table_model.COLUMN_COUNT


@dataclasses.dataclass(frozen=True)
class TableLayout:
	column_widths: tuple[float, ...]
	column_origins: tuple[float, ...]
	canvas_width: float
	canvas_height: float
	data_row_count: int
	style: TableStyle


@dataclasses.dataclass(frozen=True)
class RowBand:
	index: int
	bottom: float
	top: float
	y: float
	text_baseline: float
	shaded: bool


#============================================
def measure_cell(cell, column: Column, metrics: MetricsProvider, font_size: float) -> float:
	"""
	Measure one data cell.

	Args:
		cell: TextCell, NumericCell or GraphicCell.
		column: Column the cell belongs to.
		metrics: Metrics provider.
		font_size: Font size for text cells.

	Returns:
		Width in points.
	"""
	if cell.kind == "graphic":
		width, _height = metrics.measure_graphic(cell.handle)
		return width
	return metrics.measure_text(cell.text, COLUMN_SPECS[column].font_role, font_size)


#============================================
def compute_column_origins(widths: tuple[float, ...], style: TableStyle) -> tuple[float, ...]:
	"""
	Compute the left x coordinate of each column.

	Args:
		widths: Column widths.
		style: Table style.

	Returns:
		Column origins in points.
	"""
	origins: list[float] = []
	x = style.document_margin
	for width in widths:
		origins.append(x)
		x += width + style.column_margin
	return tuple(origins)


#============================================
def compute_layout(
	table: SummaryTable,
	metrics: MetricsProvider,
	style: TableStyle,
) -> TableLayout:
	"""
	Measure every cell and derive column widths and canvas extent.

	Args:
		table: Summary table.
		metrics: Metrics provider.
		style: Table style.

	Returns:
		TableLayout.
	"""
	if metrics.style != style:
		raise ValueError("Metrics provider was built for a different table style")
	widths = [0.0] * COLUMN_COUNT
	lsum.table_model.check_row_cells(table.header, header=True)
	for column, cell in zip(Column, table.header):
		widths[column] = metrics.measure_text(cell.text, FontRole.HEADER, style.font_size)

	data_rows = table.display_rows()[1:]
	for cells in data_rows:
		lsum.table_model.check_row_cells(cells)
		for column, cell in zip(Column, cells):
			widths[column] = max(widths[column], measure_cell(cell, column, metrics, style.font_size))

	canvas_width = sum(widths) + COLUMN_COUNT * style.column_margin + 2.0 * style.document_margin
	canvas_height = style.header_height + len(data_rows) * style.row_height
	column_widths = tuple(widths)
	return TableLayout(
		column_widths=column_widths,
		column_origins=compute_column_origins(column_widths, style),
		canvas_width=canvas_width,
		canvas_height=canvas_height,
		data_row_count=len(data_rows),
		style=style,
	)


#============================================
def compute_row_band(layout: TableLayout, index: int) -> RowBand:
	"""
	Compute the vertical geometry of a display row.

	The canvas origin is bottom-left, so rows further down the table get
	smaller y values. Index 0 is the header band.

	Args:
		layout: Table layout.
		index: Display row index (0 = header, 1..N = data rows).

	Returns:
		RowBand.
	"""
	style = layout.style
	if index < 0 or index > layout.data_row_count:
		raise IndexError(f"Row index {index} outside 0..{layout.data_row_count}")
	if index == 0:
		bottom = layout.canvas_height - style.header_height
		y = layout.canvas_height - style.header_height / 2.0
		return RowBand(0, bottom, layout.canvas_height, y, y, False)
	top = layout.canvas_height - style.header_height - (index - 1) * style.row_height
	y = top - style.row_height / 2.0
	return RowBand(
		index=index,
		bottom=top - style.row_height,
		top=top,
		y=y,
		text_baseline=y - style.text_baseline_offset,
		shaded=index % 2 == 0,
	)
