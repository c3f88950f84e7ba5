"""
Summary table model: columns, cells, rows and value formatting.
"""

# Standard Library
import dataclasses
import enum
import math
import typing

# PIP3 modules
import reportlab.pdfgen.canvas


class MalformedRowError(ValueError):
	"""
	A row is missing a cell, has the wrong arity or holds an invalid value.
	"""


@dataclasses.dataclass(frozen=True)
class Region:
	"""
	Destination rectangle on the canvas, origin at the bottom-left corner.
	"""
	x: float
	y: float
	width: float
	height: float


class GraphicHandle(typing.Protocol):
	"""
	Renderable visual that knows its own size and how to paint itself.
	"""

	def intrinsic_unit_count(self) -> int:
		...

	def paint(self, pdf: reportlab.pdfgen.canvas.Canvas, region: Region) -> None:
		...


class Column(enum.IntEnum):
	IDENTIFIER = 0
	MOTIF = 1
	SEED = 2
	PVALUE = 3
	SEED_ABUNDANCE = 4
	TRACE = 5
	MOTIF_ABUNDANCE = 6


class FontRole(enum.Enum):
	PLAIN = "plain"
	HEADER = "header"
	IDENTIFIER = "identifier"


@dataclasses.dataclass(frozen=True)
class ColumnSpec:
	label: str
	kind: str
	font_role: FontRole = FontRole.PLAIN
	number_format: str | None = None
	padded: bool = False


COLUMN_SPECS = {
	Column.IDENTIFIER: ColumnSpec("ID", "text", FontRole.IDENTIFIER, padded=True),
	Column.MOTIF: ColumnSpec("Motif Profile", "graphic"),
	Column.SEED: ColumnSpec("Seed", "text"),
	Column.PVALUE: ColumnSpec("Seed P-value", "numeric", number_format="pvalue"),
	Column.SEED_ABUNDANCE: ColumnSpec("Seed Freq.", "numeric", number_format="percent"),
	Column.TRACE: ColumnSpec("K-context Trace", "graphic", padded=True),
	Column.MOTIF_ABUNDANCE: ColumnSpec("Motif Freq.", "numeric", number_format="percent"),
}
COLUMN_COUNT = len(Column)


#============================================
def format_pvalue(value: float) -> str:
	"""
	Format a p-value in scientific notation.

	Three mantissa decimals, uppercase exponent marker, no plus sign and
	no zero padding on the exponent.

	Args:
		value: P-value.

	Returns:
		Formatted string like "1.230E-5".
	"""
	mantissa, exponent = f"{value:.3E}".split("E")
	return f"{mantissa}E{int(exponent)}"


#============================================
def format_abundance(value: float) -> str:
	"""
	Format an abundance percentage with two decimals and a percent sign.

	Args:
		value: Percentage in the 0-100 range.

	Returns:
		Formatted string like "7.50%".
	"""
	return f"{value:.2f}%"


#============================================
def format_identifier(ordinal: int) -> str:
	"""
	Format a 1-based row ordinal as a row label.

	Args:
		ordinal: Row ordinal.

	Returns:
		Formatted string like "3)".
	"""
	return f"{ordinal})"


NUMBER_FORMATTERS = {
	"pvalue": format_pvalue,
	"percent": format_abundance,
}


@dataclasses.dataclass(frozen=True)
class TextCell:
	text: str
	kind: str = dataclasses.field(default="text", init=False)


@dataclasses.dataclass(frozen=True)
class NumericCell:
	value: float
	number_format: str
	kind: str = dataclasses.field(default="numeric", init=False)

	@property
	def text(self) -> str:
		return NUMBER_FORMATTERS[self.number_format](self.value)


@dataclasses.dataclass(frozen=True)
class GraphicCell:
	handle: GraphicHandle
	kind: str = dataclasses.field(default="graphic", init=False)


Cell = TextCell | NumericCell | GraphicCell


#============================================
def is_graphic_handle(value: typing.Any) -> bool:
	"""
	Check whether a value offers the graphic handle capability.

	Args:
		value: Candidate object.

	Returns:
		True if the value has callable intrinsic_unit_count and paint.
	"""
	for name in ("intrinsic_unit_count", "paint"):
		if not callable(getattr(value, name, None)):
			return False
	return True


#============================================
def check_row_cells(cells: tuple, header: bool = False) -> None:
	"""
	Validate a display row against the column declarations.

	Args:
		cells: Cells in column order.
		header: True for the header row, which holds only text cells.

	Raises:
		MalformedRowError: On wrong arity, missing cells or kind mismatch.
	"""
	if len(cells) != COLUMN_COUNT:
		raise MalformedRowError(f"Row has {len(cells)} cells, expected {COLUMN_COUNT}")
	for column, cell in zip(Column, cells):
		if cell is None:
			raise MalformedRowError(f"Missing cell in column {column.name}")
		expected = "text" if header else COLUMN_SPECS[column].kind
		if getattr(cell, "kind", None) != expected:
			raise MalformedRowError(
				f"Column {column.name} expects a {expected} cell, got {type(cell).__name__}"
			)
		if cell.kind == "graphic" and not is_graphic_handle(cell.handle):
			raise MalformedRowError(f"Column {column.name} holds an object that cannot paint itself")


#============================================
def header_cells() -> tuple[TextCell, ...]:
	"""
	Build the header row from the column labels.

	Returns:
		Tuple of TextCell in column order.
	"""
	return tuple(TextCell(COLUMN_SPECS[column].label) for column in Column)


@dataclasses.dataclass(frozen=True)
class SummaryRow:
	ordinal: int
	motif: GraphicHandle
	seed: str
	pvalue: float
	seed_abundance: float
	trace: GraphicHandle
	motif_abundance: float

	def cells(self) -> tuple[Cell, ...]:
		"""
		Return the row cells in column order.
		"""
		return (
			TextCell(format_identifier(self.ordinal)),
			GraphicCell(self.motif),
			TextCell(self.seed),
			NumericCell(self.pvalue, "pvalue"),
			NumericCell(self.seed_abundance, "percent"),
			GraphicCell(self.trace),
			NumericCell(self.motif_abundance, "percent"),
		)


class SummaryTable:
	"""
	Ordered rows of the motif summary table.

	The header row exists from construction; data rows are appended in
	presentation order and get a 1-based ordinal.
	"""

	def __init__(self) -> None:
		self._header = header_cells()
		self._rows: list[SummaryRow] = []

	@property
	def header(self) -> tuple[TextCell, ...]:
		return self._header

	@property
	def rows(self) -> tuple[SummaryRow, ...]:
		return tuple(self._rows)

	def __len__(self) -> int:
		return len(self._rows)

	def add_row(
		self,
		motif: GraphicHandle,
		seed: str,
		pvalue: float,
		seed_abundance: float,
		motif_abundance: float,
		trace: GraphicHandle,
	) -> SummaryRow:
		"""
		Append a data row.

		Args:
			motif: Graphic handle with the sequence motif logo.
			seed: Seed k-mer of the cluster.
			pvalue: P-value of the seed.
			seed_abundance: Seed abundance in percent (0-100).
			motif_abundance: Motif abundance in percent (0-100).
			trace: Graphic handle with the K-context trace logo.

		Returns:
			The stored SummaryRow.
		"""
		for name, value in (("motif", motif), ("trace", trace)):
			if value is None or not is_graphic_handle(value):
				raise MalformedRowError(f"{name} must be a graphic handle")
		if seed is None or not isinstance(seed, str):
			raise MalformedRowError("seed must be a string")
		for name, value in (
			("pvalue", pvalue),
			("seed_abundance", seed_abundance),
			("motif_abundance", motif_abundance),
		):
			if not isinstance(value, (int, float)) or not math.isfinite(value):
				raise MalformedRowError(f"{name} must be a finite number, got {value!r}")
		if pvalue < 0.0:
			raise MalformedRowError(f"pvalue must not be negative, got {pvalue}")
		for name, value in (("seed_abundance", seed_abundance), ("motif_abundance", motif_abundance)):
			if not 0.0 <= value <= 100.0:
				raise MalformedRowError(f"{name} must be within 0-100, got {value}")

		row = SummaryRow(
			ordinal=len(self._rows) + 1,
			motif=motif,
			seed=seed,
			pvalue=float(pvalue),
			seed_abundance=float(seed_abundance),
			trace=trace,
			motif_abundance=float(motif_abundance),
		)
		self._rows.append(row)
		return row

	def display_rows(self) -> list[tuple[Cell, ...]]:
		"""
		Return header plus data rows as cell tuples, in display order.
		"""
		return [self._header] + [row.cells() for row in self._rows]
