"""
Stacked-letter logos that paint themselves onto a ReportLab canvas.
"""

# Standard Library
import dataclasses
import math

# PIP3 modules
import reportlab.pdfbase.pdfmetrics
import reportlab.pdfgen.canvas

# local repo modules
import logo_summary as lsum
import logo_summary.config
import logo_summary.table_model


Region = lsum.table_model.Region

LOGO_FONT = lsum.config.LOGO_FONT
LOGO_FONT_SIZE = lsum.config.LOGO_FONT_SIZE
LOGO_CAP_HEIGHT = lsum.config.LOGO_CAP_HEIGHT
LOGO_INSET = lsum.config.LOGO_INSET
LOGO_MIN_GLYPH_HEIGHT = lsum.config.LOGO_MIN_GLYPH_HEIGHT
LOGO_PALETTE = lsum.config.LOGO_PALETTE
LOGO_DEFAULT_COLOR = lsum.config.LOGO_DEFAULT_COLOR


@dataclasses.dataclass
class SequenceLogo:
	"""
	Position-by-symbol probability matrix drawn as a stacked-letter logo.

	Each matrix row is one position; each entry is the weight of the
	alphabet symbol at the same index. With scale_by_information the stack
	height follows the information content of the position.
	"""
	alphabet: str
	matrix: list[list[float]]
	scale_by_information: bool = False

	def __post_init__(self) -> None:
		if not self.alphabet:
			raise ValueError("Logo alphabet must not be empty")
		for position, weights in enumerate(self.matrix):
			if len(weights) != len(self.alphabet):
				raise ValueError(
					f"Position {position} has {len(weights)} weights for a "
					f"{len(self.alphabet)}-symbol alphabet"
				)
			if any(weight < 0.0 for weight in weights):
				raise ValueError(f"Position {position} has negative weights")

	def intrinsic_unit_count(self) -> int:
		return len(self.matrix)

	def stack_heights(self, position: int) -> list[tuple[str, float]]:
		"""
		Compute glyph heights for one position as fractions of the slot.

		Args:
			position: Matrix row index.

		Returns:
			List of (symbol, fraction), smallest first.
		"""
		weights = self.matrix[position]
		total = sum(weights)
		if total <= 0.0:
			return []
		fractions = [weight / total for weight in weights]
		scale = 1.0
		if self.scale_by_information and len(self.alphabet) > 1:
			max_bits = math.log2(len(self.alphabet))
			entropy = -sum(p * math.log2(p) for p in fractions if p > 0.0)
			scale = max(0.0, max_bits - entropy) / max_bits
		stack = [
			(symbol, fraction * scale)
			for symbol, fraction in zip(self.alphabet, fractions)
			if fraction > 0.0
		]
		stack.sort(key=lambda item: item[1])
		return stack

	def paint(self, pdf: reportlab.pdfgen.canvas.Canvas, region: Region) -> None:
		"""
		Paint the logo into a canvas region.

		Args:
			pdf: ReportLab canvas.
			region: Destination rectangle.
		"""
		count = self.intrinsic_unit_count()
		if count == 0 or region.width <= 0 or region.height <= 0:
			return
		slot_width = region.width / count
		slot_height = region.height - 2.0 * LOGO_INSET
		for position in range(count):
			x = region.x + position * slot_width
			y = region.y + LOGO_INSET
			for symbol, fraction in self.stack_heights(position):
				glyph_height = fraction * slot_height
				if glyph_height < LOGO_MIN_GLYPH_HEIGHT:
					continue
				draw_glyph(pdf, symbol, x, y, slot_width, glyph_height)
				y += glyph_height


#============================================
def draw_glyph(
	pdf: reportlab.pdfgen.canvas.Canvas,
	symbol: str,
	x: float,
	y: float,
	width: float,
	height: float,
) -> None:
	"""
	Draw one letter stretched to fill a box.

	Args:
		pdf: ReportLab canvas.
		symbol: Letter to draw.
		x: Box x origin.
		y: Box y origin.
		width: Box width.
		height: Box height.
	"""
	glyph_width = reportlab.pdfbase.pdfmetrics.stringWidth(symbol, LOGO_FONT, LOGO_FONT_SIZE)
	if glyph_width <= 0.0:
		return
	color = lsum.config.parse_hex_color(LOGO_PALETTE.get(symbol.upper(), LOGO_DEFAULT_COLOR))
	pdf.saveState()
	pdf.setFillColorRGB(color[0], color[1], color[2])
	pdf.translate(x, y)
	pdf.scale(width / glyph_width, height / (LOGO_CAP_HEIGHT * LOGO_FONT_SIZE))
	pdf.setFont(LOGO_FONT, LOGO_FONT_SIZE)
	pdf.drawString(0, 0, symbol)
	pdf.restoreState()
