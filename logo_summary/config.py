"""
Shared configuration and constants.
"""

import dataclasses


DOCUMENT_MARGIN = 50.0
HEADER_HEIGHT = 150.0
ROW_HEIGHT = 150.0
COLUMN_MARGIN = 110.0
LOGO_UNIT_WIDTH = 150.0
FONT_SIZE = 65.0
TEXT_PADDING = 75.0

DEFAULT_FONT_PLAIN = "Courier"
DEFAULT_FONT_HEADER = "Helvetica-Bold"
DEFAULT_FONT_IDENTIFIER = "Courier-Bold"

SHADE_COLOR = "#CCCCCC"
SHADE_ALPHA = 150.0 / 255.0
SEPARATOR_COLOR = "#000000"
SEPARATOR_THICKNESS = 2.0

LOGO_FONT = "Helvetica-Bold"
LOGO_FONT_SIZE = 100.0
LOGO_CAP_HEIGHT = 0.718
LOGO_INSET = 4.0
LOGO_MIN_GLYPH_HEIGHT = 0.5
LOGO_PALETTE = {
	"A": "#109648",
	"C": "#255C99",
	"G": "#F7B32B",
	"T": "#D62839",
	"U": "#D62839",
	"H": "#8E44AD",
	"I": "#2E86C1",
	"B": "#17A589",
	"M": "#D68910",
	"D": "#7F8C8D",
	"P": "#C0392B",
}
LOGO_DEFAULT_COLOR = "#555555"

PROGRESS_BAR_WIDTH = 20
PROGRESS_UPDATE_EVERY = 10


@dataclasses.dataclass
class TableStyle:
	document_margin: float
	header_height: float
	row_height: float
	column_margin: float
	unit_width: float
	font_size: float
	text_padding: float
	text_baseline_offset: float
	font_plain: str
	font_header: str
	font_identifier: str


#============================================
def build_default_style() -> TableStyle:
	"""
	Build the default table style.

	Returns:
		TableStyle with the module defaults.
	"""
	return TableStyle(
		document_margin=DOCUMENT_MARGIN,
		header_height=HEADER_HEIGHT,
		row_height=ROW_HEIGHT,
		column_margin=COLUMN_MARGIN,
		unit_width=LOGO_UNIT_WIDTH,
		font_size=FONT_SIZE,
		text_padding=TEXT_PADDING,
		text_baseline_offset=FONT_SIZE / 2.0,
		font_plain=DEFAULT_FONT_PLAIN,
		font_header=DEFAULT_FONT_HEADER,
		font_identifier=DEFAULT_FONT_IDENTIFIER,
	)


#============================================
def parse_hex_color(value: str) -> tuple[float, float, float]:
	"""
	Parse a hex color string into RGB floats.

	Args:
		value: Color string like "#AABBCC".

	Returns:
		Tuple of (r, g, b) in 0.0-1.0 range.

	Raises:
		ValueError: If the value is not a #RRGGBB string.
	"""
	if not value or not value.startswith("#") or len(value) != 7:
		raise ValueError(f"Invalid hex color: {value!r}")
	red = int(value[1:3], 16) / 255.0
	green = int(value[3:5], 16) / 255.0
	blue = int(value[5:7], 16) / 255.0
	return (red, green, blue)
