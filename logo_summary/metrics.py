"""
Font and graphic measurement.
"""

# PIP3 modules
import reportlab.pdfbase.pdfmetrics

# local repo modules
import logo_summary as lsum
import logo_summary.config
import logo_summary.table_model


TableStyle = lsum.config.TableStyle
FontRole = lsum.table_model.FontRole
GraphicHandle = lsum.table_model.GraphicHandle


class FontLoadError(RuntimeError):
	"""
	A font required for measurement could not be loaded.
	"""


class MetricsProvider:
	"""
	Measure text runs and graphic handles for the layout pass.

	All fonts are resolved up front; a missing font is fatal and no
	substitute is used.
	"""

	def __init__(self, style: TableStyle) -> None:
		self.style = style
		self._fonts: dict[FontRole, str] = {}
		requested = {
			FontRole.PLAIN: style.font_plain,
			FontRole.HEADER: style.font_header,
			FontRole.IDENTIFIER: style.font_identifier,
		}
		for role, font_name in requested.items():
			try:
				font = reportlab.pdfbase.pdfmetrics.getFont(font_name)
			except (
				KeyError,
				OSError,
				reportlab.pdfbase.pdfmetrics.FontError,
				reportlab.pdfbase.pdfmetrics.FontNotFoundError,
			) as error:
				raise FontLoadError(f"Cannot load {role.value} font {font_name!r}") from error
			self._fonts[role] = font.fontName

	def font_name(self, role: FontRole) -> str:
		return self._fonts[role]

	def measure_text(self, text: str, role: FontRole, size: float) -> float:
		"""
		Measure the rendered width of a text run.

		Args:
			text: Text to measure.
			role: Font role.
			size: Font size in points.

		Returns:
			Width in points.
		"""
		return reportlab.pdfbase.pdfmetrics.stringWidth(text, self._fonts[role], size)

	def measure_graphic(self, handle: GraphicHandle) -> tuple[float, float]:
		"""
		Measure the intrinsic size of a graphic handle.

		Args:
			handle: Graphic handle.

		Returns:
			Tuple of (width, height) in points.
		"""
		units = handle.intrinsic_unit_count()
		if units < 0:
			raise ValueError(f"Graphic reports a negative unit count: {units}")
		return (units * self.style.unit_width, self.style.row_height)
