import pytest

import logo_summary.config
import logo_summary.table_model as table_model


#============================================
def test_pvalue_small() -> None:
	"""
	Small p-values use a negative exponent without padding.
	"""
	assert table_model.format_pvalue(0.0000123) == "1.230E-5"
	assert table_model.format_pvalue(0.00001234) == "1.234E-5"


#============================================
def test_pvalue_no_plus_sign() -> None:
	"""
	Positive and zero exponents carry no plus sign.
	"""
	assert table_model.format_pvalue(1.5) == "1.500E0"
	assert table_model.format_pvalue(25.0) == "2.500E1"
	assert table_model.format_pvalue(0.0) == "0.000E0"


#============================================
def test_pvalue_many_orders_of_magnitude() -> None:
	"""
	Very small p-values keep a three digit exponent.
	"""
	assert table_model.format_pvalue(3.2e-120) == "3.200E-120"


#============================================
def test_abundance() -> None:
	"""
	Abundances have two decimals and a percent sign.
	"""
	assert table_model.format_abundance(7.5) == "7.50%"
	assert table_model.format_abundance(100.0) == "100.00%"
	assert table_model.format_abundance(12.344) == "12.34%"


#============================================
def test_identifier() -> None:
	"""
	Identifiers are the ordinal followed by a parenthesis.
	"""
	assert table_model.format_identifier(3) == "3)"


#============================================
def test_numeric_cell_text_matches_formatter() -> None:
	"""
	Numeric cells expose the formatted string used for both passes.
	"""
	assert table_model.NumericCell(0.0000123, "pvalue").text == "1.230E-5"
	assert table_model.NumericCell(7.5, "percent").text == "7.50%"


#============================================
def test_parse_hex_color() -> None:
	"""
	Hex colors parse to unit floats; malformed values are rejected.
	"""
	assert logo_summary.config.parse_hex_color("#FF0000") == (1.0, 0.0, 0.0)
	for value in ("", "CCCCCC", "#CCC", "#GG0000"):
		with pytest.raises(ValueError):
			logo_summary.config.parse_hex_color(value)


#============================================
def test_palette_entries_parse() -> None:
	"""
	Every configured color is a valid hex string.
	"""
	colors = list(logo_summary.config.LOGO_PALETTE.values())
	colors += [
		logo_summary.config.LOGO_DEFAULT_COLOR,
		logo_summary.config.SHADE_COLOR,
		logo_summary.config.SEPARATOR_COLOR,
	]
	for value in colors:
		logo_summary.config.parse_hex_color(value)
