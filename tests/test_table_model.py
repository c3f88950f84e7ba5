import pytest

import fake_graphics
import logo_summary.table_model as table_model


#============================================
def test_header_present_at_construction() -> None:
	"""
	A new table has the seven header labels and no data rows.
	"""
	table = table_model.SummaryTable()
	assert len(table) == 0
	labels = [cell.text for cell in table.header]
	assert labels == [
		"ID",
		"Motif Profile",
		"Seed",
		"Seed P-value",
		"Seed Freq.",
		"K-context Trace",
		"Motif Freq.",
	]
	assert len(table.display_rows()) == 1


#============================================
def test_rows_get_ordinals_in_order() -> None:
	"""
	Appended rows are numbered from 1 in presentation order.
	"""
	table = fake_graphics.build_table(3)
	assert [row.ordinal for row in table.rows] == [1, 2, 3]
	cells = table.display_rows()[3]
	assert cells[table_model.Column.IDENTIFIER].text == "3)"


#============================================
def test_row_cells_follow_column_order() -> None:
	"""
	Row cells follow the fixed column order and declared kinds.
	"""
	motif = fake_graphics.BoxGraphic(3)
	trace = fake_graphics.BoxGraphic(5)
	table = table_model.SummaryTable()
	row = table.add_row(motif, "ACGU", 0.0000123, 7.5, 33.0, trace)
	cells = row.cells()
	assert len(cells) == table_model.COLUMN_COUNT
	assert [cell.kind for cell in cells] == [
		"text", "graphic", "text", "numeric", "numeric", "graphic", "numeric",
	]
	assert cells[table_model.Column.MOTIF].handle is motif
	assert cells[table_model.Column.TRACE].handle is trace
	assert cells[table_model.Column.PVALUE].text == "1.230E-5"
	assert cells[table_model.Column.SEED_ABUNDANCE].text == "7.50%"
	assert cells[table_model.Column.MOTIF_ABUNDANCE].text == "33.00%"


#============================================
def test_add_row_rejects_missing_values() -> None:
	"""
	Missing or invalid values are rejected before the row is stored.
	"""
	table = table_model.SummaryTable()
	graphic = fake_graphics.BoxGraphic(2)
	with pytest.raises(table_model.MalformedRowError):
		table.add_row(None, "ACGT", 0.1, 1.0, 1.0, graphic)
	with pytest.raises(table_model.MalformedRowError):
		table.add_row(graphic, None, 0.1, 1.0, 1.0, graphic)
	with pytest.raises(table_model.MalformedRowError):
		table.add_row(graphic, "ACGT", None, 1.0, 1.0, graphic)
	with pytest.raises(table_model.MalformedRowError):
		table.add_row(graphic, "ACGT", float("nan"), 1.0, 1.0, graphic)
	with pytest.raises(table_model.MalformedRowError):
		table.add_row(graphic, "ACGT", 0.1, 101.0, 1.0, graphic)
	with pytest.raises(table_model.MalformedRowError):
		table.add_row(graphic, "ACGT", 0.1, 1.0, 1.0, "not a graphic")
	assert len(table) == 0


#============================================
def test_check_row_cells_rejects_wrong_arity() -> None:
	"""
	Rows with too few cells are rejected.
	"""
	cells = fake_graphics.build_table(1).rows[0].cells()
	with pytest.raises(table_model.MalformedRowError):
		table_model.check_row_cells(cells[:6])


#============================================
def test_check_row_cells_rejects_kind_mismatch() -> None:
	"""
	A text cell in a graphic column is rejected.
	"""
	cells = list(fake_graphics.build_table(1).rows[0].cells())
	cells[table_model.Column.MOTIF] = table_model.TextCell("logo")
	with pytest.raises(table_model.MalformedRowError):
		table_model.check_row_cells(tuple(cells))
	cells[table_model.Column.MOTIF] = None
	with pytest.raises(table_model.MalformedRowError):
		table_model.check_row_cells(tuple(cells))


#============================================
def test_header_must_be_text() -> None:
	"""
	The header row only accepts text cells.
	"""
	table = table_model.SummaryTable()
	table_model.check_row_cells(table.header, header=True)
	cells = fake_graphics.build_table(1).rows[0].cells()
	with pytest.raises(table_model.MalformedRowError):
		table_model.check_row_cells(cells, header=True)
