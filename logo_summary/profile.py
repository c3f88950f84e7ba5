"""
Structural profile helpers.

A structural profile gives, for every nucleotide of a sequence, the
probability of being in each secondary-structure context. Predictors emit
it as one linear vector holding five context blocks of sequence length;
the paired probability is the remainder.
"""

# Standard Library
import pathlib

# local repo modules
import logo_summary as lsum
import logo_summary.logo


SequenceLogo = lsum.logo.SequenceLogo

# hairpin, inner loop, bulge, multi-loop, dangling end, paired
STRUCTURE_CONTEXTS = "HIBMDP"
LINEAR_CONTEXTS = len(STRUCTURE_CONTEXTS) - 1
VALID_NUCLEOTIDES = set("ACGTU")


#============================================
def validate_sequence(sequence: str) -> str:
	"""
	Validate a nucleotide sequence and convert it to DNA.

	Args:
		sequence: RNA or DNA string, any case.

	Returns:
		Upper-case sequence with U replaced by T.

	Raises:
		ValueError: If the sequence contains a non-nucleotide character.
	"""
	upper = sequence.upper()
	for char in upper:
		if char not in VALID_NUCLEOTIDES:
			raise ValueError(f"Sequence {upper} contains invalid character {char!r}")
	return upper.replace("U", "T")


#============================================
def profile_to_matrix(profile: list[float], length: int) -> list[list[float]]:
	"""
	Convert a linear structural profile into a per-position matrix.

	Context k of position x is stored at profile[x + k * length].

	Args:
		profile: Linear profile with at least five blocks of length values.
		length: Sequence length.

	Returns:
		List of length rows, each [H, I, B, M, D, P].
	"""
	if length < 0:
		raise ValueError(f"Sequence length must not be negative, got {length}")
	needed = LINEAR_CONTEXTS * length
	if len(profile) < needed:
		raise ValueError(f"Profile has {len(profile)} values, expected at least {needed}")
	matrix: list[list[float]] = []
	for x in range(length):
		row = [profile[x + k * length] for k in range(LINEAR_CONTEXTS)]
		row.append(1.0 - sum(row))
		matrix.append(row)
	return matrix


#============================================
def format_profile_text(number: int, sequence: str, matrix: list[list[float]]) -> str:
	"""
	Format a profile matrix as tab-separated text.

	Args:
		number: Sequence number used in the record name.
		sequence: Nucleotide sequence.
		matrix: Profile matrix from profile_to_matrix.

	Returns:
		Text block with a name line, a nucleotide line and one line per context.
	"""
	if len(matrix) != len(sequence):
		raise ValueError(f"Matrix has {len(matrix)} rows for a sequence of length {len(sequence)}")
	lines = [f">Sequence{number}", "\t" + "\t".join(sequence)]
	for k in range(len(STRUCTURE_CONTEXTS)):
		lines.append("\t" + "\t".join(f"{row[k]:.5f}" for row in matrix))
	return "\n".join(lines)


#============================================
def write_profile_txt(
	path: pathlib.Path,
	number: int,
	sequence: str,
	matrix: list[list[float]],
) -> None:
	"""
	Write a profile matrix as a plain-text file.

	Args:
		path: Output path.
		number: Sequence number used in the record name.
		sequence: Nucleotide sequence.
		matrix: Profile matrix from profile_to_matrix.
	"""
	text = format_profile_text(number, sequence, matrix)
	with path.open("w", encoding="utf-8") as handle:
		handle.write(text)


#============================================
def profile_to_logo(matrix: list[list[float]]) -> SequenceLogo:
	"""
	Build a K-context trace logo from a profile matrix.

	Negative remainders from rounding in the paired column are clamped.

	Args:
		matrix: Profile matrix from profile_to_matrix.

	Returns:
		SequenceLogo over the structure context alphabet.
	"""
	rows = [[max(0.0, value) for value in row] for row in matrix]
	return SequenceLogo(alphabet=STRUCTURE_CONTEXTS, matrix=rows)
