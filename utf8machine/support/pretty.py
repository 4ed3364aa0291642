""" Bits and bobs in support of visualizing transition tables. """
import sys

def hex_byte(b:int) -> str: return "%02X" % b

def runs(row):
	"""
	Collapse a row of cells into maximal runs of equal value.
	Yields (low, high, value) triples, inclusive on both ends.
	"""
	low = 0
	for i in range(1, len(row) + 1):
		if i == len(row) or row[i] != row[low]:
			yield low, i - 1, row[low]
			low = i

def span(low:int, high:int) -> str:
	return hex_byte(low) if low == high else hex_byte(low) + ".." + hex_byte(high)

def print_grid(grid, *, file=None):
	"""
	Every row must have the same number of cells. The first row is a header.
	Output goes to STDOUT unless a file is given.
	"""
	file = file or sys.stdout
	lens = set(map(len, grid))
	assert len(lens) == 1, lens
	grid = [[str(cell) for cell in row] for row in grid]
	width = [max(map(len, column)) for column in zip(*grid)]
	horizontal = '─'
	vertical = ' │ '
	segments = [horizontal*w for w in width]
	print((horizontal + '┬' + horizontal).join(segments), file=file)
	for r, row in enumerate(grid):
		if r == 1: print((horizontal + '┼' + horizontal).join(segments), file=file)
		print(vertical.join(s.ljust(w, ' ') for s, w in zip(row, width)), file=file)
	print((horizontal + '┴' + horizontal).join(segments), file=file)
