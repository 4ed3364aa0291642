"""
A dense UTF-8 transition table is only a couple of kilobytes, so compression is hardly a
matter of survival. Still, most of those 256 columns are repetitive: every state treats
0x00..0x7F identically, for example. Grouping equivalent columns into byte classes gives
the well-known "character class plus small matrix" form, which fits comfortably in cache
and is easy to print, inspect, and compare.

The method here is the ordinary one: two columns are equivalent if and only if they agree
in every row. No "don't-care" cells exist because the table is a total function.
"""

import sys

VERBOSE = False

def allocate(a_list:list, item):
	"""
	Append an item to a list, and return the new item's index in that list.
	Too frequent an idiom not to abbreviate.
	"""
	idx = len(a_list)
	a_list.append(item)
	return idx

def find_column_equivalence(matrix) -> tuple[list[int], list[tuple]]:
	"""
	:param matrix: A rank-two tensor. Iterable of rows, all the same length.
	:return: a class index for each column, and the distinct columns in order of first appearance.
	"""
	index, classes, seen = [], [], {}
	for column in zip(*matrix):
		if column not in seen: seen[column] = allocate(classes, column)
		index.append(seen[column])
	return index, classes

def compress_transitions(matrix) -> dict:
	"""
	:param matrix: one row per state, one cell per byte.
	:return: a dictionary with 'classes' (one entry per byte) and 'delta' (one row per state, one cell per class).
	"""
	height, width = len(matrix), len(matrix[0])
	column_class, columns = find_column_equivalence(matrix)
	delta = [list(row) for row in zip(*columns)]
	if VERBOSE: print("Transition matrix was %d rows, %d cols = %d cells; compact form is %d + %d cells (%0.2f%%)" % (
		height, width, height * width, width, height * len(columns), (100.0 * (width + height * len(columns)) / (height * width))
	), file=sys.stderr)
	return {'classes': column_class, 'delta': delta}
