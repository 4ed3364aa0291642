"""
The UTF-8 grammar of RFC 3629, written as a transition table.

Every legal byte sequence is a path through these states, starting and ending at GROUND.
The grammar's awkward corners (overlong forms, surrogate halves, and values beyond U+10FFFF)
are not checked anywhere at decode time. Instead, each gets its own state whose only
non-error transitions admit the legal range of the next byte. Anything not mentioned here
is an invalid sequence and returns the automaton to GROUND.

The table is built once, at import time, into a tuple of immutable `bytes` rows.
"""

from typing import NamedTuple

from ..support import interfaces, pretty, compaction
from .vocabulary import State, Action, pack, unpack, INVALID_CELL

class Entry(NamedTuple):
	low: int
	high: int
	action: Action
	state: State

GRAMMAR = {
	State.GROUND: [
		Entry(0x00, 0x7F, Action.EMIT_BYTE, State.GROUND),
		Entry(0xC0, 0xC1, Action.SET_BYTE2_TOP, State.DEAD_END),
		Entry(0xC2, 0xDF, Action.SET_BYTE2_TOP, State.TAIL_1),
		Entry(0xE0, 0xE0, Action.SET_BYTE3_TOP, State.AFTER_E0),
		Entry(0xE1, 0xEC, Action.SET_BYTE3_TOP, State.TAIL_2),
		Entry(0xED, 0xED, Action.SET_BYTE3_TOP, State.AFTER_ED),
		Entry(0xEE, 0xEF, Action.SET_BYTE3_TOP, State.TAIL_2),
		Entry(0xF0, 0xF0, Action.SET_BYTE4, State.AFTER_F0),
		Entry(0xF1, 0xF3, Action.SET_BYTE4, State.TAIL_3),
		Entry(0xF4, 0xF4, Action.SET_BYTE4, State.AFTER_F4),
	],
	State.AFTER_E0: [Entry(0xA0, 0xBF, Action.SET_BYTE2, State.TAIL_1)],
	State.AFTER_ED: [Entry(0x80, 0x9F, Action.SET_BYTE2, State.TAIL_1)],
	State.AFTER_F0: [Entry(0x90, 0xBF, Action.SET_BYTE3, State.TAIL_2)],
	State.AFTER_F4: [Entry(0x80, 0x8F, Action.SET_BYTE3, State.TAIL_2)],
	State.TAIL_1: [Entry(0x80, 0xBF, Action.SET_BYTE1, State.GROUND)],
	State.TAIL_2: [Entry(0x80, 0xBF, Action.SET_BYTE2, State.TAIL_1)],
	State.TAIL_3: [Entry(0x80, 0xBF, Action.SET_BYTE3, State.TAIL_2)],
	State.DEAD_END: [],
}

def build_row(entries) -> bytes:
	row = bytearray([INVALID_CELL]) * 256
	for entry in entries:
		row[entry.low:entry.high + 1] = bytes([pack(entry.state, entry.action)]) * (entry.high + 1 - entry.low)
	return bytes(row)

TRANSITIONS = tuple(build_row(GRAMMAR[state]) for state in State)

def describe(cell:int) -> str:
	state, action = unpack(cell)
	return "%s→%s" % (Action(action).name, State(state).name)

class DenseTable(interfaces.TransitionTable):
	"""
	One row per state, one cell per byte: a single index operation per byte decoded.
	This is the default.
	"""
	def __init__(self, rows=TRANSITIONS):
		self.rows = rows

	def transition(self, state: int, byte: int) -> tuple[int, int]:
		return unpack(self.rows[state][byte])

	def display(self):
		grid = [['state', 'bytes', 'action → next state']]
		for state, row in zip(State, self.rows):
			for low, high, cell in pretty.runs(row):
				if cell != INVALID_CELL: grid.append([state.name, pretty.span(low, high), describe(cell)])
		pretty.print_grid(grid)
		print("(Everything else: %s)" % describe(INVALID_CELL))

class CompactTable(interfaces.TransitionTable):
	"""
	The same function as the DenseTable, but each byte is first mapped to one of a
	small number of byte-classes which no state can tell apart. Costs one more index
	operation per byte decoded; saves most of the space.
	"""
	def __init__(self, rows=TRANSITIONS):
		compact = compaction.compress_transitions(rows)
		self.classes = bytes(compact['classes'])
		self.delta = tuple(bytes(row) for row in compact['delta'])

	def cardinality(self) -> int: return len(self.delta[0])

	def classify(self, byte: int) -> int: return self.classes[byte]

	def transition(self, state: int, byte: int) -> tuple[int, int]:
		return unpack(self.delta[state][self.classes[byte]])

	def display(self):
		pretty.print_grid([
			['class', *range(self.cardinality())],
			['bytes', *(
				' '.join(pretty.span(low, high) for low, high, c in pretty.runs(self.classes) if c == k)
				for k in range(self.cardinality())
			)],
		])
		pretty.print_grid([['state', *range(self.cardinality())]] + [
			[state.name, *(describe(cell) for cell in row)] for state, row in zip(State, self.delta)
		])

DENSE = DenseTable()

def display(table: interfaces.TransitionTable = DENSE):
	table.display()
