"""
The closed vocabulary of the UTF-8 automaton: its states, its actions, and the
one-byte cell format that pairs them in the transition table.
"""

import enum

@enum.unique
class State(enum.IntEnum):
	GROUND = 0
	AFTER_E0 = 1 # Three-byte lead E0: next byte must be A0..BF, or else the sequence is overlong.
	AFTER_ED = 2 # Three-byte lead ED: next byte must be 80..9F, or else it encodes a surrogate.
	AFTER_F0 = 3 # Four-byte lead F0: next byte must be 90..BF, or else the sequence is overlong.
	AFTER_F4 = 4 # Four-byte lead F4: next byte must be 80..8F, or else it exceeds U+10FFFF.
	TAIL_1 = 5
	TAIL_2 = 6
	TAIL_3 = 7
	DEAD_END = 8 # Two-byte lead C0 or C1: always overlong. The next byte, whatever it is, is consumed as invalid.

@enum.unique
class Action(enum.IntEnum):
	EMIT_BYTE = 0
	SET_BYTE1 = 1
	SET_BYTE2 = 2
	SET_BYTE2_TOP = 3
	SET_BYTE3 = 4
	SET_BYTE3_TOP = 5
	SET_BYTE4 = 6
	INVALID_SEQUENCE = 7

CONTINUATION_MASK = 0b0011_1111

# For each accumulating action: which data bits of the byte to keep, and where they go.
SCATTER = {
	Action.SET_BYTE1: (CONTINUATION_MASK, 0),
	Action.SET_BYTE2: (CONTINUATION_MASK, 6),
	Action.SET_BYTE2_TOP: (0b0001_1111, 6),
	Action.SET_BYTE3: (CONTINUATION_MASK, 12),
	Action.SET_BYTE3_TOP: (0b0000_1111, 12),
	Action.SET_BYTE4: (0b0000_0111, 18),
}

STATE_BITS = 4
STATE_MASK = (1 << STATE_BITS) - 1

def pack(state:State, action:Action) -> int:
	""" A table cell is one byte: action in the high nybble, next state in the low. """
	return action << STATE_BITS | state

def unpack(cell:int) -> tuple[int, int]:
	return cell & STATE_MASK, cell >> STATE_BITS

INVALID_CELL = pack(State.GROUND, Action.INVALID_SEQUENCE)
