"""
A table-driven UTF-8 parser.

Push bytes in one at a time with `advance`, and the parser pushes codepoints (or
complaints) out to a receiver. The only decision made per byte is which action to
perform; which action applies, and whether the byte is even legal here, the table
already knows. Nothing is buffered: the whole of the parser's memory is one small
state number and an accumulator of at most 21 bits.
"""

from ..support.interfaces import Receiver, TransitionTable, AutomatonDefect, CodePoint
from .vocabulary import State, Action, SCATTER, STATE_BITS, STATE_MASK
from . import table as _table

MAX_CODEPOINT = 0x10FFFF
SURROGATES = range(0xD800, 0xE000)
MAX_ACCUMULATOR = (1 << 21) - 1

def scalar_value(point:int) -> CodePoint:
	""" Checked conversion: the table should make failure here impossible. """
	if point > MAX_CODEPOINT or point in SURROGATES:
		raise AutomatonDefect("Transition table emitted U+%04X, which is not a Unicode scalar value." % point)
	return point

class Parser:
	"""
	Repeatedly call `advance` with bytes to emit codepoints.

	Each call does exactly one of three things: nothing visible (a byte was absorbed
	into a sequence in progress), one `receiver.codepoint(...)`, or one
	`receiver.invalid_sequence()`. A byte which triggers the latter is consumed:
	decoding resumes from GROUND with the byte after it.
	"""

	def __init__(self, table:TransitionTable=None):
		self.__table = table or _table.DENSE
		self.__point = 0
		self.__state = State.GROUND

	@property
	def state(self) -> State: return State(self.__state)

	@property
	def accumulator(self) -> int: return self.__point

	def is_ground(self) -> bool: return self.__state == State.GROUND

	def advance(self, receiver:Receiver, byte:int):
		state, action = self.__table.transition(self.__state, byte)
		self.__state = state # Settled before the receiver hears anything.
		self.__perform_action(receiver, byte, action)

	def __perform_action(self, receiver:Receiver, byte:int, action:int):
		if action == Action.EMIT_BYTE:
			receiver.codepoint(byte)
		elif action == Action.INVALID_SEQUENCE:
			self.__point = 0
			receiver.invalid_sequence()
		elif action == Action.SET_BYTE1:
			point = scalar_value(self.__point | (byte & SCATTER[Action.SET_BYTE1][0]))
			self.__point = 0
			receiver.codepoint(point)
		else:
			mask, shift = SCATTER[action]
			self.__point |= (byte & mask) << shift

	def advance_all(self, receiver:Receiver, data):
		""" Advance over each byte of a bytes-like object (or any iterable of small ints), in order. """
		for byte in data: self.advance(receiver, byte)

	def finish(self, receiver:Receiver):
		"""
		Call this at end-of-stream. A sequence still in progress cannot be completed,
		so it gets reported as one invalid sequence and the parser returns to GROUND.
		"""
		if not self.is_ground():
			self.reset()
			receiver.invalid_sequence()

	def reset(self):
		""" Forget any partial sequence, silently. """
		self.__point = 0
		self.__state = State.GROUND

	def getstate(self) -> int:
		""" The parser's complete position as a single integer. """
		return self.__point << STATE_BITS | self.__state

	def setstate(self, flag:int):
		state, point = flag & STATE_MASK, flag >> STATE_BITS
		if state >= len(State) or not 0 <= point <= MAX_ACCUMULATOR or (state == State.GROUND and point):
			raise ValueError("Not a parser state: %r" % flag)
		self.__state = State(state)
		self.__point = point
