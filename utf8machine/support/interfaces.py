"""
This file aggregates the abstract classes and exception types which the decoder deals in.

The decoding algorithm is data-driven, but it should not care about the internal
organization of that data, so long as the proper relevant question may be answered:
"Given this state and this byte, what happens next?" That is the TransitionTable.
This provides the flexibility to plug in different types of compaction (or no
compaction at all) without a complete re-write.

The other half of the story is the Receiver: whoever wants the decoded codepoints.
It is to the decoder what scan-rule bindings are to a scanner.
"""

from abc import ABC, abstractmethod

CodePoint = int

class Utf8Error(ValueError):
	""" Base class of all exceptions a caller may reasonably expect to handle. """

class InvalidSequence(Utf8Error):
	"""
	Raised by consumers which choose a strict policy toward malformed input.
	The decoder itself never raises this: it merely notifies its receiver.
	This is a ValueError, not a UnicodeDecodeError, despite appearances.
	Parameters are:
		the byte offset of the byte that could not extend any valid sequence.
		optionally, a human-readable picture of the neighborhood.
	"""
	def __init__(self, position, picture=None):
		super().__init__(position, picture)
		self.position, self.picture = position, picture

	def __str__(self):
		message = "Invalid UTF-8 sequence at byte offset %d" % self.position
		return message if self.picture is None else message + "\n" + self.picture

class AutomatonDefect(AssertionError):
	"""
	The transition table led to the emission of something that is not a Unicode
	scalar value. That can only mean the table itself is wrong, so this is NOT a
	Utf8Error: nobody should be catching it as part of ordinary input handling.
	"""

class Receiver(ABC):
	"""
	Implement this interface to receive the results of decoding.
	Calls arrive in the same order as the bytes which caused them.
	Do not call back into the same decoder from within these methods.
	"""

	@abstractmethod
	def codepoint(self, value: CodePoint):
		""" A complete and valid Unicode scalar value has been decoded. """

	@abstractmethod
	def invalid_sequence(self):
		""" The most recently consumed byte could not extend or begin any valid sequence. """

class TransitionTable(ABC):
	"""
	A transition table is the decoder's delta function together with its side-effect.
	It is a total function: every state and every byte has an answer.
	"""

	@abstractmethod
	def transition(self, state: int, byte: int) -> tuple[int, int]:
		""" Return the (next_state, action) pair for this state and byte. """

	def display(self):
		""" Pretty-print a suitable representation of the innards of this table. """
		raise NotImplementedError(type(self))
