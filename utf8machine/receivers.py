"""
Stock receivers. Most consumers want one of a few things out of a decoder:
to call some functions, to assemble a string, or (when testing and debugging)
to see exactly what happened in what order.
"""

from typing import Callable, Optional

from .support.interfaces import Receiver, InvalidSequence, CodePoint

REPLACEMENT_CHARACTER = 0xFFFD
ERROR_POLICIES = ('strict', 'replace', 'ignore')

class FunctionReceiver(Receiver):
	""" Adapt a pair of callables. If `on_invalid` is not given, invalid sequences are ignored. """
	def __init__(self, on_codepoint:Callable[[CodePoint], None], on_invalid:Optional[Callable[[], None]]=None):
		self.codepoint = on_codepoint
		if on_invalid is not None: self.invalid_sequence = on_invalid

	def codepoint(self, value: CodePoint): pass
	def invalid_sequence(self): pass

class TextReceiver(Receiver):
	"""
	Assemble decoded codepoints into a string, dealing with invalid sequences
	according to the chosen policy, with the same names Python's codecs use:
		'strict' raises InvalidSequence,
		'replace' inserts U+FFFD once per invalid sequence, and
		'ignore' does what it says.
	Whoever drives the parser should keep `position` current if they want
	a meaningful offset in the exception.
	"""
	def __init__(self, errors='strict'):
		if errors not in ERROR_POLICIES: raise ValueError("Unknown error policy %r; expected one of %r" % (errors, ERROR_POLICIES))
		self.errors = errors
		self.position = None
		self.__chars = []

	def codepoint(self, value: CodePoint):
		self.__chars.append(chr(value))

	def invalid_sequence(self):
		if self.errors == 'strict': raise InvalidSequence(self.position)
		elif self.errors == 'replace': self.__chars.append(chr(REPLACEMENT_CHARACTER))

	def take(self) -> str:
		""" Return the text assembled so far, and start afresh. """
		text = ''.join(self.__chars)
		self.__chars.clear()
		return text

class EventReceiver(Receiver):
	""" Record everything, in order, as ('codepoint', value) and ('invalid', None) pairs. """
	def __init__(self):
		self.events = []

	def codepoint(self, value: CodePoint): self.events.append(('codepoint', value))
	def invalid_sequence(self): self.events.append(('invalid', None))

	def codepoints(self): return [value for kind, value in self.events if kind == 'codepoint']
	def invalid_count(self): return sum(kind == 'invalid' for kind, value in self.events)
