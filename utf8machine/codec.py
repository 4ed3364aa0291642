"""
A (maybe) convenient interface to the most common use cases:
decoding a whole byte string, checking one for validity, and plugging
into Python's own incremental codec machinery.
"""

import codecs

from .support.interfaces import InvalidSequence, Receiver
from .support.failureprone import ByteText
from .automaton.parser import Parser
from .receivers import TextReceiver

def _drive(parser:Parser, receiver:TextReceiver, data, start=0):
	for position, byte in enumerate(data, start):
		receiver.position = position
		parser.advance(receiver, byte)

def decode(data, errors='strict', *, table=None, filename=None) -> str:
	"""
	Decode a complete byte string. An unfinished sequence at the end counts as one invalid sequence.
	In strict mode, the exception carries a picture of the offending neighborhood.
	"""
	data = bytes(data)
	parser, receiver = Parser(table), TextReceiver(errors)
	try:
		_drive(parser, receiver, data)
		receiver.position = len(data)
		parser.finish(receiver)
	except InvalidSequence as ex:
		picture = ByteText(data, filename).complaint(ex.position, "invalid UTF-8 sequence")
		raise InvalidSequence(ex.position, picture) from None
	return receiver.take()

class _Validator(Receiver):
	def __init__(self): self.ok = True
	def codepoint(self, value): pass
	def invalid_sequence(self): self.ok = False

def is_valid(data, *, table=None) -> bool:
	parser, validator = Parser(table), _Validator()
	parser.advance_all(validator, data)
	parser.finish(validator)
	return validator.ok

class IncrementalDecoder(codecs.IncrementalDecoder):
	"""
	Fits the standard `codecs.IncrementalDecoder` protocol. Since nothing is ever
	buffered, the "buffered input" part of `getstate()` is always empty, and the
	automaton's own state travels in the integer part.

	In strict mode a malformed byte raises InvalidSequence, which is a ValueError but
	NOT a UnicodeDecodeError: catch ValueError to handle both this and Python's own codec.
	After such an error, text decoded earlier in the same call is discarded and decoding
	may continue with the byte after the culprit.
	"""
	def __init__(self, errors='strict'):
		super().__init__(errors)
		self.__parser = Parser()
		self.__receiver = TextReceiver(errors)
		self.__consumed = 0

	def decode(self, input, final=False):
		try:
			_drive(self.__parser, self.__receiver, input, self.__consumed)
		except InvalidSequence as ex:
			self.__receiver.take()
			self.__consumed = ex.position + 1
			raise
		self.__consumed += len(input)
		if final:
			self.__receiver.position = self.__consumed
			try: self.__parser.finish(self.__receiver)
			except InvalidSequence:
				self.__receiver.take()
				raise
		return self.__receiver.take()

	def reset(self):
		self.__parser.reset()
		self.__receiver.take()
		self.__consumed = 0

	def getstate(self):
		return b'', self.__parser.getstate()

	def setstate(self, state):
		buffered, flag = state
		self.__parser.setstate(flag)
