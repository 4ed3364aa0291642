"""
This module is all about easing over the process to display where things go wrong.

Text has lines and columns; a byte stream that failed to decode as UTF-8 does not,
at least not reliably. So the picture here is a hex-dump excerpt: a window of bytes
around the offending offset, with a caret underneath the culprit. The same window
is rendered to the right as ASCII where that makes sense, which is usually enough
to spot what went wrong (a Latin-1 "é" in the middle of a word, for example).
"""

import sys

WINDOW = 8 # Bytes of context shown on either side of the offending offset.

def printable(b:int) -> str: return chr(b) if 32 <= b < 127 else '.'

def illustration(data:bytes, position:int, width:int=1, *, prefix='', caption="here") -> str:
	""" Builds up a picture of where something appears in a byte string. Useful for polite error messages. """
	left = max(0, position - WINDOW)
	right = min(len(data), position + max(width, 1) + WINDOW)
	window = data[left:right]
	head = prefix + "%08x: " % left
	cells = ' '.join('%02x' % b for b in window)
	underline_width = max(1, min(width, len(data) - position))
	blanks = ' ' * (len(head) + 3 * (position - left))
	underline = '^^' + '^^^' * (underline_width - 1)
	text = ''.join(map(printable, window))
	return head + cells + '  |' + text + '|\n' + blanks + underline + ' ' + caption

class ByteText:
	""" Wrapper for (a section of) undecoded input: participates in half-respectable error-display with context. """
	def __init__(self, content:bytes, filename:str=None):
		self.content = bytes(content)
		self.filename = filename

	def _format_message(self, position, message):
		prefix = "At" if self.filename is None else str(self.filename) + ":"
		return "%s byte offset %d: %s" % (prefix, position, message)

	def complaint(self, position:int, message:str):
		reference = self._format_message(position, message)
		return "%s\n%s" % (reference, illustration(self.content, position, prefix=' >>> '))

	def complain(self, position:int, message:str):
		print(self.complaint(position, message), file=sys.stderr)
