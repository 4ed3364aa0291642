import unittest
import io
import contextlib

from utf8machine.support import failureprone, pretty
from utf8machine.support.interfaces import InvalidSequence, Receiver
from utf8machine.receivers import FunctionReceiver, TextReceiver, EventReceiver


class TestFailureProne(unittest.TestCase):
	def test_00_caret_lines_up(self):
		picture = failureprone.illustration(b'abc\xffdef', 3)
		top, bottom = picture.split('\n')
		self.assertEqual(top.index('ff'), bottom.index('^^'))
		self.assertIn('|abc.def|', top)
		self.assertTrue(bottom.endswith('^^ here'))

	def test_01_window_is_bounded(self):
		data = bytes(range(0x41, 0x41 + 26)) * 4
		picture = failureprone.illustration(data, 50)
		top, bottom = picture.split('\n')
		self.assertTrue(top.startswith('%08x: ' % (50 - failureprone.WINDOW)))
		self.assertEqual(top.index('%02x' % data[50], len('00000000: ')), bottom.index('^'))

	def test_02_complaint(self):
		text = failureprone.ByteText(b'\xe2\x82', filename='x.txt').complaint(2, 'truncated')
		self.assertTrue(text.startswith('x.txt: byte offset 2: truncated'))

	def test_03_complain_goes_to_stderr(self):
		err = io.StringIO()
		with contextlib.redirect_stderr(err):
			failureprone.ByteText(b'\xff').complain(0, 'bad byte')
		self.assertIn('At byte offset 0: bad byte', err.getvalue())


class TestPretty(unittest.TestCase):
	def test_00_runs(self):
		self.assertEqual([(0, 1, 1), (2, 4, 2), (5, 5, 1)], list(pretty.runs([1, 1, 2, 2, 2, 1])))
		self.assertEqual([], list(pretty.runs([])))

	def test_01_span(self):
		self.assertEqual('7F', pretty.span(0x7F, 0x7F))
		self.assertEqual('C2..DF', pretty.span(0xC2, 0xDF))

	def test_02_print_grid(self):
		out = io.StringIO()
		pretty.print_grid([['a', 'bb'], ['ccc', 'd']], file=out)
		lines = out.getvalue().splitlines()
		self.assertEqual(5, len(lines))
		self.assertIn('ccc │ d', lines[3])


class TestReceivers(unittest.TestCase):
	def test_00_function_receiver(self):
		seen, bad = [], []
		r = FunctionReceiver(seen.append, lambda: bad.append(True))
		self.assertIsInstance(r, Receiver)
		r.codepoint(65)
		r.invalid_sequence()
		self.assertEqual([65], seen)
		self.assertEqual([True], bad)

	def test_01_function_receiver_ignores_by_default(self):
		seen = []
		r = FunctionReceiver(seen.append)
		r.invalid_sequence()
		self.assertEqual([], seen)

	def test_02_text_receiver(self):
		r = TextReceiver('replace')
		r.codepoint(0x20AC)
		r.invalid_sequence()
		self.assertEqual('€�', r.take())
		self.assertEqual('', r.take())

	def test_03_text_receiver_strict(self):
		r = TextReceiver()
		r.position = 7
		with self.assertRaises(InvalidSequence) as cm: r.invalid_sequence()
		self.assertEqual(7, cm.exception.position)

	def test_04_receiver_is_abstract(self):
		with self.assertRaises(TypeError): Receiver()

	def test_05_event_receiver(self):
		r = EventReceiver()
		r.codepoint(1)
		r.invalid_sequence()
		self.assertEqual([1], r.codepoints())
		self.assertEqual(1, r.invalid_count())


if __name__ == '__main__':
	unittest.main()
