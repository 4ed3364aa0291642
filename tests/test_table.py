import unittest
import io
import contextlib

from utf8machine.automaton import table
from utf8machine.automaton.vocabulary import State, Action, pack, unpack, INVALID_CELL
from utf8machine.support import compaction


class TestVocabulary(unittest.TestCase):
	def test_00_pack_unpack(self):
		for state in State:
			for action in Action:
				with self.subTest(state=state, action=action):
					cell = pack(state, action)
					self.assertTrue(0 <= cell < 256)
					self.assertEqual((state, action), unpack(cell))

	def test_01_invalid_cell(self):
		self.assertEqual((State.GROUND, Action.INVALID_SEQUENCE), unpack(INVALID_CELL))


class TestTransitions(unittest.TestCase):
	def check_totality(self, t):
		for state in State:
			for byte in range(256):
				next_state, action = t.transition(state, byte)
				self.assertIn(next_state, list(State))
				self.assertIn(action, list(Action))

	def test_00_dense_table_is_total(self):
		self.assertEqual(len(State), len(table.TRANSITIONS))
		for row in table.TRANSITIONS:
			self.assertIsInstance(row, bytes)
			self.assertEqual(256, len(row))
		self.check_totality(table.DENSE)

	def test_01_every_state_is_reachable(self):
		reached, frontier = {State.GROUND}, [State.GROUND]
		while frontier:
			state = frontier.pop()
			for byte in range(256):
				next_state, action = table.DENSE.transition(state, byte)
				if next_state not in reached:
					reached.add(next_state)
					frontier.append(next_state)
		self.assertEqual(set(State), reached)

	def test_02_invalid_always_returns_to_ground(self):
		for state in State:
			for byte in range(256):
				next_state, action = table.DENSE.transition(state, byte)
				if action == Action.INVALID_SEQUENCE:
					self.assertEqual(State.GROUND, next_state)

	def test_03_restricted_second_bytes(self):
		for state, legal in [
			(State.AFTER_E0, range(0xA0, 0xC0)),
			(State.AFTER_ED, range(0x80, 0xA0)),
			(State.AFTER_F0, range(0x90, 0xC0)),
			(State.AFTER_F4, range(0x80, 0x90)),
			(State.TAIL_1, range(0x80, 0xC0)),
			(State.DEAD_END, range(0)),
		]:
			for byte in range(256):
				with self.subTest(state=state, byte=byte):
					next_state, action = table.DENSE.transition(state, byte)
					self.assertEqual(byte in legal, action != Action.INVALID_SEQUENCE)

	def test_04_ascii(self):
		for byte in range(0x80):
			self.assertEqual((State.GROUND, Action.EMIT_BYTE), table.DENSE.transition(State.GROUND, byte))

	def test_05_compact_table_agrees(self):
		compact = table.CompactTable()
		self.check_totality(compact)
		for state in State:
			for byte in range(256):
				self.assertEqual(table.DENSE.transition(state, byte), compact.transition(state, byte))

	def test_06_compact_byte_classes(self):
		compact = table.CompactTable()
		self.assertEqual(13, compact.cardinality())
		self.assertEqual(compact.classify(0xE1), compact.classify(0xEF))
		self.assertNotEqual(compact.classify(0xEC), compact.classify(0xED))
		self.assertEqual(compact.classify(0xF5), compact.classify(0xFF))

	def test_07_display(self):
		for t, span in [(table.DENSE, '80..BF'), (table.CompactTable(), 'A0..BF')]:
			out = io.StringIO()
			with contextlib.redirect_stdout(out): table.display(t)
			with self.subTest(t=t):
				self.assertIn('TAIL_1', out.getvalue())
				self.assertIn(span, out.getvalue())


class TestCompaction(unittest.TestCase):
	def test_00_column_equivalence(self):
		index, classes = compaction.find_column_equivalence([[1, 2, 1, 2], [3, 4, 3, 5]])
		self.assertEqual([0, 1, 0, 2], index)
		self.assertEqual([(1, 3), (2, 4), (2, 5)], classes)

	def test_01_compress_transitions(self):
		matrix = [[0, 0, 1], [2, 2, 3]]
		self.assertEqual({'classes': [0, 0, 1], 'delta': [[0, 1], [2, 3]]}, compaction.compress_transitions(matrix))

	def test_02_verbose(self):
		err = io.StringIO()
		compaction.VERBOSE = True
		try:
			with contextlib.redirect_stderr(err): compaction.compress_transitions(table.TRANSITIONS)
		finally:
			compaction.VERBOSE = False
		self.assertIn('compact form', err.getvalue())


if __name__ == '__main__':
	unittest.main()
