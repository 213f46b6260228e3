import unittest

from ruledsl import nodes
from ruledsl.interface import InvalidRule

class TestRuleNodes(unittest.TestCase):
	def test_equality_is_kind_sensitive(self):
		content = nodes.String('x')
		self.assertEqual(nodes.Repeat(content), nodes.Repeat(nodes.String('x')))
		self.assertNotEqual(nodes.Repeat(content), nodes.Token(content))
		self.assertNotEqual(nodes.Seq(()), nodes.Choice(()))
		self.assertNotEqual(nodes.String('x'), ('x',))
	
	def test_hashable(self):
		bag = {nodes.Symbol('a'), nodes.Symbol('a'), nodes.String('a')}
		self.assertEqual(2, len(bag))
	
	def test_immutable(self):
		node = nodes.Symbol('a')
		with self.assertRaises(TypeError):
			node.name = 'b'
		with self.assertRaises(TypeError):
			del node.name
		self.assertEqual('a', node.name)
	
	def test_arity_is_checked(self):
		with self.assertRaises(TypeError):
			nodes.Prec(1)
		with self.assertRaises(TypeError):
			nodes.Blank('surprise')
	
	def test_as_data(self):
		node = nodes.Alias(nodes.Seq((nodes.String('x'), nodes.Blank())), True, 'y')
		self.assertEqual({
			'type': 'ALIAS',
			'content': {'type': 'SEQ', 'members': [{'type': 'STRING', 'value': 'x'}, {'type': 'BLANK'}]},
			'named': True,
			'value': 'y',
		}, node.as_data())
		self.assertEqual(['type', 'value', 'content'], list(nodes.PrecLeft(2, nodes.Symbol('e')).as_data()))
	
	def test_from_data_rebuilds_the_tree(self):
		node = nodes.Choice((
			nodes.PrecDynamic(-1, nodes.Repeat1(nodes.Pattern('[a-z]'))),
			nodes.ImmediateToken(nodes.Symbol('s')),
		))
		self.assertEqual(node, nodes.from_data(node.as_data()))
	
	def test_from_data_rejects_junk(self):
		with self.assertRaises(InvalidRule):
			nodes.from_data({'type': 'NONSENSE'})
		with self.assertRaises(InvalidRule):
			nodes.from_data({'type': 'REPEAT'})
		with self.assertRaises(InvalidRule):
			nodes.from_data({'type': 'SEQ', 'members': 'abc'})
		with self.assertRaises(InvalidRule):
			nodes.from_data(42)
	
	def test_every_kind_is_registered(self):
		self.assertEqual(15, len(nodes.KINDS))
		for tag, kind in nodes.KINDS.items():
			self.assertEqual(tag, kind.TAG)


if __name__ == '__main__':
	unittest.main()
