import unittest
import json

import example.json_grammar, example.arithmetic, example.templated

from ruledsl import nodes

class TestJsonExample(unittest.TestCase):
	def test_shape(self):
		g = example.json_grammar.json_grammar
		self.assertEqual('json', g.name)
		self.assertEqual(nodes.Symbol('_value'), g.rules['document'])
		self.assertEqual(7, len(g.rules['_value'].members))
		self.assertIsInstance(g.rules['number'], nodes.Token)
	
	def test_escaped_slash_is_decoded(self):
		escape = example.json_grammar.json_grammar.rules['escape_sequence']
		self.assertEqual(r'(\"|\\|/|b|n|r|f|t|u[0-9a-fA-F]{4})', escape.content.members[1].value)
	
	def test_serializes(self):
		data = json.loads(example.json_grammar.json_grammar.as_json())
		self.assertEqual('SEQ', data['rules']['object']['type'])


class TestArithmeticExample(unittest.TestCase):
	def test_base(self):
		g = example.arithmetic.arithmetic
		self.assertEqual('identifier', g.word)
		self.assertEqual(('parenthetical',), g.inline)
		plus = g.rules['binary'].members[0]
		self.assertEqual(nodes.PrecLeft, type(plus))
		self.assertEqual(nodes.Alias(nodes.String('+'), False, 'plus'), plus.content.members[1])
	
	def test_extension(self):
		base, g = example.arithmetic.arithmetic, example.arithmetic.extended
		self.assertEqual(base.rules['binary'], g.rules['binary'].members[0])
		self.assertEqual(base.rules['expression'], g.rules['expression'].members[0])
		self.assertEqual(base.extras + (nodes.Symbol('comment'),), g.extras)
		self.assertEqual((('negation', 'binary'),), g.conflicts)
		self.assertEqual(base.word, g.word)
		self.assertEqual(list(base.rules) + ['negation', 'comment'], list(g.rules))


class TestTemplatedExample(unittest.TestCase):
	def test_externals(self):
		g = example.templated.templated
		self.assertEqual(['raw_text', '_interpolation_start', 'error_sentinel'], [e.name for e in g.externals])
		self.assertEqual((), g.extras)
		start = g.rules['interpolation'].members[0]
		self.assertEqual(nodes.Alias(nodes.Symbol('_interpolation_start'), False, '{{'), start)
		self.assertEqual(nodes.Pattern(r'\p{L}+'), g.rules['name'])


if __name__ == '__main__':
	unittest.main()
