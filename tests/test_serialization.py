import json
import re
import unittest

from ruledsl import nodes
from ruledsl.dsl import alias, choice, prec, repeat, seq, token, grammar
from ruledsl.grammar import Grammar
from ruledsl.interface import DefinitionError, InvalidRule

def sample() -> Grammar:
	return grammar(
		name='sample',
		word=lambda g: g.word,
		externals=lambda g: [g.heredoc],
		extras=lambda g: [re.compile(r'\s'), g.comment],
		conflicts=lambda g: [[g.expr, g.call]],
		inline=lambda g: [g.call],
		rules={
			'expr': lambda g: choice(g.call, g.word, g.heredoc),
			'call': lambda g: prec.left(2, seq(g.expr, '(', repeat(g.expr), ')')),
			'word': lambda: re.compile(r'[a-z]\/+'),
			'comment': lambda: token(seq('//', re.compile('.*'))),
			'renamed': lambda g: alias(g.word, g.identifier),
		},
	)

class TestWireFormat(unittest.TestCase):
	def test_top_level_shape(self):
		data = sample().as_data()
		self.assertEqual(['name', 'word', 'rules', 'extras', 'conflicts', 'externals', 'inline'], list(data))
		self.assertEqual('sample', data['name'])
		self.assertEqual('word', data['word'])
		self.assertEqual([['expr', 'call']], data['conflicts'])
		self.assertEqual(['call'], data['inline'])
		self.assertEqual([{'type': 'SYMBOL', 'name': 'heredoc'}], data['externals'])
		self.assertEqual({'type': 'PATTERN', 'value': '[a-z]/+'}, data['rules']['word'])
		self.assertEqual({'type': 'ALIAS', 'content': {'type': 'SYMBOL', 'name': 'word'}, 'named': True, 'value': 'identifier'}, data['rules']['renamed'])
	
	def test_unset_word_is_omitted(self):
		data = grammar(name='g', rules={'a': lambda: 'a'}).as_data()
		self.assertNotIn('word', data)
		self.assertEqual([{'type': 'PATTERN', 'value': '\\s'}], data['extras'])
	
	def test_json_is_plain_data(self):
		g = sample()
		self.assertEqual(g.as_data(), json.loads(g.as_json()))
		self.assertIn('\n  ', g.as_json(indent=2))
	
	def test_round_trip(self):
		g = sample()
		self.assertEqual(g, Grammar.from_json(g.as_json()))
	
	def test_loaded_grammar_may_serve_as_base(self):
		base = Grammar.from_data(json.loads(sample().as_json()))
		g = grammar(base, name='more', rules={'expr': lambda g, previous: choice(previous, g.heredoc, 'x')})
		self.assertEqual(nodes.String('x'), g.rules['expr'].members[-1])
		self.assertEqual(base.rules['expr'], g.rules['expr'].members[0])
	
	def test_from_data_checks_shapes(self):
		good = sample().as_data()
		for key, junk in [('name', 'not valid'), ('word', 3), ('rules', {}), ('rules', []), ('inline', [1]), ('conflicts', ['ab']), ('extras', 'x')]:
			with self.subTest(key=key, junk=junk):
				with self.assertRaises(DefinitionError):
					Grammar.from_data({**good, key: junk})
		with self.assertRaises(DefinitionError):
			Grammar.from_data(['not', 'a', 'mapping'])
		with self.assertRaises(InvalidRule):
			Grammar.from_data({**good, 'rules': {'a': {'type': 'WHATEVER'}}})


if __name__ == '__main__':
	unittest.main()
