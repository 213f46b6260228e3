""" JSON is JavaScript Object Notation. See http://www.json.org/ for more.
This is a worked example of a complete (if small) grammar description. """

import re
from ruledsl.dsl import *

def comma_separated(rule):
	""" Zero or more, with commas in between. Helper functions like this are just Python. """
	return optional(seq(rule, repeat(seq(',', rule))))

json_grammar = grammar(
	name='json',
	rules={
		'document': lambda g: g._value,
		
		# Names starting with an underscore are conventionally "hidden" downstream.
		'_value': lambda g: choice(g.object, g.array, g.number, g.string, g.true, g.false, g.null),
		
		'object': lambda g: seq('{', comma_separated(g.pair), '}'),
		'pair': lambda g: seq(g.string, ':', g._value),
		'array': lambda g: seq('[', comma_separated(g._value), ']'),
		
		# Strings are tokens, but escape sequences get their own identity.
		'string': lambda g: seq('"', repeat(choice(token.immediate(re.compile(r'[^\\"\n]+')), g.escape_sequence)), '"'),
		'escape_sequence': lambda: token.immediate(seq('\\', re.compile(r'(\"|\\|\/|b|n|r|f|t|u[0-9a-fA-F]{4})'))),
		
		'number': lambda: token(seq(
			optional('-'),
			choice('0', re.compile(r'[1-9]\d*')),
			optional(re.compile(r'\.\d+')),
			optional(re.compile(r'[eE][-+]?\d+')),
		)),
		'true': lambda: 'true',
		'false': lambda: 'false',
		'null': lambda: 'null',
	},
)

if __name__ == '__main__':
	json_grammar.display()
	print(json_grammar.as_json(indent=2))
