"""
A grammar for a tiny template language whose raw-text chunks are recognized by an external scanner.
External tokens don't exist among the rules, so the externals function gets an unchecked resolver.
Once declared, the external names are as good as rules everywhere else.
"""

from ruledsl.dsl import *

def sep1(rule, separator):
	return seq(rule, repeat(seq(separator, rule)))

templated = grammar(
	name='templated',
	externals=lambda g: [g.raw_text, g._interpolation_start, g.error_sentinel],
	extras=lambda g: [],
	rules={
		'template': lambda g: repeat(choice(g.raw_text, g.interpolation)),
		'interpolation': lambda g: seq(alias(g._interpolation_start, '{{'), g.expression, '}}'),
		'expression': lambda g: sep1(g.name, token.immediate('.')),
		'name': lambda: pattern(r'\p{L}+'),
	},
)

if __name__ == '__main__':
	print(templated.as_json(indent=2))
