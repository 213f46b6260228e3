"""
A classic ambiguous expression grammar, disambiguated by precedence annotations,
and then an extension of it which adds exponents, unary minus, and comments.
"""

import re
from ruledsl.dsl import *

arithmetic = grammar(
	name='arithmetic',
	word=lambda g: g.identifier,
	rules={
		'program': lambda g: repeat(g.statement),
		'statement': lambda g: seq(optional(seq(g.identifier, '=')), g.expression, ';'),
		'expression': lambda g: choice(g.binary, g.parenthetical, g.identifier, g.number),
		'binary': lambda g: choice(
			prec.left(1, seq(g.expression, alias('+', 'plus'), g.expression)),
			prec.left(1, seq(g.expression, alias('-', 'minus'), g.expression)),
			prec.left(2, seq(g.expression, '*', g.expression)),
			prec.left(2, seq(g.expression, '/', g.expression)),
		),
		'parenthetical': lambda g: seq('(', g.expression, ')'),
		'identifier': lambda: re.compile(r'[a-zA-Z_]\w*'),
		'number': lambda: re.compile(r'\d+(\.\d+)?'),
	},
	inline=lambda g: [g.parenthetical],
)

extended = grammar(arithmetic, {
	'name': 'extended_arithmetic',
	'extras': lambda g, previous: previous + [g.comment],
	'rules': {
		'binary': lambda g, previous: choice(previous, prec.right(3, seq(g.expression, '^', g.expression))),
		'expression': lambda g, previous: choice(previous, g.negation),
		'negation': lambda g: prec(4, seq('-', g.expression)),
		'comment': lambda: token(seq('#', re.compile(r'.*'))),
	},
	'conflicts': lambda g, previous: previous + [[g.negation, g.binary]],
})

if __name__ == '__main__':
	for each in (arithmetic, extended):
		each.display()
