"""
The author-facing vocabulary for writing grammars.

	import re
	from ruledsl.dsl import *

	calc = grammar(
		name='calc',
		rules={
			'expr': lambda g: choice(g.sum, g.number),
			'sum': lambda g: prec.left(1, seq(g.expr, '+', g.expr)),
			'number': lambda g: re.compile(r'\\d+'),
		},
	)

Every constructor here is a pure function returning a fresh rule node. Operands go
through the normalizer, so anywhere a rule is expected you may write plain text
(a literal string), a compiled regular expression (a pattern), a symbol from the
resolver, or another node.
"""

__all__ = [
	'alias', 'blank', 'choice', 'optional', 'prec', 'repeat', 'repeat1', 'seq', 'sym', 'token',
	'pattern', 'grammar',
]

from . import nodes
from .interface import InvalidAlias
from .normalize import normalize, PatternSource
from .symbols import Unresolved
from .grammar import grammar

def alias(rule, value) -> nodes.Alias:
	"""
	Report the content under some other identity. Plain text makes an anonymous alias.
	A symbol (even one the grammar doesn't define) makes a named alias.
	"""
	content = normalize(rule)
	if isinstance(value, str):
		return nodes.Alias(content, False, value)
	if isinstance(value, (Unresolved, nodes.Symbol)):
		return nodes.Alias(content, True, value.name)
	if isinstance(value, dict) and value.get('type') == nodes.Symbol.TAG and isinstance(value.get('name'), str):
		return nodes.Alias(content, True, value['name'])
	raise InvalidAlias("Invalid alias value %r"%(value,))

def blank() -> nodes.Blank:
	return nodes.Blank()

def choice(*elements) -> nodes.Choice:
	return nodes.Choice(tuple(map(normalize, elements)))

def optional(value) -> nodes.Choice:
	return choice(value, blank())

def prec(number, rule=None) -> nodes.Prec:
	""" Call as prec(number, rule) or just prec(rule), which means precedence zero. """
	if rule is None: number, rule = 0, number
	return nodes.Prec(number, normalize(rule))

def prec_left(number, rule=None) -> nodes.PrecLeft:
	if rule is None: number, rule = 0, number
	return nodes.PrecLeft(number, normalize(rule))

def prec_right(number, rule=None) -> nodes.PrecRight:
	if rule is None: number, rule = 0, number
	return nodes.PrecRight(number, normalize(rule))

def prec_dynamic(number, rule) -> nodes.PrecDynamic:
	""" No implicit zero here: dynamic precedence must be explicit. """
	return nodes.PrecDynamic(number, normalize(rule))

prec.left = prec_left
prec.right = prec_right
prec.dynamic = prec_dynamic

def repeat(rule) -> nodes.Repeat:
	return nodes.Repeat(normalize(rule))

def repeat1(rule) -> nodes.Repeat1:
	return nodes.Repeat1(normalize(rule))

def seq(*elements) -> nodes.Seq:
	return nodes.Seq(tuple(map(normalize, elements)))

def sym(name:str) -> nodes.Symbol:
	return nodes.Symbol(name)

def token(value) -> nodes.Token:
	return nodes.Token(normalize(value))

def token_immediate(value) -> nodes.ImmediateToken:
	return nodes.ImmediateToken(normalize(value))

token.immediate = token_immediate

def pattern(source:str) -> PatternSource:
	""" A pattern given as source text, for syntax Python's `re` can't compile. """
	return PatternSource(source)
