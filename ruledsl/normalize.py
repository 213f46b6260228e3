"""
The value normalizer turns whatever an author wrote in a rule position into a proper rule node.

Authors write plain text for literal strings, compiled regular expressions (or `PatternSource`
objects, for syntax Python's `re` module won't compile) for patterns, symbols obtained from
the resolver, and nodes built by the constructor functions. This module is where all of those
converge on the canonical node types.

It's also where a deferred symbol fault finally goes off: the resolver hands back an
`Unresolved` value for names it doesn't know, and that value only becomes an exception
when something tries to use it as a rule.
"""

import re
from typing import NamedTuple
from . import nodes
from .interface import UndefinedSymbol, InvalidRule
from .symbols import Unresolved

DELIMITER_ESCAPE = re.compile(r'\\/')
UNICODE_ESCAPE = re.compile(r'\\u([0-9a-fA-F]{4})')

class PatternSource(NamedTuple):
	"""
	Regular-expression source text, to be passed along (mostly) uninterpreted.
	Use this for pattern syntax the downstream generator understands but Python's `re` does not,
	such as `\\p{L}`. Compiled `re.Pattern` objects work just as well where Python can compile them.
	"""
	source: str

def decode_pattern(source:str) -> str:
	"""
	Two passes, in this order: First unescape any escaped slashes. Then decode any
	four-hex-digit unicode escapes into the corresponding literal characters.
	"""
	source = DELIMITER_ESCAPE.sub('/', source)
	return UNICODE_ESCAPE.sub(lambda m: chr(int(m.group(1), 16)), source)

def normalize(value) -> nodes.RuleNode:
	""" Canonicalize an author-supplied value as a rule node, or raise the appropriate exception. """
	if value is None:
		raise UndefinedSymbol("Undefined symbol")
	if isinstance(value, str):
		return nodes.String(value)
	if isinstance(value, re.Pattern) and isinstance(value.pattern, str):
		return nodes.Pattern(decode_pattern(value.pattern))
	if isinstance(value, PatternSource):
		return nodes.Pattern(decode_pattern(value.source))
	if isinstance(value, Unresolved):
		raise value.fault
	if isinstance(value, nodes.RuleNode):
		return value
	if nodes.is_tagged(value):
		return nodes.from_data(value)
	raise InvalidRule("Invalid rule: %r"%(value,))
