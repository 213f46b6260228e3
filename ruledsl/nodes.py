"""
Rule nodes: the canonical tree form of a grammar rule.

Every construct a grammar author can express comes out as one of a small, closed family
of node types. Each node type has a "tag" (the name the downstream table generator knows
it by) and a fixed tuple of fields. Nodes are immutable once built, and compare equal
exactly when they are of the same kind with equal fields. (That's why these are not simply
NamedTuples: a `Repeat` and a `Token` around the same content must not compare equal.)

The wire form is plain data: `node.as_data()` gives a dictionary with a "type" entry holding
the tag, followed by the fields in a fixed order. `from_data(...)` goes the other way,
which means a grammar descriptor written out as JSON may come back in as the base for
some extension.
"""

from typing import Union
from .interface import InvalidRule

class RuleNode:
	"""
	Base class of all rule nodes. It's somewhere between a dataclass and a namedtuple.
	Subclasses declare `TAG` and their fields in `__slots__`, in wire order.
	"""
	TAG: str
	__slots__ = ()

	def __init__(self, *args):
		if len(args) != len(self.__slots__):
			raise TypeError("%s takes %d arguments but got %d"%(type(self).__name__, len(self.__slots__), len(args)))
		for field, value in zip(self.__slots__, args):
			object.__setattr__(self, field, value)

	def __setattr__(self, key, value): raise TypeError("%s is immutable"%type(self).__name__)
	def __delattr__(self, item): raise TypeError("%s is immutable"%type(self).__name__)

	def __iter__(self):
		return (getattr(self, s) for s in self.__slots__)

	def __eq__(self, other):
		if type(self) is not type(other): return NotImplemented
		return tuple(self) == tuple(other)

	def __hash__(self):
		return hash((self.TAG, *self))

	def __repr__(self):
		return "%s(%s)"%(type(self).__name__, ", ".join(map(repr, self)))

	def __str__(self):
		from .pretty import render
		return render(self)

	def as_data(self) -> dict:
		""" Plain-data (JSON-ready) rendition of this node and everything under it. """
		data = {'type': self.TAG}
		for field, value in zip(self.__slots__, self):
			if isinstance(value, RuleNode): value = value.as_data()
			elif isinstance(value, tuple): value = [m.as_data() for m in value]
			data[field] = value
		return data

class Blank(RuleNode):
	""" Matches the empty string. """
	TAG = 'BLANK'
	__slots__ = ()

class String(RuleNode):
	TAG = 'STRING'
	__slots__ = ('value',)

class Pattern(RuleNode):
	""" The value is regular-expression source text, already escape-decoded. """
	TAG = 'PATTERN'
	__slots__ = ('value',)

class Symbol(RuleNode):
	TAG = 'SYMBOL'
	__slots__ = ('name',)

class Seq(RuleNode):
	TAG = 'SEQ'
	__slots__ = ('members',)

class Choice(RuleNode):
	""" Order of members is significant: it's the tie-break order downstream. """
	TAG = 'CHOICE'
	__slots__ = ('members',)

class Repeat(RuleNode):
	TAG = 'REPEAT'
	__slots__ = ('content',)

class Repeat1(RuleNode):
	TAG = 'REPEAT1'
	__slots__ = ('content',)

class Token(RuleNode):
	TAG = 'TOKEN'
	__slots__ = ('content',)

class ImmediateToken(RuleNode):
	""" Like a token, but no extras may come between it and whatever precedes it. """
	TAG = 'IMMEDIATE_TOKEN'
	__slots__ = ('content',)

class Prec(RuleNode):
	TAG = 'PREC'
	__slots__ = ('value', 'content')

class PrecLeft(RuleNode):
	TAG = 'PREC_LEFT'
	__slots__ = ('value', 'content')

class PrecRight(RuleNode):
	TAG = 'PREC_RIGHT'
	__slots__ = ('value', 'content')

class PrecDynamic(RuleNode):
	TAG = 'PREC_DYNAMIC'
	__slots__ = ('value', 'content')

class Alias(RuleNode):
	"""
	Changes how the content is reported. If `named` is true, the `value` is the name of
	a (possibly imaginary) named rule; otherwise it's literal text.
	"""
	TAG = 'ALIAS'
	__slots__ = ('content', 'named', 'value')

KINDS = {kind.TAG: kind for kind in (
	Blank, String, Pattern, Symbol, Seq, Choice, Repeat, Repeat1, Token, ImmediateToken,
	Prec, PrecLeft, PrecRight, PrecDynamic, Alias,
)}

def is_tagged(data) -> bool:
	""" Does this plain-data value carry a recognized kind tag? """
	return isinstance(data, dict) and isinstance(data.get('type'), str) and data['type'] in KINDS

def from_data(data:Union[dict, RuleNode]) -> RuleNode:
	""" Rebuild a node (and everything under it) from its plain-data rendition. """
	if isinstance(data, RuleNode): return data
	if not is_tagged(data): raise InvalidRule("Invalid rule: %r"%(data,))
	kind = KINDS[data['type']]
	args = []
	for field in kind.__slots__:
		try: value = data[field]
		except KeyError: raise InvalidRule("%s node is missing its %r field: %r"%(kind.TAG, field, data)) from None
		if field == 'content': value = from_data(value)
		elif field == 'members':
			if not isinstance(value, (list, tuple)): raise InvalidRule("%s members must be a list: %r"%(kind.TAG, data))
			value = tuple(map(from_data, value))
		args.append(value)
	return kind(*args)
