"""
# Grammar Assembly

A grammar descriptor is the finished product of this package: a name, a set of named rules,
and a few lists of hints for the downstream table generator. It is plain data at heart,
and `Grammar.as_data()` / `Grammar.as_json()` give it to you in exactly that form.

The `grammar(...)` function builds one. Either from scratch:

	grammar(name='g', rules={'start': lambda g: seq('a', g.rest), 'rest': lambda: 'b'})

or by extending an existing grammar:

	grammar(base, name='g2', rules={'rest': lambda g, previous: choice(previous, 'c')})

# The extension pattern

Five properties of a grammar may be overridden: rules (individually), extras, conflicts,
inline, and externals. Each override is a function taking the resolver and the base grammar's
value for that property, and returning the new value. So an override can wrap, extend, or
outright replace what came before. A property with no override is simply inherited. The `word`
override is the odd one out: it only receives the resolver.

Definition functions may accept fewer parameters than are offered. If you don't care about
the prior definition, `lambda g: ...` is fine. If you don't need the resolver either, `lambda: ...`
also works.

# Order of operations

It matters. The externals come first, because external token names join the registry of
known names. Then the registry is complete (rule names from the override and the base, plus
external names) and every other definition function gets a resolver backed by it. Any problem
aborts the whole assembly: there is no such thing as a partial grammar descriptor.
"""

import inspect
import json
from types import MappingProxyType
from collections.abc import Mapping
from typing import NamedTuple, Optional, Callable
from . import nodes, pretty
from .interface import IDENTIFIER, DEFAULT_EXTRA_SOURCE, DefinitionError, UndefinedSymbol
from .normalize import normalize, decode_pattern
from .symbols import SymbolResolver, Unresolved

VERBOSE = False

OPTIONS = ('name', 'rules', 'extras', 'word', 'conflicts', 'inline', 'externals')

class Grammar(NamedTuple):
	"""
	An assembled (and therefore valid) grammar descriptor. Treat as immutable:
	the rules mapping is read-only and the various lists are tuples.
	"""
	name: str
	word: Optional[str]
	rules: Mapping[str, nodes.RuleNode]
	extras: tuple
	conflicts: tuple
	externals: tuple
	inline: tuple

	def as_data(self) -> dict:
		""" The wire format. An unset word is left out altogether. """
		data = {'name': self.name}
		if self.word is not None: data['word'] = self.word
		data['rules'] = {name: rule.as_data() for name, rule in self.rules.items()}
		data['extras'] = [e.as_data() for e in self.extras]
		data['conflicts'] = [list(c) for c in self.conflicts]
		data['externals'] = [e.as_data() for e in self.externals]
		data['inline'] = list(self.inline)
		return data

	def as_json(self, indent=None) -> str:
		return json.dumps(self.as_data(), indent=indent)

	@classmethod
	def from_data(cls, data:Mapping) -> "Grammar":
		"""
		Rebuild a descriptor from its wire format, e.g. to use a previously-emitted grammar as a base.
		This checks shapes, but doesn't re-check symbol references: the data is presumed to have come
		out of a successful assembly.
		"""
		if not isinstance(data, Mapping): raise DefinitionError("Grammar data must be a mapping.")
		name, word = data.get('name'), data.get('word')
		if not (isinstance(name, str) and IDENTIFIER.match(name)):
			raise DefinitionError("Grammar data has an invalid name %r."%(name,))
		if not (word is None or isinstance(word, str)):
			raise DefinitionError("Grammar data has an invalid word %r."%(word,))
		rules = data.get('rules')
		if not isinstance(rules, Mapping) or not rules:
			raise DefinitionError("Grammar data must have at least one rule.")
		conflicts = _names_table(data.get('conflicts', ()), 'conflicts')
		inline = _names(data.get('inline', ()), 'inline')
		return cls(
			name=name,
			word=word,
			rules=MappingProxyType({k: nodes.from_data(v) for k, v in rules.items()}),
			extras=tuple(map(nodes.from_data, _list(data.get('extras', ()), 'extras'))),
			conflicts=tuple(map(tuple, conflicts)),
			externals=tuple(map(nodes.from_data, _list(data.get('externals', ()), 'externals'))),
			inline=tuple(inline),
		)

	@classmethod
	def from_json(cls, text:str) -> "Grammar":
		return cls.from_data(json.loads(text))

	def display(self):
		""" Pretty-print the rules in a grid on STDOUT. """
		head = ['Rule', 'Kind', 'Definition']
		body = [[name, rule.TAG, pretty.render(rule)] for name, rule in self.rules.items()]
		print("Grammar %s%s"%(self.name, '' if self.word is None else ' (word: %s)'%self.word))
		pretty.print_grid([head] + body)

def _list(value, what) -> list:
	if not isinstance(value, (list, tuple)): raise DefinitionError("Grammar data's %r must be a list."%what)
	return list(value)

def _names(value, what) -> list:
	names = _list(value, what)
	if not all(isinstance(n, str) for n in names): raise DefinitionError("Grammar data's %r must list rule names."%what)
	return names

def _names_table(value, what) -> list:
	return [_names(row, what) for row in _list(value, what)]

EMPTY = Grammar(
	name=None,
	word=None,
	rules=MappingProxyType({}),
	extras=(nodes.Pattern(decode_pattern(DEFAULT_EXTRA_SOURCE)),),
	conflicts=(),
	externals=(),
	inline=(),
)

def _invoke(fn:Callable, *args):
	"""
	Call a definition function with as many of the offered positional arguments as it accepts.
	Authors are free to leave off parameters they don't need.
	"""
	try: signature = inspect.signature(fn)
	except (TypeError, ValueError): return fn(*args)
	arity = 0
	for p in signature.parameters.values():
		if p.kind == p.VAR_POSITIONAL: return fn(*args)
		if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD): arity += 1
	return fn(*args[:arity])

def _rule_list(value, complaint) -> list:
	""" Override results must be real lists or tuples. A lone symbol or pattern is not a list of one. """
	if isinstance(value, Unresolved): raise value.fault
	if type(value) not in (list, tuple): raise DefinitionError(complaint)
	return list(value)

def _symbol_name(value, complaint) -> str:
	""" Conflicts, inline, and word entries must come down to symbols. Only the name is kept. """
	if isinstance(value, Unresolved): raise value.fault
	if isinstance(value, nodes.Symbol): return value.name
	raise DefinitionError(complaint)

def _must_be_function(options, key):
	if key in options and not callable(options[key]):
		raise DefinitionError("Grammar's %r property must be a function."%key)

def _unpack_arguments(base, options, kwargs):
	""" Sort out the several ways to call `grammar(...)`. """
	if options is None and base is not None and not isinstance(base, Grammar):
		base, options = None, base
	if base is None: base = EMPTY
	elif not isinstance(base, Grammar):
		raise DefinitionError("A base grammar must be a Grammar, not %r."%(base,))
	if options is None: options = {}
	elif not isinstance(options, Mapping):
		raise DefinitionError("Grammar options must be a mapping, not %r."%(options,))
	options = {key: value for key, value in {**options, **kwargs}.items() if value is not None}
	unknown = sorted(set(options) - set(OPTIONS))
	if unknown: raise DefinitionError("Unknown grammar option(s): %s."%', '.join(map(repr, unknown)))
	return base, options

def grammar(base:Optional[Grammar]=None, options:Optional[Mapping]=None, **kwargs) -> Grammar:
	"""
	Assemble a grammar descriptor, optionally extending a base grammar.
	Call as grammar(options), grammar(base, options), or use keyword arguments for the options.
	"""
	base, options = _unpack_arguments(base, options, kwargs)
	for key in ('externals', 'extras', 'word', 'conflicts', 'inline'):
		_must_be_function(options, key)

	name = options.get('name')
	if not isinstance(name, str):
		raise DefinitionError("Grammar's 'name' property must be a string.")
	if not IDENTIFIER.match(name):
		raise DefinitionError("Grammar's 'name' property must not start with a digit and cannot contain non-word characters.")

	new_rules = options.get('rules', {})
	if not isinstance(new_rules, Mapping):
		raise DefinitionError("Grammar's 'rules' property must be a mapping.")
	for rule_name, fn in new_rules.items():
		if not callable(fn):
			raise DefinitionError("Grammar rules must all be functions. %r rule is not."%rule_name)

	externals = base.externals
	if 'externals' in options:
		external_rules = _invoke(options['externals'], SymbolResolver(), list(base.externals))
		externals = tuple(map(normalize, _rule_list(external_rules, "Grammar's 'externals' property must return a list of rules.")))

	registry = set(new_rules) | set(base.rules)
	registry.update(e.name for e in externals if isinstance(e, nodes.Symbol))
	resolver = SymbolResolver(registry)

	rules = dict(base.rules)
	for rule_name, fn in new_rules.items():
		rules[rule_name] = normalize(_invoke(fn, resolver, base.rules.get(rule_name)))

	extras = base.extras
	if 'extras' in options:
		extra_rules = _invoke(options['extras'], resolver, list(base.extras))
		extras = tuple(map(normalize, _rule_list(extra_rules, "Grammar's 'extras' property must return a list of rules.")))

	word = base.word
	if 'word' in options:
		word = _symbol_name(_invoke(options['word'], resolver), "Grammar's 'word' property must be a named rule.")

	conflicts = base.conflicts
	if 'conflicts' in options:
		base_conflicts = [[nodes.Symbol(n) for n in conflict] for conflict in base.conflicts]
		conflict_rules = _invoke(options['conflicts'], resolver, base_conflicts)
		complaint = "Grammar's conflicts must be a list of lists of rules."
		conflicts = []
		for conflict_set in _rule_list(conflict_rules, complaint):
			conflicts.append(tuple(_symbol_name(s, complaint) for s in _rule_list(conflict_set, complaint)))
		conflicts = tuple(conflicts)

	inline = base.inline
	if 'inline' in options:
		inline_rules = _invoke(options['inline'], resolver, [nodes.Symbol(n) for n in base.inline])
		complaint = "Grammar's inline must be a list of rules."
		inline = tuple(_symbol_name(s, complaint) for s in _rule_list(inline_rules, complaint))

	if not rules:
		raise DefinitionError("Grammar must have at least one rule.")
	for rule_name in [n for c in conflicts for n in c] + list(inline):
		if rule_name not in rules:
			raise UndefinedSymbol("Undefined rule %r in conflicts or inline"%rule_name, rule_name)

	result = Grammar(
		name=name,
		word=word,
		rules=MappingProxyType(rules),
		extras=extras,
		conflicts=conflicts,
		externals=externals,
		inline=inline,
	)
	if VERBOSE:
		overridden = sorted(set(new_rules) & set(base.rules))
		print("Grammar %r: %d rules (%d overridden), %d extras, %d externals, %d conflicts, %d inline."%(
			name, len(rules), len(overridden), len(extras), len(externals), len(conflicts), len(inline),
		))
		if overridden: print("\tOverrides: "+', '.join(overridden))
	return result
