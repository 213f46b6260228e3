"""
Symbol resolution, with deferred faults.

Rules defined together are generally mutually recursive: `expression` mentions `term`,
which mentions `expression` again. Each rule body is just a function, evaluated on its own,
so the resolver has to answer for every name in the grammar before any particular rule exists.
That's easy, because the assembler collects the complete set of names first.

The interesting part is what happens with a name that is NOT in the grammar. The resolver
does not complain right away. Instead it hands back an `Unresolved` value, which carries both
the symbol that was asked for and the exception that explains the problem. The exception goes
off only when somebody tries to use the value as a rule. That keeps "fail at use, not at mention"
ordering, and it's what lets `alias(..., g.some_name)` refer to a name that isn't a rule at all.

There is also an unchecked mode (no registry) for declaring external tokens,
which by definition don't exist anywhere else yet.
"""

from typing import NamedTuple, Iterable, Optional, Union
from .nodes import Symbol
from .interface import UndefinedSymbol

class Unresolved(NamedTuple):
	""" A deferred fault: the symbol somebody asked for, and the reason it's no good. """
	symbol: Symbol
	fault: UndefinedSymbol

	@property
	def name(self) -> str: return self.symbol.name

class SymbolResolver:
	"""
	Grammar definition functions receive one of these as their first argument.
	Conventionally authors call it `g` (or `_`) and write `g.expression` to mean
	the `expression` rule. Use `g["some-name"]` or `g.resolve(...)` for names that
	aren't valid Python identifiers, or that begin with a double underscore.
	The same goes for rules named `known` or `resolve`: `g.known` is the resolver's
	own registry, so write `g["known"]` to mean the rule.
	"""
	def __init__(self, known:Optional[Iterable[str]]=None):
		self.__known = None if known is None else frozenset(known)

	@property
	def known(self) -> Optional[frozenset]:
		""" The registry of valid names, or None in unchecked mode. """
		return self.__known

	def resolve(self, name:str) -> Union[Symbol, Unresolved]:
		symbol = Symbol(name)
		if self.__known is None or name in self.__known:
			return symbol
		return Unresolved(symbol, UndefinedSymbol("Undefined symbol %r"%name, name))

	def __getattr__(self, name):
		if name.startswith('__'): raise AttributeError(name)
		return self.resolve(name)

	def __getitem__(self, name):
		return self.resolve(name)

	def __contains__(self, name):
		return self.__known is None or name in self.__known

	def __repr__(self):
		if self.__known is None: return "<SymbolResolver (unchecked)>"
		return "<SymbolResolver over %d names>"%len(self.__known)
