"""
Interface definitions for the rule DSL: the exception family and a few agreed design constants.

Everything in this package fails fast. Assembling a grammar is an author-time,
one-shot transformation, so there is no notion of recovering from a bad definition:
the first problem found aborts the whole `grammar(...)` call, and the author fixes
the definition and tries again. Exceptions raised by the author's own definition
functions are not wrapped; they propagate as-is.
"""

import re

IDENTIFIER = re.compile(r'[A-Za-z_]\w*\Z', re.ASCII) # What a grammar's name must look like.
DEFAULT_EXTRA_SOURCE = r'\s' # Pattern source of the default "extra": generic whitespace.

class GrammarError(ValueError):
	""" Base class of all exceptions arising from the rule DSL machinery. """

class UndefinedSymbol(GrammarError):
	"""
	Raised when a rule mentions a name the grammar does not define,
	or when a plain `None` shows up where a rule was expected.
	The offending name (if there is one) is in the `name` attribute.
	"""
	def __init__(self, message, name=None):
		super().__init__(message)
		self.name = name

class InvalidRule(GrammarError, TypeError):
	""" Some value was offered as a rule, but it's not anything that can be made into one. """

class InvalidAlias(GrammarError):
	""" The second argument to `alias(...)` must be text or a symbol. """

class DefinitionError(GrammarError):
	""" The grammar's configuration is malformed: bad name, wrong shapes, missing rules, etc. """
