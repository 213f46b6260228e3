""" Bits and bobs in support of looking at grammars. """

import json
from . import nodes

def render(node:nodes.RuleNode) -> str:
	""" Show a rule node more or less the way an author would have written it. """
	if isinstance(node, nodes.Blank): return 'blank()'
	if isinstance(node, nodes.String): return json.dumps(node.value)
	if isinstance(node, nodes.Pattern): return '/%s/'%node.value
	if isinstance(node, nodes.Symbol): return '$.'+node.name
	if isinstance(node, (nodes.Seq, nodes.Choice)):
		return '%s(%s)'%(node.TAG.lower(), ', '.join(map(render, node.members)))
	if isinstance(node, nodes.ImmediateToken): return 'token.immediate(%s)'%render(node.content)
	if isinstance(node, (nodes.Repeat, nodes.Repeat1, nodes.Token)):
		return '%s(%s)'%(node.TAG.lower(), render(node.content))
	if isinstance(node, nodes.Prec): return 'prec(%r, %s)'%(node.value, render(node.content))
	if isinstance(node, (nodes.PrecLeft, nodes.PrecRight, nodes.PrecDynamic)):
		direction = node.TAG.split('_')[1].lower()
		return 'prec.%s(%r, %s)'%(direction, node.value, render(node.content))
	if isinstance(node, nodes.Alias):
		value = '$.'+node.value if node.named else json.dumps(node.value)
		return 'alias(%s, %s)'%(render(node.content), value)
	raise TypeError(type(node))

def print_grid(grid):
	""" Print rows of cells as a box-drawn table, left-justified, with a rule under the first row. """
	grid = [[str(cell) for cell in row] for row in grid]
	assert len(set(map(len, grid))) == 1, "ragged grid"
	width = [max(map(len, column)) for column in zip(*grid)]
	horizontal = '\u2500'
	segments = [horizontal*w for w in width]
	print((horizontal + '\u252c' + horizontal).join(segments))
	for r, row in enumerate(grid):
		if r == 1: print((horizontal + '\u253c' + horizontal).join(segments))
		print(' \u2502 '.join(s.ljust(w) for s, w in zip(row, width)))
	print((horizontal + '\u2534' + horizontal).join(segments))
