'''Check tree evaluator and the pure text helpers it renders with.'''

from checktree.engine.text import indent
from checktree.engine.text import render_block
from checktree.engine.text import render_blocks
from checktree.engine.tree import Check
from checktree.engine.tree import CheckLeaf
from checktree.engine.tree import CompoundCheck

__all__ = [
    'Check',
    'CheckLeaf',
    'CompoundCheck',
    'indent',
    'render_block',
    'render_blocks',
]
