'''
Composable check trees with structured failure reports.

A check tree evaluates one value against named rules. Leaves wrap a
predicate and a message producer; compounds combine children under a
strategy that decides which child failures get reported. The result of
applying a tree is either None (pass) or a single CheckInfo whose message
renders the nested failures as indented text.

Usage:
  from checktree import ACCUMULATE, CheckLeaf, CompoundCheck

  not_empty = CheckLeaf('NOT_EMPTY', lambda s: s != '',
                        lambda s: 'argument is empty')
  root = CompoundCheck('root', ACCUMULATE, [not_empty])
  info = root.apply('')  # CheckInfo(name='root', message='NOT_EMPTY:\n  ...')
'''

from checktree.domain.types import CheckInfo
from checktree.engine.tree import Check
from checktree.engine.tree import CheckLeaf
from checktree.engine.tree import CompoundCheck
from checktree.runner import CheckRunner
from checktree.runner import evaluate_series
from checktree.strategies import ACCUMULATE
from checktree.strategies import FAIL_FAST
from checktree.strategies import Accumulate
from checktree.strategies import CheckStrategy
from checktree.strategies import FailFast

__all__ = [
    'CheckInfo',
    'Check', 'CheckLeaf', 'CompoundCheck',
    'CheckStrategy', 'FailFast', 'Accumulate', 'FAIL_FAST', 'ACCUMULATE',
    'CheckRunner', 'evaluate_series',
]
