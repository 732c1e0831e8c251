"""
Failure selection strategies for compound checks.

A strategy receives every failing child of a compound, in evaluation
order, and returns the failures the compound should report.

To add a new strategy:
1. Create a class inheriting from CheckStrategy
2. Implement select() as a pure, order-preserving filter
3. Register it in scenarios/registry.py if it should be addressable by name

Example:
  class LastOnly(CheckStrategy):
    def select(self, failures):
      return list(failures[-1:])

A plain callable with the same contract works too; CompoundCheck wraps it
in a FunctionStrategy.
"""

from checktree.strategies.strategy import ACCUMULATE
from checktree.strategies.strategy import FAIL_FAST
from checktree.strategies.strategy import Accumulate
from checktree.strategies.strategy import CheckStrategy
from checktree.strategies.strategy import FailFast
from checktree.strategies.strategy import FunctionStrategy

__all__ = [
  'CheckStrategy', 'FailFast', 'Accumulate', 'FunctionStrategy',
  'FAIL_FAST', 'ACCUMULATE',
]
