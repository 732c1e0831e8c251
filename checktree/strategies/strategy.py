'''
Strategies selecting which child failures a compound check reports.

Strategies run after every child has been evaluated. They only filter
what gets reported; they never decide which children run.
'''

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import List

from checktree.domain.types import CheckInfo


class CheckStrategy(ABC):
  '''
  Base class for failure selection strategies.

  Subclasses implement select() as a pure function of its input that
  keeps the relative order of the failures it returns.
  '''

  @abstractmethod
  def select(self, failures: Sequence[CheckInfo]) -> List[CheckInfo]:
    '''
    Select the failures to report.

    Args:
      failures: Failing children's descriptors in evaluation order

    Returns:
      Failures to report, in evaluation order
    '''

  def __call__(self, failures: Sequence[CheckInfo]) -> List[CheckInfo]:
    return self.select(failures)

  def __repr__(self) -> str:
    return f'{type(self).__name__}()'


class FailFast(CheckStrategy):
  '''Report only the first failure in evaluation order.'''

  def select(self, failures: Sequence[CheckInfo]) -> List[CheckInfo]:
    return list(failures[:1])


class Accumulate(CheckStrategy):
  '''Report every failure, in evaluation order.'''

  def select(self, failures: Sequence[CheckInfo]) -> List[CheckInfo]:
    return list(failures)


class FunctionStrategy(CheckStrategy):
  '''
  Adapter turning a plain function into a strategy.

  The function receives the failures as a list and may return any
  iterable of CheckInfo.
  '''

  def __init__(self, fn: Callable[[List[CheckInfo]], Sequence[CheckInfo]]):
    '''
    Initialize function strategy.

    Args:
      fn: Pure filter from all failures to the failures to report

    Raises:
      ValueError: If fn is not callable
    '''
    if not callable(fn):
      raise ValueError(f'Strategy function must be callable, got {fn!r}')
    self.fn = fn

  def select(self, failures: Sequence[CheckInfo]) -> List[CheckInfo]:
    return list(self.fn(list(failures)))

  def __repr__(self) -> str:
    return f'FunctionStrategy({self.fn!r})'


FAIL_FAST = FailFast()
ACCUMULATE = Accumulate()
