'''
Check tree evaluator.

A check tree has exactly two kinds of node:

  CheckLeaf      predicate + message producer over the checked value
  CompoundCheck  ordered children combined under a CheckStrategy

Applying a node returns None when it passes, or one CheckInfo when it
fails. A compound evaluates all of its children, hands the failures to
its strategy, and folds the selected failures into a single indented
message. Nodes are immutable and may be shared by several parents;
evaluation keeps no state between calls.

Predicates and message producers are expected to be pure. Nothing stops
a caller from passing functions with side effects, but such trees fall
outside what the evaluator guarantees (determinism, thread safety).
'''

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import dataclass
import logging
from typing import Generic, Optional, TypeVar, Union

from checktree.domain.types import CheckInfo
from checktree.engine.text import render_blocks
from checktree.scenarios.registry import create_strategy
from checktree.strategies.strategy import CheckStrategy
from checktree.strategies.strategy import FunctionStrategy

logger = logging.getLogger(__name__)

T = TypeVar('T')

StrategyLike = Union[CheckStrategy, str, Callable[[list[CheckInfo]],
                                                  Sequence[CheckInfo]]]


def _require_name(name: str) -> None:
  if not isinstance(name, str) or not name:
    raise ValueError(f'Check name must be a non-empty string, got {name!r}')


def _resolve_strategy(strategy: StrategyLike) -> CheckStrategy:
  '''Turn a strategy instance, registered name or plain function into a strategy.'''
  if isinstance(strategy, CheckStrategy):
    return strategy
  if isinstance(strategy, str):
    return create_strategy(strategy)
  if callable(strategy):
    return FunctionStrategy(strategy)
  raise ValueError(f'Invalid check strategy: {strategy!r}')


class Check(ABC, Generic[T]):
  '''
  Base class for check tree nodes.

  The only implementations are CheckLeaf and CompoundCheck.
  '''

  name: str

  @abstractmethod
  def apply(self, value: T) -> Optional[CheckInfo]:
    '''
    Evaluate value against this check.

    Args:
      value: Value to check; never modified

    Returns:
      None if the check passes, otherwise the failure descriptor
    '''

  def __call__(self, value: T) -> Optional[CheckInfo]:
    return self.apply(value)

  def passes(self, value: T) -> bool:
    '''Return True if value passes this check.'''
    return self.apply(value) is None


@dataclass(frozen=True, eq=False)
class CheckLeaf(Check[T]):
  '''
  Check implemented directly by a predicate.

  Attributes:
    name: Name reported when the predicate fails
    predicate: Total function returning True when the value is acceptable
    message_provider: Builds the failure message; called only when the
      predicate returned False, so it may rely on that
  '''
  name: str
  predicate: Callable[[T], bool]
  message_provider: Callable[[T], str]

  def __post_init__(self):
    _require_name(self.name)
    if not callable(self.predicate):
      raise ValueError(
          f'Predicate of check {self.name!r} must be callable, '
          f'got {self.predicate!r}')
    if not callable(self.message_provider):
      raise ValueError(
          f'Message provider of check {self.name!r} must be callable, '
          f'got {self.message_provider!r}')

  def apply(self, value: T) -> Optional[CheckInfo]:
    if self.predicate(value):
      return None
    return CheckInfo(self.name, self.message_provider(value))


@dataclass(frozen=True, eq=False, init=False)
class CompoundCheck(Check[T]):
  '''
  Check combining child checks under a strategy.

  Every child is evaluated, in order, on each apply(). The strategy then
  picks which failures are reported; it never prevents a child from
  running. A compound without children always passes.

  Attributes:
    name: Name reported when this compound fails
    strategy: CheckStrategy, registered strategy name, or a plain function
      from the list of child failures to the failures to report
    children: Child checks in evaluation order, stored as a tuple
  '''
  name: str
  strategy: CheckStrategy
  children: tuple[Check[T], ...]

  def __init__(self, name: str, strategy: StrategyLike,
               children: Sequence[Check[T]]):
    _require_name(name)
    if strategy is None:
      raise ValueError(f'Check {name!r} needs a strategy')
    if isinstance(children, (str, bytes)) or not isinstance(children, Sequence):
      raise ValueError(
          f'Children of check {name!r} must be a sequence of checks, '
          f'got {children!r}')
    for child in children:
      if not isinstance(child, Check):
        raise ValueError(
            f'Child of check {name!r} is not a Check: {child!r}')

    object.__setattr__(self, 'name', name)
    object.__setattr__(self, 'strategy', _resolve_strategy(strategy))
    object.__setattr__(self, 'children', tuple(children))

  def apply(self, value: T) -> Optional[CheckInfo]:
    failures = self.execute_checks(self.children, value)
    selected = self.strategy(failures)
    logger.debug('%s: %d checks, %d failed, %d reported', self.name,
                 len(self.children), len(failures), len(selected))
    if not selected:
      return None
    return CheckInfo(self.name, render_blocks(selected))

  @staticmethod
  def execute_checks(checks: Sequence[Check[T]], value: T) -> list[CheckInfo]:
    '''Apply every check in order and collect the failures.'''
    failures = []
    for check in checks:
      info = check.apply(value)
      if info is not None:
        failures.append(info)
    return failures
