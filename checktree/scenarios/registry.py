"""
Strategy registry for mapping string names to strategy factories.

This lets compound checks be declared with a strategy name
('fail_fast', 'accumulate') while still instantiating the right
strategy class.

To add a new strategy:
1. Implement the strategy class in strategies/strategy.py
2. Register a factory under a new name

Example:
  register_strategy('last_only', lambda: FunctionStrategy(lambda f: f[-1:]))
"""

from collections.abc import Callable

from checktree.strategies.strategy import ACCUMULATE
from checktree.strategies.strategy import FAIL_FAST
from checktree.strategies.strategy import CheckStrategy

STRATEGIES: dict[str, Callable[[], CheckStrategy]] = {
    'fail_fast': lambda: FAIL_FAST,
    'accumulate': lambda: ACCUMULATE,
}


def create_strategy(name: str) -> CheckStrategy:
  """
  Create a strategy instance from its registered name.

  Args:
    name: Registered strategy name

  Returns:
    CheckStrategy instance

  Raises:
    KeyError: If the name is not found in the registry
  """
  try:
    factory = STRATEGIES[name]
  except KeyError as e:
    raise KeyError(f"Unknown check strategy: '{name}'. "
                   f'Available: {list(STRATEGIES.keys())}') from e
  return factory()


def register_strategy(name: str, factory: Callable[[], CheckStrategy]) -> None:
  """
  Register a strategy factory under a new name.

  Raises:
    ValueError: If the name is already registered or factory is not callable
  """
  if name in STRATEGIES:
    raise ValueError(f"Check strategy '{name}' is already registered")
  if not callable(factory):
    raise ValueError(f'Strategy factory must be callable, got {factory!r}')
  STRATEGIES[name] = factory


def list_strategies() -> list[str]:
  """List all registered strategy names."""
  return list(STRATEGIES.keys())
