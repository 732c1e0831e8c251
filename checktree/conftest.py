import pytest

from checktree.engine.tree import CheckLeaf
from checktree.engine.tree import CompoundCheck
from checktree.strategies.strategy import ACCUMULATE
from checktree.strategies.strategy import FAIL_FAST

# Leaf predicates are total over str | None: only NOT_NULL rejects None,
# since the other leaves still run when the root's first child fails.
STRING_NOT_NULL = CheckLeaf(
    'NOT_NULL',
    lambda s: s is not None,
    lambda s: 'argument is null',
)

STRING_NOT_EMPTY = CheckLeaf(
    'STRING_NOT_EMPTY',
    lambda s: s != '',
    lambda s: 'argument is empty',
)

STRING_IF_DIGIT_THEN_EVEN = CheckLeaf(
    'STRING_IF_DIGIT_THEN_EVEN',
    lambda s: all(int(c) % 2 == 0 for c in (s or '') if c.isdigit()),
    lambda s: f'{s} contains non-even digits',
)

STRING_CONTAINS_ONLY_DIGITS = CheckLeaf(
    'STRING_CONTAINS_ONLY_DIGITS',
    lambda s: all(c.isdigit() for c in (s or '')),
    lambda s: f'{s} is not digit-only',
)


@pytest.fixture
def digit_checks() -> CompoundCheck:
  """Both digit rules, all failures reported."""
  return CompoundCheck('digit checks', ACCUMULATE, [
      STRING_IF_DIGIT_THEN_EVEN,
      STRING_CONTAINS_ONLY_DIGITS,
  ])


@pytest.fixture
def non_null_checks(digit_checks) -> CompoundCheck:
  """Rules that only make sense for a non-null string."""
  return CompoundCheck('non-null checks', ACCUMULATE, [
      STRING_NOT_EMPTY,
      digit_checks,
  ])


@pytest.fixture
def string_check(non_null_checks) -> CompoundCheck:
  """Root check: null check first, then everything else."""
  return CompoundCheck('root', FAIL_FAST, [
      STRING_NOT_NULL,
      non_null_checks,
  ])
