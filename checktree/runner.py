"""
Check runner with reporting.

Applies several named check trees, each to its own value, and reports
the outcome as a log summary or a pandas DataFrame. The trees themselves
stay pure; the runner only collects what apply() returns.

Exceptions raised by predicates or message providers are not caught
here: a check that cannot be evaluated is a bug, not a failed check.
"""
from dataclasses import dataclass
import logging
from typing import Any, Optional

import pandas as pd

from checktree.domain.types import CheckInfo
from checktree.engine.tree import Check

logger = logging.getLogger(__name__)

RESULT_COLUMNS = ['ok', 'name', 'message']


@dataclass
class _RegisteredCheck:
  """Internal representation of a registered check tree."""

  check_id: str
  check: Check
  value: Any


@dataclass(frozen=True)
class RunResult:
  """Outcome of one registered check tree."""

  check_id: str
  info: Optional[CheckInfo]

  @property
  def ok(self) -> bool:
    return self.info is None


class CheckRunner:
  """
  Run several check trees and report results.

  Usage:
    runner = CheckRunner('signup form')
    runner.add('email', email_checks, form['email'])
    runner.add('password', password_checks, form['password'])

    ok = runner.run()
    runner.log_summary()
    df = runner.to_frame()
  """

  def __init__(self, suite_name: str):
    self.suite_name = suite_name
    self._registered: list[_RegisteredCheck] = []
    self.results: list[RunResult] = []

  def add(self, check_id: str, check: Check, value: Any) -> None:
    """
    Register a check tree to apply to a value.

    Args:
      check_id: Identifier for this entry, unique within the runner
      check: Root of the check tree
      value: Value the tree is applied to

    Raises:
      ValueError: If check is not a Check or check_id is already registered
    """
    if not isinstance(check, Check):
      raise ValueError(f'{check_id}: expected a Check, got {check!r}')
    if any(r.check_id == check_id for r in self._registered):
      raise ValueError(f'Check id {check_id!r} is already registered')
    self._registered.append(_RegisteredCheck(check_id, check, value))

  def run(self) -> bool:
    """
    Apply all registered check trees in registration order.

    Returns:
      True if every tree passed, False otherwise
    """
    self.results = []

    for reg in self._registered:
      self.results.append(RunResult(reg.check_id, reg.check.apply(reg.value)))
    return self.all_passed

  def log_summary(self) -> None:
    """Log validation summary using logger."""
    passed = sum(1 for r in self.results if r.ok)

    logger.info('=' * 70)
    logger.info('%s checks: %d/%d passed', self.suite_name, passed,
                len(self.results))
    logger.info('=' * 70)

    for r in self.results:
      if r.ok:
        logger.info('✓ %s', r.check_id)
      else:
        logger.error('✗ %s: %s', r.check_id, r.info)

    failed = len(self.results) - passed
    if failed > 0:
      logger.error('%d checks FAILED', failed)

  def to_frame(self) -> pd.DataFrame:
    """
    Tabulate the last run.

    Returns:
      DataFrame with one row per registered tree and columns
      check_id, ok, name, message (name and message are None for passes)
    """
    rows = [{
        'check_id': r.check_id,
        **_info_row(r.info),
    } for r in self.results]
    return pd.DataFrame(rows, columns=['check_id'] + RESULT_COLUMNS)

  @property
  def all_passed(self) -> bool:
    """Return True if every tree of the last run passed."""
    return all(r.ok for r in self.results)

  @property
  def failures(self) -> list[CheckInfo]:
    """Return failure descriptors of the last run, in registration order."""
    return [r.info for r in self.results if r.info is not None]


def _info_row(info: Optional[CheckInfo]) -> dict[str, Any]:
  if info is None:
    return {'ok': True, 'name': None, 'message': None}
  return {'ok': False, 'name': info.name, 'message': info.message}


def evaluate_series(check: Check, values: pd.Series) -> pd.DataFrame:
  """
  Apply one check tree to every element of a Series.

  Args:
    check: Root of the check tree
    values: Values to check

  Returns:
    DataFrame indexed like values with columns ok, name, message
  """
  rows = [_info_row(check.apply(v)) for v in values]
  df = pd.DataFrame(rows, index=values.index, columns=RESULT_COLUMNS)
  logger.debug('%s: %d of %d values failed', check.name,
               int((~df['ok'].astype(bool)).sum()), len(df))
  return df
