import logging

import pandas as pd
import pytest

from checktree.conftest import STRING_NOT_EMPTY
from checktree.domain.types import CheckInfo
from checktree.engine.tree import CheckLeaf
from checktree.runner import CheckRunner
from checktree.runner import evaluate_series


class TestCheckRunner:
  """Tests for CheckRunner."""

  def test_all_pass(self, string_check):
    runner = CheckRunner('strings')
    runner.add('first', string_check, '24')
    runner.add('second', string_check, '0')

    assert runner.run() is True
    assert runner.all_passed
    assert runner.failures == []

  def test_failures_in_registration_order(self, string_check):
    runner = CheckRunner('strings')
    runner.add('null', string_check, None)
    runner.add('ok', string_check, '24')
    runner.add('empty', string_check, '')

    assert runner.run() is False
    assert [r.check_id for r in runner.results] == ['null', 'ok', 'empty']
    assert runner.failures == [
        CheckInfo('root', 'NOT_NULL:\n  argument is null'),
        string_check.apply(''),
    ]

  def test_run_is_repeatable(self, string_check):
    runner = CheckRunner('strings')
    runner.add('a3', string_check, 'A3')

    runner.run()
    first = list(runner.results)
    runner.run()

    assert runner.results == first

  def test_failed_run_clears_previous_results(self, string_check):
    """An exception mid-run leaves no stale results behind."""
    calls = []

    def flaky(value):
      calls.append(value)
      if len(calls) > 1:
        raise RuntimeError('predicate broke')
      return True

    runner = CheckRunner('strings')
    runner.add('ok', string_check, '24')
    runner.add('flaky', CheckLeaf('FLAKY', flaky, str), 'x')
    assert runner.run() is True

    with pytest.raises(RuntimeError, match='predicate broke'):
      runner.run()

    assert [r.check_id for r in runner.results] == ['ok']
    assert runner.to_frame()['check_id'].tolist() == ['ok']

  def test_duplicate_id_rejected(self, string_check):
    runner = CheckRunner('strings')
    runner.add('x', string_check, '1')

    with pytest.raises(ValueError, match='already registered'):
      runner.add('x', string_check, '2')

  def test_non_check_rejected(self):
    runner = CheckRunner('strings')

    with pytest.raises(ValueError, match='expected a Check'):
      runner.add('x', lambda s: None, '1')  # type: ignore[arg-type]

  def test_errors_propagate(self):

    def boom(value):
      raise ZeroDivisionError('division by zero')

    runner = CheckRunner('numbers')
    runner.add('x', CheckLeaf('BOOM', boom, str), 1)

    with pytest.raises(ZeroDivisionError):
      runner.run()

  def test_to_frame(self, string_check):
    runner = CheckRunner('strings')
    runner.add('ok', string_check, '24')
    runner.add('empty', string_check, '')
    runner.run()

    df = runner.to_frame()

    assert list(df.columns) == ['check_id', 'ok', 'name', 'message']
    assert df['check_id'].tolist() == ['ok', 'empty']
    assert df['ok'].tolist() == [True, False]
    assert df.loc[1, 'name'] == 'root'
    assert df.loc[1, 'message'].startswith('non-null checks:')
    assert pd.isna(df.loc[0, 'message'])

  def test_to_frame_before_run(self):
    df = CheckRunner('empty').to_frame()

    assert df.empty
    assert list(df.columns) == ['check_id', 'ok', 'name', 'message']

  def test_log_summary(self, string_check, caplog):
    runner = CheckRunner('strings')
    runner.add('ok', string_check, '24')
    runner.add('null', string_check, None)
    runner.run()

    with caplog.at_level(logging.INFO, logger='checktree.runner'):
      runner.log_summary()

    assert 'strings checks: 1/2 passed' in caplog.text
    assert '1 checks FAILED' in caplog.text
    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert errors[0].getMessage() == ('\u2717 null: root:\n'
                                      '  NOT_NULL:\n'
                                      '    argument is null')


class TestEvaluateSeries:
  """Tests for evaluate_series."""

  def test_frame_layout(self):
    values = pd.Series(['a', '', 'b'], index=['x', 'y', 'z'])

    df = evaluate_series(STRING_NOT_EMPTY, values)

    assert list(df.index) == ['x', 'y', 'z']
    assert df['ok'].tolist() == [True, False, True]
    assert df.loc['y', 'name'] == 'STRING_NOT_EMPTY'
    assert df.loc['y', 'message'] == 'argument is empty'

  def test_compound_messages(self, string_check):
    df = evaluate_series(string_check, pd.Series(['24', 'A3']))

    assert df.loc[0, 'ok']
    assert df.loc[1, 'message'] == string_check.apply('A3').message

  def test_empty_series(self, string_check):
    df = evaluate_series(string_check, pd.Series([], dtype=object))

    assert df.empty
    assert list(df.columns) == ['ok', 'name', 'message']
