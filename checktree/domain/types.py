'''
Domain types for check trees.

A failed check is described by a CheckInfo. Passing checks produce no
value at all, so every CheckInfo in circulation describes a failure.
'''

from dataclasses import dataclass


@dataclass(frozen=True)
class CheckInfo:
  '''
  Failure descriptor produced by a check that did not pass.

  Attributes:
    name: Name of the check that failed
    message: Already formatted failure text, possibly spanning several lines
  '''
  name: str
  message: str

  def __str__(self) -> str:
    '''Render as a report block: name line, then the indented message.'''
    # engine.text imports this module
    from checktree.engine.text import render_block  # pylint: disable=import-outside-toplevel
    return render_block(self)
