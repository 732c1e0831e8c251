"""
Pure text rendering for failure reports.

No state, no logging, just string processing. A compound check renders
each selected child failure as a block:

  <child name>:
    <child message, every line indented>

and joins the blocks with single newlines.
"""

from collections.abc import Iterable
import re

from checktree.domain.types import CheckInfo

INDENT = '  '

_LINE_BREAK = re.compile(r'\r\n|\r|\n')


def indent(text: str, prefix: str = INDENT) -> str:
  """
  Prefix every line of text.

  Lines are split on \\n, \\r and \\r\\n only (form feeds and Unicode
  separators stay inside their line) and rejoined with '\\n'. A trailing
  line break does not produce an extra empty line and no trailing newline
  is added, so indent('') == ''.

  Args:
    text: Possibly multi-line text
    prefix: String prepended to each line (default: two spaces)

  Returns:
    Indented text
  """
  lines = _LINE_BREAK.split(text)
  if lines[-1] == '':
    lines.pop()
  return '\n'.join(prefix + line for line in lines)


def render_block(info: CheckInfo) -> str:
  """Render one failure as its name line followed by the indented message."""
  return f'{info.name}:\n{indent(info.message)}'


def render_blocks(failures: Iterable[CheckInfo]) -> str:
  """Render failures in order, one block each, separated by one newline."""
  return '\n'.join(render_block(f) for f in failures)
