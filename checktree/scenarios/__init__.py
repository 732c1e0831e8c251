'''Name-based lookup of check strategies.'''

from checktree.scenarios.registry import STRATEGIES
from checktree.scenarios.registry import create_strategy
from checktree.scenarios.registry import list_strategies
from checktree.scenarios.registry import register_strategy

__all__ = [
    'STRATEGIES',
    'create_strategy',
    'list_strategies',
    'register_strategy',
]
