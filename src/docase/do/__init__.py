"""Do-notation: inline unwrap with early return on failure.

- do / do_for: install the invocation wrapper on functions or class methods
- DoContext: per-call unwrap capability (unwrap, unwrap_all)
- ShortCircuit: the signal carrying a failure back to its owning call
- unwrap / unwrap_all / current_context: act on the innermost live call
"""

from .context import DoContext, ShortCircuit, current_context, unwrap, unwrap_all
from .decorator import do, do_for

__all__ = [
    "do", "do_for",
    "DoContext", "ShortCircuit",
    "current_context", "unwrap", "unwrap_all",
]
