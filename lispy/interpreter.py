from __future__ import annotations

import logging
import sys
from typing import Literal

from lispy.builtin.env_builtin import register
from lispy.config import get_prelude_path, get_recursion_limit
from lispy.errors import LispyPreludeError
from lispy.evaluation.evaluator import evaluate
from lispy.printer import render
from lispy.reader.reader import read_source
from lispy.types.environment import Environment
from lispy.types.error_value import LispError

logger = logging.getLogger(__name__)


class Interpreter:
    """
    A Lispy session: one root environment holding the builtins and every
    top-level definition. Independent interpreters never share bindings.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        self.env: Environment = Environment()
        register(self.env)

        limit = get_recursion_limit()
        if limit is not None and limit > sys.getrecursionlimit():
            logger.debug("raising recursion limit to %d", limit)
            sys.setrecursionlimit(limit)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            path = get_prelude_path()
            if path is not None:
                logger.debug("loading prelude from %s", path)
                self.eval_prelude(path.read_text())
        elif prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        """Evaluate each top-level form of `code` in turn against the root."""
        for form in read_source(code):
            source = render(form)
            result = evaluate(self.env, form)
            if isinstance(result, LispError):
                raise LispyPreludeError(f"Prelude form {source} failed: {result}")

    def eval(self, code: str):
        """Read the whole input as one S-expression and evaluate it."""
        return evaluate(self.env, read_source(code))

    def eval_to_string(self, code: str) -> str:
        return render(self.eval(code))
