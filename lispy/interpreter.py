from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path
from typing import Literal

from lispy import LispValue
from lispy.builtin import register
from lispy.evaluation.evaluator import evaluate
from lispy.modules.loader import load_prelude
from lispy.printer import to_string
from lispy.reader.reader import Reader
from lispy.types.environment import Environment
from lispy.types.error import Error


class Interpreter:
    """
    Orchestrates reading and evaluating Lispy code.
    Owns the parser context and the root Environment across calls.
    """

    def __init__(
        self,
        prelude: str | None | Literal['auto'] = 'auto',
        *,
        reader: Reader | None = None,
    ):
        self._logger = logging.getLogger("Interpreter")
        self.reader: Reader = reader if reader is not None else Reader()
        self.env: Environment = Environment()
        register(self.env, self.reader)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            load_prelude(self)
        elif prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str, filename: str = "<prelude>") -> None:
        """Evaluate each top-level form; errors are logged, not returned."""
        for form in self.reader.read_forms(code, filename):
            result = evaluate(form, self.env)
            if isinstance(result, Error):
                self._logger.warning("%s: %s", filename, to_string(result))

    def eval(self, code: str, filename: str = "<stdin>") -> LispValue:
        """Evaluate one line of input the way the REPL does.

        The whole input is read as a single S-Expression, so `+ 1 2` and
        `(+ 1 2)` both evaluate to 3. Raises LispySyntaxError on bad input.
        """
        return evaluate(self.reader.read(code, filename), self.env)

    def load(self, path: str | PathLike) -> LispValue:
        """Evaluate a source file as `(load "path")` would."""
        load_fn = self.env.vars["load"]
        return load_fn(self.env, [str(Path(path))])
