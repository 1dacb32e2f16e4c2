# Core type aliases for Lispy's data model.
#
# Runtime values are instances of the seven classes in lispy.types; `Value` is
# their union. Builtins share the (env, args) -> Value calling convention.

from typing import Callable, Union

from lispy.types.atoms import Number, Bool
from lispy.types.error_value import LispError
from lispy.types.symbol import Symbol
from lispy.types.expr import Expr, ExprKind
from lispy.types.function import Builtin, Closure
from lispy.types.environment import Environment

Value = Union[Number, Bool, LispError, Symbol, Expr, Builtin, Closure]

# Primitive operation: receives the calling environment and the argument list
BuiltinFn = Callable[[Environment, Expr], Value]

__version__ = "0.1.0"
