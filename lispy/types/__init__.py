from lispy.types.atoms import Number, Bool, wrap_int64, INT64_MIN, INT64_MAX
from lispy.types.error_value import LispError
from lispy.types.symbol import Symbol
from lispy.types.expr import Expr, ExprKind
from lispy.types.environment import Environment
from lispy.types.function import Builtin, Closure

__all__ = [
    "Number",
    "Bool",
    "LispError",
    "Symbol",
    "Expr",
    "ExprKind",
    "Environment",
    "Builtin",
    "Closure",
    "wrap_int64",
    "INT64_MIN",
    "INT64_MAX",
]
