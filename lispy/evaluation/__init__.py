from lispy.evaluation.evaluator import evaluate, eval_sexpr
from lispy.evaluation.apply import call

__all__ = ["evaluate", "eval_sexpr", "call"]
