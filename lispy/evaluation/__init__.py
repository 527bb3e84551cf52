from lispy.evaluation.evaluator import evaluate, evaluate_sexpr
from lispy.evaluation.apply import apply, apply_lambda
