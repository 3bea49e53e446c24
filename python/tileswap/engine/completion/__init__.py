from tileswap.engine.completion.evaluator import CompletionEvaluator

__all__ = ["CompletionEvaluator"]
