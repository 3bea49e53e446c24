from tileswap.engine.arrangement.generator import ArrangementGenerator, DerangementError

__all__ = ["ArrangementGenerator", "DerangementError"]
