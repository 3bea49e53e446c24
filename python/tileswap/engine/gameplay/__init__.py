from tileswap.engine.gameplay.game import CompletionListener, GamePlay

__all__ = ["CompletionListener", "GamePlay"]
