from tileswap.engine.gamesolver.solver import SwapSolver

__all__ = ["SwapSolver"]
