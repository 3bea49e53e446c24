from tileswap.models.board import BoardState, is_permutation
from tileswap.models.grid import GridDescriptor, Variant, original_row
from tileswap.models.mapping import EducationalMapping, educational_shuffle
from tileswap.models.settings import GameSettings

__all__ = [
    "BoardState",
    "EducationalMapping",
    "GameSettings",
    "GridDescriptor",
    "Variant",
    "educational_shuffle",
    "is_permutation",
    "original_row",
]
