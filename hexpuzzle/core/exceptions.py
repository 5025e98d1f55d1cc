"""Custom exception hierarchy for the hex puzzle."""


class HexPuzzleError(Exception):
    """Base exception for puzzle failures."""


class InvalidPuzzleError(HexPuzzleError):
    """Raised when a tile set has the wrong number of tiles, ids or borders."""


class GenerationError(HexPuzzleError):
    """Raised when the generator cannot produce a tile set within its limits."""


class ValidationError(HexPuzzleError):
    """Raised when an arrangement breaks a matching or usage rule."""


class OracleError(HexPuzzleError):
    """Raised when the CP-SAT cross-check ends without a definite answer."""


class SlotPlacementError(HexPuzzleError):
    """Raised when a board update would break the visiting order or reuse a tile."""
