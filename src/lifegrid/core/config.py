"""Grid dimensions and input limits shared by the decoders, the engine and the renderer."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GridConfig:
    """Fixed grid dimensions.

    Attributes:
        width: Number of columns (GRIDX)
        height: Number of rows (GRIDY)
        max_line: Size of the line buffer; a line may hold at most
            ``max_line - 1`` characters including its newline
    """

    width: int = 80
    height: int = 24
    max_line: int = 83

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {self.width}x{self.height}")
        if self.max_line < 2:
            raise ValueError(f"Line buffer must hold at least one character, got {self.max_line}")


DEFAULT_CONFIG = GridConfig()
