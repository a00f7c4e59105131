from dataclasses import dataclass

# Two full blocks make one pixel roughly square in most terminal fonts
DEFAULT_GLYPH = "██"


@dataclass(frozen=True)
class RenderConfig:
    glyph: str = DEFAULT_GLYPH
    high_res: bool = False

    def __post_init__(self):
        if not self.glyph:
            raise ValueError("Glyph must be a non-empty string")

    @property
    def blank(self) -> str:
        """Placeholder for transparent pixels, one space per glyph character."""
        return " " * len(self.glyph)
