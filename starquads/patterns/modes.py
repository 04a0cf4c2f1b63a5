from enum import Enum


class StarMode(Enum):
    """Coloring rule and twist formula for one quadrant's star."""

    CLASSIC = "classic"
    SWIRL = "swirl"
    DENSE = "dense"
    RAINBOW = "rainbow"

    @classmethod
    def parse(cls, name: str) -> "StarMode":
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            valid = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown star mode {name!r} (expected one of: {valid})") from None
