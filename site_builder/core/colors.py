"""
Helpers couleurs — dérivations à partir d'une couleur d'accent hexadécimale.

Seule échappatoire autorisée aux variables de thème dans les templates :
une valeur calculée depuis l'accent (variante alpha ou plus sombre).
"""
import re

_HEX_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def is_hex_color(value: object) -> bool:
    return isinstance(value, str) and bool(_HEX_RE.match(value.strip()))


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """Convertit #RGB ou #RRGGBB en (R, G, B)."""
    if not is_hex_color(hex_color):
        raise ValueError(f"Couleur hexadécimale invalide : {hex_color!r}")
    hex_color = hex_color.strip().lstrip("#")
    if len(hex_color) == 3:
        hex_color = "".join(c * 2 for c in hex_color)
    return tuple(int(hex_color[i:i + 2], 16) for i in (0, 2, 4))


def rgb_components(hex_color: str) -> str:
    """"#667eea" → "102, 126, 234" (utilisable dans rgba(var(--x-rgb), .2))."""
    r, g, b = hex_to_rgb(hex_color)
    return f"{r}, {g}, {b}"


def with_alpha(hex_color: str, alpha: float) -> str:
    """Variante alpha-blended : rgba(R, G, B, alpha)."""
    alpha = max(0.0, min(1.0, alpha))
    return f"rgba({rgb_components(hex_color)}, {alpha:g})"


def darken(hex_color: str, percent: int = 20) -> str:
    """Assombrit une couleur de X%."""
    r, g, b = hex_to_rgb(hex_color)
    factor = 1 - (percent / 100)
    r = max(0, int(r * factor))
    g = max(0, int(g * factor))
    b = max(0, int(b * factor))
    return f"#{r:02x}{g:02x}{b:02x}"
