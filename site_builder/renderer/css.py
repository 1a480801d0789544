"""
CSS partagé du document :

  reset → CSS du thème (compilateur) → composants de base (boutons, cartes)
        → CSS du template → overrides spécifiques au thème

Les overrides par thème sont les seuls à référencer les tokens optionnels
(--gradient-*, --shadow-glow, --shadow-inset) ; un override dont le thème ne
déclare pas les tokens requis est ignoré (jamais de var() indéfinie).
"""
import logging
from urllib.parse import quote_plus

from ..core.schemas import Theme
from ..core.tokens import Token as T, gradient_var

log = logging.getLogger(__name__)

GOOGLE_FONTS_URL = "https://fonts.googleapis.com/css2?family={family}:wght@400;500;600;700;800;900&display=swap"

# Familles fournies par le système : jamais chargées depuis Google Fonts
SYSTEM_FONTS = frozenset({
    "-apple-system", "blinkmacsystemfont", "system-ui", "segoe ui", "helvetica",
    "helvetica neue", "arial", "arial black", "georgia", "times new roman", "courier new",
    "impact", "monaco", "menlo", "consolas", "sf mono", "sf pro display", "sf pro text",
    "sans-serif", "serif", "monospace",
})

RESET_CSS = "* { margin: 0; padding: 0; box-sizing: border-box; }"

BASE_CSS = f"""
html {{ -webkit-text-size-adjust: 100%; }}
body {{ font-family: {T.FONT_BODY.var}; background: {T.COLOR_BG.var}; color: {T.COLOR_TEXT.var}; font-size: {T.TEXT_BODY.var}; line-height: 1.6; min-height: 100vh; }}
h1, h2, h3 {{ font-family: {T.FONT_HEADING.var}; line-height: 1.2; font-weight: 700; }}
a {{ color: inherit; }}
img {{ max-width: 100%; display: block; }}
.container {{ max-width: 1200px; margin: 0 auto; padding: 0 {T.SPACE_MD.var}; }}
@media (max-width: 768px) {{
  .container {{ padding: 0 {T.SPACE_SM.var}; }}
}}
.btn {{ display: inline-block; padding: {T.SPACE_SM.var} {T.SPACE_MD.var}; border-radius: {T.RADIUS_MD.var}; text-decoration: none; font-weight: 600; transition: all 0.2s; border: 2px solid {T.COLOR_TEXT.var}; background: {T.COLOR_TEXT.var}; color: {T.COLOR_BG_SOLID.var}; cursor: pointer; }}
.btn:hover {{ transform: translateY(-2px); box-shadow: {T.SHADOW_MD.var}; }}
.btn-outline {{ background: transparent; color: {T.COLOR_TEXT.var}; border: 2px solid {T.COLOR_BORDER.var}; }}
.btn-outline:hover {{ border-color: {T.COLOR_TEXT.var}; }}
.card {{ background: {T.COLOR_SURFACE.var}; border: 1px solid {T.COLOR_BORDER.var}; border-radius: {T.RADIUS_LG.var}; padding: {T.SPACE_MD.var}; box-shadow: {T.SHADOW_SM.var}; transition: all 0.3s; }}
.card:hover {{ box-shadow: {T.SHADOW_MD.var}; border-color: {T.COLOR_BORDER_HOVER.var}; transform: translateY(-4px); }}
@media (prefers-reduced-motion: reduce) {{
  *, *::before, *::after {{ animation: none !important; transition: none !important; }}
}}
"""

# theme_id → (tokens optionnels requis, CSS)
THEME_OVERRIDES: dict[str, tuple[tuple[str, ...], str]] = {
    "brutalist": ((), f"""
.btn {{ border: 3px solid {T.COLOR_TEXT.var}; text-transform: uppercase; }}
.btn:hover {{ transform: translate(-4px, -4px); box-shadow: {T.SHADOW_MD.var}; }}
.card {{ border: 3px solid {T.COLOR_BORDER.var}; }}
.card:hover {{ transform: translate(-4px, -4px); box-shadow: 8px 8px 0 {T.COLOR_BORDER.var}; }}
h1 {{ animation: var(--anim-glitch); }}
"""),
    "gradient": (("gradient-primary",), f"""
.btn {{ background: {gradient_var("primary")}; border: none; color: #ffffff; }}
.btn-outline {{ background: transparent; color: {T.COLOR_TEXT.var}; border: 2px solid {T.COLOR_BORDER.var}; }}
.card:hover {{ animation: var(--anim-float); }}
"""),
    "retro": (("gradient-vaporwave", "shadow-glow"), f"""
h1, h2 {{ text-shadow: 3px 3px 0 {T.COLOR_ACCENT.var}; }}
.btn {{ background: {gradient_var("vaporwave")}; color: #ffffff; border: 2px solid {T.COLOR_BORDER.var}; box-shadow: 4px 4px 0 {T.COLOR_TEXT.var}; }}
.btn:hover {{ transform: translate(-2px, -2px); box-shadow: 6px 6px 0 {T.COLOR_TEXT.var}; }}
.card:hover {{ box-shadow: var(--shadow-glow); }}
"""),
    "elegant": ((), f"""
h1, h2 {{ font-weight: 400; letter-spacing: -0.02em; }}
.btn {{ background: transparent; border: 1px solid {T.COLOR_BORDER.var}; color: {T.COLOR_TEXT.var}; }}
.btn:hover {{ background: {T.COLOR_TEXT.var}; color: {T.COLOR_BG_SOLID.var}; }}
"""),
    "glassmorphism": ((), f"""
body {{ background-attachment: fixed; }}
.card {{ background: {T.COLOR_SURFACE.var}; backdrop-filter: blur(10px); -webkit-backdrop-filter: blur(10px); border: 1px solid {T.COLOR_BORDER.var}; }}
.btn {{ background: rgba({T.COLOR_ACCENT_RGB.var}, 0.85); color: #ffffff; backdrop-filter: blur(10px); -webkit-backdrop-filter: blur(10px); border: 1px solid {T.COLOR_BORDER_HOVER.var}; }}
"""),
    "neumorphism": (("shadow-inset",), f"""
.card {{ box-shadow: {T.SHADOW_MD.var}; border: none; }}
.card:hover {{ box-shadow: var(--shadow-inset); transform: none; }}
.btn {{ box-shadow: {T.SHADOW_SM.var}; border: none; background: {T.COLOR_SURFACE.var}; color: {T.COLOR_ACCENT.var}; }}
.btn:hover {{ box-shadow: var(--shadow-inset); transform: none; }}
"""),
}


def _declared_optional(theme: Theme) -> set[str]:
    declared = {f"gradient-{name}" for name in theme.gradients}
    declared |= {f"shadow-{name}" for name in ("glow", "inset") if getattr(theme.shadows, name)}
    declared |= {f"anim-{name}" for name in ("glitch", "float", "pulse", "neon") if name in theme.animations}
    return declared


def theme_override_css(theme: Theme) -> str:
    """Override du thème, ou "" si absent / si le thème ne déclare pas les tokens requis."""
    entry = THEME_OVERRIDES.get(theme.id)
    if not entry:
        return ""
    required, css = entry
    declared = _declared_optional(theme)
    missing = [name for name in required if name not in declared]
    if missing:
        log.warning("Override %s ignoré : tokens absents %s", theme.id, missing)
        return ""
    # Animations d'override conditionnées à leur déclaration
    lines = [
        line for line in css.strip().splitlines()
        if "var(--anim-" not in line or any(f"var(--{a})" in line for a in declared)
    ]
    return "\n".join(lines)


def font_families(theme: Theme) -> list[str]:
    """Première famille de chaque stack (heading, body, mono), dédoublonnée, sans polices système."""
    families: list[str] = []
    for stack in (theme.fonts.heading, theme.fonts.body, theme.fonts.mono):
        family = stack.split(",")[0].strip().strip("'\"").strip()
        if not family or family.lower() in SYSTEM_FONTS or "system" in family.lower():
            continue
        if family not in families:
            families.append(family)
    return families


def font_links(theme: Theme) -> str:
    links = [
        f'<link href="{GOOGLE_FONTS_URL.format(family=quote_plus(family))}" rel="stylesheet">'
        for family in font_families(theme)
    ]
    if not links:
        return ""
    preconnect = [
        '<link rel="preconnect" href="https://fonts.googleapis.com">',
        '<link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>',
    ]
    return "\n  ".join(preconnect + links)


def assemble_css(theme: Theme, theme_css: str, template_css: str = "") -> str:
    """Concatène les couches dans l'ordre reset → thème → base → template → overrides."""
    parts = [RESET_CSS, theme_css.strip(), BASE_CSS.strip()]
    if template_css.strip():
        parts.append(template_css.strip())
    override = theme_override_css(theme)
    if override:
        parts.append(override)
    return "\n\n".join(parts)
