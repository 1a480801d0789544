"""
Bibliothèque de keyframes connues.

Un thème déclare ses animations par nom (``animations = {"glitch": "glitch 0.3s ..."}``) ;
seules les keyframes déclarées sont émises par le compilateur.
"""

KEYFRAMES: dict[str, str] = {
    "fadeIn": """@keyframes fadeIn {
  from { opacity: 0; }
  to { opacity: 1; }
}""",
    "slideUp": """@keyframes slideUp {
  from { opacity: 0; transform: translateY(20px); }
  to { opacity: 1; transform: translateY(0); }
}""",
    "scale": """@keyframes scale {
  from { transform: scale(0.95); }
  to { transform: scale(1); }
}""",
    "pulse": """@keyframes pulse {
  0%, 100% { opacity: 1; }
  50% { opacity: 0.8; }
}""",
    "neon": """@keyframes neon {
  from { text-shadow: 0 0 10px rgba(255, 0, 255, 0.8); }
  to { text-shadow: 0 0 20px rgba(0, 255, 255, 0.8); }
}""",
    "float": """@keyframes float {
  0%, 100% { transform: translateY(0); }
  50% { transform: translateY(-10px); }
}""",
    "glitch": """@keyframes glitch {
  0% { transform: translate(0); }
  20% { transform: translate(-2px, 2px); }
  40% { transform: translate(-2px, -2px); }
  60% { transform: translate(2px, 2px); }
  80% { transform: translate(2px, -2px); }
  100% { transform: translate(0); }
}""",
}


def animation_slug(name: str) -> str:
    """"fadeIn" → "fade-in" (suffixe de la variable --anim-*)."""
    out = []
    for ch in name:
        if ch.isupper():
            out.append("-")
        out.append(ch.lower())
    return "".join(out).lstrip("-")
