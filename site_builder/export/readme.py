"""
README.md de l'archive exportée : contenu, images, démarrage rapide, hébergement.

Déterministe : aucune date, aucun identifiant aléatoire.
"""
from typing import Any, Mapping, Sequence

from ..renderer.pages import page_display_name
from .assets import describe_reference

DEPLOY_TARGETS = (
    ("Netlify", "https://netlify.com", "Drag and drop deployment"),
    ("Vercel", "https://vercel.com", "Git-based deployment"),
    ("GitHub Pages", "https://pages.github.com", "Free hosting with GitHub"),
    ("Cloudflare Pages", "https://pages.cloudflare.com", "Fast global deployment"),
)


def _file_tree(pages: Sequence[str], images: Sequence[str], with_manifest: bool) -> str:
    entries = [(name, f"# {page_display_name(name)} page") for name in pages]
    if images:
        entries.append(("images/", f"# {len(images)} image(s)"))
    if with_manifest:
        entries.append(("manifest.json", "# Build information"))
    entries.append(("README.md", "# This file"))
    width = max(len(name) for name, _ in entries) + 2
    lines = []
    for i, (name, comment) in enumerate(entries):
        branch = "└──" if i == len(entries) - 1 else "├──"
        lines.append(f"{branch} {name.ljust(width)}{comment}")
    return "\n".join(lines)


def build_readme(
    project_name: str,
    pages: Sequence[str],
    images: Sequence[str],
    failed: Sequence[Mapping[str, str]] = (),
    unresolved: Sequence[str] = (),
    build_info: Mapping[str, Any] | None = None,
) -> str:
    """
    Args:
        project_name: titre du README
        pages: fichiers HTML de l'archive (index.html en premier)
        images: noms de fichiers sous images/
        failed: assets écartés [{"source", "reason"}]
        unresolved: références d'images laissées telles quelles (URL absolue / data URI)
        build_info: template, thème, color mode... (section "Template Details")
    """
    out = [f"# {project_name}", ""]

    if build_info:
        out += ["## Template Details"]
        labels = {"template_id": "Template", "theme": "Style Theme", "color_mode": "Color Mode"}
        for key, value in build_info.items():
            out.append(f"- {labels.get(key, key.replace('_', ' ').capitalize())}: {value}")
        out.append("")

    out += ["## Contents", ""]
    for name in pages:
        out.append(f"- `{name}`: {page_display_name(name)}")
    out.append("")

    if images:
        out += [
            "### Images",
            "",
            f"This package includes {len(images)} image(s) in the `images/` folder. "
            "The HTML references them with relative `./images/` paths.",
            "",
        ]
        out += [f"- `images/{name}`" for name in images]
        out.append("")

    if failed:
        out += [f"**Note:** {len(failed)} image(s) were not included:", ""]
        out += [f"- {describe_reference(item['source'])} ({item['reason']})" for item in failed]
        out.append("")

    if unresolved:
        out += [
            f"**Note:** {len(unresolved)} image reference(s) still point to their original location "
            "and may not display offline:",
            "",
        ]
        out += [f"- {describe_reference(ref)}" for ref in unresolved]
        out.append("")

    out += [
        "## Quick Start",
        "",
        "### View Locally",
        "1. Open `index.html` in your web browser",
        "2. **No server required**: the site works directly from your computer",
        "",
        "### File Structure",
        "```",
        _file_tree(pages, images, with_manifest=bool(build_info)),
        "```",
        "",
        "### Deploy Online",
        "Upload all files (including the `images/` folder) to any static hosting service.",
        "",
        "**Free hosting:**",
    ]
    out += [f"- [{name}]({url}) - {desc}" for name, url, desc in DEPLOY_TARGETS]
    out += [
        "",
        "**Steps to deploy:**",
        "1. Sign up for any of the services above",
        "2. Upload your files or connect a Git repository",
        "3. Your site will be live in minutes",
        "",
        "## Customization",
        "",
        "Styles live in the `<style>` block of each page. Design tokens (colors, fonts, spacing)",
        "are CSS custom properties declared on `:root`; change them there to restyle the whole site.",
        "",
    ]
    return "\n".join(out)
