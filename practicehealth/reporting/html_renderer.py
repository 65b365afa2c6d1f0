from pathlib import Path
from typing import Optional
import shutil

import markdown


PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>
body {{
    font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Arial, sans-serif;
    margin: 40px;
    color: #2c3e50;
}}
h1, h2, h3 {{
    color: #1f2d3d;
}}
table {{
    border-collapse: collapse;
    margin-top: 12px;
    width: 100%;
}}
table, th, td {{
    border: 1px solid #ccc;
    padding: 8px;
}}
th {{
    background: #f4f6f8;
}}
img {{
    max-width: 100%;
    margin: 14px 0;
    border: 1px solid #ddd;
}}
</style>
</head>
<body>
{body}
</body>
</html>
"""


def render_html(
    md_path: Path,
    output_dir: Optional[Path] = None,
    title: str = "Practice Health Report",
) -> Path:
    """Render a markdown report to a styled HTML page next to it."""
    md_path = Path(md_path)
    if not md_path.exists():
        raise FileNotFoundError(f"Markdown file not found: {md_path}")

    output_dir = Path(output_dir) if output_dir else md_path.parent
    output_dir.mkdir(parents=True, exist_ok=True)

    html_path = output_dir / md_path.with_suffix(".html").name

    body = markdown.markdown(
        md_path.read_text(encoding="utf-8"),
        extensions=["tables", "fenced_code"],
    )

    # Image links are relative, so visuals travel with the page
    visuals_src = md_path.parent / "visuals"
    visuals_dst = output_dir / "visuals"
    if visuals_src.is_dir() and visuals_src.resolve() != visuals_dst.resolve():
        visuals_dst.mkdir(exist_ok=True)
        for img in visuals_src.glob("*"):
            target = visuals_dst / img.name
            if not target.exists():
                shutil.copy(img, target)

    html_path.write_text(PAGE_TEMPLATE.format(title=title, body=body), encoding="utf-8")
    return html_path
