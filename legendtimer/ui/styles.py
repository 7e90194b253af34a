"""QSS stylesheet for LegendTimer's neon-on-black look."""

from __future__ import annotations

# ── palette ──────────────────────────────────────────────────────────────

PALETTE: dict[str, str] = {
    "bg":        "#000000",
    "surface":   "#111111",
    "cyan":      "#00FFFF",
    "yellow":    "#FFFF00",
    "magenta":   "#FF00FF",
    "mono_font": "Menlo, 'DejaVu Sans Mono', monospace",
}


def build_stylesheet(palette: dict[str, str] | None = None) -> str:
    p = dict(PALETTE)
    if palette:
        p.update(palette)
    return f"""
    QWidget {{
        background-color: {p["bg"]};
        color: {p["cyan"]};
        font-size: 18px;
    }}

    QLabel#logo {{
        color: {p["yellow"]};
        font-size: 30px;
        font-weight: 800;
        letter-spacing: 4px;
    }}

    QLabel#clockText {{
        color: {p["cyan"]};
        font-family: {p["mono_font"]};
        font-size: 54px;
    }}

    QLabel#timerText {{
        color: {p["yellow"]};
        font-family: {p["mono_font"]};
        font-size: 42px;
    }}

    QLabel#sectionLabel {{
        color: {p["cyan"]};
        font-size: 18px;
        margin-top: 10px;
    }}

    QLabel#infoText {{
        color: {p["cyan"]};
        font-size: 16px;
    }}

    QPushButton {{
        background-color: {p["surface"]};
        color: {p["cyan"]};
        border: 1px solid {p["cyan"]};
        border-radius: 10px;
        padding: 10px 20px;
        min-width: 60px;
    }}

    QPushButton:checked {{
        background-color: {p["cyan"]};
        color: {p["bg"]};
    }}

    QPushButton#muteButton {{
        background-color: {p["bg"]};
        border: none;
        font-size: 22px;
    }}

    QPushButton#muteButton:checked {{
        color: {p["magenta"]};
        background-color: {p["bg"]};
    }}

    QPushButton#configButton {{
        color: {p["yellow"]};
        border: 1px solid {p["yellow"]};
        border-radius: 8px;
    }}

    QPushButton#configButton[modified="true"] {{
        color: {p["magenta"]};
        border: 1px solid {p["magenta"]};
    }}
    """
