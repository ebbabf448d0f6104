"""Dark slate theme (the default)."""

from linemap.render.style import Theme

SLATE_THEME = Theme(
    name="slate",
    background_color="#0f172a",
    stop_fill="#ffffff",
    shared_stop_fill="#eab308",
    stop_stroke="#1e293b",
    stop_radius=8.0,
    stop_stroke_width=3.0,
    line_width=8.0,
    label_color="#ffffff",
    label_background="rgba(15, 23, 42, 0.8)",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=12.0,
    title_color="#ffffff",
    title_font_size=24.0,
    legend_background="rgba(15, 23, 42, 0.95)",
    legend_text_color="#e2e8f0",
    legend_font_size=13.0,
)
