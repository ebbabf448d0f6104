"""Light theme."""

from linemap.render.style import Theme

LIGHT_THEME = Theme(
    name="light",
    background_color="none",
    stop_fill="#ffffff",
    shared_stop_fill="#eab308",
    stop_stroke="#333333",
    stop_radius=7.0,
    stop_stroke_width=2.5,
    line_width=7.0,
    label_color="#333333",
    label_background="rgba(255, 255, 255, 0.85)",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=12.0,
    title_color="#111111",
    title_font_size=24.0,
    legend_background="rgba(255, 255, 255, 0.8)",
    legend_text_color="#333333",
    legend_font_size=13.0,
)
