"""Static color palette for one-metric bar charts."""

PLOTLY_COLORS = (
    "#636EFA",
    "#EF553B",
    "#00CC96",
    "#AB63FA",
    "#FFA15A",
    "#19D3F3",
    "#FF6692",
    "#B6E880",
    "#FF97FF",
    "#FECB52",
)


def palette_colors(count: int, palette: tuple[str, ...] = PLOTLY_COLORS) -> list[str]:
    """Return ``count`` colors, cycling through the palette."""
    return [palette[i % len(palette)] for i in range(count)]
