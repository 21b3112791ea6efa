"""Fallback chart colors for categories without a stored color."""

FALLBACK_PALETTE: tuple[str, ...] = (
    "#3b82f6",
    "#ef4444",
    "#10b981",
    "#f59e0b",
    "#8b5cf6",
    "#ec4899",
    "#14b8a6",
    "#f97316",
    "#6366f1",
    "#84cc16",
    "#06b6d4",
    "#a855f7",
)


def fallback_color(position: int) -> str:
    """Palette color for the category at ``position`` (wraps around)."""
    return FALLBACK_PALETTE[position % len(FALLBACK_PALETTE)]
