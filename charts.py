# charts.py
# Horizontal range gauges (colored reference bands + value pointer)
import matplotlib.pyplot as plt

from config import GAUGES


def gauge_position(preset: str, value: float) -> float:
    """Pointer position as a 0–100 percentage, value clamped to the gauge range."""
    cfg = GAUGES[preset]
    lo, hi = cfg["min"], cfg["max"]
    clamped = min(max(value, lo), hi)
    return (clamped - lo) / (hi - lo) * 100.0


def range_gauge(preset: str, value: float):
    cfg = GAUGES[preset]

    fig, ax = plt.subplots(figsize=(5, 0.7))
    ax.barh(0, 100, height=0.4, color="#e0e0e0")
    for start, end, color in cfg["bands"]:
        left = gauge_position(preset, start)
        ax.barh(0, gauge_position(preset, end) - left, left=left, height=0.4, color=color)

    ax.axvline(gauge_position(preset, value), ymin=0.1, ymax=0.9, color="black", linewidth=2)
    ax.set_xlim(0, 100)
    ax.set_ylim(-0.5, 0.5)
    ax.set_yticks([])
    ax.set_xticks([0, 100])
    ax.set_xticklabels([f"{cfg['min']:g}", f"{cfg['max']:g}"])
    ax.set_title(f"{cfg['label']}: {value:.2f}", fontsize=9, loc="left")
    for side in ("top", "right", "left"):
        ax.spines[side].set_visible(False)
    fig.tight_layout()
    return fig
