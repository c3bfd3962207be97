"""Matplotlib static PNG renderer."""

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure
from matplotlib.patches import Circle

from nightdome.models import FixedStar, SkySnapshot, TwilightPhase
from nightdome.projection import cardinal_points

_DPI = 100
_LINE_COLOR = "#7ec8e3"
_HORIZON_COLOR = "#334466"

_SKY_COLORS: dict[TwilightPhase, str] = {
    TwilightPhase.DAY: "#4a90c8",
    TwilightPhase.CIVIL: "#3b4f8f",
    TwilightPhase.NAUTICAL: "#1e2450",
    TwilightPhase.ASTRONOMICAL: "#0d1230",
    TwilightPhase.NIGHT: "#000000",
}

_BODY_STYLES: dict[str, tuple[str, float]] = {
    "sun": ("#ffe066", 220),
    "moon": ("#e6e6e6", 150),
}
_PLANET_STYLE = ("#ffb870", 50)


def render_static_chart(snapshot: SkySnapshot) -> Figure:
    """Render a SkySnapshot as a static matplotlib image.

    Pixel coordinates are used as data coordinates with the y axis inverted,
    so the figure matches the viewport the positions were projected for.

    Args:
        snapshot: Fully computed sky positions.

    Returns:
        matplotlib Figure object.
    """
    vp = snapshot.viewport
    bg = _SKY_COLORS[snapshot.twilight]
    fig, ax = plt.subplots(figsize=(vp.width / _DPI, vp.height / _DPI), dpi=_DPI)
    fig.patch.set_facecolor("black")
    ax.set_facecolor("black")

    horizon = Circle(vp.center, radius=vp.radius, color=bg, fill=True, zorder=0)
    ax.add_patch(horizon)
    ax.add_patch(Circle(vp.center, radius=vp.radius, color=_HORIZON_COLOR, fill=False))

    pos = snapshot.positions
    for line in snapshot.constellation_lines:
        p0, p1 = pos[line.star_from], pos[line.star_to]
        ax.plot([p0.x, p1.x], [p0.y, p1.y], color=_LINE_COLOR, linewidth=0.5, alpha=0.6, zorder=1)

    visible = snapshot.visible_bodies()
    stars = [b for b in visible if isinstance(b, FixedStar)]
    if stars:
        mags = np.array([s.magnitude for s in stars])
        marker_size = 100 * 10 ** (mags / -2.5)
        ax.scatter(
            [pos[s.id].x for s in stars],
            [pos[s.id].y for s in stars],
            s=marker_size,
            color="white",
            marker=".",
            linewidths=0,
            zorder=2,
        )

    for body in visible:
        if isinstance(body, FixedStar):
            continue
        color, size = _BODY_STYLES.get(body.id, _PLANET_STYLE)
        p = pos[body.id]
        ax.scatter([p.x], [p.y], s=size, color=color, linewidths=0, zorder=3)
        ax.annotate(body.name, (p.x, p.y), xytext=(6, 6), textcoords="offset points",
                    color=color, fontsize=8)

    for cp in cardinal_points(vp, snapshot.rotation):
        ax.text(cp.x, cp.y, cp.label, color=_LINE_COLOR, ha="center", va="center",
                fontsize=12, fontweight="bold")

    ax.set_xlim(0, vp.width)
    ax.set_ylim(vp.height, 0)
    ax.set_aspect("equal")
    ax.axis("off")

    return fig


def save_static_chart(snapshot: SkySnapshot, output_path: Path | None = None,
                      results_dir: Path | None = None) -> Path:
    """Save a SkySnapshot as a PNG file.

    Args:
        snapshot: Fully computed sky positions.
        output_path: Destination path. Auto-generated under results_dir if None.
        results_dir: Directory for auto-generated names. ./results if None.

    Returns:
        Path to the saved file.
    """
    if output_path is None:
        obs = snapshot.observer
        when_str = snapshot.when.strftime("%Y_%m_%d_%H_%M")
        filename = f"{obs.lat:.2f}_{obs.lng:.2f}__{when_str}.png"
        output_path = (results_dir or Path("results")) / filename

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_static_chart(snapshot)
    fig.savefig(output_path, facecolor="black")
    plt.close(fig)
    return output_path
