# vowelspace/plotter.py
import logging

import numpy as np

from vowelspace.hull import is_result
from vowelspace.polygon import order_around_centroid
from vowelspace.utils import drop_missing

logger = logging.getLogger(__name__)

_CORNER_COLORS = {
    "[u]-corner": "tab:blue",
    "[i]-corner": "tab:green",
    "[ae]-corner": "tab:orange",
    "[a]-corner": "tab:red",
}


def plot_vowel_space(ax, f1, f2, space=None, hull=None, title="Vowel Space"):
    """
    Draw a vowel space on a matplotlib Axes.

    Points are plotted as (F2, F1) with both axes inverted, the usual
    phonetic orientation. `space` is a VectorSpace (center and corner
    polygon), `hull` a ConvexHullResult whose points share the axes'
    coordinates (a density hull lives in normalized units, so give it
    its own Axes).
    """
    f1, f2 = drop_missing(f1, f2)

    labels = [c for c in space.corners if c is not None] if space is not None else []
    if labels and len(labels) == len(f1):
        colors = [_CORNER_COLORS[c] for c in labels]
    else:
        colors = "gray"
    ax.scatter(f2, f1, c=colors, s=12, alpha=0.6, zorder=2)

    if space is not None:
        if space.center.is_defined:
            ax.scatter(
                [space.center.f2c], [space.center.f1c],
                marker="+", s=120, color="black", zorder=4, label="center",
            )

        corners = space.corner_points
        if corners.shape[0] >= 3:
            poly = order_around_centroid(corners)
            poly = np.vstack([poly, poly[:1]])
            ax.plot(poly[:, 0], poly[:, 1], color="black", linewidth=1.5,
                    zorder=3, label=f"VSA = {space.vsa:.0f}")
        elif corners.shape[0]:
            ax.scatter(corners[:, 0], corners[:, 1], marker="s", color="black", zorder=3)

    if hull is not None and is_result(hull):
        outline = hull.hull_points
        outline = np.vstack([outline, outline[:1]])
        ax.plot(outline[:, 0], outline[:, 1], color="tab:purple",
                linestyle="--", linewidth=1.2, zorder=3, label="hull")
    elif hull is not None:
        logger.debug("plot_vowel_space: no hull to draw (%r)", hull)

    ax.set_title(title)
    ax.set_xlabel("F2 (Hz)")
    ax.set_ylabel("F1 (Hz)")
    if not ax.xaxis_inverted():
        ax.invert_xaxis()
    if not ax.yaxis_inverted():
        ax.invert_yaxis()

    if ax.get_legend_handles_labels()[0]:
        ax.legend(loc="best")
    return ax
