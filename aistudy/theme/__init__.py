from __future__ import annotations
import logging
import customtkinter as ctk
from matplotlib import rcParams
from .tokens import TOKENS

logger = logging.getLogger(__name__)


def apply_theme(mode: str = "dark"):
    try: ctk.set_appearance_mode(mode)
    except Exception: logger.warning("unknown appearance mode %r, keeping default", mode)


def set_matplotlib_style():
    rcParams.update({
        "axes.facecolor": TOKENS["color"]["card"],
        "figure.facecolor": TOKENS["color"]["card"],
        "axes.edgecolor": TOKENS["color"]["border"],
        "grid.color": TOKENS["color"]["grid"],
        "text.color": TOKENS["color"]["text"],
        "axes.labelcolor": TOKENS["color"]["text"],
        "xtick.color": TOKENS["color"]["muted"],
        "ytick.color": TOKENS["color"]["muted"],
        "axes.grid": True,
        "grid.alpha": 0.18,
        "lines.linewidth": 2.0,
    })
