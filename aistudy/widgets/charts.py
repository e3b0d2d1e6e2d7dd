# aistudy/widgets/charts.py
from __future__ import annotations
import customtkinter as ctk
from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from ..theme.tokens import TOKENS


class MatplotlibHost(ctk.CTkFrame):
    def __init__(self, master, figsize=(4,2), dpi=100, **kw):
        super().__init__(master, fg_color="transparent", **kw)
        self.fig = Figure(figsize=figsize, dpi=dpi)
        self.ax = self.fig.add_subplot(111)
        self.canvas = FigureCanvasTkAgg(self.fig, master=self)
        self.canvas.draw()
        self.canvas.get_tk_widget().pack(fill="both", expand=True)

    def plot(self, fn):
        self.ax.clear(); fn(self.ax); self.canvas.draw_idle()


def activity_bars(parent, labels, values):
    host = MatplotlibHost(parent, figsize=(6.4,2.6))
    def _plot(ax):
        if not values:
            ax.text(0.5,0.5,"No data", ha="center", va="center"); return
        x = list(range(len(values)))
        ax.bar(x, values, color=TOKENS["color"]["primary"], width=0.6)
        ax.set_xticks(x); ax.set_xticklabels(labels)
        ax.set_yticks([]); ax.grid(axis="y", alpha=0.15)
    host.plot(_plot); return host


def hbar_labeled(parent, labels, values, title="", maximum=10.0):
    height = max(2.4, 0.6 * max(1, len(labels)) + 1.0)
    host = MatplotlibHost(parent, figsize=(4.8, height))
    host.fig.subplots_adjust(left=0.3, right=0.95, top=0.9, bottom=0.1)
    def _plot(ax):
        if not values:
            ax.text(0.5,0.5,"Chưa có dữ liệu", ha="center", va="center"); return
        m = max([maximum] + list(values))
        y = list(range(len(labels)))
        ax.barh(y, values, color=TOKENS["color"]["primary"], height=0.55)
        ax.set_yticks(y); ax.set_yticklabels(labels)
        ax.set_xlim(0, m * 1.12)
        for yi, val in enumerate(values):
            ax.text(val + (m*0.02), yi, f"{val:.2f}", va="center", ha="left", fontsize=9)
        if title: ax.set_title(title, fontsize=11)
        ax.grid(axis="x", alpha=0.2)
    host.plot(_plot); return host
