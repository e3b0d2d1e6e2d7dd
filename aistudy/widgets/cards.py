# aistudy/widgets/cards.py
from __future__ import annotations
import tkinter as tk
import customtkinter as ctk
from ..theme.tokens import TOKENS

CARD  = TOKENS["color"]["card"]
MUTED = TOKENS["color"]["muted"]


class KPICard(ctk.CTkFrame):
    """
    Small stat card:
      - title: label on top
      - value: big number/text
      - color: optional text color for the value
    """
    def __init__(self, master, title: str, value: str | int | float = "—",
                 color: str | None = None, **kw):
        super().__init__(master, corner_radius=16, fg_color=CARD, **kw)
        self.grid_columnconfigure(0, weight=1)

        ctk.CTkLabel(self, text=title, text_color=MUTED,
                     font=ctk.CTkFont(size=12)).grid(row=0, column=0, sticky="w", padx=12, pady=(10, 0))

        self._value_var = tk.StringVar(value=str(value))
        self.value_label = ctk.CTkLabel(self, textvariable=self._value_var,
                                        font=ctk.CTkFont(size=24, weight="bold"))
        if color:
            self.value_label.configure(text_color=color)
        self.value_label.grid(row=1, column=0, sticky="w", padx=12, pady=(2, 12))


class Section(ctk.CTkFrame):
    """Titled block; header sits at row 0, content goes in later rows."""
    def __init__(self, master, title: str, **kw):
        super().__init__(master, corner_radius=18, fg_color=CARD, **kw)
        self.grid_columnconfigure(0, weight=1)
        ctk.CTkLabel(self, text=title, font=ctk.CTkFont(size=14, weight="bold")).grid(
            row=0, column=0, sticky="w", padx=12, pady=(10, 4))


class SubjectCard(ctk.CTkFrame):
    def __init__(self, master, title: str, color: str, on_click, **kw):
        super().__init__(master, corner_radius=24, fg_color=CARD, **kw)
        badge = ctk.CTkButton(self, text=title[:1], width=56, height=56, corner_radius=18,
                              fg_color=color, hover_color=color, command=on_click,
                              font=ctk.CTkFont(size=22, weight="bold"))
        badge.pack(pady=(16, 8))
        ctk.CTkLabel(self, text=title, font=ctk.CTkFont(size=16, weight="bold")).pack()
        ctk.CTkLabel(self, text="KHÁM PHÁ", text_color=MUTED, font=ctk.CTkFont(size=10)).pack(pady=(0, 14))
