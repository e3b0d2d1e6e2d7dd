# aistudy/views/shell.py
from __future__ import annotations
import logging
import customtkinter as ctk
from ..config import APP_TITLE, APP_SUBTITLE
from ..router import route
from ..state.model import View as ViewMode
from ..state.navigation import NAV_ITEMS
from ..theme.tokens import TOKENS
from . import dashboard, features

logger = logging.getLogger(__name__)

_C = TOKENS.get("color", {})
COLOR_SURFACE_ALT = _C.get("surface_alt", "#111C33")
COLOR_TEXT        = _C.get("text", "#E2E8F0")
COLOR_MUTED       = _C.get("muted", "#94A3B8")
COLOR_PRIMARY     = _C.get("primary", "#6366F1")
COLOR_ACCENT      = _C.get("accent", "#EC4899")
COLOR_HOVER_BG    = _C.get("card", "#1E293B")

FEATURE_VIEWS = {
    ViewMode.DASHBOARD: dashboard.View,
    ViewMode.SUBJECT: features.SubjectView,
    ViewMode.FLASHCARDS: features.FlashcardsView,
    ViewMode.PLANNER: features.PlannerView,
    ViewMode.CHATBOT: features.ChatView,
    ViewMode.EXAM_PREP: features.ExamPrepView,
    ViewMode.GRADE_TRACKER: features.GradeTrackerView,
}


class SidebarItem(ctk.CTkFrame):
    def __init__(self, master, key: ViewMode, text: str, icon_text: str, on_click, **kw):
        super().__init__(master, fg_color="transparent", **kw)
        self.key = key
        self.box = ctk.CTkFrame(self, fg_color="transparent", corner_radius=14)
        self.box.pack(fill="x", padx=6, pady=3)
        self.btn = ctk.CTkButton(
            self.box, text=f"{icon_text} {text}", command=lambda: on_click(self.key),
            anchor="w", fg_color="transparent", hover_color=COLOR_HOVER_BG,
            text_color=COLOR_MUTED, corner_radius=14, height=40,
        )
        self.btn.pack(fill="x", expand=True)

    def set_active(self, active: bool):
        if active:
            self.btn.configure(fg_color=COLOR_PRIMARY, text_color="#FFFFFF")
        else:
            self.btn.configure(fg_color="transparent", text_color=COLOR_MUTED)


class Sidebar(ctk.CTkFrame):
    def __init__(self, master, on_nav, **kw):
        super().__init__(master, fg_color=COLOR_SURFACE_ALT, corner_radius=28, **kw)
        self._items: list[SidebarItem] = []

        ctk.CTkLabel(self, text=f"✨ {APP_TITLE}", text_color=COLOR_TEXT,
                     font=ctk.CTkFont(size=18, weight="bold")).pack(anchor="w", padx=18, pady=(18, 0))
        ctk.CTkLabel(self, text=APP_SUBTITLE.upper(), text_color=COLOR_ACCENT,
                     font=ctk.CTkFont(size=10, weight="bold")).pack(anchor="w", padx=18, pady=(0, 18))

        for key, label, icon in NAV_ITEMS:
            it = SidebarItem(self, key, label, icon, on_click=on_nav)
            it.pack(fill="x")
            self._items.append(it)

    def set_active(self, key: ViewMode):
        for it in self._items:
            it.set_active(it.key == key)


class ShellView(ctk.CTkFrame):
    """Sidebar plus a content area re-rendered from the store on every change."""

    def __init__(self, master, app=None, **kw):
        super().__init__(master, fg_color="transparent", **kw)
        self.app = app
        self._build()
        self._unsubscribe = app.store.subscribe(lambda _s: self.after_idle(self.render))
        self.render()

    def _build(self):
        self.grid_rowconfigure(0, weight=1); self.grid_columnconfigure(1, weight=1)

        self.sidebar = Sidebar(self, on_nav=lambda v: self.app.navigator.navigate_to(v), width=240)
        self.sidebar.grid(row=0, column=0, sticky="nsw", padx=12, pady=12)

        main = ctk.CTkFrame(self, fg_color="transparent")
        main.grid(row=0, column=1, sticky="nsew", padx=(2, 12), pady=12)
        main.grid_rowconfigure(1, weight=1); main.grid_columnconfigure(0, weight=1)

        self.title_label = ctk.CTkLabel(main, text="", font=ctk.CTkFont(size=20, weight="bold"))
        self.title_label.grid(row=0, column=0, sticky="w", padx=6, pady=(0, 8))
        self.status = ctk.CTkLabel(main, text="", text_color=_C.get("warning", "#F59E0B"))
        self.status.grid(row=0, column=0, sticky="e", padx=6)

        self.content = ctk.CTkScrollableFrame(main, fg_color=COLOR_SURFACE_ALT, corner_radius=28)
        self.content.grid(row=1, column=0, sticky="nsew")

    def show_save_result(self, result):
        try: self.status.configure(text="" if result.ok else "⚠ Không lưu được dữ liệu (bộ nhớ đầy?)")
        except Exception: pass

    def render(self):
        r = route(self.app.store.get_state(), self.app.navigator, self.app.features)
        try: self.title_label.configure(text=r.title)
        except Exception: pass
        try: self.sidebar.set_active(r.view)
        except Exception: pass

        for w in self.content.winfo_children():
            try: w.destroy()
            except Exception: pass

        FEATURE_VIEWS[r.view](self.content, **r.props).pack(fill="both", expand=True, padx=8, pady=8)

    def on_close(self):
        self._unsubscribe()
