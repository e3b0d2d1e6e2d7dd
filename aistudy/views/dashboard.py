# aistudy/views/dashboard.py
from __future__ import annotations
import customtkinter as ctk
from ..state.model import Subject, View as ViewMode
from ..theme.tokens import TOKENS, SUBJECT_COLORS
from ..widgets.cards import KPICard, Section, SubjectCard
from ..widgets.charts import activity_bars

# placeholder weekly activity until per-day minutes are tracked
WEEK_ACTIVITY = [40, 70, 45, 90, 60, 30, 80]
WEEK_LABELS = [f"T{i+2}" for i in range(7)]


def _short(s: str, n=36):
    s = str(s or "")
    return (s[:n-1] + "…") if len(s) > n else s


class View(ctk.CTkFrame):
    def __init__(self, master, state: dict, on_navigate, **kw):
        super().__init__(master, fg_color="transparent", **kw)
        self.snapshot = state or {}
        self.on_navigate = on_navigate
        self._build()

    def _build(self):
        prof = self.snapshot.get("studentProfile") or {}
        stats = self.snapshot.get("studyStats") or {}

        top = ctk.CTkFrame(self, fg_color="transparent"); top.pack(fill="x", padx=10, pady=(10, 4))
        ctk.CTkLabel(top, text=f"Chào buổi sáng, {prof.get('name') or 'Bạn'} 👋",
                     font=ctk.CTkFont(size=22, weight="bold")).pack(anchor="w")
        ctk.CTkLabel(top, text=f"Bạn đã học được {stats.get('totalStudyMinutes', 0)} phút trong tuần này.",
                     text_color=TOKENS["color"]["muted"]).pack(anchor="w")

        kpis = ctk.CTkFrame(self, fg_color="transparent"); kpis.pack(fill="x", padx=4, pady=4)
        for i, (k, v, c) in enumerate([
            ("Điểm mục tiêu", prof.get("targetScore") or "Chưa đặt", TOKENS["color"]["accent"]),
            ("Chuỗi ngày học", stats.get("streakDays", 0), None),
            ("Bài học đã lưu", len(self.snapshot.get("savedLessons") or []), None),
        ]):
            kpis.grid_columnconfigure(i, weight=1)
            KPICard(kpis, k, v, color=c).grid(row=0, column=i, sticky="nsew", padx=6, pady=6)

        subjects = ctk.CTkFrame(self, fg_color="transparent"); subjects.pack(fill="x", padx=4, pady=4)
        for i, sub in enumerate(Subject):
            subjects.grid_columnconfigure(i, weight=1)
            SubjectCard(subjects, sub.value, SUBJECT_COLORS[sub.name],
                        on_click=lambda s=sub: self.on_navigate(ViewMode.SUBJECT, s)) \
                .grid(row=0, column=i, sticky="nsew", padx=6, pady=6)

        bottom = ctk.CTkFrame(self, fg_color="transparent"); bottom.pack(fill="both", expand=True, padx=4, pady=4)
        bottom.grid_columnconfigure(0, weight=2); bottom.grid_columnconfigure(1, weight=1)

        act = Section(bottom, "Hoạt động học tập"); act.grid(row=0, column=0, rowspan=2, sticky="nsew", padx=6, pady=6)
        activity_bars(act, WEEK_LABELS, WEEK_ACTIVITY).grid(row=1, column=0, sticky="nsew", padx=8, pady=8)

        lessons = Section(bottom, "Bài học đã lưu"); lessons.grid(row=0, column=1, sticky="nsew", padx=6, pady=6)
        recent = (self.snapshot.get("savedLessons") or [])[:3]
        for r, l in enumerate(recent, start=1):
            ctk.CTkLabel(lessons, text=_short(l.get("topic")), anchor="w").grid(row=r, column=0, sticky="ew", padx=12, pady=2)
        if not recent:
            ctk.CTkLabel(lessons, text="Chưa có bài học nào được lưu.", text_color=TOKENS["color"]["muted"]) \
                .grid(row=1, column=0, sticky="w", padx=12, pady=(2, 10))

        plan = Section(bottom, "Kế hoạch hôm nay"); plan.grid(row=1, column=1, sticky="nsew", padx=6, pady=6)
        for r, t in enumerate((self.snapshot.get("tasks") or [])[:2], start=1):
            mark = "☑" if t.get("completed") else "☐"
            ctk.CTkLabel(plan, text=f"{mark} {_short(t.get('text'))}", anchor="w").grid(row=r, column=0, sticky="ew", padx=12, pady=2)
        ctk.CTkButton(plan, text="XEM TẤT CẢ", fg_color="transparent", text_color=TOKENS["color"]["primary"],
                      command=lambda: self.on_navigate(ViewMode.PLANNER)).grid(row=9, column=0, sticky="w", padx=6, pady=(2, 10))
