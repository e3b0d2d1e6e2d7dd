# aistudy/views/features.py
"""Feature views. Each one only sees the slice and callbacks the router gives it."""
from __future__ import annotations
import customtkinter as ctk
from uuid import uuid4
from datetime import datetime
from ..data.frames import grades_frame, average_by_subject, overall_average, append_score
from ..theme.tokens import TOKENS
from ..widgets.cards import KPICard, Section
from ..widgets.charts import hbar_labeled

MUTED = TOKENS["color"]["muted"]


def _header(master, text):
    ctk.CTkLabel(master, text=text, font=ctk.CTkFont(size=18, weight="bold")).pack(anchor="w", padx=10, pady=(10, 4))


def _entry_row(master, placeholder, button, on_submit):
    row = ctk.CTkFrame(master, fg_color="transparent"); row.pack(fill="x", padx=10, pady=6)
    row.grid_columnconfigure(0, weight=1)
    e = ctk.CTkEntry(row, placeholder_text=placeholder, height=40)
    e.grid(row=0, column=0, sticky="ew", padx=(0, 8))
    def submit():
        text = (e.get() or "").strip()
        if text:
            e.delete(0, "end"); on_submit(text)
    e.bind("<Return>", lambda _e: (submit(), "break"))
    ctk.CTkButton(row, text=button, height=40, command=submit).grid(row=0, column=1)
    return e


class SubjectView(ctk.CTkFrame):
    def __init__(self, master, subject, profile, saved_lessons, on_back, on_save_lesson, **kw):
        super().__init__(master, fg_color="transparent", **kw)
        self.subject = subject
        self.on_save_lesson = on_save_lesson
        top = ctk.CTkFrame(self, fg_color="transparent"); top.pack(fill="x", padx=10, pady=(10, 4))
        ctk.CTkButton(top, text="← Quay lại", width=100, command=on_back).pack(side="left")
        ctk.CTkLabel(top, text=subject.value, font=ctk.CTkFont(size=18, weight="bold")).pack(side="left", padx=12)
        if profile.get("learningStyle"):
            ctk.CTkLabel(self, text=f"Phong cách học: {profile['learningStyle']}", text_color=MUTED).pack(anchor="w", padx=10)
        _entry_row(self, "Chủ đề bài học…", "Lưu bài học", self._save)
        box = Section(self, "Bài học đã lưu"); box.pack(fill="both", expand=True, padx=10, pady=8)
        mine = [l for l in saved_lessons if l.get("subject") == subject.value]
        for r, l in enumerate(mine, start=1):
            ctk.CTkLabel(box, text=f"{l.get('topic')}  ·  {l.get('date', '')}", anchor="w").grid(row=r, column=0, sticky="ew", padx=12, pady=2)

    def _save(self, topic):
        self.on_save_lesson({"id": uuid4().hex, "topic": topic, "subject": self.subject.value,
                             "content": "", "date": datetime.now().strftime("%d/%m/%Y")})


class FlashcardsView(ctk.CTkFrame):
    def __init__(self, master, cards, replace_cards, transform_cards, **kw):
        super().__init__(master, fg_color="transparent", **kw)
        self.transform_cards = transform_cards
        _header(self, f"Ghi nhớ ({len(cards)} thẻ)")
        _entry_row(self, "Mặt trước | Mặt sau", "Thêm thẻ", self._add)
        sf = ctk.CTkScrollableFrame(self, fg_color="transparent"); sf.pack(fill="both", expand=True, padx=10, pady=6)
        for c in cards:
            row = ctk.CTkFrame(sf, corner_radius=12); row.pack(fill="x", pady=3)
            ctk.CTkLabel(row, text=f"{c.get('front', '')}  →  {c.get('back', '')}", anchor="w").pack(side="left", padx=10, pady=8)
            ctk.CTkButton(row, text="Xoá", width=60, fg_color=TOKENS["color"]["danger"],
                          command=lambda cid=c.get("id"): self.transform_cards(lambda cs: [x for x in cs if x.get("id") != cid])) \
                .pack(side="right", padx=8)
        if cards:
            ctk.CTkButton(self, text="Xoá tất cả", fg_color="transparent", command=lambda: replace_cards([])).pack(anchor="e", padx=10, pady=(0, 10))

    def _add(self, text):
        front, _, back = text.partition("|")
        card = {"id": uuid4().hex, "front": front.strip(), "back": back.strip()}
        self.transform_cards(lambda cs: [*cs, card])


class PlannerView(ctk.CTkFrame):
    def __init__(self, master, tasks, replace_tasks, transform_tasks,
                 reminders, replace_reminders, transform_reminders, **kw):
        super().__init__(master, fg_color="transparent", **kw)
        self.transform_tasks = transform_tasks
        self.transform_reminders = transform_reminders
        _header(self, "Lộ trình học tập")
        _entry_row(self, "Việc cần làm…", "Thêm", self._add_task)
        box = Section(self, "Nhiệm vụ"); box.pack(fill="x", padx=10, pady=6)
        for r, t in enumerate(tasks, start=1):
            var = ctk.BooleanVar(value=bool(t.get("completed")))
            ctk.CTkCheckBox(box, text=t.get("text", ""), variable=var,
                            command=lambda tid=t.get("id"): self._toggle(tid)).grid(row=r, column=0, sticky="w", padx=12, pady=3)
        _entry_row(self, "Nhắc nhở…", "Nhắc tôi", self._add_reminder)
        rem = Section(self, "Nhắc nhở"); rem.pack(fill="x", padx=10, pady=6)
        for r, m in enumerate(reminders, start=1):
            ctk.CTkLabel(rem, text=f"⏰ {m.get('text', '')}", anchor="w").grid(row=r, column=0, sticky="w", padx=12, pady=2)
        if reminders:
            ctk.CTkButton(rem, text="Xoá nhắc nhở", fg_color="transparent",
                          command=lambda: replace_reminders([])).grid(row=len(reminders) + 1, column=0, sticky="w", padx=6, pady=(2, 8))

    def _add_task(self, text):
        task = {"id": uuid4().hex, "text": text, "completed": False}
        self.transform_tasks(lambda ts: [*ts, task])

    def _toggle(self, tid):
        self.transform_tasks(lambda ts: [{**t, "completed": not t.get("completed")} if t.get("id") == tid else t for t in ts])

    def _add_reminder(self, text):
        rem = {"id": uuid4().hex, "text": text, "date": datetime.now().strftime("%d/%m/%Y")}
        self.transform_reminders(lambda rs: [*rs, rem])


class ChatView(ctk.CTkFrame):
    """Session list and transcript; replies come from the assistant backend, not from here."""

    def __init__(self, master, sessions, active_session_id, profile, on_session_change,
                 on_new_session, on_delete_session, on_update_session, on_rename_session, **kw):
        super().__init__(master, fg_color="transparent", **kw)
        self.on_update_session = on_update_session
        self.on_rename_session = on_rename_session
        # a dangling active id reads as no session selected
        self.active = next((s for s in sessions if s.get("id") == active_session_id), None)

        self.grid_columnconfigure(1, weight=1); self.grid_rowconfigure(0, weight=1)
        side = ctk.CTkScrollableFrame(self, width=220); side.grid(row=0, column=0, sticky="nsw", padx=(10, 6), pady=10)
        ctk.CTkButton(side, text="+ Chat mới", command=on_new_session).pack(fill="x", pady=(0, 8))
        for s in sessions:
            row = ctk.CTkFrame(side, fg_color="transparent"); row.pack(fill="x", pady=2)
            is_active = self.active is not None and s.get("id") == self.active.get("id")
            ctk.CTkButton(row, text=f"{s.get('title')}\n{s.get('date', '')}", anchor="w",
                          fg_color=TOKENS["color"]["primary"] if is_active else "transparent",
                          command=lambda sid=s.get("id"): on_session_change(sid)).pack(side="left", fill="x", expand=True)
            ctk.CTkButton(row, text="✕", width=28, fg_color="transparent",
                          command=lambda sid=s.get("id"): on_delete_session(sid)).pack(side="right")

        main = ctk.CTkFrame(self, fg_color="transparent"); main.grid(row=0, column=1, sticky="nsew", padx=(0, 10), pady=10)
        if self.active is None:
            ctk.CTkLabel(main, text="Chọn hoặc tạo một cuộc trò chuyện.", text_color=MUTED).pack(pady=18)
            return
        sf = ctk.CTkScrollableFrame(main, fg_color="transparent"); sf.pack(fill="both", expand=True)
        for m in self.active.get("messages") or []:
            is_user = m.get("role") == "user"
            ctk.CTkLabel(sf, text=m.get("text", ""), justify="left", wraplength=520, corner_radius=14,
                         fg_color="#2563EB" if is_user else TOKENS["color"]["card"], padx=12, pady=8) \
                .pack(anchor="e" if is_user else "w", padx=6, pady=3)
        _entry_row(main, "Nhập câu hỏi…", "Gửi", self._send)

    def _send(self, text):
        sid = self.active["id"]
        msgs = [*(self.active.get("messages") or []), {"role": "user", "text": text}]
        if not self.active.get("messages"):
            self.on_rename_session(sid, text[:40])
        self.on_update_session(sid, msgs)


class ExamPrepView(ctk.CTkFrame):
    def __init__(self, master, profile, **kw):
        super().__init__(master, fg_color="transparent", **kw)
        _header(self, "Luyện thi")
        box = Section(self, "Mục tiêu"); box.pack(fill="x", padx=10, pady=6)
        for r, (label, key) in enumerate([("Trường", "targetUniversity"), ("Ngành", "targetMajor"),
                                          ("Điểm mục tiêu", "targetScore"), ("Điểm mạnh", "strengths"),
                                          ("Điểm yếu", "weaknesses")], start=1):
            ctk.CTkLabel(box, text=label, text_color=MUTED).grid(row=r, column=0, sticky="w", padx=12, pady=2)
            ctk.CTkLabel(box, text=profile.get(key) or "—").grid(row=r, column=1, sticky="w", padx=8, pady=2)


class GradeTrackerView(ctk.CTkFrame):
    def __init__(self, master, grades, profile, on_update_grades, **kw):
        super().__init__(master, fg_color="transparent", **kw)
        self.grades = grades
        self.on_update_grades = on_update_grades
        _header(self, "Điểm số")
        _entry_row(self, "Môn | điểm (vd: Toán | 8.5)", "Thêm điểm", self._add)

        df = grades_frame(grades)
        avg = overall_average(df)
        kpis = ctk.CTkFrame(self, fg_color="transparent"); kpis.pack(fill="x", padx=4)
        for i, (k, v) in enumerate([("Điểm trung bình", "—" if avg != avg else f"{avg:.2f}"),
                                    ("Mục tiêu", profile.get("targetScore") or "Chưa đặt"),
                                    ("Số bài kiểm tra", len(df))]):
            kpis.grid_columnconfigure(i, weight=1)
            KPICard(kpis, k, v).grid(row=0, column=i, sticky="nsew", padx=6, pady=6)

        pairs = average_by_subject(df)
        box = Section(self, "Trung bình theo môn"); box.pack(fill="both", expand=True, padx=10, pady=6)
        hbar_labeled(box, [p[0] for p in pairs], [p[1] for p in pairs]).grid(row=1, column=0, sticky="nsew", padx=8, pady=8)

    def _add(self, text):
        subject, _, raw = text.partition("|")
        try:
            score = float(raw.strip().replace(",", "."))
        except ValueError:
            return
        self.on_update_grades(append_score(self.grades, subject.strip(), score))
