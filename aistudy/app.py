# aistudy/app.py
from __future__ import annotations
import logging
import sys, traceback
import customtkinter as ctk
from tkinter import messagebox
from . import config
from .state import AppState, Features, FileStorage, Navigator, PersistenceAdapter
from .theme import apply_theme, set_matplotlib_style
from .views.shell import ShellView

logger = logging.getLogger(__name__)


def build_store(data_dir=None, quota_bytes=None) -> AppState:
    storage = FileStorage(data_dir or config.DATA_DIR, quota_bytes=quota_bytes or config.STORAGE_QUOTA)
    return AppState(PersistenceAdapter(storage, config.STORAGE_KEY))


class App(ctk.CTk):
    def __init__(self, store: AppState | None = None):
        super().__init__()
        self.title(config.APP_TITLE)
        self.geometry("1280x800"); self.minsize(1024, 640)

        self.store = store or build_store()
        self.navigator = Navigator(self.store)
        self.features = Features(self.store)

        self.container = ctk.CTkFrame(self, fg_color="transparent")
        self.container.pack(fill="both", expand=True)
        self.shell = ShellView(self.container, app=self)
        self.shell.pack(fill="both", expand=True)
        self.store.on_save(self.shell.show_save_result)

        self.protocol("WM_DELETE_WINDOW", self.on_close)
        # one-shot hydration once the loop is running
        self.after_idle(self._hydrate)

    def _hydrate(self):
        if self.store.hydrate_from_storage():
            logger.info("restored state from %s", config.DATA_DIR)
        self.features.stats.record_login()

    def on_close(self):
        try:
            self.shell.on_close()
        finally:
            self.destroy()


def _run():
    logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    apply_theme(mode=config.APPEARANCE_MODE); set_matplotlib_style()
    app = App()
    try: app.mainloop()
    except Exception as e:
        traceback.print_exc()
        try: messagebox.showerror("Lỗi ứng dụng", f"{type(e).__name__}: {e}")
        except Exception: pass
        sys.exit(1)


if __name__ == "__main__":
    _run()
