import logging

import customtkinter as ctk
from services.category_service import CategoryService, Notice
from ui.components.alert_banner import AlertBanner
from ui.components.toast import Toast
from ui.tabs.categories_tab import CategoriesTab
from utils.constants import APP_NAME, APP_WIDTH, APP_HEIGHT, SEVERITY_COLORS

logger = logging.getLogger(__name__)


class AppWindow(ctk.CTk):
    def __init__(self, category_service: CategoryService, **kwargs):
        super().__init__(**kwargs)
        self._cat_svc = category_service
        self._toast: Toast | None = None

        self.title(APP_NAME)
        self.minsize(640, 480)
        self.geometry(f"{APP_WIDTH}x{APP_HEIGHT}")

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(2, weight=1)

        self._build_header()
        self._build_banner_area()
        self._build_body()

        # Load after the window is drawn so the loading state is visible
        self.after(100, self.reload)

    # ── Header ───────────────────────────────────────────────────────────────
    def _build_header(self):
        bar = ctk.CTkFrame(self, fg_color=("gray85", "gray15"), corner_radius=0)
        bar.grid(row=0, column=0, sticky="ew")
        bar.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(
            bar, text=APP_NAME, font=ctk.CTkFont(size=16, weight="bold"),
        ).grid(row=0, column=0, padx=(12, 8), pady=(8, 0), sticky="w")

        self._mode_badge = ctk.CTkLabel(
            bar, text="Connecting...", width=90, corner_radius=10,
            fg_color=("gray75", "gray30"), font=ctk.CTkFont(size=11, weight="bold"),
        )
        self._mode_badge.grid(row=0, column=1, padx=4, pady=(8, 0), sticky="w")

        ctk.CTkLabel(
            bar, text=f"API: {self._cat_svc.base_url}", text_color="gray60",
            font=ctk.CTkFont(size=11),
        ).grid(row=0, column=2, padx=12, pady=(8, 0), sticky="e")

        self._subtitle = ctk.CTkLabel(bar, text="", text_color="gray60", anchor="w")
        self._subtitle.grid(row=1, column=0, columnspan=3, padx=12, pady=(0, 8), sticky="w")

    def _build_banner_area(self):
        self._banner_frame = ctk.CTkFrame(self, fg_color="transparent", height=0)
        self._banner_frame.grid(row=1, column=0, sticky="ew", padx=8)

    def _build_body(self):
        self._categories_tab = CategoriesTab(
            self,
            category_service=self._cat_svc,
            notify_refresh=self.notify_refresh,
            on_notice=self.show_notice,
        )
        self._categories_tab.grid(row=2, column=0, sticky="nsew")

    # ── Loading ──────────────────────────────────────────────────────────────
    def reload(self):
        """Probe the API and (re)load the list. Also the 'Retry Connection' action."""
        self._mode_badge.configure(text="Connecting...", fg_color=("gray75", "gray30"))
        self.update_idletasks()
        notice = self._cat_svc.load()
        self._update_status()
        self._categories_tab.refresh()
        if notice:
            self.show_notice(notice)

    def _update_status(self):
        for w in self._banner_frame.winfo_children():
            w.destroy()

        if self._cat_svc.demo_mode:
            self._mode_badge.configure(text="Demo Mode", fg_color=SEVERITY_COLORS["warning"])
            self._subtitle.configure(text="Managing sample categories (changes won't be saved)")
        else:
            self._mode_badge.configure(text="Live", fg_color=SEVERITY_COLORS["success"])
            self._subtitle.configure(text="Manage your application categories")

        if self._cat_svc.api_error:
            AlertBanner(
                self._banner_frame,
                title="Connection Status",
                message=self._cat_svc.api_error,
                severity="warning",
                action_text="Retry Connection",
                action_cmd=self.reload,
                dismissible=False,
            ).pack(fill="x", pady=(6, 2))

    # ── Refresh & notices ────────────────────────────────────────────────────
    def notify_refresh(self, scope: str = "category"):
        if scope == "reload":
            self.reload()
        else:
            self._categories_tab.refresh()

    def show_notice(self, notice: Notice):
        log = logger.error if notice.severity == "error" else logger.info
        log("%s: %s", notice.title, notice.detail)
        if self._toast is not None and self._toast.winfo_exists():
            self._toast.destroy()
        self._toast = Toast(self, notice.title, notice.detail, notice.severity)
