import customtkinter as ctk
from utils.constants import SEVERITY_COLORS, TOAST_DURATION_MS


class Toast(ctk.CTkFrame):
    """Transient notification pinned to the bottom-right corner of a window."""

    def __init__(self, master, title: str, detail: str, severity: str = "info",
                 duration_ms: int = TOAST_DURATION_MS, **kwargs):
        color = SEVERITY_COLORS.get(severity, SEVERITY_COLORS["info"])
        super().__init__(master, fg_color=color, corner_radius=8, **kwargs)
        self.grid_columnconfigure(0, weight=1)

        ctk.CTkLabel(
            self, text=title, text_color="white", anchor="w",
            font=ctk.CTkFont(size=13, weight="bold"),
        ).grid(row=0, column=0, sticky="ew", padx=(12, 4), pady=(8, 0))
        ctk.CTkButton(
            self, text="✕", width=24, height=20,
            fg_color="transparent", hover_color=("gray70", "gray30"),
            text_color="white", command=self.destroy,
        ).grid(row=0, column=1, padx=(0, 6), pady=(6, 0))
        ctk.CTkLabel(
            self, text=detail, text_color="white", anchor="w",
            justify="left", wraplength=320,
        ).grid(row=1, column=0, columnspan=2, sticky="ew", padx=12, pady=(0, 8))

        self.place(relx=1.0, rely=1.0, x=-16, y=-16, anchor="se")
        self.lift()
        self._after_id = self.after(duration_ms, self.destroy)

    def destroy(self):
        try:
            self.after_cancel(self._after_id)
        except (AttributeError, ValueError):
            pass
        super().destroy()
