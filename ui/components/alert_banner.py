import customtkinter as ctk
from utils.constants import SEVERITY_COLORS, SEVERITY_ICONS


class AlertBanner(ctk.CTkFrame):
    """A colored banner with an optional action button.

    Persistent banners (dismissible=False) stay until the owner destroys them,
    e.g. the connection-status banner that only goes away after a retry succeeds.
    """

    def __init__(self, master, message: str, severity: str = "info",
                 title: str | None = None, action_text: str | None = None,
                 action_cmd=None, dismissible: bool = True, **kwargs):
        color = SEVERITY_COLORS.get(severity, SEVERITY_COLORS["info"])
        super().__init__(master, fg_color=color, corner_radius=6, **kwargs)
        self.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(
            self, text=SEVERITY_ICONS.get(severity, ""), text_color="white",
            width=24, font=ctk.CTkFont(size=14),
        ).grid(row=0, column=0, rowspan=2, padx=(10, 0), pady=6)

        text_row = 0
        if title:
            ctk.CTkLabel(
                self, text=title, text_color="white", anchor="w",
                font=ctk.CTkFont(size=12, weight="bold"),
            ).grid(row=0, column=1, sticky="ew", padx=8, pady=(6, 0))
            text_row = 1

        ctk.CTkLabel(
            self, text=message, text_color="white",
            anchor="w", justify="left", wraplength=600,
        ).grid(row=text_row, column=1, sticky="ew", padx=8, pady=(0 if title else 6, 6))

        btn_frame = ctk.CTkFrame(self, fg_color="transparent")
        btn_frame.grid(row=0, column=2, rowspan=2, padx=(0, 6))

        if action_text and action_cmd:
            ctk.CTkButton(
                btn_frame, text=action_text, width=60, height=24,
                fg_color="transparent", border_width=1, border_color="white",
                hover_color=("gray70", "gray30"),
                text_color="white", command=action_cmd,
            ).pack(side="left", padx=2)

        if dismissible:
            ctk.CTkButton(
                btn_frame, text="✕", width=28, height=24,
                fg_color="transparent",
                hover_color=("gray70", "gray30"),
                text_color="white",
                command=self.destroy,
            ).pack(side="left")
