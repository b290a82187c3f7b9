import customtkinter as ctk
from services.category_service import CategoryService
from utils.constants import BULK_CLOSE_DELAY_MS
from utils.text_helpers import parse_bulk_names


class BulkCategoryForm(ctk.CTkToplevel):
    """Create several categories from newline-separated names."""

    def __init__(self, master, category_service: CategoryService, on_notice, **kwargs):
        super().__init__(master, **kwargs)
        self._svc = category_service
        self._on_notice = on_notice
        self._processing = False
        self._done = False
        self.saved = False

        self.title("Add Multiple Categories")
        self.resizable(False, False)
        self.grid_columnconfigure(0, weight=1)

        ctk.CTkLabel(
            self,
            text="Enter category names, one per line. Duplicate names will be automatically removed.",
            text_color="gray60", anchor="w", justify="left", wraplength=380,
        ).grid(row=0, column=0, padx=16, pady=(16, 6), sticky="ew")

        self._textbox = ctk.CTkTextbox(self, width=380, height=200)
        self._textbox.grid(row=1, column=0, padx=16, pady=4, sticky="ew")
        self._textbox.bind("<KeyRelease>", self._update_count)
        self._textbox.focus_set()

        self._count_label = ctk.CTkLabel(self, text="", text_color="gray60", anchor="w")
        self._count_label.grid(row=2, column=0, padx=16, sticky="ew")

        # Progress (shown while processing)
        self._progress_frame = ctk.CTkFrame(self, fg_color="transparent")
        self._progress_frame.grid_columnconfigure(0, weight=1)
        self._progress_label = ctk.CTkLabel(self._progress_frame, text="", anchor="w")
        self._progress_label.grid(row=0, column=0, sticky="ew")
        self._progress_bar = ctk.CTkProgressBar(self._progress_frame)
        self._progress_bar.set(0)
        self._progress_bar.grid(row=1, column=0, sticky="ew", pady=(2, 0))

        self._failed_var = ctk.StringVar()
        ctk.CTkLabel(
            self, textvariable=self._failed_var,
            text_color="#F44336", wraplength=380, anchor="w", justify="left",
        ).grid(row=4, column=0, padx=16, pady=(4, 0), sticky="ew")

        btn_frame = ctk.CTkFrame(self, fg_color="transparent")
        btn_frame.grid(row=5, column=0, padx=16, pady=(8, 16), sticky="ew")
        self._cancel_btn = ctk.CTkButton(
            btn_frame, text="Cancel", width=90,
            fg_color="transparent", border_width=1,
            text_color=("gray10", "gray90"),
            command=self.destroy,
        )
        self._cancel_btn.pack(side="left")
        self._create_btn = ctk.CTkButton(
            btn_frame, text="Create Categories", width=140, command=self._on_create,
        )
        self._create_btn.pack(side="right")

        self.protocol("WM_DELETE_WINDOW", self._on_close)
        self._update_count()

        self.transient(master)
        self.grab_set()
        self._center()

    def _text(self) -> str:
        return self._textbox.get("1.0", "end-1c")

    def _update_count(self, _event=None):
        count = len(parse_bulk_names(self._text()))
        self._count_label.configure(text=f"{count} categories to add")
        if not (self._processing or self._done):
            self._create_btn.configure(state="normal" if count else "disabled")

    def _set_processing(self, processing: bool):
        self._processing = processing
        state = "disabled" if processing else "normal"
        self._textbox.configure(state=state)
        self._cancel_btn.configure(state=state)
        self._create_btn.configure(
            state=state, text="Processing..." if processing else "Create Categories",
        )
        if processing:
            self._progress_frame.grid(row=3, column=0, padx=16, pady=(6, 0), sticky="ew")
        else:
            self._progress_frame.grid_remove()

    def _on_progress(self, completed: int, total: int, failed: list[str]):
        self._progress_label.configure(text=f"Progress: {completed} / {total}")
        self._progress_bar.set(completed / total if total else 0)
        if failed:
            self._failed_var.set("Failed: " + ", ".join(failed))
        self.update_idletasks()

    def _on_create(self):
        self._failed_var.set("")
        try:
            self._set_processing(True)
            result = self._svc.bulk_create(self._text(), on_progress=self._on_progress)
        except ValueError as e:
            self._failed_var.set(str(e))
            return
        finally:
            self._set_processing(False)

        self.saved = result.completed > 0
        self._on_notice(result.notice)
        if result.all_succeeded:
            self._done = True
            self._textbox.configure(state="disabled")
            self._create_btn.configure(state="disabled")
            self.after(BULK_CLOSE_DELAY_MS, self.destroy)
        else:
            self._failed_var.set("Failed: " + ", ".join(result.failed))
            self._update_count()

    def _on_close(self):
        if not self._processing:
            self.destroy()

    def _center(self):
        self.update_idletasks()
        mw = self.master.winfo_x() + self.master.winfo_width() // 2
        mh = self.master.winfo_y() + self.master.winfo_height() // 2
        w, h = self.winfo_reqwidth(), self.winfo_reqheight()
        self.geometry(f"+{mw - w//2}+{mh - h//2}")
