import customtkinter as ctk
from api.category_api import CategoryApiError
from services.category_service import CategoryService, Notice
from models.category import Category


class CategoryForm(ctk.CTkToplevel):
    """Add or rename a category."""

    def __init__(
        self,
        master,
        category_service: CategoryService,
        on_notice,
        category: Category | None = None,
        **kwargs,
    ):
        super().__init__(master, **kwargs)
        self._svc = category_service
        self._on_notice = on_notice
        self._category = category
        self.saved = False

        self.title("Edit Category" if category else "Add New Category")
        self.resizable(False, False)
        self.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(
            self,
            text="Update the category name." if category else "Enter the name for the new category.",
            text_color="gray60", anchor="w",
        ).grid(row=0, column=0, columnspan=2, padx=16, pady=(16, 4), sticky="ew")

        # Name
        ctk.CTkLabel(self, text="Name:").grid(
            row=1, column=0, padx=(16, 8), pady=4, sticky="e"
        )
        self._name_entry = ctk.CTkEntry(self, width=260, placeholder_text="Enter category name")
        self._name_entry.grid(row=1, column=1, padx=(0, 16), pady=4, sticky="ew")
        if category:
            self._name_entry.insert(0, category.name)
        self._name_entry.bind("<Return>", lambda _e: self._on_save())
        self._name_entry.focus_set()

        # Error
        self._error_var = ctk.StringVar()
        ctk.CTkLabel(
            self, textvariable=self._error_var,
            text_color="#F44336", wraplength=300, anchor="w",
        ).grid(row=2, column=0, columnspan=2, padx=16, pady=(0, 4), sticky="ew")

        # Buttons
        btn_frame = ctk.CTkFrame(self, fg_color="transparent")
        btn_frame.grid(row=3, column=0, columnspan=2, padx=16, pady=(4, 16), sticky="ew")
        ctk.CTkButton(
            btn_frame, text="Cancel", width=90,
            fg_color="transparent", border_width=1,
            text_color=("gray10", "gray90"),
            command=self.destroy,
        ).pack(side="left")
        ctk.CTkButton(
            btn_frame, text="Update Category" if category else "Save Category",
            width=120, command=self._on_save,
        ).pack(side="right")

        self.transient(master)
        self.grab_set()
        self._center()

    def _on_save(self):
        name = self._name_entry.get()
        action = "update" if self._category else "create"
        try:
            if self._category:
                notice = self._svc.rename(self._category.id, name)
            else:
                notice = self._svc.create(name)
        except ValueError as e:
            self._error_var.set(str(e))
            return
        except CategoryApiError as e:
            self._on_notice(Notice("Error", f"Failed to {action} category: {e}", "error"))
            return
        self.saved = True
        self._on_notice(notice)
        self.destroy()

    def _center(self):
        self.update_idletasks()
        mw = self.master.winfo_x() + self.master.winfo_width() // 2
        mh = self.master.winfo_y() + self.master.winfo_height() // 2
        w, h = self.winfo_reqwidth(), self.winfo_reqheight()
        self.geometry(f"+{mw - w//2}+{mh - h//2}")
