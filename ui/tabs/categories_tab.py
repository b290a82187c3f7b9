import customtkinter as ctk
from api.category_api import CategoryApiError
from services.category_service import CategoryService, Notice
from ui.components.bulk_category_form import BulkCategoryForm
from ui.components.category_form import CategoryForm
from ui.components.confirm_dialog import ask_confirmation
from utils.constants import HIGHLIGHT_COLOR
from utils.text_helpers import split_highlight


class CategoriesTab(ctk.CTkFrame):
    def __init__(
        self,
        master,
        category_service: CategoryService,
        notify_refresh,
        on_notice,
        **kwargs,
    ):
        super().__init__(master, fg_color="transparent", **kwargs)
        self._svc = category_service
        self._notify_refresh = notify_refresh
        self._on_notice = on_notice

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(2, weight=1)

        self._build_toolbar()
        self._build_search()
        self._build_list()

    def refresh(self):
        self._load()

    def _build_toolbar(self):
        bar = ctk.CTkFrame(self, fg_color=("gray88", "gray18"), corner_radius=8)
        bar.grid(row=0, column=0, sticky="ew", padx=8, pady=(8, 0))

        ctk.CTkLabel(
            bar, text="Categories",
            font=ctk.CTkFont(size=13, weight="bold"),
        ).pack(side="left", padx=(12, 16), pady=8)

        ctk.CTkButton(
            bar, text="+ Add Category", command=self._open_add,
        ).pack(side="left", padx=4, pady=6)

        ctk.CTkButton(
            bar, text="Add Multiple", width=110,
            fg_color="transparent", border_width=1,
            text_color=("gray10", "gray90"),
            command=self._open_bulk_add,
        ).pack(side="left", padx=4, pady=6)

        ctk.CTkButton(
            bar, text="Refresh", width=80,
            fg_color="transparent", border_width=1,
            text_color=("gray10", "gray90"),
            command=lambda: self._notify_refresh("reload"),
        ).pack(side="right", padx=(4, 12), pady=6)

    def _build_search(self):
        bar = ctk.CTkFrame(self, fg_color="transparent")
        bar.grid(row=1, column=0, sticky="ew", padx=8, pady=(8, 0))
        bar.grid_columnconfigure(0, weight=1)

        self._search_entry = ctk.CTkEntry(bar, placeholder_text="Search categories...")
        self._search_entry.grid(row=0, column=0, sticky="ew")
        self._search_entry.bind("<KeyRelease>", lambda _e: self._load())

        self._clear_btn = ctk.CTkButton(
            bar, text="✕", width=28,
            fg_color="transparent", text_color=("gray10", "gray90"),
            hover_color=("gray80", "gray25"),
            command=self._clear_search,
        )
        self._clear_btn.grid(row=0, column=1, padx=(4, 0))
        self._clear_btn.grid_remove()

        self._count_label = ctk.CTkLabel(bar, text="", text_color="gray60", width=150, anchor="e")
        self._count_label.grid(row=0, column=2, padx=(8, 0))

    def _build_list(self):
        self._scroll = ctk.CTkScrollableFrame(self)
        self._scroll.grid(row=2, column=0, sticky="nsew", padx=8, pady=8)
        self._scroll.grid_columnconfigure(0, weight=1)

    def _clear_search(self):
        self._search_entry.delete(0, "end")
        self._load()

    def _load(self):
        for w in self._scroll.winfo_children():
            w.destroy()

        term = self._search_entry.get()
        all_categories = self._svc.get_all()
        categories = self._svc.search(term)

        if term.strip():
            self._clear_btn.grid()
            self._count_label.configure(
                text="No categories found" if not categories
                else f"{len(categories)} of {len(all_categories)} categories"
            )
        else:
            self._clear_btn.grid_remove()
            self._count_label.configure(text="")

        if not all_categories:
            self._show_empty("No categories found.", "Add Your First Category", self._open_add)
            return
        if not categories:
            self._show_empty(f"No categories match '{term}'.", "Clear Search", self._clear_search)
            return

        # Column headers
        hdr = ctk.CTkFrame(self._scroll, fg_color="transparent")
        hdr.grid(row=0, column=0, sticky="ew", padx=4, pady=(0, 2))
        hdr.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(hdr, text="ID", width=60, anchor="center", text_color="gray60",
                     font=ctk.CTkFont(size=11)).grid(row=0, column=0, padx=(4, 0))
        ctk.CTkLabel(hdr, text="Name", anchor="w", text_color="gray60",
                     font=ctk.CTkFont(size=11)).grid(row=0, column=1, padx=8, sticky="w")
        ctk.CTkLabel(hdr, text="Actions", width=140, text_color="gray60",
                     font=ctk.CTkFont(size=11)).grid(row=0, column=2)

        for idx, cat in enumerate(categories):
            self._add_row(idx + 1, cat, term)

    def _show_empty(self, message: str, button_text: str, command):
        frame = ctk.CTkFrame(self._scroll, fg_color="transparent")
        frame.grid(row=0, column=0, pady=40)
        ctk.CTkLabel(frame, text=message, text_color="gray60").pack(pady=(0, 8))
        ctk.CTkButton(
            frame, text=button_text,
            fg_color="transparent", border_width=1,
            text_color=("gray10", "gray90"),
            command=command,
        ).pack()

    def _add_row(self, idx, cat, term: str):
        row = ctk.CTkFrame(
            self._scroll, fg_color=("gray90", "gray20"), corner_radius=8
        )
        row.grid(row=idx, column=0, sticky="ew", padx=4, pady=3)
        row.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(
            row, text=str(cat.id), width=60, anchor="center",
            font=ctk.CTkFont(size=12, weight="bold"),
        ).grid(row=0, column=0, padx=(4, 0), pady=8)

        # Name, with search matches highlighted
        name_frame = ctk.CTkFrame(row, fg_color="transparent")
        name_frame.grid(row=0, column=1, padx=8, sticky="w")
        for segment, is_match in split_highlight(cat.name, term):
            ctk.CTkLabel(
                name_frame, text=segment, anchor="w",
                font=ctk.CTkFont(size=13),
                fg_color=HIGHLIGHT_COLOR if is_match else "transparent",
                corner_radius=3 if is_match else 0,
                width=0, padx=0,
            ).pack(side="left")

        # Buttons
        btn_frame = ctk.CTkFrame(row, fg_color="transparent")
        btn_frame.grid(row=0, column=2, padx=(4, 10), pady=6)

        ctk.CTkButton(
            btn_frame, text="Edit", width=60, height=26,
            fg_color="transparent", border_width=1,
            text_color=("gray10", "gray90"),
            command=lambda c=cat: self._open_edit(c),
        ).pack(side="left", padx=(0, 4))

        ctk.CTkButton(
            btn_frame, text="Delete", width=65, height=26,
            fg_color="#F44336", hover_color="#D32F2F",
            command=lambda c=cat: self._on_delete(c),
        ).pack(side="left")

    def _open_add(self):
        form = CategoryForm(self.winfo_toplevel(), self._svc, self._on_notice)
        self.wait_window(form)
        if form.saved:
            self._notify_refresh("category")

    def _open_bulk_add(self):
        form = BulkCategoryForm(self.winfo_toplevel(), self._svc, self._on_notice)
        self.wait_window(form)
        if form.saved:
            self._notify_refresh("category")

    def _open_edit(self, cat):
        form = CategoryForm(self.winfo_toplevel(), self._svc, self._on_notice, category=cat)
        self.wait_window(form)
        if form.saved:
            self._notify_refresh("category")

    def _on_delete(self, cat):
        def confirm(c):
            return ask_confirmation(
                self.winfo_toplevel(),
                title="Delete Category",
                message=f"Are you sure you want to delete '{c.name}'?",
                confirm_text="Delete",
            )

        try:
            notice = self._svc.delete(cat.id, confirm)
        except (ValueError, CategoryApiError) as e:
            self._on_notice(Notice("Error", f"Failed to delete category: {e}", "error"))
            return
        if notice:
            self._on_notice(notice)
            self._notify_refresh("category")
