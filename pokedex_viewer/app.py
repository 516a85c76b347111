"""Tkinter GUI application."""

import logging
import threading
import tkinter as tk
import webbrowser
from pathlib import Path

from pokedex_viewer import images, log_config
from pokedex_viewer.controller import ViewerController
from pokedex_viewer.navigation import NavControls
from pokedex_viewer.record_view import RecordView
from pokedex_viewer.theme import (
    ACCENT,
    BG,
    BTN_PAD,
    CARD,
    ENTRY_BG,
    ENTRY_FG,
    ERROR_FG,
    FG,
    FG_DISABLED,
    ICON_NEXT,
    ICON_PREV,
    ICON_RANDOM,
    ICON_SEARCH,
    IMAGE_SIZE,
    LABEL_FONT,
    NAME_FONT,
    PAD,
    SMALL_FONT,
    SMALL_PAD,
    SUBTLE,
    TITLE_FONT,
    WINDOW_SIZE,
)
from pokedex_viewer.version import WINDOW_TITLE, __version__

log = logging.getLogger(__name__)


class App:
    def __init__(self, root):
        self.root = root
        root.title(WINDOW_TITLE)
        root.configure(bg=BG)
        root.geometry(f'{WINDOW_SIZE[0]}x{WINDOW_SIZE[1]}')
        root.minsize(*WINDOW_SIZE)
        root.option_add('*Font', LABEL_FONT)
        root.option_add('*Background', BG)
        root.option_add('*Foreground', FG)

        # PhotoImages must stay referenced or Tk drops them
        self._photo = None
        self._backdrop_photo = None
        self._alt_text = ''
        self._name_fg = FG

        # Decorative backdrop behind everything else
        self.backdrop = tk.Label(root, bg=BG, bd=0)
        self.backdrop.place(x=0, y=0, relwidth=1, relheight=1)

        header = tk.Frame(root, bg=BG)
        header.pack(fill='x', padx=PAD, pady=(PAD, SMALL_PAD))
        tk.Label(header, text=WINDOW_TITLE, font=TITLE_FONT, fg=ACCENT, bg=BG).pack(anchor='w')
        tk.Label(
            header, text='Browse, search or roll a random Pokémon',
            font=SMALL_FONT, fg=SUBTLE, bg=BG
        ).pack(anchor='w')

        # Record card: image, name, id, types
        card = tk.Frame(root, bg=CARD)
        card.pack(fill='both', expand=True, padx=PAD * 2, pady=PAD)
        # Blank image keeps the label square (width/height are pixels only with an image)
        self._blank = tk.PhotoImage(width=IMAGE_SIZE, height=IMAGE_SIZE)
        self.image_label = tk.Label(
            card, image=self._blank, bg=CARD, fg=SUBTLE, font=SMALL_FONT,
            width=IMAGE_SIZE, height=IMAGE_SIZE, compound='center'
        )
        self.image_label.pack(pady=(PAD * 2, PAD))
        self.name_label = tk.Label(card, text='', font=NAME_FONT, fg=FG, bg=CARD)
        self.name_label.pack()
        self.id_label = tk.Label(card, text='', font=LABEL_FONT, fg=ACCENT, bg=CARD)
        self.id_label.pack(pady=(SMALL_PAD, 0))
        self.types_label = tk.Label(card, text='', font=LABEL_FONT, fg=FG, bg=CARD)
        self.types_label.pack(pady=(SMALL_PAD, PAD * 2))
        self._fade_labels = [
            (self.name_label, lambda: self._name_fg),
            (self.id_label, lambda: ACCENT),
            (self.types_label, lambda: FG),
        ]

        # Navigation: previous, random, next
        nav_row = tk.Frame(root, bg=BG)
        nav_row.pack(pady=(0, SMALL_PAD))
        self.prev_btn = self._make_button(nav_row, f'{ICON_PREV} Previous', self._on_prev)
        self.prev_btn.pack(side='left', padx=(0, PAD))
        self.random_btn = self._make_button(nav_row, f'{ICON_RANDOM} Random', self._on_random)
        self.random_btn.pack(side='left', padx=(0, PAD))
        self.next_btn = self._make_button(nav_row, f'Next {ICON_NEXT}', self._on_next)
        self.next_btn.pack(side='left')

        # Search by name or number
        search_row = tk.Frame(root, bg=BG)
        search_row.pack(fill='x', padx=PAD * 2, pady=(SMALL_PAD, PAD))
        self.search_var = tk.StringVar()
        self.search_entry = tk.Entry(
            search_row, textvariable=self.search_var, font=LABEL_FONT,
            bg=ENTRY_BG, fg=ENTRY_FG, insertbackground=ENTRY_FG,
            relief='flat', highlightthickness=0
        )
        self.search_entry.pack(side='left', fill='x', expand=True, ipady=SMALL_PAD, padx=(0, SMALL_PAD))
        self.search_entry.bind('<Return>', lambda e: self._on_search())
        self.search_btn = self._make_button(search_row, f'{ICON_SEARCH} Search', self._on_search)
        self.search_btn.pack(side='left')

        footer = tk.Frame(root, bg=BG)
        footer.pack(fill='x', padx=PAD, pady=(0, SMALL_PAD))
        tk.Label(footer, text=f'v{__version__} · data from pokeapi.co', font=SMALL_FONT, fg=SUBTLE, bg=BG).pack(side='left')
        if log_config.LOG_FILE_PATH:
            log_link = tk.Label(footer, text='Open log', font=SMALL_FONT, fg=SUBTLE, bg=BG, cursor='hand2')
            log_link.pack(side='right')
            log_link.bind('<Button-1>', lambda e: webbrowser.open(Path(log_config.LOG_FILE_PATH).as_uri()))

        root.bind('<Left>', lambda e: self._on_arrow(self._on_prev))
        root.bind('<Right>', lambda e: self._on_arrow(self._on_next))

        self.controller = ViewerController(
            self,
            schedule=lambda ms, fn: self.root.after(ms, fn),
            spawn=lambda fn: threading.Thread(target=fn, daemon=True).start(),
            fetch_image=images.load_image,
        )
        self.controller.start()

    def _make_button(self, parent, text, command):
        btn = tk.Button(
            parent, text=text, command=command,
            font=LABEL_FONT, bg=SUBTLE, fg=FG, activebackground=ENTRY_BG,
            activeforeground=FG, disabledforeground=FG_DISABLED,
            relief='flat', padx=BTN_PAD[0], pady=BTN_PAD[1], cursor='hand2'
        )

        def _enter(e):
            if btn['state'] == 'normal':
                btn.configure(bg=ACCENT)

        def _leave(e):
            btn.configure(bg=SUBTLE)

        btn.bind('<Enter>', _enter)
        btn.bind('<Leave>', _leave)
        return btn

    # ---- Actions ----

    def _on_prev(self):
        self.controller.show_previous()

    def _on_next(self):
        self.controller.show_next()

    def _on_random(self):
        self.controller.show_random()

    def _on_search(self):
        self.controller.search(self.search_var.get())

    def _on_arrow(self, action):
        # Arrow keys move the cursor while typing a search
        if self.root.focus_get() is self.search_entry:
            return
        action()

    # ---- Display (called by the controller/pipeline on the UI thread) ----

    def _apply_image(self):
        if self._photo is not None:
            self.image_label.config(image=self._photo, text='')
        else:
            self.image_label.config(image=self._blank, text=self._alt_text)

    def show_loading(self):
        self._name_fg = FG
        self.name_label.config(text='Loading…', fg=FG)
        self.id_label.config(text='')
        self.types_label.config(text='')
        self._photo = None
        self._alt_text = ''
        self._apply_image()

    def show_not_found(self):
        self._name_fg = ERROR_FG
        self.name_label.config(text='Not found', fg=ERROR_FG)
        self.id_label.config(text='')
        self.types_label.config(text='')
        self._photo = None
        self._alt_text = 'Not available'
        self._apply_image()

    def show_record(self, view: RecordView, image):
        self._name_fg = FG
        self.name_label.config(text=view.display_name)
        self.id_label.config(text=view.id_label)
        self.types_label.config(text=view.types_label)
        self._alt_text = view.alt_text
        self._photo = images.to_photo(image) if image is not None else None
        self._apply_image()
        if image is not None:
            size = (max(self.root.winfo_width(), WINDOW_SIZE[0]), max(self.root.winfo_height(), WINDOW_SIZE[1]))
            self._backdrop_photo = images.to_photo(images.make_backdrop(image, size))
            self.backdrop.config(image=self._backdrop_photo)

    def begin_exit(self):
        for label, _ in self._fade_labels:
            label.config(fg=SUBTLE)
        self.image_label.config(image=self._blank, text='')

    def begin_enter(self):
        for label, color in self._fade_labels:
            label.config(fg=color())
        self._apply_image()

    def set_nav_enabled(self, controls: NavControls):
        self.prev_btn.config(state='normal' if controls.previous else 'disabled', bg=SUBTLE)
        self.next_btn.config(state='normal' if controls.next else 'disabled', bg=SUBTLE)

    def set_lookup_enabled(self, enabled: bool):
        state = 'normal' if enabled else 'disabled'
        self.random_btn.config(state=state)
        self.search_btn.config(state=state)
