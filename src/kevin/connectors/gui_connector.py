# src/kevin/connectors/gui_connector.py

"""
Desktop chat window (tkinter).

A scrolling dialog area with user bubbles on the right and Kevin's on the left,
plus an entry line and a Send button. All logic goes through core/chat.py.
"""

from __future__ import annotations

import logging
import tkinter as tk
from tkinter import font as tkfont

from ..core.chat import handle_message, welcome
from ..core.state import AppState

logger = logging.getLogger(__name__)

WINDOW_SIZE = "420x600"
COLOR_BG = "#f4f4f4"
COLOR_USER = "#d1e7ff"
COLOR_BOT = "#ffffff"
COLOR_ERROR = "#ffd9d9"
BUBBLE_WRAP = 280
EXIT_DELAY_MS = 800


class MainWindow(tk.Tk):
    def __init__(self, state: AppState) -> None:
        super().__init__()
        self.app_state = state
        self.title(getattr(state.settings, "app_name", "Kevin"))
        self.geometry(WINDOW_SIZE)
        self.resizable(False, False)
        self.configure(bg=COLOR_BG)

        self.font_body = tkfont.Font(family="Helvetica", size=11)
        self.font_name = tkfont.Font(family="Helvetica", size=9, weight="bold")

        self._build_ui()
        self._bind_events()
        self._show_greeting()

    def _build_ui(self) -> None:
        container = tk.Frame(self, bg=COLOR_BG)
        container.pack(side=tk.TOP, fill=tk.BOTH, expand=True)

        self.canvas = tk.Canvas(container, bg=COLOR_BG, highlightthickness=0)
        scrollbar = tk.Scrollbar(container, orient=tk.VERTICAL, command=self.canvas.yview)
        self.canvas.configure(yscrollcommand=scrollbar.set)
        scrollbar.pack(side=tk.RIGHT, fill=tk.Y)
        self.canvas.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)

        self.dialog_container = tk.Frame(self.canvas, bg=COLOR_BG)
        self._dialog_window = self.canvas.create_window(
            (0, 0), window=self.dialog_container, anchor="nw"
        )

        bottom = tk.Frame(self, bg=COLOR_BG)
        bottom.pack(side=tk.BOTTOM, fill=tk.X, padx=6, pady=6)

        self.user_input = tk.Entry(bottom, font=self.font_body)
        self.user_input.pack(side=tk.LEFT, fill=tk.X, expand=True, padx=(0, 6))
        self.send_button = tk.Button(bottom, text="Send", command=self.handle_user_input)
        self.send_button.pack(side=tk.RIGHT)
        self.user_input.focus_set()

    def _bind_events(self) -> None:
        self.user_input.bind("<Return>", lambda _e: self.handle_user_input())
        # Keep the scroll region and width in sync with the dialog content.
        self.dialog_container.bind(
            "<Configure>",
            lambda _e: self.canvas.configure(scrollregion=self.canvas.bbox("all")),
        )
        self.canvas.bind(
            "<Configure>",
            lambda e: self.canvas.itemconfigure(self._dialog_window, width=e.width),
        )

    def _add_bubble(self, speaker: str, text: str, *, is_user: bool, is_error: bool = False) -> None:
        row = tk.Frame(self.dialog_container, bg=COLOR_BG)
        row.pack(fill=tk.X, padx=8, pady=4)

        side = tk.RIGHT if is_user else tk.LEFT
        anchor = "e" if is_user else "w"
        color = COLOR_USER if is_user else (COLOR_ERROR if is_error else COLOR_BOT)

        tk.Label(row, text=speaker, font=self.font_name, bg=COLOR_BG).pack(anchor=anchor)
        tk.Label(
            row,
            text=text,
            font=self.font_body,
            bg=color,
            justify=tk.LEFT,
            wraplength=BUBBLE_WRAP,
            padx=8,
            pady=6,
            relief=tk.GROOVE,
        ).pack(side=side)

        self.update_idletasks()
        self.canvas.yview_moveto(1.0)

    def _show_greeting(self) -> None:
        self._add_bubble(self.app_state.ui.name, welcome(self.app_state), is_user=False)

    def handle_user_input(self) -> None:
        text = self.user_input.get().strip()
        if not text:
            return
        self.user_input.delete(0, tk.END)

        reply = handle_message(self.app_state, text)
        self._add_bubble("You", text, is_user=True)
        self._add_bubble(self.app_state.ui.name, reply.text, is_user=False, is_error=reply.is_error)

        if reply.is_exit:
            logger.info("GUI exit command received.")
            self.user_input.configure(state=tk.DISABLED)
            self.send_button.configure(state=tk.DISABLED)
            self.after(EXIT_DELAY_MS, self.destroy)


def run_gui(state: AppState) -> None:
    logger.info("GUI connector started (file=%s).", state.storage.path)
    window = MainWindow(state)
    window.mainloop()
    logger.info("GUI connector finished.")
