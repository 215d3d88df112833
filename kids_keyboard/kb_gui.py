import logging
import tkinter as tk

from .controller import KeyboardController, Update
from .kb_layout import Key, Keyboard
from .key_types import Action
from .session import EDITING, MATCH
from .suggest import ghost_color

log = logging.getLogger(__name__)

NEXT_COLOR = "#018786"
KEY_COLOR_LIGHT = "#6200ee"
KEY_COLOR_DARK = "#bb86fc"

# physical keys -> on-screen actions
KEYSYM_ACTIONS = {
    "BackSpace": Action.delete,
    "Delete": Action.delete,
    "Escape": Action.clear,
    "Left": Action.history_back,
    "Right": Action.history_forward,
    "Caps_Lock": Action.shift,
    "space": Action.space,
}

SOUND_LABELS = {True: "🔊", False: "🔇"}


class VirtualKeyboard:
    """Picture, ghost-text line and big clickable keys for small hands."""

    def __init__(self, keyboard: Keyboard, controller: KeyboardController, dark: bool = False):
        self.keyboard = keyboard
        self.controller = controller
        self.dark = dark

        self.key_widgets: list[tuple[tk.Label, Key]] = []
        self.letter_widgets: dict[str, tk.Label] = {}
        self.action_widgets: dict[Action, tk.Label] = {}
        self._photo: tk.PhotoImage | None = None

        bg = "#121212" if dark else "white"
        fg = "white" if dark else "black"

        self.root = tk.Tk()
        self.root.title("Kids Keyboard")
        self.root.configure(bg=bg)
        self.root.resizable(True, True)

        self.picture = tk.Label(self.root, bg=bg, fg=fg, font=("TkDefaultFont", 96), height=2)
        self.picture.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        self.text = tk.Text(
            self.root,
            height=1,
            width=16,
            font=("TkDefaultFont", 40),
            bg=bg,
            fg=fg,
            bd=0,
            highlightthickness=0,
        )
        self.text.tag_configure("ghost", foreground=ghost_color(dark))
        self.text.configure(state=tk.DISABLED)
        self.text.pack(padx=10, pady=(0, 10))

        self.key_frame = tk.Frame(self.root, bg=bg)
        self.key_frame.pack(padx=5, pady=5)
        self.render_keys()

        self.root.bind("<Key>", self._on_physical_key)
        self.root.protocol("WM_DELETE_WINDOW", self.close)

    # ───────── rendering ──────────────────────────────────────────────────
    def render_keys(self):
        for child in self.key_frame.winfo_children():
            child.destroy()
        self.key_widgets.clear()
        self.letter_widgets.clear()
        self.action_widgets.clear()

        max_len = max(len(r) for r in self.keyboard)
        base_width = 4

        for row in self.keyboard:
            row_frame = tk.Frame(self.key_frame, bg=self.key_frame.cget("bg"))
            row_frame.pack(fill=tk.X)
            stretch = row.stretch and len(row) < max_len
            width = int(base_width * max_len / len(row)) if stretch else base_width

            for key in row:
                lbl = tk.Label(
                    row_frame,
                    text=key.label,
                    width=width,
                    relief=tk.RAISED,
                    bd=2,
                    padx=4,
                    pady=8,
                    fg="white",
                    font=("TkDefaultFont", 20, "bold"),
                )
                lbl.pack(side=tk.LEFT, expand=stretch, fill=tk.X, padx=2, pady=2)
                lbl.bind("<Button-1>", lambda _e, k=key: self.press(k))
                self.key_widgets.append((lbl, key))
                if key.is_letter():
                    self.letter_widgets[key.label.lower()] = lbl
                elif key.action is not None:
                    self.action_widgets[key.action] = lbl

        self._refresh_letters()
        self._update_highlight(self.controller.state.highlight)
        self._update_sound_key(self.controller.sound_on)

    def _refresh_letters(self):
        state = self.controller.state
        for letter, widget in self.letter_widgets.items():
            widget.config(text=state.recase(letter))

    def _widget_for(self, highlight: str) -> tk.Label | None:
        if highlight == MATCH:
            return self.action_widgets.get(Action.clear)
        if highlight == EDITING:
            return self.action_widgets.get(Action.delete)
        if highlight == " ":
            return self.action_widgets.get(Action.space)
        return self.letter_widgets.get(highlight)

    def _update_highlight(self, highlight: str):
        other = KEY_COLOR_DARK if self.dark else KEY_COLOR_LIGHT
        target = self._widget_for(highlight)
        for widget, _ in self.key_widgets:
            widget.config(bg=NEXT_COLOR if widget is target else other)

    def _update_sound_key(self, sound_on: bool):
        widget = self.action_widgets.get(Action.sound)
        if widget is None:
            return
        if not getattr(self.controller.speaker, "available", False):
            widget.config(text="")
            return
        widget.config(text=SOUND_LABELS[sound_on])

    def _show_text(self, typed: str, ghost: str):
        self.text.configure(state=tk.NORMAL)
        self.text.delete("1.0", tk.END)
        self.text.insert(tk.END, typed)
        if ghost:
            self.text.insert(tk.END, ghost, "ghost")
        self.text.configure(state=tk.DISABLED)

    def _show_picture(self, update: Update):
        entry = update.result.entry
        if update.image is not None:
            try:
                self._photo = tk.PhotoImage(file=str(update.image))
                self.picture.config(image=self._photo, text="")
                return
            except tk.TclError as exc:
                log.warning("Could not load picture %s: %s", update.image, exc)
        self._photo = None
        self.picture.config(image="", text=entry.emoji or entry.word if entry else "")

    def show(self, update: Update):
        display = update.result.display
        self._show_text(display.typed, display.ghost)
        self._show_picture(update)
        self._refresh_letters()
        self._update_highlight(update.result.highlight)
        self._update_sound_key(update.sound_on)

    # ───────── input ──────────────────────────────────────────────────────
    def press(self, key):
        self.show(self.controller.on_key(key))

    def _on_physical_key(self, event):
        action = KEYSYM_ACTIONS.get(event.keysym)
        if action is not None:
            self.press(action)
        elif len(event.char) == 1 and event.char.isalpha():
            self.press(event.char.lower())
        return "break"

    # ---------- main loop ----------
    def close(self):
        self.controller.close()
        self.root.destroy()

    def run(self):
        self.root.mainloop()
