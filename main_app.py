"""Main Pokemon Viewer window."""

import logging
import webbrowser
from typing import Optional

import customtkinter as ctk

from api import PokeApiClient
from constants import (
    COLORS, DEFAULT_WINDOW_SIZE, FOOTER_TEXT, FOOTER_URL, LOGO_TEXT, STAT_BAR_WIDTH
)
from controller import ViewerController
from managers import SpriteLoader
from render import STATE_ERROR, STATE_RECORD, ViewModel, render

logger = logging.getLogger(__name__)


class PokemonViewer:
    """Single-Pokémon viewer: navigation bar on top, record card below."""

    def __init__(self, root: ctk.CTk, client: Optional[PokeApiClient] = None):
        self.root = root
        self.root.title(LOGO_TEXT)
        self.root.geometry(DEFAULT_WINDOW_SIZE)

        self.client = client or PokeApiClient()
        self.sprite_loader = SpriteLoader(root, session=self.client.get_session())
        self.controller = ViewerController(
            self.client,
            dispatch=lambda task: self.root.after(0, task),
        )
        self.controller.subscribe(lambda _: self._update_display())

        self.sprite_label: Optional[ctk.CTkLabel] = None
        self._font_cache = {
            'title_font': ctk.CTkFont(size=20, weight="bold"),
            'section_font': ctk.CTkFont(size=15, weight="bold"),
            'stat_font': ctk.CTkFont(size=13),
            'chip_font': ctk.CTkFont(size=12),
        }

        self._setup_ui()
        self.root.protocol("WM_DELETE_WINDOW", self._on_close)
        self.controller.start()

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    def _setup_ui(self) -> None:
        """Setup the main UI components."""
        ctk.set_appearance_mode("light")
        ctk.set_default_color_theme("green")

        self.main_frame = ctk.CTkFrame(self.root, fg_color=COLORS["background"], corner_radius=12)
        self.main_frame.pack(fill="both", expand=True, padx=16, pady=16)

        self._create_header()
        self._create_controls()
        self._create_card()
        self._create_footer()

    def _create_header(self) -> None:
        self.title_label = ctk.CTkLabel(
            self.main_frame,
            text=LOGO_TEXT,
            font=ctk.CTkFont(size=28, weight="bold")
        )
        self.title_label.pack(pady=(16, 8))

    def _create_controls(self) -> None:
        """Create navigation buttons and the direct-entry field."""
        controls_frame = ctk.CTkFrame(self.main_frame, fg_color="transparent")
        controls_frame.pack(pady=8)

        self.prev_button = ctk.CTkButton(
            controls_frame,
            text="Previous",
            command=self.controller.previous,
            fg_color=COLORS["nav"][0],
            hover_color=COLORS["nav"][1],
            width=90
        )
        self.prev_button.pack(side="left", padx=4)

        self.id_entry = ctk.CTkEntry(controls_frame, width=60, justify="center")
        self.id_entry.pack(side="left", padx=4)
        self.id_entry.bind("<Return>", lambda e: self._submit_entry())

        self.next_button = ctk.CTkButton(
            controls_frame,
            text="Next",
            command=self.controller.next,
            fg_color=COLORS["nav"][0],
            hover_color=COLORS["nav"][1],
            width=70
        )
        self.next_button.pack(side="left", padx=4)

        self.random_button = ctk.CTkButton(
            controls_frame,
            text="Random",
            command=self.controller.random,
            fg_color=COLORS["random"][0],
            hover_color=COLORS["random"][1],
            width=80
        )
        self.random_button.pack(side="left", padx=4)

        self.shiny_button = ctk.CTkButton(
            controls_frame,
            text="Shiny",
            command=self.controller.toggle_shiny,
            width=70,
            border_width=1
        )
        self.shiny_button.pack(side="left", padx=4)

    def _create_card(self) -> None:
        self.card_frame = ctk.CTkFrame(self.main_frame, fg_color=COLORS["card"], corner_radius=10)
        self.card_frame.pack(fill="both", expand=True, padx=16, pady=8)

    def _create_footer(self) -> None:
        footer = ctk.CTkLabel(
            self.main_frame,
            text=FOOTER_TEXT,
            font=ctk.CTkFont(size=12, underline=True),
            cursor="hand2"
        )
        footer.pack(pady=(4, 12))
        footer.bind("<Button-1>", lambda e: webbrowser.open(FOOTER_URL))

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _update_display(self) -> None:
        """Re-render everything from the controller state."""
        view = render(self.controller.selection, self.controller.mode, self.controller.outcome)
        self._update_controls(view)

        for widget in self.card_frame.winfo_children():
            widget.destroy()
        self.sprite_label = None

        if view.state == STATE_RECORD:
            self._show_record(view)
        else:
            self.sprite_loader.cancel()
            self._show_message(view)

    def _update_controls(self, view: ViewModel) -> None:
        self.prev_button.configure(state="normal" if view.previous_enabled else "disabled")
        self.next_button.configure(state="normal" if view.next_enabled else "disabled")
        self.random_button.configure(state="normal" if view.random_enabled else "disabled")
        self.shiny_button.configure(state="normal" if view.shiny_enabled else "disabled")

        if view.shiny_active:
            self.shiny_button.configure(
                fg_color=COLORS["shiny_on"][0], hover_color=COLORS["shiny_on"][1],
                text_color="white", border_color=COLORS["shiny_on"][1]
            )
        else:
            self.shiny_button.configure(
                fg_color="transparent", hover_color=COLORS["shiny_off"][0],
                text_color="black", border_color="black"
            )

        # Don't clobber what the user is typing
        if self.root.focus_get() is not self.id_entry._entry:
            self.id_entry.delete(0, 'end')
            self.id_entry.insert(0, str(view.selection))

    def _show_message(self, view: ViewModel) -> None:
        ctk.CTkLabel(
            self.card_frame,
            text=view.message,
            text_color=COLORS["error"] if view.state == STATE_ERROR else None,
            font=self._font_cache['section_font'],
            wraplength=STAT_BAR_WIDTH
        ).pack(expand=True, pady=40)

    def _show_record(self, view: ViewModel) -> None:
        ctk.CTkLabel(
            self.card_frame,
            text=view.title,
            font=self._font_cache['title_font']
        ).pack(pady=(12, 4))

        self.sprite_label = ctk.CTkLabel(self.card_frame, text="", image=self.sprite_loader.placeholder)
        self.sprite_label.pack(pady=4)
        self.sprite_loader.load(view.image_url, self._set_sprite)

        types_frame = ctk.CTkFrame(self.card_frame, fg_color="transparent")
        types_frame.pack(pady=4)
        for type_name in view.types:
            ctk.CTkLabel(
                types_frame,
                text=type_name.title(),
                fg_color=COLORS["chip"],
                corner_radius=12,
                font=self._font_cache['chip_font'],
                padx=10
            ).pack(side="left", padx=3)

        stats_frame = ctk.CTkFrame(self.card_frame, fg_color="transparent")
        stats_frame.pack(fill="x", padx=20, pady=(8, 12))
        ctk.CTkLabel(stats_frame, text="Base Stats:", font=self._font_cache['section_font']).pack(anchor="w")

        for bar in view.stats:
            row = ctk.CTkFrame(stats_frame, fg_color="transparent")
            row.pack(fill="x", pady=2)
            ctk.CTkLabel(row, text=bar.label, font=self._font_cache['stat_font']).pack(side="left")
            ctk.CTkLabel(row, text=str(bar.value), font=self._font_cache['stat_font']).pack(side="right")

            progress = ctk.CTkProgressBar(
                stats_frame,
                width=STAT_BAR_WIDTH,
                height=8,
                progress_color=view.accent,
                fg_color=COLORS["bar_track"]
            )
            progress.set(bar.percent / 100)
            progress.pack(fill="x", pady=(0, 4))

    def _set_sprite(self, image: ctk.CTkImage) -> None:
        try:
            if self.sprite_label is not None and self.sprite_label.winfo_exists():
                self.sprite_label.configure(image=image)
        except Exception as e:
            logger.debug("Sprite label went away before image arrived: %s", e)

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def _submit_entry(self) -> None:
        """Jump to the number typed in the entry; anything invalid is ignored."""
        if not self.controller.submit_entry(self.id_entry.get()):
            self.id_entry.delete(0, 'end')
            self.id_entry.insert(0, str(self.controller.selection))
        self.root.focus_set()

    def _on_close(self) -> None:
        """Close the shared HTTP session, then the window."""
        self.sprite_loader.cancel()
        self.client.close()
        self.root.destroy()
