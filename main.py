"""
Pokémon Viewer
Main entry point for the application.
"""

import logging

import customtkinter as ctk

from main_app import PokemonViewer


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def main():
    """Main entry point for the Pokémon Viewer application."""
    configure_logging()
    root = ctk.CTk()

    app = PokemonViewer(root)
    controller = app.controller

    def arrow_key(button, action):
        """Arrow keys act like their button, but not while typing in the entry."""
        def handler(event):
            if event.widget is app.id_entry._entry:
                return
            if button.cget("state") == "normal":
                action()
        return handler

    # Bind keyboard shortcuts
    root.bind('<Left>', arrow_key(app.prev_button, controller.previous))
    root.bind('<Right>', arrow_key(app.next_button, controller.next))
    root.bind('<Control-r>', lambda e: controller.random())
    root.bind('<Control-s>', lambda e: controller.toggle_shiny())
    root.bind('<F5>', lambda e: controller.refresh())

    app.title_label.configure(
        text="Pokémon Viewer (←/→: Browse, Ctrl+R: Random, Ctrl+S: Shiny, F5: Reload)",
        font=ctk.CTkFont(size=16, weight="bold")
    )

    root.mainloop()


if __name__ == "__main__":
    main()
