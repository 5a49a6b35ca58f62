"""Sprite loading for the viewer window."""

import io
import logging
import threading
from typing import Callable, Optional

import customtkinter as ctk
import requests
from PIL import Image

from constants import SPRITE_SIZE, USER_AGENT

logger = logging.getLogger(__name__)


class SpriteLoader:
    """
    Downloads one sprite at a time in a background thread.

    Only the most recently requested URL is ever delivered; a download that
    finishes after a newer request is dropped. Failures leave the placeholder
    in place.
    """

    def __init__(self, root: ctk.CTk, session: Optional[requests.Session] = None):
        self.root = root
        self._session = session
        self._placeholder = None
        self._wanted_url: Optional[str] = None

    @property
    def placeholder(self) -> ctk.CTkImage:
        """Get placeholder image shown while a sprite is loading or missing."""
        if not self._placeholder:
            img = Image.new('RGBA', SPRITE_SIZE, color=(0, 0, 0, 0))
            self._placeholder = ctk.CTkImage(light_image=img, size=SPRITE_SIZE)
        return self._placeholder

    def _get_session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
            self._session.headers.update({"User-Agent": USER_AGENT})
        return self._session

    def load(self, url: str, on_loaded: Callable[[ctk.CTkImage], None]) -> None:
        """Start loading ``url``; ``on_loaded`` runs on the Tk thread."""
        self._wanted_url = url
        thread = threading.Thread(
            target=self._load_sprite_thread,
            args=(url, on_loaded),
            daemon=True
        )
        thread.start()

    def cancel(self) -> None:
        """Forget the pending request so a late result is ignored."""
        self._wanted_url = None

    def _load_sprite_thread(self, url: str, on_loaded: Callable[[ctk.CTkImage], None]) -> None:
        """Load sprite in background thread."""
        try:
            resp = self._get_session().get(url, timeout=10)
            resp.raise_for_status()
            image = Image.open(io.BytesIO(resp.content))
            image = image.resize(SPRITE_SIZE, Image.Resampling.NEAREST)
        except (requests.RequestException, OSError) as e:
            logger.warning("Failed to load sprite %s: %s", url, e)
            return
        self.root.after(0, lambda: self._deliver(url, image, on_loaded))

    def _deliver(self, url: str, image: Image.Image, on_loaded: Callable[[ctk.CTkImage], None]) -> None:
        if url != self._wanted_url:
            return
        on_loaded(ctk.CTkImage(light_image=image, size=SPRITE_SIZE))
