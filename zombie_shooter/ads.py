"""Ad display hooks: bottom banner, timed interstitial and pop-under link.

Ad images are optional; without them the banner and interstitial are drawn as
plain translucent panels with an "AD" label.
"""

from __future__ import annotations

import os
import webbrowser
import pygame

from .constants import (
    ADS_ENABLED, AD_BANNER_HEIGHT, AD_BANNER_COLOR, AD_INTERSTITIAL_COLOR,
    AD_INTERSTITIAL_MS, AD_URL, AD_BANNER_PATH, AD_INTERSTITIAL_PATH,
    FONT_NAME, FONT_SIZE_MEDIUM,
)


class AdManager:
    """Keeps track of which ads are visible and handles clicks on them."""

    def __init__(self, enabled: bool = ADS_ENABLED, url: str = AD_URL,
                 opener=webbrowser.open) -> None:
        self.enabled = enabled
        self.url = url
        self.opener = opener
        self.banner_visible = False
        self.interstitial_shown_at: int | None = None
        self.banner_img: pygame.Surface | None = None
        self.interstitial_img: pygame.Surface | None = None
        self.font: pygame.font.Font | None = None
        self.images_loaded = False

    def load_images(self) -> None:
        """Load ad images and the label font; needs an initialized display."""
        self.images_loaded = True
        self.font = pygame.font.Font(FONT_NAME, FONT_SIZE_MEDIUM)
        for attr, path in (("banner_img", AD_BANNER_PATH), ("interstitial_img", AD_INTERSTITIAL_PATH)):
            if not os.path.exists(path):
                continue
            try:
                setattr(self, attr, pygame.image.load(path).convert_alpha())
            except Exception as e:
                print(f"Failed to load ad image {path}: {e}")

    # --------------------------------- State ----------------------------------------

    def show_banner(self) -> None:
        if self.enabled:
            self.banner_visible = True

    def show_interstitial(self, now_ms: int) -> None:
        if self.enabled:
            self.interstitial_shown_at = now_ms

    def show_popunder(self) -> None:
        if self.enabled:
            self.open_advertiser()

    @property
    def interstitial_visible(self) -> bool:
        return self.interstitial_shown_at is not None

    def update(self, now_ms: int) -> None:
        """Auto-close the interstitial once its display time is over."""
        if self.interstitial_shown_at is not None and now_ms - self.interstitial_shown_at >= AD_INTERSTITIAL_MS:
            self.interstitial_shown_at = None

    def open_advertiser(self) -> None:
        try:
            self.opener(self.url, new=2)
        except Exception as e:
            print(f"Failed to open advertiser page: {e}")

    # --------------------------------- Layout ---------------------------------------

    @staticmethod
    def banner_rect(surface_size: tuple[int, int]) -> pygame.Rect:
        width, height = surface_size
        return pygame.Rect(0, height - AD_BANNER_HEIGHT, width, AD_BANNER_HEIGHT)

    @staticmethod
    def interstitial_rect(surface_size: tuple[int, int]) -> pygame.Rect:
        width, height = surface_size
        rect = pygame.Rect(0, 0, width // 2, height // 2)
        rect.center = (width // 2, height // 2)
        return rect

    def handle_click(self, pos: tuple[int, int], surface_size: tuple[int, int]) -> bool:
        """
        Route a click or tap to the ads.

        Any click closes a visible interstitial. A click on the banner opens
        the advertiser page.

        Returns
        -------
        bool
            True if an ad consumed the click
        """
        if not self.enabled:
            return False
        if self.interstitial_visible:
            self.interstitial_shown_at = None
            return True
        if self.banner_visible and self.banner_rect(surface_size).collidepoint(pos):
            self.open_advertiser()
            return True
        return False

    # -------------------------------- Rendering -------------------------------------

    def draw_panel(self, surf: pygame.Surface, rect: pygame.Rect,
                   image: pygame.Surface | None, color: tuple[int, int, int, int]) -> None:
        if image is not None:
            surf.blit(pygame.transform.scale(image, rect.size), rect)
            return
        panel = pygame.Surface(rect.size, pygame.SRCALPHA)
        panel.fill(color)
        surf.blit(panel, rect)
        label = self.font.render("AD", True, (128, 128, 128))
        surf.blit(label, label.get_rect(center=rect.center))

    def draw(self, surf: pygame.Surface) -> None:
        if not self.enabled:
            return
        if not self.images_loaded:
            self.load_images()
        size = surf.get_size()
        if self.banner_visible:
            self.draw_panel(surf, self.banner_rect(size), self.banner_img, AD_BANNER_COLOR)
        if self.interstitial_visible:
            self.draw_panel(surf, self.interstitial_rect(size), self.interstitial_img, AD_INTERSTITIAL_COLOR)
