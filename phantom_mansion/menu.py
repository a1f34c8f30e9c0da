"""Title menu: switching between the menu, credits and gameplay screens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .geometry import Rect

SCREEN_WIDTH = 1920
SCREEN_HEIGHT = 1080

START_BUTTON = Rect(1250, 750, 350, 90)
CREDITS_BUTTON = Rect(1695, 910, 60, 60)
BACK_BUTTON = Rect(1250, 100, 80, 80)


class Screen(Enum):
    MENU = "menu"
    CREDITS = "credits"
    GAMEPLAY = "gameplay"


@dataclass
class Menu:
    """Which screen is shown, and whether the mouse is over each button."""

    screen: Screen = Screen.MENU
    start_button: Rect = START_BUTTON
    credits_button: Rect = CREDITS_BUTTON
    back_button: Rect = BACK_BUTTON
    over_start: bool = False
    over_credits: bool = False
    over_back: bool = False

    def update(self, mouse_x: float, mouse_y: float, released: bool) -> Screen:
        """Apply one frame of mouse input and return the current screen."""
        self.over_start = self.start_button.contains_point(mouse_x, mouse_y)
        self.over_credits = self.credits_button.contains_point(mouse_x, mouse_y)
        self.over_back = self.back_button.contains_point(mouse_x, mouse_y)

        if self.screen is Screen.MENU and released:
            if self.over_start:
                self.screen = Screen.GAMEPLAY
            elif self.over_credits:
                self.screen = Screen.CREDITS
        elif self.screen is Screen.CREDITS and released and self.over_back:
            self.screen = Screen.MENU
        return self.screen