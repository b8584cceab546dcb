"""Screen navigation state machine.

For UI callers only: the app moves between four screens in response to UI
events, and the navigator tracks which screen is active. It never touches the
catalog, and nothing in the catalog core or HTTP surface depends on it.
"""

import logging
from enum import Enum

logger = logging.getLogger(__name__)

# How long the splash screen stays up before SPLASH_FINISHED is sent
SPLASH_DURATION_SECONDS = 3


class Screen(str, Enum):
    """Enumeration of app screens."""

    SPLASH = "splash"
    HOME = "home"
    ADD_DISH = "add_dish"
    FILTER = "filter"


class NavigationEvent(str, Enum):
    """Enumeration of UI events that move between screens."""

    SPLASH_FINISHED = "splash_finished"
    ADD_PRESSED = "add_pressed"
    FILTER_PRESSED = "filter_pressed"
    DISH_ADDED = "dish_added"
    CANCEL = "cancel"
    BACK = "back"


TRANSITIONS: dict[tuple[Screen, NavigationEvent], Screen] = {
    (Screen.SPLASH, NavigationEvent.SPLASH_FINISHED): Screen.HOME,
    (Screen.HOME, NavigationEvent.ADD_PRESSED): Screen.ADD_DISH,
    (Screen.HOME, NavigationEvent.FILTER_PRESSED): Screen.FILTER,
    (Screen.ADD_DISH, NavigationEvent.CANCEL): Screen.HOME,
    (Screen.ADD_DISH, NavigationEvent.DISH_ADDED): Screen.HOME,
    (Screen.FILTER, NavigationEvent.BACK): Screen.HOME,
}


class ScreenNavigator:
    """Tracks the active screen and applies navigation events."""

    def __init__(self, initial: Screen = Screen.SPLASH) -> None:
        """Initialize the navigator.

        Args:
            initial: Screen shown at startup
        """
        self.current = initial
        self.history: list[Screen] = [initial]

    def can_dispatch(self, event: NavigationEvent) -> bool:
        """Whether ``event`` would change the screen from the current one."""
        return (self.current, event) in TRANSITIONS

    def dispatch(self, event: NavigationEvent) -> bool:
        """Apply an event to the current screen.

        Args:
            event: The UI event that occurred

        Returns:
            bool: True if the screen changed, False if the event does not apply here
        """
        target = TRANSITIONS.get((self.current, event))
        if target is None:
            logger.debug(f"Ignoring {event.value} on {self.current.value} screen")
            return False

        logger.debug(f"Navigating {self.current.value} -> {target.value}")
        self.current = target
        self.history.append(target)
        return True
