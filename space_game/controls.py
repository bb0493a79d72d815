"""
Latched keyboard intents

The host writes key presses and releases here whenever they arrive; the
player reads the buffer once per tick at the start of its own update.
"""

from enum import Enum


class Intent(Enum):
    """
    What a key means to the game
    """

    LEFT = "left"
    RIGHT = "right"
    FIRE = "fire"


class InputBuffer:
    """
    Latest movement direction and a pending fire request
    """

    def __init__(self) -> None:
        self.direction = 0
        self._fire = False

    def press(self, intent: Intent) -> None:
        """
        Record a key press; the last pressed direction wins

        :param intent: Intent of the pressed key
        :type intent: Intent
        """
        if intent is Intent.LEFT:
            self.direction = -1
        elif intent is Intent.RIGHT:
            self.direction = 1
        elif intent is Intent.FIRE:
            self._fire = True

    def release(self, intent: Intent) -> None:
        """
        Record a key release

        Releasing a direction only stops the ship if it is the direction
        the ship is currently moving in.

        :param intent: Intent of the released key
        :type intent: Intent
        """
        if intent is Intent.LEFT and self.direction == -1:
            self.direction = 0
        elif intent is Intent.RIGHT and self.direction == 1:
            self.direction = 0

    @property
    def fire_requested(self) -> bool:
        return self._fire

    def take_fire(self) -> bool:
        """
        Consume the pending fire request

        :return: True if fire was pressed since the last call
        :rtype: bool
        """
        requested, self._fire = self._fire, False
        return requested

    def drop_fire(self) -> None:
        """Forget a pending fire request"""
        self._fire = False
