import random
from typing import Optional

CONFIRMATION_NUMBER_LIMIT = 999999999


class ConfirmationNumberGenerator:
    """Pseudo-random confirmation numbers in [0, 999999999).

    Numbers are for display and may repeat.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def generate(self) -> int:
        return self.rng.randrange(CONFIRMATION_NUMBER_LIMIT)
