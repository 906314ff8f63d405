"""
Short code generation for new mappings.
"""

import random
import string


class RandomShortCodeStrategy:
    """
    Random alphanumeric codes.

    No uniqueness check happens here: the primary key on urls.id rejects a
    colliding code and the store generates a fresh one.
    """

    CHARACTERS = string.ascii_letters + string.digits

    def __init__(self, length: int = 6):
        self.length = length

    def generate(self) -> str:
        """Generate a random string of the configured length"""
        return ''.join(random.choices(self.CHARACTERS, k=self.length))

    @classmethod
    def is_valid_format(cls, code: str) -> bool:
        return bool(code) and all(c in cls.CHARACTERS for c in code)
