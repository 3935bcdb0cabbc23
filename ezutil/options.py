"""Integer options read from the environment."""

import os


class Option:
    """
    An integer switch looked up in the environment.

    Truthy when non-zero.  Tests and callers may assign ``.value``
    directly to flip the policy at runtime.
    """
    value: int
    key: str

    def __init__(self, key: str, default_value: int = 0):
        self.key = key.upper()
        raw = os.getenv(self.key, default_value)
        try:
            self.value = int(raw)
        except ValueError:
            raise ValueError(
                f"Invalid value for {self.key}: {raw!r}. Expected an integer."
            ) from None

    def __bool__(self) -> bool:
        return bool(self.value)

    def __ge__(self, x: int) -> bool:
        return self.value >= x

    def __gt__(self, x: int) -> bool:
        return self.value > x

    def __lt__(self, x: int) -> bool:
        return self.value < x

    def __repr__(self) -> str:
        return f"Option({self.key}={self.value})"


# Safe by default: bounds checks and assertions are live unless
# EZUTIL_SAFETY=0 is set explicitly.
SAFETY = Option("EZUTIL_SAFETY", 1)
