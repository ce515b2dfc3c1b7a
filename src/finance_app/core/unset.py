"""Marker for fields a partial update leaves alone."""


class Unset:
    """Type of ``UNSET``. A nullable update field holding it is left unchanged."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = Unset()
