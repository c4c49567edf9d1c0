"""obfuscator.py - Optional message redaction before emission.

An obfuscator is any callable that takes the message string and returns the
string to emit. The registry holds at most one installed obfuscator and the
"obfuscate by default" flag. For a given call the decision is:

    per-call override (if given) > default flag

and the installed transform is applied only when the decision is to
obfuscate *and* a transform is installed. With no transform installed,
obfuscation is a no-op.
"""

import threading
from typing import Callable, NamedTuple, Optional

Obfuscator = Callable[[str], str]


class SimpleNumberObfuscator:
    """Replace every decimal digit in the message with a mask character.

    Example:
        >>> SimpleNumberObfuscator()("Ivanov: +71234567890")
        'Ivanov: +***********'
    """

    def __init__(self, mask: str = "*") -> None:
        if len(mask) != 1 or mask.isdigit():
            raise ValueError(f"mask must be a single non-digit character, got {mask!r}")
        self.mask = mask
        self._table = str.maketrans("0123456789", mask * 10)

    def __call__(self, msg: str) -> str:
        return msg.translate(self._table)

    def __repr__(self) -> str:
        return f"SimpleNumberObfuscator(mask={self.mask!r})"


class _Settings(NamedTuple):
    obfuscator: Optional[Obfuscator]
    by_default: bool


class ObfuscatorRegistry:
    """Holds the installed obfuscator and the default decision.

    Both values live in one immutable tuple that is replaced under a lock, so
    a concurrent reader sees either the old settings or the new ones.
    """

    def __init__(self) -> None:
        self._settings = _Settings(None, False)
        self._lock = threading.Lock()

    @property
    def obfuscator(self) -> Optional[Obfuscator]:
        return self._settings.obfuscator

    @property
    def obfuscate_by_default(self) -> bool:
        return self._settings.by_default

    def set_obfuscator(self, obfuscator: Optional[Obfuscator]) -> None:
        if obfuscator is not None and not callable(obfuscator):
            raise TypeError(f"obfuscator must be callable or None, got {type(obfuscator).__name__}")
        with self._lock:
            self._settings = self._settings._replace(obfuscator=obfuscator)

    def set_obfuscate_by_default(self, flag: bool) -> None:
        with self._lock:
            self._settings = self._settings._replace(by_default=bool(flag))

    def apply(self, msg: str, obfuscate: Optional[bool] = None) -> str:
        """Return ``msg`` after applying the obfuscation rule.

        Args:
            msg: The message to (maybe) redact.
            obfuscate: Per-call decision. ``None`` means use the default.
        """
        settings = self._settings
        decision = settings.by_default if obfuscate is None else obfuscate
        if decision and settings.obfuscator is not None:
            return settings.obfuscator(msg)
        return msg
