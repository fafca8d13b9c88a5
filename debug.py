# debug.py
from __future__ import annotations
import logging
from typing import Dict


class Debug:
    _root_configured: bool = False          # class-level guard

    def __init__(self, *, log_to: str | None = None) -> None:
        """
        If `log_to` is given, messages also stream to that file.
        Multiple Debug() instances share the same root logger config, and
        the component switches are read from the shared class map so that
        a toggle in the CLI reaches every module's tracer.
        """
        if not Debug._root_configured:
            Debug.configure(log_to=log_to)

        self.logger = logging.getLogger("ENIGMA")

    # ── shared state ─────────────────────────────────────────────
    enabled: bool = True
    components: Dict[str, bool] = {
        "permutation": False,
        "rotor":       False,
        "stepping":    False,
        "machine":     False,
        "config":      False,
    }

    @classmethod
    def configure(cls, *, log_to: str | None = None) -> None:
        """(Re)install the root handlers; later calls may add a log file."""
        handlers: list[logging.Handler] = [logging.StreamHandler()]
        if log_to:
            handlers.append(logging.FileHandler(log_to, encoding="utf-8"))

        logging.basicConfig(
            level=logging.DEBUG,
            format="[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            handlers=handlers,
            force=cls._root_configured,
        )
        cls._root_configured = True

    # ── logging API ──────────────────────────────────────────────
    def log(self, component: str, message: str) -> None:
        if self.active(component):
            self.logger.debug("[%s] %s", component.upper(), message)

    def active(self, component: str) -> bool:
        return Debug.enabled and Debug.components.get(component, False)

    # ── component toggles ────────────────────────────────────────
    def enable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            Debug.components[c] = True

    def disable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            Debug.components[c] = False

    def toggle(self, component: str) -> None:
        self._require(component)
        Debug.components[component] = not Debug.components[component]

    def toggle_global(self, state: bool) -> None:
        """Switch every component on/off at once."""
        Debug.enabled = state

    def status(self) -> Dict[str, bool]:
        """Return a *copy* of the current component map."""
        return Debug.components.copy()

    # ── helpers ──────────────────────────────────────────────────
    def _require(self, component: str) -> None:
        if component not in Debug.components:
            raise ValueError(f"No such component: {component!r}")

    # nicety for `print(dbg)`
    def __repr__(self) -> str:
        active = [k for k, v in Debug.components.items() if v]
        return f"<Debug enabled={Debug.enabled} active={active}>"
