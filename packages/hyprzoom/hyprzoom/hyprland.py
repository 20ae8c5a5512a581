"""Read and set Hyprland options through ``hyprctl``."""
from __future__ import annotations

import json
import logging
import subprocess

from zoom_sequence import SetterError

log = logging.getLogger(__name__)

ZOOM_FACTOR = "cursor:zoom_factor"


class HyprError(SetterError):
    """Raised when Hyprland cannot be reached or rejects a request."""


class HyprlandOption:
    """A float-valued Hyprland option.

    Conforms to both the ParameterSetter and ValueProvider protocols, so the
    same object supplies the initial value and receives each animation step.

    Args:
        name: Option name, e.g. ``"cursor:zoom_factor"``.
        hyprctl: Path or name of the hyprctl executable.
        timeout: Seconds to wait for each hyprctl call.
    """

    def __init__(self, name: str, hyprctl: str = "hyprctl", timeout: float = 2.0) -> None:
        self._name = name
        self._hyprctl = hyprctl
        self._timeout = timeout

    def _run(self, *args: str) -> str:
        cmd = [self._hyprctl, *args]
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self._timeout,
            )
        except FileNotFoundError:
            raise HyprError(f"{self._hyprctl} not found") from None
        except subprocess.TimeoutExpired:
            raise HyprError(
                f"{' '.join(cmd)} timed out after {self._timeout}s"
            ) from None
        except OSError as err:
            raise HyprError(f"{' '.join(cmd)} could not be run: {err}") from None
        except UnicodeDecodeError as err:
            raise HyprError(f"{' '.join(cmd)} returned undecodable output: {err}") from None

        if result.returncode != 0:
            detail = (result.stderr or result.stdout).strip()
            raise HyprError(
                f"{' '.join(cmd)} failed with exit code {result.returncode}: {detail}"
            )
        return result.stdout.strip()

    def set(self, value: float) -> None:
        reply = self._run("keyword", self._name, f"{value:f}")
        if reply != "ok":
            raise HyprError(f"error setting '{self._name}' to {value}: {reply}")

    def get_current(self) -> float:
        reply = self._run("-j", "getoption", self._name)
        try:
            data = json.loads(reply)
        except json.JSONDecodeError:
            raise HyprError(f"error getting '{self._name}': {reply}") from None

        value = data.get("float") if isinstance(data, dict) else None
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            raise HyprError(
                f"invalid value for '{self._name}' (must be float): {reply}"
            )
        log.debug("current value of '%s': %s", self._name, value)
        return float(value)
