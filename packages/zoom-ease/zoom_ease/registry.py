"""Easing lookup: family/qualifier names to easing functions."""
from __future__ import annotations

from dataclasses import dataclass

from zoom_ease import easing
from zoom_ease.easing import EaseFn

IN = "in"
OUT = "out"
IN_OUT = "inout"

QUALIFIERS: dict[str, str] = {
    "i": IN,
    "in": IN,
    "o": OUT,
    "out": OUT,
    "io": IN_OUT,
    "inout": IN_OUT,
    "in_out": IN_OUT,
}

FAMILIES: dict[str, str] = {
    # Physical
    "back": "back",
    "ela": "elastic",
    "elastic": "elastic",
    "bounce": "bounce",
    # Polynomial
    "lin": "linear",
    "linear": "linear",
    "quad": "quadratic",
    "quadratic": "quadratic",
    "cube": "cubic",
    "cubic": "cubic",
    "quart": "quartic",
    "quartic": "quartic",
    "quint": "quintic",
    "quintic": "quintic",
    # Other math
    "exp": "exponential",
    "expo": "exponential",
    "exponential": "exponential",
    "sin": "sine",
    "sine": "sine",
    "circ": "circular",
    "circle": "circular",
    "circular": "circular",
}

# Families allowed to leave [start, end] between the boundaries.
OVERSHOOTING = frozenset({"back", "elastic", "bounce"})

EASINGS: dict[tuple[str, str], EaseFn] = {
    ("linear", IN): easing.linear_in,
    ("linear", OUT): easing.linear_out,
    ("linear", IN_OUT): easing.linear_in_out,
    ("quadratic", IN): easing.quad_in,
    ("quadratic", OUT): easing.quad_out,
    ("quadratic", IN_OUT): easing.quad_in_out,
    ("cubic", IN): easing.cubic_in,
    ("cubic", OUT): easing.cubic_out,
    ("cubic", IN_OUT): easing.cubic_in_out,
    ("quartic", IN): easing.quart_in,
    ("quartic", OUT): easing.quart_out,
    ("quartic", IN_OUT): easing.quart_in_out,
    ("quintic", IN): easing.quint_in,
    ("quintic", OUT): easing.quint_out,
    ("quintic", IN_OUT): easing.quint_in_out,
    ("exponential", IN): easing.expo_in,
    ("exponential", OUT): easing.expo_out,
    ("exponential", IN_OUT): easing.expo_in_out,
    ("sine", IN): easing.sine_in,
    ("sine", OUT): easing.sine_out,
    ("sine", IN_OUT): easing.sine_in_out,
    ("circular", IN): easing.circ_in,
    ("circular", OUT): easing.circ_out,
    ("circular", IN_OUT): easing.circ_in_out,
    ("back", IN): easing.back_in,
    ("back", OUT): easing.back_out,
    ("back", IN_OUT): easing.back_in_out,
    ("elastic", IN): easing.elastic_in,
    ("elastic", OUT): easing.elastic_out,
    ("elastic", IN_OUT): easing.elastic_in_out,
    ("bounce", IN): easing.bounce_in,
    ("bounce", OUT): easing.bounce_out,
    ("bounce", IN_OUT): easing.bounce_in_out,
}


class EasingError(ValueError):
    """Raised when an easing descriptor cannot be resolved."""

    def __init__(self, token: str, message: str) -> None:
        self.token = token
        super().__init__(message)


class EasingFormatError(EasingError):
    """Descriptor is not of the form ``family:qualifier``."""


class UnknownFamilyError(EasingError):
    """Family name is not registered."""


class UnknownQualifierError(EasingError):
    """Qualifier is not one of in/out/inout."""


def resolve_family(name: str) -> str:
    try:
        return FAMILIES[name]
    except KeyError:
        raise UnknownFamilyError(name, f"Invalid easing function: '{name}'") from None


def resolve_qualifier(name: str) -> str:
    try:
        return QUALIFIERS[name]
    except KeyError:
        raise UnknownQualifierError(
            name,
            f"Invalid easing qualifier: '{name}'. Expected 'in', 'out', or 'inout'",
        ) from None


def get_easing(family: str, qualifier: str) -> EaseFn:
    """Return the easing function for a family and qualifier (synonyms allowed).

    Raises UnknownFamilyError or UnknownQualifierError naming the bad token.
    """
    return EASINGS[(resolve_family(family), resolve_qualifier(qualifier))]


@dataclass(frozen=True)
class EasingCurve:
    """A resolved (family, qualifier) pair. Calling it evaluates the curve.

    ``family`` and ``qualifier`` hold canonical names (``"quadratic"``,
    ``"inout"``), so two curves parsed from different synonyms compare equal.
    """

    family: str
    qualifier: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "family", resolve_family(self.family))
        object.__setattr__(self, "qualifier", resolve_qualifier(self.qualifier))

    @classmethod
    def parse(cls, text: str) -> EasingCurve:
        """Parse ``"family:qualifier"``, case-insensitive and trimmed."""
        s = text.strip().lower()
        family, sep, qualifier = s.partition(":")
        if not sep:
            raise EasingFormatError(
                s,
                f"Invalid format. Expected 'easefn:qualifier' (e.g., 'lin:in'), got '{s}'",
            )
        return cls(family, qualifier)

    @property
    def function(self) -> EaseFn:
        return EASINGS[(self.family, self.qualifier)]

    @property
    def overshoots(self) -> bool:
        return self.family in OVERSHOOTING

    def __call__(self, t: float, b: float, c: float, d: float) -> float:
        return self.function(t, b, c, d)

    def __str__(self) -> str:
        return f"{self.family}:{self.qualifier}"
