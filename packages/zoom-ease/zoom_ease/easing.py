"""Penner easing equations.

Every function has the signature ``(t, b, c, d) -> value`` where ``t`` is the
elapsed position, ``b`` the start value, ``c`` the change (end - start) and
``d`` the total.  ``f(0, b, c, d) == b`` and ``f(d, b, c, d) == b + c``.
"""
from __future__ import annotations

import math
from typing import Callable

EaseFn = Callable[[float, float, float, float], float]

_BACK_S = 1.70158


# -- Linear --

def linear_in(t: float, b: float, c: float, d: float) -> float:
    return c * t / d + b


linear_out = linear_in
linear_in_out = linear_in


# -- Quadratic --

def quad_in(t: float, b: float, c: float, d: float) -> float:
    t /= d
    return c * t * t + b


def quad_out(t: float, b: float, c: float, d: float) -> float:
    t /= d
    return -c * t * (t - 2) + b


def quad_in_out(t: float, b: float, c: float, d: float) -> float:
    t /= d / 2
    if t < 1:
        return c / 2 * t * t + b
    t -= 1
    return -c / 2 * (t * (t - 2) - 1) + b


# -- Cubic --

def cubic_in(t: float, b: float, c: float, d: float) -> float:
    t /= d
    return c * t * t * t + b


def cubic_out(t: float, b: float, c: float, d: float) -> float:
    t = t / d - 1
    return c * (t * t * t + 1) + b


def cubic_in_out(t: float, b: float, c: float, d: float) -> float:
    t /= d / 2
    if t < 1:
        return c / 2 * t * t * t + b
    t -= 2
    return c / 2 * (t * t * t + 2) + b


# -- Quartic --

def quart_in(t: float, b: float, c: float, d: float) -> float:
    t /= d
    return c * t * t * t * t + b


def quart_out(t: float, b: float, c: float, d: float) -> float:
    t = t / d - 1
    return -c * (t * t * t * t - 1) + b


def quart_in_out(t: float, b: float, c: float, d: float) -> float:
    t /= d / 2
    if t < 1:
        return c / 2 * t * t * t * t + b
    t -= 2
    return -c / 2 * (t * t * t * t - 2) + b


# -- Quintic --

def quint_in(t: float, b: float, c: float, d: float) -> float:
    t /= d
    return c * t * t * t * t * t + b


def quint_out(t: float, b: float, c: float, d: float) -> float:
    t = t / d - 1
    return c * (t * t * t * t * t + 1) + b


def quint_in_out(t: float, b: float, c: float, d: float) -> float:
    t /= d / 2
    if t < 1:
        return c / 2 * t * t * t * t * t + b
    t -= 2
    return c / 2 * (t * t * t * t * t + 2) + b


# -- Exponential --

def expo_in(t: float, b: float, c: float, d: float) -> float:
    if t == 0:
        return b
    return c * math.pow(2, 10 * (t / d - 1)) + b


def expo_out(t: float, b: float, c: float, d: float) -> float:
    if t == d:
        return b + c
    return c * (1 - math.pow(2, -10 * t / d)) + b


def expo_in_out(t: float, b: float, c: float, d: float) -> float:
    if t == 0:
        return b
    if t == d:
        return b + c
    t /= d / 2
    if t < 1:
        return c / 2 * math.pow(2, 10 * (t - 1)) + b
    return c / 2 * (2 - math.pow(2, -10 * (t - 1))) + b


# -- Sine --

def sine_in(t: float, b: float, c: float, d: float) -> float:
    if t == d:
        return b + c
    return -c * math.cos(t / d * (math.pi / 2)) + c + b


def sine_out(t: float, b: float, c: float, d: float) -> float:
    return c * math.sin(t / d * (math.pi / 2)) + b


def sine_in_out(t: float, b: float, c: float, d: float) -> float:
    return -c / 2 * (math.cos(math.pi * t / d) - 1) + b


# -- Circular --

def circ_in(t: float, b: float, c: float, d: float) -> float:
    t /= d
    return -c * (math.sqrt(1 - t * t) - 1) + b


def circ_out(t: float, b: float, c: float, d: float) -> float:
    t = t / d - 1
    return c * math.sqrt(1 - t * t) + b


def circ_in_out(t: float, b: float, c: float, d: float) -> float:
    t /= d / 2
    if t < 1:
        return -c / 2 * (math.sqrt(1 - t * t) - 1) + b
    t -= 2
    return c / 2 * (math.sqrt(1 - t * t) + 1) + b


# -- Back (overshoots) --

def back_in(t: float, b: float, c: float, d: float) -> float:
    s = _BACK_S
    t /= d
    return c * t * t * ((s + 1) * t - s) + b


def back_out(t: float, b: float, c: float, d: float) -> float:
    s = _BACK_S
    t = t / d - 1
    return c * (t * t * ((s + 1) * t + s) + 1) + b


def back_in_out(t: float, b: float, c: float, d: float) -> float:
    s = _BACK_S * 1.525
    t /= d / 2
    if t < 1:
        return c / 2 * (t * t * ((s + 1) * t - s)) + b
    t -= 2
    return c / 2 * (t * t * ((s + 1) * t + s) + 2) + b


# -- Elastic (overshoots) --

def elastic_in(t: float, b: float, c: float, d: float) -> float:
    if t == 0:
        return b
    t /= d
    if t == 1:
        return b + c
    p = d * 0.3
    s = p / 4
    t -= 1
    return -(c * math.pow(2, 10 * t) * math.sin((t * d - s) * (2 * math.pi) / p)) + b


def elastic_out(t: float, b: float, c: float, d: float) -> float:
    if t == 0:
        return b
    t /= d
    if t == 1:
        return b + c
    p = d * 0.3
    s = p / 4
    return c * math.pow(2, -10 * t) * math.sin((t * d - s) * (2 * math.pi) / p) + c + b


def elastic_in_out(t: float, b: float, c: float, d: float) -> float:
    if t == 0:
        return b
    t /= d / 2
    if t == 2:
        return b + c
    p = d * (0.3 * 1.5)
    s = p / 4
    t -= 1
    if t < 0:
        return -0.5 * (c * math.pow(2, 10 * t) * math.sin((t * d - s) * (2 * math.pi) / p)) + b
    return c * math.pow(2, -10 * t) * math.sin((t * d - s) * (2 * math.pi) / p) * 0.5 + c + b


# -- Bounce (overshoots) --

def bounce_out(t: float, b: float, c: float, d: float) -> float:
    t /= d
    if t < 1 / 2.75:
        return c * (7.5625 * t * t) + b
    if t < 2 / 2.75:
        t -= 1.5 / 2.75
        return c * (7.5625 * t * t + 0.75) + b
    if t < 2.5 / 2.75:
        t -= 2.25 / 2.75
        return c * (7.5625 * t * t + 0.9375) + b
    t -= 2.625 / 2.75
    return c * (7.5625 * t * t + 0.984375) + b


def bounce_in(t: float, b: float, c: float, d: float) -> float:
    return c - bounce_out(d - t, 0, c, d) + b


def bounce_in_out(t: float, b: float, c: float, d: float) -> float:
    if t < d / 2:
        return bounce_in(t * 2, 0, c, d) * 0.5 + b
    return bounce_out(t * 2 - d, 0, c, d) * 0.5 + c * 0.5 + b
