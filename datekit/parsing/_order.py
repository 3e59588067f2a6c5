"""Component orders for parsing.

An order lists the components a string contains, in the sequence they are
written. It is always supplied by the caller; the parser never guesses
whether "01/02/2019" means January 2nd or February 1st.

Internal module - use parse() from datekit.parsing instead.
"""

from __future__ import annotations

from typing import Sequence, Union

from datekit.units.timeunit import Component

OrderSpec = Union[str, Sequence[Union[Component, str]]]

_DATE_COMPONENTS = frozenset((Component.YEAR, Component.MONTH, Component.DAY))
_TIME_SEQUENCE = (Component.HOUR, Component.MINUTE, Component.SECOND)

_DATE_CODES = {"y": Component.YEAR, "m": Component.MONTH, "d": Component.DAY}
_TIME_CODES = {"h": Component.HOUR, "m": Component.MINUTE, "s": Component.SECOND}

# Digits each component occupies in a packed string such as "20190218"
PACKED_WIDTH: dict[Component, int] = {
    Component.YEAR: 4,
    Component.MONTH: 2,
    Component.DAY: 2,
    Component.HOUR: 2,
    Component.MINUTE: 2,
    Component.SECOND: 2,
}


def resolve_order(order: OrderSpec) -> tuple[Component, ...]:
    """Normalize an order spec into a tuple of Components.

    Accepts a shorthand string ("ymd", "dmy_hms", "mdy_hm") or a sequence
    of Component members or component names ("year", "month", ...).

    The date components must each appear exactly once, in any sequence,
    followed optionally by hour, hour-minute or hour-minute-second.

    Raises:
        ValueError: If the order is malformed.

    Examples:
        >>> resolve_order("ydm")
        (<Component.YEAR: 'y'>, <Component.DAY: 'd'>, <Component.MONTH: 'm'>)
    """
    if isinstance(order, str):
        components = _from_shorthand(order)
    else:
        components = tuple(Component.coerce(item) for item in order)

    date_part = tuple(c for c in components if not c.is_time)
    time_part = components[len(date_part):]

    if set(date_part) != _DATE_COMPONENTS or len(date_part) != 3:
        raise ValueError(
            f"order must contain year, month and day exactly once, got {order_code(components)!r}"
        )
    if any(not c.is_time for c in time_part) or time_part != _TIME_SEQUENCE[: len(time_part)]:
        raise ValueError(
            "time components must follow the date as hour, hour-minute "
            f"or hour-minute-second, got {order_code(components)!r}"
        )
    return components


def order_code(components: Sequence[Component]) -> str:
    """Render components back into shorthand ("ymd_hms")."""
    date_code = "".join(c.value for c in components if not c.is_time)
    time_code = "".join(c.value.lower() for c in components if c.is_time)
    return f"{date_code}_{time_code}" if time_code else date_code


def _from_shorthand(code: str) -> tuple[Component, ...]:
    date_code, _, time_code = code.strip().lower().partition("_")
    try:
        date_part = [_DATE_CODES[ch] for ch in date_code]
        time_part = [_TIME_CODES[ch] for ch in time_code]
    except KeyError as exc:
        raise ValueError(f"unknown component code {exc.args[0]!r} in order {code!r}") from None
    return tuple(date_part + time_part)


__all__ = ["OrderSpec", "PACKED_WIDTH", "resolve_order", "order_code"]
