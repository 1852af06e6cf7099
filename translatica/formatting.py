"""Placeholder substitution for message templates.

Two grammars are supported; each template is written for exactly one of them:

* ``format_printf``: ``%s``, ``%d``, ``%.2f`` ... consumed left to right,
  with optional explicit ``%2$s`` indexes.
* ``format_indexed``: ``{0}``, ``{1,number}``, ``{0,number,percent}`` with
  single-quote escaping (``''`` is a literal quote).

Both validate argument types up front and raise ``MessageFormatError`` on any
mismatch.
"""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_EVEN, Context, Decimal
from typing import Sequence, Union

from translatica.exceptions import MessageFormatError

MessageArgument = Union[str, int, float, Decimal]

_ARGUMENT_TYPES = (str, int, float, Decimal)
_PRINTF_RE = re.compile(
    r"%(?:(?P<index>\d+)\$)?(?P<flags>[-#+ 0,(]*)(?P<width>\d+)?(?:\.(?P<precision>\d+))?(?P<conversion>[a-zA-Z%])"
)
_TEXT_CONVERSIONS = frozenset("sSbBc")
_INTEGER_CONVERSIONS = frozenset("doxX")
_FLOAT_CONVERSIONS = frozenset("eEfgG")


def _check_arguments(template: str, args: Sequence[object]) -> None:
    for position, arg in enumerate(args):
        if not isinstance(arg, _ARGUMENT_TYPES):
            raise MessageFormatError(
                f"Unsupported argument type {type(arg).__name__} at position {position}",
                template=template,
            )


def _to_text(arg: MessageArgument) -> str:
    if isinstance(arg, bool):
        return "true" if arg else "false"
    return str(arg)


def _is_integer(arg: object) -> bool:
    return isinstance(arg, int) and not isinstance(arg, bool)


def _check_flags(template: str, match: re.Match[str], allowed: str) -> str:
    flags = match["flags"]
    conversion = match["conversion"]
    unsupported = sorted(set(flags) - set(allowed))
    if unsupported:
        raise MessageFormatError(
            f"Flags {''.join(unsupported)!r} not allowed for %{conversion}", template=template
        )
    if ("-" in flags or "0" in flags) and match["width"] is None:
        raise MessageFormatError(f"Placeholder {match.group(0)} needs a width", template=template)
    if ("-" in flags and "0" in flags) or ("+" in flags and " " in flags):
        raise MessageFormatError(f"Conflicting flags in {match.group(0)}", template=template)
    return flags


def _pad(text: str, flags: str, width: str | None) -> str:
    if width is None:
        return text
    return text.ljust(int(width)) if "-" in flags else text.rjust(int(width))


def _render_signed(magnitude: str, negative: bool, flags: str, width: str | None) -> str:
    if negative:
        prefix, suffix = ("(", ")") if "(" in flags else ("-", "")
    else:
        prefix = "+" if "+" in flags else " " if " " in flags else ""
        suffix = ""
    if "0" in flags and width is not None:
        magnitude = magnitude.rjust(int(width) - len(prefix) - len(suffix), "0")
    return _pad(prefix + magnitude + suffix, flags, width)


def _render_radix(arg: int, conversion: str, flags: str, width: str | None) -> str:
    # negative values print as 32- or 64-bit two's complement, wider ones keep their sign
    value = arg
    if -(2**31) <= value < 0:
        value += 2**32
    elif -(2**63) <= value < 0:
        value += 2**64
    sign = "-" if value < 0 else ""
    digits = format(abs(value), conversion)
    radix_prefix = ""
    if "#" in flags:
        radix_prefix = "0" if conversion == "o" else "0" + conversion
    if "0" in flags and width is not None:
        digits = digits.rjust(int(width) - len(sign) - len(radix_prefix), "0")
    return _pad(sign + radix_prefix + digits, flags, width)


def _is_negative(arg: int | float | Decimal) -> bool:
    if isinstance(arg, Decimal):
        return arg.is_signed()
    if isinstance(arg, float):
        return math.copysign(1.0, arg) < 0
    return arg < 0


def _render_float(arg: int | float | Decimal, match: re.Match[str], flags: str) -> str:
    conversion = match["conversion"]
    finite = arg.is_finite() if isinstance(arg, Decimal) else math.isfinite(arg)
    if not finite:
        nan = arg.is_nan() if isinstance(arg, Decimal) else math.isnan(arg)
        magnitude = "NaN" if nan else "Infinity"
        return _render_signed(magnitude, not nan and arg < 0, flags.replace("0", ""), match["width"])
    spec = ("#" if "#" in flags else "") + ("," if "," in flags else "")
    spec += f".{match['precision'] or 6}{conversion}"
    return _render_signed(format(abs(arg), spec), _is_negative(arg), flags, match["width"])


def _render_printf(template: str, match: re.Match[str], arg: MessageArgument) -> str:
    conversion = match["conversion"]
    if conversion not in _TEXT_CONVERSIONS | _INTEGER_CONVERSIONS | _FLOAT_CONVERSIONS:
        raise MessageFormatError(f"Unknown format conversion %{conversion}", template=template)
    if match["precision"] is not None and conversion not in "sSbBeEfgG":
        raise MessageFormatError(f"Precision not allowed for %{conversion}", template=template)

    if conversion in _TEXT_CONVERSIONS:
        flags = _check_flags(template, match, "-")
        spec = "%" + flags + (match["width"] or "")
        if match["precision"] is not None:
            spec += "." + match["precision"]
        if conversion == "c":
            if _is_integer(arg) or (isinstance(arg, str) and len(arg) == 1):
                return (spec + "c") % arg
        else:
            if conversion in "bB":
                text = _to_text(arg) if isinstance(arg, bool) else "true"
            else:
                text = _to_text(arg)
            text = (spec + "s") % text
            return text.upper() if conversion.isupper() else text
    elif conversion == "d":
        if _is_integer(arg):
            flags = _check_flags(template, match, "-+ 0,(")
            return _render_signed(
                format(abs(arg), "," if "," in flags else "d"), arg < 0, flags, match["width"]
            )
    elif conversion in _INTEGER_CONVERSIONS:
        if _is_integer(arg):
            flags = _check_flags(template, match, "-#0")
            return _render_radix(arg, conversion, flags, match["width"])
    elif _is_integer(arg) or isinstance(arg, (float, Decimal)):
        allowed = "-#+ 0(" if conversion in "eE" else "-#+ 0,("
        flags = _check_flags(template, match, allowed)
        return _render_float(arg, match, flags)
    raise MessageFormatError(
        f"%{conversion} is incompatible with argument of type {type(arg).__name__}",
        template=template,
    )


def format_printf(template: str, args: Sequence[MessageArgument]) -> str:
    """Substitute printf-style placeholders; extra arguments are ignored."""

    _check_arguments(template, args)
    parts: list[str] = []
    cursor = 0
    pos = 0
    while True:
        start = template.find("%", pos)
        if start < 0:
            parts.append(template[pos:])
            break
        parts.append(template[pos:start])
        match = _PRINTF_RE.match(template, start)
        if match is None:
            raise MessageFormatError(f"Malformed placeholder at position {start}", template=template)
        pos = match.end()

        conversion = match["conversion"]
        if conversion == "%":
            parts.append("%")
            continue
        if conversion == "n":
            parts.append("\n")
            continue

        if match["index"] is not None:
            index = int(match["index"]) - 1
            if index < 0 or index >= len(args):
                raise MessageFormatError(
                    f"Placeholder {match.group(0)} refers to missing argument", template=template
                )
        else:
            index = cursor
            cursor += 1
            if index >= len(args):
                raise MessageFormatError(
                    f"Missing argument for placeholder {match.group(0)} (got {len(args)})",
                    template=template,
                )
        try:
            parts.append(_render_printf(template, match, args[index]))
        except OverflowError as exc:
            raise MessageFormatError(str(exc), template=template) from exc
    return "".join(parts)


def _format_number(template: str, value: MessageArgument, style: str | None) -> str:
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise MessageFormatError(
            f"Number style requires a numeric argument, got {type(value).__name__}",
            template=template,
        )
    number = Decimal(repr(value)) if isinstance(value, float) else Decimal(value)
    if not number.is_finite():
        if number.is_nan():
            return "NaN"
        text = "-∞" if number.is_signed() else "∞"
        return text + "%" if style == "percent" else text
    if _is_integer(value) and style != "percent":
        return f"{value:,}"

    # room for every integer digit plus three fraction digits and the percent shift
    context = Context(prec=max(28, number.adjusted() + 8), rounding=ROUND_HALF_EVEN)
    if style == "integer":
        return f"{number.quantize(Decimal(1), context=context):,f}"
    if style == "percent":
        return f"{context.multiply(number, 100).quantize(Decimal(1), context=context):,f}%"
    text = f"{number.quantize(Decimal('0.001'), context=context):,f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _render_indexed(template: str, body: str, args: Sequence[MessageArgument]) -> str:
    fields = [field.strip() for field in body.split(",")]
    if not fields[0].isdigit():
        raise MessageFormatError(f"Invalid argument index {{{body}}}", template=template)
    index = int(fields[0])
    if index >= len(args):
        raise MessageFormatError(
            f"Placeholder {{{index}}} has no argument (got {len(args)})", template=template
        )
    arg = args[index]

    if len(fields) == 1:
        if _is_integer(arg) or isinstance(arg, (float, Decimal)):
            return _format_number(template, arg, None)
        return _to_text(arg)
    if fields[1] != "number" or len(fields) > 3:
        raise MessageFormatError(f"Unsupported format type in {{{body}}}", template=template)
    style = fields[2] if len(fields) == 3 else None
    if style not in (None, "integer", "percent"):
        raise MessageFormatError(f"Unsupported number style in {{{body}}}", template=template)
    return _format_number(template, arg, style)


def format_indexed(template: str, args: Sequence[MessageArgument]) -> str:
    """Substitute ``{n}`` placeholders by argument index."""

    _check_arguments(template, args)
    parts: list[str] = []
    in_quote = False
    i = 0
    length = len(template)
    while i < length:
        char = template[i]
        if char == "'":
            if i + 1 < length and template[i + 1] == "'":
                parts.append("'")
                i += 2
                continue
            in_quote = not in_quote
            i += 1
            continue
        if char == "{" and not in_quote:
            end = template.find("}", i + 1)
            if end < 0:
                raise MessageFormatError("Unmatched braces in the pattern", template=template)
            parts.append(_render_indexed(template, template[i + 1 : end], args))
            i = end + 1
            continue
        parts.append(char)
        i += 1
    return "".join(parts)


__all__ = ["MessageArgument", "format_indexed", "format_printf"]
