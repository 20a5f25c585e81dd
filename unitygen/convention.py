"""Naming conventions for generated C# identifiers."""

_SEPARATORS = frozenset("_- ")


def camel_case(text: str) -> str:
    """Drop separators, lowercase the first letter and capitalise each later word."""
    out: list[str] = []
    started = False
    capitalise_next = False
    for ch in text:
        if not started:
            if ch not in _SEPARATORS:
                out.append(ch.lower())
                started = True
            continue
        if ch in _SEPARATORS:
            capitalise_next = True
            continue
        out.append(ch.upper() if capitalise_next else ch)
        capitalise_next = False
    return "".join(out)


def class_name(text: str) -> str:
    """Make a valid C# class name: capitalised, without dashes or spaces.

    Underscores after the first character are kept, and the character that
    follows one is capitalised.
    """
    out: list[str] = []
    started = False
    capitalise_next = False
    for ch in text:
        if not started:
            if ch not in _SEPARATORS:
                out.append(ch.upper())
                started = True
            continue
        if ch in "- ":
            capitalise_next = True
            continue
        if ch == "_":
            out.append(ch)
            capitalise_next = True
            continue
        out.append(ch.upper() if capitalise_next else ch)
        capitalise_next = False
    return "".join(out)


def title_case(text: str) -> str:
    """Strip '_', '-' and ' ' and capitalise every word."""
    out: list[str] = []
    capitalise_next = True
    for ch in text:
        if ch in _SEPARATORS:
            capitalise_next = True
            continue
        out.append(ch.upper() if capitalise_next else ch)
        capitalise_next = False
    return "".join(out)