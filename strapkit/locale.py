"""Message translation and positional formatting backed by gettext catalogs.

Format strings use ``{N}`` placeholders, numbered from 1, optionally followed
by options such as ``{1,number}``; ``%N%`` placeholders are accepted as well.
"""

from __future__ import annotations

import gettext
import os
import re
import sys
import threading
from collections.abc import Callable, Iterable, Sequence

DEFAULT_DOMAIN = "strapkit"
"""Catalog domain used when none is given."""

LOCALE_DIR_VARIABLE = "STRAPKIT_LOCALE_DIR"
"""Environment variable naming an installation root to search for catalogs."""

LOCALE_INSTALL = os.path.join("share", "locale")
"""Catalog directory relative to an installation root."""

_locales: dict[str, gettext.NullTranslations] = {}
_lock = threading.Lock()

_PLACEHOLDER = re.compile(r"\{(\d+)(?:,[^{}]*)?\}|%(\d+)%")


def _search_paths(paths: Iterable[str]) -> list[str]:
    root = os.environ.get(LOCALE_DIR_VARIABLE)
    if root:
        directories = [os.path.join(root, LOCALE_INSTALL)]
    else:
        directories = [os.path.join(sys.prefix, LOCALE_INSTALL)]
    directories.extend(paths)
    return directories


def _load(id: str, domain: str, paths: Iterable[str]) -> gettext.NullTranslations:
    if not domain:
        return gettext.NullTranslations()
    languages = [id] if id else None
    for directory in _search_paths(paths):
        try:
            return gettext.translation(domain, directory, languages=languages)
        except FileNotFoundError:
            continue
        except (OSError, UnicodeError, ValueError):
            # An unusable catalog falls back to the untranslated default.
            return gettext.NullTranslations()
    return gettext.NullTranslations()


def get_locale(
    id: str = "", domain: str = DEFAULT_DOMAIN, paths: Iterable[str] = ()
) -> gettext.NullTranslations:
    """Return the translations for ``domain``, loading them on first use.

    ``id`` selects the language; an empty id uses the system default. Once a
    domain is loaded the same translations are returned until
    :func:`clear_domain` is called for it.
    """
    with _lock:
        cached = _locales.get(domain)
        if cached is not None:
            return cached
        translations = _load(id, domain, list(paths))
        _locales[domain] = translations
        return translations


def clear_domain(domain: str = DEFAULT_DOMAIN) -> None:
    """Forget the translations loaded for ``domain``."""
    with _lock:
        _locales.pop(domain, None)


def translate(msg: str, domain: str = DEFAULT_DOMAIN) -> str:
    """Translate ``msg``; the original is returned if translation fails."""
    try:
        return get_locale("", domain).gettext(msg)
    except Exception:
        return msg


def translate_p(context: str, msg: str, domain: str = DEFAULT_DOMAIN) -> str:
    """Translate ``msg`` within ``context``; the original is returned on failure."""
    try:
        return get_locale("", domain).pgettext(context, msg)
    except Exception:
        return msg


def translate_n(single: str, plural: str, n: int, domain: str = DEFAULT_DOMAIN) -> str:
    """Translate a singular/plural pair, choosing the form for ``n``."""
    try:
        return get_locale("", domain).ngettext(single, plural, n)
    except Exception:
        return single if n == 1 else plural


def translate_np(
    context: str, single: str, plural: str, n: int, domain: str = DEFAULT_DOMAIN
) -> str:
    """Translate a singular/plural pair within ``context``."""
    try:
        return get_locale("", domain).npgettext(context, single, plural, n)
    except Exception:
        return single if n == 1 else plural


def _render(value: object) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return "%.6g" % value
    return str(value)


def _substitute(template: str, args: Sequence[object]) -> str:
    def replace(match: re.Match[str]) -> str:
        index = int(match.group(1) or match.group(2))
        if not 1 <= index <= len(args):
            raise ValueError(
                f"format placeholder {index} has no argument "
                f"({len(args)} given) in {template!r}"
            )
        return _render(args[index - 1])

    return _PLACEHOLDER.sub(replace, template)


def _format_common(trans: Callable[[str], str], args: Sequence[object]) -> str:
    return _substitute(trans(DEFAULT_DOMAIN), args)


def format(fmt: str, *args: object) -> str:
    """Translate ``fmt`` and substitute ``args`` into its placeholders."""
    return _format_common(lambda domain: translate(fmt, domain), args)


def format_p(context: str, fmt: str, *args: object) -> str:
    """Translate ``fmt`` within ``context`` and substitute ``args``."""
    return _format_common(lambda domain: translate_p(context, fmt, domain), args)


def format_n(single: str, plural: str, n: int, *args: object) -> str:
    """Translate the form for ``n`` and substitute ``args``."""
    return _format_common(lambda domain: translate_n(single, plural, n, domain), args)


def format_np(context: str, single: str, plural: str, n: int, *args: object) -> str:
    """Translate the form for ``n`` within ``context`` and substitute ``args``."""
    return _format_common(
        lambda domain: translate_np(context, single, plural, n, domain), args
    )


def _(fmt: str, *args: object) -> str:
    """Shorthand for :func:`format`."""
    return format(fmt, *args)


def p_(context: str, fmt: str, *args: object) -> str:
    """Shorthand for :func:`format_p`."""
    return format_p(context, fmt, *args)


def n_(single: str, plural: str, n: int, *args: object) -> str:
    """Shorthand for :func:`format_n`."""
    return format_n(single, plural, n, *args)


def np_(context: str, single: str, plural: str, n: int, *args: object) -> str:
    """Shorthand for :func:`format_np`."""
    return format_np(context, single, plural, n, *args)