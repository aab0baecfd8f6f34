import struct
from array import array

import pytest

from strapkit import locale as lc

LITERAL = "requesting {1} item."
PLURAL = "requesting {1} items."

NUM = "requesting {1,number}."
NUM_ITEM = "requesting {1,number} item."
NUM_ITEMS = "requesting {1,number} items."

TEST_DOMAIN = "leatherman_locale"

FRENCH_CATALOG = {
    "": "Content-Type: text/plain; charset=UTF-8\n"
    "Plural-Forms: nplurals=2; plural=(n > 1);\n",
    NUM: "demande {1,number}.",
    "foo\x04" + NUM: "demandé {1,number}.",
    NUM_ITEM + "\x00" + NUM_ITEMS: "demande {1,number} objet.\x00demande {1,number} objets.",
    "foo\x04" + NUM_ITEM + "\x00" + NUM_ITEMS:
        "demandé {1,number} objet.\x00demandé {1,number} objets.",
}


def _write_mo(path, catalog):
    keys = sorted(catalog)
    ids = b""
    strs = b""
    offsets = []
    for key in keys:
        kb = key.encode("utf-8")
        vb = catalog[key].encode("utf-8")
        offsets.append((len(ids), len(kb), len(strs), len(vb)))
        ids += kb + b"\0"
        strs += vb + b"\0"
    keystart = 7 * 4 + 16 * len(keys)
    valuestart = keystart + len(ids)
    koffsets = []
    voffsets = []
    for o1, l1, o2, l2 in offsets:
        koffsets += [l1, o1 + keystart]
        voffsets += [l2, o2 + valuestart]
    header = struct.pack(
        "Iiiiiii", 0x950412DE, 0, len(keys), 7 * 4, 7 * 4 + len(keys) * 8, 0, 0
    )
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(
        header + array("i", koffsets).tobytes() + array("i", voffsets).tobytes() + ids + strs
    )


@pytest.fixture(autouse=True)
def _isolated(tmp_path, monkeypatch):
    monkeypatch.setenv(lc.LOCALE_DIR_VARIABLE, str(tmp_path / "no-install"))
    lc.clear_domain(lc.DEFAULT_DOMAIN)
    lc.clear_domain(TEST_DOMAIN)
    yield
    lc.clear_domain(lc.DEFAULT_DOMAIN)
    lc.clear_domain(TEST_DOMAIN)


@pytest.fixture
def catalogs(tmp_path):
    root = tmp_path / "catalogs"
    for domain in (lc.DEFAULT_DOMAIN, TEST_DOMAIN):
        _write_mo(root / "fr" / "LC_MESSAGES" / f"{domain}.mo", FRENCH_CATALOG)
    return str(root)


@pytest.fixture
def french(catalogs):
    lc.get_locale("fr.UTF-8", TEST_DOMAIN, [catalogs])
    lc.get_locale("fr.UTF-8", lc.DEFAULT_DOMAIN, [catalogs])
    return catalogs


# Untranslated format strings


def test_translate_returns_message():
    assert lc.translate(LITERAL) == LITERAL


def test_translate_p_returns_message():
    assert lc.translate_p("foo", LITERAL) == LITERAL


@pytest.mark.parametrize("n, expected", [(1, LITERAL), (0, PLURAL), (2, PLURAL)])
def test_translate_n_chooses_form(n, expected):
    assert lc.translate_n(LITERAL, PLURAL, n) == expected


@pytest.mark.parametrize("n, expected", [(1, LITERAL), (2, PLURAL)])
def test_translate_np_chooses_form(n, expected):
    assert lc.translate_np("foo", LITERAL, PLURAL, n) == expected


def test_format_substitutes():
    assert lc.format(LITERAL, 1.25) == "requesting 1.25 item."
    assert lc._(LITERAL, 1.25) == "requesting 1.25 item."


def test_format_p_substitutes():
    assert lc.format_p("foo", LITERAL, 1.25) == "requesting 1.25 item."
    assert lc.p_("foo", LITERAL, 1.25) == "requesting 1.25 item."


@pytest.mark.parametrize(
    "n, expected",
    [(1, "requesting 3.7 item."), (0, "requesting 3.7 items."), (2, "requesting 3.7 items.")],
)
def test_format_n_substitutes(n, expected):
    assert lc.format_n(LITERAL, PLURAL, n, 3.7) == expected
    assert lc.n_(LITERAL, PLURAL, n, 3.7) == expected


@pytest.mark.parametrize(
    "n, expected", [(1, "requesting 3.7 item."), (2, "requesting 3.7 items.")]
)
def test_format_np_substitutes(n, expected):
    assert lc.format_np("foo", LITERAL, PLURAL, n, 3.7) == expected
    assert lc.np_("foo", LITERAL, PLURAL, n, 3.7) == expected


# Default locale with a named domain


def test_default_locale_does_not_translate():
    lc.get_locale("", TEST_DOMAIN, [])
    assert lc.translate(NUM, TEST_DOMAIN) == NUM
    assert lc.translate_p("foo", NUM, TEST_DOMAIN) == NUM
    assert lc.translate_n(NUM_ITEM, NUM_ITEMS, 1, TEST_DOMAIN) == NUM_ITEM
    assert lc.translate_n(NUM_ITEM, NUM_ITEMS, 0, TEST_DOMAIN) == NUM_ITEMS
    assert lc.translate_n(NUM_ITEM, NUM_ITEMS, 2, TEST_DOMAIN) == NUM_ITEMS
    assert lc.translate_np("foo", NUM_ITEM, NUM_ITEMS, 1, TEST_DOMAIN) == NUM_ITEM
    assert lc.translate_np("foo", NUM_ITEM, NUM_ITEMS, 2, TEST_DOMAIN) == NUM_ITEMS


def test_default_locale_format_with_options():
    assert lc.format(NUM, 1.25) == "requesting 1.25."


# French locale


def test_french_translate(french):
    assert lc.translate(NUM, TEST_DOMAIN) == "demande {1,number}."
    assert lc.translate_p("foo", NUM, TEST_DOMAIN) == "demandé {1,number}."


@pytest.mark.parametrize(
    "n, expected",
    [
        (1, "demande {1,number} objet."),
        (0, "demande {1,number} objet."),
        (2, "demande {1,number} objets."),
    ],
)
def test_french_translate_n(french, n, expected):
    assert lc.translate_n(NUM_ITEM, NUM_ITEMS, n, TEST_DOMAIN) == expected


@pytest.mark.parametrize(
    "n, expected", [(1, "demandé {1,number} objet."), (2, "demandé {1,number} objets.")]
)
def test_french_translate_np(french, n, expected):
    assert lc.translate_np("foo", NUM_ITEM, NUM_ITEMS, n, TEST_DOMAIN) == expected


def test_french_format(french):
    assert lc.format(NUM, 1.25) in ("demande 1.25.", "demande 1,25.")
    assert lc._(NUM, 1.25) in ("demande 1.25.", "demande 1,25.")


def test_french_format_p(french):
    assert lc.format_p("foo", NUM, 1.25) in ("demandé 1.25.", "demandé 1,25.")
    assert lc.p_("foo", NUM, 1.25) in ("demandé 1.25.", "demandé 1,25.")


@pytest.mark.parametrize(
    "n, expected",
    [(1, "demande 3.7 objet."), (0, "demande 3.7 objet."), (2, "demande 3.7 objets.")],
)
def test_french_format_n(french, n, expected):
    assert lc.format_n(NUM_ITEM, NUM_ITEMS, n, 3.7) == expected
    assert lc.n_(NUM_ITEM, NUM_ITEMS, n, 3.7) == expected


@pytest.mark.parametrize(
    "n, expected", [(1, "demandé 3.7 objet."), (2, "demandé 3.7 objets.")]
)
def test_french_format_np(french, n, expected):
    assert lc.format_np("foo", NUM_ITEM, NUM_ITEMS, n, 3.7) == expected
    assert lc.np_("foo", NUM_ITEM, NUM_ITEMS, n, 3.7) == expected


# Caching and search paths


def test_locale_is_cached_until_cleared(catalogs):
    first = lc.get_locale("fr.UTF-8", TEST_DOMAIN, [catalogs])
    assert lc.get_locale("", TEST_DOMAIN, []) is first
    assert lc.translate(NUM, TEST_DOMAIN) == "demande {1,number}."
    lc.clear_domain(TEST_DOMAIN)
    assert lc.translate(NUM, TEST_DOMAIN) == NUM


def test_empty_domain_never_translates(catalogs):
    lc.get_locale("fr.UTF-8", "", [catalogs])
    try:
        assert lc.translate(NUM, "") == NUM
    finally:
        lc.clear_domain("")


def test_install_root_from_environment(tmp_path, monkeypatch):
    root = tmp_path / "install"
    _write_mo(
        root / "share" / "locale" / "fr" / "LC_MESSAGES" / f"{TEST_DOMAIN}.mo",
        FRENCH_CATALOG,
    )
    monkeypatch.setenv(lc.LOCALE_DIR_VARIABLE, str(root))
    lc.get_locale("fr.UTF-8", TEST_DOMAIN)
    assert lc.translate(NUM, TEST_DOMAIN) == "demande {1,number}."


def test_corrupt_catalog_falls_back(tmp_path):
    bad = tmp_path / "bad" / "fr" / "LC_MESSAGES" / f"{TEST_DOMAIN}.mo"
    bad.parent.mkdir(parents=True)
    bad.write_bytes(b"not a catalog")
    lc.get_locale("fr.UTF-8", TEST_DOMAIN, [str(tmp_path / "bad")])
    assert lc.translate(NUM, TEST_DOMAIN) == NUM


# Substitution details


def test_percent_placeholders():
    assert lc.format("%1% and %2%", "a", 2) == "a and 2"


def test_placeholders_may_repeat_and_reorder():
    assert lc.format("{2}-{1}-{2}", "x", "y") == "y-x-y"


def test_stream_style_rendering():
    assert lc.format("testing {1} {2} {3}", 1, "2", 3.0) == "testing 1 2 3"
    assert lc.format("{1}/{2}", True, False) == "1/0"


def test_missing_argument_raises():
    with pytest.raises(ValueError):
        lc.format("value {2}", "only one")


def test_zero_placeholder_raises():
    with pytest.raises(ValueError):
        lc.format("value {0}", "x")