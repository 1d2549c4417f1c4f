import pytest

from surfprint import ja
from surfprint.ja import JA, ClientHelloID
from surfprint.tlsspec import ALPNExtension, ClientHelloSpec

CASES = [
    ("android", ja.HELLO_ANDROID_11_OKHTTP),
    ("chrome", ja.HELLO_CHROME_AUTO),
    ("chrome58", ja.HELLO_CHROME_58),
    ("chrome62", ja.HELLO_CHROME_62),
    ("chrome70", ja.HELLO_CHROME_70),
    ("chrome72", ja.HELLO_CHROME_72),
    ("chrome83", ja.HELLO_CHROME_83),
    ("chrome87", ja.HELLO_CHROME_87),
    ("chrome96", ja.HELLO_CHROME_96),
    ("chrome100", ja.HELLO_CHROME_100),
    ("chrome102", ja.HELLO_CHROME_102),
    ("chrome106", ja.HELLO_CHROME_106_SHUFFLE),
    ("chrome120", ja.HELLO_CHROME_120),
    ("chrome120_pq", ja.HELLO_CHROME_120_PQ),
    ("chrome131", ja.HELLO_CHROME_131),
    ("edge", ja.HELLO_EDGE_85),
    ("edge85", ja.HELLO_EDGE_85),
    ("edge106", ja.HELLO_EDGE_106),
    ("firefox", ja.HELLO_FIREFOX_AUTO),
    ("firefox55", ja.HELLO_FIREFOX_55),
    ("firefox56", ja.HELLO_FIREFOX_56),
    ("firefox63", ja.HELLO_FIREFOX_63),
    ("firefox65", ja.HELLO_FIREFOX_65),
    ("firefox99", ja.HELLO_FIREFOX_99),
    ("firefox102", ja.HELLO_FIREFOX_102),
    ("firefox105", ja.HELLO_FIREFOX_105),
    ("firefox120", ja.HELLO_FIREFOX_120),
    ("firefox131", ja.HELLO_FIREFOX_120),
    ("ios", ja.HELLO_IOS_AUTO),
    ("ios11", ja.HELLO_IOS_11_1),
    ("ios12", ja.HELLO_IOS_12_1),
    ("ios13", ja.HELLO_IOS_13),
    ("ios14", ja.HELLO_IOS_14),
    ("randomized", ja.HELLO_RANDOMIZED),
    ("randomized_alpn", ja.HELLO_RANDOMIZED_ALPN),
    ("randomized_no_alpn", ja.HELLO_RANDOMIZED_NO_ALPN),
    ("safari", ja.HELLO_SAFARI_AUTO),
]


@pytest.mark.parametrize("method, expected", CASES)
def test_browser_shortcuts_select_hello_id(method, expected):
    chooser = JA()
    result = getattr(chooser, method)()
    assert result is chooser
    assert chooser.resolved() == expected


def test_firefox131_reuses_firefox120_hello():
    assert JA().firefox131().resolved() == JA().firefox120().resolved()


def test_edge_is_edge85():
    assert JA().edge().resolved() == ja.HELLO_EDGE_85


def test_later_call_replaces_hello_id():
    chooser = JA().chrome131().firefox131()
    assert chooser.resolved() == ja.HELLO_FIREFOX_120


def test_custom_spec_is_resolved_when_no_id():
    spec = ClientHelloSpec(extensions=[ALPNExtension(["h2"])])
    assert JA().set_hello_spec(spec).resolved() is spec


def test_id_takes_precedence_over_spec():
    spec = ClientHelloSpec()
    chooser = JA().set_hello_spec(spec).chrome131()
    assert chooser.resolved() == ja.HELLO_CHROME_131


def test_custom_hello_id():
    custom = ClientHelloID("Custom", "1")
    assert JA().set_hello_id(custom).resolved() == custom
    assert str(custom) == "Custom-1"


def test_resolved_without_configuration_raises():
    with pytest.raises(ValueError):
        JA().resolved()


def test_wrong_types_rejected():
    with pytest.raises(TypeError):
        JA().set_hello_id("chrome")
    with pytest.raises(TypeError):
        JA().set_hello_spec(ja.HELLO_CHROME_131)


def test_chrome_versions_are_distinct():
    ids = {getattr(JA(), name)().resolved() for name, _ in CASES if name.startswith("chrome")}
    assert len(ids) == sum(1 for name, _ in CASES if name.startswith("chrome"))