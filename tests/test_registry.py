import pytest

from dxspots import parse
from dxspots.models import Category, Dialect, Unrecognized
from dxspots.parsers import REGISTRY, RegistryError, match_line, register


def test_registry_precedence_order():
    names = [rule.name for rule in REGISTRY]

    assert names.index("rbn_speed") < names.index("rbn_locator") < names.index("dx_dxspider")
    assert names.index("dx_dxspider") < names.index("dx_cccluster") < names.index("dx_arcluster")
    assert names.index("wwv_arcluster") < names.index("wwv_dxspider")
    assert names.index("wx_cccluster") < names.index("wx_dxspider")
    assert names.index("toall_cccluster") < names.index("toall_dxspider")
    assert names.index("tolocal_cccluster") < names.index("tolocal_dxspider")


def test_every_category_has_a_rule():
    assert {rule.category for rule in REGISTRY} == set(Category)


def test_match_line_trims_and_returns_captures():
    match = match_line("To ALL de OP1: Net starting now \x07\r\n")

    assert match is not None
    assert match.category is Category.TO_ALL
    assert match.dialect is Dialect.DXSPIDER
    assert match.fields["sender"] == "OP1"
    assert match.fields["message"] == "Net starting now"


@pytest.mark.parametrize("line", ["", "   ", "login: ", "Hello there"])
def test_match_line_no_match(line):
    assert match_line(line) is None


def test_registry_is_sealed_after_import():
    assert isinstance(REGISTRY, tuple)
    before = len(REGISTRY)

    with pytest.raises(RegistryError):
        register(Category.WX, Dialect.DXSPIDER, r"(?P<originator>LATE) (?P<message>.*)")

    assert len(REGISTRY) == before
    assert isinstance(parse("LATE arrival"), Unrecognized)


def test_first_registered_rule_wins():
    rules = []

    @register(Category.WX, Dialect.CC_CLUSTER, r"WX de (?P<originator>[A-Z0-9]+): (?P<message>sunny)", rules=rules)
    def narrow(fields, dialect):
        return "narrow"

    @register(Category.WX, Dialect.DXSPIDER, r"WX de (?P<originator>\S+): (?P<message>.*)", rules=rules)
    def loose(fields, dialect):
        return "loose"

    assert match_line("WX de K1ABC: sunny", rules).rule.name == "narrow"
    assert match_line("WX de K1ABC: rain", rules).rule.name == "loose"


def test_patterns_match_ascii_digits_only():
    rules = []
    register(Category.WX, Dialect.DXSPIDER, r"WX <(?P<time>\d{4})Z>", rules=rules)(lambda f, d: None)

    assert match_line("WX <1200Z>", rules) is not None
    assert match_line("WX <١٢٠٠Z>", rules) is None


def test_register_rejects_invalid_pattern():
    rules = []

    with pytest.raises(RegistryError):
        register(Category.WX, Dialect.DXSPIDER, r"WX de (?P<originator>[A-Z", rules=rules)(lambda f, d: None)
    assert rules == []


def test_register_requires_named_groups():
    with pytest.raises(RegistryError):
        register(Category.WX, Dialect.DXSPIDER, r"WX de (\S+): (.*)", rules=[])(lambda f, d: None)


def test_register_rejects_duplicate_names():
    rules = []
    register(Category.WX, Dialect.DXSPIDER, r"WX de (?P<originator>\S+)", name="wx", rules=rules)(lambda f, d: None)

    with pytest.raises(RegistryError):
        register(Category.WX, Dialect.CC_CLUSTER, r"WX de (?P<originator>\S+) ", name="wx", rules=rules)(
            lambda f, d: None
        )
