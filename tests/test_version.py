import pytest

from smackspec.core.errors import InvalidVersionError
from smackspec.core.version import SemanticVersion


@pytest.mark.parametrize("text,expected", [
    ("1.2.3", SemanticVersion(1, 2, 3)),
    ("v0.6.0", SemanticVersion(0, 6, 0)),
    ("10.0.12", SemanticVersion(10, 0, 12)),
    ("1.0.0beta", SemanticVersion(1, 0, 0, "beta")),
    ("2.0.0-rc.1", SemanticVersion(2, 0, 0, "-rc.1")),
])
def test_parse_valid(text, expected):
    assert SemanticVersion.parse(text) == expected


@pytest.mark.parametrize("text", [
    "", "1", "1.2", "1.2.3.4", "01.2.3", "1.2.03", "one.two.three", "v", "1.2.3-", "-1.2.3", "1.2.3 ",
])
def test_parse_invalid(text):
    with pytest.raises(InvalidVersionError):
        SemanticVersion.parse(text)


def test_ordering():
    versions = ["1.10.0", "1.2.0", "1.2.0beta", "0.9.9", "1.2.0alpha"]
    ordered = sorted(SemanticVersion.parse(v) for v in versions)
    assert [str(v) for v in ordered] == ["0.9.9", "1.2.0alpha", "1.2.0beta", "1.2.0", "1.10.0"]


def test_str_drops_leading_v():
    assert str(SemanticVersion.parse("v3.1.4")) == "3.1.4"
