import pytest

from domain_sift.formats import get_format, render, render_rpz


def test_plain():
    assert render(["a.com", "b.org"], "plain") == "a.com\nb.org\n"
    assert render([], "plain") == ""


def test_unbound():
    assert render(["a.com"], "unbound") == 'local-zone: "a.com" always_refuse\n'


def test_rpz():
    text = render_rpz(["a.com"], serial=1700000000)
    assert text.splitlines() == [
        "$TTL 300",
        "@ IN SOA localhost. hostmaster.localhost. 1700000000 3600 600 604800 300",
        "@ IN NS localhost.",
        "a.com CNAME .",
        "*.a.com CNAME .",
    ]


def test_rpz_default_serial():
    serial = render("a.com".split(), "rpz").splitlines()[1].split()[5]
    assert serial.isdigit()


def test_only_rpz_is_wildcard():
    assert get_format("rpz").wildcard
    assert not get_format("plain").wildcard
    assert not get_format("unbound").wildcard


def test_unknown_format():
    with pytest.raises(ValueError, match="Unknown format 'hosts'"):
        render(["a.com"], "hosts")
