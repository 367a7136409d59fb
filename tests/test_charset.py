import pytest

from domain_sift.charset import has_invalid_underscore


@pytest.mark.parametrize(
    "domain",
    [
        "example.com",
        "_dmarc.example.com",
        "_443._tcp.example.com",
        "_acme-challenge.example.com",
        "selector1._domainkey.example.com",
        "_Dmarc.Example.COM",
    ],
)
def test_valid_underscore_placement(domain):
    assert not has_invalid_underscore(domain)


@pytest.mark.parametrize(
    "domain",
    [
        "__dmarc.example.com",  # doubled
        "foo_bar.example.com",  # inside a label
        "FOO_BAR.example.com",
        "_.example.com",  # underscore-only label
        "foo_.example.com",  # ending a label
        "example.com_",  # ending the domain
        "_-foo.example.com",  # "_-" opening a label
        "a._-foo.example.com",
        "foo-_bar.example.com",  # hyphen then underscore
    ],
)
def test_invalid_underscore_placement(domain):
    assert has_invalid_underscore(domain)
