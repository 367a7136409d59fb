import itertools

from domain_sift.reduce import ancestors, reduce_domains


def test_ancestors():
    assert list(ancestors("deep.sub.example.com")) == ["example.com", "sub.example.com"]
    assert list(ancestors("example.com")) == []
    assert list(ancestors("com")) == []


def test_parent_covers_all_descendants():
    domains = dict.fromkeys(["example.com", "sub.example.com", "deep.sub.example.com"])
    removed = reduce_domains(domains)
    assert list(domains) == ["example.com"]
    assert removed == {
        "sub.example.com": "example.com",
        "deep.sub.example.com": "example.com",
    }


def test_nearest_listed_ancestor_without_root():
    domains = dict.fromkeys(["sub.example.com", "deep.sub.example.com"])
    removed = reduce_domains(domains)
    assert list(domains) == ["sub.example.com"]
    assert removed == {"deep.sub.example.com": "sub.example.com"}


def test_unrelated_domains_are_kept():
    names = ["alpha.com", "beta.org", "gamma.net"]
    domains = dict.fromkeys(names)
    assert reduce_domains(domains) == {}
    assert list(domains) == names


def test_suffix_must_end_on_a_label_boundary():
    domains = dict.fromkeys(["example.com", "otherexample.com", "ads.otherexample.com"])
    removed = reduce_domains(domains)
    assert removed == {"ads.otherexample.com": "otherexample.com"}
    assert set(domains) == {"example.com", "otherexample.com"}


def test_values_are_untouched():
    domains = {"example.com": "list-a", "a.example.com": "list-b", "b.net": "list-c"}
    reduce_domains(domains)
    assert domains == {"example.com": "list-a", "b.net": "list-c"}


def test_iteration_order_does_not_matter():
    names = [
        "example.com",
        "sub.example.com",
        "deep.sub.example.com",
        "x.deep.sub.example.com",
        "b.other.org",
        "a.b.other.org",
        "solo.net",
    ]
    expected_kept = {"example.com", "b.other.org", "solo.net"}
    expected_removed = {
        "sub.example.com": "example.com",
        "deep.sub.example.com": "example.com",
        "x.deep.sub.example.com": "example.com",
        "a.b.other.org": "b.other.org",
    }
    for order in itertools.permutations(names):
        domains = dict.fromkeys(order)
        assert reduce_domains(domains) == expected_removed
        assert set(domains) == expected_kept


def test_every_parent_is_kept():
    domains = dict.fromkeys(
        ["a.b.c.example.com", "c.example.com", "b.c.example.com", "z.example.com"]
    )
    removed = reduce_domains(domains)
    assert set(removed.values()) <= set(domains)
