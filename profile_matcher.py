import time

from domain_sift.match import DomainMatcher

# Inputs that exercise different code paths
TEST_CASES = (
    "_dmarc.example.com",  # valid RFC 8552 label
    "example.com",  # simple domain (most common case)
    "sub.example.com",  # subdomain
    "foo_bar.example.com",  # mid-label underscore (rejected)
    "__bad.example.com",  # double underscore (rejected)
    "_443._tcp.example.com",  # several service labels
)


def profile_matcher(iterations: int = 100_000):
    """Time match_first and match_all over TEST_CASES."""
    matcher = DomainMatcher()

    print(f"Profiling {len(TEST_CASES)} inputs x {iterations:,} iterations\n")

    for name, method in (
        ("match_first", matcher.match_first),
        ("match_all", matcher.match_all),
    ):
        start = time.perf_counter()
        for _ in range(iterations):
            for text in TEST_CASES:
                method(text)
        elapsed = time.perf_counter() - start
        calls = iterations * len(TEST_CASES)
        print(f"{name:<12}: {elapsed:>7.2f}s ({elapsed / calls * 1e6:.2f} us/call)")

    # Adversarial input: long runs that almost form a domain must stay linear.
    print(f"\n{'=' * 50}\nPathological inputs\n{'=' * 50}")
    for label, build in (
        ("hyphen/underscore runs", lambda n: ("a-" * n) + "." + ("_" * n) + "!"),
        ("label chain, no TLD", lambda n: ("a." * n) + "!"),
    ):
        print(label)
        for n in (1_000, 10_000, 100_000):
            text = build(n)
            start = time.perf_counter()
            matcher.match_all(text)
            elapsed = time.perf_counter() - start
            print(f"{len(text):>8,} chars: {elapsed * 1000:>8.2f} ms")


if __name__ == "__main__":
    import typer
    typer.run(profile_matcher)
