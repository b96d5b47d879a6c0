import re

import pytest

from toolcatalog.services.slug import is_valid, normalize

NORMALIZED_SHAPE = re.compile(r"^[a-z0-9]*(-[a-z0-9]+)*$")

SAMPLES = [
    "",
    "   ",
    "Café COM Leite!!",
    "--already-a-slug--",
    "Ação & Reação / 2024",
    "ÅÉÎÕÜ çñ",
    "tabs\tand\nnewlines",
    "emoji 🚀 rocket",
    "ß straße",
    "a--b",
    "___",
]


def test_normalize_example():
    slug = normalize("Café COM Leite!!")
    assert slug == "cafe-com-leite"
    assert is_valid(slug)


def test_normalize_handles_missing_input():
    assert normalize(None) == ""
    assert normalize("") == ""


@pytest.mark.parametrize("text", SAMPLES)
def test_normalize_output_shape_and_idempotence(text):
    slug = normalize(text)
    assert NORMALIZED_SHAPE.match(slug)
    assert normalize(slug) == slug


def test_normalize_collapses_runs_and_trims():
    assert normalize("  Hello,   World  ") == "hello-world"
    assert normalize("a--b") == "a-b"


@pytest.mark.parametrize(
    "slug, expected",
    [
        ("abc", True),
        ("cafe-com-leite", True),
        ("a1-b2-c3", True),
        ("ab", False),
        ("a--b", False),
        ("-abc", False),
        ("abc-", False),
        ("Abc", False),
        ("abc\n", False),
        ("", False),
        (None, False),
    ],
)
def test_is_valid(slug, expected):
    assert is_valid(slug) is expected
