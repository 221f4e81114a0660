import re

import pytest

from glamour_storefront.core.application.seo.slugifier import slugify

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")

SAMPLES = [
    "Red Lipstick",
    "  Silk   Serum  ",
    "Crème Brûlée Lip Balm!",
    "Rose & Oud -- Eau de Parfum (100ml)",
    "ÀÉÎÕÜ çñ",
    "Mascara___Volume++",
    "a" * 80,
    "word " * 20,
    "Glow-Up---Kit",
    "1234 SPF 50",
]


@pytest.mark.parametrize("text", SAMPLES)
def test_slug_shape(text):
    slug = slugify(text)

    assert len(slug) <= 50
    assert slug == "" or SLUG_PATTERN.match(slug)


@pytest.mark.parametrize("text", SAMPLES)
def test_slugify_is_idempotent(text):
    once = slugify(text)
    assert slugify(once) == once


def test_strips_diacritics_and_symbols():
    assert slugify("Crème Brûlée Lip Balm!") == "creme-brulee-lip-balm"
    assert slugify("Rose & Oud -- Eau de Parfum (100ml)") == "rose-oud-eau-de-parfum-100ml"


def test_truncation_does_not_leave_trailing_hyphen():
    # 49 letters then a space: the cut lands on the hyphen
    slug = slugify("a" * 49 + " bcdef")
    assert slug == "a" * 49


@pytest.mark.parametrize("text", ["", None, "!!!", "   ", "---", "★☆"])
def test_unusable_input_returns_empty(text):
    assert slugify(text) == ""


def test_custom_max_length():
    assert slugify("Silk Serum Deluxe", max_length=10) == "silk-serum"
