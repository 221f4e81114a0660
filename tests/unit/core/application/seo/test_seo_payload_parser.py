import json

import pytest

from glamour_storefront.core.application.seo.seo_payload_parser import (
    SeoPayloadError,
    SeoPayloadParser,
    strip_code_fences,
)


@pytest.fixture
def parser():
    return SeoPayloadParser()


def test_parses_fenced_json(parser, make_seo_json):
    raw = f"```json\n{make_seo_json()}\n```"

    bundle = parser.parse(raw, "Silk Serum")

    assert bundle.meta_title == "Silk Serum | Glow Skincare"
    assert bundle.meta_keywords == ("silk serum", "skincare", "glow")
    assert bundle.slug_candidate == "silk-serum-glow"
    assert bundle.generated_by_ai is True


def test_strip_code_fences_without_language():
    assert strip_code_fences('```\n{"a": 1}\n```') == '{"a": 1}'
    assert strip_code_fences('  {"a": 1} ') == '{"a": 1}'


def test_clips_fields_to_limits(parser):
    raw = json.dumps(
        {
            "metaTitle": "T" * 90,
            "metaDescription": "D" * 300,
            "metaKeywords": [f"keyword-{i}-" + "x" * 40 for i in range(25)],
            "seoSlug": "Very Long Slug " * 10,
        }
    )

    bundle = parser.parse(raw, "Anything")

    assert len(bundle.meta_title) == 60
    assert len(bundle.meta_description) == 160
    assert len(bundle.meta_keywords) == 15
    assert all(len(k) <= 30 for k in bundle.meta_keywords)
    assert len(bundle.slug_candidate) <= 50


def test_missing_slug_uses_product_name(parser, make_seo_json):
    bundle = parser.parse(make_seo_json(seoSlug=""), "Velvet Matte Lipstick")
    assert bundle.slug_candidate == "velvet-matte-lipstick"


def test_blank_keywords_are_dropped(parser, make_seo_json):
    bundle = parser.parse(make_seo_json(metaKeywords=["  ", "glow", ""]), "Glow")
    assert bundle.meta_keywords == ("glow",)


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "Sure! Here is your SEO content.",
        "[1, 2, 3]",
        json.dumps({"metaTitle": "Only title"}),
        json.dumps({"metaTitle": "   ", "metaDescription": "desc"}),
    ],
)
def test_rejects_unusable_payloads(parser, raw):
    with pytest.raises(SeoPayloadError):
        parser.parse(raw, "Silk Serum")
