import logging

from glamour_storefront.core.domain.catalog.product import ProductDraft
from glamour_storefront.core.domain.store_profile import StoreProfile

logger = logging.getLogger(__name__)


class SeoPromptBuilder:
    """Builds the (system_prompt, user_prompt) pairs sent to the text generation service."""

    def __init__(self, profile: StoreProfile):
        self.profile = profile

    def build_seo_prompt(self, product: ProductDraft) -> tuple[str, str]:
        system_prompt = (
            "You are an SEO expert. Always respond with valid JSON only, no markdown formatting."
        )
        sections = [
            self._seo_role_section(),
            self._product_section(product),
            self._seo_schema_section(),
            self._seo_rules_section(product),
            "Return ONLY valid JSON, no explanations.",
        ]
        logger.debug("SEO prompt generated for product '%s'", product.name)
        return system_prompt, "\n\n".join(sections)

    def build_description_prompt(
        self, name: str, product_type: str, category: str, brief: str | None = None
    ) -> tuple[str, str]:
        system_prompt = (
            "You are a professional copywriter. Write concise, engaging product descriptions."
        )
        p = self.profile
        details = [f"Product: {name}", f"Type: {product_type}", f"Category: {category}"]
        if brief:
            details.append(f"Additional Info: {brief}")
        user_prompt = (
            f'You are a copywriter for "{p.store_name}", a premium beauty store in {p.country}. '
            "Write a compelling product description for:\n\n"
            + "\n".join(details)
            + "\n\nRequirements:\n"
            "- 2-3 sentences (60-120 words)\n"
            "- Highlight key benefits and features\n"
            "- Use engaging, persuasive language\n"
            "- Mention quality and expected results\n"
            f"- Make it suitable for a {p.country} audience\n"
            "- Do NOT include the price\n"
            "- Do NOT use asterisks, bullet points, or markdown formatting\n"
            "- Write in a natural, flowing paragraph style\n\n"
            "Return ONLY the description text, nothing else."
        )
        return system_prompt, user_prompt

    def _seo_role_section(self) -> str:
        p = self.profile
        return (
            "You are an SEO expert for an e-commerce cosmetics and beauty store called "
            f'"{p.store_name}" in {p.country}. Generate SEO metadata for this product:'
        )

    def _product_section(self, product: ProductDraft) -> str:
        return "\n".join(
            [
                f"Product Name: {product.name}",
                f"Description: {product.description or ''}",
                f"Price: {self.profile.format_price(product.price)}",
                f"Category: {product.category.value}",
                f"Type: {product.type.value}",
                f"Collection: {product.collection}",
            ]
        )

    @staticmethod
    def _seo_schema_section() -> str:
        return (
            "Generate the following in JSON format ONLY (no markdown, no code blocks, just pure JSON):\n"
            "{\n"
            '  "metaTitle": "SEO-optimized title (50-60 characters, include brand and product type)",\n'
            '  "metaDescription": "Compelling meta description (150-160 characters, include price, '
            'key benefits, call-to-action)",\n'
            '  "metaKeywords": ["array", "of", "relevant", "SEO", "keywords", "10-15 keywords"],\n'
            '  "seoSlug": "url-friendly-slug-lowercase-with-hyphens"\n'
            "}"
        )

    def _seo_rules_section(self, product: ProductDraft) -> str:
        p = self.profile
        return (
            "Requirements:\n"
            f'- metaTitle: Include product name, type, and "{p.store_name}" or "Buy Online {p.country}"\n'
            f"- metaDescription: Mention key benefits, price ({p.format_price(product.price)}), "
            'and "Shop now" or "Buy online"\n'
            f'- metaKeywords: Include product name, type, category, beauty-related terms, "{p.country}", '
            '"online shopping"\n'
            "- seoSlug: Lowercase, hyphens for spaces, no special characters, max 50 chars"
        )
