from glamour_storefront.core.application.seo.ai_description_writer import AiDescriptionWriter
from glamour_storefront.core.application.seo.seo_content_synthesizer import SeoContentSynthesizer
from glamour_storefront.core.application.seo.slugifier import slugify

__all__ = ["AiDescriptionWriter", "SeoContentSynthesizer", "slugify"]
