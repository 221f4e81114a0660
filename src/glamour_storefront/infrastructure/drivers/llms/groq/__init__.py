from glamour_storefront.infrastructure.drivers.llms.groq.groq_text_generation_adapter import (
    GroqTextGenerationAdapter,
)

__all__ = ["GroqTextGenerationAdapter"]
