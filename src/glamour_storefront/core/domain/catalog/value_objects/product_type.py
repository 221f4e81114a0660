from enum import StrEnum


class ProductType(StrEnum):
    MAKEUP = "makeup"
    SKINCARE = "skincare"
    FRAGRANCES = "fragrances"

    @property
    def label(self) -> str:
        """Human readable label used in SEO titles ("Makeup", "Skincare", "Fragrance")."""
        if self is ProductType.MAKEUP:
            return "Makeup"
        if self is ProductType.SKINCARE:
            return "Skincare"
        return "Fragrance"
