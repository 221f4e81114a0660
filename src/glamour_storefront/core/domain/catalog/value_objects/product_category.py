from enum import StrEnum


class ProductCategory(StrEnum):
    WOMEN = "women"
    MEN = "men"
    KIDS = "kids"
