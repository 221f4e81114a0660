from glamour_storefront.core.domain.store_profile import StoreProfile


def test_price_formatting():
    profile = StoreProfile()

    assert profile.format_price(2500) == "Rs. 2500"
    assert profile.format_price(2500.0) == "Rs. 2500"
    assert profile.format_price(99.5) == "Rs. 99.5"


def test_custom_currency():
    assert StoreProfile(currency_label="PKR").format_price(10) == "PKR 10"
