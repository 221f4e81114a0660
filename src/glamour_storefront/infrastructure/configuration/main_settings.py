from glamour_storefront.infrastructure.configuration.app_settings import AppSettings
from glamour_storefront.infrastructure.configuration.llm_settings import LlmSettings
from glamour_storefront.infrastructure.configuration.store_settings import StoreSettings


class Settings(AppSettings, LlmSettings, StoreSettings):
    """
    Master configuration class that aggregates all setting modules.
    Usage:
        settings = Settings()
    """

    pass
