from glamour_storefront.infrastructure.common.retry.retry_policy import RetryPolicy, is_retryable

__all__ = ["RetryPolicy", "is_retryable"]
