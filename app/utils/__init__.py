from app.utils.date_helpers import (
    utc_today,
    expiry_window,
    format_window_bound,
)
from app.utils.validators import (
    is_valid_push_token,
    clean_tokens,
)
from app.utils.retry import RetryPolicy, NO_RETRY
from app.utils.exceptions import (
    ExpiryQueryError,
    MembershipLookupError,
    PushNotConfiguredError,
    PushDeliveryError,
)

__all__ = [
    "utc_today",
    "expiry_window",
    "format_window_bound",
    "is_valid_push_token",
    "clean_tokens",
    "RetryPolicy",
    "NO_RETRY",
    "ExpiryQueryError",
    "MembershipLookupError",
    "PushNotConfiguredError",
    "PushDeliveryError",
]
