from allclear.auth.auth import (
    hash_password,
    verify_password,
    dummy_verify,
    get_settings,
    create_access_token,
    decode_access_token,
    get_current_user
)

__all__ = [
    "hash_password",
    "verify_password",
    "dummy_verify",
    "get_settings",
    "create_access_token",
    "decode_access_token",
    "get_current_user"
]
