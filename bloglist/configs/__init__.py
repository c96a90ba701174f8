from bloglist.configs.settings import (
    MALFORMATTED_ID_MESSAGE,
    MAX_LIKES,
    MIN_PASSWORD_LENGTH,
    MIN_USERNAME_LENGTH,
    TOKEN_INVALID_MESSAGE,
    USER_NOT_AUTHORIZED_MESSAGE,
    Settings,
    settings,
)

__all__ = [
    "MALFORMATTED_ID_MESSAGE",
    "MAX_LIKES",
    "MIN_PASSWORD_LENGTH",
    "MIN_USERNAME_LENGTH",
    "TOKEN_INVALID_MESSAGE",
    "USER_NOT_AUTHORIZED_MESSAGE",
    "Settings",
    "settings",
]
