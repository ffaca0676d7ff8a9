from bloglist.configs.settings import (
    CONFIG_MAP,
    DEFAULT_ERROR_MESSAGE,
    FORBIDDEN_DELETE_MESSAGE,
    LIKES_MAX,
    PASSWORD_MIN_LENGTH,
    SHORT_TEXT_MAX_LENGTH,
    URL_MAX_LENGTH,
    USERNAME_MIN_LENGTH,
    Argon2Config,
    Settings,
    settings,
)

__all__ = [
    "Argon2Config",
    "CONFIG_MAP",
    "DEFAULT_ERROR_MESSAGE",
    "FORBIDDEN_DELETE_MESSAGE",
    "LIKES_MAX",
    "PASSWORD_MIN_LENGTH",
    "SHORT_TEXT_MAX_LENGTH",
    "Settings",
    "URL_MAX_LENGTH",
    "USERNAME_MIN_LENGTH",
    "settings",
]
