"""Shared constants for pastelboard."""

STORAGE_KEY = "kanbanStateV1"

DEFAULT_CARD_TITLE = "New card"
PLACEHOLDER_TITLE = "Card"

SATURATION = 75
LIGHTNESS = 80

SHORT_ID_LENGTH = 8
