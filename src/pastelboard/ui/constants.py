"""Icons used by the board UI."""

ICON_ADD = "+"
ICON_PALETTE = "🎨"
ICON_SORT = "⇅"
ICON_MOVE_LEFT = "←"
ICON_MOVE_RIGHT = "→"
ICON_DELETE = "✕"
