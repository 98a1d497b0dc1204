MENU = 1
GAME = 2

CARD_WIDTH_PERCENT = 0.075
CARD_HEIGHT_PERCENT = 0.2
CARD_HEIGHT_MULTIPLIER = 1.5
SHOWING_HEIGHT_PERCENT = 0.2
CARD_FONT_PERCENT = 0.28
TOP_MARGIN = 60

DIFFICULTY_ORDER = (1, 2, 4)
DIFFICULTY_LABELS = {1: "1 Suit (Easy)", 2: "2 Suits (Medium)", 4: "4 Suits (Hard)"}
LOG_LEVEL_ORDER = ("DEBUG", "INFO", "WARNING", "ERROR")

THEME = {
    "felt": "#1b4332",
    "hud_text": "#f1f5f9",
    "hud_subtext": "#a7f3d0",
    "slot_outline": "#99f6e4",
    "card_front": "#f7e8bc",
    "card_back": "#334155",
    "card_border": "#0f172a",
    "card_select": "#fde047",
    "foundation_done": "#10b981",
    "message": "#fecaca",
    "status": "#fef9c3",
    "highlight": "#fbbf24",
}
