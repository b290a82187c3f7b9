APP_NAME = "Category Management"
APP_WIDTH = 900
APP_HEIGHT = 640

DEFAULT_API_BASE_URL = "http://localhost:8000/api"
API_URL_ENV_VAR = "CATEGORY_API_URL"
PROBE_TIMEOUT_SECONDS = 5
REQUEST_TIMEOUT_SECONDS = 15

TOAST_DURATION_MS = 4000
BULK_CLOSE_DELAY_MS = 1500

# Sample data used when the API cannot be reached
MOCK_CATEGORIES = [
    {"id": 1, "name": "Technology", "created_at": "2024-01-01", "updated_at": "2024-01-01"},
    {"id": 2, "name": "Business",   "created_at": "2024-01-02", "updated_at": "2024-01-02"},
    {"id": 3, "name": "Education",  "created_at": "2024-01-03", "updated_at": "2024-01-03"},
    {"id": 4, "name": "Health",     "created_at": "2024-01-04", "updated_at": "2024-01-04"},
]

SEVERITY_COLORS = {
    "error":   "#F44336",
    "warning": "#FF9800",
    "info":    "#2196F3",
    "success": "#4CAF50",
}

SEVERITY_ICONS = {
    "error":   "❗",
    "warning": "⚠",
    "info":    "ℹ",
    "success": "✔",
}

HIGHLIGHT_COLOR = ("#FFF59D", "#8D6E00")
