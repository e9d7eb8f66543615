APP_TITLE = "Escrow Calendar Generator"
DEFAULT_PDF_FILENAME = "download.pdf"

DATE_FORMAT = "MM/DD/YYYY"

MODE_EDIT = "edit"
MODE_CALENDAR = "calendar"

LABEL_COLOR = "#1E3A8A"
MARKER_COLOR = "#F59E0B"
CELL_BORDER_COLOR = "#DC2626"

ENV_FALLBACK_KEYS = {
    ("app", "title"): "ESCROW_APP_TITLE",
    ("app", "pdf_filename"): "ESCROW_PDF_FILENAME",
    ("calendar", "conserve_days"): "ESCROW_CONSERVE_DAYS",
    ("calendar", "reject_extra_months"): "ESCROW_REJECT_EXTRA_MONTHS",
}

TRUTHY_VALUES = {"1", "true", "yes", "on"}
