from dataclasses import dataclass

from escrow_ui.constants import APP_TITLE, DEFAULT_PDF_FILENAME


@dataclass(frozen=True)
class EscrowContext:
    app_title: str = APP_TITLE
    pdf_filename: str = DEFAULT_PDF_FILENAME
    conserve_days: bool = False
    reject_extra_months: bool = False
