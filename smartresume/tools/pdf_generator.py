"""HTML-to-PDF engines.

Each call owns its engine for the duration of one render and releases it on
every exit path. Failures surface as RenderingError; no partial PDF is ever
returned.
"""
import logging

from smartresume.core.exceptions import RenderingError

logger = logging.getLogger(__name__)

PAGE_FORMAT = "A4"
PAGE_MARGIN = "20mm"


def create_pdf(html_content: str) -> bytes:
    """Renders self-contained HTML (styles inline, @page rules included) into PDF bytes using WeasyPrint."""
    try:
        # Imported per call so the API starts on hosts without the Pango libraries
        from weasyprint import HTML

        pdf_bytes = HTML(string=html_content, base_url=".").write_pdf()
    except Exception as e:
        logger.exception("WeasyPrint failed to render PDF")
        raise RenderingError("Failed to generate PDF") from e

    if not pdf_bytes:
        raise RenderingError("PDF engine returned an empty document")
    return pdf_bytes


def create_pdf_with_browser(html_content: str, timeout_seconds: float = 30.0) -> bytes:
    """Renders HTML into PDF bytes with headless Chromium driven by Playwright."""
    timeout_ms = int(timeout_seconds * 1000)
    try:
        from playwright.sync_api import sync_playwright

        with sync_playwright() as p:
            browser = p.chromium.launch(headless=True, args=["--no-sandbox", "--disable-setuid-sandbox"])
            try:
                page = browser.new_page()
                page.set_content(html_content, wait_until="networkidle", timeout=timeout_ms)
                pdf_bytes = page.pdf(
                    format=PAGE_FORMAT,
                    print_background=True,
                    margin={
                        "top": PAGE_MARGIN,
                        "right": PAGE_MARGIN,
                        "bottom": PAGE_MARGIN,
                        "left": PAGE_MARGIN,
                    },
                )
            finally:
                browser.close()
    except Exception as e:
        logger.exception("Headless browser failed to render PDF")
        raise RenderingError("Failed to generate PDF") from e

    if not pdf_bytes:
        raise RenderingError("PDF engine returned an empty document")
    return pdf_bytes
