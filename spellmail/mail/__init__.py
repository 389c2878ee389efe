"""Mail package — inbound message reading and form-table extraction."""

from spellmail.mail.extractor import extract_rows, parse_html
from spellmail.mail.models import InboundMail, Row
from spellmail.mail.reader import parse_mail, read_input

__all__ = ["read_input", "parse_mail", "parse_html", "extract_rows", "InboundMail", "Row"]
