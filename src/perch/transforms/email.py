"""E-mail transformer — renders a raw message as a readable HTML page.

The header block (everything before the first blank line) becomes a
list of labeled rows; the rest of the message is shown verbatim in a
preformatted block.
"""

import html
import re

from perch.transforms.base import HTMLTransformer, RequestFile

_SUBJECT_RE = re.compile(r"^Subject:\s*(\S.*?)\s*$", re.IGNORECASE | re.MULTILINE)

_BODY_STYLE = "font-family: Arial; line-height: 1.2em; font-size: 90%; margin: 0; padding: 0"
_HEAD_STYLE = "background-color: #E9F2FA; padding: 1em"
_PRE_STYLE = "font-size: 110%; padding: 1em"


class EmailTransformer(HTMLTransformer):
    """Render ``.email`` files."""

    def transform(self, text: str, file: RequestFile) -> str:
        text = text.replace("\r\n", "\n")
        head, _, body = text.partition("\n\n")

        output = [
            f"<html><head><title>{html.escape(email_title(text))}</title></head>",
            f'<body style="{_BODY_STYLE}">',
            f'<div id="head" style="{_HEAD_STYLE}">',
        ]
        for line in head.splitlines():
            if not line.strip():
                continue
            key, _, value = line.partition(":")
            output.append(
                f"<div><strong>{html.escape(key.strip())}:</strong> "
                f"{html.escape(value.strip())}</div>"
            )
        output.append(f'</div><pre id="body" style="{_PRE_STYLE}">')
        output.append(html.escape(body, quote=False))
        output.append("</pre></body></html>")
        return "\n".join(output)


def email_title(text: str) -> str:
    """Page title: the subject (when present) followed by ``E-mail``."""
    match = _SUBJECT_RE.search(text)
    if match:
        return f"{match.group(1)} E-mail"
    return "E-mail"
